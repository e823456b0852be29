"""Fluent construction of Request messages."""
from typing import Any, List, Optional, Tuple

from .models import MethodID, NamedParams, Params, PositionalParams, Request, RequestID


class RequestBuilder:
    """Collect a method, its arguments and an id, then build a Request.

    Arguments are either all positional or all named; mixing them raises
    ValueError. A builder with no arguments produces a Request without
    params.
    """

    def __init__(self, method: MethodID):
        self._method = method
        self._args: List[Any] = []
        self._kwargs: List[Tuple[str, Any]] = []
        self._req_id: Optional[RequestID] = None

    # Positional arguments
    def arg(self, value: Any) -> "RequestBuilder":
        if self._kwargs:
            raise ValueError("cannot add a positional argument to named arguments")
        self._args.append(value)
        return self

    def args(self, *values: Any) -> "RequestBuilder":
        for value in values:
            self.arg(value)
        return self

    # Named arguments
    def kwarg(self, name: str, value: Any) -> "RequestBuilder":
        if self._args:
            raise ValueError("cannot add a named argument to positional arguments")
        if any(existing == name for existing, _ in self._kwargs):
            raise ValueError(f"duplicate parameter name: {name}")
        self._kwargs.append((name, value))
        return self

    def kwargs(self, **values: Any) -> "RequestBuilder":
        for name, value in values.items():
            self.kwarg(name, value)
        return self

    def id(self, req_id: Optional[RequestID]) -> "RequestBuilder":
        self._req_id = req_id
        return self

    def build(self) -> Request:
        params: Optional[Params] = None
        if self._args:
            params = PositionalParams(values=list(self._args))
        elif self._kwargs:
            params = NamedParams(pairs=list(self._kwargs))

        return Request(method=self._method, params=params, req_id=self._req_id)
