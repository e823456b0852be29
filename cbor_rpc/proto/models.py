"""RPC request/response models.

Values embedded in params, results and error data are plain cbor2 values:
None, bool, int, float, str, bytes, list, dict, cbor2.CBORTag and the
semantic types cbor2 decodes tags into.
"""
from typing import Annotated, Any, Dict, List, Literal, Optional, Tuple, Union

from pydantic import (
    AfterValidator,
    BaseModel,
    ConfigDict,
    Field,
    StrictBytes,
    StrictInt,
    StrictStr,
    field_validator,
)

from ..utils.validation import validate_i64, validate_u64


def _check_u64(value: int) -> int:
    if not validate_u64(value):
        raise ValueError("integer out of range for an unsigned 64-bit id")
    return value


def _check_i64(value: int) -> int:
    if not validate_i64(value):
        raise ValueError("integer out of range for a signed 64-bit code")
    return value


U64 = Annotated[StrictInt, AfterValidator(_check_u64)]
I64 = Annotated[StrictInt, AfterValidator(_check_i64)]

# Methods are referred to by name or by a numeric index.
MethodID = Union[U64, StrictStr]

# Correlates a Response with the Request that caused it.
RequestID = Union[U64, StrictStr, StrictBytes]


class PositionalParams(BaseModel):
    """Arguments passed as an ordered list of values."""

    model_config = ConfigDict(frozen=True)

    values: List[Any] = Field(default_factory=list)

    def is_empty(self) -> bool:
        return not self.values

    def or_none(self) -> Optional["PositionalParams"]:
        """Return None for an empty argument list, otherwise self."""
        return None if self.is_empty() else self


class NamedParams(BaseModel):
    """Arguments passed as (name, value) pairs, kept in wire order.

    Names must be unique, since the pairs travel as a CBOR map.
    """

    model_config = ConfigDict(frozen=True)

    pairs: List[Tuple[StrictStr, Any]] = Field(default_factory=list)

    @field_validator("pairs", mode="before")
    @classmethod
    def _pairs_from_mapping(cls, value: Any) -> Any:
        if isinstance(value, dict):
            return list(value.items())
        return value

    @field_validator("pairs")
    @classmethod
    def _unique_names(cls, pairs: List[Tuple[str, Any]]) -> List[Tuple[str, Any]]:
        seen = set()
        for name, _ in pairs:
            if name in seen:
                raise ValueError(f"duplicate parameter name: {name}")
            seen.add(name)
        return pairs

    def is_empty(self) -> bool:
        return not self.pairs

    def or_none(self) -> Optional["NamedParams"]:
        """Return None for an empty argument list, otherwise self."""
        return None if self.is_empty() else self

    def as_dict(self) -> Dict[str, Any]:
        return dict(self.pairs)


Params = Union[PositionalParams, NamedParams]


class ErrorCode:
    """Standard error codes, shared with JSON-RPC 2.0."""

    PARSE_ERROR = -32700
    INVALID_REQUEST = -32600
    METHOD_NOT_FOUND = -32601
    INVALID_PARAMS = -32602
    INTERNAL_ERROR = -32603

    # Implementation-defined server errors
    SERVER_ERROR_MIN = -32099
    SERVER_ERROR_MAX = -32000

    MESSAGES = {
        PARSE_ERROR: "Parse error",
        INVALID_REQUEST: "Invalid request",
        METHOD_NOT_FOUND: "Method not found",
        INVALID_PARAMS: "Invalid params",
        INTERNAL_ERROR: "Internal error",
    }


class ErrorValue(BaseModel):
    """Error returned by a server when a Request does not complete.

    A `data` of None is not put on the wire.
    """

    model_config = ConfigDict(frozen=True)

    code: I64
    message: StrictStr
    data: Optional[Any] = None

    @classmethod
    def from_code(
        cls, code: int, message: Optional[str] = None, data: Any = None
    ) -> "ErrorValue":
        """Build an ErrorValue, defaulting the message for standard codes."""
        if message is None:
            message = ErrorCode.MESSAGES.get(code, "Server error")
        return cls(code=code, message=message, data=data)


class Success(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["ok"] = "ok"
    value: Any = None


class Failure(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["err"] = "err"
    error: ErrorValue


Result = Annotated[Union[Success, Failure], Field(discriminator="kind")]


class Request(BaseModel):
    """A call of `method` with optional `params`.

    A Request without `req_id` expects no Response. Plain lists, tuples and
    dicts given as `params` become PositionalParams or NamedParams.
    """

    model_config = ConfigDict(frozen=True)

    method: MethodID
    params: Optional[Params] = None
    req_id: Optional[RequestID] = None

    @field_validator("params", mode="before")
    @classmethod
    def _coerce_params(cls, value: Any) -> Any:
        if isinstance(value, (list, tuple)):
            return PositionalParams(values=list(value))
        if isinstance(value, dict):
            return NamedParams(pairs=list(value.items()))
        return value

    @property
    def is_notification(self) -> bool:
        return self.req_id is None

    def collapsed(self) -> "Request":
        """Return this Request with empty params replaced by None."""
        if self.params is None or not self.params.is_empty():
            return self
        return self.model_copy(update={"params": None})


class Response(BaseModel):
    """Outcome of a Request: a success value or an ErrorValue, never both."""

    model_config = ConfigDict(frozen=True)

    result: Result
    req_id: RequestID

    @classmethod
    def ok(cls, value: Any, req_id: Any) -> "Response":
        return cls(result=Success(value=value), req_id=req_id)

    @classmethod
    def err(cls, error: ErrorValue, req_id: Any) -> "Response":
        return cls(result=Failure(error=error), req_id=req_id)

    @property
    def is_ok(self) -> bool:
        return isinstance(self.result, Success)

    @property
    def value(self) -> Any:
        """The success value; raises ValueError for an error response."""
        if isinstance(self.result, Failure):
            raise ValueError(f"response is an error: {self.result.error.message}")
        return self.result.value

    @property
    def error(self) -> Optional[ErrorValue]:
        if isinstance(self.result, Failure):
            return self.result.error
        return None
