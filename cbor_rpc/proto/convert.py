"""Conversions between the typed message model and plain CBOR values.

Inbound conversions validate untyped input and raise a ProtocolError
subclass; outbound conversions never fail.
"""
from collections.abc import Mapping
from typing import Any, Dict, List, Optional, Tuple, Union

from cbor2 import CBORTag

from ..utils.errors import (
    InvalidKeyType,
    InvalidMessage,
    InvalidMethodID,
    InvalidParamType,
    InvalidRequestID,
)
from ..utils.validation import is_integer, validate_i64, validate_u64
from .models import ErrorValue, MethodID, NamedParams, Params, PositionalParams, RequestID

ERROR_KEYS = frozenset(("code", "message", "data"))


def thaw_value(value: Any, _memo: Optional[Dict[int, Any]] = None) -> Any:
    """Return `value` with arrays as lists and maps as dicts.

    Decoders may hand back tag contents as tuples and frozen mappings. Map
    keys are left alone; shared and cyclic references stay shared.
    """
    if _memo is None:
        _memo = {}
    if isinstance(value, (list, tuple, Mapping)):
        if id(value) in _memo:
            return _memo[id(value)]
        if isinstance(value, Mapping):
            result: Any = {}
            _memo[id(value)] = result
            for key, item in value.items():
                result[key] = thaw_value(item, _memo)
        else:
            result = []
            _memo[id(value)] = result
            result.extend(thaw_value(item, _memo) for item in value)
        return result
    if isinstance(value, CBORTag):
        return CBORTag(value.tag, thaw_value(value.value, _memo))
    return value


def params_from_value(value: Any) -> Params:
    """Convert an array to PositionalParams or a text-keyed map to NamedParams."""
    if isinstance(value, (list, tuple)):
        return PositionalParams(values=list(value))
    if isinstance(value, Mapping):
        pairs: List[Tuple[str, Any]] = []
        for key, item in value.items():
            if not isinstance(key, str):
                raise InvalidKeyType()
            pairs.append((key, item))
        return NamedParams(pairs=pairs)
    raise InvalidParamType()


def request_id_from_value(value: Any) -> RequestID:
    if is_integer(value):
        if not validate_u64(value):
            raise InvalidRequestID()
        return value
    if isinstance(value, (str, bytes)):
        return value
    raise InvalidRequestID()


def method_id_from_value(value: Any) -> MethodID:
    if is_integer(value):
        if not validate_u64(value):
            raise InvalidMethodID()
        return value
    if isinstance(value, str):
        return value
    raise InvalidMethodID()


def error_value_from_value(value: Any) -> ErrorValue:
    """Convert a `{code, message, data?}` map to an ErrorValue."""
    if not isinstance(value, Mapping) or not set(value) <= ERROR_KEYS:
        raise InvalidMessage()
    code = value.get("code")
    message = value.get("message")
    if not validate_i64(code) or not isinstance(message, str):
        raise InvalidMessage()
    return ErrorValue(code=code, message=message, data=value.get("data"))


def params_to_value(params: Params) -> Union[List[Any], Dict[str, Any]]:
    if isinstance(params, PositionalParams):
        return list(params.values)
    return {key: item for key, item in params.pairs}


def request_id_to_value(req_id: RequestID) -> Union[int, str, bytes]:
    return req_id


def method_id_to_value(method: MethodID) -> Union[int, str]:
    return method


def error_value_to_value(error: ErrorValue) -> Dict[str, Any]:
    value: Dict[str, Any] = {"code": error.code, "message": error.message}
    if error.data is not None:
        value["data"] = error.data
    return value
