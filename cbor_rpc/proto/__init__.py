"""RPC message model and v0 wire protocol."""
from .builder import RequestBuilder
from .models import (
    ErrorCode,
    ErrorValue,
    Failure,
    MethodID,
    NamedParams,
    Params,
    PositionalParams,
    Request,
    RequestID,
    Response,
    Success,
)
from .v0 import RPCV0, RPCMessage

__all__ = [
    "ErrorCode",
    "ErrorValue",
    "Failure",
    "MethodID",
    "NamedParams",
    "Params",
    "PositionalParams",
    "Request",
    "RequestBuilder",
    "RequestID",
    "Response",
    "RPCMessage",
    "RPCV0",
    "Success",
]
