"""Stateless, transport-agnostic RPC messages encoded as CBOR."""
from .config import TransportConfig, load_config
from .proto import (
    RPCV0,
    ErrorCode,
    ErrorValue,
    NamedParams,
    PositionalParams,
    Request,
    RequestBuilder,
    Response,
    RPCMessage,
)
from .transport import (
    BufferTransport,
    ClientTransport,
    ServerTransport,
    StreamTransport,
    ValueTransport,
)
from .utils.errors import (
    CborRpcError,
    DecodeError,
    EncodeError,
    InvalidKeyType,
    InvalidMessage,
    InvalidMethodID,
    InvalidParamType,
    InvalidRequestID,
    ProtocolError,
    TransportError,
    TransportIOError,
    TransportProtocolError,
    UnexpectedMessage,
)

__version__ = "0.1.0"

__all__ = [
    "BufferTransport",
    "CborRpcError",
    "ClientTransport",
    "DecodeError",
    "EncodeError",
    "ErrorCode",
    "ErrorValue",
    "InvalidKeyType",
    "InvalidMessage",
    "InvalidMethodID",
    "InvalidParamType",
    "InvalidRequestID",
    "NamedParams",
    "PositionalParams",
    "ProtocolError",
    "Request",
    "RequestBuilder",
    "Response",
    "RPCMessage",
    "RPCV0",
    "ServerTransport",
    "StreamTransport",
    "TransportConfig",
    "TransportError",
    "TransportIOError",
    "TransportProtocolError",
    "UnexpectedMessage",
    "ValueTransport",
    "load_config",
]
