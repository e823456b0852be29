"""Exception classes for protocol and transport failures."""
from typing import Optional


class CborRpcError(Exception):
    """Base exception for cbor-rpc errors."""

    pass


class ProtocolError(CborRpcError):
    """A value does not form a valid RPC message."""

    description = "protocol error"

    def __init__(self, description: Optional[str] = None):
        super().__init__(description or self.description)


class InvalidMethodID(ProtocolError):
    description = "invalid method id"


class InvalidRequestID(ProtocolError):
    description = "invalid request id"


class InvalidParamType(ProtocolError):
    description = "invalid type for params"


class InvalidKeyType(ProtocolError):
    description = "non-string key in params"


class InvalidMessage(ProtocolError):
    description = "not an RPC message"


class UnexpectedMessage(ProtocolError):
    description = "incorrect message type"


class TransportError(CborRpcError):
    """Base exception for failures while moving frames."""

    pass


class TransportIOError(TransportError):
    """The underlying channel failed; the original error is kept as `error`."""

    def __init__(self, error: Exception):
        self.error = error
        super().__init__(f"io error: {error}")


class TransportProtocolError(TransportError):
    """A frame was decoded but is not an acceptable message."""

    def __init__(self, error: ProtocolError):
        self.error = error
        super().__init__(f"protocol error: {error}")


class EncodeError(TransportError):
    """The value could not be encoded as CBOR."""

    def __init__(self, msg: str):
        self.msg = msg
        super().__init__(f"encode error: {msg}")


class DecodeError(TransportError):
    """The input is not valid CBOR, or not a v0 frame.

    `pos` is the byte offset of the failure when the decoder can tell,
    otherwise None.
    """

    def __init__(self, msg: str, pos: Optional[int] = None):
        self.msg = msg
        self.pos = pos
        where = f" at pos {pos}" if pos is not None else ""
        super().__init__(f"decode error{where}: {msg}")
