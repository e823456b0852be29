"""Transport interfaces.

Three capabilities any channel wrapper may offer:

    ValueTransport   raw CBOR values, no v0 tag
    ClientTransport  send_request / read_response
    ServerTransport  read_request / send_response

Every call moves exactly one complete frame and raises only
TransportError subclasses.
"""
import logging
from abc import ABC, abstractmethod
from typing import Any, Optional

from ..codec import encode_value
from ..config import DEFAULT_CONFIG, TransportConfig
from ..proto.models import Request, Response
from ..proto.v0 import RPCMessage
from ..utils.errors import ProtocolError, TransportIOError, TransportProtocolError

logger = logging.getLogger(__name__)


class ValueTransport(ABC):
    """Send and receive arbitrary CBOR values."""

    @abstractmethod
    def send_value(self, value: Any) -> None:
        """Encode and write one value."""

    @abstractmethod
    def read_value(self) -> Any:
        """Read and decode one value."""


class ClientTransport(ABC):
    """The client side of a connection: requests out, responses in."""

    @abstractmethod
    def send_request(self, request: Request) -> None:
        """Write one request frame."""

    @abstractmethod
    def read_response(self) -> Response:
        """Read one frame, which must be a response."""


class ServerTransport(ABC):
    """The server side of a connection: requests in, responses out."""

    @abstractmethod
    def read_request(self) -> Request:
        """Read one frame, which must be a request."""

    @abstractmethod
    def send_response(self, response: Response) -> None:
        """Write one response frame."""


class FrameTransport(ValueTransport, ClientTransport, ServerTransport):
    """All three capabilities on top of a channel that moves encoded frames.

    Subclasses provide `_write` for one encoded frame and `_read_value` for
    decoding one value from the head of the channel.
    """

    def __init__(self, config: Optional[TransportConfig] = None):
        self.config = config or DEFAULT_CONFIG

    @abstractmethod
    def _write(self, data: bytes) -> None:
        pass

    @abstractmethod
    def _read_value(self) -> Any:
        pass

    def send_value(self, value: Any) -> None:
        self._write_frame(encode_value(value, self.config), "value")

    def read_value(self) -> Any:
        return self._read_value()

    def send_request(self, request: Request) -> None:
        self._send_message(RPCMessage(message=request), "request")

    def read_response(self) -> Response:
        message = self._read_message()
        try:
            return message.into_response()
        except ProtocolError as e:
            logger.warning("Expected a response frame, got a request")
            raise TransportProtocolError(e) from e

    def read_request(self) -> Request:
        message = self._read_message()
        try:
            return message.into_request()
        except ProtocolError as e:
            logger.warning("Expected a request frame, got a response")
            raise TransportProtocolError(e) from e

    def send_response(self, response: Response) -> None:
        self._send_message(RPCMessage(message=response), "response")

    def _send_message(self, message: RPCMessage, kind: str) -> None:
        self._write_frame(encode_value(message.to_value(), self.config), kind)

    def _read_message(self) -> RPCMessage:
        value = self._read_value()
        try:
            message = RPCMessage.from_value(value)
        except ProtocolError as e:
            logger.warning(f"Rejected frame: {e}")
            raise TransportProtocolError(e) from e

        kind = "request" if message.is_request else "response"
        logger.debug(f"Read {kind} frame")
        return message

    def _write_frame(self, data: bytes, kind: str) -> None:
        try:
            self._write(data)
        except (OSError, ValueError) as e:
            # ValueError is what a closed file object raises
            logger.warning(f"Failed to write {kind} frame: {e}")
            raise TransportIOError(e) from e

        logger.debug(f"Sent {kind} frame ({len(data)} bytes)")
        if self.config.log_frames:
            logger.debug(f"Frame: {data.hex()}")
