"""Transport over an in-memory byte buffer."""
import io
import logging
from typing import Any, Optional

from ..codec import decode_value
from ..config import TransportConfig
from .base import FrameTransport

logger = logging.getLogger(__name__)


class BufferTransport(FrameTransport):
    """Use a growable buffer as a FIFO of frames.

    Writes append one frame to the end; reads decode one frame from the
    front and remove exactly its bytes. A read that fails to decode leaves
    the buffer untouched. Useful for tests and for datagram or message-queue
    transports where frame boundaries are kept by the carrier.
    """

    def __init__(
        self, buffer: Optional[bytearray] = None, config: Optional[TransportConfig] = None
    ):
        super().__init__(config)
        self.buffer = bytearray() if buffer is None else buffer

    def _write(self, data: bytes) -> None:
        self.buffer.extend(data)

    def _read_value(self) -> Any:
        fp = io.BytesIO(self.buffer)
        value = decode_value(fp, self.config)
        consumed = fp.tell()
        del self.buffer[:consumed]
        if self.config.log_frames:
            logger.debug(f"Consumed {consumed} bytes, {len(self.buffer)} left")
        return value
