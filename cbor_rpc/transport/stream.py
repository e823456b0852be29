"""Transport over a synchronous byte stream."""
import logging
from typing import Any, BinaryIO, Optional

from ..codec import decode_value
from ..config import TransportConfig
from .base import FrameTransport

logger = logging.getLogger(__name__)


class StreamTransport(FrameTransport):
    """Read and write frames on a binary stream.

    The channel needs blocking `read(n)` that returns fewer than n bytes only
    at end of stream, and `write(data)`; `flush()` is called when present.
    `socket.makefile("rwb")`, pipes and files opened in binary mode qualify.
    """

    def __init__(self, channel: BinaryIO, config: Optional[TransportConfig] = None):
        super().__init__(config)
        self.channel = channel

    def _write(self, data: bytes) -> None:
        self.channel.write(data)
        flush = getattr(self.channel, "flush", None)
        if flush is not None:
            flush()

    def _read_value(self) -> Any:
        value = decode_value(self.channel, self.config)
        if self.config.log_frames:
            logger.debug(f"Read value from stream: {value!r}")
        return value
