"""Frame transports for stream and buffer channels."""
from .base import ClientTransport, FrameTransport, ServerTransport, ValueTransport
from .buffer import BufferTransport
from .stream import StreamTransport

__all__ = [
    "BufferTransport",
    "ClientTransport",
    "FrameTransport",
    "ServerTransport",
    "StreamTransport",
    "ValueTransport",
]
