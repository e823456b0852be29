"""CBOR encoding and decoding of single values.

Wraps cbor2 and maps its failures onto the transport error types.
"""
import logging
from typing import Any, BinaryIO, Optional

import cbor2

from .config import DEFAULT_CONFIG, TransportConfig
from .utils.errors import DecodeError, EncodeError, TransportIOError

logger = logging.getLogger(__name__)


def encode_value(value: Any, config: Optional[TransportConfig] = None) -> bytes:
    """Encode one value as a complete CBOR data item."""
    config = config or DEFAULT_CONFIG
    try:
        return cbor2.dumps(
            value, canonical=config.canonical, value_sharing=config.value_sharing
        )
    except cbor2.CBOREncodeError as e:
        raise EncodeError(str(e)) from e
    except RecursionError as e:
        raise EncodeError("recursion limit exceeded") from e


def decode_value(fp: BinaryIO, config: Optional[TransportConfig] = None) -> Any:
    """Decode exactly one CBOR data item from the head of `fp`.

    Failure positions are reported relative to where decoding started, and
    only when `fp` supports tell().
    """
    config = config or DEFAULT_CONFIG
    start = _tell(fp)
    try:
        decoder = cbor2.CBORDecoder(fp, str_errors=config.str_errors)
        return decoder.decode()
    except cbor2.CBORDecodeEOF as e:
        # Not every cbor2 release derives CBORDecodeEOF from EOFError
        error = e if isinstance(e, EOFError) else EOFError(str(e))
        raise TransportIOError(error) from e
    except cbor2.CBORDecodeError as e:
        raise DecodeError(str(e), _offset(fp, start)) from e
    except RecursionError as e:
        raise DecodeError("recursion limit exceeded") from e
    except OSError as e:
        raise TransportIOError(e) from e
    except ValueError as e:
        if getattr(fp, "closed", False):
            raise TransportIOError(e) from e
        raise DecodeError(str(e), _offset(fp, start)) from e


def _tell(fp: BinaryIO) -> Optional[int]:
    try:
        return fp.tell()
    except (AttributeError, OSError, ValueError):
        # Sockets and pipes cannot report a position
        return None


def _offset(fp: BinaryIO, start: Optional[int]) -> Optional[int]:
    if start is None:
        return None
    end = _tell(fp)
    if end is None:
        return None
    return end - start
