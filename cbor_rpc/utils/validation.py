"""Input validation utilities."""
from typing import Any

U64_MAX = 2**64 - 1
I64_MIN = -(2**63)
I64_MAX = 2**63 - 1


def is_integer(value: Any) -> bool:
    """Check for a CBOR integer; bool is a separate CBOR type."""
    return isinstance(value, int) and not isinstance(value, bool)


def validate_u64(value: Any) -> bool:
    """Validate an integer that fits an unsigned 64-bit field."""
    return is_integer(value) and 0 <= value <= U64_MAX


def validate_i64(value: Any) -> bool:
    """Validate an integer that fits a signed 64-bit field."""
    return is_integer(value) and I64_MIN <= value <= I64_MAX
