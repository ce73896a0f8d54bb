"""Fixed-width integer ranges and checked conversions."""

from __future__ import annotations

from checked_calculator.errors import ArithmeticOverflowError

I64_MIN = -(2**63)
I64_MAX = 2**63 - 1
U64_MAX = 2**64 - 1


def fits_i64(value: int) -> bool:
    """Return whether ``value`` is a representable signed 64-bit integer."""
    return I64_MIN <= value <= I64_MAX


def fits_u64(value: int) -> bool:
    """Return whether ``value`` is a representable unsigned 64-bit integer."""
    return 0 <= value <= U64_MAX


def checked_i64(value: int) -> int:
    """Return ``value`` unchanged, or raise if it does not fit in an i64."""
    if not fits_i64(value):
        message = f"{value} is outside the signed 64-bit range [{I64_MIN}, {I64_MAX}]"
        raise ArithmeticOverflowError(message)
    return value


def checked_u64(value: int) -> int:
    """Return ``value`` unchanged, or raise if it does not fit in a u64."""
    if not fits_u64(value):
        message = f"{value} is outside the unsigned 64-bit range [0, {U64_MAX}]"
        raise ArithmeticOverflowError(message)
    return value


__all__ = [
    "I64_MAX",
    "I64_MIN",
    "U64_MAX",
    "checked_i64",
    "checked_u64",
    "fits_i64",
    "fits_u64",
]
