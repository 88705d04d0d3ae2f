"""Arbitrary-radix integer codec.

API
---
decode(value, base)  -> int   (digits 0-9, a-z / A-Z; base 2..36)
encode(value, base)  -> str   (inverse, lower-case digits)
"""

from __future__ import annotations

from typing import Optional

from sharerecover.config import MAX_BASE, MAX_VALUE_BITS, MIN_BASE
from sharerecover.errors import (
    InvalidBaseError,
    InvalidDigitError,
    MalformedInputError,
    ValueOverflowError,
)

DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"

_DIGIT_VALUES = {ch: i for i, ch in enumerate(DIGITS)}
_DIGIT_VALUES.update({ch.upper(): i for ch, i in list(_DIGIT_VALUES.items()) if ch.isalpha()})


def digit_value(ch: str) -> Optional[int]:
    """Return the numeric value of an ASCII digit character, or None."""
    return _DIGIT_VALUES.get(ch)


def check_base(base: int) -> None:
    if not MIN_BASE <= base <= MAX_BASE:
        raise InvalidBaseError(f"base {base} outside [{MIN_BASE}, {MAX_BASE}]")


def decode(value: str, base: int, max_bits: Optional[int] = MAX_VALUE_BITS) -> int:
    """Decode *value* written in *base* into an exact integer.

    Every character must be a digit strictly below *base*.  The running
    total is checked after each step; once it needs more than *max_bits*
    bits a ``ValueOverflowError`` is raised (``None`` or 0 disables the
    limit).
    """
    check_base(base)
    if max_bits is not None and max_bits < 0:
        raise MalformedInputError(f"bit limit must be 0 or positive, got {max_bits}")
    if not value:
        raise InvalidDigitError(f"empty value for base {base}")

    result = 0
    for pos, ch in enumerate(value):
        d = digit_value(ch)
        if d is None or d >= base:
            raise InvalidDigitError(
                f"invalid digit {ch!r} at position {pos} of {value!r} for base {base}"
            )
        result = result * base + d
        if max_bits and result.bit_length() > max_bits:
            raise ValueOverflowError(
                f"{value!r} in base {base} exceeds {max_bits} bits"
            )
    return result


def encode(value: int, base: int) -> str:
    """Write a non-negative *value* in *base*."""
    check_base(base)
    if value < 0:
        raise ValueError("Cannot encode a negative value")
    if value == 0:
        return "0"
    out = []
    while value:
        value, d = divmod(value, base)
        out.append(DIGITS[d])
    return "".join(reversed(out))
