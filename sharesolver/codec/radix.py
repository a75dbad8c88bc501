"""Radix codec for share values.

decode(value, base) -> int   digit string in base 2..36 to a non-negative int
encode(value, base) -> str   canonical shortest lower-case representation

Digits are ``0-9`` then ``a-z`` (upper case accepted on decode).
"""

from __future__ import annotations

from typing import List

from sharesolver.arith import integer
from sharesolver.config import DIGITS, MAX_BASE, MIN_BASE
from sharesolver.errors import DecodeError

_DIGIT_VALUES = {ch: i for i, ch in enumerate(DIGITS)}
_DIGIT_VALUES.update({ch.upper(): i for ch, i in list(_DIGIT_VALUES.items()) if ch.isalpha()})

# Digits folded into one machine-sized chunk before touching the big accumulator.
_CHUNK = 16


def check_base(base: int) -> None:
    if isinstance(base, bool) or not isinstance(base, int):
        raise DecodeError(f"base {base!r} is not an integer", kind="bad-base")
    if not MIN_BASE <= base <= MAX_BASE:
        shown = integer.to_decimal(base)
        if len(shown) > 40:
            shown = f"{shown[:20]}...({len(shown)} digits)"
        raise DecodeError(f"base {shown} outside [{MIN_BASE}, {MAX_BASE}]", kind="bad-base")


def digit_value(ch: str) -> int:
    """Numeric value of one alphabet character."""
    try:
        return _DIGIT_VALUES[ch]
    except KeyError:
        raise DecodeError(f"character {ch!r} is not a base-36 digit", kind="bad-digit") from None


def decode(value: str, base: int) -> int:
    """Decode *value* written in *base* to an exact non-negative integer."""
    check_base(base)
    if not value:
        raise DecodeError("value is empty", kind="empty-value")

    digits: List[int] = []
    for pos, ch in enumerate(value):
        d = digit_value(ch)
        if d >= base:
            raise DecodeError(
                f"digit {ch!r} (={d}) at position {pos} is invalid in base {base}",
                kind="digit-out-of-range",
            )
        digits.append(d)

    # Horner over chunks: result = result * base^len(chunk) + chunk_value
    result = 0
    for start in range(0, len(digits), _CHUNK):
        chunk = digits[start:start + _CHUNK]
        chunk_value = 0
        for d in chunk:
            chunk_value = chunk_value * base + d
        result = result * base ** len(chunk) + chunk_value
    return result


def encode(value: int, base: int) -> str:
    """Canonical base-*base* representation of a non-negative *value*."""
    check_base(base)
    if value < 0:
        raise ValueError("cannot encode a negative value")
    if value == 0:
        return "0"
    out: List[str] = []
    while value:
        value, d = divmod(value, base)
        out.append(DIGITS[d])
    return "".join(reversed(out))
