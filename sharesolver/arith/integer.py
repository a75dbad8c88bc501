"""Arbitrary-precision integer helpers.

Values are plain Python ints, which are already unbounded.  This module
adds the operations whose Python spelling differs from the usual
mathematical contract: truncating division, exact division and strict
decimal parsing.
"""

from __future__ import annotations

import math


def is_decimal(text: str) -> bool:
    """True for a non-empty string of ASCII digits."""
    return bool(text) and text.isascii() and text.isdigit()


def from_decimal(text: str) -> int:
    """Parse an optionally signed string of ASCII decimal digits."""
    digits = text[1:] if text[:1] in ("+", "-") else text
    if not is_decimal(digits):
        raise ValueError(f"not a decimal integer: {text[:40]!r}")
    # int() refuses very long strings on 3.11+, so fold 18 digits at a time.
    value = 0
    for start in range(0, len(digits), 18):
        chunk = digits[start:start + 18]
        value = value * 10 ** len(chunk) + int(chunk)
    return -value if text.startswith("-") else value


def to_decimal(a: int) -> str:
    """Decimal string of *a* (no digit-count limit)."""
    if a == 0:
        return "0"
    sign = "-" if a < 0 else ""
    a = abs(a)
    # str() refuses very long ints on 3.11+, so emit in fixed-size chunks.
    chunk = 10**18
    parts = []
    while a:
        a, r = divmod(a, chunk)
        parts.append(r)
    head = str(parts[-1])
    tail = "".join(f"{p:018d}" for p in reversed(parts[:-1]))
    return sign + head + tail


def add(a: int, b: int) -> int:
    return a + b


def sub(a: int, b: int) -> int:
    return a - b


def mul(a: int, b: int) -> int:
    return a * b


def neg(a: int) -> int:
    return -a


def compare(a: int, b: int) -> int:
    """Return -1, 0 or 1."""
    return (a > b) - (a < b)


def trunc_div(a: int, b: int) -> int:
    """Quotient rounded toward zero (Python's ``//`` floors)."""
    if b == 0:
        raise ZeroDivisionError("integer division by zero")
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def exact_div(a: int, b: int) -> int:
    """Divide *a* by *b*, which must divide it exactly."""
    if b == 0:
        raise ZeroDivisionError("integer division by zero")
    q, r = divmod(a, b)
    if r:
        raise ValueError(f"{b} does not divide {a} exactly")
    return q


def gcd(a: int, b: int) -> int:
    """Non-negative greatest common divisor; gcd(0, 0) == 0."""
    return math.gcd(a, b)
