"""Exact rational numbers in lowest terms.

A ``Rational`` is immutable.  Every constructor path normalises so that
the denominator is positive, ``gcd(|num|, den) == 1`` and zero is ``0/1``.
"""

from __future__ import annotations

from typing import Union

from sharesolver.arith import integer

Operand = Union["Rational", int]


class Rational:
    """Immutable exact fraction ``num / den``."""

    __slots__ = ("_num", "_den")

    def __init__(self, num: int, den: int = 1) -> None:
        if isinstance(num, bool) or isinstance(den, bool) or not (
            isinstance(num, int) and isinstance(den, int)
        ):
            raise TypeError("Rational takes integer numerator and denominator")
        if den == 0:
            raise ZeroDivisionError("Rational with zero denominator")
        if den < 0:
            num, den = -num, -den
        g = integer.gcd(num, den)
        object.__setattr__(self, "_num", integer.exact_div(num, g))
        object.__setattr__(self, "_den", integer.exact_div(den, g))

    def __setattr__(self, name, value):
        raise AttributeError("Rational is immutable")

    # ---- accessors ----

    @property
    def numerator(self) -> int:
        return self._num

    @property
    def denominator(self) -> int:
        return self._den

    @classmethod
    def from_int(cls, value: int) -> "Rational":
        return cls(value, 1)

    def is_integer(self) -> bool:
        return self._den == 1

    def to_int(self) -> int:
        """Return the integer value; the rational must be integral."""
        if not self.is_integer():
            raise ValueError(f"{self} is not an integer")
        return self._num

    def truncate(self) -> int:
        """Integer part, rounded toward zero."""
        return integer.trunc_div(self._num, self._den)

    __int__ = truncate
    __trunc__ = truncate

    def reciprocal(self) -> "Rational":
        if self._num == 0:
            raise ZeroDivisionError("reciprocal of zero")
        return Rational(self._den, self._num)

    # ---- arithmetic ----

    def __add__(self, other: Operand) -> "Rational":
        o = _coerce(other)
        if o is None:
            return NotImplemented
        return Rational(self._num * o._den + o._num * self._den, self._den * o._den)

    __radd__ = __add__

    def __sub__(self, other: Operand) -> "Rational":
        o = _coerce(other)
        if o is None:
            return NotImplemented
        return Rational(self._num * o._den - o._num * self._den, self._den * o._den)

    def __rsub__(self, other: Operand) -> "Rational":
        o = _coerce(other)
        if o is None:
            return NotImplemented
        return o - self

    def __mul__(self, other: Operand) -> "Rational":
        o = _coerce(other)
        if o is None:
            return NotImplemented
        return Rational(self._num * o._num, self._den * o._den)

    __rmul__ = __mul__

    def __truediv__(self, other: Operand) -> "Rational":
        o = _coerce(other)
        if o is None:
            return NotImplemented
        return self * o.reciprocal()

    def __rtruediv__(self, other: Operand) -> "Rational":
        o = _coerce(other)
        if o is None:
            return NotImplemented
        return o * self.reciprocal()

    def __neg__(self) -> "Rational":
        return Rational(-self._num, self._den)

    # ---- comparison ----

    def _cmp(self, other: "Rational") -> int:
        return integer.compare(self._num * other._den, other._num * self._den)

    def __eq__(self, other: object) -> bool:
        o = _coerce(other)
        if o is None:
            return NotImplemented
        return self._num == o._num and self._den == o._den

    def __lt__(self, other: Operand) -> bool:
        o = _coerce(other)
        if o is None:
            return NotImplemented
        return self._cmp(o) < 0

    def __le__(self, other: Operand) -> bool:
        o = _coerce(other)
        if o is None:
            return NotImplemented
        return self._cmp(o) <= 0

    def __gt__(self, other: Operand) -> bool:
        o = _coerce(other)
        if o is None:
            return NotImplemented
        return self._cmp(o) > 0

    def __ge__(self, other: Operand) -> bool:
        o = _coerce(other)
        if o is None:
            return NotImplemented
        return self._cmp(o) >= 0

    def __hash__(self) -> int:
        if self._den == 1:
            return hash(self._num)
        return hash((self._num, self._den))

    # ---- formatting ----

    def __str__(self) -> str:
        if self._den == 1:
            return integer.to_decimal(self._num)
        return f"{integer.to_decimal(self._num)}/{integer.to_decimal(self._den)}"

    def __repr__(self) -> str:
        return f"Rational({integer.to_decimal(self._num)}, {integer.to_decimal(self._den)})"


ZERO = Rational(0)
ONE = Rational(1)


def _coerce(value: object) -> Rational | None:
    if isinstance(value, Rational):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return Rational(value)
    return None
