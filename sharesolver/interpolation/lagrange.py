"""Exact Lagrange interpolation over the rationals.

API
---
basis_at(xs, i, x)           -> Rational   L_i(x) for the nodes *xs*
interpolate_at(points, x)    -> Rational   P(x) through all *points*
evaluate(shares, k)          -> int        P(0) through the first k shares

No floating point is involved: every basis coefficient and the running
sum are ``Rational`` values, so arbitrarily large y-values are exact.
"""

from __future__ import annotations

from typing import List, Sequence, Tuple

from sharesolver.arith import integer
from sharesolver.arith.rational import ZERO, Rational
from sharesolver.errors import InterpolationError, NonIntegerSecretError
from sharesolver.shares.share_set import Share

Point = Tuple[int, int]


def _check_distinct(xs: Sequence[int]) -> None:
    seen = set()
    for x in xs:
        if x in seen:
            raise InterpolationError(
                f"x = {integer.to_decimal(x)} appears more than once", kind="duplicate-x"
            )
        seen.add(x)


def basis_at(xs: Sequence[int], i: int, x: int) -> Rational:
    """Lagrange basis polynomial L_i evaluated at *x*.

    L_i(x) = prod_{j != i} (x - x_j) / (x_i - x_j)
    """
    xi = xs[i]
    num = 1
    den = 1
    for j, xj in enumerate(xs):
        if j == i:
            continue
        num *= x - xj     # (x - x_j)
        den *= xi - xj    # (x_i - x_j)
    return Rational(num, den)


def interpolate_at(points: Sequence[Point], x: int) -> Rational:
    """Evaluate the polynomial through *points* at *x*, exactly."""
    if not points:
        raise InterpolationError("Need at least one point")
    xs = [p[0] for p in points]
    _check_distinct(xs)
    total = ZERO
    for i, (_, yi) in enumerate(points):
        total = total + basis_at(xs, i, x) * yi
    return total


def evaluate(shares: Sequence[Share], k: int) -> int:
    """Recover P(0) from the first *k* shares of an ascending sequence."""
    if k < 1:
        raise InterpolationError(
            f"k must be positive, got {integer.to_decimal(k)}", kind="invalid-k"
        )
    if k > len(shares):
        raise InterpolationError(
            f"need {integer.to_decimal(k)} shares, only {len(shares)} available",
            kind="insufficient-shares",
        )
    chosen: List[Point] = [s.as_point() for s in shares[:k]]
    value = interpolate_at(chosen, 0)
    if not value.is_integer():
        raise NonIntegerSecretError(value)
    return value.to_int()


def check_consistency(shares: Sequence[Share], k: int) -> List[int]:
    """Return the x of every share past the first *k* that misses the curve.

    The curve is the one fixed by the first *k* shares.  Nothing is
    corrected; this only reports disagreement.
    """
    chosen = [s.as_point() for s in shares[:k]]
    bad: List[int] = []
    for s in shares[k:]:
        if interpolate_at(chosen, s.x) != s.y:
            bad.append(s.x)
    return bad
