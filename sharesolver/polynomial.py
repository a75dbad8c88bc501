"""Integer polynomials and share-document generation.

eval_poly(coeffs, x)                 -> int    Horner evaluation, exact
make_document(coeffs, xs, bases, k)  -> dict   JSON-ready share document

Coefficients are listed constant term first, so ``coeffs[0]`` is the
secret a document built from them encodes.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

from sharesolver.codec import radix


def eval_poly(coeffs: Sequence[int], x: int) -> int:
    """Evaluate polynomial (Horner's method) over the integers."""
    result = 0
    for c in reversed(coeffs):
        result = result * x + c
    return result


def make_document(
    coeffs: Sequence[int],
    xs: Sequence[int],
    bases: Sequence[int],
    k: Optional[int] = None,
) -> Dict[str, Any]:
    """Build a share document sampling *coeffs* at every x in *xs*.

    The value at ``xs[i]`` is written in ``bases[i % len(bases)]``.
    ``k`` defaults to the number of coefficients.
    """
    if not xs:
        raise ValueError("Need at least one x-coordinate")
    if not bases:
        raise ValueError("Need at least one base")
    if k is None:
        k = len(coeffs)

    doc: Dict[str, Any] = {"keys": {"n": len(xs), "k": k}}
    for i, x in enumerate(xs):
        if x < 1:
            raise ValueError(f"x-coordinates must be positive, got {x}")
        y = eval_poly(coeffs, x)
        if y < 0:
            raise ValueError(f"polynomial is negative at x={x}")
        base = bases[i % len(bases)]
        doc[str(x)] = {"base": str(base), "value": radix.encode(y, base)}
    return doc


def sample_points(coeffs: Sequence[int], xs: Sequence[int]) -> List[tuple]:
    """Return ``[(x, P(x)), ...]`` for each x in *xs*."""
    return [(x, eval_poly(coeffs, x)) for x in xs]
