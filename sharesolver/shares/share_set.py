"""Canonical point set built from a parsed share document.

build(doc) -> ShareSet   decode every share, check n/k, sort by x
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Tuple

from pydantic import BaseModel, ConfigDict

from sharesolver.arith import integer
from sharesolver.codec import radix
from sharesolver.errors import DecodeError, ShareSetError
from sharesolver.parser.models import ShareDocument

logger = logging.getLogger(__name__)


class Share(BaseModel):
    """A decoded point (x, y) with x > 0 and y >= 0."""

    model_config = ConfigDict(frozen=True)

    x: int
    y: int

    def as_point(self) -> Tuple[int, int]:
        return (self.x, self.y)

    def to_dict(self) -> Dict[str, Any]:
        return {"x": integer.to_decimal(self.x), "y": integer.to_decimal(self.y)}


class ShareSet(BaseModel):
    """Decoded shares in ascending x order, with the declared n and k."""

    model_config = ConfigDict(frozen=True)

    n: int
    k: int
    shares: List[Share]

    @property
    def points(self) -> List[Tuple[int, int]]:
        return [s.as_point() for s in self.shares]


def build(doc: ShareDocument) -> ShareSet:
    """Validate *doc* and decode its shares into a ``ShareSet``."""
    if not 1 <= doc.k <= doc.n:
        raise ShareSetError(
            f"k={integer.to_decimal(doc.k)} must satisfy 1 <= k <= n={integer.to_decimal(doc.n)}",
            kind="invalid-k",
        )
    if len(doc.shares) != doc.n:
        raise ShareSetError(
            f"document declares n={integer.to_decimal(doc.n)} but holds {len(doc.shares)} shares",
            kind="share-count-mismatch",
        )

    shares: List[Share] = []
    for raw in doc.shares:
        try:
            y = radix.decode(raw.value, raw.base)
        except DecodeError as exc:
            raise DecodeError(
                f"share {integer.to_decimal(raw.index)}: {exc.message}", kind=exc.kind
            ) from exc
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "share %s: %r in base %d decoded", integer.to_decimal(raw.index), raw.value, raw.base
            )
        shares.append(Share(x=raw.index, y=y))

    xs = [s.x for s in shares]
    if len(set(xs)) != len(xs):
        raise ShareSetError("shares repeat an x-coordinate", kind="duplicate-x")

    shares.sort(key=lambda s: s.x)
    return ShareSet(n=doc.n, k=doc.k, shares=shares)
