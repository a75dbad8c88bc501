"""Data model for parsed share documents.

A share document declares ``n`` (shares present) and ``k`` (shares
needed), followed by entries keyed by a positive integer index:

    {
      "keys": {"n": 4, "k": 3},
      "1": {"base": "10", "value": "4"},
      "2": {"base": "2", "value": "111"},
      ...
    }

The index doubles as the share's x-coordinate.
"""

from __future__ import annotations

from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict


class RawShare(BaseModel):
    """One undecoded share entry."""

    model_config = ConfigDict(frozen=True)

    index: int  # positive; also the x-coordinate
    base: int   # declared radix, range-checked on decode
    value: str  # digit string in ``base``

    def to_dict(self) -> Dict[str, Any]:
        return {"base": str(self.base), "value": self.value}


class ShareDocument(BaseModel):
    """A parsed share file: declared ``n``/``k`` plus its raw shares.

    ``shares`` keeps document order; indices are pairwise distinct.
    """

    model_config = ConfigDict(frozen=True)

    n: int
    k: int
    shares: List[RawShare] = []

    @property
    def indices(self) -> List[int]:
        return [s.index for s in self.shares]

    def to_dict(self) -> Dict[str, Any]:
        doc: Dict[str, Any] = {"keys": {"n": self.n, "k": self.k}}
        for s in self.shares:
            doc[str(s.index)] = s.to_dict()
        return doc
