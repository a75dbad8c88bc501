"""Driver: share file -> parse -> decode -> validate -> interpolate -> Result.

``process`` handles one file and raises on failure; ``process_batch``
runs several files in order and isolates failures per document.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Union

from pydantic import BaseModel, ConfigDict

from sharesolver.arith import integer
from sharesolver.audit import AuditLog
from sharesolver.errors import SolverError
from sharesolver.interpolation import lagrange
from sharesolver.parser import share_file
from sharesolver.parser.models import ShareDocument
from sharesolver.shares import share_set
from sharesolver.shares.share_set import Share

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class Result(BaseModel):
    """Outcome of solving one share document."""

    model_config = ConfigDict(frozen=True)

    source: str
    n: int
    k: int
    points: List[Share]  # the k shares used, ascending x
    secret: int
    inconsistent_indices: List[int] = []

    @property
    def consistent(self) -> bool:
        return not self.inconsistent_indices

    def to_dict(self) -> Dict[str, Any]:
        return {
            "source": self.source,
            "n": self.n,
            "k": self.k,
            "points": [p.to_dict() for p in self.points],
            "secret": integer.to_decimal(self.secret),
            "inconsistent_indices": [integer.to_decimal(x) for x in self.inconsistent_indices],
        }


class Outcome(BaseModel):
    """One batch entry: a Result or an error record, never both."""

    model_config = ConfigDict(frozen=True)

    source: str
    result: Optional[Result] = None
    error: Optional[Dict[str, str]] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> Dict[str, Any]:
        if self.result is not None:
            return {"source": self.source, "ok": True, "result": self.result.to_dict()}
        return {"source": self.source, "ok": False, "error": dict(self.error or {})}


class BatchReport(BaseModel):
    outcomes: List[Outcome]

    @property
    def ok(self) -> bool:
        return all(o.ok for o in self.outcomes)

    def to_dict(self) -> Dict[str, Any]:
        return {"ok": self.ok, "outcomes": [o.to_dict() for o in self.outcomes]}


def solve(doc: ShareDocument, source: str = "<memory>", check: bool = True) -> Result:
    """Decode, validate and interpolate an already-parsed document."""
    shares = share_set.build(doc)
    secret = lagrange.evaluate(shares.shares, shares.k)
    bad = lagrange.check_consistency(shares.shares, shares.k) if check else []
    if bad:
        logger.warning(
            "%s: shares %s do not lie on the curve through the first %d shares",
            source, ", ".join(integer.to_decimal(x) for x in bad), shares.k,
        )
    return Result(
        source=source,
        n=shares.n,
        k=shares.k,
        points=shares.shares[: shares.k],
        secret=secret,
        inconsistent_indices=bad,
    )


def process_document(
    data: Union[bytes, str],
    source: str = "<memory>",
    audit: Optional[AuditLog] = None,
    check: bool = True,
) -> Result:
    """Solve an in-memory share document."""
    return _run(source, lambda: share_file.parse(data), audit, check)


def process(path: PathLike, audit: Optional[AuditLog] = None, check: bool = True) -> Result:
    """Solve the share file at *path*."""
    return _run(str(path), lambda: share_file.parse_file(path), audit, check)


def process_batch(
    paths: Iterable[PathLike],
    audit: Optional[AuditLog] = None,
    check: bool = True,
) -> BatchReport:
    """Run ``process`` on each path in order; one failure does not stop the rest."""
    outcomes: List[Outcome] = []
    for path in paths:
        try:
            result = process(path, audit=audit, check=check)
        except SolverError as exc:
            outcomes.append(Outcome(source=str(path), error=exc.to_dict()))
        else:
            outcomes.append(Outcome(source=str(path), result=result))
    return BatchReport(outcomes=outcomes)


def _run(source: str, load, audit: Optional[AuditLog], check: bool) -> Result:
    try:
        result = solve(load(), source=source, check=check)
    except SolverError as exc:
        exc.source = source
        logger.info("%s: failed with %s: %s", source, exc.kind, exc.message)
        if audit is not None:
            audit.record_failure(source, exc.kind)
        raise

    secret_text = integer.to_decimal(result.secret)
    logger.info(
        "%s: n=%d k=%d secret has %d digits", source, result.n, result.k,
        len(secret_text.lstrip("-")),
    )
    if audit is not None:
        audit.record_result(source, result.n, result.k, result.secret)
    return result
