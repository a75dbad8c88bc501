"""Error hierarchy.

Every error carries a ``kind`` string naming the failure class, e.g.
``digit-out-of-range``.  Entry points (batch driver, CLI, HTTP service)
report ``kind`` together with the message; the core never recovers.
"""

from __future__ import annotations

from typing import Optional

from sharesolver.arith import integer


class SolverError(ValueError):
    """Base class for all share-solving failures."""

    kind = "error"

    def __init__(self, message: str, kind: Optional[str] = None) -> None:
        super().__init__(message)
        if kind is not None:
            self.kind = kind
        # Document identifier, filled in by the driver.
        self.source: Optional[str] = None

    @property
    def message(self) -> str:
        return str(self.args[0]) if self.args else ""

    def to_dict(self) -> dict:
        d = {"kind": self.kind, "message": self.message}
        if self.source is not None:
            d["source"] = self.source
        return d


class ShareFileError(SolverError):
    """Raised when a share document cannot be read or is structurally invalid."""

    kind = "malformed-document"


class DecodeError(SolverError):
    """Raised when a value string cannot be decoded in its declared base."""

    kind = "bad-digit"


class ShareSetError(SolverError):
    """Raised when parsed shares do not form a valid point set."""

    kind = "invalid-k"


class InterpolationError(SolverError):
    """Raised when Lagrange evaluation cannot proceed."""

    kind = "insufficient-shares"


class NonIntegerSecretError(InterpolationError):
    """The interpolated constant term is not an integer.

    ``value`` holds the exact rational so callers can report it.
    """

    kind = "non-integer-secret"

    def __init__(self, value) -> None:
        whole = integer.to_decimal(value.truncate())
        super().__init__(f"interpolated value {value} is not an integer (integer part {whole})")
        self.value = value
