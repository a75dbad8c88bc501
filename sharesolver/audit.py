"""Tamper-evident trail of solved and rejected share documents.

Every record stores the SHA-256 of its predecessor, starting from an
all-zero genesis digest, so editing or dropping any record breaks the
chain from that point on.  Records live in memory only.
"""

from __future__ import annotations

import hashlib
import json
import time
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from sharesolver.arith import integer

GENESIS = "0" * 64

PROCESSED = "processed"
FAILED = "failed"


@dataclass(frozen=True)
class AuditEntry:
    timestamp: float
    event: str
    data: Dict[str, Any]
    prev_hash: str
    entry_hash: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "timestamp": self.timestamp,
            "event": self.event,
            "data": self.data,
            "prev_hash": self.prev_hash,
            "entry_hash": self.entry_hash,
        }


def _digest(timestamp: float, event: str, data: Dict[str, Any], prev_hash: str) -> str:
    canonical = json.dumps(
        [prev_hash, timestamp, event, data], sort_keys=True, separators=(",", ":")
    )
    return hashlib.sha256(canonical.encode()).hexdigest()


class AuditLog:
    """Chain of document outcomes, newest last."""

    def __init__(self) -> None:
        self._entries: List[AuditEntry] = []

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def head(self) -> str:
        """Digest of the newest record, or the genesis digest."""
        return self._entries[-1].entry_hash if self._entries else GENESIS

    def append(self, event: str, data: Dict[str, Any]) -> AuditEntry:
        ts = time.time()
        prev = self.head
        entry = AuditEntry(ts, event, data, prev, _digest(ts, event, data, prev))
        self._entries.append(entry)
        return entry

    def record_result(self, source: str, n: int, k: int, secret: int) -> AuditEntry:
        return self.append(
            PROCESSED,
            {"source": source, "n": n, "k": k, "secret": integer.to_decimal(secret)},
        )

    def record_failure(self, source: str, kind: str) -> AuditEntry:
        return self.append(FAILED, {"source": source, "kind": kind})

    def entries(self, source: Optional[str] = None) -> List[Dict[str, Any]]:
        """All records as dicts, optionally only those for *source*."""
        return [
            e.to_dict()
            for e in self._entries
            if source is None or e.data.get("source") == source
        ]

    def verify_chain(self) -> bool:
        prev = GENESIS
        for e in self._entries:
            if e.prev_hash != prev or e.entry_hash != _digest(
                e.timestamp, e.event, e.data, e.prev_hash
            ):
                return False
            prev = e.entry_hash
        return True
