#!/usr/bin/env python3
"""ShareSolver walk-through.

Usage:
    python -m sharesolver.demo.run_demo

The script:
1. Solves the small hand-written documents (mixed bases, gaps in indices).
2. Shows the error kinds reported for broken documents.
3. Builds a document whose values run to hundreds of digits and checks
   that the recovered secret is exact.
4. Dumps the audit log.
"""

from __future__ import annotations

import json

from sharesolver.audit import AuditLog
from sharesolver.cli import banner, print_result
from sharesolver.driver import process_document
from sharesolver.errors import SolverError
from sharesolver.polynomial import make_document

SAMPLES = {
    "mixed-bases": {
        "keys": {"n": 4, "k": 3},
        "1": {"base": "10", "value": "4"},
        "2": {"base": "2", "value": "111"},
        "3": {"base": "10", "value": "12"},
        "6": {"base": "4", "value": "213"},
    },
    "line": {
        "keys": {"n": 2, "k": 2},
        "1": {"base": "10", "value": "5"},
        "2": {"base": "10", "value": "9"},
    },
}

BROKEN = {
    "digit-out-of-range": '{"keys": {"n": 2, "k": 2}, "1": {"base": "10", "value": "10"},'
                          ' "2": {"base": "10", "value": "ab"}}',
    "duplicate-index": '{"keys": {"n": 3, "k": 3}, "1": {"base": "10", "value": "1"},'
                       ' "2": {"base": "10", "value": "2"}, "2": {"base": "10", "value": "3"}}',
}


def main() -> None:
    audit = AuditLog()

    banner("1) Solve sample documents")
    for name, doc in SAMPLES.items():
        print_result(process_document(json.dumps(doc), source=name, audit=audit))

    banner("2) Broken documents")
    for name, text in BROKEN.items():
        try:
            process_document(text, source=name, audit=audit)
        except SolverError as exc:
            print(f"   {name}: {exc.kind}: {exc.message}")

    banner("3) Large values")
    secret = 7 ** 300
    coeffs = [secret, 3 ** 250, 11 ** 200]
    doc = make_document(coeffs, xs=[1, 2, 3, 5, 8], bases=[36, 16, 7, 2, 10])
    result = process_document(json.dumps(doc), source="large", audit=audit)
    print(f"   secret digits: {len(str(result.secret))}")
    print(f"   exact: {result.secret == secret}")

    banner("4) Audit log")
    for entry in audit.entries():
        print(f"   [{entry['event']}] {entry['data'].get('source')}  hash={entry['entry_hash'][:16]}…")
    print(f"   chain valid: {audit.verify_chain()}")


if __name__ == "__main__":
    main()
