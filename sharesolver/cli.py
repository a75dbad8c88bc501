"""Command line interface.

    sharesolver [--json] [--no-check] [--log-level LEVEL] FILE [FILE ...]

Prints n, k, the decoded points used and the secret for every file.
Exit status is 0 only when every file was solved.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import List, Optional

from sharesolver.arith import integer
from sharesolver.driver import BatchReport, Result, process_batch


def banner(msg: str) -> None:
    print(f"\n{'='*60}")
    print(f"  {msg}")
    print(f"{'='*60}")


def print_result(result: Result) -> None:
    banner(result.source)
    print(f"   n = {result.n}")
    print(f"   k = {result.k}")
    print("   Points used:")
    for p in result.points:
        print(f"     ({integer.to_decimal(p.x)}, {integer.to_decimal(p.y)})")
    if result.inconsistent_indices:
        shown = ", ".join(integer.to_decimal(x) for x in result.inconsistent_indices)
        print(f"   Inconsistent shares: {shown}")
    print(f"   Secret: {integer.to_decimal(result.secret)}")


def report(batch: BatchReport, as_json: bool = False) -> None:
    if as_json:
        print(json.dumps(batch.to_dict(), indent=2))
    for outcome in batch.outcomes:
        if outcome.ok:
            if not as_json:
                print_result(outcome.result)
        else:
            err = outcome.error or {}
            print(f"{outcome.source}: {err.get('kind')}: {err.get('message')}", file=sys.stderr)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="sharesolver",
        description="Recover the constant term of a polynomial from base-encoded shares",
    )
    parser.add_argument("files", nargs="+", metavar="FILE", help="share document (JSON)")
    parser.add_argument("--json", action="store_true", help="emit results as JSON")
    parser.add_argument(
        "--no-check", action="store_true",
        help="skip checking the shares beyond the first k",
    )
    parser.add_argument(
        "--log-level", default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(levelname)s %(name)s: %(message)s",
    )

    batch = process_batch(args.files, check=not args.no_check)
    report(batch, as_json=args.json)
    return 0 if batch.ok else 1


if __name__ == "__main__":
    sys.exit(main())
