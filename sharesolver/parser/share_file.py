"""Share-file parser – reads a JSON share document into a ``ShareDocument``.

The parser enforces:
- UTF-8 JSON with an object at the root
- a ``keys`` object holding ``n`` and ``k``
- every other top-level key is a positive decimal integer
- no duplicate keys at any level (JSON's last-wins rule is rejected)
- each entry has a decimal ``base`` and a string ``value``

Base range and digit validity are left to the radix decoder.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, List, Tuple, Union

from sharesolver.arith import integer
from sharesolver.config import BASE_FIELD, DOCUMENT_ENCODING, KEYS_FIELD, VALUE_FIELD
from sharesolver.errors import ShareFileError
from sharesolver.parser.models import RawShare, ShareDocument

Pairs = List[Tuple[str, Any]]


class _Object:
    """JSON object kept as its ordered key/value pairs."""

    __slots__ = ("pairs",)

    def __init__(self, pairs: Pairs) -> None:
        self.pairs = pairs

    def unique(self, where: str) -> dict:
        out: dict = {}
        for key, value in self.pairs:
            if key in out:
                raise ShareFileError(f"duplicate field '{key}' in {where}")
            out[key] = value
        return out


def parse(data: Union[bytes, str]) -> ShareDocument:
    """Parse share-document *data* and return a ``ShareDocument``."""
    if isinstance(data, bytes):
        try:
            data = data.decode(DOCUMENT_ENCODING)
        except UnicodeDecodeError as exc:
            raise ShareFileError(f"document is not valid UTF-8: {exc}") from None

    try:
        root = json.loads(data, object_pairs_hook=_Object)
    except ValueError as exc:
        raise ShareFileError(f"invalid JSON: {exc}") from None
    if not isinstance(root, _Object):
        raise ShareFileError("document root must be an object")

    keys_obj = None
    entries: List[Tuple[int, str, Any]] = []
    seen: dict = {}

    for key, value in root.pairs:
        if key == KEYS_FIELD:
            if keys_obj is not None:
                raise ShareFileError(f"duplicate '{KEYS_FIELD}' record")
            keys_obj = value
            continue
        index = _parse_index(key)
        if index in seen:
            raise ShareFileError(
                f"share keys '{seen[index][:40]}' and '{key[:40]}' name the same index",
                kind="duplicate-index",
            )
        seen[index] = key
        entries.append((index, key, value))

    if keys_obj is None:
        raise ShareFileError(f"missing '{KEYS_FIELD}' record", kind="missing-keys")
    if not isinstance(keys_obj, _Object):
        raise ShareFileError(f"'{KEYS_FIELD}' must be an object")
    keys = keys_obj.unique(f"'{KEYS_FIELD}'")
    for name in ("n", "k"):
        if name not in keys:
            raise ShareFileError(
                f"'{KEYS_FIELD}' record lacks '{name}'", kind="missing-n-or-k"
            )
    n = _parse_count("n", keys["n"])
    k = _parse_count("k", keys["k"])

    shares = [_parse_entry(index, key, value) for index, key, value in entries]
    return ShareDocument(n=n, k=k, shares=shares)


def parse_file(path: Union[str, Path]) -> ShareDocument:
    """Read and parse the share document at *path*."""
    try:
        data = Path(path).read_bytes()
    except OSError as exc:
        raise ShareFileError(f"cannot read {path}: {exc.strerror or exc}", kind="io") from None
    return parse(data)


# ------------------------------------------------------------------
# Helpers
# ------------------------------------------------------------------

def _parse_index(key: str) -> int:
    if not integer.is_decimal(key) or not key.strip("0"):
        raise ShareFileError(
            f"share key '{key[:40]}' is not a positive integer", kind="non-integer-index"
        )
    return integer.from_decimal(key)


def _parse_count(name: str, value: Any) -> int:
    if isinstance(value, int) and not isinstance(value, bool):
        if value < 0:
            raise ShareFileError(f"'{name}' must be non-negative, got {value}")
        return value
    if isinstance(value, str) and integer.is_decimal(value):
        return integer.from_decimal(value)
    raise ShareFileError(f"'{name}' must be a non-negative integer, got {value!r}")


def _parse_entry(index: int, key: str, value: Any) -> RawShare:
    where = f"share '{key[:40]}'"
    if not isinstance(value, _Object):
        raise ShareFileError(f"{where} must be an object")
    fields = value.unique(where)
    for name in (BASE_FIELD, VALUE_FIELD):
        if name not in fields:
            raise ShareFileError(f"{where} lacks '{name}'")

    base = fields[BASE_FIELD]
    if isinstance(base, int) and not isinstance(base, bool):
        base_int = base
    elif isinstance(base, str) and integer.is_decimal(base):
        base_int = integer.from_decimal(base)
    else:
        raise ShareFileError(
            f"{where}: base {base!r} is not a decimal integer", kind="non-integer-base"
        )

    digits = fields[VALUE_FIELD]
    if not isinstance(digits, str):
        raise ShareFileError(
            f"{where}: value must be a string, got {type(digits).__name__}",
            kind="value-not-string",
        )
    return RawShare(index=index, base=base_int, value=digits)
