"""Share document reader.

A share document is a JSON object of the form::

    {
        "keys": {"n": 4, "k": 3},
        "1": {"base": "10", "value": "4"},
        "2": {"base": "2",  "value": "111"},
        ...
    }

``keys.n`` is the advertised share count, ``keys.k`` the threshold; every
other top-level key is a share id mapping to its radix and digits.  The
reader only checks structure; decoding and the ``n`` check belong to the
share store.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Tuple

from pydantic import BaseModel, ConfigDict, ValidationError

from sharerecover.errors import MalformedInputError
from sharerecover.store.models import RawShareRecord

KEYS_FIELD = "keys"


class DocumentKeys(BaseModel):
    """The ``keys`` header."""

    n: int
    k: int


class ShareDocument(BaseModel):
    """Parsed document: header counts plus raw records in document order."""

    model_config = ConfigDict(frozen=True)

    total: int
    threshold: int
    records: Tuple[RawShareRecord, ...]


def parse_mapping(data: Any) -> ShareDocument:
    """Build a ``ShareDocument`` from already-decoded JSON data."""
    if not isinstance(data, dict):
        raise MalformedInputError("Share document must be a JSON object")
    if KEYS_FIELD not in data:
        raise MalformedInputError(f"Missing '{KEYS_FIELD}' in input")

    header = data[KEYS_FIELD]
    if not isinstance(header, dict):
        raise MalformedInputError(f"'{KEYS_FIELD}' must be an object")
    try:
        keys = DocumentKeys.model_validate(header)
    except ValidationError as exc:
        raise MalformedInputError(f"Invalid '{KEYS_FIELD}': {_first_error(exc)}")

    records: List[RawShareRecord] = []
    for share_id, entry in data.items():
        if share_id == KEYS_FIELD:
            continue
        if not isinstance(entry, dict):
            raise MalformedInputError(f"Share {share_id!r} must be an object")
        try:
            records.append(
                RawShareRecord(id=share_id, base=entry.get("base"), value=entry.get("value"))
            )
        except ValidationError as exc:
            raise MalformedInputError(f"Share {share_id!r}: {_first_error(exc)}")

    return ShareDocument(total=keys.n, threshold=keys.k, records=tuple(records))


def decode_text(data: bytes, source: str = "input") -> str:
    """Decode raw document bytes as UTF-8."""
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise MalformedInputError(f"{source} is not valid UTF-8: {exc.reason} at byte {exc.start}")


def parse_document(text: str) -> ShareDocument:
    """Parse JSON *text* into a ``ShareDocument``."""
    try:
        data = json.loads(text)
    except ValueError as exc:
        # JSONDecodeError, or an integer literal past the int conversion limit
        raise MalformedInputError(f"Input is not valid JSON: {exc}")
    return parse_mapping(data)


def load_document(path: str | Path) -> ShareDocument:
    """Read and parse the share document at *path*."""
    try:
        data = Path(path).read_bytes()
    except OSError as exc:
        raise MalformedInputError(f"Cannot read {path}: {exc.strerror or exc}")
    return parse_document(decode_text(data, str(path)))


def _first_error(exc: ValidationError) -> str:
    err: Dict[str, Any] = exc.errors()[0]
    loc = ".".join(str(p) for p in err.get("loc", ()))
    return f"{loc}: {err.get('msg')}" if loc else str(err.get("msg"))
