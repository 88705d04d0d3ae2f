"""Build a ``ShareSet`` from raw share records."""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from sharerecover.config import MAX_VALUE_BITS, STRICT_TOTAL
from sharerecover.crypto import radix
from sharerecover.errors import (
    DegenerateInputError,
    InsufficientSharesError,
    MalformedInputError,
    MissingFieldError,
)
from sharerecover.store.models import RawShareRecord, Share, ShareSet

logger = logging.getLogger(__name__)


def parse_id(share_id: str) -> int:
    """Parse a share id: ASCII decimal digits with an optional leading minus."""
    text = share_id.strip()
    digits = text[1:] if text.startswith("-") else text
    if not (digits.isascii() and digits.isdigit()):
        raise MalformedInputError(f"Share id {share_id!r} is not a decimal integer")
    return int(text)


def decode_record(record: RawShareRecord, max_bits: Optional[int] = MAX_VALUE_BITS) -> Share:
    """Turn one raw record into a ``Share`` (x from the id, y from the value)."""
    if record.base is None or record.value is None:
        missing = "base" if record.base is None else "value"
        raise MissingFieldError(f"Share {record.id!r} is missing '{missing}'")
    x = parse_id(record.id)
    y = radix.decode(record.value, record.base, max_bits=max_bits)
    return Share(x=x, y=y)


def build(
    records: Iterable[RawShareRecord],
    threshold: int,
    total: int | None = None,
    max_bits: Optional[int] = MAX_VALUE_BITS,
    strict_total: bool = STRICT_TOTAL,
) -> ShareSet:
    """Decode *records* and check there are at least *threshold* of them.

    Order is preserved.  Duplicate ids are not rejected here; the
    reconstructor checks x-uniqueness within the subset it selects.
    """
    if threshold < 1:
        raise DegenerateInputError(f"Threshold must be at least 1, got k={threshold}")

    shares: List[Share] = []
    for record in records:
        share = decode_record(record, max_bits=max_bits)
        logger.debug("decoded share x=%d base=%d -> y=%d", share.x, record.base, share.y)
        shares.append(share)

    if total is not None and total != len(shares):
        msg = f"Declared n={total} but {len(shares)} share records present"
        if strict_total:
            raise MalformedInputError(msg)
        logger.warning(msg)

    if len(shares) < threshold:
        raise InsufficientSharesError(
            f"Need at least {threshold} shares, but got {len(shares)}"
        )

    return ShareSet(threshold=threshold, total=total, shares=tuple(shares))
