"""Secret reconstruction from a ``ShareSet``.

Exactly k = ``share_set.threshold`` shares are used.  Which k is decided by
an explicit selection policy rather than by container order, so the same
input always interpolates the same points:

  ascending  – the k shares with the smallest x (ties keep input order)
  insertion  – the first k shares as supplied
"""

from __future__ import annotations

import logging
from typing import List

from sharerecover.config import DEFAULT_SELECTION
from sharerecover.crypto.lagrange import interpolate_at_zero
from sharerecover.errors import (
    DegenerateInputError,
    InsufficientSharesError,
    InvalidSelectionError,
)
from sharerecover.store.models import Share, ShareSet

logger = logging.getLogger(__name__)

ASCENDING = "ascending"
INSERTION = "insertion"
SELECTION_POLICIES = (ASCENDING, INSERTION)


def select_shares(share_set: ShareSet, selection: str = DEFAULT_SELECTION) -> List[Share]:
    """Return the k shares that ``reconstruct`` would interpolate."""
    if selection not in SELECTION_POLICIES:
        raise InvalidSelectionError(f"Unknown selection policy {selection!r}")
    k = share_set.threshold
    if k < 1:
        raise DegenerateInputError(f"Threshold must be at least 1, got k={k}")
    if len(share_set.shares) < k:
        raise InsufficientSharesError(
            f"Need at least {k} shares, but got {len(share_set.shares)}"
        )

    if selection == ASCENDING:
        ordered = sorted(share_set.shares, key=lambda s: s.x)
    else:
        ordered = list(share_set.shares)
    return ordered[:k]


def reconstruct(share_set: ShareSet, selection: str = DEFAULT_SELECTION) -> int:
    """Recover the secret P(0) from *share_set*."""
    selected = select_shares(share_set, selection)
    logger.debug(
        "reconstructing from k=%d shares, x=%s",
        len(selected),
        [s.x for s in selected],
    )
    return interpolate_at_zero([s.as_point() for s in selected])
