"""Lagrange interpolation at x = 0 over the rationals.

API
---
interpolate_at_zero(points)  -> int   exact P(0) for the given k points
"""

from __future__ import annotations

from typing import Sequence, Tuple

from sharerecover.crypto import rational
from sharerecover.errors import DegenerateInputError, DuplicateAbscissaError

Point = Tuple[int, int]


def check_abscissas(points: Sequence[Point]) -> None:
    """Reject point sets where two points share an x."""
    seen = set()
    for x, _ in points:
        if x in seen:
            raise DuplicateAbscissaError(f"Duplicate x value {x} among selected shares")
        seen.add(x)


def interpolate_at_zero(points: Sequence[Point]) -> int:
    """Recover P(0) from *points* using exact Lagrange interpolation.

    Each term y_i * L_i(0) and the running sum are ``Fraction``s; the
    result is converted to ``int`` only once, at the end, and a
    ``NonIntegerResultError`` is raised if it does not reduce to one.
    """
    if not points:
        raise DegenerateInputError("Need at least one point")
    check_abscissas(points)
    if len(points) == 1:
        return points[0][1]

    xs = [x for x, _ in points]
    secret = rational.ZERO
    for i, (_, yi) in enumerate(points):
        secret += yi * rational.lagrange_basis_at_zero(xs, i)
    return rational.to_integer(secret)
