"""Exact rational arithmetic over Q.

Values are ``fractions.Fraction`` instances, always kept in lowest terms.
Nothing here ever truncates; conversion back to ``int`` is explicit and
checked.
"""

from __future__ import annotations

from fractions import Fraction
from typing import Sequence

from sharerecover.errors import NonIntegerResultError

ZERO = Fraction(0)
ONE = Fraction(1)


def ratio(num: int, den: int) -> Fraction:
    """Exact quotient num / den."""
    if den == 0:
        raise ZeroDivisionError("Zero denominator")
    return Fraction(num, den)


def lagrange_basis_at_zero(xs: Sequence[int], i: int) -> Fraction:
    """Return L_i(0) = prod_{j != i} (0 - x_j) / (x_i - x_j)."""
    xi = xs[i]
    basis = ONE
    for j, xj in enumerate(xs):
        if j == i:
            continue
        basis *= ratio(-xj, xi - xj)
    return basis


def to_integer(value: Fraction) -> int:
    """Convert *value* to ``int``, refusing anything with a remainder."""
    if value.denominator != 1:
        raise NonIntegerResultError(
            f"interpolated value {value.numerator}/{value.denominator} is not an integer"
        )
    return value.numerator
