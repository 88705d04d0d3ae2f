"""Share data model.

``RawShareRecord`` is what an input document yields before decoding;
``Share`` and ``ShareSet`` are the decoded, immutable values handed to the
reconstructor.
"""

from __future__ import annotations

from typing import Any, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, field_validator


class RawShareRecord(BaseModel):
    """One share as written in the input: id, radix and encoded digits."""

    model_config = ConfigDict(frozen=True)

    id: str
    base: Optional[int] = None  # "16" and 16 both accepted
    value: Optional[str] = None

    @field_validator("value", mode="before")
    @classmethod
    def _int_value_as_text(cls, v: Any) -> Any:
        # A bare JSON number is taken as its decimal text.
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v


class Share(BaseModel):
    """A decoded point (x, y) on the secret polynomial."""

    model_config = ConfigDict(frozen=True)

    x: int
    y: int

    def as_point(self) -> Tuple[int, int]:
        return (self.x, self.y)


class ShareSet(BaseModel):
    """Decoded shares plus the threshold needed to reconstruct.

    ``total`` is the advisory share count from the input (``keys.n``) and
    is never used in the arithmetic.
    """

    model_config = ConfigDict(frozen=True)

    threshold: int
    total: Optional[int] = None
    shares: Tuple[Share, ...]

    @property
    def xs(self) -> List[int]:
        return [s.x for s in self.shares]
