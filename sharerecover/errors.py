"""Error taxonomy for share decoding and secret reconstruction.

Every failure raised by the library derives from ``ShareRecoveryError`` and
carries a ``kind`` naming its category, which the command line prints
verbatim before the message.
"""

from __future__ import annotations


class ShareRecoveryError(Exception):
    """Base class for all reconstruction failures."""

    kind = "ShareRecoveryError"


class InvalidDigitError(ShareRecoveryError):
    """Raised when a character is not a valid digit for the stated base."""

    kind = "InvalidDigit"


class ValueOverflowError(ShareRecoveryError):
    """Raised when a decoded value exceeds the configured bit limit."""

    kind = "Overflow"


class MissingFieldError(ShareRecoveryError):
    """Raised when a share record lacks its base or value."""

    kind = "MissingField"


class InsufficientSharesError(ShareRecoveryError):
    """Raised when fewer shares than the threshold are supplied."""

    kind = "InsufficientShares"


class DuplicateAbscissaError(ShareRecoveryError):
    """Raised when two selected shares have the same x."""

    kind = "DuplicateAbscissa"


class DegenerateInputError(ShareRecoveryError):
    """Raised when the threshold (or point count) is below one."""

    kind = "DegenerateInput"


class NonIntegerResultError(ShareRecoveryError):
    """Raised when interpolation does not land on an integer."""

    kind = "NonIntegerResult"


class MalformedInputError(ShareRecoveryError):
    """Raised when the input document is structurally broken."""

    kind = "MalformedInput"


class InvalidBaseError(MalformedInputError):
    """Raised when a radix falls outside [MIN_BASE, MAX_BASE]."""

    kind = "InvalidBase"


class InvalidSelectionError(MalformedInputError):
    """Raised when the share selection policy is not a known one."""

    kind = "InvalidSelection"
