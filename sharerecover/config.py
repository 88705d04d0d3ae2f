"""Global configuration for sharerecover."""

import os

# ---------- Radix limits ----------
# Digits are 0-9 then a-z, so 36 is the largest base expressible.
MIN_BASE = 2
MAX_BASE = 36

# ---------- Checked decode range ----------
# Decoded values larger than this many bits raise ValueOverflowError.
# 63 reproduces a signed 64-bit range; 0 disables the check.
MAX_VALUE_BITS = int(os.environ.get("SHARERECOVER_MAX_VALUE_BITS", "4096"))

# ---------- Share selection ----------
# "ascending" -> the k shares with the smallest x
# "insertion" -> the first k shares in document order
DEFAULT_SELECTION = os.environ.get("SHARERECOVER_SELECTION", "ascending")

# ---------- Input document ----------
# When set, a "keys.n" that disagrees with the number of share records is an
# error instead of a warning.
STRICT_TOTAL = os.environ.get("SHARERECOVER_STRICT_TOTAL", "").lower() in ("1", "true", "yes")

# ---------- Logging (CLI only) ----------
LOG_LEVEL = os.environ.get("SHARERECOVER_LOG_LEVEL", "WARNING")
