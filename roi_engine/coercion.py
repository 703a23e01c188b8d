"""
Numeric coercion for raw input-surface values.

Malformed numeric text never raises: it collapses to a fallback. The empty
string is kept as-is so a field being edited can be redisplayed blank.
"""

import math
import re

EMPTY = ""

_NON_NUMERIC = re.compile(r"[^0-9.\-]")


def coerce_number(raw, fallback=0):
    """
    Normalize a raw field value.

    - finite int/float -> unchanged
    - "" -> "" (blank field, computes as 0)
    - None -> fallback
    - anything else -> non-numeric characters stripped, parsed as float,
      fallback when the result is unparsable or not finite
    """
    if isinstance(raw, str) and raw == EMPTY:
        return EMPTY
    if raw is None:
        return fallback

    if isinstance(raw, (int, float)) and not isinstance(raw, bool):
        return raw if math.isfinite(raw) else fallback

    cleaned = _NON_NUMERIC.sub("", str(raw))
    if cleaned == "":
        # Text with no digits at all reads as zero, like an emptied field
        return 0.0
    try:
        value = float(cleaned)
    except ValueError:
        return fallback
    return value if math.isfinite(value) else fallback


def as_number(value) -> float:
    """Coerce and resolve the blank sentinel to 0 for arithmetic."""
    value = coerce_number(value)
    if isinstance(value, str) and value == EMPTY:
        return 0.0
    return float(value)
