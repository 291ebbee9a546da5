"""
Generic, format-agnostic parsing utilities.

Loosely-typed API values (numbers that arrive as strings, "-" placeholders)
are normalized here so callers only ever see a number or None.
"""

from __future__ import annotations

import math


def parse_float(value: str | int | float | None) -> float | None:
    """Parse a value to a finite float.

    Strings must be a bare number: surrounding whitespace and ``_`` digit
    separators are rejected, as are empty strings, "-", NaN and infinities.
    """
    if value in (None, "", "-"):
        return None
    if isinstance(value, str) and (value != value.strip() or "_" in value):
        return None
    try:
        result = float(value)
    except (ValueError, TypeError):
        return None
    if not math.isfinite(result):
        return None
    return result
