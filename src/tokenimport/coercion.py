"""
Value coercion (raw token string -> TokenValue).

Rules are applied in a fixed order, first match wins:

    1. "true" / "false" (any case)  -> BooleanValue
    2. a color literal                -> ColorValue
    3. a finite decimal number        -> NumberValue
       (unless it contains "px" or "em")
    4. anything else                  -> StringValue

The order is part of the contract. Do not make it configurable.
"""

import math
import re
from typing import Optional

from tokenimport.colors import is_color, to_rgba
from tokenimport.values import (
    TokenValue,
    BooleanValue,
    NumberValue,
    StringValue,
)


# ASCII digits only
_DECIMAL_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)

# Unit markers that keep a numeric-looking value a string
_UNIT_MARKERS = ("px", "em")


def parse_number(raw: str) -> Optional[float]:
    """Return raw as a finite float, or None if it is not a plain decimal."""
    if not _DECIMAL_RE.fullmatch(raw):
        return None
    number = float(raw)
    if not math.isfinite(number):
        return None
    return number


def coerce_value(raw: str) -> TokenValue:
    """
    Classify a raw scalar string into the most specific TokenValue.

    Args:
        raw: Value text as it appeared in the source document

    Returns:
        BooleanValue, ColorValue, NumberValue or StringValue
    """
    lowered = raw.lower()
    if lowered == "true":
        return BooleanValue(True)
    if lowered == "false":
        return BooleanValue(False)

    if is_color(raw):
        return to_rgba(raw)

    if not any(marker in raw for marker in _UNIT_MARKERS):
        number = parse_number(raw)
        if number is not None:
            return NumberValue(number)

    return StringValue(raw)


__all__ = ["coerce_value", "parse_number"]
