"""
Color detection and conversion.

Recognizes the lexical color forms a token file may carry and converts
them to a ColorValue:

    - #RRGGBB and #RRGGBBAA hex
    - rgb(...) / rgba(...) functional notation (prefix match only)
    - a small fixed set of named colors

Conversion is best-effort: a hex string that does not split into byte
pairs yields FALLBACK_COLOR instead of an error.
"""

import re
from typing import Optional

from tokenimport.values import ColorValue


NAMED_COLORS = {
    "red": ColorValue(1.0, 0.0, 0.0, 1.0),
    "blue": ColorValue(0.0, 0.0, 1.0, 1.0),
    "green": ColorValue(0.0, 128 / 255.0, 0.0, 1.0),
    "black": ColorValue(0.0, 0.0, 0.0, 1.0),
    "white": ColorValue(1.0, 1.0, 1.0, 1.0),
    "transparent": ColorValue(0.0, 0.0, 0.0, 0.0),
}

FALLBACK_COLOR = ColorValue(0.0, 0.0, 0.0, 1.0)

_HEX_COLOR_RE = re.compile(r"^#([A-Fa-f0-9]{6}|[A-Fa-f0-9]{8})$")
_HEX_PAIRS_RE = re.compile(
    r"^#?([a-f\d]{2})([a-f\d]{2})([a-f\d]{2})([a-f\d]{2})?$", re.IGNORECASE
)
_RGB_PREFIX_RE = re.compile(r"^rgba?\(")
_NUMBER = r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)"
_RGB_FUNCTION_RE = re.compile(
    r"^rgba?\(\s*(%s)\s*[,\s]\s*(%s)\s*[,\s]\s*(%s)\s*(?:[,/]\s*(%s)\s*)?\)$"
    % (_NUMBER, _NUMBER, _NUMBER, _NUMBER)
)


def is_color(raw: str) -> bool:
    """Return True if raw looks like a color literal."""
    if _HEX_COLOR_RE.match(raw):
        return True
    if _RGB_PREFIX_RE.match(raw):
        return True
    return raw.lower() in NAMED_COLORS


def hex_to_rgba(raw: str) -> ColorValue:
    """
    Convert a hex color to RGBA channels in [0, 1].

    Each byte pair is divided by 255. Alpha defaults to 1.0.
    Anything that is not 3 or 4 byte pairs gives FALLBACK_COLOR.
    """
    match = _HEX_PAIRS_RE.match(raw)
    if not match:
        return FALLBACK_COLOR

    red, green, blue, alpha = match.groups()
    return ColorValue(
        r=int(red, 16) / 255.0,
        g=int(green, 16) / 255.0,
        b=int(blue, 16) / 255.0,
        a=int(alpha, 16) / 255.0 if alpha else 1.0,
    )


def _rgb_function_to_rgba(raw: str) -> Optional[ColorValue]:
    match = _RGB_FUNCTION_RE.match(raw.strip())
    if not match:
        return None

    red, green, blue, alpha = match.groups()
    channels = [float(red) / 255.0, float(green) / 255.0, float(blue) / 255.0]
    channels.append(float(alpha) if alpha is not None else 1.0)
    if any(c < 0.0 or c > 1.0 for c in channels):
        return None
    return ColorValue(*channels)


def to_rgba(raw: str) -> ColorValue:
    """
    Convert a recognized color string to a ColorValue.

    Args:
        raw: A string for which is_color() is True

    Returns:
        ColorValue, or FALLBACK_COLOR when the string is malformed
    """
    named = NAMED_COLORS.get(raw.lower())
    if named is not None:
        return named

    if _RGB_PREFIX_RE.match(raw):
        converted = _rgb_function_to_rgba(raw)
        return converted if converted is not None else FALLBACK_COLOR

    return hex_to_rgba(raw)


__all__ = [
    "NAMED_COLORS",
    "FALLBACK_COLOR",
    "is_color",
    "hex_to_rgba",
    "to_rgba",
]
