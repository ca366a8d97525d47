"""
Color conversion between hex strings and RGB components.
"""

import string
from typing import Optional

from ..core.types import RGB
from .math import clamp, round_to

_HEX_DIGITS = frozenset(string.hexdigits)


def hex_to_rgb(hex_str: str) -> Optional[RGB]:
    """
    Convert a 3- or 6-digit hex color, with or without '#', to RGB.

    Returns:
        RGB components, or None for anything that is not a valid hex color
    """
    cleaned = hex_str[1:] if hex_str.startswith('#') else hex_str

    if len(cleaned) == 3:
        cleaned = ''.join(c * 2 for c in cleaned)
    elif len(cleaned) != 6:
        return None

    if not set(cleaned) <= _HEX_DIGITS:
        return None

    num = int(cleaned, 16)
    return RGB(r=(num >> 16) & 255, g=(num >> 8) & 255, b=num & 255)


def _channel(value: float) -> int:
    return int(clamp(round_to(value), 0, 255))


def rgb_to_hex(r: float, g: float, b: float) -> str:
    """Convert RGB components to a 6-digit lowercase hex color, clamping each channel."""
    return '#' + ''.join(f"{_channel(v):02x}" for v in (r, g, b))


def lighten(hex_str: str, amount: float) -> str:
    """
    Move each channel toward white by `amount` (0..1).
    Invalid colors are returned unchanged.
    """
    rgb = hex_to_rgb(hex_str)
    if rgb is None:
        return hex_str
    return rgb_to_hex(*(c + (255 - c) * amount for c in (rgb.r, rgb.g, rgb.b)))


def darken(hex_str: str, amount: float) -> str:
    """
    Move each channel toward black by `amount` (0..1).
    Invalid colors are returned unchanged.
    """
    rgb = hex_to_rgb(hex_str)
    if rgb is None:
        return hex_str
    return rgb_to_hex(*(c * (1 - amount) for c in (rgb.r, rgb.g, rgb.b)))
