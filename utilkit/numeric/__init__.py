# Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
# All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
# See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
# Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.

"""
Numeric package providing number, byte size and color helpers.

This package includes:
- Random integers, percentages, rounding and number formatting
- Sum, average, median, minimum and maximum over sequences
- Base-1024 byte size formatting and parsing
- Hex/RGB color conversion with lighten and darken
"""

from .math import (
    rand, percentage, clamp, format_number, total, average, median,
    minimum, maximum, round_to
)
from .size import SIZE_UNITS, format_bytes, to_bytes
from .color import hex_to_rgb, rgb_to_hex, lighten, darken

__all__ = [
    # Math
    'rand', 'percentage', 'clamp', 'format_number', 'total', 'average',
    'median', 'minimum', 'maximum', 'round_to',

    # Sizes
    'SIZE_UNITS', 'format_bytes', 'to_bytes',

    # Colors
    'hex_to_rgb', 'rgb_to_hex', 'lighten', 'darken'
]
