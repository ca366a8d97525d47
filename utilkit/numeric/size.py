"""
Byte size formatting and parsing.
"""

import re
from typing import Optional, Union

from .math import _to_fixed

Number = Union[int, float]

BASE = 1024
SIZE_UNITS = ('Bytes', 'KB', 'MB', 'GB', 'TB', 'PB')

_UNIT_POWERS = {
    'B': 0,
    'BYTES': 0,
    'KB': 1,
    'MB': 2,
    'GB': 3,
    'TB': 4,
    'PB': 5,
}
_SIZE_PATTERN = re.compile(r'(\d+\.?\d*)\s*(BYTES|B|KB|MB|GB|TB|PB)', re.ASCII | re.IGNORECASE)


def _plain(number: float) -> str:
    if number.is_integer():
        return str(int(number))
    return repr(number)


def format_bytes(num_bytes: Number, decimals: int = 2) -> str:
    """
    Format a byte count using base-1024 units.

    Args:
        num_bytes: Number of bytes; negative values keep their sign
        decimals: Maximum decimal places, negative values count as 0

    Returns:
        A string like "1.5 KB", without trailing zeros

    Example:
        >>> format_bytes(1536)
        '1.5 KB'
    """
    if num_bytes == 0:
        return '0 Bytes'

    places = max(decimals, 0)
    magnitude = abs(num_bytes)
    index = 0
    while index < len(SIZE_UNITS) - 1 and magnitude >= BASE ** (index + 1):
        index += 1

    rounded = _to_fixed(magnitude / BASE ** index, places)
    sign = '-' if num_bytes < 0 else ''
    return f"{sign}{_plain(rounded)} {SIZE_UNITS[index]}"


def to_bytes(size: str) -> Optional[Number]:
    """
    Parse a human-readable size such as "1.5 KB" into bytes.

    Units B, Bytes, KB, MB, GB, TB and PB are accepted case-insensitively.

    Returns:
        Number of bytes, or None if the string is not a valid size
    """
    if not isinstance(size, str):
        return None

    match = _SIZE_PATTERN.fullmatch(size.strip())
    if not match:
        return None

    amount, unit = match.groups()
    value = float(amount) if '.' in amount else int(amount)
    return value * BASE ** _UNIT_POWERS[unit.upper()]
