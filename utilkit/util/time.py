"""
Time formatting and parsing helpers.
"""

import math
import re
from typing import List, Optional, Union

Number = Union[int, float]

_DIGITS = re.compile(r'\d+', re.ASCII)
_HMS = re.compile(r'(?:(\d+)h)?\s*(?:(\d+)m)?\s*(?:(\d+)s)?', re.ASCII | re.IGNORECASE)


def format_time(seconds: Number) -> str:
    """
    Format a number of seconds as a clock string.

    Returns "H:MM:SS" from one hour up, "M:SS" from one minute up and
    "0:SS" below that.
    """
    seconds = int(seconds)
    hours, remainder = divmod(seconds, 3600)
    minutes, secs = divmod(remainder, 60)

    if hours > 0:
        return f"{hours}:{minutes:02d}:{secs:02d}"
    if minutes > 0:
        return f"{minutes}:{secs:02d}"
    return f"0:{secs:02d}"


def format_duration(ms: Number) -> str:
    """
    Format milliseconds as a short human-readable duration.

    Only the two most significant units are shown, e.g. "2h 15m" or "1d 0h".
    """
    sec = math.floor(ms / 1000)
    minutes = sec // 60
    hours = minutes // 60
    days = hours // 24

    if days > 0:
        return f"{days}d {hours % 24}h"
    if hours > 0:
        return f"{hours}h {minutes % 60}m"
    if minutes > 0:
        return f"{minutes}m {sec % 60}s"
    return f"{sec}s"


def _whole(value: float) -> Number:
    return int(value) if float(value).is_integer() else value


def _clock_parts(text: str) -> Optional[List[float]]:
    parts = []
    for part in text.split(':'):
        part = part.strip()
        if not part:
            parts.append(0.0)
            continue
        try:
            number = float(part)
        except ValueError:
            return None
        if math.isnan(number):
            return None
        parts.append(number)
    return parts


def to_seconds(text: Optional[str]) -> Optional[Number]:
    """
    Convert a time string into seconds.

    Supported formats:
        - plain seconds ("2947")
        - "MM:SS" and "HH:MM:SS"
        - "Xh Ym Zs", any subset of the units ("2h 15m", "45s")

    Returns:
        Number of seconds, or None if the string is not a recognised time
    """
    text = text.strip() if text else ''
    if not text:
        return None

    if _DIGITS.fullmatch(text):
        return int(text)

    if ':' in text:
        parts = _clock_parts(text)
        if parts is None:
            return None
        if len(parts) == 2:
            return _whole(parts[0] * 60 + parts[1])
        if len(parts) == 3:
            return _whole(parts[0] * 3600 + parts[1] * 60 + parts[2])
        return None

    match = _HMS.match(text)
    if not match or not any(group is not None for group in match.groups()):
        return None

    hours, minutes, secs = (int(group or 0) for group in match.groups())
    return hours * 3600 + minutes * 60 + secs
