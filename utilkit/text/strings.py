"""
General string helpers.
"""

from typing import Union

from ..core.types import PadDirection


def reverse(text: str) -> str:
    """Reverse a string."""
    return text[::-1]


def count_occurrences(text: str, search: str) -> int:
    """Count non-overlapping occurrences of ``search``; an empty needle counts 0."""
    if not search:
        return 0
    return text.count(search)


def pad(text: str, length: int, char: str = ' ',
        direction: Union[PadDirection, str] = PadDirection.LEFT) -> str:
    """
    Pad a string to the given length.

    Args:
        text: String to pad
        length: Desired length
        char: Padding character, only its first character is used
        direction: LEFT, RIGHT or BOTH (extra padding goes to the right)

    Returns:
        The padded string, or the original if already long enough
    """
    if len(text) >= length:
        return text

    pad_char = char[:1] or ' '
    direction = PadDirection(direction)

    if direction == PadDirection.RIGHT:
        return text.ljust(length, pad_char)
    if direction == PadDirection.BOTH:
        total = length - len(text)
        left = total // 2
        return pad_char * left + text + pad_char * (total - left)
    return text.rjust(length, pad_char)


def mask(text: str, visible_count: int = 4, mask_char: str = '*') -> str:
    """
    Mask a string, leaving only the last ``visible_count`` characters visible.

    Example:
        >>> mask("1234567890")
        '******7890'
    """
    if len(text) <= visible_count:
        return text

    hidden = len(text) - max(visible_count, 0)
    return (mask_char[:1] or '*') * hidden + text[hidden:]


def initials(name: str) -> str:
    """Uppercase initials of each word in a name."""
    return ''.join(word[0] for word in name.split()).upper()


def word_count(text: str) -> int:
    return len(text.split())


def is_blank(text: str) -> bool:
    return text.strip() == ''
