"""
Truncation, slug and HTML helpers.
"""

import re
import unicodedata

_COMBINING_MARKS = re.compile(r'[\u0300-\u036f]')
_WHITESPACE_RUN = re.compile(r'\s+')
_NON_SLUG_CHARS = re.compile(r'[^\w-]+', re.ASCII)
_HYPHEN_RUN = re.compile(r'--+')
_TAG = re.compile(r'</?[^>]+(>|$)')
_ENTITY = re.compile(r'&[a-zA-Z0-9#]+;')

_UNESCAPE_MAP = {
    '&amp;': '&',
    '&lt;': '<',
    '&gt;': '>',
    '&quot;': '"',
    '&#039;': "'",
}


def truncate(text: str, max_length: int, ellipsis: bool = False) -> str:
    """
    Truncate a string to a maximum length.

    Args:
        text: String to truncate
        max_length: Maximum length of the result
        ellipsis: Whether to end a truncated result with "..."

    Returns:
        The original text if short enough, otherwise the cut text
    """
    if len(text) <= max_length:
        return text

    if ellipsis:
        return text[:max(max_length - 3, 0)] + '...'
    return text[:max(max_length, 0)]


def slugify(title: str, length: int = 64) -> str:
    """
    Generate a URL-friendly slug.

    Accents are stripped, the text is lowercased, whitespace becomes
    hyphens, anything that is not an ASCII word character or hyphen is
    removed, hyphen runs collapse and the result is cut to ``length``.
    """
    slug = unicodedata.normalize('NFD', str(title))
    slug = _COMBINING_MARKS.sub('', slug).lower().strip()
    slug = _WHITESPACE_RUN.sub('-', slug)
    slug = _NON_SLUG_CHARS.sub('', slug)
    slug = _HYPHEN_RUN.sub('-', slug)
    return slug.strip('-')[:length]


def strip_tags(html: str) -> str:
    """Remove HTML tags from a string."""
    return _TAG.sub('', html)


def escape_html(text: str) -> str:
    """Escape the five HTML special characters."""
    return (text.replace('&', '&amp;')
                .replace('<', '&lt;')
                .replace('>', '&gt;')
                .replace('"', '&quot;')
                .replace("'", '&#039;'))


def unescape_html(text: str) -> str:
    """Unescape the entities produced by escape_html, leaving others intact."""
    return _ENTITY.sub(lambda match: _UNESCAPE_MAP.get(match.group(0), match.group(0)), text)
