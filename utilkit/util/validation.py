"""
Validation utilities for utilkit.
Provides regular-expression validators for common string formats.
"""

import re
from typing import Any, Pattern

from .typecheck import is_json  # noqa: F401

_FLAGS = re.ASCII

EMAIL_PATTERN = re.compile(r'[^\s@]+@[^\s@]+\.[^\s@]+', _FLAGS)
URL_PATTERN = re.compile(r'(https?|ftp)://[^\s/$.?#].[^\s]*', _FLAGS)
PHONE_PATTERN = re.compile(r'\+?(\d{1,3})?[-. (]*\d{1,4}[-. )]*\d{1,4}[-. ]*\d{1,9}', _FLAGS)
HEX_PATTERN = re.compile(r'[A-Fa-f0-9]+', _FLAGS)
HEX_COLOR_PATTERN = re.compile(r'#([A-Fa-f0-9]{3}|[A-Fa-f0-9]{6})', _FLAGS)

_IPV4_OCTET = r'(25[0-5]|2[0-4][0-9]|1?[0-9][0-9]?)'
IPV4_PATTERN = re.compile(r'\.'.join([_IPV4_OCTET] * 4), _FLAGS)
# Only the full eight-group form; "::" abbreviations are rejected.
IPV6_PATTERN = re.compile(r'(?:[A-F0-9]{1,4}:){7}[A-F0-9]{1,4}', _FLAGS | re.IGNORECASE)
MAC_PATTERN = re.compile(r'([0-9A-Fa-f]{2}[:-]){5}([0-9A-Fa-f]{2})', _FLAGS)
UUID_PATTERN = re.compile(
    r'[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}',
    _FLAGS | re.IGNORECASE
)
CREDIT_CARD_PATTERN = re.compile(
    r'4[0-9]{12}(?:[0-9]{3})?'          # Visa
    r'|5[1-5][0-9]{14}'                 # Mastercard
    r'|6(?:011|5[0-9]{2})[0-9]{12}'     # Discover
    r'|3[47][0-9]{13}'                  # Amex
    r'|3(?:0[0-5]|[68][0-9])[0-9]{11}'  # Diners Club
    r'|(?:2131|1800|35\d{3})\d{11}',    # JCB
    _FLAGS
)
DOMAIN_PATTERN = re.compile(r'(?!://)([a-zA-Z0-9\-_]{1,63}\.)+[a-zA-Z]{2,63}', _FLAGS)
POSTAL_CODE_PATTERN = re.compile(r'[A-Za-z0-9\s-]{3,10}', _FLAGS)
# Month and day ranges are checked, leap years are not.
ISO_DATE_PATTERN = re.compile(r'\d{4}-(0[1-9]|1[0-2])-(0[1-9]|[12]\d|3[01])', _FLAGS)
BASE64_PATTERN = re.compile(
    r'(?:[A-Za-z0-9+/]{4})*(?:[A-Za-z0-9+/]{2}==|[A-Za-z0-9+/]{3}=)?',
    _FLAGS
)
SLUG_PATTERN = re.compile(r'[a-z0-9]+(?:-[a-z0-9]+)*', _FLAGS)


def _matches(pattern: Pattern[str], value: Any) -> bool:
    if not isinstance(value, str):
        return False
    return pattern.fullmatch(value) is not None


def is_email(value: str) -> bool:
    """Validate email address format."""
    return _matches(EMAIL_PATTERN, value)


def is_url(value: str) -> bool:
    """Validate an http, https or ftp URL."""
    return _matches(URL_PATTERN, value)


def is_phone_number(value: str) -> bool:
    """Validate phone number format (loose international pattern)."""
    return _matches(PHONE_PATTERN, value)


def is_hex(value: str) -> bool:
    return _matches(HEX_PATTERN, value)


def is_hex_color(value: str) -> bool:
    """Validate a #rgb or #rrggbb color."""
    return _matches(HEX_COLOR_PATTERN, value)


def is_ipv4(value: str) -> bool:
    return _matches(IPV4_PATTERN, value)


def is_ipv6(value: str) -> bool:
    return _matches(IPV6_PATTERN, value)


def is_mac_address(value: str) -> bool:
    return _matches(MAC_PATTERN, value)


def is_uuid(value: str) -> bool:
    return _matches(UUID_PATTERN, value)


def is_credit_card(value: str) -> bool:
    """
    Validate a card number against brand prefix and length patterns.
    No Luhn check is made and separators are not stripped.
    """
    return _matches(CREDIT_CARD_PATTERN, value)


def is_domain(value: str) -> bool:
    return _matches(DOMAIN_PATTERN, value)


def is_postal_code(value: str) -> bool:
    """Loose postal code check: 3-10 letters, digits, spaces or hyphens."""
    return _matches(POSTAL_CODE_PATTERN, value)


def is_iso_date(value: str) -> bool:
    """Validate a YYYY-MM-DD date."""
    return _matches(ISO_DATE_PATTERN, value)


def is_base64(value: str) -> bool:
    """Validate padded Base64 in groups of four characters."""
    return _matches(BASE64_PATTERN, value)


def is_slug(value: str) -> bool:
    """Validate a lowercase, hyphen-separated slug."""
    return _matches(SLUG_PATTERN, value)
