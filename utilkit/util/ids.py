"""
Identifier generation and lightweight hashing.
"""

import secrets
import string

ID_ALPHABET = string.ascii_uppercase + string.ascii_lowercase + string.digits


def generate_id(length: int = 16) -> str:
    """Generate a random alphanumeric ID."""
    return ''.join(secrets.choice(ID_ALPHABET) for _ in range(max(length, 0)))


def hash_string(text: str) -> int:
    """
    Non-cryptographic djb2 hash as an unsigned 32-bit integer.

    The hash runs over UTF-16 code units so that it agrees with
    implementations working on JavaScript-style strings.
    """
    data = text.encode('utf-16-le', 'surrogatepass')
    h = 5381
    for i in range(0, len(data), 2):
        unit = data[i] | (data[i + 1] << 8)
        h = ((h << 5) + h + unit) & 0xFFFFFFFF
    return h
