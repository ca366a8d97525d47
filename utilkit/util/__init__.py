# Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
# All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
# See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
# Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.

"""
Util package providing validators, type predicates and small helpers.

This package includes:
- Regular-expression validators for common string formats
- Runtime type predicates and value categorization
- Time parsing and formatting
- Random IDs, string hashing, URL query and media type helpers
"""

from .validation import (
    is_email, is_url, is_phone_number, is_hex, is_hex_color, is_ipv4, is_ipv6,
    is_mac_address, is_uuid, is_credit_card, is_domain, is_postal_code,
    is_iso_date, is_base64, is_slug, is_json
)
from .typecheck import (
    categorize, is_primitive, is_object, is_array, is_function, is_date,
    is_number, is_string, is_boolean, is_nil, is_regex, is_empty
)
from .time import format_time, format_duration, to_seconds
from .ids import generate_id, hash_string
from .url import get_query_params, update_query_param, remove_query_param, build_url
from .media import SUPPORTED_DISPLAYABLE_MEDIA_TYPES, is_supported_displayable_media

__all__ = [
    # Validation
    'is_email', 'is_url', 'is_phone_number', 'is_hex', 'is_hex_color',
    'is_ipv4', 'is_ipv6', 'is_mac_address', 'is_uuid', 'is_credit_card',
    'is_domain', 'is_postal_code', 'is_iso_date', 'is_base64', 'is_slug',
    'is_json',

    # Type checks
    'categorize', 'is_primitive', 'is_object', 'is_array', 'is_function',
    'is_date', 'is_number', 'is_string', 'is_boolean', 'is_nil', 'is_regex',
    'is_empty',

    # Time
    'format_time', 'format_duration', 'to_seconds',

    # IDs and hashing
    'generate_id', 'hash_string',

    # URLs
    'get_query_params', 'update_query_param', 'remove_query_param', 'build_url',

    # Media
    'SUPPORTED_DISPLAYABLE_MEDIA_TYPES', 'is_supported_displayable_media'
]
