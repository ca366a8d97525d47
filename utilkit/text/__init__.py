# Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
# All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
# See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
# Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.

"""
Text package providing case conversion and string transforms.

This package includes:
- Case conversion built on a shared word splitter
- Truncation, slugs and HTML tag/entity helpers
- Padding, masking and other small string helpers
"""

from .case import (
    split_words, to_camel_case, to_pascal_case, to_snake_case, to_kebab_case,
    to_constant_case, to_title_case, to_sentence_case, toggle_case, capitalize
)
from .markup import (
    truncate, slugify, strip_tags, escape_html, unescape_html
)
from .strings import (
    reverse, count_occurrences, pad, mask, initials, word_count, is_blank
)

__all__ = [
    # Case conversion
    'split_words', 'to_camel_case', 'to_pascal_case', 'to_snake_case',
    'to_kebab_case', 'to_constant_case', 'to_title_case', 'to_sentence_case',
    'toggle_case', 'capitalize',

    # Markup
    'truncate', 'slugify', 'strip_tags', 'escape_html', 'unescape_html',

    # Strings
    'reverse', 'count_occurrences', 'pad', 'mask', 'initials', 'word_count',
    'is_blank'
]
