# Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
# All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
# See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
# Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.

"""
Data package providing sequence and mapping utilities.

This package includes:
- Array helpers: de-duplication, chunking, grouping and ordering
- Object helpers: pick/omit, deep merge, flattening and diff
- Deep copy and structural equality
- Normalization of empty values
"""

from .arrays import (
    has_duplicates, unique_array, chunk, shuffle, group_by, intersection,
    difference, range_list, sort_by, compact, last, sample
)
from .objects import (
    pick, omit, merge, flatten_object, unflatten_object, diff
)
from .equality import clone, is_equal
from .normalize import normalize

__all__ = [
    # Arrays
    'has_duplicates', 'unique_array', 'chunk', 'shuffle', 'group_by',
    'intersection', 'difference', 'range_list', 'sort_by', 'compact', 'last',
    'sample',

    # Objects
    'pick', 'omit', 'merge', 'flatten_object', 'unflatten_object', 'diff',

    # Equality
    'clone', 'is_equal',

    # Normalization
    'normalize'
]
