"""
Deep copy and structural equality.
"""

import copy
from collections.abc import Mapping
from typing import Any, Set, Tuple, TypeVar

from ..util.typecheck import is_array

T = TypeVar('T')


def clone(value: T) -> T:
    """Return a deep copy of a value."""
    return copy.deepcopy(value)


def is_equal(a: Any, b: Any) -> bool:
    """
    Compare two values for deep structural equality.

    Sequences are compared element by element and mappings key by key;
    other values fall back to ``==``. Booleans never equal numbers.

    Self-referential structures are supported: a pair of containers already
    under comparison is treated as equal, so cycles terminate instead of
    recursing forever.
    """
    return _equal(a, b, set())


def _equal(a: Any, b: Any, seen: Set[Tuple[int, int]]) -> bool:
    if a is b:
        return True
    if a is None or b is None:
        return False
    if isinstance(a, bool) or isinstance(b, bool):
        return type(a) is type(b) and a == b

    if is_array(a) and is_array(b):
        pair = (id(a), id(b))
        if pair in seen:
            return True
        seen.add(pair)
        if len(a) != len(b):
            return False
        return all(_equal(x, y, seen) for x, y in zip(a, b))

    if isinstance(a, Mapping) and isinstance(b, Mapping):
        pair = (id(a), id(b))
        if pair in seen:
            return True
        seen.add(pair)
        if len(a) != len(b):
            return False
        return all(key in b and _equal(a[key], b[key], seen) for key in a)

    if is_array(a) or is_array(b) or isinstance(a, Mapping) or isinstance(b, Mapping):
        return False
    return a == b
