"""
Runtime type predicates.

categorize() maps any value onto the closed ValueCategory set; the other
helpers answer narrower questions about a single category.
"""

import json
import math
import re
from collections.abc import Mapping
from datetime import date
from typing import Any

from ..core.types import ValueCategory

_PRIMITIVE_TYPES = (str, bytes, int, float, complex, bool, type(None))


def categorize(value: Any) -> ValueCategory:
    """Classify a value into one of the recognised categories."""
    if value is None:
        return ValueCategory.NIL
    if isinstance(value, bool):
        return ValueCategory.BOOLEAN
    if isinstance(value, (int, float)):
        return ValueCategory.NUMBER
    if isinstance(value, str):
        return ValueCategory.STRING
    if isinstance(value, date):
        return ValueCategory.DATE
    if isinstance(value, (list, tuple)):
        return ValueCategory.SEQUENCE
    if isinstance(value, (set, frozenset)):
        return ValueCategory.SET
    if isinstance(value, Mapping):
        return ValueCategory.MAPPING
    return ValueCategory.OBJECT


def is_primitive(value: Any) -> bool:
    """True for None, bools, numbers, strings and bytes."""
    return isinstance(value, _PRIMITIVE_TYPES)


def is_object(value: Any) -> bool:
    """True only for plain dicts, not for dict subclasses or other mappings."""
    return type(value) is dict


def is_array(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def is_function(value: Any) -> bool:
    return callable(value)


def is_date(value: Any) -> bool:
    return isinstance(value, date)


def is_number(value: Any) -> bool:
    """True for finite ints and floats; bools are not numbers here."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def is_string(value: Any) -> bool:
    return isinstance(value, str)


def is_boolean(value: Any) -> bool:
    return isinstance(value, bool)


def is_nil(value: Any) -> bool:
    return value is None


def is_regex(value: Any) -> bool:
    return isinstance(value, re.Pattern)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def is_json(value: Any) -> bool:
    """Check whether a string parses as JSON. Non-strings are never JSON."""
    if not isinstance(value, str):
        return False
    try:
        json.loads(value, parse_constant=_reject_constant)
        return True
    except (ValueError, RecursionError):
        return False


def is_empty(value: Any) -> bool:
    """
    Check whether a value is empty.

    None, zero-length strings/sequences and key-less plain dicts are empty.
    Everything else, including 0 and False, is not.
    """
    if is_nil(value):
        return True
    if is_string(value) or is_array(value):
        return len(value) == 0
    if is_object(value):
        return len(value) == 0
    return False
