"""
Object utilities for utilkit.
Provides key selection, deep merge, dot-path flattening and structural diff
for plain dicts.
"""

from typing import Any, Dict, Iterable, Mapping

from ..util.typecheck import is_object
from .equality import is_equal

_MISSING = object()


def pick(obj: Mapping[str, Any], keys: Iterable[str]) -> Dict[str, Any]:
    """
    Create a new dict with only the given keys.

    Example:
        >>> pick({'a': 1, 'b': 2, 'c': 3}, ['a', 'c'])
        {'a': 1, 'c': 3}
    """
    return {key: obj[key] for key in keys if key in obj}


def omit(obj: Mapping[str, Any], keys: Iterable[str]) -> Dict[str, Any]:
    """Create a new dict without the given keys."""
    excluded = set(keys)
    return {key: value for key, value in obj.items() if key not in excluded}


def merge(*mappings: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Deep merge dicts, later values overriding earlier ones.

    Nested plain dicts are merged recursively. Any other value, lists
    included, replaces the earlier value wholesale. Sources are not modified.

    Example:
        >>> merge({'a': 1, 'b': {'c': 2}}, {'b': {'d': 3}})
        {'a': 1, 'b': {'c': 2, 'd': 3}}
    """
    result: Dict[str, Any] = {}
    for mapping in mappings:
        for key, value in mapping.items():
            if is_object(value) and is_object(result.get(key)):
                result[key] = merge(result[key], value)
            else:
                result[key] = value
    return result


def flatten_object(obj: Mapping[str, Any], prefix: str = '') -> Dict[str, Any]:
    """
    Flatten nested dicts into a single level with dot-separated keys.

    Example:
        >>> flatten_object({'a': {'b': 1, 'c': {'d': 2}}})
        {'a.b': 1, 'a.c.d': 2}
    """
    result: Dict[str, Any] = {}
    for key, value in obj.items():
        full_key = f"{prefix}.{key}" if prefix else key
        if is_object(value):
            result.update(flatten_object(value, full_key))
        else:
            result[full_key] = value
    return result


def unflatten_object(obj: Mapping[str, Any]) -> Dict[str, Any]:
    """Rebuild nested dicts from dot-separated keys."""
    result: Dict[str, Any] = {}
    for key, value in obj.items():
        parts = key.split('.')
        current = result
        for part in parts[:-1]:
            if not is_object(current.get(part)):
                # A scalar already stored on the path is overwritten
                current[part] = {}
            current = current[part]
        current[parts[-1]] = value
    return result


def diff(a: Mapping[str, Any], b: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Return the values of `b` that differ from `a`.

    Nested dicts are compared recursively and only their differing keys are
    returned. Differing lists and scalars are returned whole. Keys missing
    from `b` are reported with the value None.

    Example:
        >>> diff({'a': 1, 'b': {'c': 2, 'd': 3}}, {'a': 1, 'b': {'c': 5, 'd': 3}})
        {'b': {'c': 5}}
    """
    result: Dict[str, Any] = {}
    keys = list(a) + [key for key in b if key not in a]

    for key in keys:
        value_a = a.get(key, _MISSING)
        value_b = b.get(key, _MISSING)

        if value_b is _MISSING:
            result[key] = None
            continue
        if value_a is not _MISSING and is_equal(value_a, value_b):
            continue

        if is_object(value_a) and is_object(value_b):
            nested = diff(value_a, value_b)
            if nested:
                result[key] = nested
        else:
            result[key] = value_b

    return result
