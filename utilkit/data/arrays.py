"""
Array utilities for utilkit.
Provides de-duplication, chunking, grouping, set-style and ordering helpers
over sequences. No function here mutates its input.
"""

import random
from typing import Any, Callable, Dict, Hashable, List, Optional, Sequence, TypeVar, Union

from ..core.types import SortOrder

T = TypeVar('T')

KeyFunc = Callable[[Any], Any]
KeySpec = Union[str, KeyFunc]


def _token(key: Any) -> Any:
    # True and 1 hash alike; keep booleans apart from numbers
    if isinstance(key, bool):
        return (bool, key)
    return key


class _KeyIndex:
    """
    Ordered key lookup that accepts unhashable keys.

    Hashable keys go through a dict; anything else is compared by equality
    against a side list.
    """

    def __init__(self):
        self._hashed: Dict[Hashable, int] = {}
        self._unhashed: List[tuple] = []

    def get(self, key: Any) -> Optional[int]:
        token = _token(key)
        try:
            return self._hashed.get(token)
        except TypeError:
            for candidate, slot in self._unhashed:
                if candidate == token:
                    return slot
            return None

    def add(self, key: Any, slot: int) -> None:
        token = _token(key)
        try:
            self._hashed[token] = slot
        except TypeError:
            self._unhashed.append((token, slot))


def _key_getter(key: KeySpec) -> KeyFunc:
    if callable(key):
        return key

    def getter(item: Any) -> Any:
        if isinstance(item, dict):
            return item.get(key)
        return getattr(item, key, None)

    return getter


def has_duplicates(items: Sequence[T], key: Optional[KeyFunc] = None) -> bool:
    """
    Determine whether a sequence contains duplicate values.

    Args:
        items: Sequence to check
        key: Optional function deriving the comparison key from each item

    Example:
        >>> has_duplicates([{'id': 1}, {'id': 2}, {'id': 1}], key=lambda item: item['id'])
        True
    """
    index = _KeyIndex()
    for position, item in enumerate(items):
        value = key(item) if key else item
        if index.get(value) is not None:
            return True
        index.add(value, position)
    return False


def unique_array(items: Sequence[T], key: Optional[KeyFunc] = None) -> List[T]:
    """
    Return the unique elements of a sequence.

    Each key keeps the position of its first occurrence; when several items
    share a key the last one wins.
    """
    index = _KeyIndex()
    result: List[T] = []
    for item in items:
        value = key(item) if key else item
        slot = index.get(value)
        if slot is None:
            index.add(value, len(result))
            result.append(item)
        else:
            result[slot] = item
    return result


def chunk(items: Sequence[T], size: int) -> List[List[T]]:
    """Split a sequence into lists of `size` items; the last may be shorter."""
    if size <= 0:
        return []
    return [list(items[i:i + size]) for i in range(0, len(items), size)]


def shuffle(items: Sequence[T]) -> List[T]:
    """Return a shuffled copy of the sequence."""
    result = list(items)
    random.shuffle(result)
    return result


def group_by(items: Sequence[T], key: KeySpec) -> Dict[str, List[T]]:
    """
    Group items by a field name, attribute name or key function.

    Labels are always strings.

    Example:
        >>> group_by([{'type': 'a', 'v': 1}, {'type': 'b', 'v': 2}], 'type')
        {'a': [{'type': 'a', 'v': 1}], 'b': [{'type': 'b', 'v': 2}]}
    """
    getter = _key_getter(key)
    groups: Dict[str, List[T]] = {}
    for item in items:
        groups.setdefault(str(getter(item)), []).append(item)
    return groups


def intersection(*sequences: Sequence[T]) -> List[T]:
    """Elements of the first sequence present in every other sequence."""
    if not sequences:
        return []
    result = list(sequences[0])
    for other in sequences[1:]:
        result = [item for item in result if item in other]
    return result


def difference(a: Sequence[T], b: Sequence[T]) -> List[T]:
    """Elements of `a` not found in `b`."""
    return [item for item in a if item not in b]


def range_list(start: Union[int, float], end: Union[int, float],
               step: Union[int, float] = 1) -> List[Union[int, float]]:
    """
    Numbers from `start` up to, but excluding, `end`.

    A non-positive step yields an empty list. Float bounds and steps are
    accepted, unlike the built-in range().
    """
    if step <= 0:
        return []
    result = []
    current = start
    while current < end:
        result.append(current)
        current += step
    return result


def sort_by(items: Sequence[T], key: KeySpec,
            order: Union[SortOrder, str] = SortOrder.ASC) -> List[T]:
    """
    Return a new list sorted by a field name or key function. The sort is stable.

    Items whose key is None, including items lacking the field, go last in
    their original order whatever the direction.
    """
    getter = _key_getter(key)
    descending = SortOrder(order) is SortOrder.DESC
    present = [item for item in items if getter(item) is not None]
    missing = [item for item in items if getter(item) is None]
    return sorted(present, key=getter, reverse=descending) + missing


def compact(items: Sequence[Any]) -> List[Any]:
    """Drop falsy values."""
    return [item for item in items if item]


def last(items: Sequence[T]) -> Optional[T]:
    return items[-1] if items else None


def sample(items: Sequence[T]) -> Optional[T]:
    """Return a random element, or None for an empty sequence."""
    if not items:
        return None
    return random.choice(items)
