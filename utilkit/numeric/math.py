"""
Numeric helpers for utilkit.
Provides random integers, percentages, rounding, formatting and simple
statistics over number sequences.
"""

import math
import random
from decimal import Decimal, ROUND_HALF_UP, localcontext
from typing import Sequence, Union

Number = Union[int, float]


def rand(n: int, m: int = 0) -> int:
    """Random integer between n and m inclusive, in either order."""
    low, high = (n, m) if n <= m else (m, n)
    return random.randint(low, high)


def _to_fixed(value: Number, places: int) -> float:
    """Round half-up to `places` decimals. Non-finite values pass through."""
    if not math.isfinite(value):
        return float(value)

    places = max(places, 0)
    exact = Decimal(value)
    with localcontext() as ctx:
        # Room for every integer digit plus the requested decimals
        ctx.prec = max(exact.adjusted(), 0) + places + 2
        return float(exact.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP))


def percentage(value: Number, max_value: Number, decimal_places: int = 2) -> float:
    """
    Percentage of `value` relative to `max_value`, rounded to `decimal_places`.

    Returns 0 when `max_value` is 0.
    """
    if max_value == 0:
        return 0
    return _to_fixed(value / max_value * 100, decimal_places)


def clamp(num: Number, low: Number, high: Number) -> Number:
    return min(max(num, low), high)


def format_number(num: Number) -> str:
    """
    Format a number with comma thousands separators.

    Example:
        >>> format_number(-1234567.5)
        '-1,234,567.5'
    """
    if isinstance(num, float) and num.is_integer():
        num = int(num)
    text = str(num)
    if 'e' in text or 'n' in text:
        return text

    sign = '-' if text.startswith('-') else ''
    whole, _, fraction = text.lstrip('-').partition('.')
    grouped = f"{int(whole):,}"
    return f"{sign}{grouped}.{fraction}" if fraction else f"{sign}{grouped}"


def total(numbers: Sequence[Number]) -> Number:
    return sum(numbers, 0)


def average(numbers: Sequence[Number]) -> Number:
    if not numbers:
        return 0
    return total(numbers) / len(numbers)


def median(numbers: Sequence[Number]) -> Number:
    """Median of a sequence, 0 when empty. The input is not reordered."""
    if not numbers:
        return 0
    ordered = sorted(numbers)
    mid = len(ordered) // 2
    if len(ordered) % 2:
        return ordered[mid]
    return (ordered[mid - 1] + ordered[mid]) / 2


def minimum(numbers: Sequence[Number]) -> Number:
    """Smallest value, or +inf for an empty sequence."""
    return min(numbers, default=math.inf)


def maximum(numbers: Sequence[Number]) -> Number:
    """Largest value, or -inf for an empty sequence."""
    return max(numbers, default=-math.inf)


def round_to(value: Number, decimals: int = 0) -> float:
    """
    Round to `decimals` places, halves going toward +inf.

    The scaling is done in binary floating point, so round_to(1.005, 2)
    gives 1.0 and round_to(-1.5) gives -1.0.
    """
    factor = 10 ** decimals
    return math.floor(value * factor + 0.5) / factor
