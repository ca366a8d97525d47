"""
Normalization of semantically empty values.
"""

import logging
import math
from typing import Any, Callable, Dict, Optional

from ..core.types import ValueCategory
from ..util.typecheck import categorize

logger = logging.getLogger(__name__)


def _keep(value: Any) -> Any:
    return value


def _string(value: str) -> Optional[str]:
    return None if value == '' else value


def _number(value: Any) -> Any:
    if isinstance(value, float) and math.isnan(value):
        return None
    return value


def _sized(value: Any) -> Any:
    return None if len(value) == 0 else value


_HANDLERS: Dict[ValueCategory, Callable[[Any], Any]] = {
    ValueCategory.NIL: lambda value: None,
    ValueCategory.STRING: _string,
    ValueCategory.NUMBER: _number,
    ValueCategory.BOOLEAN: _keep,
    ValueCategory.DATE: _keep,
    ValueCategory.SEQUENCE: _sized,
    ValueCategory.SET: _sized,
    ValueCategory.MAPPING: _sized,
    ValueCategory.OBJECT: _keep,
}


def normalize(value: Any) -> Any:
    """
    Map semantically empty values to None.

    "", NaN, None and empty sequences, sets and mappings become None.
    Everything else is returned unchanged, including 0, False, whitespace
    strings and infinities.
    """
    category = categorize(value)
    handler = _HANDLERS.get(category, _keep)
    normalized = handler(value)
    if normalized is None and value is not None:
        logger.debug(f"Normalized empty {category.value} value to None")
    return normalized
