"""
Shared types for utilkit helpers.
"""

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Dict, Generic, Optional, TypeVar

from .errors import ValidationError

T = TypeVar('T')


class ValueCategory(str, Enum):
    """Closed set of value categories recognised by the type helpers."""
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    NIL = "nil"
    DATE = "date"
    SEQUENCE = "sequence"
    SET = "set"
    MAPPING = "mapping"
    OBJECT = "object"


class PadDirection(str, Enum):
    """Which side of a string receives padding."""
    LEFT = "left"
    RIGHT = "right"
    BOTH = "both"


class SortOrder(str, Enum):
    """Sort direction for sort_by."""
    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True)
class RGB:
    """An RGB color with 0-255 channels."""
    r: int
    g: int
    b: int

    def as_dict(self) -> Dict[str, int]:
        return asdict(self)


@dataclass
class RetryOptions:
    """Retry configuration. Delay is in milliseconds."""
    retries: int = 3
    delay: float = 1000
    backoff: bool = False

    def __post_init__(self):
        if self.retries < 0:
            raise ValidationError("retries must be >= 0", field="retries", value=self.retries)
        if self.delay < 0:
            raise ValidationError("delay must be >= 0", field="delay", value=self.delay)

    def wait_for(self, attempt: int) -> float:
        """Delay in milliseconds after the given zero-based failed attempt."""
        if self.backoff:
            return self.delay * (2 ** attempt)
        return self.delay


@dataclass
class CatchResult(Generic[T]):
    """Outcome of catch_error: either data or the caught error."""
    ok: bool
    data: Optional[T] = None
    error: Optional[BaseException] = None

    def to_dict(self) -> Dict[str, Any]:
        if self.ok:
            return {'ok': True, 'data': self.data}
        return {'ok': False, 'error': self.error}
