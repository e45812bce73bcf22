"""Base classes for domain layer."""

from abc import ABC
from dataclasses import dataclass


@dataclass(frozen=True)
class ValueObject(ABC):
    """Base class for value objects.

    Value objects are immutable and compared by their attributes,
    not by identity. State changes produce new instances.

    Example:
        @dataclass(frozen=True)
        class PriceRange(ValueObject):
            min: float
            max: float
    """

    pass
