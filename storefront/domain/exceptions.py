"""Domain exceptions.

Errors raised when a value object is constructed with values that
violate its invariants, or when a component is misused. Degenerate
catalog data (dangling references, cycles, missing attributes) is
never reported through these; it is absorbed by the engine.
"""

from typing import Any


class DomainError(Exception):
    """Base class for all domain exceptions.

    All domain errors should inherit from this class to allow
    catching engine errors at the hosting layer.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """Initialize domain error.

        Args:
            message: Human-readable error message.
            details: Optional dictionary with additional error context.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


# ============================================================================
# Facet State Errors
# ============================================================================


class InvalidFacetStateError(DomainError):
    """Raised when a facet state field holds an out-of-range value."""

    def __init__(self, field: str, value: Any, reason: str) -> None:
        """Initialize invalid facet state error.

        Args:
            field: Name of the offending field.
            value: Rejected value.
            reason: Why the value is rejected.
        """
        super().__init__(
            f"Invalid value for {field}: {value!r} ({reason})",
            details={"field": field, "value": value, "reason": reason},
        )


class InvalidPriceRangeError(InvalidFacetStateError):
    """Raised when a price range is negative or inverted."""

    def __init__(self, min_price: float, max_price: float) -> None:
        """Initialize invalid price range error.

        Args:
            min_price: Lower bound.
            max_price: Upper bound.
        """
        super().__init__(
            "price_range",
            (min_price, max_price),
            "bounds must be non-negative and min must not exceed max",
        )


class InvalidSortOptionError(DomainError):
    """Raised when a sort key is not one of the supported options."""

    def __init__(self, value: str, allowed: list[str]) -> None:
        """Initialize invalid sort option error.

        Args:
            value: Rejected sort key.
            allowed: Supported sort keys.
        """
        super().__init__(
            f"Unknown sort option {value!r}. Allowed options: {allowed}",
            details={"value": value, "allowed": allowed},
        )


# ============================================================================
# Scheduling Errors
# ============================================================================


class CoordinatorDisposedError(DomainError):
    """Raised when work is scheduled on a disposed debounce coordinator."""

    def __init__(self) -> None:
        """Initialize coordinator disposed error."""
        super().__init__("Cannot schedule a recompute after dispose()")
