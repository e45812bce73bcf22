"""Domain layer - value objects and exceptions.

- **Value Objects**: Immutable facet configuration (FacetState, PriceRange, SortOption)
- **Exceptions**: Invariant violations raised at construction boundaries

Example usage:
    from storefront.domain import FacetState, SortOption

    state = FacetState.initial(page_size=12)
    state = state.with_brand_toggled("Nike").with_sort(SortOption.PRICE_ASCENDING)
    state.has_active_filters  # True
"""

from storefront.domain.base import ValueObject
from storefront.domain.exceptions import (
    CoordinatorDisposedError,
    DomainError,
    InvalidFacetStateError,
    InvalidPriceRangeError,
    InvalidSortOptionError,
)
from storefront.domain.facets import DEFAULT_PAGE_SIZE, FacetState, PriceRange, SortOption

__all__ = [
    # Base
    "ValueObject",
    # Value Objects
    "DEFAULT_PAGE_SIZE",
    "FacetState",
    "PriceRange",
    "SortOption",
    # Exceptions
    "CoordinatorDisposedError",
    "DomainError",
    "InvalidFacetStateError",
    "InvalidPriceRangeError",
    "InvalidSortOptionError",
]
