"""Facet state value objects.

A browsing session's whole filter / sort / pagination configuration
is one immutable FacetState. Hosts never mutate it; every transition
returns a new instance which is then fed to the pure pipeline.
"""

import math
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Iterable, Self

from storefront.domain.base import ValueObject
from storefront.domain.exceptions import (
    InvalidFacetStateError,
    InvalidPriceRangeError,
    InvalidSortOptionError,
)

DEFAULT_PAGE_SIZE = 12


class SortOption(str, Enum):
    """Supported result orderings.

    NEWEST reverses the current order. Products carry no timestamp,
    so catalog position stands in for recency.
    """

    FEATURED = "featured"
    PRICE_ASCENDING = "price-asc"
    PRICE_DESCENDING = "price-desc"
    NEWEST = "newest"
    RATING_DESCENDING = "rating"

    @classmethod
    def parse(cls, value: "str | SortOption") -> "SortOption":
        """Coerce a raw sort key into a SortOption.

        Args:
            value: Sort key string or SortOption.

        Returns:
            Matching SortOption.

        Raises:
            InvalidSortOptionError: If the key is not supported.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise InvalidSortOptionError(str(value), [o.value for o in cls]) from None


@dataclass(frozen=True)
class PriceRange(ValueObject):
    """Inclusive price interval.

    Attributes:
        min: Lower bound (inclusive).
        max: Upper bound (inclusive), may be infinite.
    """

    min: float = 0.0
    max: float = math.inf

    def __post_init__(self) -> None:
        """Validate price range constraints."""
        if self.min < 0 or self.max < 0 or self.min > self.max:
            raise InvalidPriceRangeError(self.min, self.max)

    def contains(self, price: float) -> bool:
        """Check whether a price falls inside the range.

        Args:
            price: Price to test.

        Returns:
            True if min <= price <= max.
        """
        return self.min <= price <= self.max


@dataclass(frozen=True)
class FacetState(ValueObject):
    """Current filter, sort and pagination configuration.

    Attributes:
        category_ids: Selected category ids, already descendant-expanded.
        category_slug: Optional single-category quick filter by slug.
        price_range: Selected price interval.
        price_bounds: Full price interval restored by cleared().
        brands: Selected brand names.
        min_rating: Minimum rating threshold, None when unset.
        in_stock_only: Restrict results to in-stock products.
        search: Free-text search string.
        sort: Result ordering.
        visible_count: Size of the visible result prefix.
        page_size: Increment applied by with_more_visible().
    """

    category_ids: frozenset[str] = frozenset()
    category_slug: str | None = None
    price_range: PriceRange = field(default_factory=PriceRange)
    price_bounds: PriceRange = field(default_factory=PriceRange)
    brands: frozenset[str] = frozenset()
    min_rating: float | None = None
    in_stock_only: bool = False
    search: str = ""
    sort: SortOption = SortOption.FEATURED
    visible_count: int = DEFAULT_PAGE_SIZE
    page_size: int = DEFAULT_PAGE_SIZE

    def __post_init__(self) -> None:
        """Validate and normalize facet state."""
        object.__setattr__(self, "category_ids", frozenset(self.category_ids))
        object.__setattr__(self, "brands", frozenset(self.brands))
        object.__setattr__(self, "sort", SortOption.parse(self.sort))
        if self.min_rating is not None and self.min_rating < 0:
            raise InvalidFacetStateError("min_rating", self.min_rating, "must be >= 0")
        if self.page_size < 1:
            raise InvalidFacetStateError("page_size", self.page_size, "must be >= 1")
        if self.visible_count < 0:
            raise InvalidFacetStateError("visible_count", self.visible_count, "must be >= 0")

    @classmethod
    def initial(
        cls,
        page_size: int = DEFAULT_PAGE_SIZE,
        price_ceiling: float = math.inf,
    ) -> Self:
        """Create the state a new browsing session starts from.

        Args:
            page_size: Window size and "load more" increment.
            price_ceiling: Upper bound of the full price range.

        Returns:
            FacetState with every facet inactive.
        """
        bounds = PriceRange(0.0, price_ceiling)
        return cls(
            price_range=bounds,
            price_bounds=bounds,
            visible_count=page_size,
            page_size=page_size,
        )

    @property
    def has_active_filters(self) -> bool:
        """Check whether any facet differs from its default.

        Sort order and window size are not facets.
        """
        return bool(
            self.category_ids
            or self.category_slug
            or self.brands
            or self.price_range != self.price_bounds
            or self.min_rating is not None
            or self.in_stock_only
            or self.search.strip()
        )

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def with_categories(self, category_ids: Iterable[str]) -> Self:
        """Replace the (expanded) category selection."""
        return replace(self, category_ids=frozenset(category_ids))

    def with_category_slug(self, slug: str | None) -> Self:
        """Set or clear the single-category quick filter."""
        return replace(self, category_slug=slug or None)

    def with_price_range(self, min_price: float, max_price: float) -> Self:
        """Replace the selected price interval."""
        return replace(self, price_range=PriceRange(min_price, max_price))

    def with_brands(self, brands: Iterable[str]) -> Self:
        """Replace the brand selection."""
        return replace(self, brands=frozenset(brands))

    def with_brand_toggled(self, brand: str) -> Self:
        """Add the brand if unselected, remove it otherwise."""
        return replace(self, brands=self.brands ^ {brand})

    def with_min_rating(self, min_rating: float | None) -> Self:
        """Set or clear the rating threshold."""
        return replace(self, min_rating=min_rating)

    def with_in_stock_only(self, in_stock_only: bool) -> Self:
        """Toggle the in-stock restriction."""
        return replace(self, in_stock_only=in_stock_only)

    def with_search(self, search: str) -> Self:
        """Replace the search text."""
        return replace(self, search=search)

    def with_sort(self, sort: "str | SortOption") -> Self:
        """Change the result ordering."""
        return replace(self, sort=SortOption.parse(sort))

    def with_more_visible(self) -> Self:
        """Grow the visible window by one page."""
        return replace(self, visible_count=self.visible_count + self.page_size)

    def cleared(self) -> Self:
        """Reset every facet and the sort order to defaults.

        The visible window is kept as is, so a session that has loaded
        extra pages keeps showing that many items.

        Returns:
            FacetState with no active facets and featured ordering.
        """
        return replace(
            self,
            category_ids=frozenset(),
            category_slug=None,
            price_range=self.price_bounds,
            brands=frozenset(),
            min_rating=None,
            in_stock_only=False,
            search="",
            sort=SortOption.FEATURED,
        )
