"""Catalog browsing service.

Combines the category tree, facet filtering, sorting and the visible
window into the pipeline a storefront product listing runs, and the
per-session controller that owns the facet state around it.
"""

from collections.abc import Callable, Iterable, Sequence

import structlog

from storefront.catalog.brands import BrandCatalog
from storefront.catalog.debounce import DebounceCoordinator
from storefront.catalog.filters import filter_products
from storefront.catalog.models import Category, Product, filter_active_products
from storefront.catalog.pagination import ResultWindow, paginate
from storefront.catalog.sorting import sort_products
from storefront.catalog.taxonomy import CategoryTreeCache, expand_category_selection
from storefront.domain.facets import FacetState, SortOption
from storefront.infrastructure.config import Settings, settings as default_settings

logger = structlog.get_logger()

ResultsListener = Callable[[ResultWindow[Product]], None]


def compute_results(
    products: Sequence[Product],
    categories: Sequence[Category],
    state: FacetState,
    brand_catalog: BrandCatalog | None = None,
) -> ResultWindow[Product]:
    """Run filter, sort and pagination over a product list.

    Pure function of its arguments.

    Args:
        products: Products in catalog order.
        categories: Flat categories, used to resolve the slug quick filter.
        state: Facet state to apply.
        brand_catalog: Brand table for the brand facet.

    Returns:
        Visible window over the sorted, filtered products.
    """
    filtered = filter_products(products, state, categories, brand_catalog)
    ordered = sort_products(filtered, state.sort)
    return paginate(ordered, state.visible_count)


class CatalogBrowser:
    """Facet state controller for one browsing session.

    Holds the current FacetState and the last computed window. Facet
    changes are debounced: the new state is stored at once, the window
    is recomputed once the changes settle. "Load more" is applied
    immediately.

    Example usage:
        browser = CatalogBrowser(products, categories, on_results=render)
        browser.select_categories(["clothing"])
        browser.toggle_brand("Nike")
        ...
        browser.load_more()
        browser.dispose()
    """

    def __init__(
        self,
        products: Iterable[Product],
        categories: Iterable[Category],
        state: FacetState | None = None,
        settings: Settings | None = None,
        brand_catalog: BrandCatalog | None = None,
        on_results: ResultsListener | None = None,
        coordinator: DebounceCoordinator | None = None,
    ) -> None:
        """Initialize browser and compute the first window synchronously.

        Args:
            products: Catalog products. Unlisted ones are dropped.
            categories: Flat category list.
            state: Starting facet state. Built from settings when omitted.
            settings: Engine settings.
            brand_catalog: Brand table. Built from settings when omitted.
            on_results: Called with every newly computed window.
            coordinator: Debounce coordinator. Built from settings when omitted.
        """
        self.settings = settings or default_settings
        self.brand_catalog = brand_catalog or BrandCatalog.from_settings(self.settings)
        self.coordinator = coordinator or DebounceCoordinator(self.settings.settle_delay_seconds)
        self._on_results = on_results
        self._tree_cache = CategoryTreeCache()
        self._products = filter_active_products(products)
        self._categories = list(categories)
        self._state = state or FacetState.initial(
            page_size=self.settings.page_size,
            price_ceiling=self.settings.price_ceiling,
        )
        self._results: ResultWindow[Product] = self._compute()

    # ------------------------------------------------------------------
    # Read side
    # ------------------------------------------------------------------

    @property
    def state(self) -> FacetState:
        """Get the current facet state."""
        return self._state

    @property
    def results(self) -> ResultWindow[Product]:
        """Get the last computed window."""
        return self._results

    @property
    def is_computing(self) -> bool:
        """Check whether a debounced recompute is pending."""
        return self.coordinator.is_computing

    @property
    def has_active_filters(self) -> bool:
        """Check whether any facet differs from its default."""
        return self._state.has_active_filters

    @property
    def category_tree(self) -> list[Category]:
        """Get the (memoized) category tree."""
        return self._tree_cache.get(self._categories)

    @property
    def available_brands(self) -> list[str]:
        """Get the brands present in the catalog, sorted."""
        return self.brand_catalog.available_brands(self._products)

    # ------------------------------------------------------------------
    # State transitions
    # ------------------------------------------------------------------

    def apply(self, state: FacetState) -> None:
        """Replace the facet state and schedule a debounced recompute.

        Args:
            state: New facet state.
        """
        # Scheduling may fail (no running loop, disposed); keep the old state then
        self.coordinator.schedule(self.refresh)
        self._state = state

    def select_categories(self, category_ids: Iterable[str]) -> None:
        """Select categories, including everything nested under them.

        Args:
            category_ids: Ids picked by the shopper.
        """
        expanded = expand_category_selection(self.category_tree, category_ids)
        self.apply(self._state.with_categories(expanded))

    def select_category_slug(self, slug: str | None) -> None:
        """Set or clear the single-category quick filter."""
        self.apply(self._state.with_category_slug(slug))

    def toggle_brand(self, brand: str) -> None:
        """Select or deselect a brand."""
        self.apply(self._state.with_brand_toggled(brand))

    def set_price_range(self, min_price: float, max_price: float) -> None:
        """Change the selected price interval."""
        self.apply(self._state.with_price_range(min_price, max_price))

    def set_min_rating(self, min_rating: float | None) -> None:
        """Set or clear the rating threshold."""
        self.apply(self._state.with_min_rating(min_rating))

    def set_in_stock_only(self, in_stock_only: bool) -> None:
        """Toggle the in-stock restriction."""
        self.apply(self._state.with_in_stock_only(in_stock_only))

    def set_search(self, search: str) -> None:
        """Change the search text."""
        self.apply(self._state.with_search(search))

    def set_sort(self, sort: str | SortOption) -> None:
        """Change the result ordering."""
        self.apply(self._state.with_sort(sort))

    def clear_all_filters(self) -> None:
        """Reset all facets and the sort order, keeping the window size."""
        self.apply(self._state.cleared())

    def load_more(self) -> ResultWindow[Product]:
        """Grow the visible window by one page and recompute now.

        Returns:
            The new window.
        """
        self.coordinator.cancel()
        self._state = self._state.with_more_visible()
        return self.refresh()

    # ------------------------------------------------------------------
    # Catalog updates
    # ------------------------------------------------------------------

    def set_products(self, products: Iterable[Product]) -> ResultWindow[Product]:
        """Replace the catalog products and recompute now."""
        self.coordinator.cancel()
        self._products = filter_active_products(products)
        return self.refresh()

    def set_categories(self, categories: Iterable[Category]) -> ResultWindow[Product]:
        """Replace the category list and recompute now."""
        self.coordinator.cancel()
        self._categories = list(categories)
        return self.refresh()

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def refresh(self) -> ResultWindow[Product]:
        """Recompute the window for the current state synchronously.

        Returns:
            The new window.
        """
        if self.coordinator.disposed:
            return self._results
        self._results = self._compute()
        if self._on_results is not None:
            self._on_results(self._results)
        return self._results

    def dispose(self) -> None:
        """Cancel pending recomputes. Must be called on teardown."""
        self.coordinator.dispose()

    def _compute(self) -> ResultWindow[Product]:
        results = compute_results(
            self._products,
            self._categories,
            self._state,
            self.brand_catalog,
        )
        logger.debug(
            "Results computed",
            total=results.total,
            visible=len(results.items),
            has_more=results.has_more,
            sort=self._state.sort.value,
        )
        return results
