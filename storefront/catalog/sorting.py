"""Result ordering."""

from collections.abc import Sequence

from storefront.catalog.models import Product
from storefront.domain.facets import SortOption


def sort_products(products: Sequence[Product], sort: str | SortOption) -> list[Product]:
    """Return a reordered copy of a product list.

    Price and rating orderings are stable: equal keys keep their input
    order, for descending orderings too. NEWEST reverses the list.

    Args:
        products: Filtered products.
        sort: Sort key.

    Returns:
        New list in the requested order.

    Raises:
        InvalidSortOptionError: If the sort key is not supported.
    """
    option = SortOption.parse(sort)

    if option == SortOption.PRICE_ASCENDING:
        return sorted(products, key=lambda p: p.price)
    if option == SortOption.PRICE_DESCENDING:
        return sorted(products, key=lambda p: p.price, reverse=True)
    if option == SortOption.RATING_DESCENDING:
        return sorted(products, key=lambda p: p.effective_rating, reverse=True)
    if option == SortOption.NEWEST:
        return list(reversed(products))

    # Featured keeps catalog order
    return list(products)
