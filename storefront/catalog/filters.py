"""Facet filtering.

Each facet is an independent predicate over a product. A facet whose
state is empty contributes no constraint; the active ones are combined
with AND. Filtering never reorders and never fails on degenerate
records: a product that cannot satisfy an active facet (unknown
category, unresolvable brand) is simply left out.
"""

from collections.abc import Callable, Iterable, Sequence

from storefront.catalog.brands import BrandCatalog
from storefront.catalog.models import Category, Product
from storefront.catalog.taxonomy import find_category
from storefront.domain.facets import FacetState

ProductPredicate = Callable[[Product], bool]


def build_predicates(
    state: FacetState,
    categories: Iterable[Category] = (),
    brand_catalog: BrandCatalog | None = None,
) -> list[ProductPredicate]:
    """Build the predicates of every active facet.

    Args:
        state: Current facet state.
        categories: Flat categories, used to resolve ``category_slug``.
        brand_catalog: Brand table used by the brand facet.

    Returns:
        Predicates a product must all satisfy. Price is always present.
    """
    predicates: list[ProductPredicate] = []

    if state.category_ids:
        category_ids = state.category_ids
        predicates.append(lambda p: p.category_id in category_ids)

    if state.category_slug:
        # An unknown slug constrains nothing
        category = find_category(categories, slug=state.category_slug)
        if category is not None:
            category_id = category.id
            predicates.append(lambda p: p.category_id == category_id)

    price_range = state.price_range
    predicates.append(lambda p: price_range.contains(p.price))

    if state.brands:
        brands = state.brands
        catalog = brand_catalog or BrandCatalog.default()

        def brand_matches(product: Product) -> bool:
            brand = catalog.resolve(product)
            return brand is not None and brand in brands

        predicates.append(brand_matches)

    if state.min_rating is not None:
        min_rating = state.min_rating
        predicates.append(lambda p: p.effective_rating >= min_rating)

    if state.in_stock_only:
        predicates.append(lambda p: p.in_stock is True)

    search = state.search.strip().casefold()
    if search:
        predicates.append(
            lambda p: search in p.name.casefold() or search in p.description.casefold()
        )

    return predicates


def filter_products(
    products: Sequence[Product],
    state: FacetState,
    categories: Iterable[Category] = (),
    brand_catalog: BrandCatalog | None = None,
) -> list[Product]:
    """Keep the products that satisfy every active facet.

    Args:
        products: Products in catalog order.
        state: Current facet state.
        categories: Flat categories, used to resolve ``category_slug``.
        brand_catalog: Brand table used by the brand facet.

    Returns:
        Matching products in their original relative order.
    """
    predicates = build_predicates(state, categories, brand_catalog)
    return [p for p in products if all(check(p) for check in predicates)]
