"""Product discovery over a storefront catalog.

Category tree handling, faceted filtering, sorting, the visible result
window and the debounced per-session browser built on them.
"""

from storefront.catalog.brands import DEFAULT_BRAND_PATTERNS, BrandCatalog
from storefront.catalog.debounce import DebounceCoordinator
from storefront.catalog.filters import build_predicates, filter_products
from storefront.catalog.models import Category, Product, ProductStatus, filter_active_products
from storefront.catalog.pagination import ResultWindow, paginate
from storefront.catalog.service import CatalogBrowser, compute_results
from storefront.catalog.sorting import sort_products
from storefront.catalog.taxonomy import (
    CategoryTreeCache,
    build_category_tree,
    expand_category_selection,
    find_category,
    flatten_category_tree,
    get_all_category_ids,
)

__all__ = [
    # Models
    "Category",
    "Product",
    "ProductStatus",
    "filter_active_products",
    # Taxonomy
    "CategoryTreeCache",
    "build_category_tree",
    "expand_category_selection",
    "find_category",
    "flatten_category_tree",
    "get_all_category_ids",
    # Brands
    "BrandCatalog",
    "DEFAULT_BRAND_PATTERNS",
    # Pipeline
    "build_predicates",
    "filter_products",
    "sort_products",
    "ResultWindow",
    "paginate",
    "compute_results",
    # Session
    "CatalogBrowser",
    "DebounceCoordinator",
]
