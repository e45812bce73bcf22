"""Tests for facet filtering."""

from storefront.catalog.brands import BrandCatalog
from storefront.catalog.filters import build_predicates, filter_products
from storefront.catalog.models import Category, Product
from storefront.catalog.taxonomy import build_category_tree, get_all_category_ids
from storefront.domain.facets import FacetState


def _ids(products: list[Product]) -> list[str]:
    return [p.id for p in products]


class TestInactiveFacets:
    """Tests for the default (no facet active) state."""

    def test_all_products_in_order(self, products: list[Product]) -> None:
        """Default state keeps the whole catalog in order."""
        assert _ids(filter_products(products, FacetState())) == _ids(products)

    def test_only_price_predicate(self) -> None:
        """Only the price facet is evaluated by default."""
        assert len(build_predicates(FacetState())) == 1


class TestCategoryFacet:
    """Tests for the category facet."""

    def test_descendant_inclusive_selection(self) -> None:
        """Selecting a root includes products of its child and grandchild."""
        categories = [
            Category(id="A", name="A"),
            Category(id="B", name="B", parent_id="A"),
            Category(id="C", name="C", parent_id="B"),
        ]
        products = [
            Product(id="pa", name="a", price=1, category_id="A"),
            Product(id="pb", name="b", price=1, category_id="B"),
            Product(id="pc", name="c", price=1, category_id="C"),
            Product(id="px", name="x", price=1, category_id="X"),
        ]
        root = build_category_tree(categories)[0]
        state = FacetState().with_categories(get_all_category_ids(root))

        assert _ids(filter_products(products, state)) == ["pa", "pb", "pc"]

    def test_unexpanded_selection_is_exact(self, products: list[Product]) -> None:
        """The facet matches ids as given."""
        state = FacetState(category_ids=frozenset({"men"}))
        assert _ids(filter_products(products, state)) == ["p2"]

    def test_dangling_category_never_matches(self, products: list[Product]) -> None:
        """A product pointing at an unknown category fails any selection."""
        state = FacetState(category_ids=frozenset({"clothing", "electronics"}))
        assert "p6" not in _ids(filter_products(products, state))


class TestCategorySlugFacet:
    """Tests for the slug quick filter."""

    def test_exact_category(self, products: list[Product], categories: list[Category]) -> None:
        """The slug restricts to that category only."""
        state = FacetState(category_slug="audio")
        assert _ids(filter_products(products, state, categories)) == ["p4"]

    def test_unknown_slug_is_inactive(
        self, products: list[Product], categories: list[Category]
    ) -> None:
        """A slug that resolves to nothing constrains nothing."""
        state = FacetState(category_slug="nope")
        assert _ids(filter_products(products, state, categories)) == _ids(products)


class TestPriceFacet:
    """Tests for the price facet."""

    def test_inclusive_bounds(self, products: list[Product]) -> None:
        """Both bounds are inclusive."""
        state = FacetState().with_price_range(30, 55)
        assert _ids(filter_products(products, state)) == ["p1", "p2", "p5"]


class TestBrandFacet:
    """Tests for the brand facet."""

    def test_selected_brands(self, products: list[Product]) -> None:
        """Explicit and inferred brands both match."""
        state = FacetState(brands=frozenset({"Nike", "Uniqlo"}))
        assert _ids(filter_products(products, state)) == ["p1", "p2"]

    def test_unresolved_brand_excluded(self, products: list[Product]) -> None:
        """Products without a resolvable brand never match an active facet."""
        state = FacetState(brands=frozenset({"Acme"}))
        assert filter_products(products, state) == []

    def test_custom_catalog(self, products: list[Product]) -> None:
        """The brand table can be supplied by the caller."""
        catalog = BrandCatalog.default().extended({"Generic": r"\bgeneric\b"})
        state = FacetState(brands=frozenset({"Generic"}))
        assert _ids(filter_products(products, state, brand_catalog=catalog)) == ["p5"]


class TestRatingFacet:
    """Tests for the rating facet."""

    def test_threshold(self, products: list[Product]) -> None:
        """Products below the threshold are dropped."""
        state = FacetState(min_rating=4)
        assert _ids(filter_products(products, state)) == ["p1", "p4"]

    def test_missing_rating_counts_as_zero(self, products: list[Product]) -> None:
        """A zero threshold keeps unrated products."""
        state = FacetState(min_rating=0)
        assert _ids(filter_products(products, state)) == _ids(products)


class TestStockFacet:
    """Tests for the stock facet."""

    def test_in_stock_only(self, products: list[Product]) -> None:
        """Out-of-stock products are dropped."""
        state = FacetState(in_stock_only=True)
        assert "p3" not in _ids(filter_products(products, state))
        assert len(filter_products(products, state)) == len(products) - 1


class TestSearchFacet:
    """Tests for the search facet."""

    def test_matches_name_case_insensitive(self, products: list[Product]) -> None:
        """Search ignores case."""
        state = FacetState(search="HOODIE")
        assert _ids(filter_products(products, state)) == ["p2"]

    def test_matches_description(self, products: list[Product]) -> None:
        """Descriptions are searched too."""
        state = FacetState(search="headphones")
        assert _ids(filter_products(products, state)) == ["p4"]

    def test_blank_search_is_inactive(self, products: list[Product]) -> None:
        """Whitespace-only search constrains nothing."""
        state = FacetState(search="   ")
        assert _ids(filter_products(products, state)) == _ids(products)


class TestComposition:
    """Tests for AND composition of facets."""

    def test_all_facets_must_hold(self, products: list[Product]) -> None:
        """A product must pass every active facet."""
        state = FacetState(
            category_ids=frozenset({"clothing", "men", "shirts", "women"}),
            in_stock_only=True,
            min_rating=4,
        )
        assert _ids(filter_products(products, state)) == ["p1"]

    def test_idempotent(self, products: list[Product]) -> None:
        """Filtering a filtered list changes nothing."""
        state = FacetState(brands=frozenset({"Nike", "Sony"}), min_rating=1).with_price_range(0, 400)
        once = filter_products(products, state)
        assert filter_products(once, state) == once

    def test_input_not_modified(self, products: list[Product]) -> None:
        """Filtering returns a new list."""
        before = list(products)
        filter_products(products, FacetState(min_rating=5))
        assert products == before
