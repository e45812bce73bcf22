"""Shared fixtures for engine tests."""

import pytest

from storefront.catalog.models import Category, Product


@pytest.fixture
def categories() -> list[Category]:
    """Flat category list: two roots, nested children, one orphan."""
    return [
        Category(id="clothing", name="Clothing", slug="clothing"),
        Category(id="men", name="Men", slug="men", parent_id="clothing"),
        Category(id="shirts", name="Shirts", slug="shirts", parent_id="men"),
        Category(id="women", name="Women", slug="women", parent_id="clothing"),
        Category(id="electronics", name="Electronics", slug="electronics"),
        Category(id="audio", name="Audio", slug="audio", parent_id="electronics"),
        Category(id="lost", name="Lost", slug="lost", parent_id="missing"),
    ]


@pytest.fixture
def products() -> list[Product]:
    """Small catalog across the fixture categories."""
    return [
        Product(
            id="p1",
            name="Nike Air Tee",
            description="Breathable running shirt",
            price=30,
            category_id="shirts",
            rating=4.5,
        ),
        Product(
            id="p2",
            name="Classic Hoodie",
            description="Heavy cotton hoodie",
            price=55,
            category_id="men",
            rating=3.8,
            specifications={"Brand": "Uniqlo"},
        ),
        Product(
            id="p3",
            name="Adidas Summer Dress",
            description="Light dress for warm days",
            price=80,
            category_id="women",
            in_stock=False,
        ),
        Product(
            id="p4",
            name="Sony WH-1000XM5",
            description="Noise cancelling headphones",
            price=350,
            category_id="audio",
            rating=4.8,
        ),
        Product(
            id="p5",
            name="Generic Cable",
            description="USB-C cable",
            price=30,
            category_id="electronics",
            rating=2.0,
        ),
        Product(
            id="p6",
            name="Mystery Box",
            description="Who knows",
            price=10,
            category_id="nowhere",
        ),
    ]


@pytest.fixture
def many_products() -> list[Product]:
    """Thirty products for window tests."""
    return [
        Product(id=f"m{i}", name=f"Item {i}", price=i, category_id="clothing")
        for i in range(30)
    ]
