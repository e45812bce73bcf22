"""Catalog records consumed by the discovery engine.

Categories and products are owned by the storefront's catalog source.
The engine reads them and never mutates them. Products are validated
here, at the ingestion boundary, so the pipeline can rely on a numeric
price.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Self

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel


@dataclass
class Category:
    """A storefront category.

    The flat list of categories is the only source of truth. Tree nodes
    produced by build_category_tree are copies with ``children`` filled in.

    Attributes:
        id: Unique category ID.
        name: Display name.
        slug: URL-safe unique name.
        parent_id: ID of parent category (None or "" for a root).
        image: Optional image reference.
        description: Optional description.
        children: Child nodes, populated on tree nodes only.
    """

    id: str
    name: str
    slug: str = ""
    parent_id: str | None = None
    image: str | None = None
    description: str | None = None
    children: list["Category"] = field(default_factory=list, repr=False)

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> Self:
        """Create a category from an external record.

        Accepts both ``parentId`` and ``parent_id`` keys. Any nested
        ``children`` in the record are ignored.

        Args:
            record: Category record as delivered by the catalog source.

        Returns:
            Flat Category.
        """
        parent_id = record.get("parentId", record.get("parent_id"))
        return cls(
            id=str(record["id"]),
            name=record.get("name", ""),
            slug=record.get("slug", ""),
            parent_id=str(parent_id) if parent_id else None,
            image=record.get("image"),
            description=record.get("description"),
        )

    @property
    def is_root(self) -> bool:
        """Check whether the category has no parent reference."""
        return not self.parent_id


class ProductStatus(str, Enum):
    """Publication status of a product."""

    ACTIVE = "active"
    INACTIVE = "inactive"
    DRAFT = "draft"


class Product(BaseModel):
    """Product as delivered by the catalog source.

    Accepts camelCase keys (``categoryId``, ``inStock``) as well as
    field names. A missing or negative price is rejected here.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        coerce_numbers_to_str=True,
        frozen=True,
    )

    id: str
    name: str
    description: str = ""
    price: float = Field(..., ge=0, description="Price in major currency units")
    currency: str = "USD"
    category_id: str = ""
    rating: float | None = Field(default=None, ge=0)
    in_stock: bool = True
    specifications: dict[str, str] = Field(default_factory=dict)
    is_active: bool | None = None
    status: ProductStatus | None = None

    @field_validator("description", "currency", "in_stock", "specifications", mode="before")
    @classmethod
    def null_to_default(cls, value: Any, info: ValidationInfo) -> Any:
        """Treat an explicit null like a missing key."""
        if value is None:
            return cls.model_fields[info.field_name].get_default(call_default_factory=True)
        return value

    @property
    def effective_rating(self) -> float:
        """Rating used for filtering and sorting (0 when absent)."""
        return self.rating or 0.0

    @property
    def is_listed(self) -> bool:
        """Check whether the product should be shown at all.

        Products explicitly deactivated, or in inactive / draft status,
        are hidden. Records carrying neither field are listed.
        """
        if self.is_active is False:
            return False
        return self.status not in (ProductStatus.INACTIVE, ProductStatus.DRAFT)


def filter_active_products(products: Iterable[Product]) -> list[Product]:
    """Drop deactivated and unpublished products, preserving order.

    Args:
        products: Products from the catalog source.

    Returns:
        Listed products only.
    """
    return [p for p in products if p.is_listed]
