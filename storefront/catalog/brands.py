"""Brand resolution.

A product's brand is its explicit ``Brand`` specification when present.
Otherwise it is inferred from the product name against a table of
known brands, each with the pattern that recognizes it. The table is
declared once here and can be extended or overridden per storefront.
"""

import re
from collections.abc import Iterable, Mapping

import structlog

from storefront.catalog.models import Product
from storefront.infrastructure.config import Settings, settings as default_settings

logger = structlog.get_logger()

BRAND_SPECIFICATION_KEY = "Brand"


def _word(name: str) -> str:
    return rf"\b{re.escape(name)}\b"


# Known brand tokens, matched case-insensitively on word boundaries
DEFAULT_BRAND_PATTERNS: dict[str, str] = {
    name: _word(name)
    for name in [
        "Reebok", "Nike", "Adidas", "Puma", "Zara", "Dickies", "Vans", "Uniqlo",
        "New Balance", "Converse", "Sony", "Samsung", "Apple", "Dell", "HP",
        "Gucci", "Prada", "Versace", "Armani", "Calvin Klein", "Tommy Hilfiger",
        "Levi's", "Gap", "H&M", "Forever 21", "ASOS", "Shein", "Amazon",
        "Microsoft", "LG", "Canon", "Nikon", "Bose", "JBL", "Beats", "Ray-Ban",
        "Oakley",
    ]
}


class BrandCatalog:
    """Table of recognized brands and the patterns that identify them.

    Example usage:
        catalog = BrandCatalog.default().extended({"Acme": r"\\bacme\\b"})
        catalog.resolve(product)  # "Acme"
    """

    def __init__(self, patterns: Mapping[str, str]) -> None:
        """Compile the brand table.

        Args:
            patterns: Brand name to regular expression.

        Raises:
            re.error: If a pattern does not compile.
        """
        self._patterns: dict[str, re.Pattern[str]] = {}
        for brand, pattern in patterns.items():
            try:
                self._patterns[brand] = re.compile(pattern, re.IGNORECASE)
            except re.error:
                logger.error("Invalid brand pattern", brand=brand, pattern=pattern)
                raise

    @classmethod
    def default(cls) -> "BrandCatalog":
        """Create a catalog with the built-in brand table."""
        return cls(DEFAULT_BRAND_PATTERNS)

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "BrandCatalog":
        """Create the built-in catalog with configured overrides applied.

        Args:
            settings: Settings carrying ``brand_patterns``.

        Returns:
            BrandCatalog.
        """
        settings = settings or default_settings
        catalog = cls.default()
        if settings.brand_patterns:
            catalog = catalog.extended(settings.brand_patterns)
        return catalog

    def extended(self, patterns: Mapping[str, str]) -> "BrandCatalog":
        """Create a catalog with extra or replacement brand patterns.

        Args:
            patterns: Brand name to regular expression. Existing brands
                with the same name are replaced.

        Returns:
            New BrandCatalog.
        """
        merged = {brand: p.pattern for brand, p in self._patterns.items()}
        merged.update(patterns)
        return BrandCatalog(merged)

    @property
    def brands(self) -> list[str]:
        """Get recognized brand names in table order."""
        return list(self._patterns)

    def match_name(self, text: str) -> str | None:
        """Find the brand mentioned earliest in a piece of text.

        Args:
            text: Product name or similar.

        Returns:
            Brand name, or None if no pattern matches.
        """
        best: tuple[int, str] | None = None
        for brand, pattern in self._patterns.items():
            match = pattern.search(text)
            if match and (best is None or match.start() < best[0]):
                best = (match.start(), brand)
        return best[1] if best else None

    def resolve(self, product: Product) -> str | None:
        """Resolve the brand of a product.

        Args:
            product: Product to inspect.

        Returns:
            Explicit Brand specification, else the brand inferred from the
            name, else None.
        """
        explicit = product.specifications.get(BRAND_SPECIFICATION_KEY)
        if explicit:
            return explicit
        return self.match_name(product.name)

    def available_brands(self, products: Iterable[Product]) -> list[str]:
        """List the distinct brands present in a product list.

        Args:
            products: Products to inspect.

        Returns:
            Sorted brand names.
        """
        return sorted({b for b in (self.resolve(p) for p in products) if b})
