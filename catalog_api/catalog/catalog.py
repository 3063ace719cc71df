"""
==============================================================================
Product Catalog Module
==============================================================================

Immutable in-memory product catalog with keyed lookup and filtered queries.

Features:
---------
- Built once at startup from the literal definition in ``data.py``
  or from a JSON file
- Ordered, read-only product sequence
- Id index built at load time for O(1) lookup
- Filtered queries through ``ProductFilter``

JSON Structure:
--------------
[
  {"id": "p1", "name": "...", "category": "laptop", "price": 52000,
   "tags": ["coding", "budget"]},
  ...
]

==============================================================================
"""

from __future__ import annotations

import json
import logging
from collections import Counter
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from pydantic import ValidationError

from .data import PRODUCTS
from .models import Product
from .query import ProductFilter, filter_products


# Module logger
logger = logging.getLogger(__name__)


class CatalogLoadError(ValueError):
    """Raised when catalog data is malformed or violates an invariant."""


class ProductCatalog:
    """
    Read-only product catalog.

    The product sequence and id index are fixed at construction; no method
    mutates them, so a single instance can serve any number of concurrent
    requests without locking.

    Attributes:
        products: All products in catalog order

    Example:
        >>> catalog = ProductCatalog.from_records(PRODUCTS)
        >>> catalog.get_by_id("p1").name
        'Lenovo Ideapad 3'
        >>> len(catalog.query(ProductFilter(category="phone")))
        4
    """

    def __init__(self, products: Iterable[Product]) -> None:
        """
        Initialize catalog from product records.

        Args:
            products: Products in catalog order

        Raises:
            CatalogLoadError: If two products share an id
        """
        self._products: Tuple[Product, ...] = tuple(products)

        by_id: Dict[str, Product] = {}
        for product in self._products:
            if product.id in by_id:
                raise CatalogLoadError(f"Duplicate product id: {product.id}")
            by_id[product.id] = product

        self._by_id: Mapping[str, Product] = MappingProxyType(by_id)

    # =========================================================================
    # CONSTRUCTORS
    # =========================================================================

    @classmethod
    def from_records(cls, records: Iterable[Mapping[str, Any]]) -> "ProductCatalog":
        """
        Build a catalog from plain dictionaries.

        Args:
            records: Product dictionaries in catalog order

        Raises:
            CatalogLoadError: If a record is invalid
        """
        products = []
        for index, record in enumerate(records):
            try:
                products.append(Product.model_validate(record))
            except ValidationError as e:
                raise CatalogLoadError(f"Invalid product at index {index}: {e}") from e
        return cls(products)

    @classmethod
    def from_file(cls, products_file: Path) -> "ProductCatalog":
        """
        Build a catalog from a JSON file holding a list of products.

        Args:
            products_file: Path to products JSON

        Raises:
            FileNotFoundError: If the file does not exist
            CatalogLoadError: If the content is not a valid product list
        """
        try:
            with products_file.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            logger.error(f"Products file not found: {products_file}")
            raise
        except json.JSONDecodeError as e:
            raise CatalogLoadError(f"Invalid JSON in {products_file}: {e}") from e

        if not isinstance(data, list):
            raise CatalogLoadError(f"Expected a list of products in {products_file}")

        return cls.from_records(data)

    # =========================================================================
    # PROPERTIES
    # =========================================================================

    @property
    def products(self) -> Tuple[Product, ...]:
        """Get all products."""
        return self._products

    def __len__(self) -> int:
        return len(self._products)

    def __contains__(self, product_id: object) -> bool:
        return product_id in self._by_id

    # =========================================================================
    # LOOKUP
    # =========================================================================

    def get_by_id(self, product_id: str) -> Optional[Product]:
        """Find product by exact id (case-sensitive)."""
        return self._by_id.get(product_id)

    def query(self, filters: ProductFilter) -> List[Product]:
        """
        Return products matching all filters, in catalog order.

        Args:
            filters: Parsed filter-parameter set

        Returns:
            New list of at most ``filters.limit`` products
        """
        results = filter_products(self._products, filters)
        logger.debug(f"Query [{filters.describe()}] matched {len(results)} products")
        return results

    # =========================================================================
    # UTILITY METHODS
    # =========================================================================

    def get_categories(self) -> List[str]:
        """Get distinct categories in first-appearance order."""
        return list(dict.fromkeys(p.category for p in self._products))

    def get_stats(self) -> Dict:
        """Get catalog statistics."""
        return {
            "total_products": len(self._products),
            "categories": dict(Counter(p.category for p in self._products)),
        }


# =============================================================================
# SINGLETON INSTANCE MANAGEMENT
# =============================================================================

_catalog_instance: Optional[ProductCatalog] = None


def get_catalog() -> Optional[ProductCatalog]:
    """Get the global catalog instance."""
    return _catalog_instance


def init_catalog(products_file: Optional[Path] = None) -> ProductCatalog:
    """
    Initialize the global catalog instance.

    Args:
        products_file: Optional JSON file; the built-in catalog is used
            when omitted

    Returns:
        ProductCatalog instance
    """
    global _catalog_instance

    if products_file is not None:
        catalog = ProductCatalog.from_file(products_file)
        source = str(products_file)
    else:
        catalog = ProductCatalog.from_records(PRODUCTS)
        source = "built-in catalog"

    logger.info(
        f"✅ Loaded {len(catalog)} products in "
        f"{len(catalog.get_categories())} categories from {source}"
    )

    _catalog_instance = catalog
    return _catalog_instance
