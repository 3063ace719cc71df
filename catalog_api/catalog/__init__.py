"""
==============================================================================
Catalog Package - Product Catalog and Queries
==============================================================================

Immutable in-memory product catalog with filtered queries.

Classes:
--------
- Product: Pydantic model for products
- ProductFilter: Parsed filter-parameter set
- ProductCatalog: Read-only catalog with id lookup and queries

==============================================================================
"""

from .models import Product
from .query import ProductFilter, filter_products
from .catalog import CatalogLoadError, ProductCatalog, get_catalog, init_catalog

__all__ = [
    "Product",
    "ProductFilter",
    "filter_products",
    "CatalogLoadError",
    "ProductCatalog",
    "get_catalog",
    "init_catalog",
]
