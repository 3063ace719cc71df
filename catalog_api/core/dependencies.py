"""
==============================================================================
FastAPI Dependencies Module
==============================================================================

Dependency injection for catalog access and query parameters.

This module implements:
- get_product_catalog: resolves the process-wide catalog
- get_product_filter: converts raw query strings into a ProductFilter

Numeric query parameters are declared as strings so that malformed values
reach ``ProductFilter.from_query_params`` and are ignored there instead of
being rejected with a 422 by request validation.

Usage Examples:
--------------
    @router.get("")
    async def list_products(
        filters: ProductFilter = Depends(get_product_filter),
        catalog: ProductCatalog = Depends(get_product_catalog),
    ):
        return catalog.query(filters)

==============================================================================
"""

from __future__ import annotations

from typing import Optional

from fastapi import Depends, Query

from catalog_api.catalog import ProductCatalog, ProductFilter, get_catalog
from catalog_api.config import Settings, get_settings
from catalog_api.core import exceptions


def get_product_catalog() -> ProductCatalog:
    """
    FastAPI dependency returning the loaded catalog.

    Raises:
        AppException: CATALOG_NOT_LOADED if startup has not built it
    """
    catalog = get_catalog()
    if catalog is None:
        raise exceptions.catalog_not_loaded()
    return catalog


def get_product_filter(
    q: Optional[str] = Query(None, description="Text search on name and tags"),
    category: Optional[str] = Query(None, description="Exact category"),
    price_min: Optional[str] = Query(None, alias="priceMin", description="Minimum price"),
    price_max: Optional[str] = Query(None, alias="priceMax", description="Maximum price"),
    tags: Optional[str] = Query(None, description="Comma-separated required tags"),
    limit: Optional[str] = Query(None, description="Maximum number of results"),
    settings: Settings = Depends(get_settings),
) -> ProductFilter:
    """
    FastAPI dependency for product filter parameters.

    Returns:
        ProductFilter built with the configured default and maximum limit
    """
    return ProductFilter.from_query_params(
        {
            "q": q,
            "category": category,
            "priceMin": price_min,
            "priceMax": price_max,
            "tags": tags,
            "limit": limit,
        },
        default_limit=settings.default_limit,
        max_limit=settings.max_limit,
    )
