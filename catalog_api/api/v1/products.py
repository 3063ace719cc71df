"""
==============================================================================
Product Catalog Endpoints
==============================================================================

Endpoints for listing, filtering and looking up catalog products.

==============================================================================
"""

import logging
from typing import List

from fastapi import APIRouter, Depends

from catalog_api.catalog import Product, ProductCatalog, ProductFilter
from catalog_api.core import exceptions
from catalog_api.core.dependencies import get_product_catalog, get_product_filter


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/products", tags=["Products"])


class ProductController:
    """Controller for product catalog operations."""

    def __init__(self, catalog: ProductCatalog):
        self._catalog = catalog

    def list_products(self, filters: ProductFilter) -> List[Product]:
        """List products matching the filters."""
        return self._catalog.query(filters)

    def get_by_id(self, product_id: str) -> Product:
        """Get product by id."""
        product = self._catalog.get_by_id(product_id)

        if product is None:
            logger.info(f"Product not found: {product_id!r}")
            raise exceptions.product_not_found(product_id)

        return product


@router.get("", response_model=List[Product])
async def list_products(
    filters: ProductFilter = Depends(get_product_filter),
    catalog: ProductCatalog = Depends(get_product_catalog),
):
    """
    List products with optional filters.

    Malformed numeric parameters are ignored; an empty result is a 200.
    """
    controller = ProductController(catalog)
    return controller.list_products(filters)


@router.get(
    "/{product_id:path}",
    response_model=Product,
    responses={404: {"description": "Product not found"}},
)
async def get_product(
    product_id: str,
    catalog: ProductCatalog = Depends(get_product_catalog),
):
    """Get product by id; ids may contain slashes."""
    controller = ProductController(catalog)
    return controller.get_by_id(product_id)
