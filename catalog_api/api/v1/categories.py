"""
==============================================================================
Category Endpoints
==============================================================================

Lists the categories present in the product catalog.

==============================================================================
"""

from typing import List

from fastapi import APIRouter, Depends

from catalog_api.catalog import ProductCatalog
from catalog_api.core.dependencies import get_product_catalog


router = APIRouter(prefix="/categories", tags=["Categories"])


@router.get("", response_model=List[str])
async def get_categories(catalog: ProductCatalog = Depends(get_product_catalog)):
    """Get all available categories, in first-appearance order."""
    return catalog.get_categories()
