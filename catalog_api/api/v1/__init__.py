"""
==============================================================================
API v1 Endpoints
==============================================================================

Version 1 of the REST API.

Routers:
--------
- health: Health check endpoints
- products: Product catalog
- categories: Catalog categories

==============================================================================
"""

from . import categories, health, products

__all__ = ["categories", "health", "products"]
