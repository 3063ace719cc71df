"""
==============================================================================
Pytest Configuration and Fixtures
==============================================================================

Provides catalog, filter and client fixtures.

==============================================================================
"""

import pytest
from typing import Generator, List
from fastapi.testclient import TestClient

from catalog_api.main import app
from catalog_api.catalog import Product, ProductCatalog
from catalog_api.catalog.data import PRODUCTS
from catalog_api.core.dependencies import get_product_catalog


# ============================================================================
# CATALOG FIXTURES
# ============================================================================

@pytest.fixture
def catalog() -> ProductCatalog:
    """The built-in catalog."""
    return ProductCatalog.from_records(PRODUCTS)


@pytest.fixture
def small_records() -> List[dict]:
    """A small catalog definition for focused tests."""
    return [
        {"id": "a1", "name": "Alpha Laptop", "category": "laptop", "price": 100, "tags": ["Coding", "budget"]},
        {"id": "a2", "name": "Beta Phone", "category": "phone", "price": 50, "tags": []},
        {"id": "a3", "name": "Gamma Laptop Pro", "category": "laptop", "price": 300, "tags": ["gaming"]},
        {"id": "a4", "name": "Delta Buds", "category": "audio", "price": 0, "tags": ["wireless", "budget"]},
    ]


@pytest.fixture
def small_catalog(small_records: List[dict]) -> ProductCatalog:
    """A four-product catalog."""
    return ProductCatalog.from_records(small_records)


@pytest.fixture
def p1() -> Product:
    """The Lenovo Ideapad 3 record from the built-in catalog."""
    return Product.model_validate(PRODUCTS[0])


# ============================================================================
# CLIENT FIXTURES
# ============================================================================

@pytest.fixture(scope="function")
def client() -> Generator[TestClient, None, None]:
    """Create test client; the lifespan loads the built-in catalog."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture(scope="function")
def small_client(small_catalog: ProductCatalog) -> Generator[TestClient, None, None]:
    """Create test client serving the small catalog."""
    app.dependency_overrides[get_product_catalog] = lambda: small_catalog

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()
