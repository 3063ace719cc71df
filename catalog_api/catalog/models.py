"""
==============================================================================
Product Models Module
==============================================================================

Pydantic models for product catalog items.

Products are immutable value objects: once the catalog is built no field
of any record can be reassigned.

==============================================================================
"""

from typing import Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, NonNegativeFloat, NonNegativeInt


class Product(BaseModel):
    """
    Product model for catalog items.

    Attributes:
        id: Unique product identifier, used for by-id lookup
        name: Product display name
        category: Low-cardinality classification (e.g., "laptop", "phone")
        price: Non-negative price; integers stay integers
        tags: Ordered search tags (may be empty)
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    id: str = Field(..., min_length=1, description="Unique product identifier")
    name: str = Field(..., min_length=1, description="Product name")
    category: str = Field(..., min_length=1, description="Product category")
    price: Union[NonNegativeInt, NonNegativeFloat] = Field(..., description="Product price")
    tags: Tuple[str, ...] = Field(..., description="Search tags")

    def has_tag(self, tag: str) -> bool:
        """Check whether the product carries a tag (case-insensitive)."""
        wanted = tag.lower()
        return any(t.lower() == wanted for t in self.tags)
