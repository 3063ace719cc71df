"""
==============================================================================
Product Query Module
==============================================================================

Typed filter parameters and the query engine for the product catalog.

Parameter Policy:
-----------------
Raw query parameters arrive as strings and are converted exactly once, in
``ProductFilter.from_query_params``:

- q:         case-insensitive substring of the name or of any tag;
             blank means "no text filter"
- category:  exact, case-sensitive equality; blank means "no filter"
- priceMin:  inclusive lower bound; anything but plain decimal notation
             (e.g. "1_000", "nan", "inf") is ignored
- priceMax:  inclusive upper bound; same rules as priceMin
- tags:      comma-separated, every listed tag must be present
             (case-insensitive); blank entries are dropped
- limit:     positive integer of plain digits; missing, malformed or <= 0
             falls back to the default, values above the maximum are clamped

Nothing in this module raises for malformed input.

==============================================================================
"""

from __future__ import annotations

import logging
import math
import re
from typing import Iterable, List, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from .models import Product


# Module logger
logger = logging.getLogger(__name__)


DEFAULT_LIMIT = 20
MAX_LIMIT = 100

# Plain decimal notation only; rejects underscores, nan and inf
NUMBER_PATTERN = re.compile(r"^[+-]?([0-9]+(\.[0-9]*)?|\.[0-9]+)([eE][+-]?[0-9]+)?$")
INTEGER_PATTERN = re.compile(r"^[+-]?[0-9]+$")


class ProductFilter(BaseModel):
    """
    Parsed, typed filter-parameter set.

    All predicates are optional; an unset predicate does not filter.

    Example:
        >>> filters = ProductFilter.from_query_params(
        ...     {"category": "laptop", "priceMax": "60000"}
        ... )
        >>> filters.price_max
        60000.0
    """

    model_config = ConfigDict(frozen=True)

    q: Optional[str] = Field(default=None, description="Text search")
    category: Optional[str] = Field(default=None, description="Exact category")
    price_min: Optional[float] = Field(default=None, description="Minimum price")
    price_max: Optional[float] = Field(default=None, description="Maximum price")
    tags: Tuple[str, ...] = Field(default=(), description="Required tags")
    limit: int = Field(default=DEFAULT_LIMIT, ge=1, description="Result cap")

    # =========================================================================
    # PARSING
    # =========================================================================

    @classmethod
    def from_query_params(
        cls,
        params: Mapping[str, Optional[str]],
        default_limit: int = DEFAULT_LIMIT,
        max_limit: int = MAX_LIMIT,
    ) -> "ProductFilter":
        """
        Build a filter from raw string query parameters.

        Args:
            params: Query parameters keyed by their wire names
                (q, category, priceMin, priceMax, tags, limit)
            default_limit: Limit used when none (or an invalid one) is given
            max_limit: Upper clamp for the limit

        Returns:
            ProductFilter instance
        """
        return cls(
            q=_parse_text(params.get("q")),
            category=_parse_text(params.get("category")),
            price_min=_parse_number("priceMin", params.get("priceMin")),
            price_max=_parse_number("priceMax", params.get("priceMax")),
            tags=_parse_tags(params.get("tags")),
            limit=_parse_limit(params.get("limit"), default_limit, max_limit),
        )

    # =========================================================================
    # PREDICATES
    # =========================================================================

    @property
    def has_empty_price_range(self) -> bool:
        """True when priceMin > priceMax, which no product can satisfy."""
        return (
            self.price_min is not None
            and self.price_max is not None
            and self.price_min > self.price_max
        )

    def matches(self, product: Product) -> bool:
        """Check whether a product satisfies every supplied predicate."""
        if self.q is not None and not _matches_text(product, self.q):
            return False
        if self.category is not None and product.category != self.category:
            return False
        if self.price_min is not None and product.price < self.price_min:
            return False
        if self.price_max is not None and product.price > self.price_max:
            return False
        if self.tags and not all(product.has_tag(tag) for tag in self.tags):
            return False
        return True

    def describe(self) -> str:
        """Compact summary of the active predicates, for logging."""
        active = {
            name: value
            for name, value in self.model_dump().items()
            if value not in (None, ())
        }
        return ", ".join(f"{name}={value!r}" for name, value in active.items())


# =============================================================================
# QUERY ENGINE
# =============================================================================

def filter_products(products: Iterable[Product], filters: ProductFilter) -> List[Product]:
    """
    Return the products matching all predicates, in catalog order.

    The result is a new list truncated to ``filters.limit`` entries; the
    input sequence is never modified.

    Args:
        products: Products in catalog order
        filters: Parsed filter-parameter set

    Returns:
        List of matching products (possibly empty)
    """
    if filters.has_empty_price_range:
        return []

    results: List[Product] = []
    for product in products:
        if not filters.matches(product):
            continue
        results.append(product)
        if len(results) >= filters.limit:
            break

    return results


# =============================================================================
# HELPERS
# =============================================================================

def _matches_text(product: Product, q: str) -> bool:
    needle = q.lower()
    if needle in product.name.lower():
        return True
    return any(needle in tag.lower() for tag in product.tags)


def _parse_text(raw: Optional[str]) -> Optional[str]:
    if raw is None:
        return None
    value = raw.strip()
    return value or None


def _parse_number(name: str, raw: Optional[str]) -> Optional[float]:
    value = _parse_text(raw)
    if value is None:
        return None

    if not NUMBER_PATTERN.match(value):
        logger.debug(f"Ignoring malformed {name}: {raw!r}")
        return None

    number = float(value)

    if not math.isfinite(number):
        logger.debug(f"Ignoring non-finite {name}: {raw!r}")
        return None

    return number


def _parse_tags(raw: Optional[str]) -> Tuple[str, ...]:
    if raw is None:
        return ()
    return tuple(tag.strip() for tag in raw.split(",") if tag.strip())


def _parse_limit(raw: Optional[str], default_limit: int, max_limit: int) -> int:
    value = _parse_text(raw)
    if value is None:
        return default_limit

    if not INTEGER_PATTERN.match(value):
        logger.debug(f"Ignoring malformed limit: {raw!r}")
        return default_limit

    limit = int(value)

    if limit <= 0:
        logger.debug(f"Ignoring non-positive limit: {limit}")
        return default_limit

    return min(limit, max_limit)
