"""Catalog listing query — filter predicate, sort order and pagination window.

Translates the request parameters of the product listing endpoints into a
Protean ``Q`` predicate plus an ``(offset, limit)`` window. Absent parameters
add no condition, so an empty query lists the whole catalog.
"""

import operator
from dataclasses import dataclass
from functools import reduce

from protean.exceptions import ValidationError
from protean.utils.query import Q

from marketplace.shared.pagination import DEFAULT_LIMIT, DEFAULT_PAGE, page_window, parse_positive_int

DEFAULT_SORT = "-createdAt"

# Public sort keys (camelCase as exposed by the API, snake_case accepted too)
_SORT_FIELDS = {
    "createdAt": "created_at",
    "created_at": "created_at",
    "updatedAt": "updated_at",
    "updated_at": "updated_at",
    "name": "name",
    "price": "price",
    "stock": "stock",
    "rating": "rating",
}


def parse_sort(sort: str | None) -> list[str]:
    """Turn ``"-price,name"`` into Protean ordering ``["-price", "name"]``."""
    keys = [key.strip() for key in (sort or DEFAULT_SORT).replace(" ", ",").split(",") if key.strip()]
    if not keys:
        keys = [DEFAULT_SORT]

    ordering = []
    for key in keys:
        descending = key.startswith("-")
        name = key.lstrip("-+")
        if name not in _SORT_FIELDS:
            raise ValidationError({"sort": [f"Cannot sort by '{name}'"]})
        ordering.append(f"-{_SORT_FIELDS[name]}" if descending else _SORT_FIELDS[name])
    return ordering


def _parse_price(value, label):
    if value is None or value == "":
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        raise ValidationError({label: [f"'{value}' is not a valid number"]}) from None


@dataclass(frozen=True)
class ProductQuery:
    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT
    category: str | None = None
    min_price: float | None = None
    max_price: float | None = None
    search: str | None = None
    sort: str | None = None
    vendor_id: str | None = None

    @classmethod
    def from_params(
        cls,
        page=None,
        limit=None,
        category=None,
        min_price=None,
        max_price=None,
        search=None,
        sort=None,
        vendor_id=None,
        default_limit=DEFAULT_LIMIT,
    ):
        """Build a query from raw request parameters."""
        return cls(
            page=parse_positive_int(page, DEFAULT_PAGE),
            limit=parse_positive_int(limit, default_limit),
            category=category or None,
            min_price=_parse_price(min_price, "minPrice"),
            max_price=_parse_price(max_price, "maxPrice"),
            search=search.strip() if search and search.strip() else None,
            sort=sort or None,
            vendor_id=str(vendor_id) if vendor_id else None,
        )

    @property
    def offset(self) -> int:
        return page_window(self.page, self.limit)[0]

    def criteria(self) -> Q | None:
        """Combine all supplied filters into one predicate (``None`` when unfiltered)."""
        conditions = []

        if self.vendor_id:
            conditions.append(Q(vendor_id=self.vendor_id))

        if self.category:
            conditions.append(Q(category=self.category))

        if self.min_price is not None:
            conditions.append(Q(price__gte=self.min_price))

        if self.max_price is not None:
            conditions.append(Q(price__lte=self.max_price))

        if self.search:
            conditions.append(Q(name__icontains=self.search) | Q(description__icontains=self.search))

        if not conditions:
            return None
        return reduce(operator.and_, conditions)

    def ordering(self) -> list[str]:
        return parse_sort(self.sort)
