"""Product query pipeline.

Pure transformation from a product collection and a set of view
parameters to the page of products to display. Runs filter, then a
stable sort, then pagination. Holds no state between calls and never
touches a store: callers fetch the collection and own the parameters.
"""

import math
import unicodedata
from collections.abc import Sequence
from dataclasses import dataclass, field, replace
from enum import Enum

from catalog_api.domain.product import Product

DEFAULT_PAGE_SIZE = 6


class SortKey(str, Enum):
    """Available orderings."""

    NONE = "none"
    PRICE_ASC = "price_asc"
    PRICE_DESC = "price_desc"
    NAME_ASC = "name_asc"

    @classmethod
    def parse(cls, value: str | None) -> "SortKey":
        """Parse a sort key, treating an empty value as NONE.

        Raises:
            ValueError: If the value names no sort key.
        """
        if not value:
            return cls.NONE
        return cls(value)


@dataclass(frozen=True)
class ViewParams:
    """Parameters that select the slice of the catalog to display.

    Attributes:
        search: Substring to look for in product names.
        sort: Ordering to apply after filtering.
        page: Page number (1-indexed).
        page_size: Products per page.
    """

    search: str = ""
    sort: SortKey = SortKey.NONE
    page: int = 1
    page_size: int = DEFAULT_PAGE_SIZE

    def __post_init__(self) -> None:
        if self.page < 1:
            raise ValueError(f"page must be a positive integer, got {self.page}")
        if self.page_size < 1:
            raise ValueError(
                f"page_size must be a positive integer, got {self.page_size}"
            )

    def with_search(self, search: str) -> "ViewParams":
        """New search text; returns to the first page."""
        return replace(self, search=search, page=1)

    def with_sort(self, sort: SortKey) -> "ViewParams":
        return replace(self, sort=sort)

    def with_page(self, page: int) -> "ViewParams":
        return replace(self, page=page)

    def with_page_size(self, page_size: int) -> "ViewParams":
        """New page size; returns to the first page."""
        return replace(self, page_size=page_size, page=1)


@dataclass(frozen=True)
class ProductPage:
    """One page of query results plus pagination metadata.

    Attributes:
        items: Products on this page.
        total_items: Number of products that matched the search.
        total_pages: Number of pages at this page size.
        current_page: Requested page number.
        page_size: Products per page.
    """

    items: list[Product] = field(default_factory=list)
    total_items: int = 0
    total_pages: int = 0
    current_page: int = 1
    page_size: int = DEFAULT_PAGE_SIZE

    @property
    def has_next(self) -> bool:
        """Check if there's a next page."""
        return self.current_page < self.total_pages

    @property
    def has_prev(self) -> bool:
        """Check if there's a previous page."""
        return self.current_page > 1

    @property
    def shows_controls(self) -> bool:
        """Pagination controls are only worth rendering past one page."""
        return self.total_pages > 1


# ============================================================================
# Pipeline Steps
# ============================================================================


def filter_products(products: Sequence[Product], search: str) -> list[Product]:
    """Keep products whose name contains the search text, ignoring case.

    Args:
        products: Products to filter.
        search: Search text; surrounding whitespace is ignored.

    Returns:
        Matching products in input order.
    """
    term = search.strip().casefold()
    if not term:
        return list(products)
    return [p for p in products if term in p.name.casefold()]


def name_collation_key(name: str) -> tuple[str, str, str]:
    """Collation key approximating locale-aware name comparison.

    Compares accent- and case-insensitively first, then by accents,
    then puts lowercase before uppercase.
    """
    folded = name.casefold()
    decomposed = unicodedata.normalize("NFKD", folded)
    base = "".join(c for c in decomposed if not unicodedata.combining(c))
    return base, folded, name.swapcase()


def sort_products(products: Sequence[Product], sort: SortKey) -> list[Product]:
    """Stable-sort products; ties keep their input order.

    Args:
        products: Products to sort.
        sort: Ordering to apply.

    Returns:
        Sorted products.
    """
    if sort is SortKey.PRICE_ASC:
        return sorted(products, key=lambda p: p.price)
    if sort is SortKey.PRICE_DESC:
        # reverse=True keeps equal prices in input order
        return sorted(products, key=lambda p: p.price, reverse=True)
    if sort is SortKey.NAME_ASC:
        return sorted(products, key=lambda p: name_collation_key(p.name))
    return list(products)


def paginate(products: Sequence[Product], page: int, page_size: int) -> ProductPage:
    """Cut one page out of a product sequence.

    Pages past the end yield an empty page rather than an error.

    Args:
        products: Filtered and sorted products.
        page: Page number (1-indexed).
        page_size: Products per page.

    Returns:
        The requested page.
    """
    total = len(products)
    start = (page - 1) * page_size
    return ProductPage(
        items=list(products[start:start + page_size]),
        total_items=total,
        total_pages=math.ceil(total / page_size),
        current_page=page,
        page_size=page_size,
    )


def run_query(products: Sequence[Product], params: ViewParams) -> ProductPage:
    """Filter, sort and paginate a product collection.

    Args:
        products: Full product collection.
        params: View parameters.

    Returns:
        Page of products with pagination metadata.
    """
    matched = filter_products(products, params.search)
    ordered = sort_products(matched, params.sort)
    return paginate(ordered, params.page, params.page_size)
