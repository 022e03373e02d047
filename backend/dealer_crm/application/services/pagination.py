"""Page slicing for in-memory collections."""

import math
from collections.abc import Sequence
from typing import TypeVar

from dealer_crm.domain.entities import PageResult

T = TypeVar("T")


def total_pages_for(total_count: int, page_size: int) -> int:
    """At least one page, even for an empty collection."""
    if page_size < 1:
        raise ValueError(f"page_size must be positive, got {page_size}")
    return max(1, math.ceil(total_count / page_size))


def clamp_page(page: int, total_pages: int) -> int:
    return max(1, min(page, total_pages))


def paginate(items: Sequence[T], page: int, page_size: int) -> PageResult[T]:
    """Slice out page ``page`` (1-based).

    Pages outside ``1..total_pages`` give an empty ``items`` list; clamping the
    requested page is up to the caller.
    """
    total_count = len(items)
    total_pages = total_pages_for(total_count, page_size)
    if page < 1:
        page_items: list[T] = []
    else:
        start = (page - 1) * page_size
        page_items = list(items[start:start + page_size])
    return PageResult(
        items=page_items,
        current_page=page,
        total_pages=total_pages,
        total_count=total_count,
        page_size=page_size,
    )
