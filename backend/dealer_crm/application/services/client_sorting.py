"""Client sorting and column-header sort state."""

from collections.abc import Iterable
from functools import cmp_to_key
from typing import Any, TypeVar

from dealer_crm.application.services.client_filters import field_value
from dealer_crm.domain.entities import SortOrder, SortSpec

T = TypeVar("T")

SECONDARY_SORT_FIELD = "last_name"
SORTABLE_FIELDS = (
    "first_name",
    "last_name",
    "contact_number",
    "email",
    "interest",
    "client_number",
    "created_at",
)


def compare_values(a: Any, b: Any, direction: int) -> int:
    """Three-way compare with nulls always last, whatever the direction.

    Strings compare case-insensitively; ``direction`` (1 or -1) only flips
    the order of two non-null values.
    """
    if a is None and b is None:
        return 0
    if a is None:
        return 1
    if b is None:
        return -1
    if isinstance(a, str) or isinstance(b, str):
        a, b = str(a).lower(), str(b).lower()
    if a < b:
        return -direction
    if a > b:
        return direction
    return 0


def sort_clients(
    clients: Iterable[T],
    field: str = "first_name",
    order: SortOrder = "asc",
) -> list[T]:
    """Return a new list ordered by ``field`` then by last name.

    The sort is stable: clients equal on both keys keep their input order.
    """
    direction = 1 if order == "asc" else -1

    def compare(a: T, b: T) -> int:
        av = field_value(a, field)
        bv = field_value(b, field)
        if av is None and bv is None:
            return 0
        result = compare_values(av, bv, direction)
        if result:
            return result
        return compare_values(
            field_value(a, SECONDARY_SORT_FIELD),
            field_value(b, SECONDARY_SORT_FIELD),
            direction,
        )

    return sorted(clients, key=cmp_to_key(compare))


def handle_column_sort(sort_by: str, sort_order: SortOrder, column: str) -> SortSpec:
    """Clicking the active column flips the order; any other column starts ascending."""
    if column == sort_by:
        return SortSpec(field=column, order="desc" if sort_order == "asc" else "asc")
    return SortSpec(field=column, order="asc")


def get_sort_arrow(sort_by: str, sort_order: SortOrder, field: str) -> str:
    if field != sort_by:
        return "sort-neutral"
    return "sort-asc" if sort_order == "asc" else "sort-desc"
