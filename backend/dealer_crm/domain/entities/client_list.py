"""Domain entities for the client list view — filter state, sort and page results."""

from dataclasses import dataclass, field
from typing import Generic, Literal, TypeVar

T = TypeVar("T")

SortOrder = Literal["asc", "desc"]

HAS_INSTRUMENTS = "Has Instruments"
NO_INSTRUMENTS = "No Instruments"

# Category name (as used by the filter UI) -> FilterState attribute
FILTER_CATEGORIES: dict[str, str] = {
    "last_name": "last_name",
    "first_name": "first_name",
    "contact_number": "contact_number",
    "email": "email",
    "tags": "tags",
    "interest": "interest",
    "hasInstruments": "has_instruments",
}


@dataclass
class FilterState:
    """Selected values per filter category.

    Each category is an ordered, duplicate-free list. ``has_instruments``
    holds at most the two sentinels ``HAS_INSTRUMENTS`` / ``NO_INSTRUMENTS``.
    Category names the UI sends but the list view does not know about are
    parked in ``extra`` and never consulted when filtering.
    """

    last_name: list[str] = field(default_factory=list)
    first_name: list[str] = field(default_factory=list)
    contact_number: list[str] = field(default_factory=list)
    email: list[str] = field(default_factory=list)
    tags: list[str] = field(default_factory=list)
    interest: list[str] = field(default_factory=list)
    has_instruments: list[str] = field(default_factory=list)
    extra: dict[str, list[str]] = field(default_factory=dict)

    @staticmethod
    def attribute_for(category: str) -> str | None:
        """Map a category name to its attribute, or None for unknown categories."""
        if category in FILTER_CATEGORIES:
            return FILTER_CATEGORIES[category]
        if category == "has_instruments":
            return category
        return None

    def selected(self, category: str) -> list[str]:
        attr = self.attribute_for(category)
        if attr is None:
            return self.extra.get(category, [])
        return getattr(self, attr)

    def as_dict(self) -> dict[str, list[str]]:
        """Category name -> selected values, known categories first."""
        result = {name: list(getattr(self, attr)) for name, attr in FILTER_CATEGORIES.items()}
        for name, values in self.extra.items():
            result[name] = list(values)
        return result


@dataclass(frozen=True)
class SortSpec:
    field: str = "first_name"
    order: SortOrder = "asc"


DEFAULT_LIST_SORT = SortSpec(field="created_at", order="desc")


@dataclass
class PageResult(Generic[T]):
    """One page of a filtered and sorted collection."""

    items: list[T]
    current_page: int
    total_pages: int
    total_count: int
    page_size: int


@dataclass
class ClientFilterOptions:
    """Values offered by each filter widget."""

    last_names: list[str] = field(default_factory=list)
    first_names: list[str] = field(default_factory=list)
    contact_numbers: list[str] = field(default_factory=list)
    emails: list[str] = field(default_factory=list)
    tags: list[str] = field(default_factory=list)
    interests: list[str] = field(default_factory=list)
