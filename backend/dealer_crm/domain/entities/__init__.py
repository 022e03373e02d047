from .client import Client, CLIENT_TAGS, INTEREST_LEVELS
from .client_instrument import ClientInstrument
from .client_list import (
    DEFAULT_LIST_SORT,
    FILTER_CATEGORIES,
    HAS_INSTRUMENTS,
    NO_INSTRUMENTS,
    ClientFilterOptions,
    FilterState,
    PageResult,
    SortOrder,
    SortSpec,
)
from .contact_log import ContactLog

__all__ = [
    "Client",
    "CLIENT_TAGS",
    "INTEREST_LEVELS",
    "ClientInstrument",
    "DEFAULT_LIST_SORT",
    "FILTER_CATEGORIES",
    "HAS_INSTRUMENTS",
    "NO_INSTRUMENTS",
    "ClientFilterOptions",
    "FilterState",
    "PageResult",
    "SortOrder",
    "SortSpec",
    "ContactLog",
]
