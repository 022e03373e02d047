"""Client filtering — filter option extraction, filter-state toggling and the client predicate.

All functions are pure: inputs are never mutated and every call returns a
new list / FilterState.  Null handling differs on purpose between the two
kinds of matching:

* exact-match categories compare ``field or ""`` against the selection, so a
  client without a last name only matches an explicit ``""`` selection;
* the free-text search skips ``None`` fields entirely.
"""

from collections.abc import Collection, Iterable, Mapping, Sequence
from dataclasses import replace
from typing import Any

from dealer_crm.domain.entities import (
    FILTER_CATEGORIES,
    HAS_INSTRUMENTS,
    NO_INSTRUMENTS,
    Client,
    FilterState,
)

SEARCH_FIELDS = (
    "first_name",
    "last_name",
    "contact_number",
    "email",
    "interest",
    "note",
    "client_number",
)
EXACT_MATCH_CATEGORIES = ("last_name", "first_name", "contact_number", "email", "interest")


def field_value(item: Any, name: str) -> Any:
    """Read ``name`` from a dataclass-like object or a mapping; missing -> None."""
    if isinstance(item, Mapping):
        return item.get(name)
    return getattr(item, name, None)


def _client_tags(client: Any) -> list[str]:
    tags = field_value(client, "tags")
    return list(tags) if isinstance(tags, (list, tuple)) else []


# ── Filter options ───────────────────────────────────────────────────


def get_unique_values(clients: Iterable[Client], field: str) -> list[str]:
    """Distinct non-empty string values of ``field`` in first-occurrence order.

    Case is preserved ("Smith" and "smith" are two values) and nothing is
    sorted; callers that want alphabetical options sort the result.
    """
    seen: set[str] = set()
    values: list[str] = []
    for client in clients:
        value = field_value(client, field)
        if isinstance(value, str) and value and value not in seen:
            seen.add(value)
            values.append(value)
    return values


def get_unique_tags(clients: Iterable[Client]) -> list[str]:
    """All tags across clients, flattened and de-duplicated in first-occurrence order."""
    seen: set[str] = set()
    tags: list[str] = []
    for client in clients:
        for tag in _client_tags(client):
            if tag not in seen:
                seen.add(tag)
                tags.append(tag)
    return tags


def get_unique_last_names(clients: Iterable[Client]) -> list[str]:
    return get_unique_values(clients, "last_name")


def get_unique_first_names(clients: Iterable[Client]) -> list[str]:
    return get_unique_values(clients, "first_name")


def get_unique_contact_numbers(clients: Iterable[Client]) -> list[str]:
    return get_unique_values(clients, "contact_number")


def get_unique_emails(clients: Iterable[Client]) -> list[str]:
    return get_unique_values(clients, "email")


def get_unique_interests(clients: Iterable[Client]) -> list[str]:
    return get_unique_values(clients, "interest")


# ── Filter state ─────────────────────────────────────────────────────


def toggle(values: Sequence[str], value: str) -> list[str]:
    """Remove ``value`` if selected, otherwise append it. Returns a new list."""
    if value in values:
        return [v for v in values if v != value]
    return [*values, value]


def handle_filter_change(state: FilterState, category: str, value: str) -> FilterState:
    """Toggle ``value`` within ``category`` and return the new state.

    Unknown categories are accepted and stored under ``state.extra``.
    """
    attr = FilterState.attribute_for(category)
    if attr is None:
        extra = dict(state.extra)
        extra[category] = toggle(state.extra.get(category, []), value)
        return replace(state, extra=extra)
    return replace(state, **{attr: toggle(getattr(state, attr), value)})


def handle_has_instruments_change(state: FilterState, value: str) -> FilterState:
    """Single-selection toggle for the instrument-ownership category."""
    selected = [] if value in state.has_instruments else [value]
    return replace(state, has_instruments=selected)


def clear_all_filters() -> FilterState:
    return FilterState()


def count_active_filters(state: FilterState, search_term: str = "") -> int:
    """Number of selected values across all categories, plus one for a search term."""
    count = sum(len(state.selected(category)) for category in FILTER_CATEGORIES)
    if search_term:
        count += 1
    return count


# ── Predicate ────────────────────────────────────────────────────────


def matches_search(client: Client, search_term: str) -> bool:
    """Case-insensitive substring search over the searchable fields and tags.

    Only the empty string disables the search; whitespace is searched literally.
    """
    if search_term == "":
        return True
    needle = search_term.lower()
    for name in SEARCH_FIELDS:
        value = field_value(client, name)
        if value is not None and needle in str(value).lower():
            return True
    return any(needle in tag.lower() for tag in _client_tags(client))


def matches_filters(
    client: Client,
    state: FilterState,
    clients_with_instruments: Collection[str],
) -> bool:
    for category in EXACT_MATCH_CATEGORIES:
        selected = state.selected(category)
        if selected and (field_value(client, category) or "") not in selected:
            return False

    if state.tags:
        client_tags = _client_tags(client)
        if not any(tag in client_tags for tag in state.tags):
            return False

    # Enforced only for a single selection; none or both means "don't care".
    if len(state.has_instruments) == 1:
        has = field_value(client, "id") in clients_with_instruments
        choice = state.has_instruments[0]
        if choice == HAS_INSTRUMENTS and not has:
            return False
        if choice == NO_INSTRUMENTS and has:
            return False

    return True


def filter_clients(
    clients: Iterable[Client],
    search_term: str,
    state: FilterState,
    clients_with_instruments: Collection[str] | None = None,
) -> list[Client]:
    """Clients passing the search term and every active filter, in input order.

    When ``clients_with_instruments`` is omitted it counts as an empty set, so
    a lone "Has Instruments" selection then excludes every client.
    """
    with_instruments = clients_with_instruments if clients_with_instruments is not None else frozenset()
    return [
        client
        for client in clients
        if matches_search(client, search_term)
        and matches_filters(client, state, with_instruments)
    ]
