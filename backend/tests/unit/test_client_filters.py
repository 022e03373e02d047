"""Unit tests for filter options, filter-state toggling and the client predicate."""

from dataclasses import replace

import pytest

from dealer_crm.application.services.client_filters import (
    clear_all_filters,
    count_active_filters,
    filter_clients,
    get_unique_contact_numbers,
    get_unique_emails,
    get_unique_first_names,
    get_unique_interests,
    get_unique_last_names,
    get_unique_tags,
    get_unique_values,
    handle_filter_change,
    handle_has_instruments_change,
    toggle,
)
from dealer_crm.domain.entities import HAS_INSTRUMENTS, NO_INSTRUMENTS, Client, FilterState


BASE = Client(
    id="1",
    last_name="Kim",
    first_name="Jiho",
    contact_number="010-1111-2222",
    email="jiho@example.com",
    tags=["Owner", "Musician"],
    interest="Active",
    note="Prefers Strad models",
    client_number="CL001",
    created_at="2024-01-01",
)

SAMPLE = [
    BASE,
    replace(
        BASE,
        id="2",
        last_name="Lee",
        first_name="Ara",
        contact_number="010-3333-4444",
        email="ara@example.com",
        tags=["Collector", "Musician"],
        interest="Passive",
        client_number="CL002",
    ),
    replace(
        BASE,
        id="3",
        last_name=None,
        first_name=None,
        contact_number=None,
        email=None,
        tags=[],
        interest=None,
        client_number=None,
    ),
]


# ── Filter options ──


def test_unique_last_names_skip_nulls_and_duplicates():
    clients = [
        Client(id="a", last_name="Kim"),
        Client(id="b", last_name="Kim"),
        Client(id="c", last_name=None),
        Client(id="d", last_name="Lee"),
    ]
    assert get_unique_last_names(clients) == ["Kim", "Lee"]


def test_unique_primitive_fields_keep_first_occurrence_order():
    assert get_unique_first_names(SAMPLE) == ["Jiho", "Ara"]
    assert get_unique_contact_numbers(SAMPLE) == ["010-1111-2222", "010-3333-4444"]
    assert get_unique_emails(SAMPLE) == ["jiho@example.com", "ara@example.com"]
    assert get_unique_interests(SAMPLE) == ["Active", "Passive"]


def test_unique_values_are_case_sensitive():
    clients = [Client(id="1", last_name="Smith"), Client(id="2", last_name="smith")]
    assert get_unique_values(clients, "last_name") == ["Smith", "smith"]


def test_unique_values_edge_cases():
    assert get_unique_values([], "last_name") == []
    assert get_unique_values([Client(id="1"), Client(id="2")], "email") == []


def test_unique_tags_flatten_and_dedupe():
    assert get_unique_tags(SAMPLE) == ["Owner", "Musician", "Collector"]


def test_unique_tags_treat_null_as_empty():
    clients = [Client(id="1", tags=None), Client(id="2", tags=["Dealer"])]
    assert get_unique_tags(clients) == ["Dealer"]


# ── Filter state ──


def test_toggle_appends_and_removes_without_mutating():
    current = ["Owner"]
    added = toggle(current, "Collector")
    assert added == ["Owner", "Collector"]
    assert current == ["Owner"]
    assert toggle(added, "Owner") == ["Collector"]


@pytest.mark.parametrize(
    "values, value",
    [([], "a"), (["a"], "a"), (["a", "b", "c"], "b"), (["a", "b"], "z")],
)
def test_toggle_twice_restores_original_set(values, value):
    result = toggle(toggle(values, value), value)
    assert set(result) == set(values)
    assert len(result) == len(values)


def test_toggle_twice_keeps_order_of_untouched_values():
    assert toggle(toggle(["a", "b", "c"], "d"), "d") == ["a", "b", "c"]


def test_handle_filter_change_replaces_only_one_category():
    state = FilterState(tags=["Owner"])
    updated = handle_filter_change(state, "tags", "Collector")

    assert updated.tags == ["Owner", "Collector"]
    assert state.tags == ["Owner"]
    assert updated is not state
    assert updated.interest is state.interest


def test_handle_filter_change_maps_has_instruments_category():
    updated = handle_filter_change(FilterState(), "hasInstruments", HAS_INSTRUMENTS)
    assert updated.has_instruments == [HAS_INSTRUMENTS]


def test_handle_filter_change_accepts_unknown_category():
    updated = handle_filter_change(FilterState(), "maker", "Stradivari")
    assert updated.extra == {"maker": ["Stradivari"]}
    assert updated.as_dict()["maker"] == ["Stradivari"]
    # Unknown categories never constrain the list.
    assert filter_clients(SAMPLE, "", updated) == SAMPLE


def test_clear_all_filters_returns_fresh_empty_state():
    first = clear_all_filters()
    second = clear_all_filters()
    assert first == second
    assert first is not second
    assert first.tags is not second.tags
    assert first.as_dict() == {
        "last_name": [],
        "first_name": [],
        "contact_number": [],
        "email": [],
        "tags": [],
        "interest": [],
        "hasInstruments": [],
    }


def test_has_instruments_change_is_single_selection():
    state = handle_has_instruments_change(FilterState(), HAS_INSTRUMENTS)
    assert state.has_instruments == [HAS_INSTRUMENTS]

    state = handle_has_instruments_change(state, NO_INSTRUMENTS)
    assert state.has_instruments == [NO_INSTRUMENTS]

    state = handle_has_instruments_change(state, NO_INSTRUMENTS)
    assert state.has_instruments == []


def test_count_active_filters():
    state = FilterState(tags=["Owner", "Dealer"], interest=["Active"])
    assert count_active_filters(state) == 3
    assert count_active_filters(state, "kim") == 4
    assert count_active_filters(FilterState()) == 0


# ── Predicate ──


def test_empty_search_and_filters_keep_everything():
    assert filter_clients(SAMPLE, "", FilterState()) == SAMPLE


def test_search_is_case_insensitive_across_fields():
    assert [c.id for c in filter_clients(SAMPLE, "ARA@", FilterState())] == ["2"]
    assert [c.id for c in filter_clients(SAMPLE, "strad", FilterState())] == ["1", "2", "3"]
    assert [c.id for c in filter_clients(SAMPLE, "cl002", FilterState())] == ["2"]
    assert [c.id for c in filter_clients(SAMPLE, "passive", FilterState())] == ["2"]


def test_search_matches_tags():
    assert [c.id for c in filter_clients(SAMPLE, "collect", FilterState())] == ["2"]


def test_whitespace_search_is_a_literal_substring_test():
    assert filter_clients(SAMPLE, "   ", FilterState()) == []


def test_search_skips_null_fields():
    client = Client(id="9", first_name=None, last_name=None, note=None)
    assert filter_clients([client], "none", FilterState()) == []


def test_exact_match_categories_are_not_substring():
    state = FilterState(last_name=["Ki"])
    assert filter_clients(SAMPLE, "", state) == []
    state = FilterState(last_name=["Kim", "Lee"])
    assert [c.id for c in filter_clients(SAMPLE, "", state)] == ["1", "2"]


def test_exact_match_treats_null_as_empty_string():
    state = FilterState(interest=[""])
    assert [c.id for c in filter_clients(SAMPLE, "", state)] == ["3"]


def test_tags_use_or_semantics():
    state = FilterState(tags=["Owner", "Musician"])
    client = Client(id="x", tags=["Musician"])
    assert filter_clients([client], "", state) == [client]


def test_tags_filter_excludes_clients_without_tags():
    state = FilterState(tags=["Owner"])
    assert [c.id for c in filter_clients(SAMPLE, "", state)] == ["1"]


def test_has_instruments_single_selection_is_enforced():
    with_instruments = {"1"}
    has = FilterState(has_instruments=[HAS_INSTRUMENTS])
    none = FilterState(has_instruments=[NO_INSTRUMENTS])

    assert [c.id for c in filter_clients(SAMPLE, "", has, with_instruments)] == ["1"]
    assert [c.id for c in filter_clients(SAMPLE, "", none, with_instruments)] == ["2", "3"]


def test_has_instruments_both_selected_has_no_effect():
    state = FilterState(has_instruments=[HAS_INSTRUMENTS, NO_INSTRUMENTS])
    assert filter_clients(SAMPLE, "", state, {"1"}) == SAMPLE
    assert filter_clients(SAMPLE, "", state, set()) == SAMPLE


def test_has_instruments_empty_selection_without_instrument_set():
    assert filter_clients(SAMPLE, "", FilterState()) == SAMPLE


def test_has_instruments_without_instrument_set_excludes_everything():
    state = FilterState(has_instruments=[HAS_INSTRUMENTS])
    assert filter_clients(SAMPLE, "", state) == []


def test_filters_combine_with_and():
    state = FilterState(tags=["Musician"], interest=["Passive"])
    assert [c.id for c in filter_clients(SAMPLE, "ara", state)] == ["2"]
    assert filter_clients(SAMPLE, "jiho", state) == []


def test_filtering_is_idempotent_and_order_preserving():
    clients = SAMPLE + [Client(id="4", first_name="Mina", tags=["Musician"], interest="Active")]
    state = FilterState(tags=["Musician"])

    once = filter_clients(clients, "i", state)
    twice = filter_clients(once, "i", state)

    assert once == twice
    positions = [clients.index(c) for c in once]
    assert positions == sorted(positions)


def test_mapping_rows_with_tuple_tags():
    rows = [
        {"id": "m1", "first_name": "Ana", "tags": ("Dealer", "Owner")},
        {"id": "m2", "first_name": "Ben", "tags": ["Owner"]},
        {"id": "m3", "first_name": "Cy", "tags": None},
    ]

    assert get_unique_tags(rows) == ["Dealer", "Owner"]
    matched = filter_clients(rows, "", FilterState(tags=["Dealer"]))
    assert [row["id"] for row in matched] == ["m1"]
    assert [row["id"] for row in filter_clients(rows, "deal", FilterState())] == ["m1"]
