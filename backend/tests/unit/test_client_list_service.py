"""Unit tests for the ClientListService and the client page pipeline."""

import pytest

from dealer_crm.application.interfaces import ClientInstrumentRepository, ClientRepository
from dealer_crm.application.services import (
    ClientListService,
    build_client_page,
    build_filter_options,
)
from dealer_crm.domain.entities import (
    HAS_INSTRUMENTS,
    Client,
    ClientInstrument,
    FilterState,
    SortSpec,
)
from dealer_crm.domain.exceptions import EntityNotFoundError


class FakeClientRepository(ClientRepository):
    """In-memory fake repository for unit testing."""

    def __init__(self, clients: list[Client]):
        self._clients = clients
        self.get_all_calls = 0

    async def get_all(self) -> list[Client]:
        self.get_all_calls += 1
        return list(self._clients)

    async def get_by_id(self, client_id: str) -> Client | None:
        return next((c for c in self._clients if c.id == client_id), None)


class FakeClientInstrumentRepository(ClientInstrumentRepository):
    def __init__(self, links: list[ClientInstrument]):
        self._links = links

    async def get_all(self) -> list[ClientInstrument]:
        return list(self._links)


CLIENTS = [
    Client(id="c1", first_name="Bob", last_name="Kim", tags=["Owner"], created_at="2024-01-03"),
    Client(id="c2", first_name=None, last_name="Lee", tags=["Musician"], created_at="2024-01-01"),
    Client(id="c3", first_name="alice", last_name="Park", tags=["Owner", "Dealer"], created_at="2024-01-02"),
    Client(id="c4", first_name="Dana", last_name="kim", tags=[], interest="Active", created_at="2024-01-04"),
]

LINKS = [
    ClientInstrument(id="l1", client_id="c1", instrument_id="i1", relationship_type="Owned"),
    ClientInstrument(id="l2", client_id="c1", instrument_id="i2", relationship_type="Interested"),
    ClientInstrument(id="l3", client_id="c3", instrument_id="i3", relationship_type="Sold"),
]


@pytest.fixture
def service() -> ClientListService:
    return ClientListService(
        FakeClientRepository(CLIENTS),
        FakeClientInstrumentRepository(LINKS),
        default_page_size=2,
    )


# ── Pure pipeline ──


def test_build_client_page_defaults_to_newest_first():
    page = build_client_page(CLIENTS)
    assert [c.id for c in page.items] == ["c4", "c1", "c3", "c2"]
    assert page.total_pages == 1


def test_build_client_page_filters_sorts_and_slices():
    page = build_client_page(
        CLIENTS,
        search_term="",
        filter_state=FilterState(tags=["Owner", "Musician"]),
        sort=SortSpec("first_name", "asc"),
        page=1,
        page_size=2,
    )
    assert [c.id for c in page.items] == ["c3", "c1"]
    assert page.total_count == 3
    assert page.total_pages == 2


def test_build_client_page_out_of_range_without_clamp_is_empty():
    page = build_client_page(CLIENTS, page=5, page_size=2)
    assert page.items == []
    assert page.current_page == 5


def test_build_client_page_clamps_when_asked():
    page = build_client_page(CLIENTS, page=5, page_size=2, clamp_to_last_page=True)
    assert page.current_page == 2
    assert len(page.items) == 2


def test_build_filter_options_are_alphabetised():
    options = build_filter_options(CLIENTS)
    assert options.first_names == ["alice", "Bob", "Dana"]
    assert options.last_names == ["Kim", "kim", "Lee", "Park"]
    assert options.tags == ["Dealer", "Musician", "Owner"]
    assert options.interests == ["Active"]
    assert options.emails == []


# ── Service ──


@pytest.mark.asyncio
async def test_get_clients_with_instruments(service: ClientListService):
    assert await service.get_clients_with_instruments() == {"c1", "c3"}


@pytest.mark.asyncio
async def test_list_clients_uses_instrument_links(service: ClientListService):
    page = await service.list_clients(
        filter_state=FilterState(has_instruments=[HAS_INSTRUMENTS]),
        sort=SortSpec("last_name", "asc"),
    )
    assert [c.id for c in page.items] == ["c1", "c3"]
    assert page.page_size == 2


@pytest.mark.asyncio
async def test_list_clients_clamps_page(service: ClientListService):
    page = await service.list_clients(page=10)
    assert page.current_page == 2
    assert [c.id for c in page.items] == ["c3", "c2"]


@pytest.mark.asyncio
async def test_list_clients_search(service: ClientListService):
    page = await service.list_clients(search_term="KIM", page_size=10)
    assert [c.id for c in page.items] == ["c4", "c1"]


@pytest.mark.asyncio
async def test_get_filter_options(service: ClientListService):
    options = await service.get_filter_options()
    assert options.tags == ["Dealer", "Musician", "Owner"]


@pytest.mark.asyncio
async def test_get_client(service: ClientListService):
    client = await service.get_client("c2")
    assert client.last_name == "Lee"


@pytest.mark.asyncio
async def test_get_client_not_found(service: ClientListService):
    with pytest.raises(EntityNotFoundError):
        await service.get_client("missing")
