"""Application service (use case) for the client list view.

``build_client_page`` is the whole filter -> sort -> paginate pipeline as a
pure function; ``ClientListService`` feeds it from the repositories.
"""

import asyncio
import logging
from collections.abc import Collection, Sequence

from dealer_crm.application.interfaces import ClientInstrumentRepository, ClientRepository
from dealer_crm.application.services.client_filters import (
    filter_clients,
    get_unique_contact_numbers,
    get_unique_emails,
    get_unique_first_names,
    get_unique_interests,
    get_unique_last_names,
    get_unique_tags,
)
from dealer_crm.application.services.client_sorting import sort_clients
from dealer_crm.application.services.pagination import clamp_page, paginate, total_pages_for
from dealer_crm.domain.entities import (
    DEFAULT_LIST_SORT,
    Client,
    ClientFilterOptions,
    FilterState,
    PageResult,
    SortSpec,
)
from dealer_crm.domain.exceptions import EntityNotFoundError

logger = logging.getLogger(__name__)


def build_client_page(
    clients: Sequence[Client],
    search_term: str = "",
    filter_state: FilterState | None = None,
    sort: SortSpec = DEFAULT_LIST_SORT,
    page: int = 1,
    page_size: int = 20,
    clients_with_instruments: Collection[str] | None = None,
    *,
    clamp_to_last_page: bool = False,
) -> PageResult[Client]:
    """Filter, sort and paginate ``clients`` for one render of the list.

    With ``clamp_to_last_page`` a page past the end (or below 1) is pulled
    back into range instead of coming back empty.
    """
    state = filter_state if filter_state is not None else FilterState()
    filtered = filter_clients(clients, search_term, state, clients_with_instruments)
    ordered = sort_clients(filtered, sort.field, sort.order)

    if clamp_to_last_page:
        page = clamp_page(page, total_pages_for(len(ordered), page_size))

    result = paginate(ordered, page, page_size)
    logger.debug(
        "Client list: %d of %d clients match, page %d/%d sorted by %s %s",
        result.total_count,
        len(clients),
        result.current_page,
        result.total_pages,
        sort.field,
        sort.order,
    )
    return result


def _sorted_options(values: list[str]) -> list[str]:
    return sorted(values, key=str.casefold)


def build_filter_options(clients: Sequence[Client]) -> ClientFilterOptions:
    """Option lists for the filter widgets, alphabetised for display."""
    return ClientFilterOptions(
        last_names=_sorted_options(get_unique_last_names(clients)),
        first_names=_sorted_options(get_unique_first_names(clients)),
        contact_numbers=_sorted_options(get_unique_contact_numbers(clients)),
        emails=_sorted_options(get_unique_emails(clients)),
        tags=_sorted_options(get_unique_tags(clients)),
        interests=_sorted_options(get_unique_interests(clients)),
    )


class ClientListService:
    """Orchestrates the client list. Depends on the repository ports (DI)."""

    def __init__(
        self,
        client_repository: ClientRepository,
        instrument_repository: ClientInstrumentRepository,
        default_page_size: int = 20,
    ):
        self._clients = client_repository
        self._instruments = instrument_repository
        self._default_page_size = default_page_size

    async def get_client(self, client_id: str) -> Client:
        client = await self._clients.get_by_id(client_id)
        if client is None:
            raise EntityNotFoundError("Client", client_id)
        return client

    async def get_clients_with_instruments(self) -> set[str]:
        """Ids of clients linked to at least one instrument."""
        links = await self._instruments.get_all()
        return {link.client_id for link in links}

    async def list_clients(
        self,
        *,
        search_term: str = "",
        filter_state: FilterState | None = None,
        sort: SortSpec = DEFAULT_LIST_SORT,
        page: int = 1,
        page_size: int | None = None,
    ) -> PageResult[Client]:
        clients, with_instruments = await asyncio.gather(
            self._clients.get_all(),
            self.get_clients_with_instruments(),
        )
        return build_client_page(
            clients,
            search_term,
            filter_state,
            sort,
            page,
            page_size or self._default_page_size,
            with_instruments,
            clamp_to_last_page=True,
        )

    async def get_filter_options(self) -> ClientFilterOptions:
        clients = await self._clients.get_all()
        return build_filter_options(clients)
