"""Client list endpoints — filtered/sorted/paginated clients, filter options, contact logs."""

from typing import Literal

from fastapi import APIRouter, Depends, HTTPException, Query, status

from dealer_crm.application.schemas import (
    ClientFilterOptionsResponse,
    ClientPageResponse,
    ClientResponse,
    ContactLogResponse,
)
from dealer_crm.application.services import ClientListService, ContactLogService
from dealer_crm.application.services.client_filters import count_active_filters
from dealer_crm.application.services.client_sorting import SORTABLE_FIELDS
from dealer_crm.config import get_settings
from dealer_crm.domain.entities import CLIENT_TAGS, INTEREST_LEVELS, FilterState, SortSpec
from dealer_crm.domain.exceptions import CrmApiError, EntityNotFoundError
from dealer_crm.infrastructure.dependencies import (
    get_client_list_service,
    get_contact_log_service,
)

router = APIRouter(prefix="/clients", tags=["Clients"])


def _unique(values: list[str]) -> list[str]:
    return list(dict.fromkeys(values))


def _bad_gateway(e: CrmApiError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=e.message)


@router.get("", response_model=ClientPageResponse)
async def list_clients(
    search: str = Query("", description="Case-insensitive substring search"),
    last_name: list[str] = Query([]),
    first_name: list[str] = Query([]),
    contact_number: list[str] = Query([]),
    email: list[str] = Query([]),
    tags: list[str] = Query(
        [], description=f"Clients with any of these tags ({', '.join(CLIENT_TAGS)})"
    ),
    interest: list[str] = Query([], description=f"One of: {', '.join(INTEREST_LEVELS)}"),
    has_instruments: list[str] = Query(
        [], alias="hasInstruments", description="'Has Instruments' or 'No Instruments'"
    ),
    sort_by: str = Query("created_at"),
    sort_order: Literal["asc", "desc"] = Query("desc"),
    page: int = Query(1, ge=1),
    page_size: int | None = Query(None, ge=1),
    service: ClientListService = Depends(get_client_list_service),
) -> ClientPageResponse:
    """Retrieve one page of the client list."""
    if sort_by not in SORTABLE_FIELDS:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"Cannot sort by '{sort_by}'. Allowed: {', '.join(SORTABLE_FIELDS)}",
        )
    if page_size is not None:
        page_size = min(page_size, get_settings().max_page_size)

    filter_state = FilterState(
        last_name=_unique(last_name),
        first_name=_unique(first_name),
        contact_number=_unique(contact_number),
        email=_unique(email),
        tags=_unique(tags),
        interest=_unique(interest),
        has_instruments=_unique(has_instruments),
    )
    sort = SortSpec(field=sort_by, order=sort_order)

    try:
        result = await service.list_clients(
            search_term=search,
            filter_state=filter_state,
            sort=sort,
            page=page,
            page_size=page_size,
        )
    except CrmApiError as e:
        raise _bad_gateway(e)

    return ClientPageResponse(
        items=[ClientResponse.model_validate(c, from_attributes=True) for c in result.items],
        current_page=result.current_page,
        total_pages=result.total_pages,
        total_count=result.total_count,
        page_size=result.page_size,
        sort_by=sort.field,
        sort_order=sort.order,
        active_filters=count_active_filters(filter_state, search),
    )


@router.get("/filter-options", response_model=ClientFilterOptionsResponse)
async def get_filter_options(
    service: ClientListService = Depends(get_client_list_service),
) -> ClientFilterOptionsResponse:
    """Values available in each filter widget."""
    try:
        options = await service.get_filter_options()
    except CrmApiError as e:
        raise _bad_gateway(e)
    return ClientFilterOptionsResponse.model_validate(options, from_attributes=True)


@router.get("/{client_id}", response_model=ClientResponse)
async def get_client(
    client_id: str,
    service: ClientListService = Depends(get_client_list_service),
) -> ClientResponse:
    """Retrieve a single client by ID."""
    try:
        client = await service.get_client(client_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except CrmApiError as e:
        raise _bad_gateway(e)
    return ClientResponse.model_validate(client, from_attributes=True)


@router.get("/{client_id}/contacts", response_model=list[ContactLogResponse])
async def list_client_contacts(
    client_id: str,
    instrument_id: str | None = Query(None, description="Only contacts about this instrument"),
    service: ContactLogService = Depends(get_contact_log_service),
) -> list[ContactLogResponse]:
    """Contact history for one client, most recent first."""
    try:
        logs = await service.list_for_client(client_id, instrument_id=instrument_id)
    except CrmApiError as e:
        raise _bad_gateway(e)
    return [ContactLogResponse.model_validate(log, from_attributes=True) for log in logs]
