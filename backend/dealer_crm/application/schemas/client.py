"""Pydantic DTOs (Data Transfer Objects) for the client list."""

from typing import Literal

from pydantic import BaseModel, Field


class ClientResponse(BaseModel):
    """A client row as rendered by the list view."""

    id: str
    first_name: str | None
    last_name: str | None
    contact_number: str | None
    email: str | None
    tags: list[str]
    interest: str | None
    note: str | None
    client_number: str | None
    created_at: str

    # Derived display helpers
    display_name: str
    display_contact: str
    initials: str
    is_complete: bool

    model_config = {"from_attributes": True}


class ClientPageResponse(BaseModel):
    """One page of the filtered, sorted client list plus paging metadata."""

    items: list[ClientResponse]
    current_page: int
    total_pages: int
    total_count: int
    page_size: int
    sort_by: str
    sort_order: Literal["asc", "desc"]
    active_filters: int = Field(0, description="Selected filter values plus one for a search term")


class ClientFilterOptionsResponse(BaseModel):
    """Values offered by each filter widget."""

    last_names: list[str]
    first_names: list[str]
    contact_numbers: list[str]
    emails: list[str]
    tags: list[str]
    interests: list[str]

    model_config = {"from_attributes": True}
