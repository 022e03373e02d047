"""Pydantic DTOs for contact logs and follow-up reminders."""

from pydantic import BaseModel


class ContactLogResponse(BaseModel):
    """Schema returned to the client."""

    id: str
    client_id: str
    instrument_id: str | None
    contact_type: str
    subject: str | None
    content: str
    contact_date: str
    next_follow_up_date: str | None
    follow_up_completed_at: str | None
    purpose: str | None
    created_at: str
    updated_at: str

    model_config = {"from_attributes": True}


class FollowUpResponse(ContactLogResponse):
    """A due follow-up, with how many days it is past its date."""

    days_overdue: int
