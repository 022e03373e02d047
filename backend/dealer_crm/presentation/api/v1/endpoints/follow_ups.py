"""Follow-up reminder endpoints."""

from dataclasses import asdict

from fastapi import APIRouter, Depends, HTTPException, status

from dealer_crm.application.schemas import FollowUpResponse
from dealer_crm.application.services import ContactLogService
from dealer_crm.domain.exceptions import CrmApiError
from dealer_crm.infrastructure.dependencies import get_contact_log_service

router = APIRouter(prefix="/follow-ups", tags=["Follow-ups"])


@router.get("/due", response_model=list[FollowUpResponse])
async def list_due_follow_ups(
    service: ContactLogService = Depends(get_contact_log_service),
) -> list[FollowUpResponse]:
    """Incomplete follow-ups due today or overdue, most urgent first."""
    try:
        logs = await service.due_follow_ups()
    except CrmApiError as e:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=e.message)

    today = service.today()
    return [
        FollowUpResponse(**asdict(log), days_overdue=log.days_overdue(today))
        for log in logs
    ]
