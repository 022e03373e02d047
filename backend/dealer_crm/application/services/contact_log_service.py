"""Application service (use case) for contact logs and follow-up reminders."""

import logging
from collections.abc import Callable
from datetime import date

from dealer_crm.application.interfaces import ContactLogRepository
from dealer_crm.domain.entities import ContactLog

logger = logging.getLogger(__name__)


class ContactLogService:
    """Reads contact logs and picks out the follow-ups that need attention."""

    def __init__(
        self,
        repository: ContactLogRepository,
        today: Callable[[], date] = date.today,
    ):
        self._repository = repository
        self._today = today

    def today(self) -> date:
        return self._today()

    async def list_for_client(
        self, client_id: str, *, instrument_id: str | None = None
    ) -> list[ContactLog]:
        """Contact logs for a client, most recent contact first."""
        logs = await self._repository.get_by_client(client_id, instrument_id=instrument_id)
        return sorted(logs, key=lambda log: (log.contact_date, log.created_at), reverse=True)

    async def due_follow_ups(self) -> list[ContactLog]:
        """Incomplete follow-ups due today or earlier.

        Most urgent first (earliest follow-up date); on the same date the most
        recent contact comes first.
        """
        today = self.today()
        logs = [
            log for log in await self._repository.get_due_follow_ups()
            if log.is_follow_up_due(today)
        ]
        # Two passes of a stable sort: secondary key first, then primary.
        logs.sort(key=lambda log: log.contact_date, reverse=True)
        logs.sort(key=lambda log: log.next_follow_up_date or "")
        logger.debug("%d follow-ups due on %s", len(logs), today.isoformat())
        return logs
