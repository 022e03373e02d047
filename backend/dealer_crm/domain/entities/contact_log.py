"""Domain entity — a logged contact with a client and its follow-up reminder."""

from dataclasses import dataclass
from datetime import date
from typing import Any


def _optional_str(value: Any) -> str | None:
    if value is None:
        return None
    return value if isinstance(value, str) else str(value)


def _iso_date(value: Any, field_name: str) -> str:
    """Check that ``value`` starts with an ISO date and return it unchanged."""
    if not isinstance(value, str):
        raise TypeError(f"{field_name} must be a string, got {type(value).__name__}")
    date.fromisoformat(value[:10])
    return value


@dataclass
class ContactLog:
    """A single contact entry.

    Dates are kept as the upstream ``YYYY-MM-DD`` strings;
    ``follow_up_completed_at`` is an ISO timestamp once the reminder is done.
    """

    id: str
    client_id: str
    content: str
    contact_date: str
    contact_type: str = "note"
    instrument_id: str | None = None
    subject: str | None = None
    next_follow_up_date: str | None = None
    follow_up_completed_at: str | None = None
    purpose: str | None = None
    created_at: str = ""
    updated_at: str = ""

    @classmethod
    def from_dict(cls, row: dict[str, Any]) -> "ContactLog":
        """Build a ContactLog from an upstream JSON row.

        Raises ``KeyError`` for a missing id, client id or contact date,
        ``TypeError`` for a non-string date and ``ValueError`` for a date that
        is not ``YYYY-MM-DD``.
        """
        next_follow_up = row.get("next_follow_up_date")
        return cls(
            id=str(row["id"]),
            client_id=str(row["client_id"]),
            content=_optional_str(row.get("content")) or "",
            contact_date=_iso_date(row["contact_date"], "contact_date"),
            contact_type=_optional_str(row.get("contact_type")) or "note",
            instrument_id=_optional_str(row.get("instrument_id")),
            subject=_optional_str(row.get("subject")),
            next_follow_up_date=(
                None if next_follow_up is None
                else _iso_date(next_follow_up, "next_follow_up_date")
            ),
            follow_up_completed_at=_optional_str(row.get("follow_up_completed_at")),
            purpose=_optional_str(row.get("purpose")),
            created_at=_optional_str(row.get("created_at")) or "",
            updated_at=_optional_str(row.get("updated_at")) or "",
        )

    @property
    def follow_up_pending(self) -> bool:
        return self.next_follow_up_date is not None and self.follow_up_completed_at is None

    def is_follow_up_due(self, today: date) -> bool:
        """True for an incomplete follow-up scheduled for ``today`` or earlier."""
        if not self.follow_up_pending:
            return False
        return date.fromisoformat(self.next_follow_up_date[:10]) <= today

    def days_overdue(self, today: date) -> int:
        """Days past the follow-up date (0 when due today, or when none is set)."""
        if self.next_follow_up_date is None:
            return 0
        due = date.fromisoformat(self.next_follow_up_date[:10])
        return max(0, (today - due).days)
