"""Domain entity — a dealer's client as served by the CRM data API."""

from dataclasses import dataclass, field
from typing import Any

CLIENT_TAGS = ("Owner", "Musician", "Dealer", "Collector", "Other")
INTEREST_LEVELS = ("Active", "Passive", "Inactive")


def _optional_str(value: Any) -> str | None:
    if value is None:
        return None
    return value if isinstance(value, str) else str(value)


@dataclass
class Client:
    """Read-only client record.

    Every contact field may be ``None``. ``tags`` is always a list; a missing
    or null ``tags`` column from upstream becomes ``[]``.
    """

    id: str
    first_name: str | None = None
    last_name: str | None = None
    contact_number: str | None = None
    email: str | None = None
    tags: list[str] = field(default_factory=list)
    interest: str | None = None
    note: str | None = None
    client_number: str | None = None
    created_at: str = ""

    def __post_init__(self) -> None:
        if self.tags is None:
            self.tags = []

    @classmethod
    def from_dict(cls, row: dict[str, Any]) -> "Client":
        """Build a Client from an upstream JSON row.

        Raises ``KeyError`` when the row has no ``id``.
        """
        raw_tags = row.get("tags")
        tags = [str(t) for t in raw_tags] if isinstance(raw_tags, list) else []
        return cls(
            id=str(row["id"]),
            first_name=_optional_str(row.get("first_name")),
            last_name=_optional_str(row.get("last_name")),
            contact_number=_optional_str(row.get("contact_number")),
            email=_optional_str(row.get("email")),
            tags=tags,
            interest=_optional_str(row.get("interest")),
            note=_optional_str(row.get("note")),
            client_number=_optional_str(row.get("client_number")),
            created_at=_optional_str(row.get("created_at")) or "",
        )

    @property
    def display_name(self) -> str:
        full_name = f"{self.first_name or ''} {self.last_name or ''}".strip()
        return full_name or "Unknown Client"

    @property
    def display_contact(self) -> str:
        return self.contact_number or "No contact info"

    @property
    def initials(self) -> str:
        first = (self.first_name or "")[:1].upper()
        last = (self.last_name or "")[:1].upper()
        return f"{first}{last}" or "U"

    @property
    def is_complete(self) -> bool:
        """True when the client has a full name and at least one way to reach them."""
        return bool(
            self.first_name
            and self.last_name
            and (self.contact_number or self.email)
        )
