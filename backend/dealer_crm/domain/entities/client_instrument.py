"""Domain entity — link between a client and an instrument."""

from dataclasses import dataclass
from typing import Any


@dataclass
class ClientInstrument:
    """One row of the client/instrument relationship collection.

    Only ``client_id`` matters to the client list: the set of client ids with
    at least one link drives the "Has Instruments" filter.
    """

    id: str
    client_id: str
    instrument_id: str
    relationship_type: str = "Interested"
    notes: str | None = None
    created_at: str = ""

    @classmethod
    def from_dict(cls, row: dict[str, Any]) -> "ClientInstrument":
        return cls(
            id=str(row["id"]),
            client_id=str(row["client_id"]),
            instrument_id=str(row["instrument_id"]),
            relationship_type=row.get("relationship_type") or "Interested",
            notes=row.get("notes"),
            created_at=row.get("created_at") or "",
        )
