from .client_repository import ClientRepository
from .client_instrument_repository import ClientInstrumentRepository
from .contact_log_repository import ContactLogRepository

__all__ = [
    "ClientRepository",
    "ClientInstrumentRepository",
    "ContactLogRepository",
]
