from .crm_api_client import CrmApiClient
from .repositories import (
    ApiClientInstrumentRepository,
    ApiClientRepository,
    ApiContactLogRepository,
)

__all__ = [
    "CrmApiClient",
    "ApiClientRepository",
    "ApiClientInstrumentRepository",
    "ApiContactLogRepository",
]
