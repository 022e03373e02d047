from .client import ClientResponse, ClientPageResponse, ClientFilterOptionsResponse
from .contact_log import ContactLogResponse, FollowUpResponse

__all__ = [
    "ClientResponse",
    "ClientPageResponse",
    "ClientFilterOptionsResponse",
    "ContactLogResponse",
    "FollowUpResponse",
]
