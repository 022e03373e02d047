from .client_list_service import ClientListService, build_client_page, build_filter_options
from .contact_log_service import ContactLogService

__all__ = [
    "ClientListService",
    "ContactLogService",
    "build_client_page",
    "build_filter_options",
]
