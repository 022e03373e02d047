"""Domain-specific exceptions — framework-independent."""


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class CrmApiError(Exception):
    """Raised when the upstream CRM data API fails or cannot be reached.

    ``status_code`` is the upstream HTTP status, or 0 when the request never
    produced a response (connection refused, timeout, ...).
    """

    def __init__(self, status_code: int, message: str, path: str = ""):
        self.status_code = status_code
        self.message = message
        self.path = path
        where = f" {path}" if path else ""
        super().__init__(f"[crm-api{where}] {status_code}: {message}")
