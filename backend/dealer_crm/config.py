import logging
from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings

_config_logger = logging.getLogger(__name__)

_BACKEND_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _BACKEND_DIR / ".env",
    ".env",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "Dealer CRM Client API"
    app_version: str = "0.1.0"
    app_env: str = "development"
    cors_origins: list[str] = ["http://localhost:3000"]

    # Upstream CRM data API (clients, connections, contacts)
    crm_api_base_url: str = "http://localhost:3000/api"
    crm_api_timeout: float = 30.0

    # Client list view
    client_page_size: int = 20
    max_page_size: int = 200

    # Logging — per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_http: str = "WARNING"          # httpx / httpcore — outbound HTTP
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error
    log_level_crm_api: str = "INFO"          # CRM data API adapter
    log_level_client_list: str = "INFO"      # Filter / sort / paginate pipeline

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
    }

    def model_post_init(self, __context: object) -> None:
        """Normalise values that are easy to get wrong in a .env file."""
        self.crm_api_base_url = self.crm_api_base_url.rstrip("/")
        if self.client_page_size < 1:
            _config_logger.warning(
                "CLIENT_PAGE_SIZE=%d is not positive; falling back to 20",
                self.client_page_size,
            )
            self.client_page_size = 20
        if self.max_page_size < self.client_page_size:
            self.max_page_size = self.client_page_size


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance — reads .env once."""
    return Settings()
