"""Logging setup for the dealer CRM service.

Each log category in Settings (``log_level_http``, ``log_level_crm_api`` ...)
controls a group of loggers, so the upstream request chatter can be turned
down while the client list pipeline stays at DEBUG, or the other way round.
"""

import logging
import sys

from dealer_crm.config import Settings, get_settings

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

LOGGER_CATEGORIES: dict[str, tuple[str, ...]] = {
    "log_level_http": ("httpx", "httpcore"),
    "log_level_uvicorn": ("uvicorn", "uvicorn.access", "uvicorn.error"),
    "log_level_crm_api": ("dealer_crm.infrastructure.crm_api",),
    "log_level_client_list": ("dealer_crm.application.services",),
}


def setup_logging(settings: Settings | None = None) -> dict[str, int]:
    """Apply root and per-category levels; returns the level set on each logger."""
    settings = settings or get_settings()

    root = logging.getLogger()
    root.setLevel(_parse_level(settings.log_level))
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)

    applied: dict[str, int] = {}
    for settings_field, logger_names in LOGGER_CATEGORIES.items():
        level = _parse_level(getattr(settings, settings_field))
        for name in logger_names:
            logging.getLogger(name).setLevel(level)
            applied[name] = level

    logging.getLogger(__name__).debug(
        "Log levels: root=%s %s",
        settings.log_level,
        ", ".join(f"{name}={logging.getLevelName(level)}" for name, level in applied.items()),
    )
    return applied


def _parse_level(raw: str) -> int:
    """Level name to logging constant; unknown names mean INFO."""
    numeric = getattr(logging, str(raw).upper(), None)
    return numeric if isinstance(numeric, int) else logging.INFO
