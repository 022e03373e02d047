"""HTTP client for the upstream CRM data API.

The API answers ``GET`` requests with ``{"data": [...], "count": n}`` and
errors with ``{"error": "..."}`` (sometimes ``{"error": {"message": ...}}``).
"""

import logging
import time
from typing import Any

import httpx

from dealer_crm.domain.exceptions import CrmApiError

logger = logging.getLogger(__name__)


class CrmApiClient:
    """Infrastructure adapter — thin JSON GET wrapper over httpx.

    An injected ``httpx.AsyncClient`` is reused and left open; otherwise a
    client is created and closed per request.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        http_client: httpx.AsyncClient | None = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._http_client = http_client

    def _url(self, path: str) -> str:
        return f"{self._base_url}/{path.lstrip('/')}"

    async def _get_client(self) -> httpx.AsyncClient:
        """Return the injected client or create a new one."""
        if self._http_client is not None:
            return self._http_client
        return httpx.AsyncClient(timeout=self._timeout)

    async def get_json(self, path: str, params: dict[str, Any] | None = None) -> dict[str, Any]:
        """GET ``path`` and return the decoded JSON object."""
        client = await self._get_client()
        should_close = self._http_client is None
        started = time.perf_counter()

        try:
            response = await client.get(
                self._url(path),
                params=params,
                headers={"Accept": "application/json"},
            )
        except httpx.HTTPError as exc:
            logger.warning("CRM API GET %s failed: %s", path, exc)
            raise CrmApiError(status_code=0, message=str(exc) or type(exc).__name__, path=path) from exc
        finally:
            if should_close:
                await client.aclose()

        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.debug("CRM API GET %s -> %d (%.0f ms)", path, response.status_code, elapsed_ms)

        if not response.is_success:
            self._raise_api_error(response, path)

        try:
            payload = response.json()
        except ValueError as exc:
            raise CrmApiError(response.status_code, "Response body is not valid JSON", path) from exc
        if not isinstance(payload, dict):
            raise CrmApiError(response.status_code, "Expected a JSON object", path)
        return payload

    async def get_rows(self, path: str, params: dict[str, Any] | None = None) -> list[dict[str, Any]]:
        """GET ``path`` and return its ``data`` list (missing or null -> [])."""
        payload = await self.get_json(path, params)
        data = payload.get("data")
        if data is None:
            return []
        if not isinstance(data, list):
            raise CrmApiError(200, "Expected 'data' to be a list", path)
        return [row for row in data if isinstance(row, dict)]

    def _raise_api_error(self, response: httpx.Response, path: str) -> None:
        """Raise CrmApiError with the most specific message the body offers."""
        try:
            data = response.json()
            error = data.get("error", response.text)
            if isinstance(error, dict):
                error = error.get("message", response.text)
            message = str(error)
        except Exception:
            message = response.text or response.reason_phrase

        logger.warning("CRM API GET %s returned %d: %s", path, response.status_code, message)
        raise CrmApiError(
            status_code=response.status_code,
            message=message,
            path=path,
        )
