"""Base HTTP client for the platform API."""

import httpx
from loguru import logger
from pydantic import ValidationError

from civic_client.errors import ApiError

# Default settings
API_BASE_URL = "http://localhost:5000/api"
API_TIMEOUT = 30


def set_api_config(base_url: str, timeout: int) -> None:
    """Set API configuration."""
    global API_BASE_URL, API_TIMEOUT
    API_BASE_URL = base_url
    API_TIMEOUT = timeout


def _error_message(resp: httpx.Response) -> str:
    """Pull the server's error text out of a failed response."""
    try:
        body = resp.json()
    except ValueError:
        return resp.reason_phrase or f"HTTP {resp.status_code}"
    if isinstance(body, dict):
        return body.get("error") or body.get("message") or f"HTTP {resp.status_code}"
    return f"HTTP {resp.status_code}"


class BaseClient:
    """Async HTTP client for one platform API area.

    Responses use the ``{"success": ..., "data": ...}`` envelope; helpers
    return the unwrapped ``data``. Failures are not retried.
    """

    def __init__(self, token: str | None = None, transport: httpx.AsyncBaseTransport | None = None):
        self._client: httpx.AsyncClient | None = None
        self._token = token
        self._transport = transport
        self._request_count = 0

    async def __aenter__(self):
        headers = {"Accept": "application/json"}
        if self._token:
            headers["Authorization"] = f"Bearer {self._token}"
        self._client = httpx.AsyncClient(
            base_url=API_BASE_URL,
            timeout=API_TIMEOUT,
            headers=headers,
            transport=self._transport,
        )
        return self

    async def __aexit__(self, *_):
        logger.debug("{}: {} API requests", self.__class__.__name__, self._request_count)
        if self._client:
            await self._client.aclose()

    async def _request(self, method: str, path: str, payload: dict | None = None) -> dict | list:
        self._request_count += 1
        resp = await self._client.request(method, path, json=payload)
        if resp.is_error:
            raise ApiError(resp.status_code, _error_message(resp))

        body = resp.json()
        if isinstance(body, dict) and "success" in body:
            if not body["success"]:
                raise ApiError(resp.status_code, body.get("error") or "Request failed")
            return body.get("data")
        return body

    async def _get(self, path: str) -> dict | list:
        """GET request."""
        return await self._request("GET", path)

    async def _post(self, path: str, payload: dict) -> dict | list:
        """POST request with a JSON body."""
        return await self._request("POST", path, payload)


async def safe_request(coro, default=None):
    """Execute coroutine, return default on failure."""
    try:
        return await coro
    except (httpx.HTTPError, ApiError, ValidationError) as e:
        logger.warning("Request failed: {}", e)
        return default
