"""Async request layer used by the admin screens"""

from typing import Any, Optional

import httpx

from workmongolia.core.config import settings
from workmongolia.core.exceptions import RequestFailedError
from workmongolia.core.logging import get_logger

logger = get_logger(__name__)


def _error_message(response: httpx.Response) -> str:
    """Build ``"<status>: <message>"`` from an error response"""
    prefix = f"{response.status_code}"
    try:
        body = response.json()
    except ValueError:
        text = response.text or response.reason_phrase
        return f"{prefix}: {response.reason_phrase} - {text}"

    if isinstance(body, dict):
        message = body.get("error") or body.get("detail")
        if isinstance(message, str):
            return f"{prefix}: {message}"
    return f"{prefix}: {response.reason_phrase}"


class ApiClient:
    """
    Thin wrapper around ``httpx.AsyncClient``.

    Every call either returns the decoded JSON body or raises
    ``RequestFailedError``; transport errors and timeouts are reported the
    same way as server-side rejections.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        headers: Optional[dict] = None
    ):
        """
        Args:
            base_url: Backend origin, defaults to ``API_BASE_URL``
            timeout: Per-request timeout in seconds, defaults to ``REQUEST_TIMEOUT_SECONDS``
            transport: Custom transport (ASGI app, mock handler)
            headers: Extra headers sent with every request
        """
        self._client = httpx.AsyncClient(
            base_url=base_url or settings.API_BASE_URL,
            timeout=timeout if timeout is not None else settings.REQUEST_TIMEOUT_SECONDS,
            transport=transport,
            headers={"Accept": "application/json", **(headers or {})},
        )

    async def __aenter__(self) -> "ApiClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def request(self, method: str, url: str, data: Any = None) -> Any:
        """
        Send a request and return the decoded JSON body

        Raises:
            RequestFailedError: On non-2xx responses, timeouts and transport errors
        """
        try:
            response = await self._client.request(method, url, json=data)
        except httpx.TimeoutException as e:
            logger.warning(f"Request timed out: {method} {url}")
            raise RequestFailedError(f"Request timed out: {method} {url}") from e
        except httpx.HTTPError as e:
            logger.warning(f"Request failed: {method} {url}: {e}")
            raise RequestFailedError(f"Network error: {e}") from e

        if response.is_error:
            message = _error_message(response)
            logger.warning(f"Request rejected: {method} {url}: {message}")
            raise RequestFailedError(message, status_code=response.status_code)

        if not response.content:
            return None
        return response.json()

    async def get(self, url: str) -> Any:
        return await self.request("GET", url)

    async def post(self, url: str, data: Any = None) -> Any:
        return await self.request("POST", url, data)

    async def put(self, url: str, data: Any = None) -> Any:
        return await self.request("PUT", url, data)

    async def patch(self, url: str, data: Any = None) -> Any:
        return await self.request("PATCH", url, data)

    async def delete(self, url: str) -> Any:
        return await self.request("DELETE", url)
