"""
HTTP transport for the WebDriver wire protocol.

Sends JSON commands to a WebDriver endpoint and unwraps the ``value`` of
each response. Both the legacy JSON wire format (``status`` codes) and the
W3C format (``value.error``) are understood.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

import httpx

from webselect.config.defaults import DEFAULT_CONNECT_TIMEOUT, DEFAULT_TIMEOUT
from webselect.errors import WebDriverError

logger = logging.getLogger(__name__)


class Bus:
    """Sends commands relative to a base WebDriver URL.

    Example:
        async with Bus("http://localhost:4444/wd/hub/session/abc") as bus:
            await bus.send("POST", "url", {"url": "https://example.com"})
    """

    def __init__(
        self,
        url: str,
        *,
        client: Optional[httpx.AsyncClient] = None,
        timeout: float = DEFAULT_TIMEOUT,
        connect_timeout: float = DEFAULT_CONNECT_TIMEOUT,
        verify: bool = True,
        headers: Optional[dict[str, str]] = None,
    ) -> None:
        """Initialize the bus.

        Args:
            url: Base URL every endpoint is appended to.
            client: Shared httpx client. When omitted the bus creates and
                owns one.
            timeout: Per-request timeout in seconds.
            connect_timeout: Connection timeout in seconds.
            verify: Whether to verify TLS certificates.
            headers: Extra headers sent with every request.
        """
        self._url = url.rstrip("/")
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            timeout=httpx.Timeout(timeout, connect=connect_timeout),
            verify=verify,
            headers=headers,
        )

    @property
    def url(self) -> str:
        """Get the base URL."""
        return self._url

    @property
    def client(self) -> httpx.AsyncClient:
        """Get the underlying httpx client."""
        return self._client

    def endpoint_url(self, endpoint: str) -> str:
        return f"{self._url}/{endpoint}".rstrip("/")

    def child(self, path: str) -> "Bus":
        """Return a bus rooted at ``path`` that takes over this bus's client.

        Closing the child closes the client when this bus owned it.
        """
        bus = Bus(self.endpoint_url(path), client=self._client)
        bus._owns_client = self._owns_client
        self._owns_client = False
        return bus

    async def send(
        self,
        method: str,
        endpoint: str,
        body: Optional[Any] = None,
    ) -> Any:
        """Send a command and return the response ``value``.

        Args:
            method: HTTP method.
            endpoint: Endpoint relative to the base URL ("" for the base).
            body: JSON-serializable request body.

        Returns:
            The unwrapped ``value`` field of the response, or None.

        Raises:
            WebDriverError: If the request fails or the remote end reports
                an error.
        """
        url = self.endpoint_url(endpoint)
        logger.debug(f"{method} {url}")

        try:
            response = await self._client.request(method, url, json=body)
        except httpx.HTTPError as e:
            raise WebDriverError(f"request failed: {e}", endpoint=endpoint) from e

        logger.debug(f"{method} {url} -> {response.status_code}")

        payload = _decode(response)

        if response.status_code >= 400:
            raise WebDriverError(
                f"request unsuccessful: {_error_message(payload, response.text)}",
                status=response.status_code,
                endpoint=endpoint,
            )

        if not isinstance(payload, dict):
            return None

        status = payload.get("status", 0)
        value = payload.get("value")
        if status not in (0, None):
            raise WebDriverError(
                f"request unsuccessful: {_error_message(payload, response.text)}",
                status=status,
                endpoint=endpoint,
            )
        if isinstance(value, dict) and "error" in value:
            raise WebDriverError(
                f"request unsuccessful: {_error_message(payload, response.text)}",
                status=value["error"],
                endpoint=endpoint,
            )
        return value

    async def close(self) -> None:
        """Close the underlying client if the bus owns it."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "Bus":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()


def _decode(response: httpx.Response) -> Any:
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return None


def _error_message(payload: Any, fallback: str) -> str:
    if isinstance(payload, dict):
        value = payload.get("value")
        if isinstance(value, dict) and value.get("message"):
            return str(value["message"])
        if isinstance(value, str) and value:
            return value
    return fallback.strip() or "unknown error"


__all__ = ["Bus"]
