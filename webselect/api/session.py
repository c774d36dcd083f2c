"""
WebDriver session.

A Session wraps a Bus bound to ``<url>/session/<id>`` and provides the
document-level element lookups and the session-scoped mouse commands.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Optional

import httpx

from webselect.api.bus import Bus
from webselect.api.element import Element, element_id_from
from webselect.elements.base import BaseElement, BaseSession
from webselect.errors import WebDriverError

if TYPE_CHECKING:
    from webselect.config.options import ClientOptions
    from webselect.selectors import WireSelector

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Offset:
    """Mouse offset in CSS pixels."""

    x: int = 0
    y: int = 0


class Session(BaseSession):
    """Remote WebDriver session.

    Example:
        session = await Session.open("http://localhost:4444/wd/hub", {"browserName": "chrome"})
        elements = await session.get_elements(WireSelector.css("a"))
        await session.delete()
    """

    def __init__(self, bus: Bus, session_id: Optional[str] = None) -> None:
        """Initialize Session.

        Args:
            bus: Bus whose base URL is this session's URL.
            session_id: Remote session ID, if known.
        """
        self.bus = bus
        self.session_id = session_id

    @classmethod
    async def open(
        cls,
        url: str,
        capabilities: Optional[dict[str, Any]] = None,
        *,
        options: Optional["ClientOptions"] = None,
        client: Optional[httpx.AsyncClient] = None,
    ) -> "Session":
        """Create a new remote session.

        Args:
            url: WebDriver server URL (e.g. ``http://localhost:4444/wd/hub``).
            capabilities: Desired capabilities.
            options: Client options for timeouts, TLS and headers.
            client: Shared httpx client, left open when the session is
                deleted.

        Returns:
            Session bound to the newly created remote session.

        Raises:
            WebDriverError: If the server refuses or returns no session ID.
        """
        capabilities = capabilities or {}
        bus_kwargs: dict[str, Any] = {}
        if options is not None:
            bus_kwargs = {
                "timeout": options.timeout,
                "connect_timeout": options.connect_timeout,
                "verify": options.verify_ssl,
                "headers": options.headers,
            }

        root = Bus(url, client=client, **bus_kwargs)
        try:
            response = await root.client.post(
                root.endpoint_url("session"),
                json={
                    "desiredCapabilities": capabilities,
                    "capabilities": {"alwaysMatch": capabilities},
                },
            )
        except httpx.HTTPError as e:
            await root.close()
            raise WebDriverError(f"request failed: {e}", endpoint="session") from e

        try:
            payload = response.json() if response.content else {}
        except ValueError:
            payload = {}
        if not isinstance(payload, dict):
            payload = {}
        session_id = payload.get("sessionId")
        value = payload.get("value")
        if session_id is None and isinstance(value, dict):
            session_id = value.get("sessionId")
        if response.status_code >= 400 or not session_id:
            await root.close()
            raise WebDriverError(
                f"failed to create session: {response.text.strip() or response.status_code}",
                status=response.status_code,
                endpoint="session",
            )

        logger.debug(f"Opened WebDriver session {session_id}")
        return cls(root.child(f"session/{session_id}"), session_id)

    async def send(
        self,
        method: str,
        endpoint: str,
        body: Optional[Any] = None,
    ) -> Any:
        """Send a command relative to the session URL."""
        return await self.bus.send(method, endpoint, body)

    async def get_element(self, selector: "WireSelector") -> Element:
        value = await self.send("POST", "element", _selector_body(selector))
        return Element(element_id_from(value), self)

    async def get_elements(self, selector: "WireSelector") -> list[BaseElement]:
        values = await self.send("POST", "elements", _selector_body(selector))
        return [Element(element_id_from(value), self) for value in values or []]

    async def get_active_element(self) -> Element:
        value = await self.send("POST", "element/active")
        return Element(element_id_from(value), self)

    async def move_to(
        self,
        element: Optional[BaseElement] = None,
        offset: Optional[Offset] = None,
    ) -> None:
        body: dict[str, Any] = {}
        if element is not None:
            body["element"] = getattr(element, "id", None)
        if offset is not None:
            body["xoffset"] = offset.x
            body["yoffset"] = offset.y
        await self.send("POST", "moveto", body)

    async def double_click(self) -> None:
        await self.send("POST", "doubleclick")

    async def delete(self) -> None:
        """Delete the remote session and release the transport."""
        try:
            await self.send("DELETE", "")
        finally:
            await self.bus.close()
        logger.debug(f"Deleted WebDriver session {self.session_id}")


def _selector_body(selector: "WireSelector") -> dict[str, str]:
    return {"using": selector.using, "value": selector.value}


__all__ = ["Offset", "Session"]
