"""
WebDriver element handle.

Every method is a single remote command sent through the owning session.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional

from webselect.elements.base import BaseElement
from webselect.errors import WebDriverError

if TYPE_CHECKING:
    from webselect.api.session import Session
    from webselect.selectors import WireSelector

# W3C element reference key
W3C_ELEMENT_KEY = "element-6066-11e4-a52e-4f735466cecf"


def element_id_from(value: Any) -> str:
    """Extract the element ID from a wire element reference."""
    if isinstance(value, dict):
        element_id = value.get(W3C_ELEMENT_KEY) or value.get("ELEMENT")
        if element_id:
            return str(element_id)
    raise WebDriverError(f"invalid element reference: {value!r}")


class Element(BaseElement):
    """A remote element belonging to a WebDriver session."""

    def __init__(self, element_id: str, session: "Session") -> None:
        self.id = element_id
        self.session = session

    async def _send(
        self,
        method: str,
        endpoint: str,
        body: Optional[Any] = None,
    ) -> Any:
        path = f"element/{self.id}/{endpoint}" if endpoint else f"element/{self.id}"
        return await self.session.send(method, path, body)

    async def get_element(self, selector: "WireSelector") -> "Element":
        value = await self._send(
            "POST", "element", {"using": selector.using, "value": selector.value}
        )
        return Element(element_id_from(value), self.session)

    async def get_elements(self, selector: "WireSelector") -> list[BaseElement]:
        values = await self._send(
            "POST", "elements", {"using": selector.using, "value": selector.value}
        )
        return [Element(element_id_from(value), self.session) for value in values or []]

    async def click(self) -> None:
        await self._send("POST", "click")

    async def clear(self) -> None:
        await self._send("POST", "clear")

    async def set_value(self, text: str) -> None:
        await self._send("POST", "value", {"value": list(text), "text": text})

    async def submit(self) -> None:
        await self._send("POST", "submit")

    async def get_attribute(self, name: str) -> Optional[str]:
        return await self._send("GET", f"attribute/{name}")

    async def get_name(self) -> str:
        return await self._send("GET", "name")

    async def get_text(self) -> str:
        return await self._send("GET", "text")

    async def get_css(self, property_name: str) -> str:
        return await self._send("GET", f"css/{property_name}")

    async def is_selected(self) -> bool:
        return bool(await self._send("GET", "selected"))

    async def is_displayed(self) -> bool:
        return bool(await self._send("GET", "displayed"))

    async def is_enabled(self) -> bool:
        return bool(await self._send("GET", "enabled"))

    async def is_equal_to(self, other: BaseElement) -> bool:
        other_id = getattr(other, "id", None)
        if other_id is None:
            return False
        return bool(await self._send("GET", f"equals/{other_id}"))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Element):
            return NotImplemented
        return self.id == other.id and self.session is other.session

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"<Element id={self.id!r}>"


__all__ = ["Element", "W3C_ELEMENT_KEY", "element_id_from"]
