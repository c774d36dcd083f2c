"""
Base element and session interfaces for webselect.

Defines the capability set that every element implementation provides.
The production implementation is ``webselect.api.Element``; tests use
in-memory doubles conforming to the same interface.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from webselect.api.session import Offset
    from webselect.selectors import WireSelector


class BaseElement(ABC):
    """Abstract base class for a single remote element.

    An element is only valid for the lifetime of the session that
    produced it.
    """

    # Element queries

    @abstractmethod
    async def get_element(self, selector: "WireSelector") -> "BaseElement":
        """Find the first descendant matching ``selector``."""
        ...

    @abstractmethod
    async def get_elements(self, selector: "WireSelector") -> list["BaseElement"]:
        """Find all descendants matching ``selector``.

        Args:
            selector: Wire selector, resolved relative to this element.

        Returns:
            Matching elements in document order (possibly empty).
        """
        ...

    # Actions

    @abstractmethod
    async def click(self) -> None:
        """Click the element."""
        ...

    @abstractmethod
    async def clear(self) -> None:
        """Clear the element's value."""
        ...

    @abstractmethod
    async def set_value(self, text: str) -> None:
        """Type ``text`` into the element."""
        ...

    @abstractmethod
    async def submit(self) -> None:
        """Submit the form the element belongs to."""
        ...

    # State

    @abstractmethod
    async def get_attribute(self, name: str) -> Optional[str]:
        """Get an attribute value, or None if it is absent."""
        ...

    @abstractmethod
    async def get_name(self) -> str:
        """Get the element's tag name."""
        ...

    @abstractmethod
    async def get_text(self) -> str:
        """Get the element's visible text."""
        ...

    @abstractmethod
    async def get_css(self, property_name: str) -> str:
        """Get a computed CSS property value."""
        ...

    @abstractmethod
    async def is_selected(self) -> bool:
        """Check if the element (checkbox, radio, option) is selected."""
        ...

    @abstractmethod
    async def is_displayed(self) -> bool:
        """Check if the element is displayed."""
        ...

    @abstractmethod
    async def is_enabled(self) -> bool:
        """Check if the element is enabled."""
        ...

    @abstractmethod
    async def is_equal_to(self, other: "BaseElement") -> bool:
        """Check if both handles refer to the same DOM node."""
        ...


class BaseSession(ABC):
    """Abstract base class for the session-scoped side of the transport.

    The session is the document root for element lookups and owns the
    actions that are not bound to one element (mouse movement, double-click).
    """

    @abstractmethod
    async def get_element(self, selector: "WireSelector") -> BaseElement:
        """Find the first element in the document matching ``selector``."""
        ...

    @abstractmethod
    async def get_elements(self, selector: "WireSelector") -> list[BaseElement]:
        """Find all elements in the document matching ``selector``."""
        ...

    @abstractmethod
    async def move_to(
        self,
        element: Optional[BaseElement] = None,
        offset: Optional["Offset"] = None,
    ) -> None:
        """Move the mouse.

        Args:
            element: Element to move to. With no offset the mouse lands on
                the element's center.
            offset: Offset from the element's top-left corner, or from the
                current position when no element is given.
        """
        ...

    @abstractmethod
    async def double_click(self) -> None:
        """Double-click at the current mouse position."""
        ...

    @abstractmethod
    async def delete(self) -> None:
        """End the session and release its resources."""
        ...


__all__ = [
    "BaseElement",
    "BaseSession",
]
