"""
Read-only queries on a selection.

Queries other than ``count`` operate on exactly one element.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from webselect.errors import ResolutionError, SelectionError, WebSelectError

if TYPE_CHECKING:
    from webselect.elements.base import BaseElement, BaseSession
    from webselect.elements.repository import ElementRepository


class SelectionProperties:
    """Mixin providing property queries of a selection."""

    session: "BaseSession"
    elements: "ElementRepository"

    async def _select_element(self) -> "BaseElement":
        try:
            return await self.elements.get_exactly_one()
        except WebSelectError as e:
            raise ResolutionError(self, e, stage="select element from") from e

    async def count(self) -> int:
        """Return the number of elements the selection currently matches."""
        try:
            elements = await self.elements.get()
        except WebSelectError as e:
            raise ResolutionError(self, e) from e
        return len(elements)

    async def text(self) -> str:
        """Return the visible text of the element."""
        element = await self._select_element()
        try:
            return await element.get_text()
        except WebSelectError as e:
            raise SelectionError("retrieve text for", self, e) from e

    async def attribute(self, name: str) -> Optional[str]:
        """Return the value of attribute ``name``, or None if absent."""
        element = await self._select_element()
        try:
            return await element.get_attribute(name)
        except WebSelectError as e:
            raise SelectionError("retrieve attribute value for", self, e) from e

    async def css(self, property_name: str) -> str:
        """Return the computed value of CSS property ``property_name``."""
        element = await self._select_element()
        try:
            return await element.get_css(property_name)
        except WebSelectError as e:
            raise SelectionError("retrieve CSS property value for", self, e) from e

    async def selected(self) -> bool:
        element = await self._select_element()
        try:
            return await element.is_selected()
        except WebSelectError as e:
            raise SelectionError(
                "determine whether", self, e, qualifier=" is selected"
            ) from e

    async def visible(self) -> bool:
        element = await self._select_element()
        try:
            return await element.is_displayed()
        except WebSelectError as e:
            raise SelectionError(
                "determine whether", self, e, qualifier=" is visible"
            ) from e

    async def enabled(self) -> bool:
        element = await self._select_element()
        try:
            return await element.is_enabled()
        except WebSelectError as e:
            raise SelectionError(
                "determine whether", self, e, qualifier=" is enabled"
            ) from e

    async def equals_element(self, other: "SelectionProperties") -> bool:
        """Check whether both selections refer to the same element."""
        element = await self._select_element()
        other_element = await other._select_element()
        try:
            return await element.is_equal_to(other_element)
        except WebSelectError as e:
            raise SelectionError(
                "compare", self, e, qualifier=f" to {other}"
            ) from e

    async def mouse_to_element(self) -> None:
        """Move the mouse to the center of the element."""
        element = await self._select_element()
        try:
            await self.session.move_to(element, None)
        except WebSelectError as e:
            raise SelectionError("move mouse to", self, e) from e


__all__ = ["SelectionProperties"]
