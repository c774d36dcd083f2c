"""
Element resolution for webselect.

Turns a selector chain into element handles with a cardinality policy.
Lookups are issued fresh on every call; nothing is cached.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING, Union

from webselect.errors import ElementNotFoundError

if TYPE_CHECKING:
    from webselect.elements.base import BaseElement, BaseSession
    from webselect.selectors import Selector, Selectors

logger = logging.getLogger(__name__)

ElementSource = Union["BaseSession", "BaseElement"]


class ResolutionMode(str, Enum):
    """Cardinality policy applied to a resolved selection."""

    AT_LEAST_ONE = "at_least_one"
    EXACTLY_ONE = "exactly_one"


class ElementRepository:
    """Resolves a selector chain against a session.

    The first segment is looked up on the session (the document root),
    every later segment on each element found by the previous one. Results
    keep document order.

    Example:
        repository = ElementRepository(session, Selectors().append(Strategy.CSS, "li"))
        items = await repository.get_at_least_one()
    """

    def __init__(self, client: "BaseSession", selectors: "Selectors") -> None:
        self.client = client
        self.selectors = selectors

    async def resolve(self, mode: ResolutionMode) -> list["BaseElement"]:
        """Resolve elements under the given cardinality policy.

        Raises:
            ElementNotFoundError: If the cardinality requirement is not met.
            WebDriverError: If a remote lookup fails.
        """
        if mode == ResolutionMode.EXACTLY_ONE:
            return [await self.get_exactly_one()]
        return await self.get_at_least_one()

    async def get(self) -> list["BaseElement"]:
        """Resolve all elements matched by the chain (possibly none)."""
        if not len(self.selectors):
            raise ElementNotFoundError("empty selection")

        segments = iter(self.selectors)
        elements = await _get_elements(self.client, next(segments))
        for selector in segments:
            children: list["BaseElement"] = []
            for element in elements:
                children.extend(await _get_elements(element, selector))
            elements = children

        logger.debug(f"Resolved {len(elements)} element(s) for '{self.selectors}'")
        return elements

    async def get_at_least_one(self) -> list["BaseElement"]:
        elements = await self.get()
        if not elements:
            raise ElementNotFoundError("no elements found")
        return elements

    async def get_exactly_one(self) -> "BaseElement":
        elements = await self.get_at_least_one()
        if len(elements) > 1:
            raise ElementNotFoundError(
                f"method does not support multiple elements ({len(elements)})"
            )
        return elements[0]


async def _get_elements(
    source: ElementSource, selector: "Selector"
) -> list["BaseElement"]:
    wire = selector.api()

    if selector.single:
        elements = await source.get_elements(wire)
        if not elements:
            raise ElementNotFoundError("element not found")
        if len(elements) > 1:
            raise ElementNotFoundError("ambiguous find")
        return elements

    if selector.index is not None and selector.index > 0:
        elements = await source.get_elements(wire)
        if selector.index >= len(elements):
            raise ElementNotFoundError("element index out of range")
        return [elements[selector.index]]

    if selector.index == 0:
        return [await source.get_element(wire)]

    return list(await source.get_elements(wire))


__all__ = ["ElementRepository", "ResolutionMode"]
