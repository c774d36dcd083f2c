"""
Selections and selection chaining.

Selections are cheap, immutable descriptions: building one performs no
remote calls. Every action or query re-resolves the selector chain.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from webselect.elements.repository import ElementRepository
from webselect.selection.actions import SelectionActions
from webselect.selection.properties import SelectionProperties
from webselect.selectors import Selectors, Strategy

if TYPE_CHECKING:
    from webselect.elements.base import BaseSession


class Selectable:
    """Base for anything new selections can be started from.

    Subclasses get ``find*`` (exactly one match), ``first*`` (first match)
    and ``all*`` (every match) for each selector strategy.
    """

    def __init__(
        self,
        session: "BaseSession",
        selectors: Optional[Selectors] = None,
    ) -> None:
        self.session = session
        self.selectors = selectors if selectors is not None else Selectors()

    def _find(self, strategy: Strategy, value: str) -> "Selection":
        return Selection(self.session, self.selectors.append(strategy, value).single())

    def _first(self, strategy: Strategy, value: str) -> "Selection":
        return Selection(self.session, self.selectors.append(strategy, value).at(0))

    def _all(self, strategy: Strategy, value: str) -> "MultiSelection":
        return MultiSelection(self.session, self.selectors.append(strategy, value))

    # Exactly one match

    def find(self, selector: str) -> "Selection":
        """Select exactly one element by CSS selector."""
        return self._find(Strategy.CSS, selector)

    def find_by_xpath(self, selector: str) -> "Selection":
        return self._find(Strategy.XPATH, selector)

    def find_by_link(self, text: str) -> "Selection":
        return self._find(Strategy.LINK, text)

    def find_by_label(self, text: str) -> "Selection":
        """Select the input labelled by ``text``."""
        return self._find(Strategy.LABEL, text)

    def find_by_button(self, text: str) -> "Selection":
        return self._find(Strategy.BUTTON, text)

    def find_by_name(self, name: str) -> "Selection":
        return self._find(Strategy.NAME, name)

    def find_by_class(self, name: str) -> "Selection":
        return self._find(Strategy.CLASS, name)

    def find_by_id(self, element_id: str) -> "Selection":
        return self._find(Strategy.ID, element_id)

    # First match

    def first(self, selector: str) -> "Selection":
        """Select the first element matching a CSS selector."""
        return self._first(Strategy.CSS, selector)

    def first_by_xpath(self, selector: str) -> "Selection":
        return self._first(Strategy.XPATH, selector)

    def first_by_link(self, text: str) -> "Selection":
        return self._first(Strategy.LINK, text)

    def first_by_label(self, text: str) -> "Selection":
        return self._first(Strategy.LABEL, text)

    def first_by_button(self, text: str) -> "Selection":
        return self._first(Strategy.BUTTON, text)

    def first_by_name(self, name: str) -> "Selection":
        return self._first(Strategy.NAME, name)

    def first_by_class(self, name: str) -> "Selection":
        return self._first(Strategy.CLASS, name)

    # Every match

    def all(self, selector: str) -> "MultiSelection":
        """Select every element matching a CSS selector."""
        return self._all(Strategy.CSS, selector)

    def all_by_xpath(self, selector: str) -> "MultiSelection":
        return self._all(Strategy.XPATH, selector)

    def all_by_link(self, text: str) -> "MultiSelection":
        return self._all(Strategy.LINK, text)

    def all_by_label(self, text: str) -> "MultiSelection":
        return self._all(Strategy.LABEL, text)

    def all_by_button(self, text: str) -> "MultiSelection":
        return self._all(Strategy.BUTTON, text)

    def all_by_name(self, name: str) -> "MultiSelection":
        return self._all(Strategy.NAME, name)

    def all_by_class(self, name: str) -> "MultiSelection":
        return self._all(Strategy.CLASS, name)


class Selection(Selectable, SelectionActions, SelectionProperties):
    """A reusable, stateless selection of elements.

    Example:
        form = page.find("#signup")
        await form.find_by_label("Email").fill("user@example.com")
        await form.find_by_label("I agree").check()
        await form.submit()
    """

    def __init__(
        self,
        session: "BaseSession",
        selectors: Optional[Selectors] = None,
        *,
        elements: Optional[ElementRepository] = None,
    ) -> None:
        """Initialize Selection.

        Args:
            session: Session used for lookups and session-scoped actions.
            selectors: Selector chain describing the selection.
            elements: Repository override. By default a fresh
                ElementRepository is built for every resolution.
        """
        super().__init__(session, selectors)
        self._elements = elements

    @property
    def elements(self) -> ElementRepository:
        if self._elements is not None:
            return self._elements
        return ElementRepository(self.session, self.selectors)

    @property
    def description(self) -> str:
        """Human-readable description of the selector chain."""
        return str(self.selectors)

    def __str__(self) -> str:
        return f"selection '{self.description}'"

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self.description!r}>"


class MultiSelection(Selection):
    """A selection expected to match any number of elements."""

    def at(self, index: int) -> Selection:
        """Narrow the selection to the element at ``index`` (0-based)."""
        return Selection(self.session, self.selectors.at(index))


__all__ = ["Selectable", "Selection", "MultiSelection"]
