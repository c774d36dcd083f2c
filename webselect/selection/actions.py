"""
Bulk actions for selections.

Every action resolves the selection (at least one element), then applies
its steps to each element in document order. The first failing step stops
the action and is raised as a SelectionError naming the step and the
selection. Elements that are the wrong kind for the action raise
SemanticMismatchError instead.
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import TYPE_CHECKING, Iterator, Union

from webselect.errors import (
    ResolutionError,
    SelectionError,
    SemanticMismatchError,
    WebSelectError,
)
from webselect.selectors import WireSelector, xpath_literal

if TYPE_CHECKING:
    from webselect.elements.base import BaseElement, BaseSession
    from webselect.elements.repository import ElementRepository


class SelectionActions:
    """Mixin providing the action API of a selection.

    Requires ``session``, ``elements`` (an ElementRepository) and a
    ``__str__`` that renders as ``selection '<description>'``.
    """

    session: "BaseSession"
    elements: "ElementRepository"

    @contextmanager
    def _stage(self, stage: str, *, qualifier: str = "") -> Iterator[None]:
        """Wrap remote failures raised inside the block with ``stage``."""
        try:
            yield
        except WebSelectError as e:
            raise SelectionError(stage, self, e, qualifier=qualifier) from e

    async def _select_elements(self) -> list["BaseElement"]:
        try:
            return await self.elements.get_at_least_one()
        except WebSelectError as e:
            raise ResolutionError(self, e) from e

    async def click(self) -> None:
        """Click on every element of the selection."""
        for element in await self._select_elements():
            with self._stage("click on"):
                await element.click()

    async def double_click(self) -> None:
        """Double-click on every element of the selection.

        The mouse is moved to the center of each element before its
        double-click is issued.
        """
        for element in await self._select_elements():
            with self._stage("move mouse to"):
                await self.session.move_to(element, None)
            with self._stage("double-click on"):
                await self.session.double_click()

    async def fill(self, text: str) -> None:
        """Replace the value of every element with ``text``."""
        for element in await self._select_elements():
            with self._stage("clear"):
                await element.clear()
            with self._stage("enter text into"):
                await element.set_value(text)

    async def upload_file(self, path: Union[str, "os.PathLike[str]"]) -> None:
        """Enter the absolute form of ``path`` into every file input.

        Args:
            path: File path, relative paths resolve against the working
                directory.

        Raises:
            SemanticMismatchError: If an element is not ``<input type="file">``.
            SelectionError: If a remote step fails.
        """
        absolute_path = os.path.abspath(path)

        for element in await self._select_elements():
            with self._stage("determine tag name of"):
                tag_name = await element.get_name()
            if tag_name != "input":
                raise SemanticMismatchError(
                    f"element for {self} is not an input element", self
                )

            with self._stage("determine type attribute of"):
                input_type = await element.get_attribute("type")
            if input_type != "file":
                raise SemanticMismatchError(
                    f"element for {self} is not a file uploader", self
                )

            with self._stage("enter text into"):
                await element.set_value(absolute_path)

    async def check(self) -> None:
        """Check every checkbox in the selection that is not yet checked."""
        await self._set_checked(True)

    async def uncheck(self) -> None:
        """Uncheck every checkbox in the selection that is checked."""
        await self._set_checked(False)

    async def _set_checked(self, checked: bool) -> None:
        # Every element must be a checkbox before any of them is toggled.
        elements = await self._select_elements()
        for element in elements:
            with self._stage("retrieve type attribute of"):
                input_type = await element.get_attribute("type")
            if input_type != "checkbox":
                raise SemanticMismatchError(
                    f"{self} does not refer to a checkbox", self
                )

        for element in elements:
            with self._stage("retrieve state of"):
                selected = await element.is_selected()
            if selected != checked:
                with self._stage("click on"):
                    await element.click()

    async def select(self, text: str) -> None:
        """Select the options whose normalized text equals ``text``.

        Every matching ``<option>`` child of every element is clicked.

        Raises:
            SemanticMismatchError: If an element has no matching option.
            SelectionError: If a remote step fails.
        """
        option_selector = WireSelector.xpath(
            f"./option[normalize-space()={xpath_literal(text)}]"
        )

        for element in await self._select_elements():
            with self._stage("select specified option for"):
                options = await element.get_elements(option_selector)
            if not options:
                raise SemanticMismatchError(
                    f'no options with text "{text}" found for {self}', self
                )

            for option in options:
                with self._stage(f'click on option with text "{text}" for'):
                    await option.click()

    async def submit(self) -> None:
        """Submit every element of the selection."""
        for element in await self._select_elements():
            with self._stage("submit"):
                await element.submit()


__all__ = ["SelectionActions"]
