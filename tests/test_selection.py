"""
Tests for webselect.selection chaining and property queries.
"""

from unittest.mock import AsyncMock, call

import pytest

from webselect.elements import BaseElement, ElementRepository
from webselect.errors import (
    ElementNotFoundError,
    ResolutionError,
    SelectionError,
    WebDriverError,
)
from webselect.page import Page
from webselect.selection import MultiSelection, Selection
from webselect.selectors import Selectors, Strategy, WireSelector


@pytest.fixture
def page(session):
    return Page(session)


class TestChaining:
    """Tests for building selections."""

    def test_find(self, page):
        """Test find() requires a single match."""
        selection = page.find("#x")

        assert type(selection) is Selection
        assert str(selection) == "selection 'CSS: #x [single]'"

    def test_first(self, page):
        """Test first() picks index zero."""
        assert page.first("li").description == "CSS: li [0]"

    def test_all(self, page):
        """Test all() returns a multi-selection."""
        selection = page.all("li")

        assert isinstance(selection, MultiSelection)
        assert selection.description == "CSS: li"

    def test_at(self, page):
        """Test at() narrows a multi-selection."""
        selection = page.all("li").at(2)

        assert type(selection) is Selection
        assert selection.description == "CSS: li [2]"

    def test_nested_chain(self, page):
        """Test selections chain from parent selections."""
        selection = page.find("#form").all_by_xpath("./input").at(1).find_by_name("x")

        assert selection.description == (
            "CSS: #form [single] | XPath: ./input [1] | Name: x [single]"
        )

    def test_css_merge_through_all(self, page):
        """Test unmarked CSS segments merge across chaining."""
        assert page.all("#form").all("input").description == "CSS: #form input"

    @pytest.mark.parametrize(
        "method, expected",
        [
            ("find_by_xpath", "XPath: v [single]"),
            ("find_by_link", "Link: v [single]"),
            ("find_by_label", "Label: v [single]"),
            ("find_by_button", "Button: v [single]"),
            ("find_by_name", "Name: v [single]"),
            ("find_by_class", "Class: v [single]"),
            ("find_by_id", "ID: v [single]"),
            ("first_by_xpath", "XPath: v [0]"),
            ("first_by_link", "Link: v [0]"),
            ("first_by_label", "Label: v [0]"),
            ("first_by_button", "Button: v [0]"),
            ("first_by_name", "Name: v [0]"),
            ("first_by_class", "Class: v [0]"),
            ("all_by_xpath", "XPath: v"),
            ("all_by_link", "Link: v"),
            ("all_by_label", "Label: v"),
            ("all_by_button", "Button: v"),
            ("all_by_name", "Name: v"),
            ("all_by_class", "Class: v"),
        ],
    )
    def test_named_finders(self, page, method, expected):
        """Test every named finder records its strategy."""
        assert getattr(page, method)("v").description == expected

    def test_building_issues_no_calls(self, page, session):
        """Test selections are lazy."""
        page.find("#form").all("input").at(1)

        assert session.mock_calls == []

    def test_parent_unchanged(self, page):
        """Test chaining does not modify the parent selection."""
        parent = page.all("ul")
        parent.find_by_link("Home")

        assert parent.description == "CSS: ul"

    def test_repr(self, page):
        assert repr(page.all("li")) == "<MultiSelection 'CSS: li'>"


class TestResolution:
    """Tests for selections resolving against the session."""

    @pytest.mark.asyncio
    async def test_click_resolves_each_time(self, session):
        """Test every action re-resolves the chain."""
        element = AsyncMock(spec=BaseElement)
        session.get_elements.return_value = [element]
        selection = Page(session).all("button")

        await selection.click()
        await selection.click()

        assert session.get_elements.await_args_list == [
            call(WireSelector.css("button")),
            call(WireSelector.css("button")),
        ]
        assert element.click.await_count == 2

    @pytest.mark.asyncio
    async def test_not_found(self, session):
        """Test no matches surface as a resolution error."""
        session.get_elements.return_value = []
        selection = Page(session).all("button")

        with pytest.raises(ResolutionError) as exc_info:
            await selection.click()

        assert str(exc_info.value) == (
            "failed to select elements from selection 'CSS: button': no elements found"
        )
        assert isinstance(exc_info.value.cause, ElementNotFoundError)

    @pytest.mark.asyncio
    async def test_ambiguous_find(self, session):
        """Test find() rejects several matches."""
        session.get_elements.return_value = [
            AsyncMock(spec=BaseElement),
            AsyncMock(spec=BaseElement),
        ]

        with pytest.raises(ResolutionError) as exc_info:
            await Page(session).find("button").click()

        assert str(exc_info.value) == (
            "failed to select elements from selection 'CSS: button [single]': "
            "ambiguous find"
        )


class TestProperties:
    """Tests for property queries."""

    @pytest.mark.asyncio
    async def test_count(self, selection):
        """Test count of matched elements."""
        assert await selection.count() == 2

    @pytest.mark.asyncio
    async def test_count_zero(self, selection, repository):
        """Test count does not require a match."""
        repository.get.return_value = []

        assert await selection.count() == 0

    @pytest.mark.asyncio
    async def test_count_failure(self, selection, repository):
        repository.get.side_effect = WebDriverError("some error")

        with pytest.raises(ResolutionError) as exc_info:
            await selection.count()

        assert str(exc_info.value) == (
            "failed to select elements from selection 'CSS: #selector': some error"
        )

    @pytest.mark.asyncio
    async def test_text(self, selection, first_element):
        first_element.get_text.return_value = "some text"

        assert await selection.text() == "some text"

    @pytest.mark.asyncio
    async def test_text_failure(self, selection, first_element):
        """Test a failing text lookup is reported."""
        first_element.get_text.side_effect = WebDriverError("some error")

        with pytest.raises(SelectionError) as exc_info:
            await selection.text()

        assert str(exc_info.value) == (
            "failed to retrieve text for selection 'CSS: #selector': some error"
        )

    @pytest.mark.asyncio
    async def test_exactly_one_required(self, selection, repository):
        """Test queries need exactly one element."""
        repository.get_exactly_one.side_effect = ElementNotFoundError(
            "method does not support multiple elements (2)"
        )

        with pytest.raises(ResolutionError) as exc_info:
            await selection.text()

        assert str(exc_info.value) == (
            "failed to select element from selection 'CSS: #selector': "
            "method does not support multiple elements (2)"
        )

    @pytest.mark.asyncio
    async def test_attribute(self, selection, first_element):
        first_element.get_attribute.return_value = "some value"

        assert await selection.attribute("some-attribute") == "some value"
        first_element.get_attribute.assert_awaited_once_with("some-attribute")

    @pytest.mark.asyncio
    async def test_attribute_failure(self, selection, first_element):
        first_element.get_attribute.side_effect = WebDriverError("some error")

        with pytest.raises(SelectionError) as exc_info:
            await selection.attribute("some-attribute")

        assert str(exc_info.value) == (
            "failed to retrieve attribute value for selection 'CSS: #selector': some error"
        )

    @pytest.mark.asyncio
    async def test_css(self, selection, first_element):
        first_element.get_css.return_value = "red"

        assert await selection.css("color") == "red"
        first_element.get_css.assert_awaited_once_with("color")

    @pytest.mark.asyncio
    async def test_css_failure(self, selection, first_element):
        first_element.get_css.side_effect = WebDriverError("some error")

        with pytest.raises(SelectionError) as exc_info:
            await selection.css("color")

        assert str(exc_info.value) == (
            "failed to retrieve CSS property value for selection 'CSS: #selector': some error"
        )

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "query, method, qualifier",
        [
            ("selected", "is_selected", "is selected"),
            ("visible", "is_displayed", "is visible"),
            ("enabled", "is_enabled", "is enabled"),
        ],
    )
    async def test_state_queries(self, selection, first_element, query, method, qualifier):
        """Test boolean state queries and their failures."""
        getattr(first_element, method).return_value = True
        assert await getattr(selection, query)() is True

        getattr(first_element, method).side_effect = WebDriverError("some error")
        with pytest.raises(SelectionError) as exc_info:
            await getattr(selection, query)()

        assert str(exc_info.value) == (
            f"failed to determine whether selection 'CSS: #selector' {qualifier}: some error"
        )

    @pytest.mark.asyncio
    async def test_equals_element(self, selection, session, first_element, second_element):
        """Test comparing two selections compares their elements."""
        other_repository = AsyncMock(spec=ElementRepository)
        other_repository.get_exactly_one.return_value = second_element
        other = Selection(
            session,
            Selectors().append(Strategy.CSS, "#other"),
            elements=other_repository,
        )
        first_element.is_equal_to.return_value = True

        assert await selection.equals_element(other) is True
        first_element.is_equal_to.assert_awaited_once_with(second_element)

    @pytest.mark.asyncio
    async def test_equals_element_failure(self, selection, session, first_element):
        other_repository = AsyncMock(spec=ElementRepository)
        other_repository.get_exactly_one.return_value = AsyncMock(spec=BaseElement)
        other = Selection(
            session,
            Selectors().append(Strategy.CSS, "#other"),
            elements=other_repository,
        )
        first_element.is_equal_to.side_effect = WebDriverError("some error")

        with pytest.raises(SelectionError) as exc_info:
            await selection.equals_element(other)

        assert str(exc_info.value) == (
            "failed to compare selection 'CSS: #selector' to "
            "selection 'CSS: #other': some error"
        )

    @pytest.mark.asyncio
    async def test_mouse_to_element(self, selection, session, first_element):
        await selection.mouse_to_element()

        session.move_to.assert_awaited_once_with(first_element, None)

    @pytest.mark.asyncio
    async def test_mouse_to_element_failure(self, selection, session):
        session.move_to.side_effect = WebDriverError("some error")

        with pytest.raises(SelectionError) as exc_info:
            await selection.mouse_to_element()

        assert str(exc_info.value) == (
            "failed to move mouse to selection 'CSS: #selector': some error"
        )


class TestPage:
    """Tests for Page lifecycle."""

    @pytest.mark.asyncio
    async def test_close_deletes_session(self, session):
        """Test leaving the page context deletes its session."""
        async with Page(session):
            pass

        session.delete.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_close_failure_propagates(self, session):
        session.delete.side_effect = WebDriverError("some error")

        with pytest.raises(WebDriverError, match="some error"):
            await Page(session).close()
