"""
Shared fixtures for webselect tests.
"""

from unittest.mock import AsyncMock

import pytest

from webselect.elements import BaseElement, BaseSession, ElementRepository
from webselect.selection import MultiSelection
from webselect.selectors import Selectors, Strategy


@pytest.fixture
def session():
    """Create mock session."""
    return AsyncMock(spec=BaseSession)


@pytest.fixture
def first_element():
    """Create first mock element."""
    return AsyncMock(spec=BaseElement)


@pytest.fixture
def second_element():
    """Create second mock element."""
    return AsyncMock(spec=BaseElement)


@pytest.fixture
def repository(first_element, second_element):
    """Create mock repository resolving to both elements."""
    repository = AsyncMock(spec=ElementRepository)
    repository.get_at_least_one.return_value = [first_element, second_element]
    repository.get_exactly_one.return_value = first_element
    repository.get.return_value = [first_element, second_element]
    return repository


@pytest.fixture
def selection(session, repository):
    """Create multi-selection for '#selector' backed by the mock repository."""
    return MultiSelection(
        session,
        Selectors().append(Strategy.CSS, "#selector"),
        elements=repository,
    )
