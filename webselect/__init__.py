"""
webselect: selection-driven browser automation over WebDriver.

Selections describe elements declaratively and resolve lazily: every
action re-resolves the selector chain against the live document and
applies itself to each matched element, failing fast with an error that
names the failed step and the selection.

Basic usage:
    from webselect import Page

    async with await Page.open("http://localhost:4444/wd/hub") as page:
        form = page.find("#signup")
        await form.find_by_label("Email").fill("user@example.com")
        await form.find_by_label("Country").select("Canada")
        await form.all("input[type=checkbox]").check()
        await form.find("input[type=file]").upload_file("avatar.png")
        await form.submit()

Blocking usage:
    from webselect import SyncPage

    with SyncPage.open() as page:
        page.find_by_button("Continue").click()
"""

__version__ = "0.1.0"
__license__ = "MIT"

from webselect.api import Bus, Element, Offset, Session
from webselect.config import ClientOptions, WebSelectConfig, load_config
from webselect.core import SyncPage, SyncSelection, configure_logging, run_sync
from webselect.elements import BaseElement, BaseSession, ElementRepository, ResolutionMode
from webselect.errors import (
    ConfigurationError,
    ElementNotFoundError,
    ResolutionError,
    SelectionError,
    SemanticMismatchError,
    WebDriverError,
    WebSelectError,
)
from webselect.page import Page
from webselect.selection import MultiSelection, Selection
from webselect.selectors import Selector, Selectors, Strategy, WireSelector

__all__ = [
    "__version__",
    # Transport
    "Bus",
    "Element",
    "Offset",
    "Session",
    # Configuration
    "ClientOptions",
    "WebSelectConfig",
    "load_config",
    # Sync and logging
    "SyncPage",
    "SyncSelection",
    "configure_logging",
    "run_sync",
    # Elements
    "BaseElement",
    "BaseSession",
    "ElementRepository",
    "ResolutionMode",
    # Errors
    "ConfigurationError",
    "ElementNotFoundError",
    "ResolutionError",
    "SelectionError",
    "SemanticMismatchError",
    "WebDriverError",
    "WebSelectError",
    # Selections
    "Page",
    "MultiSelection",
    "Selection",
    # Selectors
    "Selector",
    "Selectors",
    "Strategy",
    "WireSelector",
]
