"""
WebDriver wire client for webselect.

- Bus: HTTP transport that sends commands and unwraps responses
- Session: document-level lookups and session-scoped mouse commands
- Element: per-element commands

Example usage:
    ```python
    from webselect.api import Session
    from webselect.selectors import WireSelector

    session = await Session.open("http://localhost:4444/wd/hub", {"browserName": "firefox"})
    links = await session.get_elements(WireSelector.css("a"))
    await links[0].click()
    await session.delete()
    ```
"""

from webselect.api.bus import Bus
from webselect.api.element import W3C_ELEMENT_KEY, Element, element_id_from
from webselect.api.session import Offset, Session

__all__ = [
    "Bus",
    "Element",
    "Offset",
    "Session",
    "W3C_ELEMENT_KEY",
    "element_id_from",
]
