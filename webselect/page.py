"""
Page: the document-level root that selections start from.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Optional

from webselect.api.session import Session
from webselect.config.options import ClientOptions
from webselect.selection.base import Selectable

if TYPE_CHECKING:
    from webselect.elements.base import BaseSession

logger = logging.getLogger(__name__)


class Page(Selectable):
    """A browser page bound to a WebDriver session.

    Example:
        async with await Page.open(capabilities={"browserName": "firefox"}) as page:
            await page.find("#username").fill("admin")
            await page.find_by_button("Log in").click()
    """

    def __init__(self, session: "BaseSession") -> None:
        super().__init__(session)

    @classmethod
    async def open(
        cls,
        url: Optional[str] = None,
        capabilities: Optional[dict[str, Any]] = None,
        *,
        options: Optional[ClientOptions] = None,
    ) -> "Page":
        """Create a new remote session and return its page.

        Args:
            url: WebDriver server URL, defaults to ``options.url``.
            capabilities: Desired capabilities, default to
                ``options.capabilities``.
            options: Client options.
        """
        options = options or ClientOptions()
        session = await Session.open(
            url or options.url,
            capabilities if capabilities is not None else options.capabilities,
            options=options,
        )
        logger.info(f"Opened page for session {session.session_id}")
        return cls(session)

    async def close(self) -> None:
        """Delete the remote session."""
        await self.session.delete()

    async def __aenter__(self) -> "Page":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    def __repr__(self) -> str:
        return f"<Page session={getattr(self.session, 'session_id', None)!r}>"


__all__ = ["Page"]
