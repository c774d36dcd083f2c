"""
Core runtime support for webselect.

- **Sync Support**: blocking wrappers run the async engine on a managed
  background event loop.
- **Logging**: one-call setup of the ``webselect`` logger.

Example (sync):
    ```python
    from webselect.core import SyncPage

    with SyncPage.open(capabilities={"browserName": "chrome"}) as page:
        page.find("#email").fill("user@example.com")
        page.all("input[type=checkbox]").check()
    ```
"""

from webselect.core.log import LOGGER_NAME, configure_logging
from webselect.core.sync import (
    EventLoopManager,
    SyncPage,
    SyncSelection,
    make_sync,
    run_sync,
)

__all__ = [
    "LOGGER_NAME",
    "configure_logging",
    "EventLoopManager",
    "SyncPage",
    "SyncSelection",
    "make_sync",
    "run_sync",
]
