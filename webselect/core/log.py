"""
Logging setup for webselect.

The library only emits records through ``logging.getLogger(__name__)``
loggers; scripts call ``configure_logging`` to see them.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

from webselect.config.options import LoggingOptions

LOGGER_NAME = "webselect"


def configure_logging(
    level: Optional[Union[int, str]] = None,
    *,
    options: Optional[LoggingOptions] = None,
    handler: Optional[logging.Handler] = None,
) -> logging.Logger:
    """Attach a handler to the ``webselect`` logger.

    Calling it again replaces the handler installed by the previous call.

    Args:
        level: Log level, overrides ``options.level``.
        options: Logging options (level and format).
        handler: Handler to install, defaults to a stream handler on stderr.

    Returns:
        The configured ``webselect`` logger.
    """
    options = options or LoggingOptions()
    logger = logging.getLogger(LOGGER_NAME)

    for existing in list(logger.handlers):
        if getattr(existing, "_webselect_handler", False):
            logger.removeHandler(existing)

    handler = handler or logging.StreamHandler()
    handler.setFormatter(logging.Formatter(options.format))
    handler._webselect_handler = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    logger.setLevel(level if level is not None else options.level)
    return logger


__all__ = ["LOGGER_NAME", "configure_logging"]
