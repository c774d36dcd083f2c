"""
Exception hierarchy for webselect.

Every failure raised by the library derives from WebSelectError. Message
text is part of the public contract: callers (and tests) match on it.
"""

from __future__ import annotations

from typing import Any, Optional


class WebSelectError(Exception):
    """Base exception for all webselect errors."""


class ConfigurationError(WebSelectError):
    """Configuration loading or parsing error."""


class WebDriverError(WebSelectError):
    """A remote WebDriver command failed.

    Raised by the transport for HTTP failures, non-zero JSON wire statuses
    and W3C error payloads. ``str()`` is the remote message only, so that
    stage-wrapped errors read naturally.
    """

    def __init__(
        self,
        message: str,
        *,
        status: Optional[Any] = None,
        endpoint: Optional[str] = None,
    ) -> None:
        self.message = message
        self.status = status
        self.endpoint = endpoint
        super().__init__(message)


class ElementNotFoundError(WebSelectError):
    """The element repository could not satisfy a cardinality requirement."""


class SelectionError(WebSelectError):
    """A stage of a selection action failed.

    Formats as ``failed to <stage> <selection><qualifier>: <cause>`` where
    ``selection`` renders as ``selection '<description>'``.

    Attributes:
        stage: Human-readable label of the step that failed.
        selection: Description of the selection involved.
        cause: The underlying exception.
    """

    def __init__(
        self,
        stage: str,
        selection: Any,
        cause: BaseException,
        *,
        qualifier: str = "",
    ) -> None:
        self.stage = stage
        self.selection = str(selection)
        self.cause = cause
        super().__init__(f"failed to {stage} {self.selection}{qualifier}: {cause}")


class ResolutionError(SelectionError):
    """Elements for a selection could not be resolved."""

    def __init__(
        self,
        selection: Any,
        cause: BaseException,
        *,
        stage: str = "select elements from",
    ) -> None:
        super().__init__(stage, selection, cause)


class SemanticMismatchError(WebSelectError):
    """A resolved element is the wrong kind of element for the action.

    For example, uploading a file into something that is not
    ``<input type="file">``.
    """

    def __init__(self, message: str, selection: Any = None) -> None:
        self.selection = None if selection is None else str(selection)
        super().__init__(message)


__all__ = [
    "WebSelectError",
    "ConfigurationError",
    "WebDriverError",
    "ElementNotFoundError",
    "SelectionError",
    "ResolutionError",
    "SemanticMismatchError",
]
