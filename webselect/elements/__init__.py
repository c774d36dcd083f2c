"""
Element layer for webselect.

- **BaseElement**: capability set of a single remote element
- **BaseSession**: session-scoped lookups and mouse commands
- **ElementRepository**: resolves selector chains into elements
"""

from webselect.elements.base import BaseElement, BaseSession
from webselect.elements.repository import ElementRepository, ResolutionMode

__all__ = [
    "BaseElement",
    "BaseSession",
    "ElementRepository",
    "ResolutionMode",
]
