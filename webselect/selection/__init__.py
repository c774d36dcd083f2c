"""
Selection engine for webselect.

A selection binds a selector chain to a session. Actions (click, fill,
check, select, upload, submit...) resolve the chain and apply themselves to
every matched element, stopping at the first failure.
"""

from webselect.selection.actions import SelectionActions
from webselect.selection.base import MultiSelection, Selectable, Selection
from webselect.selection.properties import SelectionProperties

__all__ = [
    "MultiSelection",
    "Selectable",
    "Selection",
    "SelectionActions",
    "SelectionProperties",
]
