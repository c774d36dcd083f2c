"""
Selector model for webselect.

A selection is located by an ordered chain of selector segments, resolved
root-to-leaf: the first segment against the document, every following one
against the elements matched by the previous segment. Chains are immutable;
appending, indexing or marking a segment single always yields a new chain.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Iterator, NamedTuple, Optional, Tuple


class Strategy(str, Enum):
    """How a selector segment locates elements.

    The enum value is the human-readable name used in descriptions.
    """

    CSS = "CSS"
    XPATH = "XPath"
    LINK = "Link"
    LABEL = "Label"
    BUTTON = "Button"
    NAME = "Name"
    CLASS = "Class"
    ID = "ID"


class WireSelector(NamedTuple):
    """A ``(using, value)`` pair as sent over the WebDriver wire."""

    using: str
    value: str

    @classmethod
    def css(cls, value: str) -> "WireSelector":
        return cls("css selector", value)

    @classmethod
    def xpath(cls, value: str) -> "WireSelector":
        return cls("xpath", value)


def xpath_literal(text: str) -> str:
    """Quote ``text`` as an XPath 1.0 string literal.

    Text holding both quote characters is built with ``concat()``.
    """
    if '"' not in text:
        return f'"{text}"'
    if "'" not in text:
        return f"'{text}'"
    parts = ", '\"', ".join(f'"{part}"' for part in text.split('"'))
    return f"concat({parts})"


_LABEL_XPATH = (
    '//input[@id=(//label[normalize-space()={0}]/@for)] | '
    '//label[normalize-space()={0}]/input'
)

_BUTTON_XPATH = (
    '//input[@type="submit" or @type="button"][normalize-space(@value)={0}] | '
    '//button[normalize-space()={0}]'
)


@dataclass(frozen=True)
class Selector:
    """A single segment of a selector chain.

    Attributes:
        strategy: Locating strategy.
        value: Strategy-specific expression (CSS text, XPath, link text...).
        index: Pick only the Nth match (0-based) when set.
        single: Require exactly one match when True.
    """

    strategy: Strategy
    value: str
    index: Optional[int] = None
    single: bool = False

    @property
    def indexed(self) -> bool:
        return self.index is not None

    def api(self) -> WireSelector:
        """Compile this segment into a wire selector."""
        if self.strategy == Strategy.CSS:
            return WireSelector.css(self.value)
        if self.strategy == Strategy.XPATH:
            return WireSelector.xpath(self.value)
        if self.strategy == Strategy.LINK:
            return WireSelector("link text", self.value)
        if self.strategy == Strategy.LABEL:
            return WireSelector.xpath(_LABEL_XPATH.format(xpath_literal(self.value)))
        if self.strategy == Strategy.BUTTON:
            return WireSelector.xpath(_BUTTON_XPATH.format(xpath_literal(self.value)))
        if self.strategy == Strategy.NAME:
            return WireSelector.css(f'[name="{self.value}"]')
        if self.strategy == Strategy.CLASS:
            return WireSelector.css(f".{self.value}")
        if self.strategy == Strategy.ID:
            return WireSelector.css(f'[id="{self.value}"]')
        raise ValueError(f"unsupported selector strategy: {self.strategy!r}")

    def merged_with(self, other: "Selector") -> "Selector":
        """Combine two CSS segments into one descendant selector."""
        return replace(self, value=f"{self.value} {other.value}")

    def __str__(self) -> str:
        if self.single:
            suffix = " [single]"
        elif self.indexed:
            suffix = f" [{self.index}]"
        else:
            suffix = ""
        return f"{self.strategy.value}: {self.value}{suffix}"


class Selectors:
    """Immutable chain of selector segments.

    Example:
        >>> str(Selectors().append(Strategy.CSS, "#form").append(Strategy.XPATH, "./input").at(1))
        'CSS: #form | XPath: ./input [1]'
    """

    __slots__ = ("_segments",)

    def __init__(self, segments: Tuple[Selector, ...] = ()) -> None:
        self._segments = tuple(segments)

    def append(self, strategy: Strategy, value: str) -> "Selectors":
        """Return a new chain with one more segment.

        An unindexed CSS segment followed by another CSS segment collapses
        into a single descendant selector.
        """
        selector = Selector(strategy, value)
        if strategy == Strategy.CSS and self._segments:
            last = self._segments[-1]
            if last.strategy == Strategy.CSS and not last.indexed and not last.single:
                return Selectors(self._segments[:-1] + (last.merged_with(selector),))
        return Selectors(self._segments + (selector,))

    def at(self, index: int) -> "Selectors":
        """Return a new chain whose last segment picks the match at ``index``."""
        if index < 0:
            raise ValueError("selector index must not be negative")
        return self._replace_last(index=index)

    def single(self) -> "Selectors":
        """Return a new chain whose last segment must match exactly once."""
        return self._replace_last(single=True)

    def _replace_last(self, **changes: object) -> "Selectors":
        if not self._segments:
            return self
        last = replace(self._segments[-1], **changes)
        return Selectors(self._segments[:-1] + (last,))

    @property
    def last(self) -> Optional[Selector]:
        return self._segments[-1] if self._segments else None

    def __iter__(self) -> Iterator[Selector]:
        return iter(self._segments)

    def __len__(self) -> int:
        return len(self._segments)

    def __getitem__(self, index: int) -> Selector:
        return self._segments[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Selectors):
            return NotImplemented
        return self._segments == other._segments

    def __hash__(self) -> int:
        return hash(self._segments)

    def __str__(self) -> str:
        return " | ".join(str(segment) for segment in self._segments)

    def __repr__(self) -> str:
        return f"Selectors({str(self)!r})"


__all__ = [
    "Strategy",
    "WireSelector",
    "Selector",
    "xpath_literal",
    "Selectors",
]
