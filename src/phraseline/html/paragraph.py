"""
Paragraph bookkeeping for the HTML processor.

A paragraph is the flattened run of inline text under one anchor element.
Its content units keep handles to the live text nodes so that boundaries
found in the flattened text can be written back into the tree.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Union

from bs4 import Tag
from bs4.element import NavigableString, PageElement

from .tree import clone_subtree

ZWSP = "\u200b"

SeparatorType = Union[str, PageElement]


@dataclass(eq=False)
class ContentUnit:
    """A text node that can be split, or literal text that cannot."""

    node: Optional[NavigableString] = None
    literal: Optional[str] = None
    chunks: List[str] = field(default_factory=list)
    has_break_opportunity_after: bool = False

    @classmethod
    def from_node(cls, node: NavigableString) -> "ContentUnit":
        return cls(node=node)

    @classmethod
    def from_string(cls, text: str) -> "ContentUnit":
        return cls(literal=text)

    @property
    def can_split(self) -> bool:
        return self.node is not None

    @property
    def text(self) -> str:
        if self.node is not None:
            return str(self.node)
        return self.literal or ""

    def add_boundary_at_end(self) -> None:
        """Mark a break right after this unit's text."""
        if not self.chunks:
            self.chunks.append(self.text)
        self.chunks.append("")

    def split(self, separator: SeparatorType) -> None:
        """Write the accumulated chunks back into the tree."""
        if len(self.chunks) <= 1 or self.node is None:
            return
        if self.node.parent is None:
            return

        if isinstance(separator, str):
            self.node.replace_with(NavigableString(separator.join(self.chunks)))
            return

        new_nodes: List[PageElement] = []
        for chunk in self.chunks:
            if chunk:
                new_nodes.append(NavigableString(chunk))
            new_nodes.append(clone_subtree(separator))
        new_nodes.pop()
        for new_node in new_nodes:
            self.node.insert_before(new_node)
        self.node.extract()


@dataclass(eq=False)
class Paragraph:
    element: Tag
    units: List[ContentUnit] = field(default_factory=list)

    def text(self) -> str:
        return "".join(unit.text for unit in self.units)

    def is_empty(self) -> bool:
        return not self.units

    def set_has_break_opportunity_after(self) -> None:
        if self.units:
            self.units[-1].has_break_opportunity_after = True

    def flush(self) -> "Paragraph":
        """Hand the collected units to a new paragraph and start over."""
        flushed = Paragraph(self.element, self.units)
        self.units = []
        return flushed

    def forced_opportunities(self) -> List[int]:
        """Offsets already breakable in the markup: after each ZWSP, after <wbr>/<br>."""
        opportunities: List[int] = []
        length = 0
        for unit in self.units:
            text = unit.text
            if unit.can_split:
                opportunities.extend(
                    length + idx + 1 for idx, ch in enumerate(text) if ch == ZWSP
                )
            length += len(text)
            if unit.has_break_opportunity_after:
                opportunities.append(length)
        return opportunities

    def exclude_forced_opportunities(self, boundaries: List[int]) -> List[int]:
        forced = set(self.forced_opportunities())
        if not forced:
            return boundaries
        return [boundary for boundary in boundaries if boundary not in forced]
