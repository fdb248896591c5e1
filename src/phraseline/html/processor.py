"""
Apply phrase boundaries to HTML.

The processor walks an element tree, gathers runs of inline text into
paragraphs, scores each paragraph's flattened text and inserts a separator
(U+200B by default) into the text nodes at every new boundary. Existing
elements are never moved or split; explicit break opportunities already in
the markup are left alone.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple, Union

from bs4 import BeautifulSoup, Tag
from bs4.element import PageElement

from ..core.logging import log
from ..parser import Parser
from .actions import DomAction, action_for_element
from .paragraph import ZWSP, ContentUnit, Paragraph, SeparatorType
from .tree import DEFAULT_BUILDER, is_text_node, parse_document

PARENT_STYLE = "word-break: keep-all; overflow-wrap: anywhere;"

# An element to visit, a unit to add to its paragraph, or a finished paragraph
_WorkItem = Tuple[Union[Tag, ContentUnit, Paragraph], Optional[Paragraph]]


@dataclass
class HTMLProcessorOptions:
    """Options for :class:`HTMLProcessor`.

    ``separator`` is either a string inserted into text, or an element that
    is cloned into the tree at each boundary.
    """

    class_name: Optional[str] = None
    separator: SeparatorType = ZWSP
    builder: str = DEFAULT_BUILDER


class HTMLProcessor:
    """Insert separators at phrase boundaries inside an HTML tree.

    Not safe for concurrent use on the same tree.
    """

    def __init__(self, parser: Parser, options: Optional[HTMLProcessorOptions] = None):
        options = options or HTMLProcessorOptions()
        self.parser = parser
        self.class_name = options.class_name
        self.separator = options.separator if options.separator is not None else ZWSP
        self.builder = options.builder

    def apply_to_html_string(self, html: str) -> str:
        """Apply boundaries to an HTML fragment and return the new fragment."""
        if not html:
            return ""
        soup = parse_document(html, self.builder)
        body = soup.find("body")
        if not isinstance(body, Tag):
            log.warning("html.body_missing", length=len(html))
            return html

        children = list(body.children)
        has_text_child = any(is_text_node(child) for child in children)

        if len(children) == 1 and not has_text_child:
            target: PageElement = children[0]
        else:
            target = soup.new_tag("span")
            for child in children:
                target.append(child.extract())
            body.append(target)

        if isinstance(target, Tag):
            self.apply_to_element(target)
        return str(target)

    def apply_to_element(self, element: Tag) -> None:
        """Apply boundaries to ``element`` and its descendants in place."""
        paragraphs = self._collect_paragraphs(element)
        log.debug("html.paragraphs.collected", count=len(paragraphs))
        for paragraph in paragraphs:
            if not paragraph.is_empty():
                self._apply_to_paragraph(paragraph)

    def _collect_paragraphs(self, root: Tag) -> List[Paragraph]:
        """Gather the paragraphs under ``root`` in a depth-first walk.

        The walk keeps its own stack, so deeply nested markup does not hit
        the recursion limit.
        """
        output: List[Paragraph] = []
        stack: List[_WorkItem] = [(root, None)]
        while stack:
            item, parent = stack.pop()
            if isinstance(item, Paragraph):
                if not item.is_empty():
                    output.append(item)
                continue
            if isinstance(item, ContentUnit):
                assert parent is not None
                parent.units.append(item)
                continue

            action = action_for_element(item)
            if action is DomAction.SKIP:
                continue
            if action is DomAction.BREAK:
                if parent is not None and not parent.is_empty():
                    parent.set_has_break_opportunity_after()
                    output.append(parent.flush())
                continue
            if action is DomAction.BREAK_OPPORTUNITY and parent is not None:
                parent.set_has_break_opportunity_after()

            is_new_block = parent is None or action is DomAction.BLOCK
            paragraph = Paragraph(item) if is_new_block else parent
            assert paragraph is not None

            work: List[_WorkItem] = []
            for child in item.children:
                if isinstance(child, Tag):
                    work.append((child, paragraph))
                elif is_text_node(child):
                    if action is DomAction.NO_BREAK:
                        work.append((ContentUnit.from_string(str(child)), paragraph))
                    else:
                        work.append((ContentUnit.from_node(child), paragraph))

            if is_new_block:
                stack.append((paragraph, None))
            stack.extend(reversed(work))
        return output

    def _apply_to_paragraph(self, paragraph: Paragraph) -> None:
        if not any(unit.can_split for unit in paragraph.units):
            return
        text = paragraph.text()
        if not text.strip():
            return
        boundaries = self.parser.parse_boundaries(text)
        if not boundaries:
            return
        boundaries = paragraph.exclude_forced_opportunities(boundaries)
        if not boundaries:
            return
        # Sentinel past the end so the cursor never runs out
        boundaries.append(len(text) + 1)

        self._split_units(paragraph.units, boundaries)
        self._apply_block_style(paragraph.element)
        log.debug(
            "html.paragraph.applied",
            element=paragraph.element.name,
            units=len(paragraph.units),
            boundaries=len(boundaries) - 1,
        )

    def _split_units(self, units: List[ContentUnit], boundaries: List[int]) -> None:
        cursor = 0
        boundary = boundaries[0]
        unit_start = 0
        previous: Optional[ContentUnit] = None

        for unit in units:
            unit_text = unit.text
            unit_end = unit_start + len(unit_text)

            if not unit.can_split:
                # A boundary right before unsplittable text lands at the end
                # of the preceding text node
                if previous is not None and previous.can_split and boundary == unit_start:
                    previous.add_boundary_at_end()
                while boundary < unit_end:
                    cursor += 1
                    boundary = boundaries[cursor]
                previous = unit
                unit_start = unit_end
                continue

            previous = unit
            if boundary >= unit_end:
                unit_start = unit_end
                continue

            chunk_start = 0
            while boundary < unit_end:
                offset = boundary - unit_start
                unit.chunks.append(unit_text[chunk_start:offset])
                chunk_start = offset
                cursor += 1
                boundary = boundaries[cursor]
            unit.chunks.append(unit_text[chunk_start:])
            unit_start = unit_end

        for unit in units:
            unit.split(self.separator)

    def _apply_block_style(self, element: Tag) -> None:
        if isinstance(element, BeautifulSoup):
            return
        if self.class_name:
            existing = element.get("class") or []
            if isinstance(existing, str):
                existing = existing.split()
            if self.class_name not in existing:
                element["class"] = [*existing, self.class_name]
            return

        style = element.get("style") or ""
        if isinstance(style, list):
            style = " ".join(style)
        style = style.strip()
        if not style:
            element["style"] = PARENT_STYLE
        elif PARENT_STYLE not in style:
            element["style"] = f"{style} {PARENT_STYLE}"
        else:
            element["style"] = style


class HTMLProcessingParser:
    """A :class:`Parser` bundled with an :class:`HTMLProcessor` built on it."""

    def __init__(self, parser: Parser, options: Optional[HTMLProcessorOptions] = None):
        self.parser = parser
        self.processor = HTMLProcessor(parser, options)

    def parse(self, sentence: str) -> List[str]:
        return self.parser.parse(sentence)

    def parse_boundaries(self, sentence: str) -> List[int]:
        return self.parser.parse_boundaries(sentence)

    def apply_to_element(self, element: Tag) -> None:
        self.processor.apply_to_element(element)

    def translate_html_string(self, html: str) -> str:
        return self.processor.apply_to_html_string(html)
