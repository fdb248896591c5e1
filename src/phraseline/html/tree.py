"""BeautifulSoup helpers: parsing fragments, node kinds, subtree cloning."""

from __future__ import annotations

from typing import List, Tuple

from bs4 import BeautifulSoup, Tag
from bs4.element import NavigableString, PageElement, PreformattedString

DEFAULT_BUILDER = "html.parser"


def parse_document(fragment: str, builder: str = DEFAULT_BUILDER) -> BeautifulSoup:
    """Parse an HTML fragment as the body of a full document."""
    return BeautifulSoup(
        f"<!doctype html><html><body>{fragment}</body></html>", builder
    )


def is_text_node(node: PageElement) -> bool:
    """True for character data; comments, doctypes and the like are excluded."""
    return isinstance(node, NavigableString) and not isinstance(
        node, PreformattedString
    )


def _clone_node(node: PageElement) -> PageElement:
    """Copy a single node without its children."""
    if isinstance(node, BeautifulSoup):
        return BeautifulSoup("", DEFAULT_BUILDER)
    if isinstance(node, Tag):
        # copy_self copies attributes, multi-valued ones into fresh lists
        return node.copy_self()
    if isinstance(node, NavigableString):
        # Text, Comment, Doctype, CData, ProcessingInstruction, Declaration
        return type(node)(str(node))
    raise TypeError(f"cannot clone {type(node).__name__}")


def clone_subtree(node: PageElement) -> PageElement:
    """Deep-copy ``node`` and its descendants as a detached subtree.

    Walks with an explicit stack, so nesting depth is not bounded by the
    interpreter's recursion limit.
    """
    cloned = _clone_node(node)
    stack: List[Tuple[Tag, Tag]] = []
    if isinstance(node, Tag):
        stack.append((node, cloned))  # type: ignore[arg-type]
    while stack:
        source, target = stack.pop()
        for child in source.children:
            child_clone = _clone_node(child)
            target.append(child_clone)
            if isinstance(child, Tag):
                stack.append((child, child_clone))  # type: ignore[arg-type]
    return cloned
