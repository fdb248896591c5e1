"""How each HTML element takes part in paragraph collection."""

from enum import Enum
from types import MappingProxyType
from typing import Mapping

from bs4 import Tag
from bs4.element import PageElement


class DomAction(Enum):
    INLINE = "inline"  # part of the enclosing paragraph
    BLOCK = "block"  # starts its own paragraph
    SKIP = "skip"  # subtree ignored
    BREAK = "break"  # ends the current run of text
    NO_BREAK = "no_break"  # text kept whole
    BREAK_OPPORTUNITY = "break_opportunity"  # explicit break point, run continues


DOM_ACTIONS: Mapping[str, DomAction] = MappingProxyType(
    {
        "AREA": DomAction.SKIP,
        "BASE": DomAction.SKIP,
        "BASEFONT": DomAction.SKIP,
        "DATALIST": DomAction.SKIP,
        "HEAD": DomAction.SKIP,
        "LINK": DomAction.SKIP,
        "META": DomAction.SKIP,
        "NOEMBED": DomAction.SKIP,
        "NOFRAMES": DomAction.SKIP,
        "PARAM": DomAction.SKIP,
        "RP": DomAction.SKIP,
        "SCRIPT": DomAction.SKIP,
        "STYLE": DomAction.SKIP,
        "TEMPLATE": DomAction.SKIP,
        "TITLE": DomAction.SKIP,
        "NOSCRIPT": DomAction.SKIP,
        "HR": DomAction.BREAK,
        "LISTING": DomAction.SKIP,
        "PLAINTEXT": DomAction.SKIP,
        "PRE": DomAction.SKIP,
        "XMP": DomAction.SKIP,
        "BR": DomAction.BREAK,
        "RT": DomAction.SKIP,
        "WBR": DomAction.BREAK_OPPORTUNITY,
        "INPUT": DomAction.SKIP,
        "SELECT": DomAction.SKIP,
        "BUTTON": DomAction.SKIP,
        "TEXTAREA": DomAction.SKIP,
        "ABBR": DomAction.SKIP,
        "CODE": DomAction.SKIP,
        "IFRAME": DomAction.SKIP,
        "TIME": DomAction.SKIP,
        "VAR": DomAction.SKIP,
        "NOBR": DomAction.NO_BREAK,
        "SPAN": DomAction.INLINE,
    }
)

BLOCK_ELEMENTS: frozenset[str] = frozenset(
    {
        "HTML",
        "BODY",
        "ADDRESS",
        "BLOCKQUOTE",
        "CENTER",
        "DIALOG",
        "DIV",
        "FIGURE",
        "FIGCAPTION",
        "FOOTER",
        "FORM",
        "HEADER",
        "LEGEND",
        "LISTING",
        "MAIN",
        "P",
        "ARTICLE",
        "ASIDE",
        "H1",
        "H2",
        "H3",
        "H4",
        "H5",
        "H6",
        "HGROUP",
        "NAV",
        "SECTION",
        "DIR",
        "DD",
        "DL",
        "DT",
        "MENU",
        "OL",
        "UL",
        "LI",
        "TABLE",
        "CAPTION",
        "COL",
        "TR",
        "TD",
        "TH",
        "FIELDSET",
        "DETAILS",
        "SUMMARY",
        "MARQUEE",
    }
)


def action_for_tag_name(name: str) -> DomAction:
    """Classify a tag name, ignoring case."""
    name = name.upper()
    action = DOM_ACTIONS.get(name)
    if action is not None:
        return action
    return DomAction.BLOCK if name in BLOCK_ELEMENTS else DomAction.INLINE


def action_for_element(node: PageElement) -> DomAction:
    if not isinstance(node, Tag) or not node.name:
        return DomAction.INLINE
    return action_for_tag_name(node.name)
