"""HTML support: apply phrase boundaries to BeautifulSoup trees."""

from .actions import BLOCK_ELEMENTS, DOM_ACTIONS, DomAction, action_for_element
from .paragraph import ZWSP
from .processor import (
    PARENT_STYLE,
    HTMLProcessingParser,
    HTMLProcessor,
    HTMLProcessorOptions,
)

__all__ = [
    "BLOCK_ELEMENTS",
    "DOM_ACTIONS",
    "DomAction",
    "HTMLProcessingParser",
    "HTMLProcessor",
    "HTMLProcessorOptions",
    "PARENT_STYLE",
    "ZWSP",
    "action_for_element",
]
