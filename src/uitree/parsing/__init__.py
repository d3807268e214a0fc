"""
UI document parsing helpers.

This package provides the attributed tree helpers over lxml and typed
parsing of property values declared in UI documents.
"""

from uitree.parsing.elements import (
    Element,
    child_elements,
    clone,
    element_children,
    parse_document,
    text_content,
)
from uitree.parsing.values import (
    apply_optional,
    parse_bool,
    parse_float,
    parse_int,
    parse_sizing,
    parse_text,
    parse_unsigned_int,
)

__all__ = [
    "Element",
    "child_elements",
    "clone",
    "element_children",
    "parse_document",
    "text_content",
    "apply_optional",
    "parse_bool",
    "parse_float",
    "parse_int",
    "parse_sizing",
    "parse_text",
    "parse_unsigned_int",
]
