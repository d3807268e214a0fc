"""
Attributed tree helpers over lxml elements.

UI documents are loaded into lxml element trees. These helpers give the
rest of the package a small, uniform view of that tree: element children
without comments or processing instructions, tag to child mapping, text
content and deep cloning.
"""

import copy
from typing import IO

from lxml import etree
from lxml.etree import _Element

from uitree.exceptions import UIParsingError

Element = _Element

# Comments and processing instructions are dropped at load time so that
# template bodies only ever contain elements and text
_PARSER = etree.XMLParser(remove_comments=True, remove_pis=True)


def parse_document(stream: IO[bytes] | IO[str]) -> Element:
    """
    Parse an XML document from a stream and return its root element.

    Params:
        stream: Binary or text stream containing the XML document

    Returns:
        The document's root element

    Raises:
        UIParsingError: If the stream does not contain well-formed XML
    """
    try:
        return etree.parse(stream, _PARSER).getroot()
    except etree.XMLSyntaxError as e:
        raise UIParsingError(f"Malformed UI document: {e}") from e


def is_element(node) -> bool:
    """Check whether a node is a regular element (not a comment or PI)."""
    return isinstance(node.tag, str)


def element_children(element: Element) -> list[Element]:
    """Return the direct child elements of an element, in document order."""
    return [child for child in element if is_element(child)]


def child_elements(element: Element) -> dict[str, Element]:
    """
    Group the direct child elements of an element by tag.

    When several children share a tag the last one wins, so lookups by tag
    address the most recent declaration.

    Params:
        element: Element whose children to group

    Returns:
        Mapping of tag name to child element
    """
    return {child.tag: child for child in element_children(element)}


def text_content(element: Element) -> str:
    """Return the concatenated text of an element and all of its descendants."""
    return "".join(element.itertext())


def clone(element: Element) -> Element:
    """Deep-clone an element subtree, leaving the original untouched."""
    return copy.deepcopy(element)
