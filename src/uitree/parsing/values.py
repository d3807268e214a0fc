"""
Typed parsing of property values declared in UI documents.

Component property parsers use these helpers to read the text content and
attributes of their child elements. Every helper reports bad input as a
UIParsingError that points at the offending element.
"""

from collections.abc import Callable
from typing import TypeVar

from uitree.core.sizing import Sizing
from uitree.exceptions import ErrorContext, UIParsingError
from uitree.parsing.elements import Element, text_content

T = TypeVar("T")

_TRUE_VALUES = frozenset({"true", "yes", "1"})
_FALSE_VALUES = frozenset({"false", "no", "0"})
_SIZING_METHODS = ("content", "fixed", "fill")


def _fail(element: Element, expectation: str) -> UIParsingError:
    return UIParsingError(
        f"Invalid value '{text_content(element).strip()}' - {expectation}",
        ErrorContext.from_element(element),
    )


def parse_text(element: Element) -> str:
    """Return the stripped text content of an element."""
    return text_content(element).strip()


def parse_int(element: Element) -> int:
    """
    Parse the text content of an element as a signed integer.

    Raises:
        UIParsingError: If the content is not an integer
    """
    try:
        return int(parse_text(element))
    except ValueError:
        raise _fail(element, "expected an integer") from None


def parse_unsigned_int(element: Element) -> int:
    """
    Parse the text content of an element as a non-negative integer.

    Raises:
        UIParsingError: If the content is not a non-negative integer
    """
    value = parse_int(element)
    if value < 0:
        raise _fail(element, "expected a non-negative integer")
    return value


def parse_float(element: Element) -> float:
    """
    Parse the text content of an element as a float.

    Raises:
        UIParsingError: If the content is not a number
    """
    try:
        return float(parse_text(element))
    except ValueError:
        raise _fail(element, "expected a number") from None


def parse_bool(element: Element) -> bool:
    """
    Parse the text content of an element as a boolean.

    Accepts true/false, yes/no and 1/0 in any case.

    Raises:
        UIParsingError: If the content is not a recognized boolean
    """
    value = parse_text(element).lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise _fail(element, "expected 'true' or 'false'")


def parse_sizing(element: Element) -> Sizing:
    """
    Parse a sizing declaration such as ``<horizontal method="fill">50</horizontal>``.

    The 'method' attribute defaults to 'content'. The text content is the
    sizing value and defaults to 0 when empty.

    Params:
        element: Element carrying the sizing declaration

    Returns:
        Parsed Sizing

    Raises:
        UIParsingError: If the method is unknown or the value is not a non-negative integer
    """
    method = element.get("method", "content").strip().lower()
    if method not in _SIZING_METHODS:
        raise UIParsingError(
            f"Unknown sizing method '{method}', expected one of {', '.join(_SIZING_METHODS)}",
            ErrorContext.from_element(element),
        )

    value = parse_unsigned_int(element) if parse_text(element) else 0
    return Sizing(method=method, value=value)


def apply_optional(
    children: dict[str, Element],
    tag: str,
    parser: Callable[[Element], T],
    setter: Callable[[T], object],
) -> None:
    """
    Parse and apply a property only if its element is present.

    Params:
        children: Child elements of the component, grouped by tag
        tag: Tag of the property element
        parser: Function turning the element into a value
        setter: Function receiving the parsed value
    """
    if tag in children:
        setter(parser(children[tag]))
