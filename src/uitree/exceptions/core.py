"""
Exception classes for UI tree parsing and template expansion.

This module defines specific exception types for the error conditions
that can occur while a UI document is validated, its templates expanded,
and its component declarations turned into a component tree.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from lxml.etree import _Element


@dataclass
class ErrorContext:
    """
    Context information for error messages.

    Captures where an error occurred in document terms (element tag, id,
    source line) and which template expansion was active at the time.

    Params:
        tag: Tag name of the offending element
        element_id: Value of the element's 'id' attribute, if any
        source_line: Line of the element in the source document, if known
        template_name: Name of the innermost template being expanded
    """

    tag: str | None = None
    element_id: str | None = None
    source_line: int | None = None
    template_name: str | None = None

    @classmethod
    def from_element(
        cls, element: "_Element", template_name: str | None = None
    ) -> "ErrorContext":
        """
        Build a context describing the given element.

        Params:
            element: The lxml element the error refers to
            template_name: Innermost template being expanded, if any

        Returns:
            ErrorContext populated from the element
        """
        return cls(
            tag=element.tag if isinstance(element.tag, str) else None,
            element_id=element.get("id"),
            source_line=element.sourceline,
            template_name=template_name,
        )

    def format_location(self) -> str:
        """
        Format location information for appending to an error message.

        Returns:
            Formatted location string, one indented line per known detail
        """
        lines = []

        if self.tag:
            if self.element_id:
                lines.append(f"  in <{self.tag} id='{self.element_id}'>")
            else:
                lines.append(f"  in <{self.tag}>")

        if self.source_line is not None:
            lines.append(f"  at document line {self.source_line}")

        if self.template_name:
            lines.append(f"  while expanding template '{self.template_name}'")

        return "\n".join(lines)


class UITreeError(Exception):
    """Base exception for all UI tree related errors."""

    pass


class UIParsingError(UITreeError):
    """Raised when a UI document does not have the expected structure."""

    def __init__(self, message: str, context: ErrorContext | None = None):
        """
        Initialize the exception.

        Params:
            message: Human readable description of the violated expectation
            context: Optional location information
        """
        self.message = message
        self.context = context

        location_info = context.format_location() if context else ""
        if location_info:
            super().__init__(f"{message}\n{location_info}")
        else:
            super().__init__(message)


class UnknownComponentError(UIParsingError):
    """Raised when no component factory is registered for an element tag."""

    def __init__(self, tag: str, context: ErrorContext | None = None):
        """
        Initialize the exception.

        Params:
            tag: The tag that has no registered factory
            context: Optional location information
        """
        self.tag = tag
        super().__init__(f"Unknown component type '{tag}'", context)


class UnknownTemplateError(UIParsingError):
    """Raised when a template name is not declared in the document."""

    def __init__(self, name: str, context: ErrorContext | None = None):
        """
        Initialize the exception.

        Params:
            name: The template name that could not be resolved
            context: Optional location information
        """
        self.name = name
        super().__init__(f"Unknown template '{name}'", context)


class MissingAttributeError(UIParsingError):
    """Raised when a required attribute is missing or blank."""

    def __init__(self, tag: str, attribute: str, context: ErrorContext | None = None):
        """
        Initialize the exception.

        Params:
            tag: Tag of the element missing the attribute
            attribute: Name of the required attribute
            context: Optional location information
        """
        self.tag = tag
        self.attribute = attribute
        super().__init__(f"'{tag}' element is missing '{attribute}' attribute", context)


class MissingSlotError(UIParsingError):
    """Raised in strict mode when a template child slot is not supplied."""

    def __init__(self, slot_id: str, context: ErrorContext | None = None):
        """
        Initialize the exception.

        Params:
            slot_id: Id of the unfilled 'template-child' slot
            context: Optional location information
        """
        self.slot_id = slot_id
        super().__init__(f"No child supplied for template slot '{slot_id}'", context)


class DuplicateTemplateError(UIParsingError):
    """Raised when a template name is declared twice and duplicates are disallowed."""

    def __init__(self, name: str, context: ErrorContext | None = None):
        """
        Initialize the exception.

        Params:
            name: The template name declared more than once
            context: Optional location information
        """
        self.name = name
        super().__init__(f"Template '{name}' is declared more than once", context)


class IncompatibleUISpecError(UITreeError):
    """Raised when a parsed component does not satisfy the expected category."""

    def __init__(self, message: str, expected: str, actual: str):
        """
        Initialize the exception.

        Params:
            message: Full error message
            expected: Name of the expected component category
            actual: Name of the category actually produced
        """
        self.expected = expected
        self.actual = actual
        super().__init__(message)


class IncompatibleComponentError(IncompatibleUISpecError):
    """Raised when a component element produced the wrong kind of component."""

    def __init__(self, tag: str, element_id: str | None, expected: str, actual: str):
        """
        Initialize the exception.

        Params:
            tag: Tag of the component element
            element_id: The element's 'id' attribute, if present
            expected: Name of the expected component category
            actual: Name of the category actually produced
        """
        self.tag = tag
        self.element_id = element_id
        id_string = f" with id '{element_id}'" if element_id is not None else ""
        super().__init__(
            f"Expected component '{tag}'{id_string} to be a {expected}, but it is a {actual}",
            expected,
            actual,
        )


class IncompatibleTemplateError(IncompatibleUISpecError):
    """Raised when a template expanded into the wrong kind of component."""

    def __init__(self, template_name: str, expected: str, actual: str):
        """
        Initialize the exception.

        Params:
            template_name: Name of the expanded template
            expected: Name of the expected component category
            actual: Name of the category actually produced
        """
        self.template_name = template_name
        super().__init__(
            f"Expected template '{template_name}' to expand into a {expected}, "
            f"but it expanded into a {actual}",
            expected,
            actual,
        )
