"""
UI tree exception classes.

This package provides all exception types used while loading UI documents,
expanding templates and building component trees.
"""

from uitree.exceptions.core import (
    DuplicateTemplateError,
    ErrorContext,
    IncompatibleComponentError,
    IncompatibleTemplateError,
    IncompatibleUISpecError,
    MissingAttributeError,
    MissingSlotError,
    UIParsingError,
    UITreeError,
    UnknownComponentError,
    UnknownTemplateError,
)

__all__ = [
    "UITreeError",
    "ErrorContext",
    "UIParsingError",
    "UnknownComponentError",
    "UnknownTemplateError",
    "MissingAttributeError",
    "MissingSlotError",
    "DuplicateTemplateError",
    "IncompatibleUISpecError",
    "IncompatibleComponentError",
    "IncompatibleTemplateError",
]
