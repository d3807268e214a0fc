"""
Template body rewriting.

This package provides the two passes applied to every cloned template
body: slot filling and placeholder substitution.
"""

from uitree.templates.slots import SLOT_TAG, expand_children, fill_slot
from uitree.templates.substitution import (
    PLACEHOLDER_PATTERN,
    apply_substitutions,
    placeholder_name,
    substitute_text,
)

__all__ = [
    "SLOT_TAG",
    "expand_children",
    "fill_slot",
    "PLACEHOLDER_PATTERN",
    "apply_substitutions",
    "placeholder_name",
    "substitute_text",
]
