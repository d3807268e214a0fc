"""
Placeholder substitution for cloned template bodies.

A placeholder is a text node whose whole content, ignoring surrounding
whitespace, has the form ``{{name}}``. Substitution replaces the node's
content with the value the active lookup yields for ``name``; placeholders
without a value are left exactly as written.
"""

import re

from uitree.core.types import ParameterLookup
from uitree.parsing.elements import Element, element_children

# Anchored on both ends: placeholders embedded in longer text are not substituted
PLACEHOLDER_PATTERN = re.compile(r"\{\{(.*)\}\}")


def placeholder_name(text: str | None) -> str | None:
    """
    Extract the parameter name from a placeholder text node.

    Params:
        text: Text node content, possibly None

    Returns:
        The name between the braces, or None if the text is not a placeholder
    """
    if not text:
        return None
    match = PLACEHOLDER_PATTERN.fullmatch(text.strip())
    return match.group(1) if match else None


def substitute_text(text: str | None, lookup: ParameterLookup) -> str | None:
    """Return the substituted content of a single text node."""
    name = placeholder_name(text)
    if name is None:
        return text
    value = lookup(name)
    return text if value is None else value


def apply_substitutions(template: Element, lookup: ParameterLookup) -> None:
    """
    Substitute placeholders in every text node below a template element.

    Walks all descendant elements of `template`. For each one, its own
    leading text and the tail text following each of its children are
    checked, which covers every text node directly inside the element.
    The template element's own text nodes are not checked.

    Params:
        template: Cloned template element, modified in place
        lookup: Parameter lookup of the active expansion
    """
    for child in element_children(template):
        child.text = substitute_text(child.text, lookup)
        for node in child:
            if node.tail:
                node.tail = substitute_text(node.tail, lookup)
        apply_substitutions(child, lookup)
