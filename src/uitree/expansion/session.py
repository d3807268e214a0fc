"""
Expansion sessions: parsing component declarations and expanding templates.

An ExpansionSession performs one parse of (part of) a UI specification.
It owns the expansion stack for that parse, so several sessions over the
same specification never share expansion state. Component property
parsers receive the session and call back into it to parse nested
declarations.
"""

import logging
from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING, TypeVar

from uitree.core.component import Component
from uitree.exceptions import (
    ErrorContext,
    IncompatibleComponentError,
    IncompatibleTemplateError,
    MissingAttributeError,
    UIParsingError,
)
from uitree.expansion.stack import ExpansionFrame, ExpansionStack
from uitree.parsing.elements import (
    Element,
    child_elements,
    clone,
    element_children,
    text_content,
)
from uitree.templates import apply_substitutions, expand_children

if TYPE_CHECKING:
    from uitree.specification import Specification

logger = logging.getLogger(__name__)

C = TypeVar("C", bound=Component)

TEMPLATE_TAG = "template"
CHILD_TAG = "child"

Parameters = Mapping[str, str] | Callable[[str], str | None]
Children = Mapping[str, Element] | Callable[[str], Element | None] | None


class ExpansionSession:
    """A single parse over a specification, owning its expansion stack."""

    def __init__(self, spec: "Specification"):
        self.spec = spec
        self.stack = ExpansionStack()

    def close(self) -> None:
        """End the session, discarding any frames left by a failed expansion."""
        if self.stack:
            logger.debug("Discarding %d expansion frame(s) on session close", len(self.stack))
        self.stack.clear()

    def _context(self, element: Element) -> ErrorContext:
        return ErrorContext.from_element(element, self.stack.current_template)

    def parse_component(self, expected: type[C], element: Element) -> C:
        """
        Parse an element into a component, expanding it if it is a template.

        Params:
            expected: Component category the result must satisfy
            element: Element declaring the component or template invocation

        Returns:
            The parsed component

        Raises:
            UIParsingError: If the declaration is malformed or names an unknown component
            IncompatibleComponentError: If the component does not satisfy `expected`
        """
        if element.tag == TEMPLATE_TAG:
            return self._parse_template_invocation(expected, element)

        component = self.spec.registry.get_factory(element, self._context(element))(element)
        component.parse_properties(self, element, child_elements(element))

        if not component.satisfies(expected):
            raise IncompatibleComponentError(
                element.tag, element.get("id"), expected.__name__, component.category
            )

        return component

    def _parse_template_invocation(self, expected: type[C], element: Element) -> C:
        name = element.get("name", "").strip()
        if not name:
            raise MissingAttributeError(TEMPLATE_TAG, "name", self._context(element))

        parameters: dict[str, str] = {}
        children: dict[str, Element] = {}
        for declaration in element_children(element):
            if declaration.tag == CHILD_TAG:
                slot_id = declaration.get("id")
                if slot_id is None:
                    raise MissingAttributeError(CHILD_TAG, "id", self._context(declaration))

                content = element_children(declaration)
                if not content:
                    raise UIParsingError(
                        f"Template child '{slot_id}' must declare an element",
                        self._context(declaration),
                    )
                children[slot_id] = content[0]
            else:
                parameters[declaration.tag] = text_content(declaration)

        return self.expand_template(expected, name, parameters, children)

    def expand_template(
        self,
        expected: type[C],
        name: str,
        parameters: Parameters,
        children: Children = None,
    ) -> C:
        """
        Expand a template into a component.

        Parameters and children are looked up in the given sources first and
        then in those of every enclosing expansion. Passing only a parameter
        mapping expands templates without child slots.

        Params:
            expected: Component category the result must satisfy
            name: Name of the template to expand
            parameters: Mapping or lookup function for placeholder values
            children: Mapping or lookup function for slot fragments, or None

        Returns:
            The expanded template parsed into a component

        Raises:
            UnknownTemplateError: If the template is not declared
            UIParsingError: If the expanded body does not have exactly one root element,
                or expanding it would exceed the maximum expansion depth
            IncompatibleTemplateError: If the result does not satisfy `expected`
        """
        limit = self.spec.settings.max_expansion_depth
        if self.stack.depth >= limit:
            chain = " -> ".join([*self.stack.template_names, name])
            reason = "expands into itself" if name in self.stack else "nests too deeply"
            raise UIParsingError(
                f"Template '{name}' {reason}, exceeding the maximum expansion depth of {limit} ({chain})",
                ErrorContext(template_name=self.stack.current_template),
            )

        self.stack.push(ExpansionFrame(name, parameters, children))
        try:
            logger.debug("Expanding template '%s' at depth %d", name, self.stack.depth)

            template = clone(self.spec.templates.get(name))
            expand_children(
                template,
                self.stack.lookup_child,
                strict=self.spec.settings.strict_slots,
                template_name=name,
            )
            apply_substitutions(template, self.stack.lookup_parameter)

            roots = element_children(template)
            if len(roots) != 1:
                raise UIParsingError(
                    f"Template '{name}' must expand into exactly one element, found {len(roots)}",
                    ErrorContext(tag=template.tag, source_line=template.sourceline, template_name=name),
                )

            component = self.parse_component(Component, roots[0])
            if not component.satisfies(expected):
                raise IncompatibleTemplateError(name, expected.__name__, component.category)

            return component
        finally:
            self.stack.pop()
