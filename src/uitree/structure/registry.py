"""
Registry classes for component factories and document templates.

This module contains the ComponentRegistry, which maps element tags to the
factories that build components, and the TemplateStore, which holds the
named templates declared by a UI document.
"""

import logging
from collections.abc import Callable, Iterator

from uitree.core.component import Component
from uitree.exceptions import (
    DuplicateTemplateError,
    ErrorContext,
    UnknownComponentError,
    UnknownTemplateError,
)
from uitree.parsing.elements import Element, element_children

logger = logging.getLogger(__name__)

ComponentFactory = Callable[[Element], Component]


class ComponentRegistry:
    """Registry of component factories keyed by element tag.

    A factory receives the declaring element and returns an empty component.
    The component then populates itself through parse_properties, so a
    factory only needs to pick the right class and any constructor arguments
    that cannot change afterwards.
    """

    def __init__(self, factories: dict[str, ComponentFactory] | None = None):
        self._factories: dict[str, ComponentFactory] = dict(factories or {})

    def register(self, tag: str, factory: ComponentFactory) -> None:
        """
        Register a factory for an element tag.

        Registering a tag again replaces the previous factory, which lets
        applications override built-in components.

        Params:
            tag: Element tag the factory handles
            factory: Callable producing an empty component from its element
        """
        if tag in self._factories:
            logger.debug("Replacing component factory for '%s'", tag)
        self._factories[tag] = factory

    def has_factory(self, tag: str) -> bool:
        """Check whether a factory is registered for a tag."""
        return tag in self._factories

    def get_factory(self, element: Element, context: ErrorContext | None = None) -> ComponentFactory:
        """
        Resolve the factory for an element.

        Params:
            element: The component element to build
            context: Location to report if the tag is unknown, defaults to the element's own

        Returns:
            The registered factory for the element's tag

        Raises:
            UnknownComponentError: If no factory is registered for the tag
        """
        factory = self._factories.get(element.tag)
        if factory is None:
            raise UnknownComponentError(element.tag, context or ErrorContext.from_element(element))
        return factory

    def copy(self) -> "ComponentRegistry":
        """Return an independent registry with the same factories."""
        return ComponentRegistry(self._factories)

    def tags(self) -> list[str]:
        return sorted(self._factories)


class TemplateStore:
    """Named templates declared in the 'templates' section of a UI document.

    Stored template elements are never modified. Every expansion works on a
    fresh clone obtained from get().
    """

    def __init__(self):
        self._templates: dict[str, Element] = {}

    @classmethod
    def from_element(
        cls, templates_element: Element | None, allow_duplicates: bool = True
    ) -> "TemplateStore":
        """
        Build a store from a 'templates' element.

        Every direct child element becomes a template keyed by its tag.

        Params:
            templates_element: The 'templates' element, or None for an empty store
            allow_duplicates: Whether a repeated name overwrites the earlier one

        Returns:
            The populated TemplateStore

        Raises:
            DuplicateTemplateError: If a name repeats and duplicates are disallowed
        """
        store = cls()
        if templates_element is not None:
            for template in element_children(templates_element):
                store.add(template, allow_duplicates)
        return store

    def add(self, template: Element, allow_duplicates: bool = True) -> None:
        """
        Register a template element under its tag name.

        Raises:
            DuplicateTemplateError: If the name exists and duplicates are disallowed
        """
        name = template.tag
        if name in self._templates:
            if not allow_duplicates:
                raise DuplicateTemplateError(name, ErrorContext.from_element(template))
            logger.warning("Template '%s' is declared more than once, using the last declaration", name)

        logger.debug("Registered template '%s'", name)
        self._templates[name] = template

    def get(self, name: str) -> Element:
        """
        Get the stored element of a template.

        Callers must clone the returned element before modifying it.

        Raises:
            UnknownTemplateError: If no template with this name exists
        """
        template = self._templates.get(name)
        if template is None:
            raise UnknownTemplateError(name)
        return template

    def __contains__(self, name: str) -> bool:
        return name in self._templates

    def __len__(self) -> int:
        return len(self._templates)

    def __iter__(self) -> Iterator[str]:
        return iter(self._templates)
