"""
UI specifications loaded from XML documents.

A Specification holds the component hierarchy and templates declared by a
document of the form::

    <owo-ui>
        <components> <single-root-element/> </components>
        <templates> <template-name> ... </template-name> </templates>
    </owo-ui>

It is immutable once loaded. Each call that parses components opens its
own ExpansionSession, so the expansion state of one parse never leaks into
another.
"""

import io
import logging
from collections.abc import Iterator
from contextlib import contextmanager
from os import PathLike
from typing import IO, TypeVar

from uitree.adapter import HostContext, UIAdapter
from uitree.components import DEFAULT_REGISTRY
from uitree.core.component import Component, ParentComponent
from uitree.core.sizing import Sizing
from uitree.exceptions import ErrorContext, UIParsingError
from uitree.expansion.session import Children, ExpansionSession, Parameters
from uitree.parsing.elements import (
    Element,
    child_elements,
    element_children,
    parse_document,
)
from uitree.settings import ParsingSettings
from uitree.structure.registry import ComponentRegistry, TemplateStore

logger = logging.getLogger(__name__)

C = TypeVar("C", bound=Component)
P = TypeVar("P", bound=ParentComponent)

COMPONENTS_TAG = "components"
TEMPLATES_TAG = "templates"


class Specification:
    """
    A UI hierarchy specification parsed from an XML document.

    Use create_hierarchy or create_adapter to build the declared component
    tree, and expand_template to build components from the document's
    templates in code.
    """

    def __init__(
        self,
        root: Element,
        registry: ComponentRegistry | None = None,
        settings: ParsingSettings | None = None,
    ):
        """
        Validate a document root and extract its components and templates.

        Params:
            root: Root element of the loaded document
            registry: Component factories to build with, defaults to the built-in set
            settings: Parser configuration, defaults to ParsingSettings()

        Raises:
            UIParsingError: If the document does not have the expected shape
        """
        self.registry = registry if registry is not None else DEFAULT_REGISTRY
        self.settings = settings if settings is not None else ParsingSettings()

        if root.tag != self.settings.root_tag:
            raise UIParsingError(
                f"Expected document root '{self.settings.root_tag}', found '{root.tag}'",
                ErrorContext.from_element(root),
            )

        children = child_elements(root)
        if COMPONENTS_TAG not in children:
            raise UIParsingError("Missing 'components' element in UI specification")

        components = element_children(children[COMPONENTS_TAG])
        if len(components) != 1:
            raise UIParsingError(
                "Invalid number of children in 'components' element - a single child must be declared",
                ErrorContext.from_element(children[COMPONENTS_TAG]),
            )
        self.components_element = components[0]

        self.templates = TemplateStore.from_element(
            children.get(TEMPLATES_TAG), self.settings.allow_duplicate_templates
        )
        logger.debug("Loaded UI specification with %d template(s)", len(self.templates))

    @classmethod
    def load(
        cls,
        stream: IO[bytes] | IO[str],
        registry: ComponentRegistry | None = None,
        settings: ParsingSettings | None = None,
    ) -> "Specification":
        """
        Load the specification encoded by a stream.

        Contrary to load_file, this raises if the document cannot be parsed.

        Params:
            stream: Stream containing the XML document
            registry: Component factories to build with
            settings: Parser configuration

        Returns:
            The parsed specification

        Raises:
            UIParsingError: If the XML is malformed or the document has the wrong shape
        """
        return cls(parse_document(stream), registry, settings)

    @classmethod
    def from_string(
        cls,
        text: str,
        registry: ComponentRegistry | None = None,
        settings: ParsingSettings | None = None,
    ) -> "Specification":
        """Load the specification declared in an XML string."""
        return cls.load(io.BytesIO(text.encode("utf-8")), registry, settings)

    @classmethod
    def load_file(
        cls,
        path: str | PathLike,
        registry: ComponentRegistry | None = None,
        settings: ParsingSettings | None = None,
    ) -> "Specification | None":
        """
        Load the specification declared in a file.

        If the file cannot be read or does not contain a valid specification,
        a warning is logged and None is returned.

        Params:
            path: File to read from
            registry: Component factories to build with
            settings: Parser configuration

        Returns:
            The parsed specification, or None on failure
        """
        try:
            with open(path, "rb") as stream:
                return cls.load(stream, registry, settings)
        except Exception:
            logger.warning("Could not load UI spec from file %s", path, exc_info=True)
            return None

    @contextmanager
    def session(self) -> Iterator[ExpansionSession]:
        """Open an expansion session, clearing its stack however the parse ends."""
        session = ExpansionSession(self)
        try:
            yield session
        finally:
            session.close()

    def parse_component(self, expected: type[C], element: Element) -> C:
        """
        Parse an element into a component, expanding any templates encountered.

        Params:
            expected: Component category the result must satisfy
            element: Element declaring the component

        Returns:
            The parsed component

        Raises:
            UIParsingError: If the element does not describe a valid component
            IncompatibleUISpecError: If the result does not satisfy `expected`
        """
        with self.session() as session:
            return session.parse_component(expected, element)

    def expand_template(
        self,
        expected: type[C],
        name: str,
        parameters: Parameters,
        children: Children = None,
    ) -> C:
        """
        Expand a template into a component.

        If the template declares child slots, expanding it with parameters
        only leaves those slots unfilled, which will most likely fail.

        Params:
            expected: Component category the result must satisfy
            name: Name of the template to expand
            parameters: Mapping or lookup function for placeholder values
            children: Mapping or lookup function for slot fragments

        Returns:
            The expanded template parsed into a component
        """
        with self.session() as session:
            return session.expand_template(expected, name, parameters, children)

    def parse_component_tree(self, expected_root: type[P]) -> P:
        """
        Parse the document's component hierarchy.

        The root is sized to fill its host on both axes.

        Params:
            expected_root: Category the root component must satisfy

        Returns:
            The root component of the hierarchy
        """
        root = self.parse_component(expected_root, self.components_element)
        root.sizing(Sizing.fill(100), Sizing.fill(100))
        return root

    def create_hierarchy(self, expected_root: type[P], host: HostContext) -> P:
        """Build the component hierarchy for a host and return its root."""
        logger.debug("Creating hierarchy for host %dx%d", host.width, host.height)
        return self.parse_component_tree(expected_root)

    def create_adapter(self, expected_root: type[P], host: HostContext) -> UIAdapter[P]:
        """
        Create a UI adapter holding the declared hierarchy, attached to a host.

        Components that need changes in code after parsing can be looked up
        by id through the root's child_by_id.
        """
        return UIAdapter.create(host, lambda horizontal, vertical: self.create_hierarchy(expected_root, host))
