"""
Core component base classes for the UI tree.

This module contains the Component base class that every factory-built
component derives from, and ParentComponent for components that hold
children. Both are pydantic models so that component properties are
declared and validated the same way throughout the package.
"""

from typing import TYPE_CHECKING, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from uitree.core.sizing import Sizing
from uitree.exceptions import IncompatibleUISpecError

if TYPE_CHECKING:
    from uitree.expansion.session import ExpansionSession
    from uitree.parsing.elements import Element

C = TypeVar("C", bound="Component")


class Component(BaseModel):
    """
    Base class for all UI components.

    A component is created empty by its factory and then populated from its
    declaring element by parse_properties. Components hold no template or
    expansion state once constructed.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    id: str | None = None
    horizontal_sizing: Sizing = Field(default_factory=Sizing.content)
    vertical_sizing: Sizing = Field(default_factory=Sizing.content)

    @property
    def category(self) -> str:
        """Display name of this component's kind, used in error messages."""
        return type(self).__name__

    def satisfies(self, expected: type["Component"]) -> bool:
        """
        Check whether this component can be used where `expected` is required.

        Params:
            expected: The component category required at the call site

        Returns:
            True if this component provides the expected capability
        """
        return isinstance(self, expected)

    def sizing(self, horizontal: Sizing, vertical: Sizing) -> "Component":
        """Set the sizing of both axes and return the component."""
        self.horizontal_sizing = horizontal
        self.vertical_sizing = vertical
        return self

    def parse_properties(
        self,
        session: "ExpansionSession",
        element: "Element",
        children: dict[str, "Element"],
    ) -> None:
        """
        Populate this component from its declaring element.

        Subclasses extend this to read their own properties and should call
        the base implementation first.

        Params:
            session: The active expansion session, for parsing nested components
            element: The element declaring this component
            children: The element's child elements grouped by tag
        """
        from uitree.parsing.elements import child_elements
        from uitree.parsing.values import apply_optional, parse_sizing

        self.id = element.get("id")

        if "sizing" in children:
            sizing = child_elements(children["sizing"])
            apply_optional(sizing, "horizontal", parse_sizing, lambda s: setattr(self, "horizontal_sizing", s))
            apply_optional(sizing, "vertical", parse_sizing, lambda s: setattr(self, "vertical_sizing", s))


class ParentComponent(Component):
    """Base class for components that contain child components."""

    children: list[Component] = Field(default_factory=list)

    def child(self, component: Component) -> "ParentComponent":
        """Append a child component and return self."""
        self.children.append(component)
        return self

    def child_by_id(self, expected: type[C], component_id: str) -> C | None:
        """
        Find a descendant component by id.

        Searches the subtree depth-first and returns the first component with
        a matching id.

        Params:
            expected: Category the found component must satisfy
            component_id: Id to search for

        Returns:
            The matching component, or None if no descendant has this id

        Raises:
            IncompatibleUISpecError: If the component found does not satisfy `expected`
        """
        for child in self.children:
            if child.id == component_id:
                if not child.satisfies(expected):
                    raise IncompatibleUISpecError(
                        f"Expected component with id '{component_id}' to be a {expected.__name__}, "
                        f"but it is a {child.category}",
                        expected.__name__,
                        child.category,
                    )
                return child

            if isinstance(child, ParentComponent):
                found = child.child_by_id(expected, component_id)
                if found is not None:
                    return found

        return None
