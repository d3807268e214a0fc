"""
Built-in components and the default component registry.

These cover the basic building blocks of a UI document: a flow layout that
holds child components, a text label and a plain box. Applications register
their own factories on a copy of DEFAULT_REGISTRY to extend the set.
"""

from typing import TYPE_CHECKING, Literal

from uitree.core.component import Component, ParentComponent
from uitree.exceptions import ErrorContext, UIParsingError
from uitree.parsing.elements import Element, element_children
from uitree.parsing.values import apply_optional, parse_bool, parse_text
from uitree.structure.registry import ComponentRegistry

if TYPE_CHECKING:
    from uitree.expansion.session import ExpansionSession

FlowDirection = Literal["horizontal", "vertical"]


class FlowLayout(ParentComponent):
    """Lays out its children one after another along a single axis."""

    direction: FlowDirection = "vertical"

    def parse_properties(
        self,
        session: "ExpansionSession",
        element: Element,
        children: dict[str, Element],
    ) -> None:
        super().parse_properties(session, element, children)

        if "children" in children:
            for child in element_children(children["children"]):
                self.child(session.parse_component(Component, child))


class LabelComponent(Component):
    """Displays a single line of text."""

    text: str = ""

    def parse_properties(
        self,
        session: "ExpansionSession",
        element: Element,
        children: dict[str, Element],
    ) -> None:
        super().parse_properties(session, element, children)
        apply_optional(children, "text", parse_text, lambda text: setattr(self, "text", text))


class BoxComponent(Component):
    """A rectangle, optionally filled with a color."""

    color: str | None = None
    fill: bool = False

    def parse_properties(
        self,
        session: "ExpansionSession",
        element: Element,
        children: dict[str, Element],
    ) -> None:
        super().parse_properties(session, element, children)
        apply_optional(children, "color", parse_text, lambda color: setattr(self, "color", color))
        apply_optional(children, "fill", parse_bool, lambda fill: setattr(self, "fill", fill))


def flow_layout_factory(element: Element) -> FlowLayout:
    """
    Create a flow layout from its 'direction' attribute.

    Raises:
        UIParsingError: If the direction is missing or not horizontal/vertical
    """
    direction = element.get("direction", "").strip()
    if direction not in ("horizontal", "vertical"):
        raise UIParsingError(
            f"Invalid flow layout direction '{direction}', expected 'horizontal' or 'vertical'",
            ErrorContext.from_element(element),
        )
    return FlowLayout(direction=direction)


DEFAULT_REGISTRY = ComponentRegistry(
    {
        "flow-layout": flow_layout_factory,
        "label": lambda element: LabelComponent(),
        "box": lambda element: BoxComponent(),
    }
)
