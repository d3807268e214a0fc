"""
Expansion frames and the layered lookup stack.

Every template expansion pushes a frame holding the parameter and child
slot lookups supplied at its invocation site. Lookups search the frames
from the innermost expansion outwards, so a nested template sees the
parameters and slots of every template enclosing it unless it overrides
them itself.
"""

from collections.abc import Callable, Mapping
from typing import TypeVar

from attrs import field, frozen

from uitree.core.types import ChildLookup, ParameterLookup
from uitree.parsing.elements import Element

T = TypeVar("T")


def no_value(key: str) -> None:
    """Lookup that never yields a value."""
    return None


def as_lookup(source: Mapping[str, T] | Callable[[str], T | None] | None) -> Callable[[str], T | None]:
    """
    Normalize a mapping, callable or None into a lookup function.

    Params:
        source: Mapping to read from, lookup function, or None for no values

    Returns:
        Function returning the value for a key, or None when absent
    """
    if source is None:
        return no_value
    if isinstance(source, Mapping):
        return source.get
    return source


@frozen
class ExpansionFrame:
    """Lookups active during the expansion of a single template."""

    template_name: str
    parameters: ParameterLookup = field(converter=as_lookup)
    children: ChildLookup = field(converter=as_lookup, default=None)


class ExpansionStack:
    """Stack of expansion frames searched top-down on every lookup.

    The depth of the stack equals the current template nesting depth. It is
    owned by a single expansion session and must be empty whenever no
    expansion is in progress.
    """

    def __init__(self):
        self._frames: list[ExpansionFrame] = []

    def push(self, frame: ExpansionFrame) -> None:
        self._frames.append(frame)

    def pop(self) -> ExpansionFrame:
        """
        Remove and return the innermost frame.

        Raises:
            IndexError: If the stack is empty
        """
        return self._frames.pop()

    def clear(self) -> None:
        self._frames.clear()

    @property
    def depth(self) -> int:
        return len(self._frames)

    @property
    def current_template(self) -> str | None:
        """Name of the innermost template being expanded, or None at top level."""
        return self._frames[-1].template_name if self._frames else None

    def lookup_parameter(self, name: str) -> str | None:
        """
        Resolve a parameter through all active frames.

        Params:
            name: Parameter name as written inside a placeholder

        Returns:
            The value from the innermost frame that defines it, or None
        """
        for frame in reversed(self._frames):
            value = frame.parameters(name)
            if value is not None:
                return value
        return None

    def lookup_child(self, slot_id: str) -> Element | None:
        """
        Resolve a child slot through all active frames.

        Params:
            slot_id: Id of the 'template-child' slot

        Returns:
            The fragment supplied by the innermost frame that defines it, or None
        """
        for frame in reversed(self._frames):
            fragment = frame.children(slot_id)
            if fragment is not None:
                return fragment
        return None

    @property
    def template_names(self) -> list[str]:
        """Names of the templates being expanded, outermost first."""
        return [frame.template_name for frame in self._frames]

    def __contains__(self, template_name: str) -> bool:
        return any(frame.template_name == template_name for frame in self._frames)

    def __len__(self) -> int:
        return len(self._frames)

    def __bool__(self) -> bool:
        return bool(self._frames)
