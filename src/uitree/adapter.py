"""
Binding between a component tree and the host that displays it.
"""

from collections.abc import Callable
from typing import Generic, Protocol, TypeVar

from uitree.core.component import ParentComponent
from uitree.core.sizing import Sizing

P = TypeVar("P", bound=ParentComponent)


class HostContext(Protocol):
    """The screen or window a component tree is attached to."""

    @property
    def width(self) -> int: ...

    @property
    def height(self) -> int: ...


class UIAdapter(Generic[P]):
    """Owns the root component of a hierarchy attached to a host."""

    def __init__(self, host: HostContext, root: P):
        self.host = host
        self.root = root

    @classmethod
    def create(cls, host: HostContext, root_factory: Callable[[Sizing, Sizing], P]) -> "UIAdapter[P]":
        """
        Create an adapter whose root fills the whole host.

        Params:
            host: Host the hierarchy is attached to
            root_factory: Builds the root component from its horizontal and vertical sizing

        Returns:
            Adapter holding the created root
        """
        horizontal, vertical = Sizing.fill(100), Sizing.fill(100)
        root = root_factory(horizontal, vertical)
        root.sizing(horizontal, vertical)
        return cls(host, root)

    def root_size(self) -> tuple[int | None, int | None]:
        """Size of the root resolved against the host, None on content-sized axes."""
        return (
            self.root.horizontal_sizing.resolve(self.host.width),
            self.root.vertical_sizing.resolve(self.host.height),
        )
