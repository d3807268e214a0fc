"""
uitree - Declarative UI tree expansion

uitree loads XML documents declaring a hierarchy of UI components, expands
the named templates they declare and builds a typed component tree through
a pluggable component factory registry.
"""

from importlib.metadata import version

from uitree.core import Component, ParentComponent, Sizing
from uitree.exceptions import IncompatibleUISpecError, UIParsingError, UITreeError
from uitree.settings import ParsingSettings
from uitree.specification import Specification
from uitree.structure import ComponentRegistry

__version__ = version("uitree")

__all__ = [
    "__version__",
    "Component",
    "ParentComponent",
    "Sizing",
    "Specification",
    "ComponentRegistry",
    "ParsingSettings",
    "UITreeError",
    "UIParsingError",
    "IncompatibleUISpecError",
]
