"""
Core UI tree components.

This package provides the fundamental building blocks of the UI tree:
the component base classes and the sizing model.
"""

from uitree.core.component import Component, ParentComponent
from uitree.core.sizing import Sizing, SizingMethod
from uitree.core.types import ChildLookup, ParameterLookup

__all__ = [
    "Component",
    "ParentComponent",
    "Sizing",
    "SizingMethod",
    "ChildLookup",
    "ParameterLookup",
]
