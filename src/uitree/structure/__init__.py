"""
UI tree structure registries.

This package provides the component factory registry and the template
store used while building component trees.
"""

from uitree.structure.registry import ComponentFactory, ComponentRegistry, TemplateStore

__all__ = [
    "ComponentFactory",
    "ComponentRegistry",
    "TemplateStore",
]
