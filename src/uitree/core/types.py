"""
Core type definitions for uitree.

This module contains the type aliases shared by the expansion stack and the
template rewriting passes.
"""

from collections.abc import Callable

from lxml.etree import _Element

ParameterLookup = Callable[[str], str | None]

ChildLookup = Callable[[str], _Element | None]
