"""
Template expansion.

This package provides the expansion stack with its layered parameter and
slot lookups, and the session that parses component declarations and
expands templates.
"""

from uitree.expansion.session import ExpansionSession
from uitree.expansion.stack import (
    ChildLookup,
    ExpansionFrame,
    ExpansionStack,
    ParameterLookup,
    as_lookup,
    no_value,
)

__all__ = [
    "ExpansionSession",
    "ExpansionFrame",
    "ExpansionStack",
    "ChildLookup",
    "ParameterLookup",
    "as_lookup",
    "no_value",
]
