"""
Shared test fixtures and utilities for the uitree test suite.
"""

from dataclasses import dataclass

import pytest

from uitree.components import DEFAULT_REGISTRY
from uitree.specification import Specification


@dataclass
class FakeHost:
    """Host stand-in with a fixed coordinate space."""

    width: int = 800
    height: int = 600


def ui_document(components: str, templates: str | None = None) -> str:
    """Wrap component and template declarations into a complete UI document."""
    templates_section = f"<templates>{templates}</templates>" if templates is not None else ""
    return f"<owo-ui><components>{components}</components>{templates_section}</owo-ui>"


@pytest.fixture
def registry():
    """Independent copy of the default registry, safe to register into."""
    return DEFAULT_REGISTRY.copy()


@pytest.fixture
def host():
    return FakeHost()


@pytest.fixture
def make_spec(registry):
    """Build a Specification from component and template declarations.

    Usage:
        def test_something(make_spec):
            spec = make_spec("<box/>", templates="<my-box><box/></my-box>")
    """

    def _make(components: str, templates: str | None = None, settings=None) -> Specification:
        return Specification.from_string(ui_document(components, templates), registry, settings)

    return _make
