"""
Tests for the Component and ParentComponent base classes.
"""

import pytest

from uitree import Component, ParentComponent, Sizing
from uitree.components import BoxComponent, FlowLayout, LabelComponent
from uitree.exceptions import IncompatibleUISpecError


class TestComponent:
    """Test base component behavior."""

    def test_defaults(self):
        """Test that a fresh component has no id and content sizing."""
        component = BoxComponent()

        assert component.id is None
        assert component.horizontal_sizing == Sizing.content()
        assert component.vertical_sizing == Sizing.content()

    def test_category_is_class_name(self):
        assert LabelComponent().category == "LabelComponent"

    def test_satisfies_own_and_base_categories(self):
        """Test that components satisfy their class and its bases."""
        layout = FlowLayout()

        assert layout.satisfies(FlowLayout)
        assert layout.satisfies(ParentComponent)
        assert layout.satisfies(Component)
        assert not layout.satisfies(LabelComponent)

    def test_sizing_sets_both_axes(self):
        component = BoxComponent().sizing(Sizing.fixed(20), Sizing.fill(50))

        assert component.horizontal_sizing == Sizing.fixed(20)
        assert component.vertical_sizing == Sizing.fill(50)


class TestChildById:
    """Test descendant lookup on parent components."""

    def build_tree(self) -> FlowLayout:
        inner = FlowLayout(id="inner").child(LabelComponent(id="deep", text="found"))
        return FlowLayout(id="root").child(BoxComponent(id="box")).child(inner)

    def test_direct_child(self):
        assert self.build_tree().child_by_id(BoxComponent, "box").id == "box"

    def test_nested_descendant(self):
        assert self.build_tree().child_by_id(LabelComponent, "deep").text == "found"

    def test_missing_id_returns_none(self):
        assert self.build_tree().child_by_id(Component, "nothing") is None

    def test_wrong_category_raises(self):
        """Test that a found component of the wrong category is rejected."""
        with pytest.raises(IncompatibleUISpecError) as exc_info:
            self.build_tree().child_by_id(LabelComponent, "box")

        assert exc_info.value.expected == "LabelComponent"
        assert exc_info.value.actual == "BoxComponent"
        assert str(exc_info.value) == "Expected component with id 'box' to be a LabelComponent, but it is a BoxComponent"
