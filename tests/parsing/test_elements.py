"""
Tests for the attributed tree helpers over lxml.
"""

import io

import pytest
from lxml import etree

from uitree.exceptions import UIParsingError
from uitree.parsing import child_elements, clone, element_children, parse_document, text_content


class TestElementHelpers:
    """Test element child access and cloning."""

    def test_element_children_skip_comments(self):
        root = etree.fromstring("<root><a/><!-- note --><b/></root>")

        assert [child.tag for child in element_children(root)] == ["a", "b"]

    def test_child_elements_last_wins(self):
        """Test that repeated tags map to the last declaration."""
        root = etree.fromstring("<root><a n='1'/><a n='2'/><b/></root>")

        children = child_elements(root)

        assert set(children) == {"a", "b"}
        assert children["a"].get("n") == "2"

    def test_text_content_includes_descendants(self):
        root = etree.fromstring("<root>one <b>two</b> three</root>")

        assert text_content(root) == "one two three"

    def test_clone_is_independent(self):
        original = etree.fromstring("<root><a/></root>")

        copy = clone(original)
        copy.append(etree.Element("b"))

        assert len(original) == 1
        assert len(copy) == 2


class TestParseDocument:
    """Test document loading."""

    def test_comments_removed(self):
        root = parse_document(io.BytesIO(b"<root><!-- gone --><a/></root>"))

        assert len(root) == 1

    def test_malformed_document(self):
        with pytest.raises(UIParsingError) as exc_info:
            parse_document(io.BytesIO(b"<root>"))

        assert "Malformed UI document" in str(exc_info.value)
