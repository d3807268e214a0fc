"""
Tests for Specification loading, validation and hierarchy creation.

This module tests the document-level entry points:
- Root shape validation (root tag, components section, single root)
- Template store construction and duplicate handling
- Stream and file loading
- Hierarchy and adapter creation
"""

import io
import logging

import pytest
from lxml import etree

from uitree import ParentComponent, Sizing, Specification
from uitree.components import BoxComponent, FlowLayout, LabelComponent
from uitree.exceptions import (
    DuplicateTemplateError,
    IncompatibleComponentError,
    UIParsingError,
    UnknownTemplateError,
)
from uitree.settings import ParsingSettings


class Panel(ParentComponent):
    """Trivial container used as a document root."""

    pass


class TestDocumentValidation:
    """Test validation of the document root shape."""

    def test_missing_components_element_fails(self):
        """Test that a document without 'components' is rejected."""
        with pytest.raises(UIParsingError) as exc_info:
            Specification.from_string("<owo-ui><templates/></owo-ui>")

        assert "Missing 'components' element" in str(exc_info.value)

    def test_two_root_components_fail(self):
        """Test that 'components' with two children is rejected."""
        with pytest.raises(UIParsingError) as exc_info:
            Specification.from_string("<owo-ui><components><box/><box/></components></owo-ui>")

        assert "a single child must be declared" in str(exc_info.value)

    def test_empty_components_fails(self):
        """Test that 'components' without children is rejected."""
        with pytest.raises(UIParsingError):
            Specification.from_string("<owo-ui><components>  </components></owo-ui>")

    def test_wrong_root_tag_fails(self):
        """Test that the root element must be 'owo-ui'."""
        with pytest.raises(UIParsingError) as exc_info:
            Specification.from_string("<ui><components><box/></components></ui>")

        assert "owo-ui" in str(exc_info.value)

    def test_custom_root_tag_from_settings(self, registry):
        """Test that the expected root tag is configurable."""
        settings = ParsingSettings(root_tag="ui")
        spec = Specification.from_string("<ui><components><box/></components></ui>", registry, settings)

        assert spec.components_element.tag == "box"

    def test_comments_do_not_count_as_components(self):
        """Test that comments next to the root component are ignored."""
        spec = Specification.from_string(
            "<owo-ui><components><!-- root --><box/><!-- end --></components></owo-ui>"
        )

        assert spec.components_element.tag == "box"

    def test_malformed_xml_fails_with_parsing_error(self):
        """Test that XML syntax errors surface as UIParsingError."""
        with pytest.raises(UIParsingError) as exc_info:
            Specification.load(io.BytesIO(b"<owo-ui><components><box></components>"))

        assert isinstance(exc_info.value.__cause__, etree.XMLSyntaxError)


class TestTemplateStore:
    """Test template registration from the 'templates' section."""

    def test_no_templates_section_gives_empty_store(self, make_spec):
        """Test that the templates section is optional."""
        spec = make_spec("<box/>")

        assert len(spec.templates) == 0

    def test_expanding_without_templates_fails(self, make_spec):
        """Test that any template name is unknown when none are declared."""
        spec = make_spec("<box/>")

        with pytest.raises(UnknownTemplateError) as exc_info:
            spec.expand_template(BoxComponent, "anything", {})

        assert "Unknown template 'anything'" in str(exc_info.value)

    def test_templates_keyed_by_tag(self, make_spec):
        """Test that each templates child is registered under its tag."""
        spec = make_spec("<box/>", templates="<first><box/></first><second><label/></second>")

        assert set(spec.templates) == {"first", "second"}

    def test_duplicate_template_overwrites_with_warning(self, make_spec, caplog):
        """Test that a repeated template name keeps the last declaration."""
        with caplog.at_level(logging.WARNING, logger="uitree.structure.registry"):
            spec = make_spec("<box/>", templates="<thing><box/></thing><thing><label/></thing>")

        assert isinstance(spec.expand_template(LabelComponent, "thing", {}), LabelComponent)
        assert "declared more than once" in caplog.text

    def test_duplicate_template_fails_when_disallowed(self, make_spec):
        """Test that duplicates raise when the settings disallow them."""
        settings = ParsingSettings(allow_duplicate_templates=False)

        with pytest.raises(DuplicateTemplateError) as exc_info:
            make_spec("<box/>", templates="<thing><box/></thing><thing><label/></thing>", settings=settings)

        assert exc_info.value.name == "thing"


class TestLoading:
    """Test stream and file loading entry points."""

    def test_load_from_text_stream(self):
        """Test that text streams are accepted as well as binary ones."""
        spec = Specification.load(io.StringIO("<owo-ui><components><box/></components></owo-ui>"))

        assert spec.components_element.tag == "box"

    def test_load_file(self, tmp_path):
        """Test loading a specification from a file path."""
        path = tmp_path / "screen.xml"
        path.write_text("<owo-ui><components><label><text>Hi</text></label></components></owo-ui>")

        spec = Specification.load_file(path)

        assert spec is not None
        assert spec.parse_component(LabelComponent, spec.components_element).text == "Hi"

    def test_load_missing_file_returns_none(self, tmp_path, caplog):
        """Test that a missing file is logged and yields None."""
        path = tmp_path / "missing.xml"

        with caplog.at_level(logging.WARNING, logger="uitree.specification"):
            assert Specification.load_file(path) is None

        assert "Could not load UI spec from file" in caplog.text

    def test_load_invalid_file_returns_none(self, tmp_path):
        """Test that an invalid document is logged and yields None instead of raising."""
        path = tmp_path / "bad.xml"
        path.write_text("<owo-ui><templates/></owo-ui>")

        assert Specification.load_file(path) is None


class TestHierarchyCreation:
    """Test building the declared component hierarchy."""

    def test_single_box_fills_host(self, registry, host):
        """Test the minimal document parses to one root sized 100/100."""
        registry.register("box", lambda element: Panel())
        spec = Specification.from_string("<owo-ui><components><box/></components></owo-ui>", registry)

        root = spec.create_hierarchy(ParentComponent, host)

        assert type(root) is Panel
        assert root.horizontal_sizing == Sizing.fill(100)
        assert root.vertical_sizing == Sizing.fill(100)
        assert root.children == []

    def test_nested_hierarchy(self, make_spec, host):
        """Test that container children are parsed recursively."""
        spec = make_spec(
            """
            <flow-layout direction="vertical">
                <children>
                    <label id="title"><text>Settings</text></label>
                    <flow-layout direction="horizontal" id="row">
                        <children><box id="swatch"><color>red</color></box></children>
                    </flow-layout>
                </children>
            </flow-layout>
            """
        )

        root = spec.create_hierarchy(FlowLayout, host)

        assert [child.id for child in root.children] == ["title", "row"]
        assert root.child_by_id(LabelComponent, "title").text == "Settings"
        assert root.child_by_id(BoxComponent, "swatch").color == "red"

    def test_root_of_wrong_category_fails(self, make_spec, host):
        """Test that the root must satisfy the expected root category."""
        spec = make_spec("<label id='caption'/>")

        with pytest.raises(IncompatibleComponentError) as exc_info:
            spec.create_hierarchy(ParentComponent, host)

        assert exc_info.value.expected == "ParentComponent"
        assert exc_info.value.actual == "LabelComponent"
        assert "with id 'caption'" in str(exc_info.value)

    def test_each_call_builds_a_fresh_tree(self, make_spec, host):
        """Test that repeated hierarchy creation does not share components."""
        spec = make_spec('<flow-layout direction="vertical"><children><box/></children></flow-layout>')

        first = spec.create_hierarchy(FlowLayout, host)
        second = spec.create_hierarchy(FlowLayout, host)

        assert first is not second
        assert first.children[0] is not second.children[0]

    def test_create_adapter(self, make_spec, host):
        """Test that the adapter holds the root and resolves it against the host."""
        spec = make_spec('<flow-layout direction="vertical"/>')

        adapter = spec.create_adapter(FlowLayout, host)

        assert adapter.host is host
        assert isinstance(adapter.root, FlowLayout)
        assert adapter.root_size() == (800, 600)
