"""Tests for the line and cell grammar."""

from __future__ import annotations

import pytest

from pagetree.catalog import DEFAULT_CATALOG
from pagetree.exceptions import (
    ConfigurationError,
    MissingInlineConfig,
    MissingKeyValueDelimiter,
    TrailingDelimiter,
    UnknownNodeKind,
    UnrecognizedLine,
)
from pagetree.grammar import (
    classify_component_cell,
    classify_configuration_cell,
    classify_line,
    is_configuration_line,
)
from pagetree.schemas import ComponentNode, ConfigurationNode


class TestClassifyLine:
    """Tests for classify_line function."""

    @pytest.mark.parametrize(
        ("line", "level", "kind"),
        [
            ("- CONTAINER", 1, "CONTAINER"),
            ("-- LAYOUT", 2, "LAYOUT"),
            ("--- CAROUSEL_ITEM", 3, "CAROUSEL_ITEM"),
        ],
    )
    def test_paragraph_lines(self, line: str, level: int, kind: str) -> None:
        node = classify_line(line)

        assert isinstance(node, ComponentNode)
        assert node.level == level
        assert node.kind == DEFAULT_CATALOG.paragraph(kind)
        assert not node.is_modifier
        assert node.inline_config is None

    def test_modifier_line(self) -> None:
        node = classify_line("---@ ABSOLUTE_HEIGHT_MODIFIER")

        assert isinstance(node, ComponentNode)
        assert node.level == 3
        assert node.kind == DEFAULT_CATALOG.modifier("ABSOLUTE_HEIGHT_MODIFIER")
        assert node.is_modifier

    def test_configuration_line(self) -> None:
        node = classify_line("---* name:some-image.png, link:/some/path")

        assert node == ConfigurationNode(entries={"name": "some-image.png", "link": "/some/path"})

    def test_root_level_configuration_line(self) -> None:
        node = classify_line('* title:"Some page title"')

        assert node == ConfigurationNode(entries={"title": "Some page title"})

    def test_inline_configuration(self) -> None:
        node = classify_line("--- IMAGE >> name:some-image.png, link:/some/path")

        assert isinstance(node, ComponentNode)
        assert node.level == 3
        assert node.inline_config == ConfigurationNode(
            entries={"name": "some-image.png", "link": "/some/path"}
        )

    @pytest.mark.parametrize("line", ["- CONTAINER >>", "- CONTAINER >> ", "- CONTAINER >>    "])
    def test_inline_marker_without_configuration(self, line: str) -> None:
        with pytest.raises(MissingInlineConfig, match="inline config initializer") as exc_info:
            classify_line(line)

        assert exc_info.value.text == line

    def test_inline_configuration_is_validated(self) -> None:
        with pytest.raises(TrailingDelimiter):
            classify_line("- CONTAINER >> bg:#fff,")

    @pytest.mark.parametrize("line", ["CONTAINER", "- container", "-CONTAINER", "", "-- LAYOUT extra"])
    def test_unrecognized_lines(self, line: str) -> None:
        with pytest.raises(UnrecognizedLine, match="not valid") as exc_info:
            classify_line(line)

        assert exc_info.value.text == line

    def test_unknown_paragraph_kind(self) -> None:
        with pytest.raises(UnknownNodeKind, match="SLIDESHOW"):
            classify_line("- SLIDESHOW")

    def test_paragraph_kind_used_as_modifier(self) -> None:
        with pytest.raises(UnknownNodeKind):
            classify_line("-@ CONTAINER")

    def test_configuration_without_key_value_delimiter(self) -> None:
        with pytest.raises(MissingKeyValueDelimiter, match="<key>:<value>"):
            classify_line("-* some-image.png")

    @pytest.mark.parametrize("line", ["-* name:image.png,", "-* name:image.png,   ", "* a:b, c:d,"])
    def test_configuration_with_trailing_delimiter(self, line: str) -> None:
        with pytest.raises(TrailingDelimiter, match="ends with a ','"):
            classify_line(line)

    def test_configuration_item_without_delimiter(self) -> None:
        with pytest.raises(ConfigurationError):
            classify_line("-* url: something, color")

    def test_escaped_trailing_comma_is_still_rejected(self) -> None:
        """The ending check runs on the raw text, before unescaping."""
        with pytest.raises(TrailingDelimiter):
            classify_line("-* text:Over\\,")

    def test_uses_injected_catalog(self) -> None:
        from pagetree.catalog import NodeCatalog
        from pagetree.schemas import NodeKind

        catalog = NodeCatalog([NodeKind(name="CARD", template=".card:nth-child({index})")])

        node = classify_line("- CARD", catalog)

        assert isinstance(node, ComponentNode)
        assert node.kind.selector(2) == ".card:nth-child(2)"
        with pytest.raises(UnknownNodeKind):
            classify_line("- CONTAINER", catalog)


class TestIsConfigurationLine:
    """Tests for is_configuration_line function."""

    @pytest.mark.parametrize(
        ("line", "expected"),
        [("* title:x", True), ("---* a:b", True), ("- CONTAINER", False), ("-@ COLORS_MODIFIER", False)],
    )
    def test_detects_configuration_shape(self, line: str, expected: bool) -> None:
        assert is_configuration_line(line) is expected


class TestTableCells:
    """Tests for table cell classification."""

    def test_paragraph_cell(self) -> None:
        node = classify_component_cell(">> LAYOUT")

        assert node.level == 2
        assert node.kind.name == "LAYOUT"
        assert not node.is_modifier

    def test_modifier_cell(self) -> None:
        node = classify_component_cell(">>>@ COLORS_MODIFIER")

        assert node.level == 3
        assert node.is_modifier

    @pytest.mark.parametrize("cell", ["- CONTAINER", "CONTAINER", "> CONTAINER >> bg:red", "<"])
    def test_unsupported_component_cell(self, cell: str) -> None:
        with pytest.raises(UnrecognizedLine, match="not in a supported format"):
            classify_component_cell(cell)

    def test_configuration_cell(self) -> None:
        node = classify_configuration_cell('title:"Good title", features:autoplay')

        assert node.entries == {"title": "Good title", "features": "autoplay"}

    def test_configuration_cell_is_validated(self) -> None:
        with pytest.raises(MissingKeyValueDelimiter):
            classify_configuration_cell("autoplay")
        with pytest.raises(TrailingDelimiter):
            classify_configuration_cell("title:x, ")
