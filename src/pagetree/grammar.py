"""Classify raw tree-view lines and table cells into nodes.

Two surface syntaxes describe the same component tree:

Tree view, one node per line::

    * title:"Page title"              document-level configuration
    - CONTAINER                       paragraph at level 1
    -* bg:#fff                        configuration of the container
    -- LAYOUT >> columns:2            paragraph with inline configuration
    --@ COLORS_MODIFIER               modifier at level 2

Table view, a component cell and a configuration cell per row::

    | > CONTAINER     | bg:#fff  |
    | >> LAYOUT       |          |
    | >>@ COLORS_MODIFIER |      |
"""

from __future__ import annotations

import re
from typing import Union

from pagetree.catalog import DEFAULT_CATALOG, NodeCatalog
from pagetree.config_parser import (
    CONFIG_ITEM_DELIMITER,
    CONFIG_KEY_VALUE_DELIMITER,
    parse_configuration_values,
)
from pagetree.exceptions import (
    MissingInlineConfig,
    MissingKeyValueDelimiter,
    TrailingDelimiter,
    UnrecognizedLine,
)
from pagetree.schemas import ComponentNode, ConfigurationNode

Node = Union[ComponentNode, ConfigurationNode]

TREE_DEPTH_MARKER = "-"
TABLE_DEPTH_MARKER = ">"

_TREE_PARAGRAPH_RE = re.compile(
    r"(?P<level>-+) (?P<kind>[A-Z_]+)(?P<inline> >>(?: (?P<config>.*))?)?"
)
_TREE_MODIFIER_RE = re.compile(r"(?P<level>-+)@ (?P<kind>[A-Z_]+)")
_TREE_CONFIGURATION_RE = re.compile(r"(?P<level>-*)\* (?P<config>.*)")
_TABLE_PARAGRAPH_RE = re.compile(r"(?P<level>>+) (?P<kind>[A-Z_]+)")
_TABLE_MODIFIER_RE = re.compile(r"(?P<level>>+)@ (?P<kind>[A-Z_]+)")
_TRAILING_DELIMITER_RE = re.compile(rf".*{CONFIG_ITEM_DELIMITER} *")

_MISSING_DELIMITER_MESSAGE = (
    "The configuration node doesn't contain a valid key-value pair."
    f" They should be in the following format: <key>{CONFIG_KEY_VALUE_DELIMITER}<value>"
)
_TRAILING_DELIMITER_MESSAGE = (
    f"The configuration node ends with a '{CONFIG_ITEM_DELIMITER}',"
    " which is not considered a valid configuration node value."
)


def classify_line(line: str, catalog: NodeCatalog = DEFAULT_CATALOG) -> Node:
    """Turn one tree-view line into a component or configuration node.

    Args:
        line: The raw line, without its line break.
        catalog: Kinds the component identifiers are resolved against.

    Returns:
        A ComponentNode for paragraph and modifier lines, a ConfigurationNode
        for ``*`` lines.

    Raises:
        UnrecognizedLine: If the line has none of the three shapes.
        UnknownNodeKind: If a component identifier is not in the catalog.
        MissingInlineConfig: If ``>>`` is not followed by a configuration.
        MissingKeyValueDelimiter, TrailingDelimiter, InvalidConfiguration:
            If the configuration payload is malformed.
    """
    match = _TREE_PARAGRAPH_RE.fullmatch(line)
    if match:
        node = ComponentNode(
            level=len(match.group("level")), kind=catalog.paragraph(match.group("kind"))
        )
        if match.group("inline") is not None:
            config = match.group("config")
            if config is None or not config.strip():
                raise MissingInlineConfig(
                    "Found inline config initializer (>>) but not actual inline configuration.",
                    line,
                )
            node.inline_config = create_configuration_node(config)
        return node

    match = _TREE_MODIFIER_RE.fullmatch(line)
    if match:
        return ComponentNode(
            level=len(match.group("level")),
            kind=catalog.modifier(match.group("kind")),
            is_modifier=True,
        )

    match = _TREE_CONFIGURATION_RE.fullmatch(line)
    if match:
        return create_configuration_node(match.group("config"))

    raise UnrecognizedLine(f"The provided line from the component tree is not valid: [{line}]", line)


def is_configuration_line(line: str) -> bool:
    """Return True if the tree-view line has the configuration shape."""
    return _TREE_CONFIGURATION_RE.fullmatch(line) is not None


def classify_component_cell(cell: str, catalog: NodeCatalog = DEFAULT_CATALOG) -> ComponentNode:
    """Turn a table component cell (``>> LAYOUT``, ``>>@ COLORS_MODIFIER``) into a node."""
    match = _TABLE_PARAGRAPH_RE.fullmatch(cell)
    if match:
        return ComponentNode(
            level=len(match.group("level")), kind=catalog.paragraph(match.group("kind"))
        )

    match = _TABLE_MODIFIER_RE.fullmatch(cell)
    if match:
        return ComponentNode(
            level=len(match.group("level")),
            kind=catalog.modifier(match.group("kind")),
            is_modifier=True,
        )

    raise UnrecognizedLine(f"The component cell is not in a supported format: [{cell}]", cell)


def classify_configuration_cell(cell: str) -> ConfigurationNode:
    """Turn a table configuration cell into a configuration node."""
    return create_configuration_node(cell)


def create_configuration_node(payload: str) -> ConfigurationNode:
    """Validate a raw configuration payload and parse it into a node."""
    if CONFIG_KEY_VALUE_DELIMITER not in payload:
        raise MissingKeyValueDelimiter(_MISSING_DELIMITER_MESSAGE, payload)
    if _TRAILING_DELIMITER_RE.fullmatch(payload):
        raise TrailingDelimiter(_TRAILING_DELIMITER_MESSAGE, payload)
    return ConfigurationNode(entries=parse_configuration_values(payload))
