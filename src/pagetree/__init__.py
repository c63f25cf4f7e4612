"""pagetree: build component trees from indented documents and address their nodes."""

from pagetree.assembly import (
    SelectorRecorder,
    TableAssembler,
    TreeViewAssembler,
    assemble_table,
    assemble_tree_view,
)
from pagetree.catalog import DEFAULT_CATALOG, NodeCatalog, get_catalog, load_catalog
from pagetree.config_parser import parse_configuration_values
from pagetree.converter import convert_tree_to_table, parse_table, render_table
from pagetree.exceptions import (
    AssemblyError,
    ConfigurationError,
    ExcessiveDepthJump,
    ModifierMustAttachAtSiblingLevel,
    PagetreeError,
    ParseError,
    StructuralError,
)
from pagetree.grammar import classify_component_cell, classify_configuration_cell, classify_line
from pagetree.schemas import ComponentNode, ConfigurationNode, NodeCategory, NodeKind, TableRow
from pagetree.selectors import assemble_selector, context_selector_for
from pagetree.traversal import ancestors_of, full_chain_ending_at
from pagetree.tree import ComponentTree
from pagetree.validator import validate_nodes

__all__ = [
    "AssemblyError",
    "ComponentNode",
    "ComponentTree",
    "ConfigurationError",
    "ConfigurationNode",
    "DEFAULT_CATALOG",
    "ExcessiveDepthJump",
    "ModifierMustAttachAtSiblingLevel",
    "NodeCatalog",
    "NodeCategory",
    "NodeKind",
    "PagetreeError",
    "ParseError",
    "SelectorRecorder",
    "StructuralError",
    "TableAssembler",
    "TableRow",
    "TreeViewAssembler",
    "ancestors_of",
    "assemble_selector",
    "assemble_table",
    "assemble_tree_view",
    "classify_component_cell",
    "classify_configuration_cell",
    "classify_line",
    "context_selector_for",
    "convert_tree_to_table",
    "full_chain_ending_at",
    "get_catalog",
    "load_catalog",
    "parse_configuration_values",
    "parse_table",
    "render_table",
    "validate_nodes",
]
