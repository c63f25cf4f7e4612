"""Shared schemas for pagetree."""

from pagetree.schemas.kinds import NodeCategory, NodeKind
from pagetree.schemas.nodes import ComponentNode, ConfigurationNode
from pagetree.schemas.table import TableRow

__all__ = ["ComponentNode", "ConfigurationNode", "NodeCategory", "NodeKind", "TableRow"]
