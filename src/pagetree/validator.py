"""Structural validation of a classified document before any tree is built."""

from __future__ import annotations

from typing import Iterable

from pagetree.exceptions import (
    ExcessiveDepthJump,
    ModifierMustAttachAtSiblingLevel,
    NoComponentDefined,
)
from pagetree.schemas import ComponentNode, TableRow


def validate_nodes(nodes: Iterable[object]) -> None:
    """Check every consecutive pair of component nodes for depth violations.

    Configuration nodes are skipped. Nothing is mutated, so a document that
    fails here never reaches the tree builder.

    The following are violations:

    - A modifier declared deeper than the previous component. Modifiers sit at
      the same level as the paragraph (or the other modifiers) they annotate::

        --- IMAGE
        ---@ COLORS_MODIFIER

    - A child declared more than one level below the previous component::

        -- LAYOUT
        ---- IMAGE

    Raises:
        ModifierMustAttachAtSiblingLevel: For a modifier nested under its anchor.
        ExcessiveDepthJump: For a descent of more than one level.
    """
    previous: ComponentNode | None = None
    for node in nodes:
        if isinstance(node, ComponentNode):
            validate_depth(node, previous)
            previous = node


def validate_depth(current: ComponentNode, previous: ComponentNode | None) -> None:
    """Validate ``current`` against the previously accepted component, if any."""
    previous_level = previous.level if previous is not None else 0
    if current.level <= previous_level:
        return
    if current.is_modifier:
        raise ModifierMustAttachAtSiblingLevel(
            "Modifier node should be at the same level as the previous paragraph or modifier node.",
            previous,
            current,
        )
    if current.level - previous_level != 1:
        raise ExcessiveDepthJump(
            "Child defined more than 1 level deeper than its immediate parent"
            " is not considered a valid child node.",
            previous,
            current,
        )


def validate_table_rows(rows: list[TableRow]) -> None:
    """Check that at least one table row defines a component."""
    if not any(row.has_component_definition() for row in rows):
        raise NoComponentDefined("None of the entries in the input data table has a component defined.")
