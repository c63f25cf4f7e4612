"""Component tree built from nodes and their nesting levels."""

from __future__ import annotations

import logging
from typing import Iterator

from pagetree.exceptions import DuplicateNode, NodeNotInTree
from pagetree.schemas import ComponentNode
from pagetree.traversal import ancestors_of

logger = logging.getLogger(__name__)


class ComponentTree:
    """Component nodes of one document and the parent of each.

    Nodes are kept in insertion order together with the position of their
    parent, so every node has at most one parent and no cycles can form.
    Configuration nodes are not stored here.
    """

    def __init__(self) -> None:
        self._nodes: list[ComponentNode] = []
        self._parents: list[int | None] = []
        self._positions: dict[int, int] = {}

    def add_node(self, current: ComponentNode, previous: ComponentNode | None) -> None:
        """Add ``current`` and link it to its parent based on ``previous``.

        Exactly one of the following applies, in this order:

        1. There is no previous node: ``current`` is the first node, no edge.
        2. ``current`` is at root level: no edge, its occurrence becomes the
           number of same-kind root nodes including itself.
        3. ``current`` is one level deeper than ``previous``: ``previous`` is
           its parent. It is the first child of its kind there, so the default
           occurrence stands.
        4. ``current`` is higher than or at the same level as ``previous``: the
           nearest ancestor of ``previous`` one level above ``current`` becomes
           its parent, and its occurrence becomes the number of same-kind
           children of that parent including itself. Without such an ancestor
           the node stays parentless and keeps its occurrence.

        Args:
            current: The newly classified node, not linked to anything yet.
            previous: The previously accepted component node, or None.

        Raises:
            DuplicateNode: If ``current`` is already in the tree.
            NodeNotInTree: If ``previous`` is not in the tree.
        """
        if current in self:
            raise DuplicateNode(f"Node is already in the tree: [{current}]")
        if previous is not None and previous not in self:
            raise NodeNotInTree(f"Previous node is not in the tree: [{previous}]")

        self._positions[id(current)] = len(self._nodes)
        self._nodes.append(current)
        self._parents.append(None)

        if previous is None:
            return
        if current.is_at_root_level():
            current.occurrence_under_parent = sum(
                1 for node in self.roots() if node.has_same_kind_as(current)
            )
        elif current.is_one_level_deeper_than(previous):
            self._link(previous, current)
        elif current.is_higher_than(previous) or current.is_at_same_level_as(previous):
            parent = next(
                (node for node in ancestors_of(self, previous) if current.is_one_level_deeper_than(node)),
                None,
            )
            if parent is None:
                logger.debug("No parent at level %d for %s, left unattached", current.level - 1, current)
                return
            self._link(parent, current)
            current.occurrence_under_parent = sum(
                1 for node in self.children_of(parent) if node.has_same_kind_as(current)
            )

    def _link(self, parent: ComponentNode, child: ComponentNode) -> None:
        self._parents[self._position(child)] = self._position(parent)
        logger.debug("Linked %s under %s", child, parent)

    def _position(self, node: ComponentNode) -> int:
        try:
            return self._positions[id(node)]
        except KeyError:
            raise NodeNotInTree(f"Node is not in the tree: [{node}]") from None

    def parent_of(self, node: ComponentNode) -> ComponentNode | None:
        """Return the parent of ``node``, or None for root and unattached nodes."""
        parent = self._parents[self._position(node)]
        return None if parent is None else self._nodes[parent]

    def children_of(self, node: ComponentNode) -> list[ComponentNode]:
        """Return the direct children of ``node`` in insertion order."""
        position = self._position(node)
        return [child for child, parent in zip(self._nodes, self._parents) if parent == position]

    def roots(self) -> list[ComponentNode]:
        """Return the root-level nodes in insertion order."""
        return [node for node in self._nodes if node.is_at_root_level()]

    def has_edge(self, parent: ComponentNode, child: ComponentNode) -> bool:
        return self.parent_of(child) is parent

    @property
    def nodes(self) -> list[ComponentNode]:
        return list(self._nodes)

    @property
    def edges(self) -> list[tuple[ComponentNode, ComponentNode]]:
        """Return ``(parent, child)`` pairs in child insertion order."""
        return [
            (self._nodes[parent], child)
            for child, parent in zip(self._nodes, self._parents)
            if parent is not None
        ]

    def __contains__(self, node: object) -> bool:
        return id(node) in self._positions and self._nodes[self._positions[id(node)]] is node

    def __iter__(self) -> Iterator[ComponentNode]:
        return iter(list(self._nodes))

    def __len__(self) -> int:
        return len(self._nodes)
