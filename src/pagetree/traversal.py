"""Walk a single branch of a component tree."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pagetree.schemas import ComponentNode
    from pagetree.tree import ComponentTree


def ancestors_of(tree: ComponentTree, node: ComponentNode) -> list[ComponentNode]:
    """Return the ancestors of ``node``, nearest first, excluding ``node`` itself.

    For the tree::

        - CONTAINER
        -- LAYOUT
        --- IMAGE
        --- YOUTUBE_VIDEO

    the ancestors of YOUTUBE_VIDEO are LAYOUT, CONTAINER. A node without a
    parent has no ancestors.
    """
    ancestors: list[ComponentNode] = []
    parent = tree.parent_of(node)
    while parent is not None:
        ancestors.append(parent)
        parent = tree.parent_of(parent)
    return ancestors


def full_chain_ending_at(tree: ComponentTree, node: ComponentNode) -> list[ComponentNode]:
    """Return the branch from the root down to ``node``, ignoring its descendants.

    For the tree above the chain of YOUTUBE_VIDEO is CONTAINER, LAYOUT,
    YOUTUBE_VIDEO.
    """
    chain = ancestors_of(tree, node)
    chain.reverse()
    chain.append(node)
    return chain
