"""Build context selectors from branches of the component tree.

With the default catalog:

- ``- CONTAINER`` gives ``.container:nth-child(1)``
- ``- CONTAINER / -- LAYOUT / --- IMAGE`` gives
  ``.container:nth-child(1) .layout .image-component:nth-child(1)``
- a second ``--- IMAGE`` under the same layout ends in ``:nth-child(2)``
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from pagetree.exceptions import EmptyNodeSequence
from pagetree.traversal import full_chain_ending_at

if TYPE_CHECKING:
    from pagetree.schemas import ComponentNode
    from pagetree.tree import ComponentTree

DESCENDANT_SEPARATOR = " "


def assemble_selector(nodes: Sequence[ComponentNode]) -> str:
    """Join the selectors of ``nodes`` (root first), each indexed by its occurrence.

    Raises:
        EmptyNodeSequence: If ``nodes`` is empty.
    """
    if not nodes:
        raise EmptyNodeSequence(
            "There is no node to create CSS selector from. The provided collection of nodes is empty."
        )
    return DESCENDANT_SEPARATOR.join(node.kind.selector(node.occurrence_under_parent) for node in nodes)


def context_selector_for(tree: ComponentTree, node: ComponentNode) -> str:
    """Return the selector addressing ``node`` through its branch of ``tree``."""
    return assemble_selector(full_chain_ending_at(tree, node))
