"""Tests for the component tree."""

from __future__ import annotations

import pytest

from pagetree.exceptions import DuplicateNode, NodeNotInTree
from pagetree.tree import ComponentTree


def _build(*pairs) -> ComponentTree:
    tree = ComponentTree()
    previous = None
    for node in pairs:
        tree.add_node(node, previous)
        previous = node
    return tree


class TestAddNode:
    """Tests for ComponentTree.add_node."""

    def test_first_node_has_no_parent(self, paragraph) -> None:
        container = paragraph(1, "CONTAINER")

        tree = _build(container)

        assert tree.nodes == [container]
        assert tree.parent_of(container) is None
        assert tree.edges == []
        assert container.occurrence_under_parent == 1

    def test_root_level_node_gets_no_edge(self, paragraph) -> None:
        container = paragraph(1, "CONTAINER")
        layout = paragraph(2, "LAYOUT")
        container2 = paragraph(1, "CONTAINER")

        tree = _build(container, layout, container2)

        assert tree.parent_of(container2) is None
        assert tree.children_of(container) == [layout]
        assert container2.occurrence_under_parent == 2

    def test_root_occurrence_counts_same_kind_roots_only(self, paragraph) -> None:
        container = paragraph(1, "CONTAINER")
        image = paragraph(1, "IMAGE")
        container2 = paragraph(1, "CONTAINER")
        container3 = paragraph(1, "CONTAINER")

        _build(container, image, container2, container3)

        assert [n.occurrence_under_parent for n in (container, image, container2, container3)] == [1, 1, 2, 3]

    def test_child_one_level_deeper_links_to_previous(self, paragraph) -> None:
        container = paragraph(1, "CONTAINER")
        layout = paragraph(2, "LAYOUT")

        tree = _build(container, layout)

        assert tree.has_edge(container, layout)
        assert tree.edges == [(container, layout)]
        assert layout.occurrence_under_parent == 1

    def test_higher_node_links_to_common_ancestor(self, paragraph) -> None:
        container = paragraph(1, "CONTAINER")
        layout = paragraph(2, "LAYOUT")
        image = paragraph(3, "IMAGE")
        layout2 = paragraph(2, "LAYOUT")

        tree = _build(container, layout, image, layout2)

        assert tree.has_edge(container, layout)
        assert tree.has_edge(container, layout2)
        assert tree.children_of(layout2) == []
        assert layout2.occurrence_under_parent == 2

    def test_root_node_after_deep_branch_starts_new_tree(self, paragraph) -> None:
        container1 = paragraph(1, "CONTAINER")
        layout = paragraph(2, "LAYOUT")
        image = paragraph(3, "IMAGE")
        container2 = paragraph(1, "CONTAINER")

        tree = _build(container1, layout, image, container2)

        assert tree.parent_of(container2) is None
        assert tree.children_of(container2) == []
        assert tree.roots() == [container1, container2]

    def test_sibling_links_to_parent_of_previous(self, paragraph) -> None:
        container = paragraph(1, "CONTAINER")
        layout = paragraph(2, "LAYOUT")
        image = paragraph(3, "IMAGE")
        video = paragraph(3, "YOUTUBE_VIDEO")

        tree = _build(container, layout, image, video)

        assert tree.has_edge(layout, image)
        assert tree.has_edge(layout, video)
        assert video.occurrence_under_parent == 1

    def test_sibling_occurrence_counts_same_kind_children(self, paragraph) -> None:
        layout = paragraph(2, "LAYOUT")
        nodes = [
            paragraph(1, "CONTAINER"),
            layout,
            paragraph(3, "IMAGE"),
            paragraph(3, "YOUTUBE_VIDEO"),
            paragraph(3, "IMAGE"),
            paragraph(3, "IMAGE"),
        ]

        tree = _build(*nodes)

        assert [n.occurrence_under_parent for n in tree.children_of(layout)] == [1, 1, 2, 3]

    def test_occurrence_is_scoped_to_parent(self, paragraph) -> None:
        container1 = paragraph(1, "CONTAINER")
        layout1 = paragraph(2, "LAYOUT")
        image1 = paragraph(3, "IMAGE")
        container2 = paragraph(1, "CONTAINER")
        layout2 = paragraph(2, "LAYOUT")
        image2 = paragraph(3, "IMAGE")

        tree = _build(container1, layout1, image1, container2, layout2, image2)

        assert tree.parent_of(image2) is layout2
        assert image2.occurrence_under_parent == 1
        assert layout2.occurrence_under_parent == 1

    def test_modifier_attaches_like_a_sibling(self, paragraph, modifier) -> None:
        container = paragraph(1, "CONTAINER")
        layout = paragraph(2, "LAYOUT")
        colors = modifier(2, "COLORS_MODIFIER")

        tree = _build(container, layout, colors)

        assert tree.parent_of(colors) is container

    def test_node_without_resolvable_parent_stays_unattached(self, paragraph) -> None:
        layout = paragraph(2, "LAYOUT")
        layout2 = paragraph(2, "LAYOUT")

        tree = _build(layout, layout2)

        assert tree.parent_of(layout2) is None
        assert layout2.occurrence_under_parent == 1
        assert tree.roots() == []
        assert len(tree) == 2

    def test_rejects_node_added_twice(self, paragraph) -> None:
        container = paragraph(1, "CONTAINER")
        tree = _build(container)

        with pytest.raises(DuplicateNode):
            tree.add_node(container, container)

        assert len(tree) == 1

    def test_rejects_previous_outside_the_tree(self, paragraph) -> None:
        tree = _build(paragraph(1, "CONTAINER"))

        with pytest.raises(NodeNotInTree):
            tree.add_node(paragraph(2, "LAYOUT"), paragraph(1, "CONTAINER"))

        assert len(tree) == 1


class TestQueries:
    """Tests for the read-only tree queries."""

    def test_unknown_node_is_rejected(self, paragraph) -> None:
        tree = _build(paragraph(1, "CONTAINER"))

        with pytest.raises(NodeNotInTree):
            tree.parent_of(paragraph(1, "CONTAINER"))
        with pytest.raises(NodeNotInTree):
            tree.children_of(paragraph(1, "CONTAINER"))

    def test_membership_is_by_identity(self, paragraph) -> None:
        container = paragraph(1, "CONTAINER")
        tree = _build(container)

        assert container in tree
        assert paragraph(1, "CONTAINER") not in tree
        assert "CONTAINER" not in tree

    def test_iteration_follows_insertion_order(self, paragraph) -> None:
        nodes = [paragraph(1, "CONTAINER"), paragraph(2, "LAYOUT"), paragraph(3, "IMAGE")]
        tree = _build(*nodes)

        assert list(tree) == nodes
        assert tree.edges == [(nodes[0], nodes[1]), (nodes[1], nodes[2])]
