"""Tests for traversal strategies and the search tree adapter.

All tests use the same balanced seven-node tree:

            d
          /   \\
         b     f
        / \\   / \\
       a   c e   g
"""

import pytest

from bintreelib import (
    BreadthFirstTraverser,
    DepthFirstPostOrderTraverser,
    DepthFirstPreOrderTraverser,
    InOrderTraverser,
    SearchTreeAdapter,
    Tree,
    build_tree,
    create_traverser,
)
from bintreelib.core import Node, TreeAdapter


@pytest.fixture
def balanced():
    return build_tree(["d", "b", "f", "a", "c", "e", "g"])


@pytest.fixture
def adapter(balanced):
    return SearchTreeAdapter(balanced)


def keys_and_depths(traverser, root, **kwargs):
    return [(node.key, depth) for node, depth in traverser.traverse(root, **kwargs)]


class TestStrategies:

    def test_in_order(self, balanced, adapter):
        result = keys_and_depths(InOrderTraverser(adapter), balanced.root)
        assert result == [
            ("a", 2), ("b", 1), ("c", 2), ("d", 0), ("e", 2), ("f", 1), ("g", 2)
        ]

    def test_pre_order(self, balanced, adapter):
        result = keys_and_depths(DepthFirstPreOrderTraverser(adapter), balanced.root)
        assert [key for key, _ in result] == ["d", "b", "a", "c", "f", "e", "g"]

    def test_post_order(self, balanced, adapter):
        result = keys_and_depths(DepthFirstPostOrderTraverser(adapter), balanced.root)
        assert [key for key, _ in result] == ["a", "c", "b", "e", "g", "f", "d"]

    def test_breadth_first(self, balanced, adapter):
        result = keys_and_depths(BreadthFirstTraverser(adapter), balanced.root)
        assert result == [
            ("d", 0), ("b", 1), ("f", 1), ("a", 2), ("c", 2), ("e", 2), ("g", 2)
        ]

    @pytest.mark.parametrize("traverser_class", [
        InOrderTraverser,
        DepthFirstPreOrderTraverser,
        DepthFirstPostOrderTraverser,
        BreadthFirstTraverser,
    ])
    def test_max_depth_limits_every_strategy(self, balanced, adapter, traverser_class):
        result = keys_and_depths(traverser_class(adapter), balanced.root, max_depth=1)
        assert sorted(key for key, _ in result) == ["b", "d", "f"]
        assert all(depth <= 1 for _, depth in result)

    def test_in_order_max_depth_zero(self, balanced, adapter):
        result = keys_and_depths(InOrderTraverser(adapter), balanced.root, max_depth=0)
        assert result == [("d", 0)]

    def test_in_order_of_unbalanced_chain(self):
        tree = build_tree(["a", "b", "c", "d"])
        result = keys_and_depths(InOrderTraverser(SearchTreeAdapter(tree)), tree.root)
        assert result == [("a", 0), ("b", 1), ("c", 2), ("d", 3)]


class TestFactory:

    @pytest.mark.parametrize("name,expected", [
        ("in_order", InOrderTraverser),
        ("IN_ORDER", InOrderTraverser),
        ("pre_order", DepthFirstPreOrderTraverser),
        ("post_order", DepthFirstPostOrderTraverser),
        ("breadth_first", BreadthFirstTraverser),
        ("bfs", BreadthFirstTraverser),
    ])
    def test_create_by_name(self, adapter, name, expected):
        assert isinstance(create_traverser(name, adapter), expected)

    def test_unknown_name(self, adapter):
        with pytest.raises(ValueError, match="Unknown traversal strategy"):
            create_traverser("zigzag", adapter)


class TestSearchTreeAdapter:

    def test_children_left_to_right(self, balanced, adapter):
        children = list(adapter.get_children(balanced.root))
        assert [child.key for child in children] == ["b", "f"]

    def test_parent_is_reconstructed(self, balanced, adapter):
        c = balanced.root.find_node("c")
        assert adapter.get_parent(c).key == "b"
        assert adapter.get_parent(balanced.root) is None

    def test_depth_and_path(self, balanced, adapter):
        e = balanced.root.find_node("e")
        assert adapter.get_depth(e) == 2
        assert [n.key for n in adapter.get_path(e)] == ["d", "f", "e"]

    def test_siblings(self, balanced, adapter):
        a = balanced.root.find_node("a")
        assert [n.key for n in adapter.get_siblings(a)] == ["c"]
        assert list(adapter.get_siblings(balanced.root)) == []

    def test_foreign_node(self, adapter):
        with pytest.raises(ValueError):
            adapter.get_parent(Node("c", "c"))

    def test_default_depth_walks_parents(self, balanced):
        class ParentMapAdapter(TreeAdapter):
            """Adapter using an explicit child -> parent map."""

            def __init__(self, tree: Tree):
                self.parents = {}
                for node in tree.in_order():
                    for child in (node.left, node.right):
                        if child is not None:
                            self.parents[child.key] = node

            def get_children(self, node):
                return iter([c for c in (node.left, node.right) if c is not None])

            def get_parent(self, node):
                return self.parents.get(node.key)

        parent_map = ParentMapAdapter(balanced)
        g = balanced.root.find_node("g")
        assert parent_map.get_depth(g) == 2
        assert parent_map.get_depth(balanced.root) == 0
