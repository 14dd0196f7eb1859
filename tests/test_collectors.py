"""Tests for data collectors."""

import pytest

from bintreelib import (
    ChildCountCollector,
    CustomCollector,
    FullNodeCollector,
    ItemCollector,
    KeyCollector,
    PathCollector,
    PayloadCollector,
    SearchTreeAdapter,
    build_tree,
)
from bintreelib.core import TreeAdapter


@pytest.fixture
def tree():
    return build_tree([("d", "delta"), ("b", "bravo"), ("f", "foxtrot"), ("c", "charlie")])


@pytest.fixture
def adapter(tree):
    return SearchTreeAdapter(tree)


class TestSimpleCollectors:

    def test_key_payload_item(self, tree, adapter):
        c = tree.root.find_node("c")
        assert KeyCollector(adapter).collect(c, 2) == "c"
        assert PayloadCollector(adapter).collect(c, 2) == "charlie"
        assert ItemCollector(adapter).collect(c, 2) == ("c", "charlie")

    def test_full_node(self, tree, adapter):
        assert FullNodeCollector(adapter).collect(tree.root, 0) is tree.root

    def test_custom(self, tree, adapter):
        collector = CustomCollector(adapter, lambda node, depth: f"{node.key}@{depth}")
        assert collector.collect(tree.root, 0) == "d@0"


class TestStructuralCollectors:

    def test_child_count(self, tree, adapter):
        collector = ChildCountCollector(adapter)

        assert collector.collect(tree.root, 0) == {
            'key': "d", 'depth': 0, 'child_count': 2, 'is_leaf': False
        }
        b = tree.root.find_node("b")
        assert collector.collect(b, 1)['child_count'] == 1
        c = tree.root.find_node("c")
        assert collector.collect(c, 2)['is_leaf'] is True

    def test_path_from_root(self, tree, adapter):
        c = tree.root.find_node("c")
        assert PathCollector(adapter).collect(c, 2) == ["d", "b", "c"]
        assert PathCollector(adapter).collect(tree.root, 0) == ["d"]

    def test_path_through_parent_lookups(self, tree):
        class ParentOnlyAdapter(TreeAdapter):
            """Adapter without get_path, forcing parent-by-parent walks."""

            def __init__(self, inner):
                self.inner = inner

            def get_children(self, node):
                return self.inner.get_children(node)

            def get_parent(self, node):
                return self.inner.get_parent(node)

        c = tree.root.find_node("c")
        collector = PathCollector(ParentOnlyAdapter(SearchTreeAdapter(tree)))
        assert collector.collect(c, 2) == ["d", "b", "c"]
