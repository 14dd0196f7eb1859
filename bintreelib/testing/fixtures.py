"""Test fixtures for BinTreeLib consumers.

These helpers build trees with an exact shape and read shapes back, so
tests can assert on structure rather than only on traversal output.
"""

from typing import Any, Optional, Tuple

from ..api import count_nodes, is_search_tree
from ..config import TreeConfig
from ..core.node import Node
from ..tree import Tree

# (key, left_shape, right_shape), or None for an absent subtree
Shape = Optional[Tuple[Any, Any, Any]]


def node_from_shape(shape: Shape) -> Optional[Node]:
    """Build nodes from a nested ``(key, left, right)`` shape.

    Every payload equals its key. The shape is trusted as-is, so this can
    also build trees that violate the ordering invariant.
    """
    if shape is None:
        return None
    key, left, right = shape
    return Node(key, key, node_from_shape(left), node_from_shape(right))


def shape_of(node: Optional[Node]) -> Shape:
    """Return the nested ``(key, left, right)`` shape of a subtree."""
    if node is None:
        return None
    return (node.key, shape_of(node.left), shape_of(node.right))


class TreeTestHelper:
    """Public test fixture for structural assertions on a Tree.

    Example:
        helper = TreeTestHelper.from_shape(("b", ("a", None, None), ("c", None, None)))
        helper.tree.delete("b")
        assert helper.shape() == ("a", None, ("c", None, None))
    """

    def __init__(self, tree: Tree):
        self.tree = tree

    @classmethod
    def from_shape(cls, shape: Shape,
                   config: Optional[TreeConfig] = None) -> 'TreeTestHelper':
        """Create a helper around a tree with exactly the given shape."""
        tree = Tree(config)
        tree.root = node_from_shape(shape)
        tree._size = count_nodes(tree)
        return cls(tree)

    def shape(self) -> Shape:
        return shape_of(self.tree.root)

    def keys(self):
        return self.tree.keys()

    def assert_consistent(self) -> None:
        """Assert the ordering invariant holds and the size is accurate."""
        assert is_search_tree(self.tree), f"Keys out of order: {self.tree.keys()}"
        actual = count_nodes(self.tree)
        assert len(self.tree) == actual, (
            f"Tree reports {len(self.tree)} nodes but holds {actual}"
        )
