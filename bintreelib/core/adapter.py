"""TreeAdapter abstraction for BinTreeLib.

Nodes only know their children. The adapter supplies everything else the
traversal framework needs (ordered children, parent lookups, depth) so
that traversers and collectors never reach into node internals.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Iterator, Optional

from .compare import LESS
from .node import Node

if TYPE_CHECKING:
    from ..tree import Tree


class TreeAdapter(ABC):
    """Abstract adapter for navigating a tree structure."""

    @abstractmethod
    def get_children(self, node: Node) -> Iterator[Node]:
        """Get an iterator of child nodes, left to right.

        Args:
            node: The parent node

        Returns:
            Iterator yielding the existing children
        """
        pass

    @abstractmethod
    def get_parent(self, node: Node) -> Optional[Node]:
        """Get the parent node of the given node.

        Args:
            node: The child node

        Returns:
            Parent Node or None if node is the root
        """
        pass

    def get_depth(self, node: Node) -> int:
        """Calculate the depth of a node in the tree.

        Default implementation walks up to root.
        Adapters can override for more efficient implementations.

        Args:
            node: The node to get depth for

        Returns:
            Depth where root = 0
        """
        depth = 0
        current = node
        while True:
            parent = self.get_parent(current)
            if parent is None:
                break
            depth += 1
            current = parent
        return depth

    def get_siblings(self, node: Node) -> Iterator[Node]:
        """Get siblings of the given node (excluding the node itself)."""
        parent = self.get_parent(node)
        if parent is None:
            return iter([])  # Root has no siblings
        return (child for child in self.get_children(parent) if child is not node)


class SearchTreeAdapter(TreeAdapter):
    """Adapter for navigating a binary search Tree.

    Nodes hold no parent references, so parents and depths are
    reconstructed by descending from the root along the node's key.
    """

    def __init__(self, tree: "Tree"):
        self.tree = tree

    def get_children(self, node: Node) -> Iterator[Node]:
        if node.left is not None:
            yield node.left
        if node.right is not None:
            yield node.right

    def get_left(self, node: Node) -> Optional[Node]:
        return node.left

    def get_right(self, node: Node) -> Optional[Node]:
        return node.right

    def _descend(self, node: Node):
        """Yield ``(current, parent)`` pairs along the root-to-node path.

        Raises:
            ValueError: If ``node`` is not part of the tree
        """
        compare = self.tree.compare
        parent = None
        current = self.tree.root
        while current is not None:
            yield current, parent
            if current is node:
                return
            parent = current
            current = current.left if compare(node.key, current.key) == LESS else current.right
        raise ValueError(f"Node {node.key!r} is not in this tree")

    def get_parent(self, node: Node) -> Optional[Node]:
        parent = None
        for _, parent in self._descend(node):
            pass
        return parent

    def get_depth(self, node: Node) -> int:
        """Depth found in a single descent instead of repeated parent lookups."""
        return sum(1 for _ in self._descend(node)) - 1

    def get_path(self, node: Node):
        """Return the nodes from the root down to ``node``, inclusive."""
        return [current for current, _ in self._descend(node)]
