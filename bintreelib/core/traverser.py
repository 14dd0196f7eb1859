"""Tree traversal strategies for BinTreeLib.

Traversers implement different orders for walking a tree. They navigate
only through a TreeAdapter and use explicit stacks or queues, so an
unbalanced tree degenerated into a long chain is walked without deep
recursion.
"""

from abc import ABC, abstractmethod
from collections import deque
from typing import Deque, Iterator, List, Optional, Tuple

from .adapter import TreeAdapter
from .node import Node


class TreeTraverser(ABC):
    """Abstract base class for tree traversal strategies."""

    def __init__(self, adapter: TreeAdapter):
        """Initialize traverser with an adapter.

        Args:
            adapter: TreeAdapter for navigating the tree
        """
        self.adapter = adapter

    @abstractmethod
    def traverse(self,
                 root: Node,
                 max_depth: Optional[int] = None) -> Iterator[Tuple[Node, int]]:
        """Traverse the tree starting from root.

        Each call starts a fresh, single-pass walk.

        Args:
            root: Starting node for traversal
            max_depth: Deepest level to visit (None = unlimited)

        Yields:
            Tuples of (node, depth) where depth is relative to root
        """
        pass

    def _should_explore(self, depth: int, max_depth: Optional[int]) -> bool:
        """Check if children of a node at ``depth`` are within range."""
        if max_depth is None:
            return True
        return depth < max_depth


class InOrderTraverser(TreeTraverser):
    """In-order traversal: left subtree, node, right subtree.

    On a binary search tree this visits keys in ascending order. Needs an
    adapter that tells left from right (``get_left``/``get_right``), such
    as SearchTreeAdapter.
    """

    def traverse(self,
                 root: Node,
                 max_depth: Optional[int] = None) -> Iterator[Tuple[Node, int]]:
        stack: List[Tuple[Node, int]] = []
        node: Optional[Node] = root
        depth = 0

        while stack or node is not None:
            # Walk as far left as allowed, remembering the way back
            while node is not None:
                stack.append((node, depth))
                if not self._should_explore(depth, max_depth):
                    node = None
                    break
                node = self.adapter.get_left(node)
                depth += 1

            node, depth = stack.pop()
            yield (node, depth)

            if self._should_explore(depth, max_depth):
                node = self.adapter.get_right(node)
                depth += 1
            else:
                node = None


class DepthFirstPreOrderTraverser(TreeTraverser):
    """Depth-first pre-order traversal: parent before children.

    Good for copying a tree: re-inserting keys in this order rebuilds
    the same shape.
    """

    def traverse(self,
                 root: Node,
                 max_depth: Optional[int] = None) -> Iterator[Tuple[Node, int]]:
        stack: List[Tuple[Node, int]] = [(root, 0)]

        while stack:
            node, depth = stack.pop()
            yield (node, depth)

            if self._should_explore(depth, max_depth):
                # Reversed so the left child is popped first
                children = list(self.adapter.get_children(node))
                for child in reversed(children):
                    stack.append((child, depth + 1))


class DepthFirstPostOrderTraverser(TreeTraverser):
    """Depth-first post-order traversal: children before parent.

    Good for releasing a tree bottom-up or aggregating subtree values.
    """

    def traverse(self,
                 root: Node,
                 max_depth: Optional[int] = None) -> Iterator[Tuple[Node, int]]:
        # Second element marks whether the node's children are done
        stack: List[Tuple[Node, int, bool]] = [(root, 0, False)]

        while stack:
            node, depth, expanded = stack.pop()
            if expanded:
                yield (node, depth)
                continue

            stack.append((node, depth, True))
            if self._should_explore(depth, max_depth):
                children = list(self.adapter.get_children(node))
                for child in reversed(children):
                    stack.append((child, depth + 1, False))


class BreadthFirstTraverser(TreeTraverser):
    """Breadth-first (level-order) traversal strategy.

    Visits all nodes at depth N before visiting nodes at depth N+1.
    """

    def traverse(self,
                 root: Node,
                 max_depth: Optional[int] = None) -> Iterator[Tuple[Node, int]]:
        queue: Deque[Tuple[Node, int]] = deque([(root, 0)])

        while queue:
            node, depth = queue.popleft()
            yield (node, depth)

            if self._should_explore(depth, max_depth):
                for child in self.adapter.get_children(node):
                    queue.append((child, depth + 1))


TRAVERSERS = {
    'in_order': InOrderTraverser,
    'pre_order': DepthFirstPreOrderTraverser,
    'post_order': DepthFirstPostOrderTraverser,
    'breadth_first': BreadthFirstTraverser,
}

# Short names accepted wherever a strategy is named by string
STRATEGY_ALIASES = {'bfs': 'breadth_first'}


def canonical_strategy_name(strategy: str) -> str:
    """Normalize case and resolve aliases; unknown names pass through."""
    name = strategy.lower()
    return STRATEGY_ALIASES.get(name, name)


# Factory function for creating traversers by name
def create_traverser(strategy: str, adapter: TreeAdapter) -> TreeTraverser:
    """Create a traverser instance by strategy name.

    Args:
        strategy: Name of traversal strategy (in_order, pre_order,
            post_order, breadth_first or bfs)
        adapter: TreeAdapter for the tree structure

    Returns:
        TreeTraverser instance

    Raises:
        ValueError: If strategy name is not recognized
    """
    name = canonical_strategy_name(strategy)
    if name not in TRAVERSERS:
        raise ValueError(
            f"Unknown traversal strategy: {strategy}. "
            f"Choose from: {', '.join(TRAVERSERS)}"
        )

    return TRAVERSERS[name](adapter)
