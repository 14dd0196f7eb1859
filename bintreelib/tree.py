"""The Tree wrapper: owns the root and guards the empty-tree cases.

Tree is the public entry point. Every operation either short-circuits on
an empty tree or delegates to the matching Node operation.
"""

import logging
from typing import Any, Callable, Iterator, List, Optional, Tuple

from .config import DuplicatePolicy, TreeConfig
from .core.adapter import SearchTreeAdapter
from .core.compare import make_comparer
from .core.node import Node
from .core.traverser import InOrderTraverser
from .errors import ConfigurationError, EmptyTreeError

logger = logging.getLogger(__name__)

# Default for the optional ``node`` argument; an explicit None is an empty subtree
_ROOT = object()


class Tree:
    """An unbalanced binary search tree of key/payload records.

    Not thread-safe: callers sharing a Tree between threads must hold a
    lock around every insert and delete.

    Example:
        >>> tree = Tree()
        >>> tree.insert("delta")
        True
        >>> tree.insert("bravo", "second")
        True
        >>> tree.insert("delta", "ignored")
        False
        >>> list(tree)
        ['bravo', 'delta']
        >>> tree.find("bravo")
        ('second', True)
    """

    def __init__(self, config: Optional[TreeConfig] = None):
        """Create an empty tree.

        Args:
            config: Tree configuration (defaults to TreeConfig())

        Raises:
            ConfigurationError: If the configuration is invalid
        """
        self.config = config if config is not None else TreeConfig()
        problems = self.config.validate()
        if problems:
            raise ConfigurationError(problems)

        self.root: Optional[Node] = None
        self._size = 0
        self._compare = make_comparer(self.config.key_func)

    @property
    def compare(self):
        """The three-way comparison this tree orders keys by."""
        return self._compare

    def insert(self, key: Any, payload: Any = None) -> bool:
        """Insert a record; the payload defaults to the key itself.

        Inserting an existing key is a no-op unless the tree was configured
        with DuplicatePolicy.REPLACE.

        Returns:
            True if the key was new, False otherwise
        """
        self.config.check_key(key)
        if payload is None:
            payload = key

        if self.root is None:
            self.root = Node(key, payload)
            created = True
        else:
            replace = self.config.duplicate_policy == DuplicatePolicy.REPLACE
            created = self.root.insert(key, payload, self._compare, replace)

        if created:
            self._size += 1
            logger.debug("Inserted key %r (size=%d)", key, self._size)
        return created

    def find(self, key: Any) -> Tuple[Any, bool]:
        """Look up a key.

        Returns:
            ``(payload, True)`` if present, ``(None, False)`` otherwise
        """
        self.config.check_key(key)
        if self.root is None:
            return None, False
        return self.root.find(key, self._compare)

    def get(self, key: Any, default: Any = None) -> Any:
        payload, found = self.find(key)
        return payload if found else default

    def delete(self, key: Any) -> None:
        """Remove a key from the tree.

        The root has no parent, so a transient sentinel node holds it as
        its right child for the duration of the call; afterwards the root
        is whatever the sentinel's right child has become.

        Raises:
            EmptyTreeError: If the tree is empty
            KeyNotFoundError: If the key is not in the tree
        """
        self.config.check_key(key)
        if self.root is None:
            raise EmptyTreeError("delete")

        sentinel = Node(None, right=self.root)
        self.root.delete(key, sentinel, self._compare)
        self.root = sentinel.right

        self._size -= 1
        logger.debug("Deleted key %r (size=%d)", key, self._size)

    def traverse(self, visit: Callable[[Node], Any], node: Any = _ROOT) -> None:
        """Apply ``visit`` to each node under ``node`` in ascending key order.

        Args:
            visit: Called once per node
            node: Subtree to walk (defaults to the root). None is an empty
                subtree, so nothing is visited.
        """
        for current in self.in_order(node):
            visit(current)

    def in_order(self, node: Any = _ROOT) -> Iterator[Node]:
        """Yield the nodes under ``node`` (default: root) in ascending key order."""
        start = self.root if node is _ROOT else node
        if start is None:
            return
        traverser = InOrderTraverser(SearchTreeAdapter(self))
        for current, _ in traverser.traverse(start):
            yield current

    def keys(self) -> List[Any]:
        return [node.key for node in self.in_order()]

    def payloads(self) -> List[Any]:
        return [node.payload for node in self.in_order()]

    def items(self) -> List[Tuple[Any, Any]]:
        return [(node.key, node.payload) for node in self.in_order()]

    def min_key(self) -> Any:
        """Return the smallest key.

        Raises:
            EmptyTreeError: If the tree is empty
        """
        if self.root is None:
            raise EmptyTreeError("take the minimum")
        node = self.root
        while node.left is not None:
            node = node.left
        return node.key

    def max_key(self) -> Any:
        """Return the largest key.

        Raises:
            EmptyTreeError: If the tree is empty
        """
        if self.root is None:
            raise EmptyTreeError("take the maximum")
        node, _ = self.root._find_max(None)
        return node.key

    def height(self) -> int:
        """Number of levels in the tree (0 when empty)."""
        height = 0
        level = [self.root] if self.root is not None else []
        while level:
            height += 1
            level = [child for node in level
                     for child in (node.left, node.right) if child is not None]
        return height

    def clear(self) -> None:
        self.root = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self.root is not None

    def __contains__(self, key: Any) -> bool:
        try:
            self.config.check_key(key)
        except TypeError:
            return False
        return self.find(key)[1]

    def __getitem__(self, key: Any) -> Any:
        payload, found = self.find(key)
        if not found:
            raise KeyError(key)
        return payload

    def __iter__(self) -> Iterator[Any]:
        for node in self.in_order():
            yield node.key

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(size={self._size})"
