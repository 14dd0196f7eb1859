"""Node of an unbalanced binary search tree.

A Node owns at most two children and never stores a reference to its
parent. Operations that must rewrite a parent's child pointer (deletion)
receive the parent as an argument and carry it down the descent loop.

All descents are loops rather than recursion: the tree is unbalanced and
degenerates into a linear chain under sorted insertion, so recursion depth
would grow with the number of keys.
"""

import logging
from typing import Any, Dict, Optional, Tuple

from ..errors import InvalidOperationError, KeyNotFoundError
from .compare import EQUAL, LESS, Comparer, natural_compare

logger = logging.getLogger(__name__)


class Node:
    """A single vertex of the search tree.

    Every key in ``left`` is strictly less than ``key`` and every key in
    ``right`` is strictly greater.
    """

    __slots__ = ("key", "payload", "left", "right")

    def __init__(self, key: Any, payload: Any = None,
                 left: Optional["Node"] = None,
                 right: Optional["Node"] = None):
        self.key = key
        self.payload = payload
        self.left = left
        self.right = right

    # Node protocol used by adapters, traversers and collectors

    def identifier(self) -> str:
        """Return the key as a string; keys are unique within a tree."""
        return str(self.key)

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def child_count(self) -> int:
        return (self.left is not None) + (self.right is not None)

    def metadata(self) -> Dict[str, Any]:
        """Return lightweight information about this node."""
        return {
            'key': self.key,
            'payload': self.payload,
            'child_count': self.child_count(),
            'is_leaf': self.is_leaf(),
        }

    # Search tree operations

    def insert(self, key: Any, payload: Any,
               compare: Comparer = natural_compare,
               replace: bool = False) -> bool:
        """Insert ``key`` below this node.

        An existing key is left untouched unless ``replace`` is set, in
        which case only its payload is overwritten.

        Args:
            key: Key to insert
            payload: Value stored with the key
            compare: Three-way key comparison
            replace: Overwrite the payload of an existing key

        Returns:
            True if a new node was created, False if the key existed
        """
        node = self
        while True:
            result = compare(key, node.key)
            if result == EQUAL:
                if replace:
                    node.payload = payload
                    logger.debug("Replaced payload of key %r", node.key)
                else:
                    logger.debug("Key %r already present, insert skipped", key)
                return False

            if result == LESS:
                if node.left is None:
                    node.left = Node(key, payload)
                    return True
                node = node.left
            else:
                if node.right is None:
                    node.right = Node(key, payload)
                    return True
                node = node.right

    def find_node(self, key: Any,
                  compare: Comparer = natural_compare) -> Optional["Node"]:
        """Return the node holding ``key`` in this subtree, or None."""
        node = self
        while node is not None:
            result = compare(key, node.key)
            if result == EQUAL:
                return node
            node = node.left if result == LESS else node.right
        return None

    def find(self, key: Any,
             compare: Comparer = natural_compare) -> Tuple[Any, bool]:
        """Look up ``key`` in this subtree.

        Returns:
            ``(payload, True)`` if found, ``(None, False)`` otherwise
        """
        node = self.find_node(key, compare)
        if node is None:
            return None, False
        return node.payload, True

    def delete(self, key: Any, parent: Optional["Node"],
               compare: Comparer = natural_compare) -> None:
        """Remove the node holding ``key`` from this subtree.

        Args:
            key: Key to delete
            parent: The node whose child pointer references ``self``
            compare: Three-way key comparison

        Raises:
            KeyNotFoundError: If ``key`` is not in this subtree
            InvalidOperationError: If a splice is needed and ``parent``
                does not reference the target node
        """
        node = self
        while True:
            result = compare(key, node.key)
            if result == EQUAL:
                break
            parent = node
            node = node.left if result == LESS else node.right
            if node is None:
                logger.debug("Key %r not found, nothing deleted", key)
                raise KeyNotFoundError(key)

        if node.left is None and node.right is None:
            logger.debug("Deleting leaf %r", node.key)
            node._replace_node(parent, None)
            return

        if node.left is None:
            logger.debug("Deleting half-leaf %r", node.key)
            node._replace_node(parent, node.right)
            return
        if node.right is None:
            logger.debug("Deleting half-leaf %r", node.key)
            node._replace_node(parent, node.left)
            return

        # Inner node: take over the predecessor's key and payload, then
        # remove the predecessor. It has no right child, so that delete
        # always ends in one of the cases above.
        predecessor, predecessor_parent = node.left._find_max(node)
        logger.debug("Deleting inner node %r, predecessor %r",
                     node.key, predecessor.key)
        node.key = predecessor.key
        node.payload = predecessor.payload
        predecessor.delete(predecessor.key, predecessor_parent, compare)

    def _find_max(self, parent: Optional["Node"]) -> Tuple["Node", Optional["Node"]]:
        """Return the right-most node of this subtree and its parent."""
        node = self
        while node.right is not None:
            parent = node
            node = node.right
        return node, parent

    def _replace_node(self, parent: Optional["Node"],
                      replacement: Optional["Node"]) -> None:
        """Point whichever child pointer of ``parent`` holds ``self`` at ``replacement``."""
        if parent is None:
            raise InvalidOperationError(
                f"Cannot splice node {self.key!r}: no parent given"
            )
        if parent.left is self:
            parent.left = replacement
        elif parent.right is self:
            parent.right = replacement
        else:
            raise InvalidOperationError(
                f"Node {parent.key!r} is not the parent of node {self.key!r}"
            )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(key={self.key!r}, payload={self.payload!r})"

    def __eq__(self, other: object) -> bool:
        """Nodes are equal if their keys, payloads and subtrees are equal."""
        if not isinstance(other, Node):
            return NotImplemented
        stack = [(self, other)]
        while stack:
            a, b = stack.pop()
            if a is None or b is None:
                if a is not b:
                    return False
                continue
            if a.key != b.key or a.payload != b.payload:
                return False
            stack.append((a.left, b.left))
            stack.append((a.right, b.right))
        return True

    __hash__ = None


def insert_into(node: Optional[Node], key: Any, payload: Any,
                compare: Comparer = natural_compare,
                replace: bool = False) -> bool:
    """Insert into the subtree at ``node``; the subtree must exist.

    Raises:
        InvalidOperationError: If ``node`` is None
    """
    if node is None:
        raise InvalidOperationError("Cannot insert a value into an absent node")
    return node.insert(key, payload, compare, replace)


def find_in(node: Optional[Node], key: Any,
            compare: Comparer = natural_compare) -> Tuple[Any, bool]:
    """Look up ``key`` in the subtree at ``node``; an absent subtree finds nothing."""
    if node is None:
        return None, False
    return node.find(key, compare)


def delete_from(node: Optional[Node], key: Any, parent: Optional[Node],
                compare: Comparer = natural_compare) -> None:
    """Delete ``key`` from the subtree at ``node``; the subtree must exist.

    Raises:
        InvalidOperationError: If ``node`` is None
    """
    if node is None:
        raise InvalidOperationError("Cannot delete from an absent node")
    node.delete(key, parent, compare)
