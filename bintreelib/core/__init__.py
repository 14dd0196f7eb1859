"""Core building blocks for BinTreeLib.

This package contains the search tree node, key comparison, and the
adapter/traverser/collector abstractions the traversal framework is
built on.
"""

from .compare import LESS, EQUAL, GREATER, make_comparer, natural_compare
from .node import Node, insert_into, find_in, delete_from
from .adapter import TreeAdapter, SearchTreeAdapter
from .traverser import (
    TreeTraverser,
    InOrderTraverser,
    DepthFirstPreOrderTraverser,
    DepthFirstPostOrderTraverser,
    BreadthFirstTraverser,
    create_traverser,
)
from .collector import (
    DataCollector,
    KeyCollector,
    PayloadCollector,
    ItemCollector,
    FullNodeCollector,
    ChildCountCollector,
    PathCollector,
    CustomCollector,
)

__all__ = [
    "LESS",
    "EQUAL",
    "GREATER",
    "make_comparer",
    "natural_compare",
    "Node",
    "insert_into",
    "find_in",
    "delete_from",
    "TreeAdapter",
    "SearchTreeAdapter",
    "TreeTraverser",
    "InOrderTraverser",
    "DepthFirstPreOrderTraverser",
    "DepthFirstPostOrderTraverser",
    "BreadthFirstTraverser",
    "create_traverser",
    "DataCollector",
    "KeyCollector",
    "PayloadCollector",
    "ItemCollector",
    "FullNodeCollector",
    "ChildCountCollector",
    "PathCollector",
    "CustomCollector",
]
