"""BinTreeLib - Unbalanced Binary Search Tree.

BinTreeLib stores string-keyed records in an unbalanced binary search tree
and walks them with a small, pluggable traversal framework.

Quick start:
━━━━━━━━━━━━━━━━━━━━━━━━━━
    from bintreelib import Tree

    tree = Tree()
    tree.insert("delta")
    tree.insert("alpha", "first letter")
    tree.find("alpha")        # ('first letter', True)
    tree.delete("delta")
━━━━━━━━━━━━━━━━━━━━━━━━━━
"""

import logging

__version__ = "0.1.0"

from .errors import (
    TreeError,
    EmptyTreeError,
    KeyNotFoundError,
    InvalidOperationError,
    ConfigurationError,
)
from .config import (
    TreeConfig,
    DuplicatePolicy,
    TraversalConfig,
    TraversalStrategy,
    DataRequirement,
    DepthConfig,
    FilterConfig,
)
from .core import (
    Node,
    TreeAdapter,
    SearchTreeAdapter,
    InOrderTraverser,
    DepthFirstPreOrderTraverser,
    DepthFirstPostOrderTraverser,
    BreadthFirstTraverser,
    create_traverser,
    DataCollector,
    KeyCollector,
    PayloadCollector,
    ItemCollector,
    FullNodeCollector,
    ChildCountCollector,
    PathCollector,
    CustomCollector,
)
from .tree import Tree
from .planning import ExecutionPlan
from .api import (
    build_tree,
    traverse_tree,
    collect_tree_data,
    count_nodes,
    find_nodes,
    get_leaf_nodes,
    get_tree_stats,
    is_search_tree,
)

# Library logging stays silent unless the application configures it
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    # Errors
    "TreeError",
    "EmptyTreeError",
    "KeyNotFoundError",
    "InvalidOperationError",
    "ConfigurationError",
    # Config
    "TreeConfig",
    "DuplicatePolicy",
    "TraversalConfig",
    "TraversalStrategy",
    "DataRequirement",
    "DepthConfig",
    "FilterConfig",
    # Core
    "Node",
    "Tree",
    "TreeAdapter",
    "SearchTreeAdapter",
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
    "ExecutionPlan",
    # API
    "build_tree",
    "traverse_tree",
    "collect_tree_data",
    "count_nodes",
    "find_nodes",
    "get_leaf_nodes",
    "get_tree_stats",
    "is_search_tree",
]
