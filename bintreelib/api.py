"""High-level API for BinTreeLib.

Simple, functional interfaces for common tree operations. These wrap the
Tree, ExecutionPlan and adapter classes for the common cases.
"""

from typing import Any, Callable, Dict, Iterable, Iterator, Optional, Tuple, Union

from .config import DataRequirement, TraversalConfig, TraversalStrategy, TreeConfig
from .core.adapter import SearchTreeAdapter
from .core.compare import LESS, natural_compare
from .core.node import Node
from .core.traverser import TRAVERSERS, canonical_strategy_name
from .planning import ExecutionPlan
from .tree import Tree


def build_tree(items: Iterable[Union[Any, Tuple[Any, Any]]],
               config: Optional[TreeConfig] = None) -> Tree:
    """Build a tree by inserting ``items`` in order.

    Args:
        items: ``(key, payload)`` pairs, or bare keys used as their own payload
        config: Tree configuration

    Returns:
        The populated Tree

    Example:
        >>> tree = build_tree([("b", "bravo"), ("a", "alpha")])
        >>> tree.find("a")
        ('alpha', True)
    """
    tree = Tree(config)
    for item in items:
        if isinstance(item, tuple):
            key, payload = item
            tree.insert(key, payload)
        else:
            tree.insert(item)
    return tree


def traverse_tree(
    tree: Tree,
    strategy: Union[TraversalStrategy, str] = TraversalStrategy.IN_ORDER,
    max_depth: Optional[int] = None,
    min_depth: int = 0,
    include_filter: Optional[Callable[[Node], bool]] = None,
    exclude_filter: Optional[Callable[[Node], bool]] = None,
    **kwargs
) -> Iterator[Node]:
    """Simple interface for tree traversal.

    Args:
        tree: Tree to walk
        strategy: Traversal strategy (in_order, pre_order, post_order, breadth_first)
        max_depth: Maximum depth to traverse
        min_depth: Minimum depth before yielding nodes
        include_filter: Function to determine if node should be included
        exclude_filter: Function to determine if node should be excluded
        **kwargs: Additional TraversalConfig options (e.g. max_nodes)

    Yields:
        Nodes that match the criteria

    Example:
        >>> tree = build_tree(["delta", "bravo", "echo"])
        >>> [n.key for n in traverse_tree(tree)]
        ['bravo', 'delta', 'echo']
    """
    for node, _ in collect_tree_data(
        tree,
        data_requirement=DataRequirement.FULL_NODE,
        strategy=strategy,
        max_depth=max_depth,
        min_depth=min_depth,
        include_filter=include_filter,
        exclude_filter=exclude_filter,
        **kwargs
    ):
        yield node


def collect_tree_data(
    tree: Tree,
    data_requirement: DataRequirement = DataRequirement.ITEM,
    **kwargs
) -> Iterator[Tuple[Node, Any]]:
    """Traverse a tree and collect the requested data from each node.

    Args:
        tree: Tree to walk
        data_requirement: What data to collect
        **kwargs: Traversal options (see traverse_tree)

    Yields:
        Tuples of (node, collected_data)

    Example:
        >>> tree = build_tree([("b", 2), ("a", 1)])
        >>> [data for _, data in collect_tree_data(tree)]
        [('a', 1), ('b', 2)]
    """
    config_kwargs = kwargs.copy()
    config_kwargs['data_requirement'] = data_requirement
    config = _build_config_from_kwargs(**config_kwargs)

    plan = ExecutionPlan(config, SearchTreeAdapter(tree))
    if tree.root is None:
        return
    yield from plan.execute(tree.root)


def count_nodes(tree: Tree, **kwargs) -> int:
    """Count nodes in a tree that match criteria.

    Without criteria this walks the whole tree, so it also serves as a
    cross-check of ``len(tree)``.
    """
    count = 0
    for _ in traverse_tree(tree, **kwargs):
        count += 1
    return count


def find_nodes(tree: Tree, predicate: Callable[[Node], bool],
               **kwargs) -> Iterator[Node]:
    """Find nodes that match a predicate, in ascending key order by default.

    Example:
        >>> tree = build_tree(["alpha", "bravo", "apple"])
        >>> [n.key for n in find_nodes(tree, lambda n: n.key.startswith("a"))]
        ['alpha', 'apple']
    """
    kwargs['include_filter'] = predicate
    yield from traverse_tree(tree, **kwargs)


def get_leaf_nodes(tree: Tree, **kwargs) -> Iterator[Node]:
    """Get all leaf nodes in a tree."""
    for node in traverse_tree(tree, **kwargs):
        if node.is_leaf():
            yield node


def get_tree_stats(tree: Tree) -> Dict[str, Any]:
    """Get statistics about a tree's shape.

    Returns:
        Dictionary with total_nodes, leaf_nodes, half_leaf_nodes,
        inner_nodes, height, depths (node count per depth), min_key
        and max_key
    """
    stats = {
        'total_nodes': 0,
        'leaf_nodes': 0,
        'half_leaf_nodes': 0,
        'inner_nodes': 0,
        'height': 0,
        'depths': {},
        'min_key': None,
        'max_key': None,
    }

    for node, info in collect_tree_data(
        tree,
        data_requirement=DataRequirement.CHILDREN_COUNT,
        strategy=TraversalStrategy.BREADTH_FIRST
    ):
        stats['total_nodes'] += 1

        child_count = info['child_count']
        if child_count == 0:
            stats['leaf_nodes'] += 1
        elif child_count == 1:
            stats['half_leaf_nodes'] += 1
        else:
            stats['inner_nodes'] += 1

        depth = info['depth']
        stats['height'] = max(stats['height'], depth + 1)
        stats['depths'][depth] = stats['depths'].get(depth, 0) + 1

    if tree:
        stats['min_key'] = tree.min_key()
        stats['max_key'] = tree.max_key()

    return stats


def is_search_tree(tree_or_node: Union[Tree, Node, None],
                   compare: Optional[Callable[[Any, Any], int]] = None) -> bool:
    """Check the ordering invariant: in-order keys are strictly ascending.

    Args:
        tree_or_node: A Tree, or the root Node of a bare subtree
        compare: Three-way comparison (defaults to the tree's own, or
            natural ordering for a bare node)

    Example:
        >>> from bintreelib.testing import node_from_shape
        >>> is_search_tree(node_from_shape(("b", ("a", None, None), ("c", None, None))))
        True
        >>> is_search_tree(node_from_shape(("b", ("c", None, None), None)))
        False
    """
    if isinstance(tree_or_node, Tree):
        nodes = tree_or_node.in_order()
        compare = compare or tree_or_node.compare
    else:
        # A detached walker; in_order only follows child links
        nodes = Tree().in_order(tree_or_node)
        compare = compare or natural_compare

    previous = None
    first = True
    for node in nodes:
        if not first and compare(previous, node.key) != LESS:
            return False
        previous = node.key
        first = False
    return True


# Helper functions

def _parse_strategy(strategy: Union[TraversalStrategy, str]) -> TraversalStrategy:
    """Parse strategy from string or enum.

    Raises:
        ValueError: If the strategy name is not recognized
    """
    if isinstance(strategy, TraversalStrategy):
        return strategy

    name = canonical_strategy_name(str(strategy))
    if name not in TRAVERSERS:
        raise ValueError(f"Unknown traversal strategy: {strategy}")
    return TraversalStrategy(name)


def _build_config_from_kwargs(**kwargs) -> TraversalConfig:
    """Build TraversalConfig from keyword arguments."""
    config = TraversalConfig()

    if 'strategy' in kwargs:
        config.strategy = _parse_strategy(kwargs.pop('strategy'))

    if 'max_depth' in kwargs:
        config.depth.max_depth = kwargs.pop('max_depth')

    if 'min_depth' in kwargs:
        config.depth.min_depth = kwargs.pop('min_depth')

    if 'include_filter' in kwargs:
        config.filter.include_filter = kwargs.pop('include_filter')

    if 'exclude_filter' in kwargs:
        config.filter.exclude_filter = kwargs.pop('exclude_filter')

    if 'data_requirement' in kwargs:
        config.data_requirements = kwargs.pop('data_requirement')

    # Apply any remaining kwargs directly
    for key, value in kwargs.items():
        if hasattr(config, key):
            setattr(config, key, value)

    return config
