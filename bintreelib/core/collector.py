"""Data collection strategies for BinTreeLib.

DataCollectors define what information to extract from nodes during
traversal, so the same walk can produce keys, payloads, items or any
custom value.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, List, Tuple

from .adapter import TreeAdapter
from .node import Node


class DataCollector(ABC):
    """Abstract base class for data collection strategies."""

    def __init__(self, adapter: TreeAdapter):
        """Initialize collector with an adapter.

        Args:
            adapter: TreeAdapter for additional node operations
        """
        self.adapter = adapter

    @abstractmethod
    def collect(self, node: Node, depth: int) -> Any:
        """Collect data from a node.

        Args:
            node: The node to collect data from
            depth: Current depth in traversal

        Returns:
            Collected data (type depends on collector)
        """
        pass


class KeyCollector(DataCollector):
    """Collects node keys."""

    def collect(self, node: Node, depth: int) -> Any:
        return node.key


class PayloadCollector(DataCollector):
    """Collects node payloads."""

    def collect(self, node: Node, depth: int) -> Any:
        return node.payload


class ItemCollector(DataCollector):
    """Collects ``(key, payload)`` tuples, like ``dict.items()``."""

    def collect(self, node: Node, depth: int) -> Tuple[Any, Any]:
        return (node.key, node.payload)


class FullNodeCollector(DataCollector):
    """Collects complete node objects."""

    def collect(self, node: Node, depth: int) -> Node:
        return node


class ChildCountCollector(DataCollector):
    """Collects node info with child count.

    Useful for shape analysis: leaves have 0 children, half-leaves 1,
    inner nodes 2.
    """

    def collect(self, node: Node, depth: int) -> Dict[str, Any]:
        child_count = sum(1 for _ in self.adapter.get_children(node))
        return {
            'key': node.key,
            'depth': depth,
            'child_count': child_count,
            'is_leaf': child_count == 0,
        }


class PathCollector(DataCollector):
    """Collects the keys on the path from the root down to each node.

    Nodes keep no parent links, so the path is rebuilt by descending from
    the root through the adapter.
    """

    def collect(self, node: Node, depth: int) -> List[Any]:
        if hasattr(self.adapter, 'get_path'):
            return [n.key for n in self.adapter.get_path(node)]

        path = [node.key]
        current = self.adapter.get_parent(node)
        while current is not None:
            path.append(current.key)
            current = self.adapter.get_parent(current)
        path.reverse()
        return path


class CustomCollector(DataCollector):
    """Collects data using a user-provided function.

    Example:
        collector = CustomCollector(adapter, lambda node, depth: len(node.key))
    """

    def __init__(self, adapter: TreeAdapter,
                 collect_func: Callable[[Node, int], Any]):
        super().__init__(adapter)
        self.collect_func = collect_func

    def collect(self, node: Node, depth: int) -> Any:
        return self.collect_func(node, depth)
