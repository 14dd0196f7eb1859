"""Execution planning for BinTreeLib.

The ExecutionPlan validates a TraversalConfig up front and assembles the
traverser and collector that carry it out.
"""

import logging
from typing import Any, Dict, Iterator, Tuple

from .config import DataRequirement, TraversalConfig, TraversalStrategy
from .core.adapter import TreeAdapter
from .core.collector import (
    ChildCountCollector,
    DataCollector,
    FullNodeCollector,
    ItemCollector,
    KeyCollector,
    PathCollector,
    PayloadCollector,
)
from .core.node import Node
from .core.traverser import TreeTraverser, create_traverser
from .errors import ConfigurationError

logger = logging.getLogger(__name__)


class ExecutionPlan:
    """Validated execution plan for a traversal.

    Bridges user intent (TraversalConfig) and execution: the configuration
    is checked before any node is visited, then the matching traverser and
    collector are selected.
    """

    def __init__(self, config: TraversalConfig, adapter: TreeAdapter):
        """Create and validate an execution plan.

        Args:
            config: Traversal configuration
            adapter: Adapter for the tree being walked

        Raises:
            ConfigurationError: If the configuration is invalid
        """
        self.config = config
        self.adapter = adapter

        problems = config.validate()
        if problems:
            raise ConfigurationError(problems)

        self.traverser = self._select_traverser()
        self.collector = self._select_collector()

        self.nodes_processed = 0

    def _select_traverser(self) -> TreeTraverser:
        if self.config.strategy == TraversalStrategy.CUSTOM:
            return self.config.custom_traverser
        return create_traverser(self.config.strategy.value, self.adapter)

    def _select_collector(self) -> DataCollector:
        if self.config.data_requirements == DataRequirement.CUSTOM:
            return self.config.custom_collector

        collector_map = {
            DataRequirement.KEY: KeyCollector,
            DataRequirement.PAYLOAD: PayloadCollector,
            DataRequirement.ITEM: ItemCollector,
            DataRequirement.FULL_NODE: FullNodeCollector,
            DataRequirement.PATH: PathCollector,
            DataRequirement.CHILDREN_COUNT: ChildCountCollector,
        }

        collector_class = collector_map[self.config.data_requirements]
        return collector_class(self.adapter)

    def execute(self, root: Node) -> Iterator[Tuple[Node, Any]]:
        """Execute the traversal plan.

        Args:
            root: Root node to start traversal from

        Yields:
            Tuples of (node, collected_data)
        """
        self.nodes_processed = 0
        logger.debug("Executing plan: %s", self.get_summary())

        for node, depth in self.traverser.traverse(root, max_depth=self.config.depth.limit):
            if not self.config.depth.should_yield(depth):
                continue
            if not self.config.filter.should_include(node):
                continue

            yield (node, self.collector.collect(node, depth))

            self.nodes_processed += 1
            if self.config.max_nodes is not None and self.nodes_processed >= self.config.max_nodes:
                logger.debug("Node limit %d reached, stopping", self.config.max_nodes)
                return

    def get_summary(self) -> Dict[str, Any]:
        """Get summary of execution plan.

        Returns:
            Dictionary with plan details
        """
        return {
            'strategy': self.config.strategy.value,
            'data_requirements': self.config.data_requirements.value,
            'max_depth': self.config.depth.max_depth,
            'min_depth': self.config.depth.min_depth,
            'max_nodes': self.config.max_nodes,
            'adapter': self.adapter.__class__.__name__,
            'traverser': self.traverser.__class__.__name__,
            'collector': self.collector.__class__.__name__,
        }
