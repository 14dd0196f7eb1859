"""Configuration system for BinTreeLib.

TreeConfig controls how a Tree orders and stores keys. TraversalConfig
controls how the traversal framework walks a tree: in which order, how
deep, which nodes to keep and what data to collect from each.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, List, Optional, Set


class DuplicatePolicy(Enum):
    """What inserting an existing key does."""
    IGNORE = "ignore"      # Keep the existing payload (default)
    REPLACE = "replace"    # Overwrite the existing payload (upsert)


@dataclass
class TreeConfig:
    """Configuration for a Tree."""

    duplicate_policy: DuplicatePolicy = DuplicatePolicy.IGNORE

    # Keys must be instances of this type; None accepts any orderable key
    key_type: Optional[type] = str

    # Keys are ordered by key_func(key) when set
    key_func: Optional[Callable[[Any], Any]] = None

    @classmethod
    def upsert(cls) -> 'TreeConfig':
        """Create config where inserting an existing key replaces its payload."""
        return cls(duplicate_policy=DuplicatePolicy.REPLACE)

    @classmethod
    def case_insensitive(cls) -> 'TreeConfig':
        """Create config ordering string keys without regard to case."""
        return cls(key_func=str.casefold)

    def check_key(self, key: Any) -> None:
        """Raise TypeError if ``key`` is not of the configured key type."""
        if self.key_type is not None and not isinstance(key, self.key_type):
            raise TypeError(
                f"Keys must be {self.key_type.__name__}, "
                f"got {type(key).__name__}: {key!r}"
            )

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not isinstance(self.duplicate_policy, DuplicatePolicy):
            errors.append("duplicate_policy must be a DuplicatePolicy")

        if self.key_type is not None and not isinstance(self.key_type, type):
            errors.append("key_type must be a type or None")

        if self.key_func is not None and not callable(self.key_func):
            errors.append("key_func must be callable")

        return errors


class TraversalStrategy(Enum):
    """Order in which nodes are visited."""
    IN_ORDER = "in_order"           # Left, node, right (ascending keys)
    PRE_ORDER = "pre_order"         # Node before children
    POST_ORDER = "post_order"       # Children before node
    BREADTH_FIRST = "breadth_first" # Level by level
    CUSTOM = "custom"               # User-defined traverser


class DataRequirement(Enum):
    """What data to collect from each visited node."""
    KEY = "key"
    PAYLOAD = "payload"
    ITEM = "item"                      # (key, payload) tuple
    FULL_NODE = "full"                 # The node itself
    PATH = "path"                      # Keys from root to node
    CHILDREN_COUNT = "children_count"
    CUSTOM = "custom"                  # User-defined collector


@dataclass
class FilterConfig:
    """Configuration for filtering nodes during traversal."""

    include_filter: Optional[Callable[[Any], bool]] = None
    exclude_filter: Optional[Callable[[Any], bool]] = None

    def should_include(self, node) -> bool:
        """Check if a node passes the filters; exclusion wins."""
        if self.exclude_filter and self.exclude_filter(node):
            return False
        if self.include_filter:
            return self.include_filter(node)
        return True


@dataclass
class DepthConfig:
    """Configuration for depth-based filtering."""

    min_depth: int = 0                          # Minimum depth to yield
    max_depth: Optional[int] = None             # Maximum depth to traverse
    specific_depths: Optional[Set[int]] = None  # Only these specific depths

    def should_yield(self, depth: int) -> bool:
        if self.specific_depths is not None:
            return depth in self.specific_depths
        if depth < self.min_depth:
            return False
        if self.max_depth is not None and depth > self.max_depth:
            return False
        return True

    @property
    def limit(self) -> Optional[int]:
        """Deepest level a traverser needs to reach, or None for unlimited."""
        if self.specific_depths is not None:
            return max(self.specific_depths) if self.specific_depths else 0
        return self.max_depth


@dataclass
class TraversalConfig:
    """Complete configuration for a traversal.

    The ExecutionPlan validates this configuration before any node is
    visited.
    """

    strategy: TraversalStrategy = TraversalStrategy.IN_ORDER
    custom_traverser: Optional[Any] = None

    depth: DepthConfig = field(default_factory=DepthConfig)
    filter: FilterConfig = field(default_factory=FilterConfig)

    data_requirements: DataRequirement = DataRequirement.FULL_NODE
    custom_collector: Optional[Any] = None

    max_nodes: Optional[int] = None  # Stop after yielding this many nodes

    @classmethod
    def sorted_keys(cls) -> 'TraversalConfig':
        """Create config yielding keys in ascending order."""
        return cls(data_requirements=DataRequirement.KEY)

    @classmethod
    def levels(cls, max_depth: int) -> 'TraversalConfig':
        """Create config walking the top ``max_depth`` levels breadth-first."""
        return cls(
            strategy=TraversalStrategy.BREADTH_FIRST,
            depth=DepthConfig(max_depth=max_depth),
        )

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if self.depth.min_depth < 0:
            errors.append("min_depth cannot be negative")

        if self.depth.max_depth is not None:
            if self.depth.max_depth < 0:
                errors.append("max_depth cannot be negative")
            if self.depth.max_depth < self.depth.min_depth:
                errors.append("max_depth cannot be less than min_depth")

        if self.depth.specific_depths is not None:
            if any(d < 0 for d in self.depth.specific_depths):
                errors.append("specific_depths cannot contain negative depths")

        if self.max_nodes is not None and self.max_nodes <= 0:
            errors.append("max_nodes must be positive")

        if self.strategy == TraversalStrategy.CUSTOM and self.custom_traverser is None:
            errors.append("custom_traverser required when strategy is CUSTOM")

        if self.data_requirements == DataRequirement.CUSTOM and self.custom_collector is None:
            errors.append("custom_collector required when data_requirements is CUSTOM")

        return errors
