"""Exception hierarchy for BinTreeLib.

All errors raised by the tree are subclasses of TreeError, so callers can
catch the whole family at once. Lookups that miss are NOT errors: Tree.find
returns ``(None, False)``. Only deleting a missing key raises.
"""


class TreeError(Exception):
    """Base class for all BinTreeLib errors."""
    pass


class EmptyTreeError(TreeError):
    """Raised when an operation needs a root but the tree is empty."""

    def __init__(self, operation: str = "delete"):
        self.operation = operation
        super().__init__(f"Cannot {operation} from an empty tree")


class KeyNotFoundError(TreeError, KeyError):
    """Raised when deleting a key that is not in the tree."""

    def __init__(self, key):
        self.key = key
        super().__init__(key)

    def __str__(self) -> str:
        return f"Value to be deleted does not exist in the tree: {self.key!r}"


class InvalidOperationError(TreeError):
    """Raised for operations on an absent node or an inconsistent splice.

    Correct Tree-level guarding makes this unreachable through the public
    Tree API; it exists for callers working with bare nodes.
    """
    pass


class ConfigurationError(TreeError, ValueError):
    """Raised when a TreeConfig or TraversalConfig fails validation."""

    def __init__(self, problems):
        self.problems = list(problems)
        super().__init__(f"Invalid configuration: {'; '.join(self.problems)}")
