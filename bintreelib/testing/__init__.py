"""Testing utilities for BinTreeLib consumers."""

from .fixtures import TreeTestHelper, node_from_shape, shape_of

__all__ = ['TreeTestHelper', 'node_from_shape', 'shape_of']
