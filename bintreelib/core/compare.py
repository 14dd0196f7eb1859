"""Three-way key comparison used by every node operation."""

from typing import Any, Callable, Optional

# Results of comparing two keys.
LESS = -1
EQUAL = 0
GREATER = 1

Comparer = Callable[[Any, Any], int]


def natural_compare(a: Any, b: Any) -> int:
    """Compare two keys by their natural ordering."""
    if a < b:
        return LESS
    if a == b:
        return EQUAL
    return GREATER


def make_comparer(key_func: Optional[Callable[[Any], Any]] = None) -> Comparer:
    """Build a comparer, optionally ordering keys by ``key_func(key)``.

    Keys that map to the same sort key compare EQUAL, so with
    ``key_func=str.casefold`` the keys "Alpha" and "alpha" are duplicates.

    Args:
        key_func: Optional transform applied to both keys before comparing

    Returns:
        A function returning LESS, EQUAL or GREATER
    """
    if key_func is None:
        return natural_compare

    def compare(a: Any, b: Any) -> int:
        return natural_compare(key_func(a), key_func(b))

    return compare
