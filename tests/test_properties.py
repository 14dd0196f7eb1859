"""Property-based tests: random insert/delete sequences against a dict model."""

import pytest
from hypothesis import given, settings, strategies as st

from bintreelib import EmptyTreeError, KeyNotFoundError, Tree
from bintreelib.testing import TreeTestHelper

# A small alphabet forces plenty of duplicate inserts and real deletes
keys = st.text(alphabet="abcdef", min_size=1, max_size=3)
operations = st.lists(
    st.tuples(st.sampled_from(["insert", "delete"]), keys, st.integers(0, 9)),
    max_size=60,
)


@given(operations)
@settings(max_examples=200)
def test_random_operations_match_dict(ops):
    tree = Tree()
    model = {}

    for op, key, value in ops:
        before = len(tree)
        payload = f"{key}:{value}"

        if op == "insert":
            created = tree.insert(key, payload)
            assert created == (key not in model)
            model.setdefault(key, payload)
            assert len(tree) == before + (1 if created else 0)
        elif not model:
            with pytest.raises(EmptyTreeError):
                tree.delete(key)
        elif key not in model:
            with pytest.raises(KeyNotFoundError):
                tree.delete(key)
            assert len(tree) == before
        else:
            others = [k for k in tree.keys() if k != key]
            tree.delete(key)
            del model[key]
            assert len(tree) == before - 1
            assert tree.find(key) == (None, False)
            assert tree.keys() == others

        TreeTestHelper(tree).assert_consistent()

    assert tree.items() == sorted(model.items())


@given(st.lists(keys, unique=True))
def test_in_order_is_sorted(key_list):
    tree = Tree()
    for key in key_list:
        tree.insert(key)
    assert list(tree) == sorted(key_list)


@given(st.lists(keys, min_size=1, unique=True), st.data())
def test_insert_then_find(key_list, data):
    tree = Tree()
    for key in key_list:
        tree.insert(key, key.upper())

    key = data.draw(st.sampled_from(key_list))
    assert tree.find(key) == (key.upper(), True)

    tree.insert(key, "duplicate")
    assert tree.find(key) == (key.upper(), True)
    assert len(tree) == len(key_list)


@given(st.lists(keys, min_size=1, unique=True), st.data())
def test_delete_in_any_order_empties_tree(key_list, data):
    tree = Tree()
    for key in key_list:
        tree.insert(key)

    order = data.draw(st.permutations(key_list))
    for key in order:
        tree.delete(key)
        TreeTestHelper(tree).assert_consistent()

    assert tree.root is None
    assert len(tree) == 0
