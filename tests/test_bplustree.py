import random

import pytest

from energytrade.bplustree import MAX_KEYS, BPlusTree


def test_empty_tree():
    tree = BPlusTree()
    assert len(tree) == 0
    assert list(tree) == []
    assert tree.height() == 0
    assert tree.get(1) is None
    assert 1 not in tree


def test_default_order_matches_max_keys():
    tree = BPlusTree()
    assert tree.order == MAX_KEYS == 5


@pytest.mark.parametrize("order", [1, 0, -3])
def test_invalid_order_rejected(order):
    with pytest.raises(ValueError):
        BPlusTree(order)


def test_single_leaf_until_full():
    tree = BPlusTree()
    for key in range(1, 6):
        tree.insert(key, f"v{key}")
    assert tree.height() == 1
    assert list(tree.leaves()) == [(1, 2, 3, 4, 5)]


def test_first_split_of_full_leaf():
    tree = BPlusTree()
    for key in range(1, 7):
        tree.insert(key, key * 10)
    assert tree.height() == 2
    assert list(tree.leaves()) == [(1, 2, 3), (4, 5, 6)]


def test_lookup_of_separator_key():
    tree = BPlusTree()
    for key in range(1, 7):
        tree.insert(key, key * 10)
    assert tree.get(4) == 40
    assert 4 in tree


def test_sequential_insert_keeps_order_and_lookups():
    tree = BPlusTree()
    keys = list(range(1, 201))
    for key in keys:
        tree.insert(key, str(key))
    assert len(tree) == len(keys)
    assert list(tree) == keys
    for key in keys:
        assert tree.get(key) == str(key)
    assert tree.get(0, "missing") == "missing"
    assert 201 not in tree


@pytest.mark.parametrize("order", [2, 3, 4, 5, 8])
def test_random_insert_sorted_iteration(order):
    rng = random.Random(order)
    keys = rng.sample(range(10_000), 300)
    tree = BPlusTree(order)
    for key in keys:
        tree.insert(key, -key)
    assert list(tree) == sorted(keys)
    assert list(tree.values()) == [-k for k in sorted(keys)]
    assert list(tree.items()) == [(k, -k) for k in sorted(keys)]
    for key in keys:
        assert key in tree
        assert tree.get(key) == -key


@pytest.mark.parametrize("order", [2, 3, 5, 7])
def test_leaf_sizes_within_bounds(order):
    rng = random.Random(42)
    tree = BPlusTree(order)
    for key in rng.sample(range(5_000), 400):
        tree.insert(key, None)
    leaves = list(tree.leaves())
    assert sum(len(leaf) for leaf in leaves) == 400
    for leaf in leaves:
        assert 1 <= len(leaf) <= order
        assert (order + 1) // 2 <= len(leaf)
        assert list(leaf) == sorted(leaf)


def test_height_grows_slowly():
    tree = BPlusTree(3)
    for key in range(1000):
        tree.insert(key, key)
    assert 2 < tree.height() <= 10
    flat = [k for leaf in tree.leaves() for k in leaf]
    assert flat == list(range(1000))


def test_duplicate_keys_kept_in_insertion_order():
    tree = BPlusTree(3)
    for key in range(10):
        tree.insert(key, "first")
    tree.insert(5, "second")
    tree.insert(5, "third")
    assert len(tree) == 12
    assert [v for k, v in tree.items() if k == 5] == ["first", "second", "third"]
    assert tree.get(5) == "first"
    assert list(tree) == sorted(list(tree))


def test_many_duplicates_spanning_leaves():
    tree = BPlusTree(2)
    for index in range(20):
        tree.insert(7, index)
    tree.insert(3, "low")
    tree.insert(9, "high")
    assert tree.get(7) == 0
    assert [v for k, v in tree.items() if k == 7] == list(range(20))
    assert tree.get(3) == "low"
    assert tree.get(9) == "high"
    assert tree.get(8) is None


def test_string_keys_order_lexicographically():
    tree = BPlusTree()
    words = ["pear", "apple", "fig", "kiwi", "banana", "cherry", "date", "grape"]
    for word in words:
        tree.insert(word, len(word))
    assert list(tree) == sorted(words)
    assert tree.get("banana") == len("banana")
    assert "mango" not in tree