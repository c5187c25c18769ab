"""An in-memory B+ tree with linked leaves, used to index market records."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from typing import Any, Generic, Iterator, TypeVar

MAX_KEYS = 5

K = TypeVar("K")
V = TypeVar("V")

_MISSING = object()


class _Node:
    """A tree node; leaves hold values, internal nodes hold children."""

    __slots__ = ("is_leaf", "keys", "values", "children", "next")

    def __init__(self, is_leaf: bool) -> None:
        self.is_leaf = is_leaf
        self.keys: list[Any] = []
        self.values: list[Any] = []
        self.children: list[_Node] = []
        self.next: _Node | None = None


class BPlusTree(Generic[K, V]):
    """A B+ tree mapping ordered keys to values.

    Each node holds at most ``order`` keys. Leaves are chained so that a
    full scan walks them left to right in key order. Inserting a key that
    is already present keeps both entries; equal keys stay in insertion
    order.
    """

    def __init__(self, order: int = MAX_KEYS) -> None:
        if order < 2:
            raise ValueError(f"order must be at least 2, got {order}")
        self.order = order
        self._root: _Node | None = None
        self._size = 0

    def insert(self, key: K, value: V) -> None:
        """Add ``value`` under ``key``, splitting nodes as they overflow."""
        if self._root is None:
            leaf = _Node(is_leaf=True)
            leaf.keys.append(key)
            leaf.values.append(value)
            self._root = leaf
            self._size = 1
            return

        path: list[_Node] = []
        node = self._root
        while not node.is_leaf:
            path.append(node)
            node = node.children[bisect_right(node.keys, key)]

        position = bisect_right(node.keys, key)
        node.keys.insert(position, key)
        node.values.insert(position, value)
        self._size += 1

        if len(node.keys) > self.order:
            split = (self.order + 1) // 2
            right = _Node(is_leaf=True)
            right.keys = node.keys[split:]
            right.values = node.values[split:]
            del node.keys[split:]
            del node.values[split:]
            right.next = node.next
            node.next = right
            self._insert_into_parent(path, node, right.keys[0], right)

    def _insert_into_parent(
        self, path: list[_Node], left: _Node, key: Any, right: _Node
    ) -> None:
        while True:
            if not path:
                root = _Node(is_leaf=False)
                root.keys = [key]
                root.children = [left, right]
                self._root = root
                return

            parent = path.pop()
            index = next(
                i for i, child in enumerate(parent.children) if child is left
            )
            parent.keys.insert(index, key)
            parent.children.insert(index + 1, right)
            if len(parent.keys) <= self.order:
                return

            split = len(parent.keys) // 2
            promoted = parent.keys[split]
            sibling = _Node(is_leaf=False)
            sibling.keys = parent.keys[split + 1:]
            sibling.children = parent.children[split + 1:]
            del parent.keys[split:]
            del parent.children[split + 1:]
            left, key, right = parent, promoted, sibling

    def get(self, key: K, default: Any = None) -> Any:
        """Return the earliest value stored under ``key``, or ``default``."""
        node = self._root
        if node is None:
            return default
        while not node.is_leaf:
            node = node.children[bisect_left(node.keys, key)]
        leaf: _Node | None = node
        while leaf is not None:
            start = bisect_left(leaf.keys, key)
            if start < len(leaf.keys):
                if leaf.keys[start] == key:
                    return leaf.values[start]
                return default
            leaf = leaf.next
        return default

    def __contains__(self, key: object) -> bool:
        return self.get(key, _MISSING) is not _MISSING  # type: ignore[arg-type]

    def __len__(self) -> int:
        return self._size

    def _leaf_nodes(self) -> Iterator[_Node]:
        node = self._root
        if node is None:
            return
        while not node.is_leaf:
            node = node.children[0]
        leaf: _Node | None = node
        while leaf is not None:
            yield leaf
            leaf = leaf.next

    def __iter__(self) -> Iterator[K]:
        for leaf in self._leaf_nodes():
            yield from leaf.keys

    def items(self) -> Iterator[tuple[K, V]]:
        """Yield ``(key, value)`` pairs in key order."""
        for leaf in self._leaf_nodes():
            yield from zip(leaf.keys, leaf.values)

    def values(self) -> Iterator[V]:
        """Yield values in key order."""
        for leaf in self._leaf_nodes():
            yield from leaf.values

    def leaves(self) -> Iterator[tuple[K, ...]]:
        """Yield the keys of each leaf, leftmost leaf first."""
        for leaf in self._leaf_nodes():
            yield tuple(leaf.keys)

    def height(self) -> int:
        """Return the number of levels; an empty tree has height 0."""
        levels = 0
        node = self._root
        while node is not None:
            levels += 1
            node = None if node.is_leaf else node.children[0]
        return levels