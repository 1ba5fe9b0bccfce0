"""Mergeable min-priority queue backed by a pairing heap.

Every item lives in exactly one heap node. Each node owns its list of child
subheaps, and the queue keeps a membership map of weak references from item to
node so `has` is O(1). Ties are resolved toward the right-hand operand of a
link, which is the newly merged heap on insert and the accumulated tree during
the second pass of `pop_min`.

`decrease_key` has to find the node's parent by walking the tree. When the
queue is built with `prune_with_hint=True`, a caller-supplied `previous`
priority lets the walk skip subtrees rooted above that priority. A wrong hint
only costs a second, exhaustive walk.
"""

from __future__ import annotations

import math
import weakref
from collections.abc import Hashable
from dataclasses import dataclass, field


@dataclass(eq=False)
class HeapNode:
    item: Hashable
    priority: float = math.inf
    children: list[HeapNode] = field(default_factory=list)


def link(left: HeapNode, right: HeapNode) -> HeapNode:
    """Merge two heaps; the larger root becomes a child of the smaller."""
    if left.priority < right.priority:
        left.children.append(right)
        return left
    right.children.append(left)
    return right


def merge_pairs(heaps: list[HeapNode]) -> HeapNode | None:
    if not heaps:
        return None
    paired: list[HeapNode] = []
    for index in range(0, len(heaps), 2):
        if index + 1 < len(heaps):
            paired.append(link(heaps[index], heaps[index + 1]))
        else:
            paired.append(heaps[index])
    merged = paired[-1]
    for heap in reversed(paired[:-1]):
        merged = link(heap, merged)
    return merged


class PairingHeap:
    def __init__(self, *, prune_with_hint: bool = False) -> None:
        self._root: HeapNode | None = None
        self._size = 0
        self._nodes: weakref.WeakValueDictionary[Hashable, HeapNode] = (
            weakref.WeakValueDictionary()
        )
        self._prune_with_hint = prune_with_hint

    def __len__(self) -> int:
        return self._size

    def __contains__(self, item: Hashable) -> bool:
        return self.has(item)

    def is_empty(self) -> bool:
        return self._size < 1

    def has(self, item: Hashable) -> bool:
        return item in self._nodes

    def priority_of(self, item: Hashable) -> float:
        node = self._nodes.get(item)
        if node is None:
            raise KeyError(item)
        return node.priority

    def insert(self, item: Hashable, priority: float = math.inf) -> None:
        if item in self._nodes:
            raise ValueError(f"{item!r} is already queued; use decrease_key.")
        node = HeapNode(item=item, priority=priority)
        self._nodes[item] = node
        self._root = node if self._root is None else link(self._root, node)
        self._size += 1

    def peek_min(self) -> Hashable:
        return self._require_root().item

    def pop_min(self) -> Hashable:
        root = self._require_root()
        children = root.children
        root.children = []
        del self._nodes[root.item]
        self._size -= 1
        self._root = merge_pairs(children)
        return root.item

    def decrease_key(
        self, item: Hashable, priority: float, *, previous: float | None = None
    ) -> None:
        """Lower `item` to `priority`.

        Unknown items and priorities that are not lower are ignored, so callers
        should check `has` first. `previous` is only consulted when the queue
        was created with `prune_with_hint=True`.
        """
        node = self._nodes.get(item)
        if node is None or priority >= node.priority:
            return
        if node is self._root:
            node.priority = priority
            return

        parent = self._find_parent(node, previous)
        node.priority = priority
        if parent is None or priority >= parent.priority:
            return
        parent.children.remove(node)
        self._root = link(self._root, node)

    def merge(self, other: PairingHeap) -> None:
        """Move every item of `other` into this queue, leaving `other` empty."""
        if other is self or other._root is None:
            return
        shared = set(self._nodes.keys()) & set(other._nodes.keys())
        if shared:
            names = ", ".join(sorted(map(repr, shared)))
            raise ValueError(f"Cannot merge queues sharing items: {names}")
        for item, node in list(other._nodes.items()):
            self._nodes[item] = node
        if self._root is None:
            self._root = other._root
        else:
            self._root = link(self._root, other._root)
        self._size += other._size
        other._root = None
        other._size = 0
        other._nodes = weakref.WeakValueDictionary()

    def _require_root(self) -> HeapNode:
        if self._root is None:
            raise IndexError("priority queue is empty")
        return self._root

    def _find_parent(self, target: HeapNode, hint: float | None) -> HeapNode | None:
        if self._prune_with_hint and hint is not None:
            parent = self._search_parent(target, bound=hint)
            if parent is not None:
                return parent
        return self._search_parent(target, bound=None)

    def _search_parent(
        self, target: HeapNode, *, bound: float | None
    ) -> HeapNode | None:
        if self._root is None:
            return None
        stack = [self._root]
        while stack:
            node = stack.pop()
            for child in node.children:
                if child is target:
                    return node
                # Descendants never sort before their subtree root.
                if bound is not None and child.priority > bound:
                    continue
                stack.append(child)
        return None
