import math
import random

import pytest

from mazesolver.solver.pairing_heap import PairingHeap


def _drain(heap: PairingHeap) -> list[tuple[object, float]]:
    popped = []
    while not heap.is_empty():
        item = heap.peek_min()
        priority = heap.priority_of(item)
        assert heap.pop_min() == item
        popped.append((item, priority))
    return popped


def test_pop_order_with_equal_priorities() -> None:
    heap = PairingHeap()
    heap.insert((1, 2), 7)
    heap.insert((5, 4), 3)
    heap.insert((1, 9), 2)
    heap.insert((8, 4), 5)
    heap.insert((5, 8), 6)
    heap.insert((6, 9), 2)
    heap.insert((7, 8), 2)

    popped = _drain(heap)

    assert [priority for _, priority in popped] == [2, 2, 2, 3, 5, 6, 7]
    assert [item for item, _ in popped] == [
        (7, 8),
        (6, 9),
        (1, 9),
        (5, 4),
        (8, 4),
        (5, 8),
        (1, 2),
    ]


def test_random_inserts_pop_in_non_decreasing_order() -> None:
    rng = random.Random(7)
    heap = PairingHeap()
    for item in range(300):
        heap.insert(item, rng.randint(0, 50))

    priorities = [priority for _, priority in _drain(heap)]

    assert len(priorities) == 300
    assert priorities == sorted(priorities)


def test_insert_defaults_to_infinite_priority() -> None:
    heap = PairingHeap()
    heap.insert("later")
    heap.insert("sooner", 10)

    assert heap.priority_of("later") == math.inf
    assert heap.pop_min() == "sooner"
    assert heap.pop_min() == "later"


def test_membership_and_size() -> None:
    heap = PairingHeap()
    assert heap.is_empty()
    heap.insert("a", 1)
    heap.insert("b", 2)

    assert heap.has("a")
    assert "b" in heap
    assert len(heap) == 2
    assert heap.peek_min() == "a"
    assert len(heap) == 2

    heap.pop_min()
    assert not heap.has("a")
    assert len(heap) == 1


def test_empty_queue_raises_index_error() -> None:
    heap = PairingHeap()
    with pytest.raises(IndexError):
        heap.pop_min()
    with pytest.raises(IndexError):
        heap.peek_min()


def test_duplicate_insert_is_rejected() -> None:
    heap = PairingHeap()
    heap.insert("a", 1)
    with pytest.raises(ValueError):
        heap.insert("a", 0)


def test_decrease_key_on_root() -> None:
    heap = PairingHeap()
    heap.insert("a", 5)
    heap.decrease_key("a", 1)

    assert heap.priority_of("a") == 1
    assert heap.peek_min() == "a"


def test_decrease_key_moves_child_to_front() -> None:
    heap = PairingHeap()
    heap.insert("a", 5)
    heap.insert("b", 3)
    heap.insert("c", 4)

    heap.decrease_key("c", 1)
    assert heap.peek_min() == "c"
    assert heap.priority_of("c") == 1

    # Still not below its parent, so it stays in place.
    heap.decrease_key("a", 4)
    assert heap.priority_of("a") == 4

    assert [item for item, _ in _drain(heap)] == ["c", "b", "a"]


def test_decrease_key_ignores_increase_and_unknown_items() -> None:
    heap = PairingHeap()
    heap.insert("a", 2)
    heap.insert("b", 3)

    heap.decrease_key("b", 10)
    heap.decrease_key("missing", 0)

    assert heap.priority_of("b") == 3
    assert not heap.has("missing")
    assert [item for item, _ in _drain(heap)] == ["a", "b"]


def test_wrong_hint_falls_back_to_full_search() -> None:
    heap = PairingHeap(prune_with_hint=True)
    for item, priority in [("a", 1), ("b", 4), ("c", 6), ("d", 8), ("e", 9)]:
        heap.insert(item, priority)
    heap.pop_min()

    heap.decrease_key("e", 0, previous=2)

    assert heap.peek_min() == "e"
    assert heap.priority_of("e") == 0


@pytest.mark.parametrize("prune_with_hint", [False, True])
def test_random_decrease_keys_keep_heap_order(prune_with_hint: bool) -> None:
    rng = random.Random(11)
    heap = PairingHeap(prune_with_hint=prune_with_hint)
    expected: dict[int, int] = {}
    for item in range(200):
        expected[item] = rng.randint(10, 100)
        heap.insert(item, expected[item])

    for _ in range(40):
        heap.pop_min()
        for item in rng.sample(range(200), 5):
            if not heap.has(item):
                continue
            previous = heap.priority_of(item)
            lowered = previous - rng.randint(1, 20)
            heap.decrease_key(item, lowered, previous=previous)
            expected[item] = lowered
            assert heap.priority_of(item) == lowered

    popped = _drain(heap)
    priorities = [priority for _, priority in popped]
    assert priorities == sorted(priorities)
    assert all(expected[item] == priority for item, priority in popped)


def test_merge_moves_all_items() -> None:
    left = PairingHeap()
    right = PairingHeap()
    left.insert("a", 4)
    left.insert("b", 2)
    right.insert("c", 1)
    right.insert("d", 3)

    left.merge(right)

    assert right.is_empty()
    assert not right.has("c")
    assert left.has("c")
    assert [item for item, _ in _drain(left)] == ["c", "b", "d", "a"]


def test_merge_rejects_shared_items() -> None:
    left = PairingHeap()
    right = PairingHeap()
    left.insert("a", 1)
    right.insert("a", 2)

    with pytest.raises(ValueError):
        left.merge(right)
