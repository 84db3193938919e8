import random

import pytest

from citypath.domain.errors import EmptyQueueError, QueueFullError
from citypath.graph.binary_heap import BinaryHeap


def test_extract_min_returns_lowest_priority():
    heap: BinaryHeap[str] = BinaryHeap()
    heap.insert("C", 5.0)
    heap.insert("A", 1.0)
    heap.insert("B", 3.0)

    assert heap.extract_min() == ("A", 1.0)
    assert heap.extract_min() == ("B", 3.0)
    assert heap.extract_min() == ("C", 5.0)
    assert heap.is_empty()


def test_peek_does_not_remove():
    heap: BinaryHeap[int] = BinaryHeap()
    heap.insert(7, 2.0)
    heap.insert(3, 0.5)

    assert heap.peek_min() == (3, 0.5)
    assert len(heap) == 2


def test_empty_heap_raises():
    heap: BinaryHeap[str] = BinaryHeap()

    assert heap.is_empty()
    assert not heap
    with pytest.raises(EmptyQueueError):
        heap.extract_min()
    with pytest.raises(EmptyQueueError):
        heap.peek_min()


def test_equal_priorities_come_out_in_insertion_order():
    heap: BinaryHeap[str] = BinaryHeap()
    for name in ["x", "y", "z"]:
        heap.insert(name, 1.0)

    assert [heap.extract_min()[0] for _ in range(3)] == ["x", "y", "z"]


def test_duplicate_items_are_kept():
    heap: BinaryHeap[str] = BinaryHeap()
    heap.insert("A", 9.0)
    heap.insert("A", 2.0)

    assert heap.extract_min() == ("A", 2.0)
    assert heap.extract_min() == ("A", 9.0)


def test_bounded_heap_rejects_overflow():
    heap: BinaryHeap[str] = BinaryHeap(capacity=2)
    heap.insert("A", 1.0)
    heap.insert("B", 2.0)

    assert heap.is_full
    with pytest.raises(QueueFullError) as excinfo:
        heap.insert("C", 0.0)
    assert excinfo.value.capacity == 2

    # state untouched by the failed insert
    assert len(heap) == 2
    assert heap.extract_min() == ("A", 1.0)
    heap.insert("C", 0.0)
    assert heap.extract_min() == ("C", 0.0)


def test_negative_capacity_is_rejected():
    with pytest.raises(ValueError):
        BinaryHeap(capacity=-1)


def test_clear_empties_heap():
    heap: BinaryHeap[str] = BinaryHeap()
    heap.insert("A", 1.0)
    heap.clear()
    assert heap.is_empty()


@pytest.mark.parametrize("seed", range(20))
def test_interleaved_operations_always_extract_minimum(seed):
    rng = random.Random(seed)
    heap: BinaryHeap[int] = BinaryHeap()
    shadow = []

    for step in range(300):
        if shadow and rng.random() < 0.4:
            item, priority = heap.extract_min()
            assert priority == min(p for p, _ in shadow)
            assert all(priority <= p for p, _ in shadow)
            shadow.remove((priority, item))
        else:
            priority = rng.choice([rng.uniform(0, 100), float(rng.randint(0, 5))])
            heap.insert(step, priority)
            shadow.append((priority, step))
        assert len(heap) == len(shadow)

    drained = []
    while not heap.is_empty():
        drained.append(heap.extract_min()[1])
    assert drained == sorted(drained)
