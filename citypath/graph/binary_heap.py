"""Array-backed binary min-heap used as Dijkstra's priority queue.

Entries are ``(item, priority)`` pairs. The heap rule is that the
priority stored in a parent slot is less than or equal to the
priorities of its children (slots ``2i + 1`` and ``2i + 2``), so the
root always holds the global minimum.

Entries are never re-prioritised in place: the engine re-inserts a
vertex whenever its distance improves and ignores stale entries when
they reach the root.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, List, Optional, Tuple, TypeVar

from ..domain.errors import EmptyQueueError, QueueFullError

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class _Entry(Generic[T]):
    priority: float
    # Insertion counter, breaks priority ties in FIFO order.
    sequence: int
    item: T

    def precedes(self, other: _Entry[T]) -> bool:
        if self.priority != other.priority:
            return self.priority < other.priority
        return self.sequence < other.sequence


@dataclass
class BinaryHeap(Generic[T]):
    """Binary min-heap keyed by priority.

    Attributes:
        capacity: Maximum number of entries (None = grows as needed)

    Example:
        heap = BinaryHeap[str]()
        heap.insert("B", 4.0)
        heap.insert("A", 1.0)
        heap.extract_min()  # ("A", 1.0)
    """

    capacity: Optional[int] = None

    _entries: List[_Entry[T]] = field(default_factory=list, repr=False)
    _counter: int = field(default=0, repr=False)

    def __post_init__(self) -> None:
        if self.capacity is not None and self.capacity < 0:
            raise ValueError(f"capacity must be >= 0, got {self.capacity}")

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return not self.is_empty()

    def is_empty(self) -> bool:
        return not self._entries

    @property
    def is_full(self) -> bool:
        return self.capacity is not None and len(self._entries) >= self.capacity

    def insert(self, item: T, priority: float) -> None:
        """Add ``item`` with the given priority.

        Args:
            item: The payload, usually a vertex identity.
            priority: Ordering key, smaller comes out first.

        Raises:
            QueueFullError: If the heap is bounded and already full.
        """
        if self.is_full:
            raise QueueFullError(
                f"Priority queue is full ({self.capacity} entries)",
                capacity=self.capacity or 0,
            )
        self._entries.append(_Entry(priority, self._counter, item))
        self._counter += 1
        self._sift_up(len(self._entries) - 1)

    def peek_min(self) -> Tuple[T, float]:
        """Return the minimum entry without removing it.

        Raises:
            EmptyQueueError: If the heap is empty.
        """
        if not self._entries:
            raise EmptyQueueError("Cannot peek into an empty priority queue")
        root = self._entries[0]
        return root.item, root.priority

    def extract_min(self) -> Tuple[T, float]:
        """Remove and return the entry with the lowest priority.

        The last entry is moved to the root and sifted down to restore
        the heap rule.

        Returns:
            The ``(item, priority)`` pair of the minimum entry.

        Raises:
            EmptyQueueError: If the heap is empty.
        """
        if not self._entries:
            raise EmptyQueueError("Cannot extract from an empty priority queue")

        root = self._entries[0]
        last = self._entries.pop()
        if self._entries:
            self._entries[0] = last
            self._sift_down(0)
        return root.item, root.priority

    def clear(self) -> None:
        self._entries.clear()

    def _sift_up(self, index: int) -> None:
        entries = self._entries
        moving = entries[index]
        while index > 0:
            parent = (index - 1) // 2
            if not moving.precedes(entries[parent]):
                break
            entries[index] = entries[parent]
            index = parent
        entries[index] = moving

    def _sift_down(self, index: int) -> None:
        entries = self._entries
        size = len(entries)
        moving = entries[index]
        while True:
            child = 2 * index + 1
            if child >= size:
                break
            right = child + 1
            if right < size and entries[right].precedes(entries[child]):
                child = right
            if not entries[child].precedes(moving):
                break
            entries[index] = entries[child]
            index = child
        entries[index] = moving
