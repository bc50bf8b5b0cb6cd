"""A multiple-producer, single-consumer FIFO queue."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from typing import Generic, TypeVar

T = TypeVar("T")


class QueueEmpty(IndexError):
    """Raised when taking an item from an empty queue."""


class MpscQueue(Generic[T]):
    """FIFO queue that any number of threads may feed and one thread drains.

    ``enqueue`` is safe to call from several threads at once; ``dequeue`` is
    meant to be called from a single consumer thread.
    """

    def __init__(self) -> None:
        self._items: deque[T] = deque()

    def enqueue(self, item: T) -> None:
        """Put an item at the back of the queue."""
        self._items.append(item)

    def dequeue(self) -> T:
        """Take the item at the front of the queue.

        Raises QueueEmpty if there is nothing to take.
        """
        try:
            return self._items.popleft()
        except IndexError:
            raise QueueEmpty("dequeue from an empty queue") from None

    def empty(self) -> bool:
        """Return True if the queue holds no items."""
        return not self._items

    def drain(self) -> Iterator[T]:
        """Yield items from the front until the queue is empty."""
        while True:
            try:
                yield self.dequeue()
            except QueueEmpty:
                return

    def __len__(self) -> int:
        return len(self._items)