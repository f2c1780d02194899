"""A multiple-producer, single-consumer FIFO queue."""

from __future__ import annotations

from collections import deque
from typing import Generic, Iterator, TypeVar

T = TypeVar("T")


class MpscQueue(Generic[T]):
    """FIFO queue that many threads may feed and one thread consumes.

    ``enqueue`` may be called from any number of threads at once; ``dequeue``,
    ``drain`` and ``empty`` are meant for the single consumer thread.
    """

    def __init__(self) -> None:
        # deque.append and deque.popleft are atomic, which is all the
        # producer/consumer split needs.
        self._items: deque[T] = deque()

    def enqueue(self, item: T) -> None:
        """Put an item at the back of the queue."""
        self._items.append(item)

    def dequeue(self) -> T:
        """Take the item at the front; raise IndexError if the queue is empty."""
        try:
            return self._items.popleft()
        except IndexError:
            raise IndexError("dequeue from an empty queue") from None

    def empty(self) -> bool:
        """Return True if the queue holds no items."""
        return not self._items

    def drain(self) -> Iterator[T]:
        """Yield items from the front until the queue is empty."""
        while True:
            try:
                yield self._items.popleft()
            except IndexError:
                return

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)