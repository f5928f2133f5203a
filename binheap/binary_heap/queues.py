from collections import deque
from typing import Generic, Iterator, Protocol, TypeVar, runtime_checkable

from binheap.exceptions import EmptyQueueError

T = TypeVar("T")


@runtime_checkable
class Queue(Protocol[T]):
    """Anything that can be filled with ``enqueue`` and emptied with
    ``dequeue``."""

    def enqueue(self, item: T) -> None: ...

    def dequeue(self) -> T: ...

    def size(self) -> int: ...

    def is_empty(self) -> bool: ...


@runtime_checkable
class PriorityQueue(Queue[T], Protocol[T]):
    """A queue whose ``dequeue`` returns the highest-ranked element."""

    def peek(self) -> T: ...


class FifoQueue(Generic[T]):
    """First-in-first-out queue backed by ``collections.deque``."""

    def __init__(self) -> None:
        self._items: deque[T] = deque()

    def enqueue(self, item: T) -> None:
        self._items.append(item)

    def dequeue(self) -> T:
        if not self._items:
            raise EmptyQueueError("dequeue from an empty queue")
        return self._items.popleft()

    def size(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)


def drain(queue: Queue[T]) -> Iterator[T]:
    """Dequeue and yield elements until ``queue`` is empty."""
    while not queue.is_empty():
        yield queue.dequeue()
