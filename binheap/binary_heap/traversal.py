import logging

from binheap.exceptions import EmptyHeapError

logger = logging.getLogger(__name__)


class HeapTraversal:
    """
    One-shot priority-ordered iterator over a snapshot of a heap.

    The source heap is copied on construction and the copy is drained one
    element at a time, so the source and the traversal never observe each
    other's mutations.

    Parameters
    ----------
    source : BinaryHeap
        The heap to enumerate. Only its ``copy`` method is used.
    """

    def __init__(self, source):
        self._snapshot = source.copy()
        logger.debug(
            "Created heap traversal over %d elements", len(self._snapshot)
        )

    def has_next(self) -> bool:
        return not self._snapshot.is_empty()

    def next(self):
        """
        Return the next element in priority order.

        Raises
        ------
        EmptyHeapError
            If the traversal is exhausted.
        """
        if self._snapshot.is_empty():
            raise EmptyHeapError("traversal is exhausted")
        return self._snapshot.pop()

    def __iter__(self):
        return self

    def __next__(self):
        try:
            return self.next()
        except EmptyHeapError:
            raise StopIteration from None

    def __len__(self) -> int:
        return len(self._snapshot)
