class HeapError(Exception):
    """Base class for errors raised by binheap containers."""


class EmptyHeapError(HeapError, IndexError):
    """Raised by ``pop`` or ``peek`` on a heap holding no elements."""


class EmptyQueueError(HeapError, IndexError):
    """Raised by ``dequeue`` on an empty first-in-first-out queue."""


class HeapIndexError(HeapError, LookupError):
    """
    Raised when the engine computes a slot index outside the live region.

    This signals a defect in the heap itself, never a caller mistake, and is
    not caught anywhere inside the package.
    """
