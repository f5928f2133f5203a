from binheap.binary_heap.binary_heap import BinaryHeap
from binheap.binary_heap.queues import FifoQueue, PriorityQueue, Queue, drain
from binheap.binary_heap.topk import get_topk, merge, nsmallest
from binheap.binary_heap.traversal import HeapTraversal
from binheap.exceptions import (
    EmptyHeapError,
    EmptyQueueError,
    HeapError,
    HeapIndexError,
)
from binheap.ordering import Ordering, key_order, natural_order, reverse_order
