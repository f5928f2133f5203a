import logging
from itertools import islice
from typing import Any, Iterable, Iterator, Optional

from binheap.binary_heap.binary_heap import BinaryHeap
from binheap.ordering import Comparator, natural_order, reverse_order

logger = logging.getLogger(__name__)


def get_topk(heap: BinaryHeap, k: int) -> list[Any]:
    """
    Function to get the top-K elements from a heap.

    The heap is not modified: the elements are read from a snapshot
    traversal, so they come out in the heap's priority order.

    Parameters
    ----------
    heap : BinaryHeap
        A BinaryHeap object
    k : int
        The number of 'top-K' elements to retrieve.

    Returns
    -------
    list[Any]
        The 'top-K' elements.
    """
    if k <= 0:
        return []
    if heap.is_empty():
        return []

    return list(islice(heap.traverse(), k))


def nsmallest(
    k: int,
    items: Iterable[Any],
    comparator: Optional[Comparator] = None
) -> list[Any]:
    """
    Select the k highest-ranked elements of a stream.

    At most ``k`` elements are held at any time. They are kept in a heap
    ordered by the reversed comparator so that the weakest kept element is
    on top and can be evicted in O(log k).

    Parameters
    ----------
    k : int
        The number of elements to keep.
    items : Iterable[Any]
        The stream to select from; consumed once.
    comparator : Comparator, optional
        Ordering of the elements, by default natural.

    Returns
    -------
    list[Any]
        The selected elements, highest-ranked first.
    """
    if k <= 0:
        return []

    order = natural_order if comparator is None else comparator
    kept = BinaryHeap(reverse_order(order))
    for item in items:
        if len(kept) < k:
            kept.push(item)
        elif order(item, kept.peek()) < 0:
            kept.pop()
            kept.push(item)

    logger.debug("Selected %d of requested %d elements", len(kept), k)
    selected = [kept.pop() for _ in range(len(kept))]
    selected.reverse()
    return selected


def merge(
    *iterables: Iterable[Any],
    comparator: Optional[Comparator] = None
) -> Iterator[Any]:
    """
    Lazily merge individually sorted iterables into one sorted stream.

    Equal elements are yielded in the order of the iterables they came from.

    Parameters
    ----------
    *iterables : Iterable[Any]
        Inputs, each already sorted under ``comparator``.
    comparator : Comparator, optional
        Ordering of the elements, by default natural.

    Yields
    ------
    Any
        The next element of the merged stream.
    """
    order = natural_order if comparator is None else comparator

    def entry_order(a, b):
        result = order(a[0], b[0])
        if result:
            return result
        return a[1] - b[1]

    heads = BinaryHeap(entry_order)
    for index, iterable in enumerate(iterables):
        iterator = iter(iterable)
        for head in iterator:
            heads.push((head, index, iterator))
            break

    while not heads.is_empty():
        head, index, iterator = heads.pop()
        yield head
        for head in iterator:
            heads.push((head, index, iterator))
            break
        else:
            logger.debug("Merge source %d exhausted", index)
