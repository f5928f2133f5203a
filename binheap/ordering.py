from enum import IntEnum
from typing import Any, Callable

Comparator = Callable[[Any, Any], int]


class Ordering(IntEnum):
    """
    Result of comparing two heap elements.

    ``LESS`` means the first argument ranks higher, i.e. it is emitted
    earlier by the heap.
    """

    LESS = -1
    EQUAL = 0
    GREATER = 1

    @classmethod
    def of(cls, value: Any) -> "Ordering":
        """Normalize a cmp-style signed number to an ``Ordering``."""
        if value < 0:
            return cls.LESS
        if value > 0:
            return cls.GREATER
        return cls.EQUAL


def natural_order(a: Any, b: Any) -> Ordering:
    """Compare two elements with their own ``<`` operator."""
    if a < b:
        return Ordering.LESS
    if b < a:
        return Ordering.GREATER
    return Ordering.EQUAL


def reverse_order(comparator: Comparator = natural_order) -> Comparator:
    """
    Build a comparator ranking elements in the opposite order.

    Parameters
    ----------
    comparator : Comparator
        The ordering to invert, by default the natural ordering.

    Returns
    -------
    Comparator
        A comparator that calls ``comparator`` with swapped arguments.
    """
    def reversed_comparator(a, b):
        return comparator(b, a)

    return reversed_comparator


def key_order(
    key: Callable[[Any], Any],
    comparator: Comparator = natural_order
) -> Comparator:
    """
    Build a comparator that ranks elements by ``key(element)``.

    Parameters
    ----------
    key : Callable[[Any], Any]
        Projection applied to both elements before comparing.
    comparator : Comparator
        Ordering applied to the projected keys, by default natural.

    Returns
    -------
    Comparator
        The composed comparator.
    """
    def keyed_comparator(a, b):
        return comparator(key(a), key(b))

    return keyed_comparator
