"""Shared eviction primitive for the bounded-tail containers.

Both ``BoundedTailList`` and ``TailCollector`` keep "the last N elements
of everything seen so far". Whatever the entry point (single append, bulk
insert, merging two partial folds), the result is always the last N
elements of ``head ++ tail``, which is what ``keep_last`` computes.
"""

from itertools import islice
from typing import Collection, Iterable, List, TypeVar

T = TypeVar("T")


def keep_last(head: Collection[T], tail: Iterable[T], limit: int) -> List[T]:
    """Return the last ``limit`` elements of ``head`` followed by ``tail``.

    Neither input is modified; the result is always a new list. ``head``
    only needs a length and an iterator, so deques work as well as lists.

    Args:
        head: The older elements (kept only when ``tail`` leaves room).
        tail: The newer elements.
        limit: Maximum number of elements to return (must be >= 1).

    Returns:
        A list of at most ``limit`` elements, in their original order.
    """
    tail = list(tail)
    if len(tail) >= limit:
        return tail[len(tail) - limit:]
    skip = overflow_count(len(head), len(tail), limit)
    return list(islice(head, skip, None)) + tail


def overflow_count(current: int, incoming: int, limit: int) -> int:
    """Number of elements that must be evicted to fit ``incoming`` more."""
    return max(0, current + incoming - limit)
