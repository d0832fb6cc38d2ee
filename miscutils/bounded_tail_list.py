"""List with a maximum capacity that rotates out its oldest elements.

Adding elements beyond the capacity discards the first (oldest) elements
and retains the last ones, so the list always holds the most recently
added ``capacity`` elements in the order they were added.

Typical use is keeping the tail of some output or event history without
unbounded growth::

    recent = BoundedTailList(3)
    for value in (1, 2, 3, 4, 5):
        recent.append(value)
    assert recent == [3, 4, 5]

Not thread-safe: callers that share an instance between threads must
synchronize externally.
"""

import logging
from collections.abc import MutableSequence
from typing import Iterable, List, Optional

from miscutils.rotation import keep_last, overflow_count

log = logging.getLogger(__name__)


class BoundedTailList(MutableSequence):
    """Mutable sequence holding at most ``capacity`` elements.

    Supports the full ``MutableSequence`` API. Anything that adds elements
    goes through ``add_all``, which evicts the oldest elements on overflow.

    Note the positional quirk of ``insert`` / ``add_all``: the index is
    honoured only while everything still fits. Once eviction is triggered,
    the new elements always land at the tail, regardless of the index.

    Args:
        capacity: Maximum number of elements (must be >= 1).
        content: Optional initial elements. When there are more than
            ``capacity`` of them, only the last ``capacity`` are kept.
    """

    __slots__ = ("_items", "_capacity")

    def __init__(self, capacity: int, content: Iterable = ()):
        if isinstance(capacity, bool) or not isinstance(capacity, int):
            raise TypeError(f"capacity must be an int, got {type(capacity).__name__}")
        if capacity < 1:
            raise ValueError(f"Illegal maximum capacity: {capacity}")
        self._capacity = capacity
        self._items: List = []
        self.add_all(content)

    @property
    def capacity(self) -> int:
        """The maximum number of elements this list retains."""
        return self._capacity

    def add_all(self, values: Iterable, index: Optional[int] = None) -> bool:
        """Insert ``values`` at ``index`` (default: the end).

        When the result would exceed the capacity, the list becomes the
        last ``capacity`` elements of its current content followed by
        ``values``. In that case ``index`` is ignored.

        Returns:
            True if the list changed, False for an empty batch.
        """
        values = list(values)
        if not values:
            return False
        size = len(self._items)
        if index is None:
            index = size
        evicted = overflow_count(size, len(values), self._capacity)
        if not evicted:
            self._items[index:index] = values
        else:
            log.debug(
                "Capacity %d exceeded by %d element(s), keeping the tail",
                self._capacity, evicted,
            )
            self._items[:] = keep_last(self._items, values, self._capacity)
        return True

    def append(self, value) -> None:
        self.add_all((value,))

    def insert(self, index: int, value) -> None:
        self.add_all((value,), index)

    def extend(self, values: Iterable) -> None:
        self.add_all(values)

    def clear(self) -> None:
        self._items.clear()

    def __getitem__(self, index):
        return self._items[index]

    def __setitem__(self, index, value) -> None:
        if not isinstance(index, slice):
            self._items[index] = value
            return
        values = list(value)
        start, _stop, step = index.indices(len(self._items))
        if step != 1:
            # Extended slices must match in length, so the size never changes.
            self._items[index] = values
            return
        del self._items[index]
        self.add_all(values, start)

    def __delitem__(self, index) -> None:
        del self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self):
        return iter(self._items)

    def __eq__(self, other) -> bool:
        if isinstance(other, BoundedTailList):
            return self._items == other._items
        if isinstance(other, list):
            return self._items == other
        return NotImplemented

    __hash__ = None

    def __repr__(self) -> str:
        return f"BoundedTailList(capacity={self._capacity}, {self._items!r})"
