"""Fold-style collectors: seed, accumulate, merge, finish.

A collector describes a reduction in four steps so that a driver can run
it sequentially over one iterable, or fold several consecutive partitions
of one logical sequence independently and merge the partial states
left-to-right afterwards.

Collectors themselves hold no per-reduction state and start no threads.
Each intermediate state belongs to a single reduction (or partition) and
must not be shared between threads without external locking.
"""

import logging
from collections import deque
from functools import reduce
from typing import Deque, Iterable, Tuple

from miscutils.rotation import keep_last

log = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Base class
# ---------------------------------------------------------------------------

class Collector:
    """Base class for fold-based reductions.

    Subclasses implement the four steps; ``collect`` and
    ``collect_partitions`` are the drivers.
    """

    def seed(self):
        """Return a fresh, empty intermediate state."""
        raise NotImplementedError

    def accumulate(self, state, value) -> None:
        """Fold one value into ``state`` (in place)."""
        raise NotImplementedError

    def merge(self, left, right):
        """Combine the states of two consecutive partitions.

        ``left`` must come from the earlier partition.
        """
        raise NotImplementedError

    def finish(self, state):
        """Turn an intermediate state into the final result."""
        raise NotImplementedError

    def fold(self, values: Iterable):
        """Fold ``values`` into a fresh state without finishing it."""
        state = self.seed()
        for value in values:
            self.accumulate(state, value)
        return state

    def collect(self, values: Iterable):
        """Sequentially reduce ``values`` to the final result."""
        return self.finish(self.fold(values))

    def collect_partitions(self, partitions: Iterable[Iterable]):
        """Reduce consecutive partitions of one logical sequence.

        Each partition is folded on its own, then the partial states are
        merged left-to-right. The result equals ``collect`` over the
        concatenation of all partitions.
        """
        states = [self.fold(partition) for partition in partitions]
        if not states:
            return self.finish(self.seed())
        return self.finish(reduce(self.merge, states))


# ---------------------------------------------------------------------------
# Last N elements
# ---------------------------------------------------------------------------

class TailCollector(Collector):
    """Collect the last ``max_size`` elements of an iterable.

    Gives the same result as appending everything to a
    ``BoundedTailList(max_size)``, as an immutable tuple. Fewer than
    ``max_size`` elements are returned in full.

    ``merge`` consumes both states and returns a new one. Neither input is
    modified, and the result does not share storage with them.

    Args:
        max_size: Maximum number of elements to retain (must be >= 1).
    """

    def __init__(self, max_size: int):
        if isinstance(max_size, bool) or not isinstance(max_size, int):
            raise TypeError(f"max_size must be an int, got {type(max_size).__name__}")
        if max_size <= 0:
            raise ValueError("Maximum size must be a positive number.")
        self._max_size = max_size

    @property
    def max_size(self) -> int:
        return self._max_size

    def seed(self) -> Deque:
        return deque(maxlen=self._max_size)

    def accumulate(self, state: Deque, value) -> None:
        # A full deque drops its leftmost (oldest) element on append.
        state.append(value)

    def merge(self, left: Deque, right: Deque) -> Deque:
        if len(right) >= self._max_size:
            log.debug("Right partition is full, dropping %d element(s) on the left", len(left))
        return deque(keep_last(left, right, self._max_size), maxlen=self._max_size)

    def finish(self, state: Deque) -> Tuple:
        return tuple(state)

    def __repr__(self) -> str:
        return f"TailCollector(max_size={self._max_size})"
