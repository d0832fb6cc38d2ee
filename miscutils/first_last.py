"""Sort certain values first or last, delegating everything else.

Example::

    order = FirstLastComparator.compare_last(["Always last"], key=str.casefold)
    sorted(names, key=order)

sorts names case-insensitively, with ``"Always last"`` always at the end.
When several explicit values are given, they keep the order in which
they were listed.

Explicit values are matched by equality, so they don't need to be hashable.
"""

from typing import Any, Callable, Iterable, Optional


class FirstLastComparator:
    """Ordering that puts explicit values first (or last).

    Instances are sort keys (``sorted(xs, key=comparator)``) and also offer
    a cmp-style ``compare(a, b)`` for use with ``functools.cmp_to_key``
    or manual comparisons.

    Use the ``compare_first`` / ``compare_last`` factories rather than the
    constructor.
    """

    __slots__ = ("_key", "_first", "_values")

    def __init__(self, values: Iterable, first: bool, key: Optional[Callable[[Any], Any]] = None):
        if values is None:
            raise TypeError(f"{'first' if first else 'last'} values must not be None")
        self._values = list(values)
        self._first = first
        self._key = key

    @classmethod
    def compare_first(cls, values: Iterable, key: Optional[Callable[[Any], Any]] = None) -> "FirstLastComparator":
        """Sort ``values`` first; order the rest by ``key`` (natural order by default)."""
        return cls(values, True, key)

    @classmethod
    def compare_last(cls, values: Iterable, key: Optional[Callable[[Any], Any]] = None) -> "FirstLastComparator":
        """Sort ``values`` last; order the rest by ``key`` (natural order by default)."""
        return cls(values, False, key)

    def _index(self, value) -> int:
        try:
            return self._values.index(value)
        except ValueError:
            return -1

    def _delegate(self, value):
        return self._key(value) if self._key is not None else value

    def __call__(self, value):
        index = self._index(value)
        explicit_group = 0 if self._first else 2
        if index >= 0:
            return (explicit_group, index)
        return (1, self._delegate(value))

    def compare(self, a, b) -> int:
        """Negative, zero or positive as ``a`` sorts before, with or after ``b``."""
        i1 = self._index(a)
        i2 = self._index(b)
        if i1 < 0:
            if i2 < 0:
                k1, k2 = self._delegate(a), self._delegate(b)
                return (k1 > k2) - (k1 < k2)
            return 1 if self._first else -1
        if i2 < 0:
            return -1 if self._first else 1
        return i1 - i2

    def __repr__(self) -> str:
        where = "first" if self._first else "last"
        return f"FirstLastComparator({where}={self._values!r})"
