"""Helpers for iterating and reducing streams of values.

Usage::

    from miscutils.stream_utils import collect, iter_nullable, last

    recent = collect(iter_nullable(lines), last(10))
"""

from typing import Iterable, Iterator, Optional, TypeVar

from miscutils.collectors import Collector, TailCollector

T = TypeVar("T")


def iter_nullable(values: Optional[Iterable[Optional[T]]]) -> Iterator[T]:
    """Iterate over a possibly-``None`` iterable, skipping ``None`` elements.

    Args:
        values: The iterable to walk, or None.

    Returns:
        An iterator over the non-None elements (empty when ``values`` is None).
    """
    if values is None:
        return iter(())
    return (value for value in values if value is not None)


def last(max_size: int) -> TailCollector:
    """Collector for the last ``max_size`` elements of a stream.

    The collected result is an immutable tuple holding the last
    ``max_size`` elements, or everything when there were fewer.

    Raises:
        ValueError: if ``max_size`` is not a positive number.
    """
    return TailCollector(max_size)


def collect(values: Iterable, collector: Collector):
    """Reduce ``values`` with ``collector``."""
    return collector.collect(values)
