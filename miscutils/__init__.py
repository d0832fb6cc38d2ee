"""miscutils: small independent utilities.

- ``BoundedTailList``: list that keeps only its last ``capacity`` elements
- ``stream_utils.last``: collector for the last N elements of a stream
- ``RandomGenerator``: ``random.Random`` with richer helpers
- ``FirstLastComparator``: sort selected values first or last
"""

from miscutils.bounded_tail_list import BoundedTailList
from miscutils.collectors import Collector, TailCollector
from miscutils.first_last import FirstLastComparator
from miscutils.random_generator import RandomGenerator
from miscutils.stream_utils import collect, iter_nullable, last

__all__ = [
    "BoundedTailList",
    "Collector",
    "FirstLastComparator",
    "RandomGenerator",
    "TailCollector",
    "collect",
    "iter_nullable",
    "last",
]
