"""Pseudo-random generator with richer helpers on top of ``random.Random``.

Handy in tests for generating random test data::

    rnd = RandomGenerator()
    name = rnd.next_string_between(5, 12, LETTERS)
    color = rnd.next_value_except(lambda: rnd.next_enum(Color), [Color.RED])

All ``random.Random`` methods remain available. Instances are seeded from
the explicit ``seed`` argument, else from configuration (see
``miscutils.config``), else from system randomness.
"""

import logging
import random
from enum import Enum
from typing import Callable, Collection, Iterable, Optional, Sequence, Type, TypeVar

from miscutils.config import get_max_attempts, get_random_seed

log = logging.getLogger(__name__)

T = TypeVar("T")
E = TypeVar("E", bound=Enum)

# --- Character sets for next_string / next_string_between ---

LOWERCASE_LETTERS = "abcdefghijklmnopqrstuvwxyz"
CAPITAL_LETTERS = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
NUMBERS = "0123456789"
LETTERS = LOWERCASE_LETTERS + CAPITAL_LETTERS
LETTERS_AND_SPACES = LETTERS + "     "
NUMBERS_AND_LETTERS = NUMBERS + LETTERS
NUMBERS_LETTERS_AND_SPACES = NUMBERS + LETTERS_AND_SPACES
HEXADECIMALS = NUMBERS + CAPITAL_LETTERS[:6]


def _check_attempts(max_attempts: int) -> int:
    if max_attempts < 1:
        raise ValueError(f"max_attempts must be >= 1, got {max_attempts}")
    return max_attempts


def _restore(cls, state, max_attempts):
    """Rebuild a pickled or copied RandomGenerator."""
    rnd = cls(max_attempts=max_attempts)
    rnd.setstate(state)
    return rnd


class RandomGenerator(random.Random):
    """``random.Random`` with choice, exclusion and string helpers.

    Args:
        seed: Optional seed. Defaults to the configured seed, if any.
        max_attempts: Retry budget for ``next_value_except``. Defaults to
            the configured ``random.max_attempts``.
    """

    def __init__(self, seed=None, *, max_attempts: Optional[int] = None):
        if seed is None:
            seed = get_random_seed()
        super().__init__(seed)
        self.max_attempts = _check_attempts(max_attempts) if max_attempts is not None else get_max_attempts()

    def __reduce__(self):
        # random.Random rebuilds from getstate() only; carry the retry budget too.
        return (_restore, (self.__class__, self.getstate(), self.max_attempts))

    def next_value_from(self, *values: T) -> T:
        """Randomly choose one of the given values.

        Raises:
            ValueError: if no values are given.
        """
        if not values:
            raise ValueError("No values to randomly choose from.")
        return values[self.randrange(len(values))]

    def next_value_in(self, values: Iterable[T]) -> T:
        """Randomly choose one element of an iterable (consumed entirely)."""
        return self.next_value_from(*values)

    def next_enum(self, enum_type: Type[E]) -> E:
        """Random member of an Enum type."""
        return self.next_value_in(enum_type)

    def next_value_except(
        self,
        generator: Callable[[], T],
        exceptions: Collection[T],
        max_attempts: Optional[int] = None,
    ) -> T:
        """Generate values until one is not among ``exceptions``.

        Args:
            generator: Produces the next random candidate,
                e.g. ``lambda: rnd.next_enum(Color)``.
            exceptions: Values that must not be returned.
            max_attempts: Override for the retry budget.

        Raises:
            RuntimeError: if no acceptable value shows up within the budget.
        """
        attempts = _check_attempts(max_attempts) if max_attempts is not None else self.max_attempts
        for _ in range(attempts):
            value = generator()
            if value not in exceptions:
                return value
        log.warning("Gave up generating a random value after %d attempts", attempts)
        raise RuntimeError("No suitable random value generated in a reasonable amount of attempts.")

    def next_string(self, length: int, characters: Sequence[str]) -> str:
        """Random string of exactly ``length`` characters."""
        return self.next_string_between(length, length, characters)

    def next_string_between(self, min_length: int, max_length: int, characters: Sequence[str]) -> str:
        """Random string with a length between the bounds (both inclusive).

        Swapped bounds are tolerated and negative lengths count as 0.
        """
        lower = max(0, min(min_length, max_length))
        upper = max(lower, min_length, max_length)
        length = self.randint(lower, upper)
        return "".join(self.next_character_from(characters) for _ in range(length))

    def next_character_from(self, characters: Sequence[str]) -> str:
        """Random character from a non-empty sequence of characters."""
        if not characters:
            raise ValueError("No characters to randomly choose from.")
        return characters[self.randrange(len(characters))]

    def shuffle_characters(self, characters: Iterable[str]) -> str:
        """Return the given characters in random order as a new string."""
        chars = list(characters)
        self.shuffle(chars)
        return "".join(chars)
