"""Injectable source of randomness for question generation."""

import random
from typing import MutableSequence, Sequence, TypeVar

T = TypeVar("T")


class RandomSource:
    """Uniform integer draws, list choice and in-place shuffle.

    Wraps a private ``random.Random`` so generators never touch the global
    generator. Pass a seed for reproducible sequences. Instances are not
    synchronized; give each thread its own source.
    """

    def __init__(self, seed: int | None = None):
        self._random = random.Random(seed)

    def randint(self, low: int, high: int) -> int:
        """Return a uniform integer in the closed range [low, high]."""
        return self._random.randint(low, high)

    def choose(self, items: Sequence[T]) -> T:
        """Return a uniformly chosen element of a non-empty sequence."""
        if not items:
            raise ValueError("cannot choose from an empty sequence")
        return self._random.choice(items)

    def shuffle(self, items: MutableSequence[T]) -> MutableSequence[T]:
        """Shuffle ``items`` in place and return it."""
        self._random.shuffle(items)
        return items
