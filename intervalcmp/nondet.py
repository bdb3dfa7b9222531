"""Injected integer sources standing in for nondeterministic verifier input."""

import random
from abc import ABC, abstractmethod

from typing_extensions import override

# Range of a 32-bit signed int
INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


class ValueSourceExhausted(RuntimeError):
    """Raised when a finite value source has no values left."""


class ValueSource(ABC):

    @abstractmethod
    def next_int(self) -> int:
        """Return the next integer from this source."""
        pass


class FixedValues(ValueSource):
    """Replay a fixed sequence of integers, in order."""

    def __init__(self, *values: int):
        self.values: tuple[int, ...] = values
        self._position: int = 0

    @override
    def next_int(self) -> int:
        if self._position >= len(self.values):
            raise ValueSourceExhausted(
                f"FixedValues exhausted after {len(self.values)} value(s).\n"
                f"Hint: supply one value per bound the scenario reads"
            )
        value = self.values[self._position]
        self._position += 1
        return value


class RandomValues(ValueSource):
    """Draw integers uniformly from the closed range ``[low, high]``."""

    def __init__(self, low: int = INT_MIN, high: int = INT_MAX, seed: int | None = None):
        if low > high:
            raise ValueError(f"RandomValues low ({low}) must be <= high ({high})")
        self.low: int = low
        self.high: int = high
        self._rng: random.Random = random.Random(seed)

    @override
    def next_int(self) -> int:
        return self._rng.randint(self.low, self.high)
