"""Seedable RNG wrapper for reproducible sectors."""

import random
import time


class SectorRNG:
    """Wrapper around Python's random.Random for deterministic generation.

    Every roll made while building a sector goes through one instance of this
    class, so the same seed always produces the same sector.
    """

    def __init__(self, seed: int | None = None):
        """Initialize RNG with given seed.

        Args:
            seed: Integer seed; the current time in nanoseconds when omitted
        """
        if seed is None:
            seed = time.time_ns()
        self.seed = seed
        self.rng = random.Random(seed)

    def intn(self, n: int) -> int:
        """Return random integer in range [0, n).

        Args:
            n: Exclusive upper bound, must be positive

        Returns:
            Random integer between 0 and n - 1
        """
        if n <= 0:
            raise ValueError(f"Invalid bound for intn: {n} (must be > 0)")
        return self.rng.randrange(n)

    def randint(self, a: int, b: int) -> int:
        """Return random integer in range [a, b], inclusive."""
        return self.rng.randint(a, b)

    def roll(self, dice: int, sides: int) -> int:
        """Roll `dice` dice with `sides` faces each and return the total.

        Examples:
            >>> SectorRNG(1).roll(2, 6) in range(2, 13)
            True
        """
        return sum(self.rng.randint(1, sides) for _ in range(dice))

    def choice(self, seq):
        """Choose random element from non-empty sequence."""
        return self.rng.choice(seq)

    def sample(self, seq, k: int) -> list:
        """Choose k distinct elements from a sequence."""
        return self.rng.sample(seq, k)
