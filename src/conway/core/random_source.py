"""Uniform random integer source used to seed initial grids."""

from typing import Optional
import numpy as np


class InvalidRangeError(ValueError):
    """Raised when a random range has its minimum above its maximum."""


class RandomSource:
    """Draws uniformly distributed integers from an inclusive range.

    Wraps a numpy ``Generator`` so the source can be seeded for
    reproducible runs or replaced outright in tests.
    """

    def __init__(self, seed: Optional[int] = None) -> None:
        """Initialize the source.

        Args:
            seed: Optional seed for reproducible sequences
        """
        self._rng = np.random.default_rng(seed)

    def seed(self, seed: Optional[int]) -> None:
        """Reset the underlying generator with a new seed."""
        self._rng = np.random.default_rng(seed)

    def uniform_int(self, minimum: int, maximum: int) -> int:
        """Draw an integer uniformly from [minimum, maximum].

        Args:
            minimum: Smallest possible value
            maximum: Largest possible value

        Returns:
            Random integer between minimum and maximum, inclusive

        Raises:
            InvalidRangeError: If minimum is greater than maximum
        """
        if minimum > maximum:
            raise InvalidRangeError(f"Minimum {minimum} cannot be greater than maximum {maximum}")

        return int(self._rng.integers(minimum, maximum, endpoint=True))


_default_source = RandomSource()


def default_random_source() -> RandomSource:
    """Get the process-wide random source."""
    return _default_source


def seed_default_random_source(seed: Optional[int]) -> None:
    """Reseed the process-wide random source."""
    _default_source.seed(seed)
