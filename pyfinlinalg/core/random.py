"""
Deterministic uniform random number generation.

The library's Monte Carlo code needs a generator that, given a seed,
produces a repeatable sequence of doubles in [0, 1). Only that contract is
relied upon. The default implementation is NumPy's MT19937 Mersenne
Twister; reproducing any particular legacy bit stream is not attempted.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable
import numpy as np
from numpy.typing import NDArray

from pyfinlinalg.core.exceptions import InvalidArgumentError


@runtime_checkable
class UniformGenerator(Protocol):
    """Repeatable source of doubles in [0, 1)."""

    def next_double(self) -> float:
        """Return the next double in [0, 1)."""
        ...


class MersenneTwister:
    """
    Mersenne Twister (MT19937) uniform generator.

    Two instances created with the same seed produce identical sequences.
    Instances are NOT shared between threads; create one per consumer.
    """

    def __init__(self, seed: int):
        self._seed = seed
        self._generator = np.random.Generator(np.random.MT19937(seed))

    @property
    def seed(self) -> int:
        """Seed this generator was created with."""
        return self._seed

    def next_double(self) -> float:
        """Return the next double in [0, 1)."""
        return float(self._generator.random())

    def next_doubles(self, size: int) -> NDArray[np.floating[Any]]:
        """Return the next `size` doubles in [0, 1) as an array."""
        return self._generator.random(size)

    def __repr__(self) -> str:
        return f"MersenneTwister(seed={self._seed})"


def seed(value: int) -> MersenneTwister:
    """
    Create a generator for the given seed.

    Args:
        value: Non-negative integer seed

    Raises:
        InvalidArgumentError: If value is not a non-negative integer
    """
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)) or value < 0:
        raise InvalidArgumentError(
            f"seed: expected a non-negative integer, got {value!r}",
            argument='seed',
            value=value,
        )
    return MersenneTwister(int(value))


def random_correlation_matrix(
    n: int,
    generator: UniformGenerator,
    number_of_factors: int | None = None,
) -> NDArray[np.floating[Any]]:
    """
    Build a valid correlation matrix from generated factor loadings.

    Draws an n x q loading matrix with entries uniform in [-1, 1), rescales
    each row to unit length and returns B B'. The result is symmetric,
    positive semi-definite, has exactly unit diagonal up to rounding (the
    diagonal is then set to 1.0) and rank at most q.

    Args:
        n: Matrix dimension
        generator: Any UniformGenerator
        number_of_factors: Rank q of the loading matrix; defaults to n

    Returns:
        n x n correlation matrix
    """
    q = n if number_of_factors is None else number_of_factors
    if n < 1 or q < 1:
        raise InvalidArgumentError(
            f"random_correlation_matrix: n and number_of_factors must be positive, "
            f"got n={n}, number_of_factors={q}",
            argument='n',
            value=n,
        )

    loadings = np.array(
        [[2.0 * generator.next_double() - 1.0 for _ in range(q)] for _ in range(n)]
    )
    norms = np.linalg.norm(loadings, axis=1)
    norms[norms == 0.0] = 1.0
    loadings /= norms[:, np.newaxis]

    correlation = loadings @ loadings.T
    correlation = 0.5 * (correlation + correlation.T)
    np.fill_diagonal(correlation, 1.0)
    return correlation
