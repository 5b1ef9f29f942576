"""
Random source protocol - lets tests replace the serve and jitter draws
"""

from typing import Protocol


class RandomSource(Protocol):
    """
    Protocol for the random draws of the simulation.

    ``numpy.random.Generator`` satisfies it, as does ``random.Random``.
    Tests can pass a stub returning fixed values to assert exact trajectories.
    """

    def random(self) -> float:
        """Return a float uniformly drawn from [0, 1)"""
        ...
