"""Random Source Protocol Interface.

This module defines the protocol (interface) for the randomness consumed by
fight resolution.
"""

from typing import Protocol


class IRandomSource(Protocol):
    """Protocol for anything able to draw bounded integers.

    ``random.Random`` satisfies it, as does
    :class:`tetramaster.utils.rng.ScriptedRandom` for replays and tests.
    """

    def randint(self, a: int, b: int) -> int:
        """Return an integer N such that ``a <= N <= b``.

        Args:
            a: Lower bound (inclusive)
            b: Upper bound (inclusive)

        Returns:
            The drawn integer
        """
        ...
