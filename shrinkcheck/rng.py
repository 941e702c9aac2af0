# shrinkcheck/rng.py
"""
Cloneable random source used by every arbitrary.

All randomness consumed while generating a value passes through a single
``Random`` instance. Identical seed gives an identical call sequence, which
gives identical values. ``clone()`` is the only supported way to fork an
independent stream.
"""

from __future__ import annotations

import random as _random
from typing import Any, Optional

__all__ = ["Random"]


class Random:
    """Sequential, single-writer pseudo-random stream.

    Every draw advances the internal state in place.  Sharing one instance
    between two logical draws without cloning it breaks reproducibility.
    """

    def __init__(self, seed: Optional[int] = None, *, _state: Any = None) -> None:
        self._rng = _random.Random()
        if _state is not None:
            self._rng.setstate(_state)
        else:
            self._rng.seed(seed)
        self._seed = seed

    @property
    def seed(self) -> Optional[int]:
        """Seed of the root stream this instance descends from."""
        return self._seed

    def clone(self) -> "Random":
        """Fork a stream starting from this instance's current state.

        The clone's future draws are fully determined by the state at the
        clone point; drawing from it never moves this instance.
        """
        return Random(self._seed, _state=self._rng.getstate())

    # -- draws -------------------------------------------------------------

    def next_int(self, min_value: int, max_value: int) -> int:
        """Return an integer in ``[min_value, max_value]`` (both inclusive)."""
        if min_value > max_value:
            raise ValueError(f"empty range [{min_value}, {max_value}]")
        return self._rng.randint(min_value, max_value)

    def next_bits(self, bits: int) -> int:
        """Return a non-negative integer made of *bits* random bits."""
        if bits <= 0:
            return 0
        return self._rng.getrandbits(bits)

    def next_double(self) -> float:
        """Return a float in ``[0.0, 1.0)``."""
        return self._rng.random()

    def next_boolean(self) -> bool:
        return self._rng.getrandbits(1) == 1

    def __repr__(self) -> str:
        return f"Random(seed={self._seed!r})"
