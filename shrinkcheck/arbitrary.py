# shrinkcheck/arbitrary.py
"""
shrinkcheck/arbitrary.py
========================

The producer contract and its combinator algebra.

An ``Arbitrary[T]`` draws values of type ``T`` from a ``Random`` source and
returns them as ``Shrinkable`` nodes.  Every combinator returns a new
arbitrary and never mutates its receiver.  The combinators form a closed set
of variants, each holding its inner arbitrary and transform as data:

* ``Filtered``  – rejection sampling plus filtering of the shrink tree
* ``Mapped``    – value transform applied uniformly over the shrink tree
* ``Chained``   – dependent generation (flat-map)
* ``NoShrink``  – same values, no shrinks
* ``Biased``    – one draw over ``frequency`` delegated to a biased arbitrary
* ``Unbiased``  – pins the inner arbitrary to its unbiased behaviour

Usage::

    evens = integer(0, 10).filter(lambda v: v % 2 == 0)
    labels = evens.map(lambda v: f"#{v}")
    node = labels.generate(Random(42))
    print(node.value, [s.value for s in node.shrinks()])
"""

from __future__ import annotations

import abc
import logging
from typing import Any, Callable, Generic, Iterator, Optional, TypeVar

from shrinkcheck.errors import (
    InvalidBiasFrequencyError,
    InvalidParameterError,
    PredicateExhaustedError,
)
from shrinkcheck.rng import Random
from shrinkcheck.shrinkable import NextValue, Shrinkable

__all__ = [
    "Arbitrary",
    "Filtered",
    "Mapped",
    "Chained",
    "NoShrink",
    "Biased",
    "Unbiased",
    "FILTER_WARN_THRESHOLD",
]

logger = logging.getLogger(__name__)

T = TypeVar("T")
U = TypeVar("U")

#: Consecutive rejections after which ``Filtered`` logs a warning.
FILTER_WARN_THRESHOLD = 1000


class Arbitrary(abc.ABC, Generic[T]):
    """Abstract generator of values of type ``T`` along with their shrinks."""

    @abc.abstractmethod
    def generate(self, random: Random) -> Shrinkable[T]:
        """Draw a value and its shrink tree from *random*.

        Replaying with a ``Random`` in the same state yields the same value.
        The only side effect is the advancement of *random*.
        """

    def shrink(self, value: T, context: Optional[Any]) -> Iterator[NextValue[T]]:
        """One shrink step from a candidate previously produced by this arbitrary.

        Contexts produced by ``Shrinkable.to_next_value`` are the nodes
        themselves; anything else has no known continuation.
        """
        if isinstance(context, Shrinkable):
            for child in context.shrinks():
                yield child.to_next_value()

    # -- combinators -------------------------------------------------------

    def filter(
        self, predicate: Callable[[T], bool], max_attempts: Optional[int] = None
    ) -> "Arbitrary[T]":
        """Keep only values satisfying *predicate*, at every depth of the tree.

        Without *max_attempts*, generation retries forever: a predicate that
        the inner arbitrary never satisfies makes ``generate`` hang.  With it,
        ``PredicateExhaustedError`` is raised after that many rejections.
        """
        return Filtered(self, predicate, max_attempts)

    def map(self, mapper: Callable[[T], U]) -> "Arbitrary[U]":
        """Transform every produced value, shrinks included, with *mapper*."""
        return Mapped(self, mapper)

    def chain(self, fmapper: Callable[[T], "Arbitrary[U]"]) -> "Arbitrary[U]":
        """Generate from the arbitrary that *fmapper* builds out of a value of this one.

        Shrinks come from the dependent arbitrary only.
        """
        return Chained(self, fmapper)

    def no_shrink(self) -> "Arbitrary[T]":
        """Same values, but every node is a leaf of the shrink tree."""
        return NoShrink(self)

    def with_bias(self, frequency: int) -> "Arbitrary[T]":
        """Return a version of this arbitrary favouring corner cases.

        The biased behaviour is used roughly one time over *frequency*, which
        must be at least 2.  Arbitraries without a biased flavour return
        themselves.
        """
        if isinstance(frequency, bool) or not isinstance(frequency, int) or frequency < 2:
            raise InvalidBiasFrequencyError(frequency)
        return self._bias(frequency)

    def no_bias(self) -> "Arbitrary[T]":
        """Return an arbitrary that ignores any ``with_bias`` applied around it."""
        return Unbiased(self)

    def _bias(self, frequency: int) -> "Arbitrary[T]":
        return self


# ===================================================================== #
#  Combinator variants                                                   #
# ===================================================================== #

class Filtered(Arbitrary[T]):
    """Rejection sampling over *inner*, with a filtered shrink tree."""

    def __init__(
        self,
        inner: Arbitrary[T],
        predicate: Callable[[T], bool],
        max_attempts: Optional[int] = None,
    ) -> None:
        if max_attempts is not None and (
            isinstance(max_attempts, bool) or not isinstance(max_attempts, int) or max_attempts < 1
        ):
            raise InvalidParameterError("max_attempts", max_attempts, "a positive integer")
        self.inner = inner
        self.predicate = predicate
        self.max_attempts = max_attempts

    def generate(self, random: Random) -> Shrinkable[T]:
        attempts = 1
        node = self.inner.generate(random)
        while not self.predicate(node.value):
            if self.max_attempts is not None and attempts >= self.max_attempts:
                raise PredicateExhaustedError(attempts, node.value)
            if attempts == FILTER_WARN_THRESHOLD:
                logger.warning(
                    "filter rejected %d values in a row; predicate may be too restrictive",
                    attempts,
                )
            node = self.inner.generate(random)
            attempts += 1
        if attempts > 1:
            logger.debug("filter accepted %r after %d attempts", node.value, attempts)
        return node.filter(self.predicate)

    def _bias(self, frequency: int) -> Arbitrary[T]:
        return self.inner.with_bias(frequency).filter(self.predicate, self.max_attempts)


class Mapped(Arbitrary[U]):
    """Values of *inner* passed through *mapper*, tree shape unchanged."""

    def __init__(self, inner: Arbitrary[T], mapper: Callable[[T], U]) -> None:
        self.inner = inner
        self.mapper = mapper

    def generate(self, random: Random) -> Shrinkable[U]:
        return self.inner.generate(random).map(self.mapper)

    def _bias(self, frequency: int) -> Arbitrary[U]:
        return self.inner.with_bias(frequency).map(self.mapper)


class Chained(Arbitrary[U]):
    """Dependent generation: a value of *inner* selects the arbitrary to draw from."""

    def __init__(self, inner: Arbitrary[T], fmapper: Callable[[T], Arbitrary[U]]) -> None:
        self.inner = inner
        self.fmapper = fmapper

    def generate(self, random: Random) -> Shrinkable[U]:
        # both draws consume the same fork; the caller's stream is not moved
        step = random.clone()
        base = self.inner.generate(step)
        dependent = self.fmapper(base.value)
        return dependent.generate(step)

    def _bias(self, frequency: int) -> Arbitrary[U]:
        return self.inner.with_bias(frequency).chain(self.fmapper)


class NoShrink(Arbitrary[T]):
    """Values of *inner* without any shrink."""

    def __init__(self, inner: Arbitrary[T]) -> None:
        self.inner = inner

    def generate(self, random: Random) -> Shrinkable[T]:
        return Shrinkable(self.inner.generate(random).value)

    def no_shrink(self) -> Arbitrary[T]:
        return self

    def _bias(self, frequency: int) -> Arbitrary[T]:
        return self.inner.with_bias(frequency).no_shrink()


class Biased(Arbitrary[T]):
    """Draws from *biased* one time over *frequency*, from *unbiased* otherwise."""

    def __init__(self, unbiased: Arbitrary[T], biased: Arbitrary[T], frequency: int) -> None:
        self.unbiased = unbiased
        self.biased = biased
        self.frequency = frequency

    def generate(self, random: Random) -> Shrinkable[T]:
        if random.next_int(1, self.frequency) == 1:
            return self.biased.generate(random)
        return self.unbiased.generate(random)

    def _bias(self, frequency: int) -> Arbitrary[T]:
        return Biased(self.unbiased, self.biased, frequency)


class Unbiased(Arbitrary[T]):
    """Calls straight through to *inner*; biasing it is a no-op."""

    def __init__(self, inner: Arbitrary[T]) -> None:
        self.inner = inner

    def generate(self, random: Random) -> Shrinkable[T]:
        return self.inner.generate(random)

    def no_bias(self) -> Arbitrary[T]:
        return self
