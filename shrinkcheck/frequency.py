# shrinkcheck/frequency.py
"""
Weighted choice among alternative arbitraries.

``FrequencyArbitrary`` selects one entry per ``generate`` call, with
probability proportional to its weight, and delegates to it entirely (value
and shrinks).  ``one_of`` is the equal-weights entry point.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Iterator, Optional, Sequence, Tuple, TypeVar

from shrinkcheck.arbitrary import Arbitrary
from shrinkcheck.errors import EmptyChoiceError, InvalidWeightError
from shrinkcheck.rng import Random
from shrinkcheck.shrinkable import Shrinkable

__all__ = [
    "WeightedArbitrary",
    "FrequencyConstraints",
    "FrequencyArbitrary",
    "one_of",
]

T = TypeVar("T")


@dataclass(frozen=True)
class WeightedArbitrary(Generic[T]):
    """An arbitrary and its relative weight."""
    arbitrary: Arbitrary[T]
    weight: int


@dataclass(frozen=True)
class FrequencyConstraints:
    """Extra configuration of a weighted choice.

    with_cross_shrink
        When an entry other than the first is selected, offer a value of the
        first entry as the very first shrink.
    """
    with_cross_shrink: bool = False


class FrequencyArbitrary(Arbitrary[T]):
    """Weighted choice over an ordered, non-empty set of arbitraries."""

    def __init__(
        self,
        entries: Tuple[WeightedArbitrary[T], ...],
        constraints: FrequencyConstraints,
        label: str,
    ) -> None:
        self.entries = entries
        self.constraints = constraints
        self.label = label
        self.total_weight = sum(entry.weight for entry in entries)

    @classmethod
    def from_weighted(
        cls,
        weighted: Sequence[WeightedArbitrary[T]],
        constraints: Optional[FrequencyConstraints] = None,
        label: str = "frequency",
    ) -> "FrequencyArbitrary[T]":
        """Build a weighted choice, failing fast on an empty set or a bad weight.

        *label* only appears in error messages and ``repr``.
        """
        entries = tuple(weighted)
        if not entries:
            raise EmptyChoiceError(label)
        for index, entry in enumerate(entries):
            weight = entry.weight
            if isinstance(weight, bool) or not isinstance(weight, int) or weight < 1:
                raise InvalidWeightError(weight, index, label)
        return cls(entries, constraints or FrequencyConstraints(), label)

    def generate(self, random: Random) -> Shrinkable[T]:
        cross = None
        if self.constraints.with_cross_shrink and len(self.entries) > 1:
            cross = random.clone()
        index = self._select(random.next_int(0, self.total_weight - 1))
        node = self.entries[index].arbitrary.generate(random)
        if index == 0 or cross is None:
            return node
        first = self.entries[0].arbitrary
        source = cross

        def shrinker() -> Iterator[Shrinkable[T]]:
            yield first.generate(source.clone())
            yield from node.shrinks()

        return Shrinkable(node.value, shrinker)

    def _select(self, draw: int) -> int:
        cumulative = 0
        for index, entry in enumerate(self.entries):
            cumulative += entry.weight
            if draw < cumulative:
                return index
        # unreachable while draw < total_weight
        raise AssertionError(f"{self.label}: draw {draw} beyond total weight {self.total_weight}")

    def _bias(self, frequency: int) -> Arbitrary[T]:
        return FrequencyArbitrary(
            tuple(
                WeightedArbitrary(entry.arbitrary.with_bias(frequency), entry.weight)
                for entry in self.entries
            ),
            self.constraints,
            self.label,
        )

    def __repr__(self) -> str:
        return f"{self.label}({len(self.entries)} entries)"


def one_of(*arbitraries: Arbitrary[T]) -> Arbitrary[T]:
    """Equiprobable choice between *arbitraries*.

    Expects at least one arbitrary: an empty call raises ``EmptyChoiceError``.
    """
    weighted = [WeightedArbitrary(arbitrary, 1) for arbitrary in arbitraries]
    return FrequencyArbitrary.from_weighted(weighted, FrequencyConstraints(), "one_of")
