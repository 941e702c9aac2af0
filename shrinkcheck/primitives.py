# shrinkcheck/primitives.py
"""
Reference leaf arbitraries.

* ``integer(min_value, max_value)`` – uniform integers, shrinking by halving
  the distance toward the in-range value closest to zero; biasable toward the
  range boundaries and zero.
* ``constant(value)`` – always the same value, never shrinks.
"""

from __future__ import annotations

from typing import Iterator, List, Optional, TypeVar

from shrinkcheck.arbitrary import Arbitrary, Biased
from shrinkcheck.errors import InvalidParameterError
from shrinkcheck.frequency import FrequencyArbitrary, FrequencyConstraints, WeightedArbitrary
from shrinkcheck.rng import Random
from shrinkcheck.shrinkable import Shrinkable

__all__ = [
    "IntegerArbitrary",
    "ConstantArbitrary",
    "integer",
    "constant",
    "shrink_integer",
]

T = TypeVar("T")


def shrink_integer(current: int, target: int, try_target_asap: bool) -> Iterator[Shrinkable[int]]:
    """Shrinks of *current* moving toward *target*.

    Candidates halve the remaining distance each time.  Each candidate then
    shrinks toward the previously emitted candidate, so a value is never
    proposed twice along a path.  With *try_target_asap* the target itself is
    proposed first.
    """
    gap = current - target
    if gap == 0:
        return
    sign = 1 if gap > 0 else -1
    distance = abs(gap)
    previous: Optional[int] = None if try_target_asap else target
    step = distance if try_target_asap else distance // 2
    while step > 0:
        candidate = target if step == distance else current - sign * step
        yield _integer_node(candidate, target, previous)
        previous = candidate
        step //= 2


def _integer_node(value: int, target: int, previous: Optional[int]) -> Shrinkable[int]:
    if previous is None:
        return Shrinkable(value, lambda: shrink_integer(value, target, True))
    return Shrinkable(value, lambda: shrink_integer(value, previous, False))


class IntegerArbitrary(Arbitrary[int]):
    """Integers in ``[min_value, max_value]``."""

    def __init__(self, min_value: int, max_value: int) -> None:
        for name, bound in (("min_value", min_value), ("max_value", max_value)):
            if isinstance(bound, bool) or not isinstance(bound, int):
                raise InvalidParameterError(name, bound, "an integer")
        if min_value > max_value:
            raise InvalidParameterError(
                "max_value", max_value, f"greater than or equal to min_value {min_value}"
            )
        self.min_value = min_value
        self.max_value = max_value
        self.target = min(max(0, min_value), max_value)

    @classmethod
    def _shrinking_toward(cls, min_value: int, max_value: int, target: int) -> "IntegerArbitrary":
        # corner-case sub-ranges keep shrinking toward the target of the full range
        arb = cls(min_value, max_value)
        arb.target = target
        return arb

    def generate(self, random: Random) -> Shrinkable[int]:
        value = random.next_int(self.min_value, self.max_value)
        return _integer_node(value, self.target, None)

    def _bias(self, frequency: int) -> Arbitrary[int]:
        if self.min_value == self.max_value:
            return self
        return Biased(self, self._corner_cases(), frequency)

    def _corner_cases(self) -> Arbitrary[int]:
        width = (self.max_value - self.min_value).bit_length()
        ranges = [
            (self.min_value, min(self.min_value + width, self.max_value)),
            (max(self.max_value - width, self.min_value), self.max_value),
        ]
        if self.min_value < 0 < self.max_value:
            ranges.append((max(-width, self.min_value), min(width, self.max_value)))
        weighted: List[WeightedArbitrary[int]] = [
            WeightedArbitrary(IntegerArbitrary._shrinking_toward(low, high, self.target), 1)
            for low, high in ranges
        ]
        return FrequencyArbitrary.from_weighted(weighted, FrequencyConstraints(), "integer")

    def __repr__(self) -> str:
        return f"integer({self.min_value}, {self.max_value})"


class ConstantArbitrary(Arbitrary[T]):
    """Always produces *value*."""

    def __init__(self, value: T) -> None:
        self.value = value

    def generate(self, random: Random) -> Shrinkable[T]:
        return Shrinkable(self.value)

    def __repr__(self) -> str:
        return f"constant({self.value!r})"


def integer(min_value: int, max_value: int) -> Arbitrary[int]:
    return IntegerArbitrary(min_value, max_value)


def constant(value: T) -> Arbitrary[T]:
    return ConstantArbitrary(value)
