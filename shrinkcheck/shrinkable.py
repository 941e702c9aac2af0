# shrinkcheck/shrinkable.py
"""
Generated values and their lazy shrink trees.

This module provides:
  - NextValue: a (value, context) shrink candidate
  - Shrinkable: a value plus a re-enumerable, lazy sequence of smaller
    Shrinkable nodes, with ``map`` and ``filter`` acting on the whole tree
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, Iterator, Optional, TypeVar

__all__ = ["NextValue", "Shrinkable"]

T = TypeVar("T")
U = TypeVar("U")


def _no_shrinks() -> Iterator[Any]:
    return iter(())


@dataclass(frozen=True)
class NextValue(Generic[T]):
    """A shrink candidate.

    ``context`` is opaque to every combinator: only the arbitrary that
    produced the candidate interprets it when asked for the next step.
    """
    value: T
    context: Optional[Any] = None


class Shrinkable(Generic[T]):
    """A generated value together with its lazy tree of smaller candidates.

    *shrinker* is a zero-argument callable returning a fresh iterator each
    time it is called, so ``shrinks()`` can be enumerated any number of
    times.  Nothing is cached: every enumeration recomputes.
    """

    __slots__ = ("_value", "_shrinker")

    def __init__(
        self,
        value: T,
        shrinker: Optional[Callable[[], Iterable["Shrinkable[T]"]]] = None,
    ) -> None:
        self._value = value
        self._shrinker = shrinker or _no_shrinks

    @property
    def value(self) -> T:
        return self._value

    def shrinks(self) -> Iterator["Shrinkable[T]"]:
        """Lazily enumerate the direct shrinks of this node."""
        return iter(self._shrinker())

    def has_shrinks(self) -> bool:
        """True if at least one direct shrink exists (forces one element)."""
        return next(self.shrinks(), None) is not None

    def to_next_value(self) -> NextValue[T]:
        """Package this node as a shrink candidate whose context is the node."""
        return NextValue(self._value, self)

    # -- tree transforms ---------------------------------------------------

    def map(self, mapper: Callable[[T], U]) -> "Shrinkable[U]":
        """Apply *mapper* to every value of the tree, keeping its shape."""
        source = self

        def shrinker() -> Iterator[Shrinkable[U]]:
            for child in source.shrinks():
                yield child.map(mapper)

        return Shrinkable(mapper(self._value), shrinker)

    def filter(self, predicate: Callable[[T], bool]) -> "Shrinkable[T]":
        """Restrict the descendants of this node to values satisfying *predicate*.

        The root value is kept as is.  A rejected candidate is dropped but its
        own shrinks are searched in its place.
        """
        source = self
        return Shrinkable(self._value, lambda: _filtered(source.shrinks(), predicate))

    def __repr__(self) -> str:
        return f"Shrinkable({self._value!r})"


def _filtered(
    candidates: Iterator[Shrinkable[T]], predicate: Callable[[T], bool]
) -> Iterator[Shrinkable[T]]:
    for candidate in candidates:
        if predicate(candidate.value):
            yield candidate.filter(predicate)
        else:
            yield from _filtered(candidate.shrinks(), predicate)
