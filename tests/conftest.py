# tests/conftest.py
"""
Shared fixtures and helper arbitraries for the shrinkcheck test-suite.
"""

import itertools

import pytest

from shrinkcheck.arbitrary import Arbitrary
from shrinkcheck.primitives import IntegerArbitrary
from shrinkcheck.rng import Random
from shrinkcheck.shrinkable import Shrinkable


class EndlessArbitrary(Arbitrary):
    """Always 0, with infinitely many shrinks, each of which shrinks again."""

    def generate(self, random):
        return _endless(0)


def _endless(value):
    return Shrinkable(value, lambda: (_endless(v) for v in itertools.count(value + 1)))


class SuccessorArbitrary(Arbitrary):
    """Always 0; each value v has exactly one shrink, v + 1, forever."""

    def generate(self, random):
        return _successor(0)


def _successor(value):
    return Shrinkable(value, lambda: iter([_successor(value + 1)]))


def fixed_integer(value, target=0):
    """An integer arbitrary that always draws *value* and shrinks toward *target*."""
    return IntegerArbitrary._shrinking_toward(value, value, target)


def collect(node, depth=3):
    """Nested (value, [children]) view of a Shrinkable, down to *depth*."""
    if depth == 0:
        return (node.value, [])
    return (node.value, [collect(child, depth - 1) for child in node.shrinks()])


@pytest.fixture
def rng():
    return Random(42)


@pytest.fixture(params=[0, 1, 7, 42, 2024])
def seed(request):
    return request.param


@pytest.fixture
def endless():
    return EndlessArbitrary()


@pytest.fixture
def successor():
    return SuccessorArbitrary()
