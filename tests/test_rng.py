# tests/test_rng.py
"""
Tests for the cloneable random source.
"""

import pytest

from shrinkcheck.rng import Random


def _draws(random, count=20):
    return [random.next_int(0, 1_000_000) for _ in range(count)]


class TestRandom:

    def test_same_seed_same_draws(self):
        assert _draws(Random(5)) == _draws(Random(5))

    def test_different_seeds_differ(self):
        assert _draws(Random(5)) != _draws(Random(6))

    def test_draws_advance_state(self):
        r = Random(5)
        first = _draws(r)
        second = _draws(r)
        assert first != second

    def test_next_int_inclusive_bounds(self):
        r = Random(1)
        values = {r.next_int(3, 5) for _ in range(500)}
        assert values == {3, 4, 5}

    def test_next_int_single_value(self):
        assert Random(1).next_int(7, 7) == 7

    def test_next_int_empty_range(self):
        with pytest.raises(ValueError):
            Random(1).next_int(5, 4)

    def test_next_double_range(self):
        r = Random(9)
        assert all(0.0 <= r.next_double() < 1.0 for _ in range(200))

    def test_next_bits(self):
        r = Random(9)
        assert all(0 <= r.next_bits(4) < 16 for _ in range(200))
        assert r.next_bits(0) == 0

    def test_next_boolean_both_values(self):
        r = Random(3)
        assert {r.next_boolean() for _ in range(100)} == {True, False}


class TestClone:

    def test_clone_replays_parent_future(self):
        r = Random(11)
        _draws(r, 3)
        clone = r.clone()
        assert _draws(clone) == _draws(r)

    def test_clone_does_not_move_parent(self):
        r = Random(11)
        reference = Random(11)
        clone = r.clone()
        _draws(clone, 50)
        assert _draws(r) == _draws(reference)

    def test_parent_does_not_move_clone(self):
        r = Random(11)
        clone = r.clone()
        expected = _draws(Random(11))
        _draws(r, 50)
        assert _draws(clone) == expected

    def test_clone_keeps_seed(self):
        assert Random(17).clone().seed == 17
