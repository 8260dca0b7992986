import itertools
import random

import pytest

from algolab.rng import XorShiftRNG, histogram_spread


def test_uint32_known_first_value():
    assert XorShiftRNG(x=1).uint32() == 270369


def test_uint64_known_first_value():
    assert XorShiftRNG(y=1).uint64() == 272481


def test_same_seed_same_sequence():
    a = XorShiftRNG(x=12345, y=67890)
    b = XorShiftRNG(x=12345, y=67890)
    assert [a.uint32() for _ in range(20)] == [b.uint32() for _ in range(20)]
    assert [a.uint64() for _ in range(20)] == [b.uint64() for _ in range(20)]


def test_zero_seed_is_replaced():
    rng = XorShiftRNG()
    assert 0 < rng.uint32() < 2**32
    assert 0 < rng.uint64() < 2**64


def test_uint32n_in_range():
    rng = XorShiftRNG(x=99)
    values = [rng.uint32n(10) for _ in range(1000)]
    assert all(0 <= v < 10 for v in values)


def test_uint64n_inclusive_range():
    rng = XorShiftRNG(y=99)
    values = [rng.uint64n(10) for _ in range(1000)]
    assert all(0 <= v <= 10 for v in values)
    assert max(values) == 10


def test_uint64n_overflowing_bound_raises():
    with pytest.raises(ZeroDivisionError):
        XorShiftRNG(y=5).uint64n(2**64 - 1)


def test_uint32n_rejects_negative():
    with pytest.raises(ValueError):
        XorShiftRNG(x=5).uint32n(-1)


def test_histogram_spread_constant_draw():
    assert histogram_spread(lambda n: 0, 4, 100) == 100


def test_histogram_spread_even_draw():
    it = itertools.cycle(range(4))
    assert histogram_spread(lambda n: next(it), 4, 100) == 0


def test_histogram_spread_rejects_out_of_range():
    with pytest.raises(ValueError):
        histogram_spread(lambda n: n, 4, 10)


def test_histogram_spread_with_generators():
    rng = XorShiftRNG(x=7)
    spread = histogram_spread(rng.uint32n, 1000, 100000)
    assert 0 <= spread <= 100000
    math_spread = histogram_spread(random.Random(1).randrange, 1000, 100000)
    assert 0 <= math_spread <= 100000