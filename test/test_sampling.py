import random

import numpy as np
import pytest

from ndcore import sampling
from ndcore.exceptions import InvalidShapeError


class CountingSource:
    """Deterministic source returning 0.0, 0.1, 0.2, ... in order."""

    def __init__(self):
        self.calls = 0

    def random(self) -> float:
        value = (self.calls % 10) / 10
        self.calls += 1
        return value


def test_rand_draws_in_row_major_order():
    source = CountingSource()

    a = sampling.rand((2, 3), source=source)

    assert source.calls == 6
    assert a.shape == (2, 3)
    np.testing.assert_array_almost_equal(a.data, [0.0, 0.1, 0.2, 0.3, 0.4, 0.5])


def test_uniform_scales_draws():
    a = sampling.uniform((4,), low=-2.0, high=2.0, source=CountingSource())

    np.testing.assert_array_almost_equal(a.data, [-2.0, -1.6, -1.2, -0.8])


def test_stdlib_random_is_a_source():
    a = sampling.rand((3, 3), source=random.Random(42))
    b = sampling.rand((3, 3), source=random.Random(42))

    assert a == b


def test_default_source_values_in_unit_interval():
    a = sampling.rand((10, 10))

    assert a.shape == (10, 10)
    assert all(0.0 <= value < 1.0 for value in a.data)
    assert sampling.default_source() is sampling.default_source()


def test_empty_shape_draws_nothing():
    source = CountingSource()

    assert sampling.rand((0, 5), source=source).size == 0
    assert source.calls == 0


def test_rand_validates_shape():
    with pytest.raises(InvalidShapeError):
        sampling.rand(())


def test_uniform_rejects_inverted_bounds():
    with pytest.raises(ValueError, match="smaller than lower bound"):
        sampling.uniform((2,), low=1.0, high=0.0)
