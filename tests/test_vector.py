"""Tests for the Vector3 value type."""
import dataclasses

import numpy as np
import pytest

from velocity_sampler import Vector3


class TestVector3:
    def test_arithmetic(self):
        a = Vector3(1, 2, 3)
        b = Vector3(0.5, -1, 2)
        assert a + b == Vector3(1.5, 1, 5)
        assert a - b == Vector3(0.5, 3, 1)
        assert a * 2 == Vector3(2, 4, 6)
        assert 2 * a == Vector3(2, 4, 6)
        assert a / 2 == Vector3(0.5, 1, 1.5)

    def test_zero_and_projection(self):
        assert Vector3.zero() == Vector3()
        assert Vector3(4, 5, 6).xy == (4, 5)
        assert tuple(Vector3(4, 5, 6)) == (4, 5, 6)

    def test_from_planar(self):
        assert Vector3.from_planar((7, 8)) == Vector3(7.0, 8.0, 0.0)

    def test_array_conversion(self):
        v = Vector3.from_array(np.array([1.5, 2.5, 3.5]))
        assert v == Vector3(1.5, 2.5, 3.5)
        np.testing.assert_array_equal(v.to_array(), [1.5, 2.5, 3.5])
        assert isinstance(v.x, float)

    def test_immutable(self):
        v = Vector3(1, 2, 3)
        with pytest.raises(dataclasses.FrozenInstanceError):
            v.x = 5  # type: ignore[misc]
