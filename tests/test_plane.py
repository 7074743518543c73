import pytest
from numpy.testing import assert_allclose

from core.vector import Vec3
from geometry import Plane


def test_normal_is_normalized():
    plane = Plane.new(Vec3(0, 3, 4), 2.0)
    assert_allclose(plane.normal.length(), 1.0, atol=1e-6)
    assert_allclose(plane.normal.to_array(), [0, 0.6, 0.8], rtol=1e-6)
    assert plane.offset == 2


def test_zero_normal_is_accepted():
    plane = Plane.new(Vec3(0, 0, 0), 1.0)
    assert plane.normal == Vec3(0, 0, 0)
    assert plane.distance_from(Vec3(1, 2, 3)) == 0


def test_distance_from():
    plane = Plane.new(Vec3(0, 1, 0), 1.0)
    assert_allclose(plane.distance_from(Vec3(2, 1, 0)), 0.0, atol=1e-6)
    assert_allclose(plane.distance_from(Vec3(3, 2, 1)), 1.0, atol=1e-6)


def test_distance_is_signed():
    plane = Plane.new(Vec3(0, 0, 2), -1.0)
    assert_allclose(plane.distance_from(Vec3(5, 5, 1)), 2.0, atol=1e-6)
    assert_allclose(plane.distance_from(Vec3(5, 5, -4)), -3.0, atol=1e-6)


def test_point_lies_on_plane():
    plane = Plane.new(Vec3(1, 1, 1), 3.0)
    assert_allclose(plane.distance_from(plane.point), 0.0, atol=1e-5)
    assert_allclose(plane.point.length(), 3.0, rtol=1e-5)


def test_plane_is_immutable():
    plane = Plane.new(Vec3(0, 1, 0), 1.0)
    with pytest.raises(AttributeError):
        plane.offset = 2.0
