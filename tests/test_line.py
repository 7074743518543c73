from core.line import EPSILON, Line3
from core.vector import Vec3


def diagonal_line() -> Line3:
    return Line3(origin=Vec3(0, 0, 0), direction=Vec3(1, 1, 1))


def test_is_point_on_line():
    line = diagonal_line()
    assert line.is_point_on_line(Vec3(2, 2, 2))
    assert not line.is_point_on_line(Vec3(1, 0, 0))


def test_is_point_on_line_with_offset_origin():
    line = Line3(origin=Vec3(1, 2, 3), direction=Vec3(2, -1, 0.5))
    assert line.is_point_on_line(Vec3(5, 0, 4))
    assert line.is_point_on_line(line.at(-3.5))
    assert not line.is_point_on_line(Vec3(5, 0, 4.5))


def test_tolerance():
    line = diagonal_line()
    assert line.is_point_on_line(Vec3(1, 1, 1 + EPSILON / 2))
    assert not line.is_point_on_line(Vec3(1, 1, 1.01))


def test_at():
    line = Line3(origin=Vec3(1, 0, 0), direction=Vec3(0, 2, 0))
    assert line.at(0) == Vec3(1, 0, 0)
    assert line.at(1.5) == Vec3(1, 3, 0)


def test_axis_aligned_direction_is_degenerate():
    # 0/0 on the y and z axes gives NaN ratios, so even the origin is rejected.
    line = Line3(origin=Vec3(0, 0, 0), direction=Vec3(1, 0, 0))
    assert not line.is_point_on_line(Vec3(3, 0, 0))


def test_zero_direction_does_not_raise():
    line = Line3(origin=Vec3(0, 0, 0), direction=Vec3(0, 0, 0))
    assert not line.is_point_on_line(Vec3(1, 1, 1))
