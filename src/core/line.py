# core/line.py
from dataclasses import dataclass

import numpy as np

from core.vector import DTYPE, Vec3

# Tolerance between per-axis line parameters in is_point_on_line().
EPSILON = DTYPE(0.0001)


@dataclass(frozen=True)
class Line3:
    """
    Represents a line in 3D space through origin along direction.
    The direction does not need to be normalized and is not validated.
    """
    origin: Vec3
    direction: Vec3

    def at(self, t: float) -> Vec3:
        """
        Returns the point along the line at parameter t.
        """
        return self.origin + self.direction * t

    def is_point_on_line(self, point: Vec3) -> bool:
        """
        Solves origin + direction * t == point independently per axis and
        accepts the point when the three values of t agree within EPSILON.

        A zero direction component makes its t infinite or NaN, which
        usually rejects the point, so axis-aligned directions are not
        supported by this test.
        """
        with np.errstate(divide="ignore", invalid="ignore"):
            t_x = (point.x - self.origin.x) / self.direction.x
            t_y = (point.y - self.origin.y) / self.direction.y
            t_z = (point.z - self.origin.z) / self.direction.z
            x_equals_y = abs(t_x - t_y) <= EPSILON
            x_equals_z = abs(t_x - t_z) <= EPSILON
        return bool(x_equals_y and x_equals_z)
