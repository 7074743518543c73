# geometry/plane.py
from dataclasses import dataclass

import numpy as np

from core.vector import DTYPE, Vec3


@dataclass(frozen=True)
class Plane:
    """
    An oriented plane: the points p with normal.dot(p) == offset.
    Build it with Plane.new(), which stores the normal at unit length.
    """
    normal: Vec3
    offset: np.float32

    @classmethod
    def new(cls, normal: Vec3, offset: float) -> "Plane":
        # A zero normal normalizes to the zero vector and is kept as is.
        return cls(normal.normalize(), DTYPE(offset))

    @property
    def point(self) -> Vec3:
        """The point of the plane closest to the origin."""
        return self.normal * self.offset

    def distance_from(self, point: Vec3) -> np.float32:
        """
        Signed distance of point to the plane, positive on the side the
        normal points to.
        """
        # 0 = ax + by + cz - (a*x0 + b*y0 + c*z0)
        a = self.normal.x
        b = self.normal.y
        c = self.normal.z
        p0 = self.point
        d = -(a * p0.x + b * p0.y + c * p0.z)
        return a * point.x + b * point.y + c * point.z + d
