# core/vector.py
from dataclasses import dataclass
from numbers import Real
from typing import Iterable, Iterator

import numpy as np

from core.kernels import cross_swizzled

# Component type of every Vec3.
DTYPE = np.float32
DEFAULT_TOLERANCE = 1e-5


@dataclass(frozen=True)
class Vec3:
    """
    An immutable single-precision 3D vector.

    Every operation returns a new Vec3. Equality is exact component-wise
    float comparison; use is_close() when a tolerance is needed.
    Degenerate inputs never raise: zero-length vectors normalize to the
    zero vector and divisions by zero follow IEEE-754 (inf/NaN).
    """
    x: np.float32
    y: np.float32
    z: np.float32

    def __post_init__(self):
        object.__setattr__(self, "x", DTYPE(self.x))
        object.__setattr__(self, "y", DTYPE(self.y))
        object.__setattr__(self, "z", DTYPE(self.z))

    @staticmethod
    def zero() -> "Vec3":
        return Vec3(0.0, 0.0, 0.0)

    @staticmethod
    def from_iterable(values: Iterable[float]) -> "Vec3":
        x, y, z = values
        return Vec3(x, y, z)

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=DTYPE)

    def __iter__(self) -> Iterator[np.float32]:
        yield self.x
        yield self.y
        yield self.z

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------
    def __add__(self, other: "Vec3") -> "Vec3":
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vec3") -> "Vec3":
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> "Vec3":
        return self * -1.0

    def __mul__(self, scalar: float) -> "Vec3":
        if not isinstance(scalar, Real):
            return NotImplemented
        s = DTYPE(scalar)
        return Vec3(self.x * s, self.y * s, self.z * s)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> "Vec3":
        """
        Divides each component by the scalar. A zero scalar yields
        +-inf or NaN components.
        """
        if not isinstance(scalar, Real):
            return NotImplemented
        s = DTYPE(scalar)
        with np.errstate(divide="ignore", invalid="ignore"):
            return Vec3(self.x / s, self.y / s, self.z / s)

    def __rtruediv__(self, scalar: float) -> "Vec3":
        """
        Divides the scalar by each component independently, so
        2.0 / Vec3(-1, 0, 2) == Vec3(-2, inf, 1). This is not the inverse
        of the vector.
        """
        if not isinstance(scalar, Real):
            return NotImplemented
        s = DTYPE(scalar)
        with np.errstate(divide="ignore", invalid="ignore"):
            return Vec3(s / self.x, s / self.y, s / self.z)

    def __abs__(self) -> np.float32:
        # Magnitude, not component-wise abs.
        return self.length()

    # Named forms of the operators above.
    def add(self, other: "Vec3") -> "Vec3":
        return self + other

    def sub(self, other: "Vec3") -> "Vec3":
        return self - other

    def negate(self) -> "Vec3":
        return -self

    def scale(self, scalar: float) -> "Vec3":
        return self * scalar

    def divide_by(self, scalar: float) -> "Vec3":
        """Vec3 / scalar."""
        return self / scalar

    def divide_into(self, scalar: float) -> "Vec3":
        """scalar / Vec3, component by component."""
        return scalar / self

    def absolute(self) -> np.float32:
        return abs(self)

    # ------------------------------------------------------------------
    # Norms
    # ------------------------------------------------------------------
    def length_squared(self) -> np.float32:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def length(self) -> np.float32:
        return np.sqrt(self.length_squared())

    def normalize(self) -> "Vec3":
        """
        Returns the unit vector pointing along self, or the zero vector
        when self has zero length.
        """
        length_sq = self.length_squared()
        if length_sq == 0.0:
            return Vec3.zero()
        return self * (DTYPE(1.0) / np.sqrt(length_sq))

    # ------------------------------------------------------------------
    # Products
    # ------------------------------------------------------------------
    def dot(self, other: "Vec3") -> np.float32:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Vec3") -> "Vec3":
        """Right-handed cross product: X.cross(Y) == Z."""
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )

    def fast_cross(self, other: "Vec3") -> "Vec3":
        """
        Same result as cross(), computed by the compiled swizzle kernel.
        Kept separate so the two formulations can be compared.
        """
        out = np.empty(3, dtype=DTYPE)
        cross_swizzled(self.to_array(), other.to_array(), out)
        return Vec3(out[0], out[1], out[2])

    # ------------------------------------------------------------------
    # Coordinate systems
    # ------------------------------------------------------------------
    def to_spherical(self) -> "Vec3":
        """
        Maps cartesian (x, y, z) to (rho, phi, theta):
        rho is the radius, phi the zenith angle from +z and theta the
        azimuth in the xy-plane from +x.
        """
        xy_sq = self.x * self.x + self.y * self.y
        rho = np.sqrt(xy_sq + self.z * self.z)
        phi = np.arctan2(np.sqrt(xy_sq), self.z)
        theta = np.arctan2(self.y, self.x)
        return Vec3(rho, phi, theta)

    def to_cartesian(self) -> "Vec3":
        """
        Inverse of to_spherical(). The fields are read as (rho, phi, theta),
        the radius always comes first.
        """
        rho, phi, theta = self.x, self.y, self.z
        sin_phi = np.sin(phi)
        return Vec3(
            rho * sin_phi * np.cos(theta),
            rho * sin_phi * np.sin(theta),
            rho * np.cos(phi)
        )

    def is_close(self, other: "Vec3", tolerance: float = DEFAULT_TOLERANCE) -> bool:
        """Component-wise comparison with an absolute tolerance."""
        return bool(np.allclose(self.to_array(), other.to_array(), rtol=0.0, atol=tolerance))

    def __repr__(self) -> str:
        return f"Vec3({self.x}, {self.y}, {self.z})"
