# main.py
from core.line import Line3
from core.vector import Vec3
from geometry.plane import Plane


def run_arithmetic(v1: Vec3, v2: Vec3):
    print("\n=== Arithmetic ===")
    print(f"v1 = {v1}, v2 = {v2}")

    print("> Vec3 + Vec3")
    print(v1 + v2)
    print("> Vec3 - Vec3")
    print(v1 - v2)
    print("> -Vec3")
    print(-v1)
    print("> Vec3 * f32")
    print(v1 * 2.0)
    print("> f32 * Vec3")
    print(2.0 * v1)
    print("> Vec3 / f32")
    print(v1 / 2.0)
    print("> f32 / Vec3")
    print(2.0 / v1)


def run_geometry(v1: Vec3, v2: Vec3):
    print("\n=== Geometry ===")
    print(f"|v2| = {v2.length()} (squared: {v2.length_squared()})")
    print(f"normalize(v2) = {v2.normalize()}")
    print(f"v1 . v2 = {v1.dot(v2)}")
    print(f"v1 x v2 = {v1.cross(v2)}")
    print(f"v1 x v2 (fast) = {v1.fast_cross(v2)}")

    spherical = v2.to_spherical()
    print(f"spherical(v2) = {spherical}")
    print(f"cartesian(spherical(v2)) = {spherical.to_cartesian()}")


def run_primitives():
    print("\n=== Line3 / Plane ===")
    line = Line3(origin=Vec3(0.0, 0.0, 0.0), direction=Vec3(1.0, 1.0, 1.0))
    for point in (Vec3(2.0, 2.0, 2.0), Vec3(1.0, 0.0, 0.0)):
        print(f"{point} on line: {line.is_point_on_line(point)}")

    plane = Plane.new(Vec3(0.0, 1.0, 0.0), 1.0)
    for point in (Vec3(2.0, 1.0, 0.0), Vec3(3.0, 2.0, 1.0)):
        print(f"distance from {point} to plane: {plane.distance_from(point)}")


def main():
    v1 = Vec3(0.0, 1.0, 2.0)
    v2 = Vec3(3.0, 4.0, 5.0)
    run_arithmetic(v1, v2)
    run_geometry(v1, v2)
    run_primitives()


if __name__ == "__main__":
    main()
