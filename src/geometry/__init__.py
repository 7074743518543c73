from geometry.plane import Plane

__all__ = ["Plane"]
