"""Oriented half-space used to bound the camera frustum."""

import numpy as np


class Plane:
    """Plane ``dot(normal, x) = distance`` with an inside half-space.

    A point is on the correct side when ``dot(point, normal) >= distance``,
    so the normal points into the kept half-space.
    """

    def __init__(self, normal=(1.0, 0.0, 0.0), distance: float = 0.0) -> None:
        self.normal: np.ndarray = np.array(normal, dtype=float)
        self.distance: float = float(distance)

    def set_from_points(self, p1, p2, p3) -> None:
        """Set the plane through three points.

        The normal is ``normalize(cross(p2 - p1, p3 - p1))``, so the winding
        of the three points decides which side is inside.
        """
        p1 = np.asarray(p1, dtype=float)
        p1p2 = np.asarray(p2, dtype=float) - p1
        p1p3 = np.asarray(p3, dtype=float) - p1

        normal = np.cross(p1p2, p1p3)
        self.normal = normal / np.linalg.norm(normal)
        self.distance = float(np.dot(self.normal, p1))

    def set_from_distance_normal(self, normal, distance: float) -> None:
        """Assign the parameters directly; ``normal`` must already be unit length."""
        self.normal = np.array(normal, dtype=float)
        self.distance = float(distance)

    def signed_distance(self, point) -> float:
        return float(np.dot(point, self.normal)) - self.distance

    def is_point_correct_side(self, point) -> bool:
        """Return ``True`` if ``point`` lies on or inside the plane."""
        return bool(np.dot(point, self.normal) >= self.distance)

    def points_correct_side(self, points) -> np.ndarray:
        """Vectorised :meth:`is_point_correct_side` for an ``(N, 3)`` array."""
        points = np.asarray(points, dtype=float).reshape(-1, 3)
        return points @ self.normal >= self.distance

    def __repr__(self) -> str:
        return f"Plane(normal={self.normal.tolist()}, distance={self.distance})"
