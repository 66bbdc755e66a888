"""Geometric primitives for structural elements."""

from __future__ import annotations

import math

from pydantic import BaseModel

from structural_dedup.config import COORDINATE_DECIMALS, POINT_TOLERANCE


class Point2D(BaseModel):
    """2D point in the XY plane (plan view)."""

    x: float
    y: float

    def distance_to(self, other: Point2D) -> float:
        """Euclidean distance to another point."""
        return math.sqrt((self.x - other.x) ** 2 + (self.y - other.y) ** 2)

    def rounded(self) -> tuple[float, float]:
        """Coordinates rounded to the dedup tolerance."""
        return (round(self.x, COORDINATE_DECIMALS), round(self.y, COORDINATE_DECIMALS))

    def is_close(self, other: Point2D, tolerance: float = POINT_TOLERANCE) -> bool:
        """Within ``tolerance`` on both axes."""
        return math.isclose(self.x, other.x, abs_tol=tolerance) and math.isclose(
            self.y, other.y, abs_tol=tolerance
        )

    # Equality and hash both go through rounded() so they agree with dedup keys.
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point2D):
            return NotImplemented
        return self.rounded() == other.rounded()

    def __hash__(self) -> int:
        return hash(self.rounded())


class Point3D(BaseModel):
    """3D point."""

    x: float
    y: float
    z: float

    def distance_to(self, other: Point3D) -> float:
        """Euclidean distance to another point."""
        return math.sqrt(
            (self.x - other.x) ** 2
            + (self.y - other.y) ** 2
            + (self.z - other.z) ** 2
        )

    def rounded(self) -> tuple[float, float, float]:
        """Coordinates rounded to the dedup tolerance."""
        return (
            round(self.x, COORDINATE_DECIMALS),
            round(self.y, COORDINATE_DECIMALS),
            round(self.z, COORDINATE_DECIMALS),
        )


def polygon_area(points: list[Point2D]) -> float:
    """Area of a closed polygon using the shoelace formula. Returns absolute value."""
    n = len(points)
    if n < 3:
        return 0.0
    area = 0.0
    for i in range(n):
        j = (i + 1) % n
        area += points[i].x * points[j].y
        area -= points[j].x * points[i].y
    return abs(area) / 2.0
