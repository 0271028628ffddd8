"""
Triangle Geometry
=================
Pure geometric queries on three ordered points A, B, C.

A Triangle is a throw-away value: the scene builds a fresh one from the current
vertex positions for every query, because the vertices move under the mouse.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional
import logging

from barycentricexplorer.config import DEGENERACY_EPSILON
from barycentricexplorer.model.geometry_primitives import Vector, Plane, BarycentricCoordinates

logger = logging.getLogger(__name__)


def closest_point_on_segment(point: Vector, start: Vector, end: Vector) -> Vector:
    """Find the closest point on the segment [start, end] to `point`."""
    direction = end - start
    length_sq = direction.dot(direction)
    if length_sq == 0.0:
        return start
    t = (point - start).dot(direction) / length_sq
    t = max(0.0, min(1.0, t))
    return start + direction * t


@dataclass(frozen=True)
class Triangle:
    """A triangle given by its vertices in winding order A -> B -> C."""
    a: Vector
    b: Vector
    c: Vector

    @classmethod
    def from_points(cls, points) -> Triangle:
        a, b, c = (p if isinstance(p, Vector) else Vector.from_iterable(p) for p in points)
        return cls(a, b, c)

    @property
    def vertices(self) -> tuple[Vector, Vector, Vector]:
        return self.a, self.b, self.c

    # ---- derived quantities ----

    def _scaled_normal(self) -> Vector:
        # |(B - A) x (C - A)| is twice the area
        return (self.b - self.a).cross(self.c - self.a)

    def area(self) -> float:
        return 0.5 * self._scaled_normal().magnitude

    def is_degenerate(self, eps: float = DEGENERACY_EPSILON) -> bool:
        """True if the vertices are (nearly) collinear."""
        return self._scaled_normal().magnitude <= eps

    def normal(self) -> Vector:
        """
        Unit normal following the winding A -> B -> C.

        Returns the zero vector for a degenerate triangle; callers must check
        `is_degenerate` before relying on it.
        """
        return self._scaled_normal().normalize()

    def midpoint(self) -> Vector:
        return (self.a + self.b + self.c) / 3.0

    def plane(self) -> Plane:
        return Plane(origin=self.a, normal=self.normal())

    # ---- conversions ----

    def point_from_barycentric(self, coords: BarycentricCoordinates) -> Vector:
        """alpha * A + beta * B + gamma * C. The weights are not normalized."""
        return self.a * coords.alpha + self.b * coords.beta + self.c * coords.gamma

    def barycentric_of(self, point: Vector) -> Optional[BarycentricCoordinates]:
        """
        Barycentric coordinates of a point lying in the plane of the triangle.

        A point off the plane gets the coordinates of its orthogonal projection.

        Returns:
            The coordinates, or None if the triangle is degenerate.
        """
        if self.is_degenerate():
            logger.debug(f"Barycentric coordinates requested for degenerate triangle {self}.")
            return None

        v0 = self.c - self.a
        v1 = self.b - self.a
        v2 = point - self.a

        dot00 = v0.dot(v0)
        dot01 = v0.dot(v1)
        dot02 = v0.dot(v2)
        dot11 = v1.dot(v1)
        dot12 = v1.dot(v2)

        # denom == |v0 x v1|^2, non-zero for a non-degenerate triangle
        denom = dot00 * dot11 - dot01 * dot01
        if denom == 0.0:
            return None

        u = (dot11 * dot02 - dot01 * dot12) / denom
        v = (dot00 * dot12 - dot01 * dot02) / denom
        return BarycentricCoordinates(1.0 - u - v, v, u)

    def contains_point(self, point: Vector, eps: float = 1e-9) -> bool:
        """True if an in-plane point lies inside or on the boundary."""
        coords = self.barycentric_of(point)
        return coords is not None and coords.is_inside(eps)

    def closest_point(self, point: Vector) -> Vector:
        """
        Nearest point of the closed triangular region (interior and boundary).

        Classifies `point` into one of the vertex regions, edge regions or the
        face region (Ericson, Real-Time Collision Detection, 5.1.5). A point
        over the face is projected orthogonally onto the plane.
        """
        a, b, c = self.a, self.b, self.c

        if self.is_degenerate():
            # Collapsed to a segment (or a point): use the longest edge
            edges = [(a, b), (b, c), (c, a)]
            start, end = max(edges, key=lambda e: e[0].distance_to(e[1]))
            return closest_point_on_segment(point, start, end)

        ab = b - a
        ac = c - a
        ap = point - a
        d1 = ab.dot(ap)
        d2 = ac.dot(ap)
        # Vertex region A
        if d1 <= 0.0 and d2 <= 0.0:
            return a

        bp = point - b
        d3 = ab.dot(bp)
        d4 = ac.dot(bp)
        # Vertex region B
        if d3 >= 0.0 and d4 <= d3:
            return b

        # Edge region AB
        vc = d1 * d4 - d3 * d2
        if vc <= 0.0 and d1 >= 0.0 and d3 <= 0.0:
            t = d1 / (d1 - d3)
            return a + ab * t

        cp = point - c
        d5 = ab.dot(cp)
        d6 = ac.dot(cp)
        # Vertex region C
        if d6 >= 0.0 and d5 <= d6:
            return c

        # Edge region AC
        vb = d5 * d2 - d1 * d6
        if vb <= 0.0 and d2 >= 0.0 and d6 <= 0.0:
            t = d2 / (d2 - d6)
            return a + ac * t

        # Edge region BC
        va = d3 * d6 - d5 * d4
        if va <= 0.0 and (d4 - d3) >= 0.0 and (d5 - d6) >= 0.0:
            t = (d4 - d3) / ((d4 - d3) + (d5 - d6))
            return b + (c - b) * t

        # Face region
        denom = va + vb + vc
        v = vb / denom
        w = vc / denom
        return a + ab * v + ac * w
