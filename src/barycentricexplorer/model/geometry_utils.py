from __future__ import annotations

from typing import Optional
import logging

from barycentricexplorer.config import PROJECTION_EPSILON
from barycentricexplorer.model.geometry_primitives import Vector, Plane, BarycentricCoordinates
from barycentricexplorer.model.triangle import Triangle

logger = logging.getLogger(__name__)


def project_along_direction(
    line_origin: Vector,
    line_direction: Vector,
    plane: Plane,
    eps: float = PROJECTION_EPSILON
    ) -> Optional[Vector]:
    """
    Intersection of the line P(t) = P0 + t * d with a plane.

    Args:
        line_origin: A point P0 on the line.
        line_direction: The line direction d (need not be normalized).
        plane: The plane (origin, normal) to intersect with.
        eps: Tolerance on n . d below which the line counts as parallel.

    Returns:
        The intersection point, or None if the line is (nearly) parallel to
        the plane, i.e. there is no unique intersection.

    Notes:
        Solves n . (P0 + t * d - O) = 0, so t = -(n . (P0 - O)) / (n . d).
    """
    dot = plane.normal.dot(line_direction)
    if abs(dot) <= eps:
        return None
    t = -plane.normal.dot(line_origin - plane.origin) / dot
    return line_origin + line_direction * t


def project_onto_plane(point: Vector, plane: Plane) -> Vector:
    """Orthogonal projection of `point` onto `plane`."""
    normal = plane.normal.normalize()
    return point - normal * normal.dot(point - plane.origin)


def project_with_fallback(
    line_origin: Vector,
    line_direction: Vector,
    plane: Plane,
    eps: float = PROJECTION_EPSILON,
    fallback_point: Optional[Vector] = None
    ) -> Vector:
    """
    Project along a direction; if that fails, drop the direction constraint
    and project a point orthogonally onto the plane instead.

    Args:
        fallback_point: The point to project orthogonally when the line is
            parallel to the plane. Defaults to `line_origin`; a camera ray
            passes the dragged position here, not the camera.
    """
    projected = project_along_direction(line_origin, line_direction, plane, eps)
    if projected is None:
        target = line_origin if fallback_point is None else fallback_point
        logger.debug(f"Direction {line_direction} is parallel to the plane, projecting {target} orthogonally.")
        return project_onto_plane(target, plane)
    return projected


def axis_constrained_direction(normal: Vector, axis: int) -> Vector:
    """
    Direction for moving a point back onto a plane without changing its
    `axis` coordinate: the plane normal with that component removed.
    """
    return normal.with_component(axis, 0.0)


def clamp_to_triangle(triangle: Triangle, point: Vector) -> Vector:
    """Force `point` into the closed triangular region."""
    return triangle.closest_point(point)


def derive_world_position(triangle: Triangle, coords: BarycentricCoordinates) -> Vector:
    return triangle.point_from_barycentric(coords)


def derive_barycentric(triangle: Triangle, point: Vector) -> Optional[BarycentricCoordinates]:
    """Coordinates of an in-plane point; None for a degenerate triangle."""
    return triangle.barycentric_of(point)
