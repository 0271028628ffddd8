import numpy as np
import pytest

from barycentricexplorer.model.geometry_primitives import Vector, Plane, BarycentricCoordinates
from barycentricexplorer.model.geometry_utils import (
    project_along_direction, project_onto_plane, project_with_fallback,
    axis_constrained_direction, clamp_to_triangle, derive_world_position, derive_barycentric,
)

XY_PLANE = Plane(origin=Vector(0, 0, 0), normal=Vector(0, 0, 1))


def assert_vec(actual, expected, atol=1e-9):
    np.testing.assert_allclose(np.array(list(actual)), np.array(list(expected)), atol=atol)


def test_project_along_normal():
    projected = project_along_direction(Vector(3, 4, 10), Vector(0, 0, -1), XY_PLANE)
    assert_vec(projected, (3, 4, 0))


def test_project_along_oblique_direction():
    projected = project_along_direction(Vector(0, 0, 10), Vector(1, 0, -1), XY_PLANE)
    assert_vec(projected, (10, 0, 0))


def test_project_direction_length_does_not_matter():
    short = project_along_direction(Vector(0, 0, 10), Vector(1, 0, -1), XY_PLANE)
    long = project_along_direction(Vector(0, 0, 10), Vector(7, 0, -7), XY_PLANE)
    assert_vec(short, long)


def test_project_from_behind_the_plane():
    projected = project_along_direction(Vector(1, 1, -5), Vector(0, 0, -1), XY_PLANE)
    assert_vec(projected, (1, 1, 0))


def test_parallel_direction_fails():
    assert project_along_direction(Vector(0, 0, 10), Vector(1, 1, 0), XY_PLANE) is None


def test_direction_within_epsilon_fails():
    assert project_along_direction(Vector(0, 0, 10), Vector(1, 0, 1e-6), XY_PLANE) is None
    assert project_along_direction(Vector(0, 0, 10), Vector(1, 0, 1e-3), XY_PLANE) is not None


def test_fallback_lands_on_plane(tilted_triangle):
    plane = tilted_triangle.plane()
    origin = Vector(10, -3, 7)
    # Any vector orthogonal to the normal is parallel to the plane
    parallel = plane.normal.cross(Vector(1, 0, 0))
    assert project_along_direction(origin, parallel, plane) is None

    result = project_with_fallback(origin, parallel, plane)
    assert plane.signed_distance(result) == pytest.approx(0.0, abs=1e-9)
    assert_vec(result, project_onto_plane(origin, plane))


def test_fallback_not_used_when_projection_succeeds():
    result = project_with_fallback(Vector(0, 0, 10), Vector(1, 0, -1), XY_PLANE)
    assert_vec(result, (10, 0, 0))


def test_project_onto_plane_with_unnormalized_normal():
    plane = Plane(origin=Vector(0, 0, 2), normal=Vector(0, 0, 5))
    assert_vec(project_onto_plane(Vector(1, 2, 9), plane), (1, 2, 2))


def test_axis_constrained_direction():
    normal = Vector(0.6, 0.0, 0.8)
    assert axis_constrained_direction(normal, 0) == Vector(0.0, 0.0, 0.8)
    assert axis_constrained_direction(normal, 2) == Vector(0.6, 0.0, 0.0)


def test_clamp_keeps_inside_points(unit_triangle):
    point = Vector(0.1, 0.6, 0)
    assert_vec(clamp_to_triangle(unit_triangle, point), point)


def test_clamp_is_idempotent(tilted_triangle):
    rng = np.random.default_rng(7)
    for xyz in rng.uniform(-10, 10, size=(50, 3)):
        once = clamp_to_triangle(tilted_triangle, Vector.from_iterable(xyz))
        twice = clamp_to_triangle(tilted_triangle, once)
        assert_vec(twice, once, atol=1e-9)
        coords = tilted_triangle.barycentric_of(once)
        assert coords.is_inside(eps=1e-9)


def test_derive_world_position_and_back(tilted_triangle):
    coords = BarycentricCoordinates(0.1, 0.6, 0.3)
    point = derive_world_position(tilted_triangle, coords)
    assert_vec(derive_barycentric(tilted_triangle, point), coords, atol=1e-6)


def test_derive_barycentric_degenerate(collinear_triangle):
    assert derive_barycentric(collinear_triangle, Vector(0.5, 0, 0)) is None


def test_fallback_projects_given_point():
    origin = Vector(0, 0, 50)
    result = project_with_fallback(origin, Vector(1, 1, 0), XY_PLANE, fallback_point=Vector(5, 5, 50))
    assert_vec(result, (5, 5, 0))
