import numpy as np
import pytest

from barycentricexplorer.model.geometry_primitives import Vector, BarycentricCoordinates
from barycentricexplorer.model.triangle import Triangle, closest_point_on_segment


def assert_vec(actual, expected, atol=1e-9):
    np.testing.assert_allclose(np.array(list(actual)), np.array(list(expected)), atol=atol)


def test_normal_follows_winding(unit_triangle):
    assert_vec(unit_triangle.normal(), (0, 0, 1))
    reversed_triangle = Triangle(unit_triangle.a, unit_triangle.c, unit_triangle.b)
    assert_vec(reversed_triangle.normal(), (0, 0, -1))


def test_normal_is_unit(tilted_triangle):
    assert tilted_triangle.normal().magnitude == pytest.approx(1.0)


def test_midpoint_and_plane(unit_triangle):
    assert_vec(unit_triangle.midpoint(), (1 / 3, 1 / 3, 0))
    plane = unit_triangle.plane()
    assert plane.origin == unit_triangle.a
    assert_vec(plane.normal, (0, 0, 1))


def test_area(unit_triangle):
    assert unit_triangle.area() == pytest.approx(0.5)


def test_degenerate_triangle(collinear_triangle):
    assert collinear_triangle.is_degenerate()
    assert collinear_triangle.normal() == Vector(0, 0, 0)
    assert collinear_triangle.barycentric_of(Vector(1, 0, 0)) is None
    assert not collinear_triangle.contains_point(Vector(1, 0, 0))


def test_barycentric_of_vertices(tilted_triangle):
    for i, vertex in enumerate(tilted_triangle.vertices):
        expected = [0.0, 0.0, 0.0]
        expected[i] = 1.0
        assert_vec(tilted_triangle.barycentric_of(vertex), expected)


@pytest.mark.parametrize("weights", [
    (1 / 3, 1 / 3, 1 / 3),
    (0.2, 0.5, 0.3),
    (1.5, -0.25, -0.25),
    (-1.0, 1.0, 1.0),
    (0.0, 0.0, 1.0),
])
def test_coordinates_round_trip(tilted_triangle, weights):
    coords = BarycentricCoordinates(*weights)
    point = tilted_triangle.point_from_barycentric(coords)
    assert_vec(tilted_triangle.barycentric_of(point), weights, atol=1e-6)
    assert_vec(tilted_triangle.point_from_barycentric(tilted_triangle.barycentric_of(point)), point, atol=1e-6)


def test_point_from_barycentric_is_not_normalized(unit_triangle):
    point = unit_triangle.point_from_barycentric(BarycentricCoordinates(1.0, 1.0, 1.0))
    assert_vec(point, (1, 1, 0))


def test_barycentric_of_off_plane_point_uses_projection(unit_triangle):
    coords = unit_triangle.barycentric_of(Vector(0.2, 0.3, 5.0))
    assert_vec(coords, (0.5, 0.2, 0.3))


def test_contains_point(unit_triangle):
    assert unit_triangle.contains_point(Vector(0.25, 0.25, 0))
    assert unit_triangle.contains_point(Vector(0.5, 0.5, 0))
    assert not unit_triangle.contains_point(Vector(1, 1, 0))


@pytest.mark.parametrize("point, expected", [
    ((0.2, 0.3, 0.0), (0.2, 0.3, 0.0)),     # inside
    ((0.2, 0.2, 3.0), (0.2, 0.2, 0.0)),     # above the face
    ((-1.0, -1.0, 0.0), (0.0, 0.0, 0.0)),   # vertex region A
    ((2.0, -0.5, 0.0), (1.0, 0.0, 0.0)),    # vertex region B
    ((-0.5, 2.0, 0.0), (0.0, 1.0, 0.0)),    # vertex region C
    ((0.5, -1.0, 0.0), (0.5, 0.0, 0.0)),    # edge region AB
    ((-1.0, 0.5, 0.0), (0.0, 0.5, 0.0)),    # edge region AC
    ((1.0, 1.0, 0.0), (0.5, 0.5, 0.0)),     # edge region BC
    ((1.0, 1.0, -2.0), (0.5, 0.5, 0.0)),    # edge region BC, off plane
])
def test_closest_point_regions(unit_triangle, point, expected):
    assert_vec(unit_triangle.closest_point(Vector(*point)), expected)


def test_closest_point_keeps_boundary_points(unit_triangle):
    for point in (Vector(0.5, 0.5, 0), Vector(0, 0.3, 0), Vector(1, 0, 0)):
        assert_vec(unit_triangle.closest_point(point), point)


def test_closest_point_of_degenerate_triangle_uses_longest_edge(collinear_triangle):
    assert_vec(collinear_triangle.closest_point(Vector(1.0, 1.0, 0.0)), (1, 0, 0))
    assert_vec(collinear_triangle.closest_point(Vector(5.0, 0.0, 0.0)), (2, 0, 0))


def test_closest_point_on_segment():
    start, end = Vector(0, 0, 0), Vector(2, 0, 0)
    assert_vec(closest_point_on_segment(Vector(1, 3, 0), start, end), (1, 0, 0))
    assert_vec(closest_point_on_segment(Vector(-4, 0, 0), start, end), (0, 0, 0))
    assert closest_point_on_segment(Vector(1, 1, 1), start, start) == start


def test_from_points():
    triangle = Triangle.from_points([(0, 0, 0), [1, 0, 0], Vector(0, 1, 0)])
    assert triangle.b == Vector(1.0, 0.0, 0.0)


def test_vector_needs_all_three_components():
    with pytest.raises(TypeError):
        Vector(1.0, 2.0)
