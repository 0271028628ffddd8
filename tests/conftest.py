import pytest

from barycentricexplorer.model.geometry_primitives import Vector
from barycentricexplorer.model.state import SceneState
from barycentricexplorer.model.triangle import Triangle


@pytest.fixture
def unit_triangle():
    return Triangle(Vector(0, 0, 0), Vector(1, 0, 0), Vector(0, 1, 0))


@pytest.fixture
def tilted_triangle():
    return Triangle(Vector(1, 2, 3), Vector(4, 0, 1), Vector(-2, 5, 0))


@pytest.fixture
def collinear_triangle():
    return Triangle(Vector(0, 0, 0), Vector(1, 0, 0), Vector(2, 0, 0))


@pytest.fixture
def scene():
    return SceneState()


@pytest.fixture
def slanted_scene():
    """A scene whose triangle lies in the plane y == z."""
    return SceneState(vertices=[Vector(0, 0, 0), Vector(10, 0, 0), Vector(0, 10, 10)])
