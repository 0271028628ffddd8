import pytest

QtCore = pytest.importorskip("PySide6.QtCore")

from barycentricexplorer.app.state import Store  # noqa: E402
from barycentricexplorer.model.geometry_primitives import Vector  # noqa: E402
from barycentricexplorer.model.state import SceneSnapshot  # noqa: E402


@pytest.fixture(scope="module")
def qt_core_app():
    return QtCore.QCoreApplication.instance() or QtCore.QCoreApplication([])


@pytest.fixture
def store(qt_core_app):
    return Store()


def test_set_coordinate_publishes_snapshot(store):
    received = []
    store.scene_changed.connect(received.append)
    store.set_coordinate(0, 0.5)
    assert len(received) == 1
    assert isinstance(received[0], SceneSnapshot)
    assert received[0].coordinates.alpha == pytest.approx(0.5)


def test_drag_publishes_even_when_skipped(store):
    store.move_vertex(2, Vector(20, 50, 0))
    received = []
    store.scene_changed.connect(received.append)
    store.drag_point(Vector(1, 1, 0), Vector(0, 0, 50))
    assert len(received) == 1


def test_reset_camera_does_not_publish(store):
    scenes, cameras = [], []
    store.scene_changed.connect(scenes.append)
    store.camera_reset_requested.connect(lambda: cameras.append(True))
    store.reset_camera()
    assert cameras == [True]
    assert scenes == []


def test_reset_all_resets_camera_and_scene(store):
    store.set_background_color("#ffffff")
    scenes, cameras = [], []
    store.scene_changed.connect(scenes.append)
    store.camera_reset_requested.connect(lambda: cameras.append(True))
    store.reset_all()
    assert cameras == [True]
    assert scenes[-1].background_color == "#404040"
