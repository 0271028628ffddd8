from __future__ import annotations

import logging

from PySide6.QtCore import QObject, Signal

from barycentricexplorer.model.balancing import BalancingMode
from barycentricexplorer.model.geometry_primitives import Vector
from barycentricexplorer.model.state import SceneState, SceneSnapshot

logger = logging.getLogger(__name__)


class Store(QObject):
    """
    Central state store with signals for panel/view sync.

    Every mutating call forwards to the SceneState and then publishes a fresh
    SceneSnapshot through `scene_changed`. Views only ever read snapshots, so a
    programmatic refresh never loops back into an edit handler.
    """
    scene_changed = Signal(object)
    camera_reset_requested = Signal()

    def __init__(self, scene: SceneState | None = None) -> None:
        super().__init__()
        self.scene = scene if scene is not None else SceneState()

    def snapshot(self) -> SceneSnapshot:
        return self.scene.snapshot()

    def _publish(self) -> None:
        self.scene_changed.emit(self.scene.snapshot())

    # ---- vertices ----

    def move_vertex(self, index: int, position: Vector) -> None:
        self.scene.move_vertex(index, position)
        self._publish()

    def set_vertex_component(self, index: int, axis: int, value: float) -> None:
        self.scene.set_vertex_component(index, axis, value)
        self._publish()

    # ---- point ----

    def drag_point(self, position: Vector, camera_position: Vector) -> None:
        # Publish even when skipped so the dragged widget snaps back
        self.scene.drag_point(position, camera_position)
        self._publish()

    def set_point_component(self, axis: int, value: float) -> None:
        self.scene.set_point_component(axis, value)
        self._publish()

    # ---- coordinates ----

    def set_coordinate(self, index: int, value: float) -> None:
        self.scene.set_coordinate(index, value)
        self._publish()

    def set_keep_inside(self, keep_inside: bool) -> None:
        self.scene.set_keep_inside(keep_inside)
        self._publish()

    def toggle_keep_inside(self) -> None:
        self.scene.toggle_keep_inside()
        self._publish()

    def set_balancing_mode(self, mode: BalancingMode | str) -> None:
        self.scene.set_balancing_mode(mode)
        self._publish()

    # ---- appearance ----

    def set_background_color(self, color: str) -> None:
        self.scene.set_background_color(color)
        self._publish()

    def set_point_color(self, color: str) -> None:
        self.scene.set_point_color(color)
        self._publish()

    def set_vertex_color(self, index: int, color: str) -> None:
        self.scene.set_vertex_color(index, color)
        self._publish()

    def set_vertices_visible(self, visible: bool) -> None:
        self.scene.set_vertices_visible(visible)
        self._publish()

    def toggle_vertices_visible(self) -> None:
        self.scene.toggle_vertices_visible()
        self._publish()

    def set_axes_visible(self, visible: bool) -> None:
        self.scene.set_axes_visible(visible)
        self._publish()

    def toggle_axes_visible(self) -> None:
        self.scene.toggle_axes_visible()
        self._publish()

    # ---- reset ----

    def reset_camera(self) -> None:
        self.camera_reset_requested.emit()

    def reset_coordinates(self) -> None:
        self.scene.reset_coordinates()
        self._publish()

    def reset_triangle(self) -> None:
        self.scene.reset_triangle()
        self._publish()

    def reset_appearance(self) -> None:
        self.scene.reset_appearance()
        self._publish()

    def reset_all(self) -> None:
        self.scene.reset_all()
        self.camera_reset_requested.emit()
        self._publish()
