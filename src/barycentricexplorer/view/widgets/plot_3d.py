"""
3D Visualization Widget (PyVista Wrapper)
"""

from __future__ import annotations

from typing import Optional

import logging
import numpy as np

from PySide6.QtWidgets import QWidget, QVBoxLayout
from PySide6.QtCore import Signal
from PySide6.QtGui import QCloseEvent

from pyvistaqt import QtInteractor
import pyvista as pv

from barycentricexplorer import config
from barycentricexplorer.model.geometry_primitives import Vector
from barycentricexplorer.model.state import SceneSnapshot
from barycentricexplorer.model.triangle import Triangle

logger = logging.getLogger(__name__)

AXIS_COLORS = ("#ff0000", "#00ff00", "#0000ff")


class PyVistaWidget(QWidget):
    """
    The 3D scene: a vertex-colored triangle, the barycentric point and the
    three vertex handles.

    Dragging a handle only emits a signal; positions on screen change when
    the store publishes the next snapshot through `update_scene`.
    """
    point_dragged = Signal(object, object)  # (position, camera position)
    vertex_dragged = Signal(int, object)  # (vertex index, position)

    def __init__(self, snapshot: SceneSnapshot, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)

        self.layout_box: QVBoxLayout = QVBoxLayout(self)
        self.layout_box.setContentsMargins(0, 0, 0, 0)

        self.plotter: QtInteractor = QtInteractor(self)
        self.layout_box.addWidget(self.plotter)

        # --- Actors state ---
        self._triangle_mesh: pv.PolyData = self._build_triangle_mesh(snapshot)
        self._triangle_actor: pv.Actor = self.plotter.add_mesh(
            self._triangle_mesh,
            scalars="colors",
            rgb=True,
            lighting=False,
            show_scalar_bar=False,
        )
        self._axes_actors: list[pv.Actor] = self._add_axes()

        # --- Drag handles ---
        self._point_widget = self.plotter.add_sphere_widget(
            self._on_point_moved,
            center=tuple(snapshot.point),
            radius=config.POINT_RADIUS,
            theta_resolution=config.POINT_RESOLUTION,
            phi_resolution=config.POINT_RESOLUTION,
            color=snapshot.point_color,
            test_callback=False,
            interaction_event="always",
        )
        self._vertex_widgets = [
            self.plotter.add_sphere_widget(
                lambda center, i=i: self._on_vertex_moved(i, center),
                center=tuple(vertex),
                radius=config.VERTEX_SPHERE_RADIUS,
                theta_resolution=config.VERTEX_SPHERE_RESOLUTION,
                phi_resolution=config.VERTEX_SPHERE_RESOLUTION,
                color=snapshot.vertex_colors[i],
                test_callback=False,
                interaction_event="always",
            )
            for i, vertex in enumerate(snapshot.vertices)
        ]

        self.update_scene(snapshot)
        self.reset_camera(snapshot)

    # ------------------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------------------

    def update_scene(self, snapshot: SceneSnapshot) -> None:
        """Bring every actor and handle in line with the snapshot."""
        self._triangle_mesh.points = np.array([v.to_array() for v in snapshot.vertices])
        self._triangle_mesh.point_data["colors"] = self._vertex_colors_array(snapshot)

        # SetCenter does not fire InteractionEvent, so no callback runs here
        self._point_widget.SetCenter(*snapshot.point)
        self._set_widget_color(self._point_widget, snapshot.point_color)

        for widget, vertex, color in zip(self._vertex_widgets, snapshot.vertices, snapshot.vertex_colors):
            widget.SetCenter(*vertex)
            self._set_widget_color(widget, color)
            if snapshot.vertices_visible:
                widget.On()
            else:
                widget.Off()

        for actor in self._axes_actors:
            actor.SetVisibility(snapshot.axes_visible)

        self.plotter.set_background(snapshot.background_color)
        self.plotter.render()

    def reset_camera(self, snapshot: SceneSnapshot) -> None:
        focal_point = Triangle(*snapshot.vertices).midpoint()
        self.plotter.camera_position = [
            config.CAMERA_POSITION,
            tuple(focal_point),
            config.CAMERA_VIEW_UP,
        ]
        self.plotter.reset_camera_clipping_range()
        self.plotter.render()

    def camera_position(self) -> Vector:
        return Vector.from_iterable(self.plotter.camera.position)

    # ------------------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------------------

    def _on_point_moved(self, center) -> None:
        self.point_dragged.emit(Vector.from_iterable(center), self.camera_position())

    def _on_vertex_moved(self, index: int, center) -> None:
        self.vertex_dragged.emit(index, Vector.from_iterable(center))

    @staticmethod
    def _build_triangle_mesh(snapshot: SceneSnapshot) -> pv.PolyData:
        points = np.array([v.to_array() for v in snapshot.vertices])
        mesh = pv.PolyData(points, faces=np.array([3, 0, 1, 2]))
        mesh.point_data["colors"] = PyVistaWidget._vertex_colors_array(snapshot)
        return mesh

    @staticmethod
    def _vertex_colors_array(snapshot: SceneSnapshot) -> np.ndarray:
        # uint8 RGB per vertex, interpolated over the face
        return np.array([pv.Color(c).int_rgb for c in snapshot.vertex_colors], dtype=np.uint8)

    @staticmethod
    def _set_widget_color(widget, color: str) -> None:
        widget.GetSphereProperty().SetColor(pv.Color(color).float_rgb)

    def _add_axes(self) -> list[pv.Actor]:
        """World axes through the origin, like an axes helper."""
        length = config.AXES_LENGTH
        actors = []
        for axis, color in enumerate(AXIS_COLORS):
            end = np.zeros(3)
            end[axis] = length
            actor = self.plotter.add_mesh(
                pv.Line(-end, end),
                color=color,
                line_width=2,
                pickable=False,
                show_scalar_bar=False,
            )
            actor.SetVisibility(config.AXES_VISIBLE)
            actors.append(actor)
        return actors

    def closeEvent(self, event: QCloseEvent) -> None:
        self.plotter.close()
        event.accept()
