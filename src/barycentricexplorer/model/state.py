"""
Scene State (Data Model)
========================
This module defines the central data structure for the running application.

Why is this file needed?
------------------------
1. State Management: It is the single owner of the vertex positions, the
   barycentric coordinates, the toggles and the colors.
2. Orchestration: Every user input (drag, numeric edit, toggle) runs here as
   one fixed sequence: geometry query -> projection/clamp -> update.
3. Decoupling: Views never mutate anything themselves; they call an
   operation and render the immutable SceneSnapshot they get back.

Classes:
    SceneSnapshot: Immutable picture of the scene handed to the views.
    SceneState: The main container class.
"""
from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Optional

from barycentricexplorer import config
from barycentricexplorer.model.balancing import BalancingMode, rebalance
from barycentricexplorer.model.geometry_primitives import Vector, Plane, BarycentricCoordinates
from barycentricexplorer.model.geometry_utils import (
    project_with_fallback, axis_constrained_direction, clamp_to_triangle,
    derive_world_position, derive_barycentric,
)
from barycentricexplorer.model.triangle import Triangle

logger = logging.getLogger(__name__)


def _default_vertices() -> list[Vector]:
    return [Vector.from_iterable(v) for v in config.TRIANGLE_VERTICES]


def _default_coordinates() -> BarycentricCoordinates:
    return BarycentricCoordinates.from_iterable(config.INITIAL_COORDINATES)


@dataclass
class Appearance:
    background_color: str = config.BACKGROUND_COLOR
    point_color: str = config.POINT_COLOR
    vertex_colors: list[str] = field(default_factory=lambda: list(config.VERTEX_COLORS))
    vertices_visible: bool = config.VERTEX_SPHERES_VISIBLE
    axes_visible: bool = config.AXES_VISIBLE


@dataclass(frozen=True)
class SceneSnapshot:
    """Everything a view needs to draw one consistent frame."""
    vertices: tuple[Vector, Vector, Vector]
    point: Vector
    coordinates: BarycentricCoordinates
    keep_inside: bool
    balancing_mode: BalancingMode
    background_color: str
    point_color: str
    vertex_colors: tuple[str, str, str]
    vertices_visible: bool
    axes_visible: bool


@dataclass
class SceneState:
    """
    Holds the state of the scene. Pass this instance to the Store.

    The point position is always derived: from the coordinates when a vertex
    or a coordinate changes, and the other way round when the point moves.
    """
    vertices: list[Vector] = field(default_factory=_default_vertices)
    coordinates: BarycentricCoordinates = field(default_factory=_default_coordinates)
    keep_inside: bool = config.KEEP_INSIDE_TRIANGLE
    balancing_mode: BalancingMode = BalancingMode(config.BALANCING_MODE)
    appearance: Appearance = field(default_factory=Appearance)
    point: Vector = field(init=False)

    def __post_init__(self) -> None:
        self.point = derive_world_position(self.triangle, self.coordinates)

    @property
    def triangle(self) -> Triangle:
        return Triangle(*self.vertices)

    def snapshot(self) -> SceneSnapshot:
        return SceneSnapshot(
            vertices=tuple(self.vertices),
            point=self.point,
            coordinates=self.coordinates,
            keep_inside=self.keep_inside,
            balancing_mode=self.balancing_mode,
            background_color=self.appearance.background_color,
            point_color=self.appearance.point_color,
            vertex_colors=tuple(self.appearance.vertex_colors),
            vertices_visible=self.appearance.vertices_visible,
            axes_visible=self.appearance.axes_visible,
        )

    # ------------------------------------------------------------------------------
    # Vertices
    # ------------------------------------------------------------------------------

    def move_vertex(self, index: int, position: Vector) -> None:
        """Move a vertex; the point follows through its coordinates."""
        self.vertices[index] = position
        self._update_point_position()

    def set_vertex_component(self, index: int, axis: int, value: float) -> None:
        self.move_vertex(index, self.vertices[index].with_component(axis, value))

    # ------------------------------------------------------------------------------
    # Point
    # ------------------------------------------------------------------------------

    def drag_point(self, position: Vector, camera_position: Vector) -> bool:
        """
        Move the point to where the camera ray through `position` meets the
        triangle's plane. A ray parallel to the plane drops `position` straight
        onto it instead.

        Returns:
            False if the triangle is degenerate and nothing was updated.
        """
        triangle = self.triangle
        if self._is_degenerate(triangle):
            return False

        projected = project_with_fallback(
            camera_position, position - camera_position, triangle.plane(),
            fallback_point=position,
        )
        return self._place_point(triangle, projected)

    def set_point_component(self, axis: int, value: float) -> bool:
        """
        Set one coordinate of the point, then slide it back onto the plane
        without changing that coordinate.
        """
        triangle = self.triangle
        if self._is_degenerate(triangle):
            return False

        position = self.point.with_component(axis, value)
        normal = triangle.normal()
        direction = axis_constrained_direction(normal, axis)
        if direction.magnitude < config.PROJECTION_EPSILON:
            direction = normal
        plane = Plane(origin=triangle.midpoint(), normal=normal)
        projected = project_with_fallback(position, direction, plane)
        return self._place_point(triangle, projected)

    # ------------------------------------------------------------------------------
    # Coordinates
    # ------------------------------------------------------------------------------

    def set_coordinate(self, index: int, value: float) -> None:
        """Direct edit of one barycentric coordinate."""
        self.coordinates = rebalance(
            index, value, self.coordinates, self.balancing_mode, self.keep_inside
        )
        self._update_point_position()

    def set_balancing_mode(self, mode: BalancingMode | str) -> None:
        self.balancing_mode = BalancingMode(mode)
        logger.debug(f"Balancing mode set to '{self.balancing_mode}'.")

    def set_keep_inside(self, keep_inside: bool) -> None:
        self.keep_inside = keep_inside
        if not keep_inside:
            return
        # Pull an already out-of-range point back in immediately
        triangle = self.triangle
        if not self._is_degenerate(triangle):
            self._place_point(triangle, self.point)

    def toggle_keep_inside(self) -> None:
        self.set_keep_inside(not self.keep_inside)

    # ------------------------------------------------------------------------------
    # Appearance
    # ------------------------------------------------------------------------------

    def set_background_color(self, color: str) -> None:
        self.appearance.background_color = color

    def set_point_color(self, color: str) -> None:
        self.appearance.point_color = color

    def set_vertex_color(self, index: int, color: str) -> None:
        self.appearance.vertex_colors[index] = color

    def set_vertices_visible(self, visible: bool) -> None:
        self.appearance.vertices_visible = visible

    def toggle_vertices_visible(self) -> None:
        self.appearance.vertices_visible = not self.appearance.vertices_visible

    def set_axes_visible(self, visible: bool) -> None:
        self.appearance.axes_visible = visible

    def toggle_axes_visible(self) -> None:
        self.appearance.axes_visible = not self.appearance.axes_visible

    # ------------------------------------------------------------------------------
    # Reset
    # ------------------------------------------------------------------------------

    def reset_coordinates(self) -> None:
        self.coordinates = _default_coordinates()
        self._update_point_position()
        logger.info("Barycentric coordinates have been reset.")

    def reset_triangle(self) -> None:
        self.vertices = _default_vertices()
        self._update_point_position()
        logger.info("Triangle has been reset.")

    def reset_appearance(self) -> None:
        self.appearance = Appearance()
        logger.info("Appearance has been reset.")

    def reset_all(self) -> None:
        """Reset everything the model owns (the camera belongs to the view)."""
        self.reset_coordinates()
        self.reset_triangle()
        self.reset_appearance()
        self.keep_inside = config.KEEP_INSIDE_TRIANGLE
        self.balancing_mode = BalancingMode(config.BALANCING_MODE)

    # ------------------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------------------

    def _update_point_position(self) -> None:
        self.point = derive_world_position(self.triangle, self.coordinates)

    def _place_point(self, triangle: Triangle, position: Vector) -> bool:
        if self.keep_inside:
            position = clamp_to_triangle(triangle, position)
        coords: Optional[BarycentricCoordinates] = derive_barycentric(triangle, position)
        if coords is None:
            return False
        self.point = position
        self.coordinates = coords
        return True

    @staticmethod
    def _is_degenerate(triangle: Triangle) -> bool:
        if triangle.is_degenerate():
            logger.warning(f"Triangle {triangle.vertices} is degenerate, skipping update.")
            return True
        return False
