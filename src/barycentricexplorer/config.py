"""
Configuration & Default Scene
=============================
This module serves as the central registry for the start-up values of the scene.

Why is this file needed?
------------------------
1. Abstraction: It keeps the initial triangle, colors and camera out of the
   widgets, so "Reset" always goes back to the same values.
2. One place: Both the model layer (SceneState) and the view layer read from
   here; nothing else holds literals.

Exports:
    TRIANGLE_VERTICES: Initial positions of the vertices A, B, C.
    INITIAL_COORDINATES: Initial barycentric coordinates of the point.
    CONTROLS_HELP: Text shown by "Show Controls".
"""
from __future__ import annotations

Triple = tuple[float, float, float]

# Triangle
TRIANGLE_VERTICES: tuple[Triple, Triple, Triple] = (
    (0.0, 20.0, 0.0),
    (-20.0, -10.0, 0.0),
    (20.0, -10.0, 0.0),
)
VERTEX_COLORS: tuple[str, str, str] = ("#ff0000", "#00ff00", "#0000ff")
VERTEX_LABELS: tuple[str, str, str] = ("A", "B", "C")
VERTEX_SPHERE_RADIUS: float = 1.0
VERTEX_SPHERE_RESOLUTION: int = 32
VERTEX_SPHERES_VISIBLE: bool = False

# Scene
BACKGROUND_COLOR: str = "#404040"
AXES_VISIBLE: bool = False
AXES_LENGTH: float = 1e4
CAMERA_POSITION: Triple = (0.0, 0.0, 50.0)
CAMERA_VIEW_UP: Triple = (0.0, 1.0, 0.0)

# Point
POINT_RADIUS: float = 1.0
POINT_RESOLUTION: int = 32
POINT_COLOR: str = "#ffffff"

# Barycentric coordinates
INITIAL_COORDINATES: Triple = (1 / 3, 1 / 3, 1 / 3)
COORDINATE_LABELS: tuple[str, str, str] = ("Alpha", "Beta", "Gamma")
KEEP_INSIDE_TRIANGLE: bool = True
BALANCING_MODE: str = "evenly"

# Logging
LOG_LEVEL: str = "INFO"

# Numerics
PROJECTION_EPSILON: float = 1e-6
DEGENERACY_EPSILON: float = 1e-12

CONTROLS_HELP: str = (
    "Left Mouse - Move Camera & Vertices & Point\n"
    "I - Toggle Within Triangle\n"
    "S - Toggle Vertices\n"
    "A - Toggle Axes\n"
    "Shift+P - Reset Point\n"
    "Shift+T - Reset Triangle\n"
    "Shift+C - Reset Camera\n"
    "Shift+R - Reset (All)"
)
