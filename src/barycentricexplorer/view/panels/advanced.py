from __future__ import annotations

from typing import Callable

from PySide6.QtGui import QColor
from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QCheckBox, QPushButton, QLabel, QColorDialog, QMessageBox
)

from barycentricexplorer import config
from barycentricexplorer.app.state import Store
from barycentricexplorer.model.geometry_primitives import AXES
from barycentricexplorer.model.state import SceneSnapshot
from barycentricexplorer.view.panels.base import BasePanel


class ColorButton(QPushButton):
    """A flat button showing a color; clicking opens a color dialog."""
    def __init__(self, on_picked: Callable[[str], None], parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._color = "#000000"
        self._on_picked = on_picked
        self.clicked.connect(self._pick)

    def set_color(self, color: str) -> None:
        self._color = color
        self.setStyleSheet(f"background-color: {color};")

    def _pick(self) -> None:
        color = QColorDialog.getColor(QColor(self._color), self)
        if color.isValid():
            self._on_picked(color.name())


class AdvancedPanel(BasePanel):
    """
    Appearance, numeric point/vertex positions and the reset actions.
    """
    def __init__(self, store: Store, parent: QWidget | None = None) -> None:
        super().__init__(store, parent)
        QVBoxLayout(self)

        # --- Appearance ---
        grid = self._add_group("Appearance")
        self.btn_background = self._add_color_row(grid, "Background", self.store.set_background_color)
        self.btn_point = self._add_color_row(grid, "Point", self.store.set_point_color)
        self.btn_vertices = [
            self._add_color_row(grid, f"Vertex {label}", lambda c, i=i: self.store.set_vertex_color(i, c))
            for i, label in enumerate(config.VERTEX_LABELS)
        ]
        self.check_vertices = QCheckBox(self.tr("Vertices"), self)
        self.check_vertices.toggled.connect(self.store.set_vertices_visible)
        grid.addWidget(self.check_vertices, grid.rowCount(), 0, 1, 2)
        self.check_axes = QCheckBox(self.tr("Axes"), self)
        self.check_axes.toggled.connect(self.store.set_axes_visible)
        grid.addWidget(self.check_axes, grid.rowCount(), 0, 1, 2)

        # --- Point ---
        grid = self._add_group("Point")
        self.point_spins = [self._add_spin(grid, axis.upper()) for axis in AXES]
        for axis, spin in enumerate(self.point_spins):
            spin.valueChanged.connect(lambda value, axis=axis: self.store.set_point_component(axis, value))

        # --- Vertices ---
        self.vertex_spins: list[list] = []
        for i, label in enumerate(config.VERTEX_LABELS):
            grid = self._add_group(f"Vertex {label}")
            spins = [self._add_spin(grid, axis.upper()) for axis in AXES]
            for axis, spin in enumerate(spins):
                spin.valueChanged.connect(
                    lambda value, i=i, axis=axis: self.store.set_vertex_component(i, axis, value)
                )
            self.vertex_spins.append(spins)

        # --- Reset ---
        grid = self._add_group("Reset")
        resets = [
            ("All", self.store.reset_all),
            ("Camera", self.store.reset_camera),
            ("Appearance", self.store.reset_appearance),
            ("Point", self.store.reset_coordinates),
            ("Triangle", self.store.reset_triangle),
        ]
        for name, slot in resets:
            btn = QPushButton(self.tr(name), self)
            btn.clicked.connect(slot)
            grid.addWidget(btn, grid.rowCount(), 0, 1, 2)

        btn_help = QPushButton(self.tr("Show Controls"), self)
        btn_help.clicked.connect(self.show_controls)
        self.layout().addWidget(btn_help)

        self.layout().addStretch()
        self.load_from_snapshot(store.snapshot())

    def _add_color_row(self, grid, label: str, on_picked: Callable[[str], None]) -> ColorButton:
        row = grid.rowCount()
        grid.addWidget(QLabel(self.tr(label), self), row, 0)
        btn = ColorButton(on_picked, self)
        grid.addWidget(btn, row, 1)
        return btn

    def show_controls(self) -> None:
        QMessageBox.information(self, self.tr("Controls"), config.CONTROLS_HELP)

    def load_from_snapshot(self, snapshot: SceneSnapshot) -> None:
        self.btn_background.set_color(snapshot.background_color)
        self.btn_point.set_color(snapshot.point_color)
        for btn, color in zip(self.btn_vertices, snapshot.vertex_colors):
            btn.set_color(color)

        for check, value in ((self.check_vertices, snapshot.vertices_visible), (self.check_axes, snapshot.axes_visible)):
            check.blockSignals(True)
            check.setChecked(value)
            check.blockSignals(False)

        for spin, value in zip(self.point_spins, snapshot.point):
            self._set_spin_value(spin, value)
        for spins, vertex in zip(self.vertex_spins, snapshot.vertices):
            for spin, value in zip(spins, vertex):
                self._set_spin_value(spin, value)
