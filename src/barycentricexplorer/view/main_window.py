"""
Main Application Window
=======================
The primary GUI container: side panels on the left, the 3D scene on the right.

Why is this file needed?
------------------------
1. Layout: It organizes the high-level visual structure of the application.
2. Routing: It connects drag events, keyboard shortcuts and menu actions to
   the Store, and the Store's snapshots back to the 3D view.
"""
import logging

from PySide6.QtWidgets import QMainWindow, QWidget, QVBoxLayout, QSplitter, QScrollArea
from PySide6.QtCore import Qt
from PySide6.QtGui import QAction

from barycentricexplorer.app.application import VISIBLE_APP_NAME
from barycentricexplorer.app.state import Store
from barycentricexplorer.view.panels.advanced import AdvancedPanel
from barycentricexplorer.view.panels.coordinates import CoordinatesPanel
from barycentricexplorer.view.widgets.plot_3d import PyVistaWidget

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(self, store: Store) -> None:
        super().__init__()
        self.store: Store = store

        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(1400, 900)

        splitter = QSplitter(Qt.Horizontal)
        self.setCentralWidget(splitter)

        # --- LEFT SIDE: Panels ---
        side = QWidget()
        side_layout = QVBoxLayout(side)
        self.coordinates_panel = CoordinatesPanel(self.store)
        self.advanced_panel = AdvancedPanel(self.store)
        side_layout.addWidget(self.coordinates_panel)
        side_layout.addWidget(self.advanced_panel)

        scroller = QScrollArea()
        scroller.setWidget(side)
        scroller.setWidgetResizable(True)
        splitter.addWidget(scroller)

        # --- RIGHT SIDE: 3D Scene ---
        self.visualizer = PyVistaWidget(self.store.snapshot())
        splitter.addWidget(self.visualizer)

        # 1 part sidebar : 4 parts 3D view
        splitter.setSizes([320, 1080])

        # --- SIGNAL CONNECTIONS ---
        self.visualizer.point_dragged.connect(self.store.drag_point)
        self.visualizer.vertex_dragged.connect(self.store.move_vertex)
        self.store.scene_changed.connect(self.visualizer.update_scene)
        self.store.camera_reset_requested.connect(
            lambda: self.visualizer.reset_camera(self.store.snapshot())
        )

        # --- ACTIONS & MENUS ---
        self._create_actions()
        self._create_menus()

    def _create_actions(self) -> None:
        def make_action(text: str, shortcut: str, slot) -> QAction:
            action = QAction(text, self)
            action.setShortcut(shortcut)
            action.triggered.connect(slot)
            self.addAction(action)
            return action

        self.act_toggle_inside = make_action("Within Triangle", "I", self.store.toggle_keep_inside)
        self.act_toggle_vertices = make_action("Vertices", "S", self.store.toggle_vertices_visible)
        self.act_toggle_axes = make_action("Axes", "A", self.store.toggle_axes_visible)

        self.act_reset_all = make_action("All", "Shift+R", self.store.reset_all)
        self.act_reset_camera = make_action("Camera", "Shift+C", self.store.reset_camera)
        self.act_reset_triangle = make_action("Triangle", "Shift+T", self.store.reset_triangle)
        self.act_reset_point = make_action("Point", "Shift+P", self.store.reset_coordinates)

        self.act_controls = QAction("Show Controls", self)
        self.act_controls.triggered.connect(self.advanced_panel.show_controls)

    def _create_menus(self) -> None:
        menu_view = self.menuBar().addMenu("View")
        menu_view.addAction(self.act_toggle_inside)
        menu_view.addAction(self.act_toggle_vertices)
        menu_view.addAction(self.act_toggle_axes)

        menu_reset = self.menuBar().addMenu("Reset")
        menu_reset.addAction(self.act_reset_all)
        menu_reset.addAction(self.act_reset_camera)
        menu_reset.addAction(self.act_reset_triangle)
        menu_reset.addAction(self.act_reset_point)

        menu_help = self.menuBar().addMenu("Help")
        menu_help.addAction(self.act_controls)
