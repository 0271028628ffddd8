from __future__ import annotations

from PySide6.QtCore import Slot
from PySide6.QtWidgets import QWidget, QVBoxLayout, QCheckBox, QComboBox, QLabel

from barycentricexplorer import config
from barycentricexplorer.app.state import Store
from barycentricexplorer.model.balancing import list_modes
from barycentricexplorer.model.state import SceneSnapshot
from barycentricexplorer.view.panels.base import BasePanel

MODE_LABELS = {
    "evenly": "Evenly",
    "ratio": "Ratio",
    "none": "None",
}


class CoordinatesPanel(BasePanel):
    """
    Alpha / Beta / Gamma editors, the "Within Triangle" toggle and the
    balancing mode selector.
    """
    def __init__(self, store: Store, parent: QWidget | None = None) -> None:
        super().__init__(store, parent)
        QVBoxLayout(self)

        grid = self._add_group("Barycentric Coordinates")
        self.spins = [
            self._add_spin(grid, label, min_value=0.0, max_value=1.0, step=0.01, decimals=3)
            for label in config.COORDINATE_LABELS
        ]
        for i, spin in enumerate(self.spins):
            spin.valueChanged.connect(lambda value, i=i: self.store.set_coordinate(i, value))

        row = grid.rowCount()
        self.check_inside = QCheckBox(self.tr("Within Triangle"), self)
        grid.addWidget(self.check_inside, row, 0, 1, 2)
        self.check_inside.toggled.connect(self.store.set_keep_inside)

        row = grid.rowCount()
        grid.addWidget(QLabel(self.tr("Balancing:"), self), row, 0)
        self.combo_mode = QComboBox(self)
        for mode in list_modes():
            self.combo_mode.addItem(self.tr(MODE_LABELS.get(mode, mode)), userData=str(mode))
        grid.addWidget(self.combo_mode, row, 1)
        self.combo_mode.currentIndexChanged.connect(self._on_mode_changed)

        self.layout().addStretch()
        self.load_from_snapshot(store.snapshot())

    @Slot()
    def _on_mode_changed(self) -> None:
        self.store.set_balancing_mode(self.combo_mode.currentData())

    def load_from_snapshot(self, snapshot: SceneSnapshot) -> None:
        low, high = (0.0, 1.0) if snapshot.keep_inside else (-1e9, 1e9)
        for spin, value in zip(self.spins, snapshot.coordinates):
            spin.blockSignals(True)
            try:
                spin.setRange(low, high)
                spin.setValue(value)
            finally:
                spin.blockSignals(False)

        self.check_inside.blockSignals(True)
        self.check_inside.setChecked(snapshot.keep_inside)
        self.check_inside.blockSignals(False)

        self.combo_mode.blockSignals(True)
        self.combo_mode.setCurrentIndex(self.combo_mode.findData(str(snapshot.balancing_mode)))
        self.combo_mode.blockSignals(False)
