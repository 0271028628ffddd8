from __future__ import annotations

from PySide6.QtWidgets import (
    QWidget, QGroupBox, QLabel, QGridLayout, QSizePolicy, QDoubleSpinBox
)

from barycentricexplorer.app.state import Store
from barycentricexplorer.model.state import SceneSnapshot


class BasePanel(QWidget):
    """
    Base class for side panels. Holds a reference to the global store and
    redraws itself from every published snapshot.
    """
    def __init__(self, store: Store, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.store = store
        self.store.scene_changed.connect(self.load_from_snapshot)

    # ---- utilities ----

    def _add_group(self, title: str) -> QGridLayout:
        box = QGroupBox(self.tr(title), self)
        self.layout().addWidget(box)
        grid = QGridLayout(box)
        grid.setVerticalSpacing(8)
        return grid

    def _add_spin(
        self,
        grid: QGridLayout,
        label: str,
        *,
        min_value: float = -1e9,
        max_value: float = 1e9,
        step: float = 0.1,
        default: float = 0.0,
        decimals: int = 1
    ) -> QDoubleSpinBox:
        row = grid.rowCount()
        grid.addWidget(QLabel(self.tr(label), self), row, 0)
        w = QDoubleSpinBox(self)
        w.setRange(min_value, max_value)
        w.setSingleStep(step)
        w.setDecimals(decimals)
        w.setValue(default)
        w.setKeyboardTracking(False)
        w.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed)
        grid.addWidget(w, row, 1)
        return w

    @staticmethod
    def _set_spin_value(spin: QDoubleSpinBox, value: float) -> None:
        """Programmatic update that does not re-fire `valueChanged`."""
        spin.blockSignals(True)
        try:
            spin.setValue(value)
        finally:
            spin.blockSignals(False)

    # ---- abstract API for subclasses ----

    def load_from_snapshot(self, snapshot: SceneSnapshot) -> None:
        raise NotImplementedError("`load_from_snapshot` must be implemented in subclass.")
