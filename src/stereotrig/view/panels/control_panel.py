"""
Camera Rig Control Panel
"""
from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QGroupBox, QFormLayout, QHBoxLayout, QLabel, QPushButton, QSlider
)

from stereotrig import config
from stereotrig.controller.store import SceneStore
from stereotrig.model.state import SceneState
from stereotrig.view.panels.base import BasePanel


def baseline_to_ticks(baseline: float) -> int:
    return int(round(baseline / config.BASELINE_STEP))


def ticks_to_baseline(ticks: int) -> float:
    return round(ticks * config.BASELINE_STEP, 6)


class ControlPanel(BasePanel):
    def __init__(self, store: SceneStore, parent: QWidget | None = None) -> None:
        super().__init__(store, parent)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        # --- Rig Group ---
        grp = QGroupBox("Camera Rig")
        form = QFormLayout(grp)

        # 1. Baseline slider
        self.baseline_slider = QSlider(Qt.Orientation.Horizontal)
        self.baseline_slider.setRange(
            baseline_to_ticks(config.BASELINE_MIN),
            baseline_to_ticks(config.BASELINE_MAX),
        )
        self.baseline_slider.setSingleStep(1)
        self.baseline_slider.valueChanged.connect(self.on_baseline_changed)

        self.lbl_baseline = QLabel()
        self.lbl_baseline.setMinimumWidth(50)

        row = QHBoxLayout()
        row.addWidget(self.baseline_slider, 1)
        row.addWidget(self.lbl_baseline)
        form.addRow("Baseline:", row)

        # 2. Vehicle readout
        self.lbl_vehicle = QLabel()
        form.addRow("Vehicle z:", self.lbl_vehicle)

        hint = QLabel("W / ↑ forward, S / ↓ backward\nDrag objects in the overview")
        hint.setStyleSheet("color: gray;")
        form.addRow(hint)

        layout.addWidget(grp)

        # --- Actions ---
        self.btn_reset = QPushButton("Reset")
        self.btn_reset.setMinimumHeight(32)
        self.btn_reset.clicked.connect(self.store.reset)
        layout.addWidget(self.btn_reset)

        self.load_from_state(self.store.state)

    # --- SLOTS ---

    def on_baseline_changed(self, ticks: int) -> None:
        self.store.set_baseline(ticks_to_baseline(ticks))

    def load_from_state(self, state: SceneState) -> None:
        """Updates UI widgets to match the snapshot without echoing back to the store."""
        self.baseline_slider.blockSignals(True)
        try:
            self.baseline_slider.setValue(baseline_to_ticks(state.params.baseline))
        finally:
            self.baseline_slider.blockSignals(False)

        self.lbl_baseline.setText(f"{state.params.baseline:.1f} m")
        self.lbl_vehicle.setText(f"{state.params.vehicle_z:.1f} m")
