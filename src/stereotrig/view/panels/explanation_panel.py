"""
Calculation Steps Panel
=======================
Shows the five-step triangulation derivation for the selected object,
or a placeholder when nothing is selected.
"""
from __future__ import annotations

import html

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QWidget, QVBoxLayout, QGroupBox, QLabel, QScrollArea

from stereotrig.controller.store import SceneStore
from stereotrig.model.presentation import Explanation, ExplanationStep, build_explanation
from stereotrig.model.state import SceneState
from stereotrig.view.panels.base import BasePanel

STEP_COUNT = 5


class StepBox(QGroupBox):
    """One step of the derivation: a title and a block of formulas."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        layout = QVBoxLayout(self)
        self.body = QLabel()
        self.body.setTextFormat(Qt.TextFormat.RichText)
        self.body.setWordWrap(True)
        self.body.setTextInteractionFlags(Qt.TextInteractionFlag.TextSelectableByMouse)
        layout.addWidget(self.body)

    def set_step(self, step: ExplanationStep) -> None:
        self.setTitle(step.title)
        weight = "bold" if step.final else "normal"
        self.setStyleSheet(f"QGroupBox {{ font-weight: {weight}; }}")

        lines = "<br>".join(f"<code>{html.escape(line)}</code>" for line in step.lines)
        if step.note:
            lines += f"<br><small style='color: gray;'>{html.escape(step.note)}</small>"
        self.body.setText(lines)


class ExplanationPanel(BasePanel):
    def __init__(self, store: SceneStore, parent: QWidget | None = None) -> None:
        super().__init__(store, parent)

        outer = QVBoxLayout(self)
        outer.setContentsMargins(0, 0, 0, 0)

        grp = QGroupBox("Calculation")
        grp_layout = QVBoxLayout(grp)

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        content = QWidget()
        self.steps_layout = QVBoxLayout(content)

        self.lbl_placeholder = QLabel()
        self.lbl_placeholder.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.lbl_placeholder.setWordWrap(True)
        self.lbl_placeholder.setStyleSheet("color: gray;")
        self.steps_layout.addWidget(self.lbl_placeholder)

        self.step_boxes: list[StepBox] = []
        for _ in range(STEP_COUNT):
            box = StepBox()
            self.steps_layout.addWidget(box)
            self.step_boxes.append(box)
        self.steps_layout.addStretch()

        scroll.setWidget(content)
        grp_layout.addWidget(scroll)
        outer.addWidget(grp)

        self.load_from_state(self.store.state)

    def load_from_state(self, state: SceneState) -> None:
        self.show_explanation(build_explanation(state))

    def show_explanation(self, explanation: Explanation) -> None:
        if not explanation.has_selection:
            self.lbl_placeholder.setText(explanation.placeholder)
            self.lbl_placeholder.setVisible(True)
            for box in self.step_boxes:
                box.setVisible(False)
            return

        self.lbl_placeholder.setVisible(False)
        for box, step in zip(self.step_boxes, explanation.steps):
            box.set_step(step)
            box.setVisible(True)
