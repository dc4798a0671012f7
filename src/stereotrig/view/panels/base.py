from __future__ import annotations

from PySide6.QtWidgets import QWidget

from stereotrig.controller.store import SceneStore
from stereotrig.model.state import SceneState


class BasePanel(QWidget):
    """Base class for side panels. Holds a reference to the scene store and redraws on every snapshot."""
    def __init__(self, store: SceneStore, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.store = store
        self.store.state_changed.connect(self.load_from_state)

    def load_from_state(self, state: SceneState) -> None:
        raise NotImplementedError
