"""
Scene Store
===========
Holds the current SceneState snapshot and broadcasts every new snapshot.

Why is this file needed?
------------------------
1. Single source of truth: Views never keep their own copy of the scene,
   they redraw from the snapshot emitted by `state_changed`.
2. Synchronous cascade: Each call computes the new snapshot and emits it
   before returning, so every input event fully refreshes derived state.
"""
from __future__ import annotations

import logging
from typing import Callable, Optional

from PySide6.QtCore import QObject, Signal

from stereotrig.model import state as scene
from stereotrig.model.geometry_primitives import Vector3
from stereotrig.model.state import SceneState

logger = logging.getLogger(__name__)


class SceneStore(QObject):
    """Central state store with a signal for viewport/panel sync."""
    state_changed = Signal(object)
    reset_requested = Signal()

    def __init__(self, initial: Optional[SceneState] = None) -> None:
        super().__init__()
        self._state: SceneState = initial if initial is not None else SceneState()

    @property
    def state(self) -> SceneState:
        return self._state

    def dispatch(self, update: Callable[..., SceneState], *args) -> SceneState:
        """
        Apply a pure update function and publish the result.
        Unchanged snapshots are not re-emitted.
        """
        new_state = update(self._state, *args)
        if new_state != self._state:
            self._state = new_state
            self.state_changed.emit(self._state)
        return self._state

    # --- Convenience API used by the view ---

    def set_baseline(self, baseline: float) -> None:
        self.dispatch(scene.set_baseline, baseline)

    def step_vehicle(self, direction: int) -> None:
        self.dispatch(scene.step_vehicle, direction)

    def select_object(self, object_id: Optional[str]) -> None:
        self.dispatch(scene.select, object_id)

    def move_object(self, object_id: str, position: Vector3) -> None:
        self.dispatch(scene.move_object, object_id, position)

    def reset(self) -> None:
        """Reset the scene and let the viewports restore their home camera."""
        self.dispatch(scene.reset)
        self.reset_requested.emit()
