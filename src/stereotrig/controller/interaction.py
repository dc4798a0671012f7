"""
Interaction Controller
======================
Maps pointer and keyboard input to SceneStore updates.

The viewport does the hit-test and turns the pointer into a ray; this module
decides what the input means:

    IDLE --(pointer down on an object)--> DRAGGING --(pointer up)--> IDLE

While dragging, camera orbiting in the overview viewport is switched off
through `orbit_enabled_changed`.
"""
from __future__ import annotations

import logging
from enum import Enum, auto
from typing import Optional

from PySide6.QtCore import QObject, Qt, Signal

from stereotrig import config
from stereotrig.controller.store import SceneStore
from stereotrig.model.geometry_primitives import Vector3
from stereotrig.model.geometry_utils import ray_plane_intersection_y

logger = logging.getLogger(__name__)

# Vehicle shortcuts (application-wide)
FORWARD_KEYS: tuple[Qt.Key, ...] = (Qt.Key.Key_W, Qt.Key.Key_Up)
BACKWARD_KEYS: tuple[Qt.Key, ...] = (Qt.Key.Key_S, Qt.Key.Key_Down)


class DragState(Enum):
    IDLE = auto()
    DRAGGING = auto()


class DragController(QObject):
    """Selection & drag state machine for the overview viewport."""
    orbit_enabled_changed = Signal(bool)

    def __init__(self, store: SceneStore, plane_y: float = config.DRAG_PLANE_HEIGHT) -> None:
        super().__init__()
        self.store = store
        self.plane_y = plane_y

        self._drag_state: DragState = DragState.IDLE
        self._drag_object_id: Optional[str] = None
        self._drag_offset: Vector3 = Vector3(0.0, 0.0, 0.0)

    @property
    def drag_state(self) -> DragState:
        return self._drag_state

    @property
    def is_dragging(self) -> bool:
        return self._drag_state is DragState.DRAGGING

    # --- Pointer events ---

    def pointer_down(self, hit_object_id: Optional[str], ray_origin: Vector3, ray_direction: Vector3) -> bool:
        """
        Start a drag when the pointer went down on an object.

        Args:
            hit_object_id: Object under the pointer, or None.
            ray_origin: Pointer ray origin (world).
            ray_direction: Pointer ray direction (world).

        Returns:
            True if a drag was started.
        """
        if hit_object_id is None or self.is_dragging:
            return False

        self.store.select_object(hit_object_id)

        self._drag_state = DragState.DRAGGING
        self._drag_object_id = hit_object_id
        self.orbit_enabled_changed.emit(False)

        # Keep the grab point under the cursor instead of snapping the object to it
        hit = ray_plane_intersection_y(ray_origin, ray_direction, self.plane_y)
        if hit is not None:
            self._drag_offset = hit - self.store.state.get_object(hit_object_id).position
        else:
            self._drag_offset = Vector3(0.0, 0.0, 0.0)

        logger.debug(f"Drag started on {hit_object_id}, offset {self._drag_offset}.")
        return True

    def pointer_move(self, ray_origin: Vector3, ray_direction: Vector3) -> bool:
        """Move the dragged object. Ignored while idle. Returns True if it moved."""
        if not self.is_dragging or self._drag_object_id is None:
            return False

        hit = ray_plane_intersection_y(ray_origin, ray_direction, self.plane_y)
        if hit is None:
            return False

        self.store.move_object(self._drag_object_id, hit - self._drag_offset)
        return True

    def pointer_up(self) -> None:
        if not self.is_dragging:
            return
        logger.debug(f"Drag finished on {self._drag_object_id}.")
        self._drag_state = DragState.IDLE
        self._drag_object_id = None
        self._drag_offset = Vector3(0.0, 0.0, 0.0)
        self.orbit_enabled_changed.emit(True)

