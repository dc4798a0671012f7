"""
3D Visualization Widgets (PyVista Wrapper)
==========================================
Three viewports render the same scene from different cameras:

1. OverviewViewport: orbitable bird's-eye view, objects can be dragged here.
2. CameraFeedViewport (A / B): what each simulated camera sees.

All of them redraw from a SceneState snapshot in `update_scene()`.
Actors are created once and then moved or updated in-place.
"""
from __future__ import annotations

import logging
from typing import Optional

import numpy as np
from PySide6.QtWidgets import QWidget, QVBoxLayout, QLabel
from pyvistaqt import QtInteractor
import pyvista as pv

from stereotrig import config
from stereotrig.controller.interaction import DragController
from stereotrig.model.presentation import OverlayGeometry, build_overlay, camera_look_target
from stereotrig.model.state import SceneState
from stereotrig.view.widgets.vtk_utils import VtkUtils

logger = logging.getLogger(__name__)

BACKGROUND_COLOR = "#0a0e14"
ROAD_COLOR = "#2a2a2a"
LANE_COLOR = "#ffff00"
MARKER_COLOR = "#26C6DA"
CAMERA_COLORS = {"A": "#4CAF50", "B": "#2196F3"}

AMBIENT_IDLE = 0.3
AMBIENT_SELECTED = 0.8

# Our observers run before the interactor style so they can swallow events
OBSERVER_PRIORITY = 10.0


class SceneViewport(QWidget):
    """Base viewport: builds the scenery and keeps dynamic actors in sync."""

    def __init__(self, title: str, title_color: str = "white", parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)

        self.layout_box: QVBoxLayout = QVBoxLayout(self)
        self.layout_box.setContentsMargins(0, 0, 0, 0)
        self.layout_box.setSpacing(2)

        self.title_label = QLabel(title)
        self.title_label.setStyleSheet(f"color: {title_color}; font-weight: bold; padding: 2px;")
        self.layout_box.addWidget(self.title_label)

        self.plotter: QtInteractor = QtInteractor(self)
        self.layout_box.addWidget(self.plotter, 1)

        # --- Actors state ---
        self._vehicle_actors: list[pv.Actor] = []
        self._camera_actors: dict[str, pv.Actor] = {}
        self._target_actors: dict[str, pv.Actor] = {}
        self._overlay_actors: dict[str, pv.Actor] = {}

        self._init_plotter()
        self._build_scenery()

    # ------------------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------------------

    def update_scene(self, state: SceneState) -> None:
        """
        Refreshes all dynamic layers from the snapshot:
        1. Vehicle + cameras
        2. Target objects (position + highlight)
        3. Overlay (sight lines + angle arcs)
        4. Viewport camera (subclasses)
        """
        self._update_rig(state)
        self._update_targets(state)
        self._update_overlay(build_overlay(state))
        self._update_view(state)
        self.plotter.render()

    # ------------------------------------------------------------------------------
    # Internal: Layer Management
    # ------------------------------------------------------------------------------

    def _init_plotter(self) -> None:
        self.plotter.set_background(BACKGROUND_COLOR)

    def _build_scenery(self) -> None:
        """Static layers: road, lane, grid, distance markers, vehicle, camera rig."""
        x_min, x_max = -15.0, 15.0
        z_min, z_max = -10.0, 30.0

        self.plotter.add_mesh(
            VtkUtils.ground_quad((x_min, x_max), (z_min, z_max)),
            color=ROAD_COLOR, pickable=False, reset_camera=False,
        )
        self.plotter.add_mesh(
            VtkUtils.ground_quad((-0.075, 0.075), (z_min, z_max), y=0.01),
            color=LANE_COLOR, lighting=False, pickable=False, reset_camera=False,
        )
        self.plotter.add_mesh(
            VtkUtils.build_xz_grid_polydata((x_min, x_max, 0.0, z_max), spacing=1.0, y=0.005),
            color="#444444", line_width=1, opacity=0.6, pickable=False, reset_camera=False,
        )
        self._add_distance_markers()

        for mesh, color in zip(VtkUtils.vehicle_meshes(), ("#333333", "#4A90E2")):
            actor = self.plotter.add_mesh(mesh, color=color, pickable=False, reset_camera=False)
            self._vehicle_actors.append(actor)

        for name, color in CAMERA_COLORS.items():
            self._camera_actors[name] = self.plotter.add_mesh(
                VtkUtils.camera_cone(), color=color, ambient=0.5, pickable=False, reset_camera=False,
            )

    def _add_distance_markers(self) -> None:
        points = np.array([[-5.0, 0.5, d] for d in config.DISTANCE_MARKERS])
        labels = [f"{d:g}m" for d in config.DISTANCE_MARKERS]
        try:
            self.plotter.add_point_labels(
                points,
                labels,
                font_size=14,
                text_color=MARKER_COLOR,
                show_points=False,
                shape=None,
                pickable=False,
                reset_camera=False,
            )
        except Exception as e:
            # Labels are decoration only
            logger.exception(f"Failed to add distance markers: {e}")

    def _update_rig(self, state: SceneState) -> None:
        for actor in self._vehicle_actors:
            actor.position = (0.0, 0.0, state.params.vehicle_z)
        for camera in state.cameras:
            self._camera_actors[camera.name].position = camera.position.to_tuple()

    def _update_targets(self, state: SceneState) -> None:
        for obj in state.objects:
            actor = self._target_actors.get(obj.id)
            if actor is None:
                actor = self.plotter.add_mesh(
                    VtkUtils.target_sphere(),
                    color=obj.color,
                    ambient=AMBIENT_IDLE,
                    pickable=True,
                    reset_camera=False,
                )
                self._target_actors[obj.id] = actor
            actor.position = obj.position.to_tuple()
            actor.prop.ambient = AMBIENT_SELECTED if obj.is_selected else AMBIENT_IDLE

    def _update_overlay(self, overlay: Optional[OverlayGeometry]) -> None:
        if overlay is None:
            for actor in self._overlay_actors.values():
                actor.SetVisibility(False)
            return

        meshes = {
            "line_a": (VtkUtils.segment_polydata(*overlay.sight_line_a), CAMERA_COLORS["A"]),
            "line_b": (VtkUtils.segment_polydata(*overlay.sight_line_b), CAMERA_COLORS["B"]),
            "arc_a": (VtkUtils.polyline_to_polydata(overlay.arc_a), CAMERA_COLORS["A"]),
            "arc_b": (VtkUtils.polyline_to_polydata(overlay.arc_b), CAMERA_COLORS["B"]),
        }
        for key, (mesh, color) in meshes.items():
            actor = self._overlay_actors.get(key)
            if actor is None:
                self._overlay_actors[key] = self.plotter.add_mesh(
                    mesh,
                    color=color,
                    line_width=2,
                    opacity=0.8,
                    lighting=False,
                    pickable=False,
                    reset_camera=False,
                )
            else:
                # Update existing data in-place to prevent blinking
                actor.mapper.dataset.copy_from(mesh)
                actor.SetVisibility(True)

    def _update_view(self, state: SceneState) -> None:
        """Hook for subclasses that drive their own viewport camera."""


class OverviewViewport(SceneViewport):
    """Orbitable overview. Left-drag on an object moves it, elsewhere orbits."""

    def __init__(self, drag_controller: DragController, parent: Optional[QWidget] = None) -> None:
        super().__init__("Overview", parent=parent)
        self.drag = drag_controller
        self.drag.orbit_enabled_changed.connect(self.set_orbit_enabled)

        self._observer_tags: dict[str, int] = {}
        self._attach_observers()
        self.go_home()

    def go_home(self) -> None:
        """Restore the default bird's-eye pose."""
        cam = self.plotter.camera
        cam.position = config.OVERVIEW_HOME_POSITION
        cam.focal_point = config.OVERVIEW_HOME_FOCUS
        cam.up = (0.0, 1.0, 0.0)
        cam.view_angle = config.OVERVIEW_VIEW_ANGLE
        cam.clipping_range = config.CLIPPING_RANGE
        self.plotter.render()

    def set_orbit_enabled(self, enabled: bool) -> None:
        if enabled:
            self.plotter.enable()
        else:
            self.plotter.disable()

    # ------------------------------------------------------------------------------
    # Internal: Observers
    # ------------------------------------------------------------------------------

    def _attach_observers(self) -> None:
        interactor = self.plotter.iren.interactor
        for event, callback in (
            ("LeftButtonPressEvent", self._on_left_press),
            ("MouseMoveEvent", self._on_mouse_move),
            ("LeftButtonReleaseEvent", self._on_left_release),
        ):
            self._observer_tags[event] = interactor.AddObserver(event, callback, OBSERVER_PRIORITY)

    def _swallow(self, event: str) -> None:
        """Stop the interactor style from also handling this event."""
        command = self.plotter.iren.interactor.GetCommand(self._observer_tags[event])
        command.SetAbortFlag(1)

    def _pointer(self) -> tuple[int, int]:
        x, y = self.plotter.iren.interactor.GetEventPosition()
        return x, y

    def _object_id_for(self, actor) -> Optional[str]:
        for object_id, candidate in self._target_actors.items():
            if candidate is actor:
                return object_id
        return None

    def _on_left_press(self, _obj, event: str) -> None:
        x, y = self._pointer()
        renderer = self.plotter.renderer
        actor = VtkUtils.pick_actor(renderer, x, y, list(self._target_actors.values()))
        hit_id = self._object_id_for(actor) if actor is not None else None
        origin, direction = VtkUtils.pointer_ray(renderer, x, y)
        if self.drag.pointer_down(hit_id, origin, direction):
            self._swallow(event)

    def _on_mouse_move(self, _obj, event: str) -> None:
        if not self.drag.is_dragging:
            return
        x, y = self._pointer()
        origin, direction = VtkUtils.pointer_ray(self.plotter.renderer, x, y)
        self.drag.pointer_move(origin, direction)
        self._swallow(event)

    def _on_left_release(self, _obj, event: str) -> None:
        if not self.drag.is_dragging:
            return
        self.drag.pointer_up()
        self._swallow(event)


class CameraFeedViewport(SceneViewport):
    """Read-only view through one of the simulated cameras."""

    def __init__(self, camera_name: str, parent: Optional[QWidget] = None) -> None:
        super().__init__(f"Camera {camera_name}", title_color=CAMERA_COLORS[camera_name], parent=parent)
        self.camera_name = camera_name
        # No orbiting: the pose always comes from the scene
        self.plotter.disable()
        # The eye sits inside its own cone
        self._camera_actors[camera_name].SetVisibility(False)

    def _update_view(self, state: SceneState) -> None:
        camera = state.cameras.by_name(self.camera_name)
        cam = self.plotter.camera
        cam.position = camera.position.to_tuple()
        cam.focal_point = camera_look_target(state).to_tuple()
        cam.up = (0.0, 1.0, 0.0)
        cam.view_angle = config.CAMERA_FEED_VIEW_ANGLE
        cam.clipping_range = config.CLIPPING_RANGE
