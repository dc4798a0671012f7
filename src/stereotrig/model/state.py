"""
Scene State (Data Model)
========================
This module defines the central data structure for the running application.

Why is this file needed?
------------------------
1. State Management: It holds the parameters (baseline, vehicle position)
   and the target objects in one immutable snapshot.
2. Consistency: Camera positions are derived from the parameters on read,
   so they can never drift out of sync with the baseline or the vehicle.
3. Decoupling: Every change is a pure function (state, ...) -> new state.
   The Store (controller) swaps snapshots, Views only read them.

Classes:
    Parameters: User-adjustable rig parameters.
    Camera / CameraPair: Derived camera positions.
    TargetObject: A draggable object on the road.
    SceneState: The snapshot container.
"""
from __future__ import annotations

from dataclasses import dataclass, field, replace
import logging
import math
from typing import Optional

from stereotrig import config
from stereotrig.model.geometry_primitives import Vector3
from stereotrig.model.geometry_utils import clamp, clamp_to_bounds
from stereotrig.model.triangulation import TriangulationResult, compute_triangulation

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Parameters:
    baseline: float = config.DEFAULT_BASELINE
    camera_height: float = config.CAMERA_HEIGHT
    vehicle_z: float = config.DEFAULT_VEHICLE_Z


@dataclass(frozen=True)
class Camera:
    name: str
    position: Vector3


@dataclass(frozen=True)
class CameraPair:
    camera_a: Camera
    camera_b: Camera

    def __iter__(self):
        yield self.camera_a
        yield self.camera_b

    def by_name(self, name: str) -> Camera:
        for camera in self:
            if camera.name == name:
                return camera
        raise ValueError(f"Camera '{name}' not found.")


@dataclass(frozen=True)
class TargetObject:
    id: str
    display_name: str
    position: Vector3
    icon: str = ""
    color: str = "#FF5722"
    is_selected: bool = False


def recompute_camera_positions(params: Parameters) -> CameraPair:
    """
    Place both cameras symmetrically about the vehicle centerline.

    A = (-b/2, h, z_vehicle + offset), B = (+b/2, h, z_vehicle + offset)
    """
    half = params.baseline / 2.0
    z = params.vehicle_z + config.CAMERA_MOUNT_OFFSET
    return CameraPair(
        camera_a=Camera("A", Vector3(-half, params.camera_height, z)),
        camera_b=Camera("B", Vector3(half, params.camera_height, z)),
    )


def default_objects() -> tuple[TargetObject, ...]:
    """The objects placed on the road at startup."""
    return (
        TargetObject("object-1", "Object 1", Vector3(2.0, 0.5, 6.0), icon="🚗", color="#FF5722"),
        TargetObject("object-2", "Object 2", Vector3(3.0, 0.5, 10.0), icon="🚶", color="#FF9800"),
        TargetObject("object-3", "Object 3", Vector3(4.0, 0.6, 15.0), icon="🚧", color="#FFC107"),
        TargetObject("object-4", "Object 4", Vector3(2.5, 0.5, 20.0), icon="🛑", color="#E91E63"),
    )


@dataclass(frozen=True)
class SceneState:
    """
    Immutable snapshot of the whole scene.
    Pass it to Views; never mutate it, derive a new one with the functions below.
    """
    params: Parameters = field(default_factory=Parameters)
    objects: tuple[TargetObject, ...] = field(default_factory=default_objects)

    @property
    def cameras(self) -> CameraPair:
        return recompute_camera_positions(self.params)

    @property
    def selected_object(self) -> Optional[TargetObject]:
        for obj in self.objects:
            if obj.is_selected:
                return obj
        return None

    def get_object(self, object_id: str) -> TargetObject:
        for obj in self.objects:
            if obj.id == object_id:
                return obj
        raise ValueError(f"Object with id '{object_id}' not found.")

    def triangulate(self) -> Optional[TriangulationResult]:
        """Fresh triangulation of the selected object, or None."""
        selected = self.selected_object
        if selected is None:
            return None
        cameras = self.cameras
        return compute_triangulation(
            cameras.camera_a.position,
            cameras.camera_b.position,
            selected.position,
        )


# ------------------------------------------------------------------------------
# Update functions
# ------------------------------------------------------------------------------

def set_baseline(state: SceneState, baseline: float) -> SceneState:
    if not math.isfinite(baseline) or baseline <= 0.0:
        raise ValueError(f"Baseline must be a positive number, got {baseline}.")
    logger.info(f"Baseline set to {baseline:.2f} m.")
    return replace(state, params=replace(state.params, baseline=float(baseline)))


def set_vehicle_z(state: SceneState, vehicle_z: float) -> SceneState:
    z = clamp(float(vehicle_z), *config.VEHICLE_Z_RANGE)
    return replace(state, params=replace(state.params, vehicle_z=z))


def step_vehicle(state: SceneState, direction: int) -> SceneState:
    """
    Move the vehicle one step forward (direction > 0) or backward (direction < 0).
    The position is clamped to the road.
    """
    if direction == 0:
        return state
    step = config.VEHICLE_STEP if direction > 0 else -config.VEHICLE_STEP
    new_state = set_vehicle_z(state, state.params.vehicle_z + step)
    logger.info(f"Vehicle moved to z = {new_state.params.vehicle_z:.1f} m.")
    return new_state


def select(state: SceneState, object_id: Optional[str]) -> SceneState:
    """
    Select one object (or none, with object_id=None).

    The previous selection is cleared in the same step, so a snapshot never
    holds two selected objects.
    """
    if object_id is not None:
        state.get_object(object_id)  # validates id

    objects = tuple(
        replace(obj, is_selected=(obj.id == object_id))
        for obj in state.objects
    )
    logger.info(f"Selected object: {object_id}")
    return replace(state, objects=objects)


def move_object(state: SceneState, object_id: str, raw_position: Vector3) -> SceneState:
    """
    Move an object on the ground plane. Only X and Z are taken from
    raw_position (clamped to the road), the object keeps its height.
    """
    target = state.get_object(object_id)
    clamped = clamp_to_bounds(
        target.position.with_xz(raw_position.x, raw_position.z),
        config.OBJECT_X_RANGE,
        config.OBJECT_Z_RANGE,
    )
    logger.debug(f"Moving {object_id} to ({clamped.x:.2f}, {clamped.z:.2f}).")
    objects = tuple(
        replace(obj, position=clamped) if obj.id == object_id else obj
        for obj in state.objects
    )
    return replace(state, objects=objects)


def reset(state: SceneState) -> SceneState:
    """Restore the default baseline and clear the selection."""
    logger.info("Scene reset (baseline + selection).")
    return select(
        replace(state, params=replace(state.params, baseline=config.DEFAULT_BASELINE)),
        None,
    )
