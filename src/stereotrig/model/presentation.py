"""
Presentation Data
=================
Converts a SceneState into plain data for the views: overlay geometry
(sight lines, angle arcs), the object list rows and the five-step
explanation. No Qt, no PyVista: the widgets only draw what is returned here.
"""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Optional, TYPE_CHECKING

import numpy as np

from stereotrig import config
from stereotrig.model.geometry_primitives import Vector3
from stereotrig.model.geometry_utils import arc_points
from stereotrig.model.state import SceneState
from stereotrig.model.triangulation import recover_position

if TYPE_CHECKING:
    import numpy.typing as npt

NO_SELECTION_MESSAGE = "Select an object to see the calculation steps."
NO_DISTANCE = "—"


# ------------------------------------------------------------------------------
# Overlay geometry
# ------------------------------------------------------------------------------

@dataclass(frozen=True)
class OverlayGeometry:
    """Everything drawn on top of the scene for the selected object."""
    sight_line_a: tuple[Vector3, Vector3]
    sight_line_b: tuple[Vector3, Vector3]
    arc_a: npt.NDArray[np.float64]  # (N, 3)
    arc_b: npt.NDArray[np.float64]  # (N, 3)


def build_overlay(state: SceneState) -> Optional[OverlayGeometry]:
    selected = state.selected_object
    result = state.triangulate()
    if selected is None or result is None:
        return None

    cam_a = state.cameras.camera_a.position
    cam_b = state.cameras.camera_b.position

    # Arc A sweeps from the backward axis by θA, arc B ends on the forward axis
    arc_a = arc_points(
        cam_a, config.ARC_RADIUS,
        -math.pi / 2, -math.pi / 2 + result.theta_a,
        config.ARC_SEGMENTS,
    )
    arc_b = arc_points(
        cam_b, config.ARC_RADIUS,
        math.pi / 2 - result.theta_b, math.pi / 2,
        config.ARC_SEGMENTS,
    )
    return OverlayGeometry(
        sight_line_a=(cam_a, selected.position),
        sight_line_b=(cam_b, selected.position),
        arc_a=arc_a,
        arc_b=arc_b,
    )


def camera_look_target(state: SceneState) -> Vector3:
    """Where both simulated camera feeds point: the selected object, or straight ahead."""
    selected = state.selected_object
    if selected is not None:
        return selected.position
    return Vector3(0.0, state.params.camera_height, state.params.vehicle_z + config.LOOK_AHEAD_DISTANCE)


# ------------------------------------------------------------------------------
# Object list
# ------------------------------------------------------------------------------

@dataclass(frozen=True)
class ObjectRow:
    id: str
    icon: str
    name: str
    color: str
    selected: bool
    distance_text: str


def object_rows(state: SceneState) -> list[ObjectRow]:
    """One row per object; only the selected one shows its distance to camera A."""
    result = state.triangulate()
    rows = []
    for obj in state.objects:
        if obj.is_selected and result is not None:
            distance = f"{result.distance_a:.1f}"
        else:
            distance = NO_DISTANCE
        rows.append(ObjectRow(
            id=obj.id,
            icon=obj.icon,
            name=obj.display_name,
            color=obj.color,
            selected=obj.is_selected,
            distance_text=f"{distance}m",
        ))
    return rows


# ------------------------------------------------------------------------------
# Explanation panel
# ------------------------------------------------------------------------------

@dataclass(frozen=True)
class ExplanationStep:
    title: str
    lines: tuple[str, ...]
    note: str = ""
    final: bool = False


@dataclass(frozen=True)
class Explanation:
    steps: tuple[ExplanationStep, ...] = field(default_factory=tuple)
    placeholder: Optional[str] = None

    @property
    def has_selection(self) -> bool:
        return self.placeholder is None


def build_explanation(state: SceneState) -> Explanation:
    """
    Build the five-step derivation for the selected object:
    known values -> measured angles -> tangents -> equations -> result.
    """
    selected = state.selected_object
    result = state.triangulate()
    if selected is None or result is None:
        return Explanation(placeholder=NO_SELECTION_MESSAGE)

    params = state.params
    cam_a = state.cameras.camera_a.position
    cam_b = state.cameras.camera_b.position
    recovered = recover_position(result, cam_a, params.baseline)
    pos = selected.position

    steps = (
        ExplanationStep(
            title="STEP 1: Known values",
            lines=(
                f"Baseline: b = {params.baseline:.2f}m",
                f"Camera A position: ({cam_a.x:.2f}, {cam_a.z:.2f})",
                f"Camera B position: ({cam_b.x:.2f}, {cam_b.z:.2f})",
            ),
        ),
        ExplanationStep(
            title="STEP 2: Measured angles",
            lines=(
                f"θ₁ = atan2(Δz, Δx) = {result.theta_a_deg:.1f}°",
                f"θ₂ = atan2(Δz, Δx) = {result.theta_b_deg:.1f}°",
            ),
            note="atan2 accounts for all four quadrants.",
        ),
        ExplanationStep(
            title="STEP 3: Tangent values",
            lines=(
                f"tan(θ₁) = {result.tan_theta_a:.3f}",
                f"tan(θ₂) = {result.tan_theta_b:.3f}",
            ),
            note="The tangent turns an angle into a distance ratio.",
        ),
        ExplanationStep(
            title="STEP 4: Solving for the position (theory)",
            lines=(
                "tan(θ₁) = z / (x - camA.x)",
                "tan(α₂) = z / (camB.x - x),  α₂ = 180° - θ₂",
                f"tan(α₂) = -tan(θ₂) = {-result.tan_theta_b:.3f}",
                "offset from A = b·tan(α₂) / (tan(θ₁) + tan(α₂))",
                f"Illustrative: offset ≈ {recovered.offset_from_a:.2f}m, "
                f"x ≈ {recovered.x:.2f}m, z ≈ {recovered.z:.2f}m",
            ),
            note="α₂ is the interior angle at camera B. "
                 "The illustrative values are not fed back into the scene.",
        ),
        ExplanationStep(
            title="STEP 5: Result",
            lines=(
                f"Object position: x = {pos.x:.2f}m, z = {pos.z:.2f}m",
                f"Distance from Camera A: d = {result.distance_a:.2f}m",
                f"Distance from Camera B: d = {result.distance_b:.2f}m",
            ),
            note="A real driving system repeats this many times per second.",
            final=True,
        ),
    )
    return Explanation(steps=steps)
