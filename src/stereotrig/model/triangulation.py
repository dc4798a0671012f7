"""
Triangulation Engine
====================
Pure functions mapping two camera positions and one target position to the
bearing angles, distances and tangent values shown to the user.

Key relations (camera A on the left, camera B on the right):

    θ      = atan2(Δz, Δx)                 bearing in the ground plane
    d      = sqrt(Δx² + Δy² + Δz²)         3D distance
    d_h    = sqrt(Δx² + Δz²)               ground-plane distance
    x      = b·tan(α_B) / (tan(α_A) + tan(α_B))

where α_A, α_B are the interior angles of the triangle A-B-target at each
camera. The last relation is only evaluated for the explanation panel; the
object position is always known, this module never writes it back.

Nothing here raises on finite input. Degenerate geometry yields inf / NaN /
extreme values, which the caller displays as-is.
"""
from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from stereotrig.model import rad_to_deg
from stereotrig.model.geometry_primitives import Vector3


@dataclass(frozen=True)
class TriangulationResult:
    """Angles and distances from both cameras to one target."""
    theta_a: float  # [rad] (-π, π]
    theta_b: float  # [rad] (-π, π]
    distance_a: float
    distance_b: float
    horizontal_dist_a: float
    horizontal_dist_b: float
    tan_theta_a: float
    tan_theta_b: float

    @property
    def theta_a_deg(self) -> float:
        return rad_to_deg(self.theta_a)

    @property
    def theta_b_deg(self) -> float:
        return rad_to_deg(self.theta_b)


@dataclass(frozen=True)
class RecoveredPosition:
    """Ground position re-derived from the two bearings (illustrative)."""
    offset_from_a: float  # lateral distance from camera A [m]
    depth: float  # forward distance from the camera baseline [m]
    x: float
    z: float


@dataclass(frozen=True)
class _Bearing:
    theta: float
    distance: float
    horizontal_distance: float
    tan_theta: float


def _bearing(camera: Vector3, target: Vector3) -> _Bearing:
    delta = target - camera
    theta = math.atan2(delta.z, delta.x)
    return _Bearing(
        theta=theta,
        distance=delta.magnitude,
        horizontal_distance=delta.horizontal_magnitude,
        # No guard: θ = ±π/2 gives a huge value, which is what gets shown
        tan_theta=float(np.tan(theta)),
    )


def compute_triangulation(cam_a: Vector3, cam_b: Vector3, target: Vector3) -> TriangulationResult:
    """
    Compute bearings and distances from camera A and camera B to a target.

    Args:
        cam_a: Position of the left camera.
        cam_b: Position of the right camera.
        target: Position of the target object.

    Returns:
        A fresh TriangulationResult. Never cached by callers.
    """
    a = _bearing(cam_a, target)
    b = _bearing(cam_b, target)
    return TriangulationResult(
        theta_a=a.theta,
        theta_b=b.theta,
        distance_a=a.distance,
        distance_b=b.distance,
        horizontal_dist_a=a.horizontal_distance,
        horizontal_dist_b=b.horizontal_distance,
        tan_theta_a=a.tan_theta,
        tan_theta_b=b.tan_theta,
    )


def recover_position(result: TriangulationResult, cam_a: Vector3, baseline: float) -> RecoveredPosition:
    """
    Evaluate the textbook position-recovery formula from the two bearings.

    At camera A the interior angle is θA itself (measured from the +x axis,
    which points at camera B). At camera B it is measured from the -x axis,
    so α_B = π - θB and tan(α_B) = -tan(θB).

    The result is for display only.
    """
    tan_alpha_a = np.float64(result.tan_theta_a)
    tan_alpha_b = -np.float64(result.tan_theta_b)

    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        offset = np.float64(baseline) * tan_alpha_b / (tan_alpha_a + tan_alpha_b)
        depth = offset * tan_alpha_a

    return RecoveredPosition(
        offset_from_a=float(offset),
        depth=float(depth),
        x=float(cam_a.x + offset),
        z=float(cam_a.z + depth),
    )
