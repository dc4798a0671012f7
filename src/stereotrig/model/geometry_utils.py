"""
Geometric helper functions (pure, no rendering).
"""
from __future__ import annotations

import math
from typing import Optional, TYPE_CHECKING

import numpy as np

from stereotrig.model.geometry_primitives import Vector3

if TYPE_CHECKING:
    import numpy.typing as npt


def clamp(value: float, lower: float, upper: float) -> float:
    """Clamp value into [lower, upper]."""
    return max(lower, min(upper, value))


def clamp_to_bounds(
    point: Vector3,
    x_range: tuple[float, float],
    z_range: tuple[float, float],
) -> Vector3:
    """Clamp the ground (XZ) position of a point into a rectangle. Y is kept."""
    return point.with_xz(
        clamp(point.x, *x_range),
        clamp(point.z, *z_range),
    )


def arc_points(
    center: Vector3,
    radius: float,
    start_angle: float,
    end_angle: float,
    segments: int,
) -> npt.NDArray[np.float64]:
    """
    Sample a horizontal arc around center, in the plane y = center.y.

    The angle is measured from +X toward +Z, so a point is
    (cx + r·cos φ, cy, cz + r·sin φ).

    Returns:
        (segments + 1, 3) array, first point at start_angle, last at end_angle.
    """
    if segments < 1:
        raise ValueError(f"Arc needs at least one segment, got {segments}.")

    angles = np.linspace(start_angle, end_angle, segments + 1)
    points = np.empty((segments + 1, 3), dtype=np.float64)
    points[:, 0] = center.x + radius * np.cos(angles)
    points[:, 1] = center.y
    points[:, 2] = center.z + radius * np.sin(angles)
    return points


def ray_plane_intersection_y(
    origin: Vector3,
    direction: Vector3,
    plane_y: float,
) -> Optional[Vector3]:
    """
    Intersect a ray with the horizontal plane y = plane_y.

    Returns:
        The hit point, or None if the ray is parallel to the plane or points
        away from it.
    """
    if math.isclose(direction.y, 0.0, abs_tol=1e-12):
        return None

    t = (plane_y - origin.y) / direction.y
    if t < 0.0:
        return None

    return origin + direction * t
