"""
VTK and Geometry Utilities
Helper functions for building scene meshes and converting display picks.
"""
from __future__ import annotations

import logging
from typing import Optional, Sequence

import numpy as np
import numpy.typing as npt
import pyvista as pv
from vtkmodules.vtkRenderingCore import vtkPropPicker, vtkRenderer, vtkActor

from stereotrig.model.geometry_primitives import Vector3

logger = logging.getLogger(__name__)


class VtkUtils:
    # ------------------------------------------------------------------------------
    # Mesh builders
    # ------------------------------------------------------------------------------

    @staticmethod
    def polyline_to_polydata(points: npt.NDArray[np.float64]) -> pv.PolyData:
        """Convert a (N, 3) array of points to a single PolyData polyline."""
        pts = np.asarray(points, dtype=np.float64).reshape(-1, 3)
        n = pts.shape[0]
        pd = pv.PolyData(pts)
        pd.lines = np.hstack([[n], np.arange(n, dtype=np.int_)])
        return pd

    @staticmethod
    def segment_polydata(start: Vector3, end: Vector3) -> pv.PolyData:
        return VtkUtils.polyline_to_polydata(np.array([start.to_array(), end.to_array()]))

    @staticmethod
    def ground_quad(x_range: tuple[float, float], z_range: tuple[float, float], y: float = 0.0) -> pv.PolyData:
        """A flat rectangle in the XZ plane at height y."""
        x0, x1 = x_range
        z0, z1 = z_range
        points = np.array([
            [x0, y, z0],
            [x1, y, z0],
            [x1, y, z1],
            [x0, y, z1],
        ], dtype=np.float64)
        return pv.PolyData(points, faces=np.array([4, 0, 1, 2, 3]))

    @staticmethod
    def build_xz_grid_polydata(bounds: tuple[float, float, float, float], spacing: float, y: float = 0.0) -> pv.PolyData:
        """
        Create grid lines in the XZ (ground) plane.

        Args:
            bounds: (x_min, x_max, z_min, z_max)
            spacing: Grid spacing in both directions.
            y: Height of the grid.

        Returns:
            A PyVista PolyData with one line cell per grid line.
        """
        x_min, x_max, z_min, z_max = bounds
        xs = np.arange(x_min, x_max + 0.5 * spacing, spacing)
        zs = np.arange(z_min, z_max + 0.5 * spacing, spacing)

        n_lines = len(xs) + len(zs)
        if n_lines == 0:
            return pv.PolyData()

        points = np.empty((n_lines * 2, 3), dtype=float)
        cells = np.empty(n_lines * 3, dtype=int)

        pid, cid = 0, 0
        for x in xs:
            points[pid] = (x, y, z_min)
            points[pid + 1] = (x, y, z_max)
            cells[cid:cid + 3] = (2, pid, pid + 1)
            pid += 2
            cid += 3
        for z in zs:
            points[pid] = (x_min, y, z)
            points[pid + 1] = (x_max, y, z)
            cells[cid:cid + 3] = (2, pid, pid + 1)
            pid += 2
            cid += 3

        return pv.PolyData(points, lines=cells)

    @staticmethod
    def vehicle_meshes() -> list[pv.PolyData]:
        """Body + cabin, centered on the vehicle origin (moved via actor position)."""
        body = pv.Box(bounds=(-0.9, 0.9, 0.0, 0.8, -1.75, 1.75))
        cabin = pv.Box(bounds=(-0.8, 0.8, 0.7, 1.3, -1.3, 0.7))
        return [body, cabin]

    @staticmethod
    def camera_cone() -> pv.PolyData:
        return pv.Cone(center=(0.0, 0.0, 0.0), direction=(0.0, 0.0, 1.0), height=0.4, radius=0.15, resolution=16)

    @staticmethod
    def target_sphere() -> pv.PolyData:
        return pv.Sphere(radius=0.5, center=(0.0, 0.0, 0.0), theta_resolution=16, phi_resolution=16)

    # ------------------------------------------------------------------------------
    # Display <-> world
    # ------------------------------------------------------------------------------

    @staticmethod
    def display_to_world(renderer: vtkRenderer, x: float, y: float, depth: float) -> npt.NDArray[np.float64]:
        """Convert a display point (pixels, depth in [0, 1]) to world coordinates."""
        renderer.SetDisplayPoint(x, y, depth)
        renderer.DisplayToWorld()
        wx, wy, wz, w = renderer.GetWorldPoint()
        if w == 0.0:
            w = 1.0
        return np.array([wx / w, wy / w, wz / w], dtype=np.float64)

    @staticmethod
    def pointer_ray(renderer: vtkRenderer, x: float, y: float) -> tuple[Vector3, Vector3]:
        """
        Build the world-space ray under a display point.

        Returns:
            (origin on the near plane, direction toward the far plane)
        """
        near = VtkUtils.display_to_world(renderer, x, y, 0.0)
        far = VtkUtils.display_to_world(renderer, x, y, 1.0)
        return Vector3.from_iterable(near), Vector3.from_iterable(far - near)

    @staticmethod
    def pick_actor(
        renderer: vtkRenderer,
        x: float,
        y: float,
        candidates: Sequence[vtkActor],
    ) -> Optional[vtkActor]:
        """Return the candidate actor under the display point, if any."""
        picker = vtkPropPicker()
        if not picker.Pick(x, y, 0.0, renderer):
            return None
        actor = picker.GetActor()
        for candidate in candidates:
            if candidate is actor:
                return candidate
        return None
