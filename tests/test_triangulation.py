"""Tests for the bearing/distance computation and the position recovery."""
from __future__ import annotations

import math

import numpy as np
import pytest

from stereotrig.model.geometry_primitives import Vector3
from stereotrig.model.triangulation import compute_triangulation, recover_position


class TestComputeTriangulation:
    def setup_method(self):
        self.cam_a = Vector3(-0.75, 1.5, 1.5)
        self.cam_b = Vector3(0.75, 1.5, 1.5)
        self.target = Vector3(2.0, 0.5, 6.0)

    def test_reference_example(self):
        result = compute_triangulation(self.cam_a, self.cam_b, self.target)

        np.testing.assert_allclose(result.theta_a, math.atan2(4.5, 2.75))
        np.testing.assert_allclose(result.theta_b, math.atan2(4.5, 1.25))
        np.testing.assert_allclose(result.theta_a_deg, 58.57, atol=0.01)
        np.testing.assert_allclose(result.theta_b_deg, 74.48, atol=0.01)
        np.testing.assert_allclose(result.distance_a, math.sqrt(28.8125))
        np.testing.assert_allclose(result.distance_b, math.sqrt(22.8125))
        np.testing.assert_allclose(result.horizontal_dist_a, math.sqrt(27.8125))
        np.testing.assert_allclose(result.tan_theta_a, 4.5 / 2.75)
        np.testing.assert_allclose(result.tan_theta_b, 4.5 / 1.25)

    def test_distance_is_never_below_horizontal_distance(self):
        for target in (self.target, Vector3(-3.0, 4.0, 12.0)):
            result = compute_triangulation(self.cam_a, self.cam_b, target)
            assert result.distance_a > result.horizontal_dist_a
            assert result.distance_b > result.horizontal_dist_b

    def test_distance_equals_horizontal_distance_at_camera_height(self):
        result = compute_triangulation(self.cam_a, self.cam_b, Vector3(0.0, 1.5, 20.0))
        assert result.distance_a == pytest.approx(result.horizontal_dist_a)
        assert result.distance_b == pytest.approx(result.horizontal_dist_b)

    def test_swapped_and_mirrored_rig(self):
        cam_a = Vector3(-1.0, 1.5, 1.5)
        cam_b = Vector3(0.5, 1.5, 1.5)
        original = compute_triangulation(cam_a, cam_b, self.target)
        mirrored = compute_triangulation(cam_b.mirrored_x(), cam_a.mirrored_x(), self.target.mirrored_x())

        np.testing.assert_allclose(mirrored.theta_a, math.pi - original.theta_b)
        np.testing.assert_allclose(mirrored.theta_b, math.pi - original.theta_a)
        np.testing.assert_allclose(mirrored.tan_theta_a, -original.tan_theta_b)
        np.testing.assert_allclose(mirrored.tan_theta_b, -original.tan_theta_a)
        np.testing.assert_allclose(mirrored.distance_a, original.distance_b)
        np.testing.assert_allclose(mirrored.distance_b, original.distance_a)
        np.testing.assert_allclose(mirrored.horizontal_dist_a, original.horizontal_dist_b)
        np.testing.assert_allclose(mirrored.horizontal_dist_b, original.horizontal_dist_a)

    def test_mirrored_target_swaps_the_cameras(self):
        original = compute_triangulation(self.cam_a, self.cam_b, self.target)
        mirrored = compute_triangulation(self.cam_a, self.cam_b, self.target.mirrored_x())

        np.testing.assert_allclose(mirrored.distance_a, original.distance_b)
        np.testing.assert_allclose(mirrored.distance_b, original.distance_a)
        np.testing.assert_allclose(mirrored.theta_a, math.pi - original.theta_b)
        np.testing.assert_allclose(mirrored.tan_theta_a, -original.tan_theta_b)

    def test_target_straight_ahead_of_camera_does_not_raise(self):
        target = Vector3(self.cam_a.x, 0.5, 10.0)
        result = compute_triangulation(self.cam_a, self.cam_b, target)

        np.testing.assert_allclose(result.theta_a, math.pi / 2)
        assert abs(result.tan_theta_a) > 1e10

    def test_target_on_camera_position(self):
        result = compute_triangulation(self.cam_a, self.cam_b, self.cam_a)

        assert result.distance_a == 0.0
        assert result.theta_a == 0.0

    def test_target_behind_cameras_gives_negative_angles(self):
        result = compute_triangulation(self.cam_a, self.cam_b, Vector3(0.0, 0.5, 0.0))
        assert result.theta_a < 0.0
        assert result.theta_b < 0.0


class TestRecoverPosition:
    def setup_method(self):
        self.cam_a = Vector3(-0.75, 1.5, 1.5)
        self.cam_b = Vector3(0.75, 1.5, 1.5)

    def test_recovers_reference_target(self):
        result = compute_triangulation(self.cam_a, self.cam_b, Vector3(2.0, 0.5, 6.0))
        recovered = recover_position(result, self.cam_a, 1.5)

        np.testing.assert_allclose(recovered.offset_from_a, 2.75)
        np.testing.assert_allclose(recovered.depth, 4.5)
        np.testing.assert_allclose(recovered.x, 2.0)
        np.testing.assert_allclose(recovered.z, 6.0)

    @pytest.mark.parametrize("x, z", [(0.0, 10.0), (-3.0, 4.0), (0.3, 25.0)])
    def test_recovers_targets_between_and_outside_cameras(self, x, z):
        result = compute_triangulation(self.cam_a, self.cam_b, Vector3(x, 0.5, z))
        recovered = recover_position(result, self.cam_a, 1.5)

        np.testing.assert_allclose(recovered.x, x, atol=1e-9)
        np.testing.assert_allclose(recovered.z, z, atol=1e-9)

    def test_target_on_baseline_gives_nan_without_raising(self):
        target = Vector3(3.0, 1.5, 1.5)
        result = compute_triangulation(self.cam_a, self.cam_b, target)
        recovered = recover_position(result, self.cam_a, 1.5)

        assert not math.isfinite(recovered.x)
