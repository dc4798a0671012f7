from __future__ import annotations

import math

import numpy as np
import pytest

from stereotrig import config
from stereotrig.model import state as scene
from stereotrig.model.geometry_primitives import Vector3
from stereotrig.model.state import Parameters, SceneState, recompute_camera_positions


class TestCameraPositions:
    @pytest.mark.parametrize("baseline, vehicle_z", [(1.5, 0.0), (0.5, 12.0), (3.0, 30.0)])
    def test_cameras_symmetric_about_centerline(self, baseline, vehicle_z):
        cameras = recompute_camera_positions(Parameters(baseline=baseline, vehicle_z=vehicle_z))
        a, b = cameras.camera_a.position, cameras.camera_b.position

        assert a.x == -b.x
        assert a.y == b.y == config.CAMERA_HEIGHT
        assert a.z == b.z == vehicle_z + config.CAMERA_MOUNT_OFFSET
        np.testing.assert_allclose(a.distance_to(b), baseline)

    def test_by_name(self, state):
        assert state.cameras.by_name("B") == state.cameras.camera_b
        with pytest.raises(ValueError):
            state.cameras.by_name("C")


class TestDefaultState:
    def test_defaults(self, state):
        assert state.params == Parameters(baseline=1.5, camera_height=1.5, vehicle_z=0.0)
        assert [obj.id for obj in state.objects] == ["object-1", "object-2", "object-3", "object-4"]
        assert state.selected_object is None
        assert state.triangulate() is None


class TestBaseline:
    def test_set_baseline_moves_cameras(self, state):
        new_state = scene.set_baseline(state, 2.0)
        assert new_state.cameras.camera_a.position.x == -1.0
        assert new_state.cameras.camera_b.position.x == 1.0
        # Original snapshot untouched
        assert state.params.baseline == 1.5

    @pytest.mark.parametrize("value", [0.0, -1.0, math.nan, math.inf])
    def test_invalid_baseline_raises(self, state, value):
        with pytest.raises(ValueError):
            scene.set_baseline(state, value)


class TestVehicle:
    def test_step_forward_and_backward(self, state):
        forward = scene.step_vehicle(state, 1)
        assert forward.params.vehicle_z == 0.5
        assert forward.cameras.camera_a.position.z == 2.0
        assert scene.step_vehicle(forward, -1).params.vehicle_z == 0.0

    def test_vehicle_clamped_to_road(self, state):
        assert scene.step_vehicle(state, -1).params.vehicle_z == 0.0
        assert scene.set_vehicle_z(state, 100.0).params.vehicle_z == 30.0
        at_end = scene.set_vehicle_z(state, 30.0)
        assert scene.step_vehicle(at_end, 1).params.vehicle_z == 30.0

    def test_zero_direction_is_noop(self, state):
        assert scene.step_vehicle(state, 0) is state


class TestSelection:
    def test_select_is_exclusive(self, state):
        first = scene.select(state, "object-1")
        second = scene.select(first, "object-3")

        selected = [obj.id for obj in second.objects if obj.is_selected]
        assert selected == ["object-3"]
        assert second.selected_object.id == "object-3"

    def test_select_none_clears(self, state):
        cleared = scene.select(scene.select(state, "object-2"), None)
        assert cleared.selected_object is None

    def test_unknown_id_raises(self, state):
        with pytest.raises(ValueError):
            scene.select(state, "object-99")

    def test_triangulate_uses_selected_object(self, state):
        result = scene.select(state, "object-1").triangulate()
        np.testing.assert_allclose(result.distance_a, math.sqrt(28.8125))


class TestMoveObject:
    def test_move_keeps_height(self, state):
        moved = scene.move_object(state, "object-3", Vector3(-2.0, 9.0, 12.0))
        assert moved.get_object("object-3").position == Vector3(-2.0, 0.6, 12.0)

    def test_move_is_clamped_and_idempotent(self, state):
        once = scene.move_object(state, "object-1", Vector3(50.0, 0.5, -10.0))
        position = once.get_object("object-1").position
        assert position == Vector3(14.0, 0.5, 0.0)

        twice = scene.move_object(once, "object-1", position)
        assert twice == once

    def test_move_unknown_object_raises(self, state):
        with pytest.raises(ValueError):
            scene.move_object(state, "missing", Vector3(0.0, 0.0, 0.0))


class TestReset:
    def test_reset_restores_baseline_and_clears_selection(self, state):
        changed = scene.select(scene.set_baseline(state, 2.8), "object-2")
        changed = scene.step_vehicle(changed, 1)
        changed = scene.move_object(changed, "object-2", Vector3(-5.0, 0.0, 25.0))

        after = scene.reset(changed)

        assert after.params.baseline == config.DEFAULT_BASELINE
        assert after.selected_object is None
        # Vehicle and objects stay where they are
        assert after.params.vehicle_z == 0.5
        assert after.get_object("object-2").position == Vector3(-5.0, 0.5, 25.0)

    def test_reset_of_default_state_is_equal(self, state):
        assert scene.reset(state) == SceneState()
