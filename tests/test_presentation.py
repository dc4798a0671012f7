from __future__ import annotations

import math

import numpy as np
import pytest

from stereotrig import config
from stereotrig.model import state as scene
from stereotrig.model.geometry_primitives import Vector3
from stereotrig.model.presentation import (
    NO_SELECTION_MESSAGE, build_explanation, build_overlay, camera_look_target, object_rows
)


class TestOverlay:
    def test_no_selection_no_overlay(self, state):
        assert build_overlay(state) is None

    def test_sight_lines_and_arcs(self, state):
        selected = scene.select(state, "object-1")
        overlay = build_overlay(selected)
        cam_a = selected.cameras.camera_a.position
        cam_b = selected.cameras.camera_b.position
        target = selected.get_object("object-1").position
        theta_a = math.atan2(4.5, 2.75)

        assert overlay.sight_line_a == (cam_a, target)
        assert overlay.sight_line_b == (cam_b, target)

        assert overlay.arc_a.shape == (config.ARC_SEGMENTS + 1, 3)
        np.testing.assert_allclose(overlay.arc_a[0], [cam_a.x, cam_a.y, cam_a.z - 1.0], atol=1e-12)
        end = -math.pi / 2 + theta_a
        np.testing.assert_allclose(
            overlay.arc_a[-1],
            [cam_a.x + math.cos(end), cam_a.y, cam_a.z + math.sin(end)],
            atol=1e-12,
        )
        np.testing.assert_allclose(overlay.arc_b[-1], [cam_b.x, cam_b.y, cam_b.z + 1.0], atol=1e-12)


class TestLookTarget:
    def test_straight_ahead_without_selection(self, state):
        moved = scene.step_vehicle(state, 1)
        assert camera_look_target(moved) == Vector3(0.0, 1.5, 20.5)

    def test_selected_object(self, state):
        selected = scene.select(state, "object-4")
        assert camera_look_target(selected) == Vector3(2.5, 0.5, 20.0)


class TestObjectRows:
    def test_no_selection(self, state):
        rows = object_rows(state)
        assert [row.distance_text for row in rows] == ["—m"] * 4
        assert [row.icon for row in rows] == ["🚗", "🚶", "🚧", "🛑"]

    def test_selected_row_shows_distance(self, state):
        rows = object_rows(scene.select(state, "object-1"))
        assert rows[0].selected
        assert rows[0].distance_text == "5.4m"
        assert all(row.distance_text == "—m" for row in rows[1:])


class TestExplanation:
    def test_placeholder(self, state):
        explanation = build_explanation(state)
        assert not explanation.has_selection
        assert explanation.placeholder == NO_SELECTION_MESSAGE
        assert explanation.steps == ()

    def test_five_steps(self, state):
        explanation = build_explanation(scene.select(state, "object-1"))

        assert explanation.has_selection
        assert [step.title.split(":")[0] for step in explanation.steps] == [
            "STEP 1", "STEP 2", "STEP 3", "STEP 4", "STEP 5"
        ]
        assert [step.final for step in explanation.steps] == [False, False, False, False, True]

        step1, step2, step3, step4, step5 = explanation.steps
        assert "Baseline: b = 1.50m" in step1.lines
        assert "Camera A position: (-0.75, 1.50)" in step1.lines
        assert step2.lines[0].endswith("58.6°")
        assert step2.lines[1].endswith("74.5°")
        assert step3.lines == ("tan(θ₁) = 1.636", "tan(θ₂) = 3.600")
        assert "tan(α₂) = -tan(θ₂) = -3.600" in step4.lines
        assert "Illustrative: offset ≈ 2.75m, x ≈ 2.00m, z ≈ 6.00m" in step4.lines
        # Step 4 formula evaluated with the interior angle gives the offset shown
        tan_1 = float(step3.lines[0].split("= ")[1])
        tan_alpha_2 = float(step4.lines[2].split("= ")[-1])
        assert 1.5 * tan_alpha_2 / (tan_1 + tan_alpha_2) == pytest.approx(2.75, abs=0.01)
        assert "Distance from Camera A: d = 5.37m" in step5.lines
        assert "Distance from Camera B: d = 4.78m" in step5.lines
