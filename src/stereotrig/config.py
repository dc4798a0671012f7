"""
Configuration & Constants
=========================
This module serves as the central registry for global constants.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (bounds, step sizes, offsets)
   scattered throughout the model, controller and view.
2. Consistency: The model clamps against the same bounds the view draws.

Exports:
    Scene limits, defaults, interaction steps and viewport poses.
"""
from typing import Final

VISIBLE_APP_NAME: Final[str] = "Stereo Triangulation"

# --- Scene limits [m] ---
OBJECT_X_RANGE: Final[tuple[float, float]] = (-14.0, 14.0)
OBJECT_Z_RANGE: Final[tuple[float, float]] = (0.0, 30.0)
VEHICLE_Z_RANGE: Final[tuple[float, float]] = (0.0, 30.0)

# --- Defaults [m] ---
DEFAULT_BASELINE: Final[float] = 1.5
CAMERA_HEIGHT: Final[float] = 1.5
DEFAULT_VEHICLE_Z: Final[float] = 0.0
# Cameras are mounted this far ahead of the vehicle origin
CAMERA_MOUNT_OFFSET: Final[float] = 1.5

# --- Interaction ---
VEHICLE_STEP: Final[float] = 0.5
DRAG_PLANE_HEIGHT: Final[float] = 0.5

BASELINE_MIN: Final[float] = 0.5
BASELINE_MAX: Final[float] = 3.0
BASELINE_STEP: Final[float] = 0.1

# --- Overlay geometry ---
ARC_RADIUS: Final[float] = 1.0
ARC_SEGMENTS: Final[int] = 16
# Camera feeds look straight ahead this far when nothing is selected
LOOK_AHEAD_DISTANCE: Final[float] = 20.0

# --- Viewports ---
OVERVIEW_HOME_POSITION: Final[tuple[float, float, float]] = (0.0, 12.0, -8.0)
OVERVIEW_HOME_FOCUS: Final[tuple[float, float, float]] = (0.0, 0.0, 8.0)
OVERVIEW_VIEW_ANGLE: Final[float] = 60.0
CAMERA_FEED_VIEW_ANGLE: Final[float] = 75.0
CLIPPING_RANGE: Final[tuple[float, float]] = (0.1, 100.0)

DISTANCE_MARKERS: Final[tuple[float, ...]] = (5.0, 10.0, 15.0, 20.0)
