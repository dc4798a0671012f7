"""Interactive stereo-camera triangulation visualizer."""
__version__ = "0.1.0"
