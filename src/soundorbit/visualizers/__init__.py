"""Rendering of the orbit visuals."""

from soundorbit.visualizers.canvas import Canvas
from soundorbit.visualizers.orbit import OrbitRenderer

__all__ = ["Canvas", "OrbitRenderer"]
