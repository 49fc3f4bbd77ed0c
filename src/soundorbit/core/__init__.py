"""Core audio-to-visual mapping and animation state."""

from soundorbit.core.engine import EngineState, TickResult, tick
from soundorbit.core.features import AudioFrame, FeatureExtractor, Features, band_energy
from soundorbit.core.history import RibbonHistory, compute_ribbon_sample
from soundorbit.core.mapper import RenderParameters, map_parameters
from soundorbit.core.particles import ParticleField, coherent_noise

__all__ = [
    "AudioFrame",
    "EngineState",
    "FeatureExtractor",
    "Features",
    "ParticleField",
    "RenderParameters",
    "RibbonHistory",
    "TickResult",
    "band_energy",
    "coherent_noise",
    "compute_ribbon_sample",
    "map_parameters",
    "tick",
]
