"""
Maps extracted features onto render parameters.

Pure functions only: everything here is recomputed from scratch on
every tick from the smoothed level, the colour phase and band energy.
"""

import math
from dataclasses import dataclass

from soundorbit.config import OrbitConfig


@dataclass(frozen=True)
class RenderParameters:
    """Derived per-tick drawing values."""

    intensity: float  # L, clamped master scalar
    base_gray: float
    glow_gray: float
    core_radius: float
    ring_radius: float
    ribbon_radius: float
    ribbon_amplitude: float
    particle_speed: float  # Added to every particle's angle on gated ticks
    radius_boost: float

    @property
    def core_ring_weight(self) -> float:
        return 1.5 + self.intensity * 1.2

    @property
    def ribbon_weight(self) -> float:
        return 1.5 + self.intensity * 1.5

    @property
    def particle_size_boost(self) -> float:
        return self.intensity * 1.4

    @property
    def particle_tail_alpha(self) -> float:
        return 60 + self.intensity * 50

    @property
    def outer_ring_alpha(self) -> float:
        return 180 + self.intensity * 60

    @property
    def halo_offset(self) -> float:
        return self.intensity * 20


def map_range(value: float, in_min: float, in_max: float, out_min: float, out_max: float) -> float:
    """Linearly remap value from one interval onto another."""
    return out_min + (value - in_min) * (out_max - out_min) / (in_max - in_min)


def intensity(level: float, gain: float = 9.0, ceiling: float = 2.5) -> float:
    """Master intensity L, always within [0, ceiling]."""
    return min(max(level * gain, 0.0), ceiling)


def gray_tones(color_phase: float) -> tuple[float, float]:
    """Base and glow tones in quadrature for slow colour breathing."""
    base = map_range(math.sin(color_phase), -1, 1, 160, 255)
    glow = map_range(math.sin(color_phase + math.pi / 2), -1, 1, 100, 255)
    return base, glow


def map_parameters(
    level: float,
    color_phase: float,
    low: float,
    high: float,
    config: OrbitConfig | None = None,
) -> RenderParameters:
    """
    Compute render parameters for one tick.

    Args:
        level: Smoothed input level.
        color_phase: Current colour phase (unbounded).
        low: Normalized low-band energy.
        high: Normalized high-band energy.
        config: Engine constants.

    Returns:
        RenderParameters for the renderer.
    """
    cfg = config or OrbitConfig()
    L = intensity(level, cfg.gain, cfg.max_intensity)
    base_gray, glow_gray = gray_tones(color_phase)

    return RenderParameters(
        intensity=L,
        base_gray=base_gray,
        glow_gray=glow_gray,
        core_radius=150 + L * 260,
        ring_radius=260 + L * 120,
        ribbon_radius=280 + L * 220,
        ribbon_amplitude=60 + L * 320,
        particle_speed=0.002 + high * 0.03 + L * 0.015,
        radius_boost=low * 100 + L * 60,
    )
