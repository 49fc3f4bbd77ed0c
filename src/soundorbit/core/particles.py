"""
Orbiting particle ensemble.

Each particle carries fixed random seed values drawn once at spawn; only
its angle changes, and only on gated ticks. Radii breathe with Perlin
noise every tick so frozen particles still move.
"""

from dataclasses import dataclass, replace

import noise
import numpy as np

from soundorbit.config import OrbitConfig


def coherent_noise(x: float) -> float:
    """Smooth 1D Perlin noise remapped to [0, 1]."""
    value = noise.pnoise1(float(x), octaves=4, persistence=0.5)
    return min(max((value + 1.0) * 0.5, 0.0), 1.0)


@dataclass(frozen=True, eq=False)
class ParticleField:
    """Fixed-size particle population stored as parallel arrays."""

    angles: np.ndarray
    base_radius: np.ndarray
    speed: np.ndarray
    offset: np.ndarray
    size: np.ndarray
    tilt: np.ndarray

    @classmethod
    def spawn(
        cls,
        count: int | None = None,
        rng: np.random.Generator | None = None,
    ) -> "ParticleField":
        """
        Create the population with randomized seed values.

        Args:
            count: Number of particles. Defaults to OrbitConfig.particle_count.
            rng: Random source; pass a seeded generator for a reproducible layout.
        """
        if count is None:
            count = OrbitConfig().particle_count
        rng = rng or np.random.default_rng()
        return cls(
            angles=rng.uniform(0.0, 2 * np.pi, count),
            base_radius=rng.uniform(160.0, 420.0, count),
            speed=rng.uniform(0.001, 0.008, count),
            offset=rng.uniform(0.0, 1000.0, count),
            size=rng.uniform(3.0, 8.0, count),
            tilt=rng.uniform(0.0, np.pi, count),
        )

    def __len__(self) -> int:
        return len(self.angles)

    def advance(self, speed_delta: float, gated: bool) -> "ParticleField":
        """Step every angle by its own speed plus speed_delta, if gated."""
        if not gated:
            return self
        return replace(self, angles=self.angles + self.speed + speed_delta)

    def radii(self, radius_boost: float, tick: int) -> np.ndarray:
        """Effective orbit radius of each particle at this tick."""
        t = tick * 0.01
        breath = np.array([coherent_noise(off + t) for off in self.offset])
        return self.base_radius + radius_boost * breath

    def positions(self, radius_boost: float, tick: int) -> np.ndarray:
        """
        Centre-relative (x, y) of each particle.

        The y axis uses a tilted phase and a 0.9 squash so the flat
        orbit reads as an inclined ellipse.
        """
        r = self.radii(radius_boost, tick)
        x = np.cos(self.angles) * r
        y = np.sin(self.angles + self.tilt * 0.2) * r * 0.9
        return np.column_stack((x, y))
