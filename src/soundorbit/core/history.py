"""
Ribbon samples and their bounded trail history.
"""

from dataclasses import dataclass, field
from typing import Iterator

import numpy as np

from soundorbit.config import OrbitConfig


def compute_ribbon_sample(
    waveform: np.ndarray,
    base_radius: float,
    amplitude: float,
    steps: int | None = None,
) -> np.ndarray | None:
    """
    Wrap the waveform around a circle as a closed polar curve.

    Args:
        waveform: Time-domain samples in [-1, 1].
        base_radius: Radius of the undisturbed circle.
        amplitude: Radial displacement for a full-scale sample.
        steps: Number of points around the circle. Defaults to
            OrbitConfig.ribbon_steps.

    Returns:
        (steps, 2) array of centre-relative points, or None when the
        waveform is empty.
    """
    wave = np.asarray(waveform, dtype=np.float64)
    if wave.size == 0:
        return None

    if steps is None:
        steps = OrbitConfig().ribbon_steps
    i = np.arange(steps)
    # Nearest-lower resample of the waveform onto the steps
    idx = np.floor(i * (wave.size - 1) / max(steps - 1, 1)).astype(int)
    angles = np.linspace(0.0, 2 * np.pi, steps, endpoint=False)
    radii = base_radius + wave[idx] * amplitude

    return np.column_stack((np.cos(angles) * radii, np.sin(angles) * radii))


@dataclass(frozen=True, eq=False)
class RibbonHistory:
    """FIFO of ribbon samples, oldest first, never longer than capacity."""

    samples: tuple[np.ndarray, ...] = ()
    capacity: int = field(default_factory=lambda: OrbitConfig().max_history)

    def push(self, sample: np.ndarray) -> "RibbonHistory":
        """Return a new history with sample appended and overflow evicted."""
        samples = (self.samples + (sample,))[-self.capacity:]
        return RibbonHistory(samples=samples, capacity=self.capacity)

    def alphas(self) -> np.ndarray:
        """Stroke alpha per sample, 30 for the oldest up to 180 for the newest."""
        n = len(self.samples)
        if n == 1:
            return np.array([180.0])
        return np.linspace(30.0, 180.0, n)

    def __len__(self) -> int:
        return len(self.samples)

    def __iter__(self) -> Iterator[np.ndarray]:
        return iter(self.samples)
