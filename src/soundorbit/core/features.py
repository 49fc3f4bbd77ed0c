"""
Feature extraction for live audio frames.

Turns one raw analyser reading into the handful of scalars that drive
the visuals: a smoothed level, a silence gate, and low/high band energy.
"""

from dataclasses import dataclass, field

import numpy as np

from soundorbit.config import OrbitConfig


@dataclass
class AudioFrame:
    """One reading from the audio input."""

    level: float  # RMS amplitude, 0-1
    spectrum: np.ndarray  # Byte magnitudes 0-255, index 0 = 0Hz .. Nyquist
    waveform: np.ndarray  # Time-domain samples in [-1, 1]
    sample_rate: int = 44100

    @property
    def nyquist(self) -> float:
        return self.sample_rate / 2


@dataclass
class Features:
    """Scalar features extracted from a single tick."""

    level: float
    advance: bool
    low: float  # 60-250Hz, normalized 0-1
    high: float  # 3-9kHz, normalized 0-1
    waveform: np.ndarray = field(default_factory=lambda: np.zeros(0))


def smooth_level(previous: float, raw: float, coefficient: float = 0.4) -> float:
    """
    Single-pole low-pass step towards the new level.

    Amplitude is non-negative, so negative readings are treated as silence.
    """
    raw = max(float(raw), 0.0)
    return previous + (raw - previous) * coefficient


def is_gated(level: float, threshold: float = 0.022) -> bool:
    """True when the level is loud enough for motion to advance."""
    return level > threshold


def band_energy(
    spectrum: np.ndarray,
    f0: float,
    f1: float,
    nyquist: float,
) -> float:
    """
    Average spectrum magnitude between two frequencies.

    Args:
        spectrum: Magnitudes from 0Hz up to Nyquist.
        f0: Lower band edge in Hz.
        f1: Upper band edge in Hz.
        nyquist: Half the sample rate.

    Returns:
        Mean magnitude over the inclusive index range, 0.0 if the
        spectrum is empty or the range collapses to nothing.
    """
    n = len(spectrum)
    if n == 0 or nyquist <= 0:
        return 0.0

    last = n - 1
    # Round half up, not to even
    i0 = int(np.clip(np.floor(f0 * last / nyquist + 0.5), 0, last))
    i1 = int(np.clip(np.floor(f1 * last / nyquist + 0.5), 0, last))

    total = float(np.sum(spectrum[i0:i1 + 1]))
    return total / max(1, i1 - i0 + 1)


class FeatureExtractor:
    """Extracts per-tick features using the fixed engine constants."""

    def __init__(self, config: OrbitConfig | None = None):
        self.config = config or OrbitConfig()

    def extract(self, previous_level: float, frame: AudioFrame) -> Features:
        """
        Smooth the level, evaluate the gate and measure both bands.

        Args:
            previous_level: Smoothed level from the previous tick.
            frame: Current audio reading.

        Returns:
            Features for this tick.
        """
        cfg = self.config
        level = smooth_level(previous_level, frame.level, cfg.smoothing)
        spectrum = np.asarray(frame.spectrum, dtype=np.float64)

        low = band_energy(spectrum, *cfg.low_band, frame.nyquist) / cfg.spectrum_max
        high = band_energy(spectrum, *cfg.high_band, frame.nyquist) / cfg.spectrum_max

        return Features(
            level=level,
            advance=is_gated(level, cfg.gate_threshold),
            low=low,
            high=high,
            waveform=np.asarray(frame.waveform, dtype=np.float64),
        )
