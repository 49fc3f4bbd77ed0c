"""
Fixed constants for the orbit visual engine.

The visual mapping is deliberately not user-tunable; only the host
settings (window, frame rate, device) are exposed on the command line.
"""

from dataclasses import dataclass


@dataclass
class OrbitConfig:
    """Configuration shared by the engine, renderer and audio input."""

    # Host / window
    width: int = 1280
    height: int = 720
    fps: int = 60
    fullscreen: bool = False

    # Level tracking
    gain: float = 9.0  # Smoothed level -> intensity
    gate_threshold: float = 0.022  # Below this, motion freezes
    smoothing: float = 0.4  # Fraction of the gap closed per tick
    max_intensity: float = 2.5

    # Trails
    trail_alpha: int = 14  # Black overlay alpha per tick (0-255)
    max_history: int = 28
    ribbon_steps: int = 360

    # Particles
    particle_count: int = 140

    # Colour breathing
    color_speed: float = 0.002

    # Spectrum bands (Hz)
    low_band: tuple[float, float] = (60.0, 250.0)
    high_band: tuple[float, float] = (3000.0, 9000.0)
    spectrum_max: float = 255.0

    # Analyser
    fft_bins: int = 1024
    fft_smoothing: float = 0.9
    min_db: float = -100.0
    max_db: float = -30.0
    sample_rate: int = 44100
    device: int | str | None = None

    # Snapshots
    snapshot_prefix: str = "soft_error_card"
