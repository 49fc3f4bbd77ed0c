"""Pytest configuration and shared fixtures."""

import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import numpy as np
import pytest

from soundorbit.config import OrbitConfig
from soundorbit.core.features import AudioFrame
from soundorbit.errors import AudioAcquisitionError

# Default sample rate for test audio
TEST_SR = 44100


@pytest.fixture
def sample_rate() -> int:
    """Default sample rate for tests."""
    return TEST_SR


@pytest.fixture
def config() -> OrbitConfig:
    return OrbitConfig()


@pytest.fixture
def rng() -> np.random.Generator:
    """Seeded generator for reproducible particle layouts."""
    return np.random.default_rng(42)


@pytest.fixture
def pure_sine(sample_rate: int) -> tuple[np.ndarray, int]:
    """
    Generate a 2048-sample 1kHz sine block.

    Returns:
        Tuple of (audio_signal, sample_rate).
    """
    t = np.arange(2048) / sample_rate
    y = 0.5 * np.sin(2 * np.pi * 1000.0 * t)
    return y.astype(np.float32), sample_rate


def make_frame(level: float, n: int = 1024, sample_rate: int = TEST_SR) -> AudioFrame:
    """Audio frame with a sine waveform scaled to the level and a flat spectrum."""
    waveform = np.sin(np.linspace(0, 8 * np.pi, n)) * min(level * 4, 1.0)
    return AudioFrame(
        level=level,
        spectrum=np.full(n, 128.0),
        waveform=waveform,
        sample_rate=sample_rate,
    )


@pytest.fixture
def loud_frame() -> AudioFrame:
    """Frame well above the gate."""
    return make_frame(0.2)


@pytest.fixture
def silent_frame() -> AudioFrame:
    """Frame of pure silence."""
    return AudioFrame(
        level=0.0,
        spectrum=np.zeros(1024),
        waveform=np.zeros(1024),
        sample_rate=TEST_SR,
    )


@pytest.fixture
def empty_frame() -> AudioFrame:
    """Loud frame whose waveform buffer is empty."""
    return AudioFrame(
        level=0.2,
        spectrum=np.full(1024, 128.0),
        waveform=np.zeros(0),
        sample_rate=TEST_SR,
    )


class FakeAudioSource:
    """Audio source that records acquisition requests instead of opening a device."""

    def __init__(self, frame: AudioFrame | None = None, fail: bool = False):
        self.frame_value = frame or make_frame(0.2)
        self.fail = fail
        self.start_calls = 0
        self.frames_read = 0

    def start(self, on_ready, on_error):
        self.start_calls += 1
        if self.fail:
            on_error(AudioAcquisitionError("Microphone permission denied or unavailable."))
        else:
            on_ready()

    def frame(self) -> AudioFrame:
        self.frames_read += 1
        return self.frame_value


@pytest.fixture
def fake_audio() -> FakeAudioSource:
    return FakeAudioSource()


@pytest.fixture
def failing_audio() -> FakeAudioSource:
    return FakeAudioSource(fail=True)
