"""
Realtime spectrum analysis of the captured microphone signal.

Behaves like a browser analyser node: a Blackman-windowed FFT with
time smoothing, converted to decibels and scaled to byte magnitudes.
"""

import librosa
import numpy as np
from scipy.signal import get_window

from soundorbit.core.features import AudioFrame


class SpectrumAnalyser:
    """
    Rolling analysis buffer for mono PCM input.

    Holds the most recent 2 * bins samples; every read of the spectrum
    advances the smoothing filter by one step.
    """

    def __init__(
        self,
        bins: int = 1024,
        smoothing: float = 0.9,
        min_db: float = -100.0,
        max_db: float = -30.0,
        sample_rate: int = 44100,
    ):
        """
        Initialize the analyser.

        Args:
            bins: Spectrum and waveform length (FFT size is twice this).
            smoothing: Weight of the previous spectrum (0 = none).
            min_db: Decibel level mapped to magnitude 0.
            max_db: Decibel level mapped to magnitude 255.
            sample_rate: Input sample rate in Hz.
        """
        self.bins = bins
        self.fft_size = bins * 2
        self.smoothing = smoothing
        self.min_db = min_db
        self.max_db = max_db
        self.sample_rate = sample_rate

        self._window = get_window("blackman", self.fft_size)
        self._buffer = np.zeros(self.fft_size, dtype=np.float32)
        self._smoothed = np.zeros(bins, dtype=np.float64)

    def push(self, samples: np.ndarray):
        """Append new samples; multi-channel blocks are mixed down to mono."""
        block = np.asarray(samples, dtype=np.float32)
        if block.ndim > 1:
            block = block.mean(axis=1)
        if block.size == 0:
            return
        self._buffer = np.concatenate((self._buffer, block))[-self.fft_size:]

    def level(self) -> float:
        """RMS amplitude of the analysis buffer."""
        return float(np.sqrt(np.mean(np.square(self._buffer, dtype=np.float64))))

    def waveform(self) -> np.ndarray:
        """Most recent `bins` samples, clipped to [-1, 1]."""
        return np.clip(self._buffer[-self.bins:], -1.0, 1.0).astype(np.float64)

    def spectrum(self) -> np.ndarray:
        """Smoothed byte magnitudes (0-255), one per bin from 0Hz upwards."""
        windowed = self._buffer * self._window
        magnitude = np.abs(np.fft.rfft(windowed))[: self.bins] / self.fft_size

        self._smoothed = self.smoothing * self._smoothed + (1 - self.smoothing) * magnitude

        db = librosa.amplitude_to_db(self._smoothed, ref=1.0, amin=1e-10, top_db=None)
        scaled = (db - self.min_db) * 255.0 / (self.max_db - self.min_db)
        return np.clip(np.floor(scaled), 0, 255)

    def bin_frequencies(self) -> np.ndarray:
        """Centre frequency of each spectrum bin in Hz."""
        return librosa.fft_frequencies(sr=self.sample_rate, n_fft=self.fft_size)[: self.bins]

    def frame(self) -> AudioFrame:
        """Snapshot the current level, spectrum and waveform."""
        return AudioFrame(
            level=self.level(),
            spectrum=self.spectrum(),
            waveform=self.waveform(),
            sample_rate=self.sample_rate,
        )

    def reset(self):
        """Forget buffered audio and smoothing history."""
        self._buffer[:] = 0.0
        self._smoothed[:] = 0.0
