"""
Live microphone capture via sounddevice.

The PortAudio callback runs on its own thread and only feeds the
analyser; the render loop reads frames from the main thread.
"""

import threading
from typing import Callable

import numpy as np

from soundorbit.audio.analyser import SpectrumAnalyser
from soundorbit.config import OrbitConfig
from soundorbit.core.features import AudioFrame
from soundorbit.errors import AudioAcquisitionError


class MicrophoneInput:
    """Audio input collaborator backed by a sounddevice InputStream."""

    def __init__(self, config: OrbitConfig | None = None):
        self.config = config or OrbitConfig()
        self.analyser = SpectrumAnalyser(
            bins=self.config.fft_bins,
            smoothing=self.config.fft_smoothing,
            min_db=self.config.min_db,
            max_db=self.config.max_db,
            sample_rate=self.config.sample_rate,
        )
        self.stream = None
        self._lock = threading.Lock()

    @property
    def sample_rate(self) -> int:
        return self.analyser.sample_rate

    def _on_audio(self, indata: np.ndarray, frames: int, time_info, status):
        """PortAudio callback: copy the block into the analyser."""
        with self._lock:
            self.analyser.push(indata[:frames])

    def _open_stream(self):
        try:
            import sounddevice as sd
        except OSError as exc:
            # PortAudio shared library missing
            raise AudioAcquisitionError(f"Audio backend unavailable: {exc}") from exc

        try:
            stream = sd.InputStream(
                device=self.config.device,
                channels=1,
                samplerate=self.config.sample_rate,
                dtype="float32",
                callback=self._on_audio,
            )
        except (sd.PortAudioError, ValueError) as exc:
            raise AudioAcquisitionError(
                f"Microphone permission denied or unavailable: {exc}"
            ) from exc

        try:
            stream.start()
        except (sd.PortAudioError, ValueError) as exc:
            stream.close()
            raise AudioAcquisitionError(
                f"Microphone permission denied or unavailable: {exc}"
            ) from exc
        return stream

    def start(
        self,
        on_ready: Callable[[], None],
        on_error: Callable[[AudioAcquisitionError], None],
    ):
        """
        Open the input device.

        Exactly one of the callbacks is invoked once acquisition has
        either succeeded or failed.
        """
        try:
            stream = self._open_stream()
        except AudioAcquisitionError as exc:
            on_error(exc)
            return

        self.stream = stream
        self.analyser.sample_rate = int(stream.samplerate)
        on_ready()

    def frame(self) -> AudioFrame:
        """Current level, spectrum and waveform."""
        with self._lock:
            return self.analyser.frame()

    def stop(self):
        """Close the input stream if one is open."""
        if self.stream is not None:
            self.stream.stop()
            self.stream.close()
            self.stream = None

    def describe(self) -> str:
        if self.stream is None:
            return "not started"
        device = self.config.device if self.config.device is not None else "default"
        return f"{self.sample_rate} Hz, device {device}"
