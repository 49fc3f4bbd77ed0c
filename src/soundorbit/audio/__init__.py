"""Audio input and realtime analysis."""

from soundorbit.audio.analyser import SpectrumAnalyser
from soundorbit.audio.microphone import MicrophoneInput

__all__ = ["MicrophoneInput", "SpectrumAnalyser"]
