"""Audio-reactive orbit visuals for live microphone input."""

from soundorbit.config import OrbitConfig
from soundorbit.core.engine import EngineState, TickResult, tick
from soundorbit.core.features import AudioFrame
from soundorbit.errors import AudioAcquisitionError
from soundorbit.session import Session, SessionState

__version__ = "0.1.0"
__all__ = [
    "AudioAcquisitionError",
    "AudioFrame",
    "EngineState",
    "OrbitConfig",
    "Session",
    "SessionState",
    "TickResult",
    "tick",
]
