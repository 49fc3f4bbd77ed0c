"""
Session control flow: Idle -> Starting -> Running <-> Paused.

The session owns the engine state and the audio source and is the only
place where ticks are triggered. Pausing simply stops ticking, so all
state is retained exactly as it was.
"""

import enum
from typing import Callable, Protocol

import numpy as np

from soundorbit.config import OrbitConfig
from soundorbit.core.engine import EngineState, TickResult, tick
from soundorbit.core.features import AudioFrame
from soundorbit.errors import AudioAcquisitionError


class AudioSource(Protocol):
    def start(
        self,
        on_ready: Callable[[], None],
        on_error: Callable[[AudioAcquisitionError], None],
    ): ...

    def frame(self) -> AudioFrame: ...


class SessionState(enum.Enum):
    IDLE = "idle"
    STARTING = "starting"
    RUNNING = "running"
    PAUSED = "paused"


class Session:
    """Binds the audio source, engine state and tick scheduling together."""

    def __init__(
        self,
        audio: AudioSource,
        config: OrbitConfig | None = None,
        rng: np.random.Generator | None = None,
        on_error: Callable[[AudioAcquisitionError], None] | None = None,
        on_start: Callable[[], None] | None = None,
    ):
        """
        Initialize the session.

        Args:
            audio: Audio input collaborator.
            config: Engine constants.
            rng: Random source for the particle layout.
            on_error: Called with the failure when acquisition fails.
            on_start: Called once the microphone is live.
        """
        self.audio = audio
        self.config = config or OrbitConfig()
        self.engine_state = EngineState.initial(self.config, rng)
        self.state = SessionState.IDLE
        self.last_error: AudioAcquisitionError | None = None
        self._on_error = on_error
        self._on_start = on_start

    @property
    def running(self) -> bool:
        return self.state in (SessionState.RUNNING, SessionState.PAUSED)

    @property
    def paused(self) -> bool:
        return self.state is SessionState.PAUSED

    def _acquired(self):
        self.state = SessionState.RUNNING
        self.last_error = None
        if self._on_start:
            self._on_start()

    def _failed(self, error: AudioAcquisitionError):
        self.state = SessionState.IDLE
        self.last_error = error
        if self._on_error:
            self._on_error(error)

    def start(self):
        """Request the microphone. Ignored unless idle."""
        if self.state is not SessionState.IDLE:
            return
        self.state = SessionState.STARTING
        self.audio.start(self._acquired, self._failed)

    def toggle_pause(self) -> bool:
        """Flip between running and paused; returns the new paused flag."""
        if self.state is SessionState.RUNNING:
            self.state = SessionState.PAUSED
        elif self.state is SessionState.PAUSED:
            self.state = SessionState.RUNNING
        return self.paused

    def tick(self) -> TickResult | None:
        """Run one frame if running, otherwise do nothing and return None."""
        if self.state is not SessionState.RUNNING:
            return None
        result = tick(self.engine_state, self.audio.frame(), self.config)
        self.engine_state = result.state
        return result
