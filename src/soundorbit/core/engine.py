"""
Per-tick state transition for the orbit visuals.

All mutable animation state lives in EngineState. tick() takes a state
and an audio frame and returns a fresh state along with everything the
renderer needs; the input state is never modified, so a caller can
pause simply by not calling it.
"""

from dataclasses import dataclass

import numpy as np

from soundorbit.config import OrbitConfig
from soundorbit.core.features import AudioFrame, FeatureExtractor, Features
from soundorbit.core.history import RibbonHistory, compute_ribbon_sample
from soundorbit.core.mapper import RenderParameters, map_parameters
from soundorbit.core.particles import ParticleField


@dataclass(frozen=True, eq=False)
class EngineState:
    """Animation state carried from one tick to the next."""

    level: float
    advance: bool
    color_phase: float
    tick: int
    history: RibbonHistory
    particles: ParticleField

    @classmethod
    def initial(
        cls,
        config: OrbitConfig | None = None,
        rng: np.random.Generator | None = None,
    ) -> "EngineState":
        """Silent starting state with a freshly spawned particle field."""
        cfg = config or OrbitConfig()
        return cls(
            level=0.0,
            advance=False,
            color_phase=0.0,
            tick=0,
            history=RibbonHistory(capacity=cfg.max_history),
            particles=ParticleField.spawn(cfg.particle_count, rng),
        )


@dataclass(frozen=True, eq=False)
class TickResult:
    """Outcome of a single tick."""

    state: EngineState
    params: RenderParameters
    features: Features
    ribbon: np.ndarray | None  # This tick's sample, None for an empty waveform
    particle_positions: np.ndarray  # (n, 2), centre-relative


def tick(
    state: EngineState,
    frame: AudioFrame,
    config: OrbitConfig | None = None,
) -> TickResult:
    """
    Advance the animation by one frame.

    Args:
        state: State after the previous tick.
        frame: Current audio reading.
        config: Engine constants.

    Returns:
        TickResult with the new state and render inputs.
    """
    cfg = config or OrbitConfig()
    features = FeatureExtractor(cfg).extract(state.level, frame)

    color_phase = state.color_phase + cfg.color_speed
    params = map_parameters(features.level, color_phase, features.low, features.high, cfg)

    ribbon = compute_ribbon_sample(
        features.waveform,
        params.ribbon_radius,
        params.ribbon_amplitude,
        cfg.ribbon_steps,
    )
    history = state.history
    if ribbon is not None and features.advance:
        history = history.push(ribbon)

    particles = state.particles.advance(params.particle_speed, features.advance)
    frame_count = state.tick + 1

    new_state = EngineState(
        level=features.level,
        advance=features.advance,
        color_phase=color_phase,
        tick=frame_count,
        history=history,
        particles=particles,
    )

    return TickResult(
        state=new_state,
        params=params,
        features=features,
        ribbon=ribbon,
        particle_positions=particles.positions(params.radius_boost, frame_count),
    )
