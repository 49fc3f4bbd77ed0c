"""Tests for the per-tick engine transition."""

import numpy as np
import pytest

from soundorbit.config import OrbitConfig
from soundorbit.core.engine import EngineState, tick


class TestEngineState:
    def test_initial(self, config, rng):
        state = EngineState.initial(config, rng)
        assert state.level == 0.0
        assert state.advance is False
        assert state.tick == 0
        assert len(state.history) == 0
        assert len(state.particles) == 140


class TestTick:
    """Tests for tick()."""

    def test_does_not_mutate_input(self, config, rng, loud_frame):
        state = EngineState.initial(config, rng)
        angles = state.particles.angles.copy()
        tick(state, loud_frame, config)
        assert state.level == 0.0
        assert state.tick == 0
        assert len(state.history) == 0
        np.testing.assert_array_equal(state.particles.angles, angles)

    def test_loud_tick_advances(self, config, rng, loud_frame):
        state = EngineState.initial(config, rng)
        result = tick(state, loud_frame, config)
        new = result.state
        assert new.advance is True
        assert new.level == pytest.approx(0.08)
        assert new.tick == 1
        assert new.color_phase == pytest.approx(0.002)
        assert len(new.history) == 1
        expected = state.particles.angles + state.particles.speed + result.params.particle_speed
        np.testing.assert_allclose(new.particles.angles, expected)

    def test_silent_tick_freezes(self, config, rng, silent_frame):
        state = EngineState.initial(config, rng)
        result = tick(state, silent_frame, config)
        assert result.state.advance is False
        assert len(result.state.history) == 0
        np.testing.assert_array_equal(result.state.particles.angles, state.particles.angles)
        # Colour and the tick counter keep moving during silence
        assert result.state.color_phase == pytest.approx(0.002)
        assert result.state.tick == 1
        assert result.ribbon is not None

    def test_empty_waveform_skips_ribbon(self, config, rng, empty_frame):
        state = EngineState.initial(config, rng)
        result = tick(state, empty_frame, config)
        assert result.ribbon is None
        assert len(result.state.history) == 0
        # Particles still advance on a gated tick
        assert not np.array_equal(result.state.particles.angles, state.particles.angles)

    def test_history_capacity_over_many_ticks(self, config, rng, loud_frame, silent_frame):
        state = EngineState.initial(config, rng)
        for i in range(120):
            frame = silent_frame if i % 7 == 0 else loud_frame
            state = tick(state, frame, config).state
            assert len(state.history) <= 28
        assert len(state.history) == 28

    def test_newest_sample_is_last(self, config, rng, loud_frame):
        state = EngineState.initial(config, rng)
        result = None
        for _ in range(30):
            result = tick(state, loud_frame, config)
            state = result.state
        assert state.history.samples[-1] is result.ribbon

    def test_particle_positions_reported(self, config, rng, loud_frame):
        result = tick(EngineState.initial(config, rng), loud_frame, config)
        assert result.particle_positions.shape == (140, 2)

    def test_particle_count_constant(self, config, rng, loud_frame, silent_frame):
        state = EngineState.initial(config, rng)
        for i in range(50):
            state = tick(state, loud_frame if i % 2 else silent_frame, config).state
            assert len(state.particles) == 140

    def test_reproducible_with_seed(self, loud_frame):
        config = OrbitConfig()
        a = EngineState.initial(config, np.random.default_rng(3))
        b = EngineState.initial(config, np.random.default_rng(3))
        for _ in range(5):
            a = tick(a, loud_frame, config).state
            b = tick(b, loud_frame, config).state
        np.testing.assert_array_equal(a.particles.angles, b.particles.angles)
        assert a.level == b.level
