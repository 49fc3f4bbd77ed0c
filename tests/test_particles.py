"""Tests for the orbit particle system."""

import numpy as np
import pytest

from soundorbit.config import OrbitConfig
from soundorbit.core.particles import ParticleField, coherent_noise


class TestCoherentNoise:
    """Tests for the Perlin noise wrapper."""

    def test_range(self):
        values = [coherent_noise(x * 0.137) for x in range(2000)]
        assert min(values) >= 0.0
        assert max(values) <= 1.0

    def test_continuous(self):
        """Small steps in the argument should give small changes."""
        xs = np.arange(0, 50, 0.01)
        values = np.array([coherent_noise(x) for x in xs])
        assert np.max(np.abs(np.diff(values))) < 0.1

    def test_deterministic(self):
        assert coherent_noise(12.34) == coherent_noise(12.34)


class TestParticleField:
    """Tests for spawning and advancing the population."""

    def test_population_size(self, rng):
        field = ParticleField.spawn(rng=rng)
        assert len(field) == 140
        for arr in (field.base_radius, field.speed, field.offset, field.size, field.tilt):
            assert len(arr) == 140

    def test_seed_ranges(self, rng):
        field = ParticleField.spawn(rng=rng)
        assert np.all((field.angles >= 0) & (field.angles < 2 * np.pi))
        assert np.all((field.base_radius >= 160) & (field.base_radius <= 420))
        assert np.all((field.speed >= 0.001) & (field.speed <= 0.008))
        assert np.all((field.offset >= 0) & (field.offset < 1000))
        assert np.all((field.size >= 3) & (field.size <= 8))
        assert np.all((field.tilt >= 0) & (field.tilt < np.pi))

    def test_reproducible_with_seed(self):
        a = ParticleField.spawn(rng=np.random.default_rng(7))
        b = ParticleField.spawn(rng=np.random.default_rng(7))
        np.testing.assert_array_equal(a.angles, b.angles)
        np.testing.assert_array_equal(a.base_radius, b.base_radius)

    def test_gated_advance(self, rng):
        field = ParticleField.spawn(rng=rng)
        moved = field.advance(0.01, gated=True)
        np.testing.assert_allclose(moved.angles, field.angles + field.speed + 0.01)
        # Seed values are untouched
        assert moved.base_radius is field.base_radius
        assert len(moved) == 140

    def test_ungated_advance_freezes(self, rng):
        field = ParticleField.spawn(rng=rng)
        frozen = field.advance(0.01, gated=False)
        np.testing.assert_array_equal(frozen.angles, field.angles)

    def test_radii_breathe_without_boost(self, rng):
        """With no boost the radius is exactly the base radius."""
        field = ParticleField.spawn(rng=rng)
        np.testing.assert_allclose(field.radii(0.0, 10), field.base_radius)

    def test_radii_bounded_by_boost(self, rng):
        field = ParticleField.spawn(rng=rng)
        radii = field.radii(100.0, 10)
        assert np.all(radii >= field.base_radius)
        assert np.all(radii <= field.base_radius + 100.0)

    def test_positions_elliptical(self, rng):
        """x uses the plain angle, y the tilted one squashed by 0.9."""
        field = ParticleField.spawn(rng=rng)
        pos = field.positions(0.0, 0)
        r = field.base_radius
        np.testing.assert_allclose(pos[:, 0], np.cos(field.angles) * r)
        np.testing.assert_allclose(pos[:, 1], np.sin(field.angles + field.tilt * 0.2) * r * 0.9)
        assert pos.shape == (140, 2)

    def test_custom_count(self, rng):
        assert len(ParticleField.spawn(12, rng)) == 12

    def test_default_count_from_config(self, rng):
        assert len(ParticleField.spawn(rng=rng)) == OrbitConfig().particle_count
