"""
Orbit visualization renderer.

Maps engine output to layered grayscale geometry, back to front:
- Trail fade -> persistence of the previous frame
- Core circle -> pulses with intensity
- Ribbon history -> waveform wrapped into a polar curve with trails
- Orbit particles -> breathe with low band, speed up with high band
- Outer rings -> crisp ring plus an intensity-offset halo
"""

import numpy as np

from soundorbit.config import OrbitConfig
from soundorbit.core.engine import TickResult
from soundorbit.core.history import RibbonHistory
from soundorbit.core.mapper import RenderParameters
from soundorbit.visualizers.canvas import Canvas

CRISP_RING_WEIGHT = 1.8


class OrbitRenderer:
    """
    Draws one tick of the orbit visuals onto a Canvas.

    Performs no audio analysis; everything comes from the TickResult.
    """

    def __init__(self, config: OrbitConfig | None = None):
        """
        Initialize the renderer.

        Args:
            config: Engine constants. Uses defaults if None.
        """
        self.config = config or OrbitConfig()

    def _draw_core_circle(self, canvas: Canvas, center, params: RenderParameters):
        """Faint concentric rings, one crisp ring and a black pupil."""
        R = params.core_radius
        L = params.intensity

        for i in range(6):
            canvas.stroke_circle(
                center,
                R * (0.3 + i * 0.06),
                params.glow_gray,
                60 + i * 25 + L * 40,
                params.core_ring_weight,
            )

        # Sizes below are diameters
        canvas.stroke_circle(center, R * 0.5 / 2, params.base_gray, 220, CRISP_RING_WEIGHT)
        canvas.fill_circle(center, R * 0.05 / 2, 0)

    def _draw_ribbon(
        self,
        canvas: Canvas,
        center,
        history: RibbonHistory,
        params: RenderParameters,
    ):
        """Every buffered ribbon, oldest faintest."""
        offset = np.asarray(center, dtype=np.float64)
        for sample, alpha in zip(history, history.alphas()):
            canvas.closed_curve(sample + offset, params.glow_gray, alpha, params.ribbon_weight)

    @staticmethod
    def tail_weight(result: TickResult) -> float:
        """
        Stroke weight of the particle tails.

        Tails carry on with the ribbon weight when a ribbon was drawn this
        tick, and with the crisp core ring weight otherwise.
        """
        if result.ribbon is not None and len(result.state.history):
            return result.params.ribbon_weight
        return CRISP_RING_WEIGHT

    def _draw_particles(self, canvas: Canvas, center, result: TickResult):
        """Dots with a short radial tail towards the centre."""
        params = result.params
        cx, cy = center
        sizes = result.state.particles.size + params.particle_size_boost
        weight = self.tail_weight(result)

        for (x, y), size in zip(result.particle_positions, sizes):
            canvas.fill_circle((cx + x, cy + y), size / 2, params.glow_gray, 180)
            canvas.line(
                (cx + x, cy + y),
                (cx + x * 0.96, cy + y * 0.96),
                params.glow_gray,
                params.particle_tail_alpha,
                weight,
            )

    def _draw_outer_ring(self, canvas: Canvas, center, params: RenderParameters):
        r = params.ring_radius
        canvas.stroke_circle(center, r, params.base_gray, params.outer_ring_alpha, 1.5)
        canvas.stroke_circle(center, r + params.halo_offset, params.base_gray, 60, 0.6)

    def render(self, canvas: Canvas, result: TickResult) -> Canvas:
        """
        Render a single tick.

        Args:
            canvas: Surface holding the previous frame.
            result: Output of the engine tick.

        Returns:
            The same canvas, now holding the new frame.
        """
        center = canvas.center
        params = result.params

        canvas.overlay(self.config.trail_alpha)
        self._draw_core_circle(canvas, center, params)

        # An empty waveform skips the ribbon for this tick only
        if result.ribbon is not None:
            self._draw_ribbon(canvas, center, result.state.history, params)

        self._draw_particles(canvas, center, result)
        self._draw_outer_ring(canvas, center, params)

        return canvas
