"""
Grayscale drawing surface with alpha-blended strokes.

pygame.draw writes pixels without blending, so every translucent primitive
is drawn alone onto a transparent scratch surface and only the rect it
touched is blitted over the frame. The scratch surface is kept clear
between primitives.
"""

from typing import Callable, Sequence

import numpy as np
import pygame


def _rgba(gray: float, alpha: float) -> tuple[int, int, int, int]:
    g = int(min(max(gray, 0), 255))
    a = int(min(max(alpha, 0), 255))
    return (g, g, g, a)


def _width(weight: float) -> int:
    return max(1, int(round(weight)))


def catmull_rom_closed(points: np.ndarray, samples: int = 2) -> np.ndarray:
    """
    Closed Catmull-Rom spline through every point.

    Args:
        points: (n, 2) control points, treated as a loop.
        samples: Output points per segment.

    Returns:
        (n * samples, 2) points along the curve.
    """
    p1 = np.asarray(points, dtype=np.float64)
    if len(p1) < 3 or samples <= 1:
        return p1
    p0 = np.roll(p1, 1, axis=0)
    p2 = np.roll(p1, -1, axis=0)
    p3 = np.roll(p1, -2, axis=0)

    t = (np.arange(samples) / samples)[None, :, None]
    p0, p1, p2, p3 = (p[:, None, :] for p in (p0, p1, p2, p3))
    curve = 0.5 * (
        2 * p1
        + (p2 - p0) * t
        + (2 * p0 - 5 * p1 + 4 * p2 - p3) * t ** 2
        + (3 * p1 - p0 - 3 * p2 + p3) * t ** 3
    )
    return curve.reshape(-1, 2)


class Canvas:
    """Resizable 2D output sink for the renderer."""

    def __init__(self, width: int, height: int, surface: pygame.Surface | None = None):
        self.resize(width, height, surface)

    @property
    def size(self) -> tuple[int, int]:
        return self.surface.get_size()

    @property
    def center(self) -> tuple[float, float]:
        w, h = self.size
        return (w / 2, h / 2)

    def resize(self, width: int, height: int, surface: pygame.Surface | None = None):
        """Swap in a surface of the new size and clear it to black."""
        self.surface = surface or pygame.Surface((width, height))
        self._scratch = pygame.Surface(self.surface.get_size(), pygame.SRCALPHA)
        self._scratch.fill((0, 0, 0, 0))
        self._fade = pygame.Surface(self.surface.get_size())
        self.clear()

    def clear(self):
        self.surface.fill((0, 0, 0))

    def overlay(self, alpha: int):
        """Darken the previous frame with translucent black."""
        self._fade.fill((0, 0, 0))
        self._fade.set_alpha(int(alpha))
        self.surface.blit(self._fade, (0, 0))

    def _composite(self, draw: Callable[[pygame.Surface], pygame.Rect]):
        """Blend one primitive onto the frame, then wipe its scratch rect."""
        rect = draw(self._scratch).clip(self._scratch.get_rect())
        if rect.width and rect.height:
            self.surface.blit(self._scratch, rect.topleft, area=rect)
            self._scratch.fill((0, 0, 0, 0), rect)

    def stroke_circle(self, center, radius: float, gray: float, alpha: float, weight: float):
        if radius <= 0:
            return
        self._composite(
            lambda s: pygame.draw.circle(s, _rgba(gray, alpha), center, radius, _width(weight))
        )

    def fill_circle(self, center, radius: float, gray: float, alpha: float = 255):
        if radius <= 0:
            return
        if alpha >= 255:
            pygame.draw.circle(self.surface, _rgba(gray, 255)[:3], center, radius)
            return
        self._composite(lambda s: pygame.draw.circle(s, _rgba(gray, alpha), center, radius))

    def line(self, start, end, gray: float, alpha: float, weight: float):
        self._composite(
            lambda s: pygame.draw.line(s, _rgba(gray, alpha), start, end, _width(weight))
        )

    def closed_curve(self, points: Sequence, gray: float, alpha: float, weight: float):
        curve = catmull_rom_closed(np.asarray(points))
        if len(curve) < 2:
            return
        self._composite(
            lambda s: pygame.draw.lines(s, _rgba(gray, alpha), True, curve.tolist(), _width(weight))
        )

    def to_array(self) -> np.ndarray:
        """Current frame as an (H, W, 3) uint8 array."""
        # pygame uses (width, height) but numpy expects (height, width)
        arr = pygame.surfarray.array3d(self.surface)
        return np.transpose(arr, (1, 0, 2))
