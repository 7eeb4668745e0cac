"""
visuals/surface.py

Drawable surface used by the renderer. PygameCanvas keeps an offscreen SRCALPHA
backing store sized in device pixels while every call takes CSS-pixel
coordinates; the scale set with set_scale() is applied here so the physics
never has to know about pixel density.

pygame.draw writes alpha straight into the target instead of blending, so
translucent shapes are drawn on a small temporary layer and blitted.
"""

import math
from typing import Dict, Tuple

import numpy as np
import pygame

RGBA = Tuple[int, int, int, float]  # alpha as a 0..1 fraction


class SurfaceUnavailable(RuntimeError):
    """Raised when a drawing surface cannot be created."""


def to_pygame_color(color: RGBA) -> Tuple[int, int, int, int]:
    alpha = max(0.0, min(1.0, float(color[3])))
    return int(color[0]), int(color[1]), int(color[2]), int(round(alpha * 255))


class PygameCanvas:
    """Backing store plus the handful of primitives the renderer needs."""

    def __init__(self, backing_size: Tuple[int, int] = (1, 1)):
        try:
            self._surface = pygame.Surface(_at_least_one(backing_size), pygame.SRCALPHA)
        except pygame.error as exc:
            raise SurfaceUnavailable(str(exc)) from exc
        self._scale = 1.0
        self._gradients: Dict[tuple, pygame.Surface] = {}

    @property
    def surface(self) -> pygame.Surface:
        return self._surface

    @property
    def backing_size(self) -> Tuple[int, int]:
        return self._surface.get_size()

    @property
    def scale(self) -> float:
        return self._scale

    def resize(self, width: int, height: int) -> None:
        size = _at_least_one((width, height))
        if size == self.backing_size:
            return
        self._surface = pygame.Surface(size, pygame.SRCALPHA)
        self._gradients.clear()

    def set_scale(self, scale: float) -> None:
        if scale != self._scale:
            self._scale = float(scale)
            self._gradients.clear()

    def clear(self) -> None:
        self._surface.fill((0, 0, 0, 0))

    def fill_rect(self, x: float, y: float, w: float, h: float, color: RGBA) -> None:
        s = self._scale
        rect = pygame.Rect(int(math.floor(x * s)), int(math.floor(y * s)),
                           int(math.ceil(w * s)), int(math.ceil(h * s)))
        rect = rect.clip(self._surface.get_rect())
        if rect.width <= 0 or rect.height <= 0:
            return
        layer = pygame.Surface(rect.size, pygame.SRCALPHA)
        layer.fill(to_pygame_color(color))
        self._surface.blit(layer, rect.topleft)

    def fill_circle(self, x: float, y: float, radius: float, color: RGBA) -> None:
        s = self._scale
        r = max(1, int(round(radius * s)))
        layer = pygame.Surface((r * 2 + 2, r * 2 + 2), pygame.SRCALPHA)
        pygame.draw.circle(layer, to_pygame_color(color), (r + 1, r + 1), r)
        self._surface.blit(layer, (int(math.floor(x * s)) - r - 1, int(math.floor(y * s)) - r - 1))

    def stroke_line(self, x0: float, y0: float, x1: float, y1: float, width: float, color: RGBA) -> None:
        s = self._scale
        lw = max(1, int(round(width * s)))
        ax, ay, bx, by = x0 * s, y0 * s, x1 * s, y1 * s
        left = int(math.floor(min(ax, bx))) - lw
        top = int(math.floor(min(ay, by))) - lw
        w = int(math.ceil(abs(bx - ax))) + lw * 2 + 1
        h = int(math.ceil(abs(by - ay))) + lw * 2 + 1
        layer = pygame.Surface((w, h), pygame.SRCALPHA)
        pygame.draw.line(layer, to_pygame_color(color), (ax - left, ay - top), (bx - left, by - top), lw)
        self._surface.blit(layer, (left, top))

    def fill_radial_gradient(self, cx: float, cy: float, r0: float, r1: float, color: RGBA) -> None:
        """Fill the whole surface with color fading to transparent between r0 and r1.

        The layer only depends on geometry and color, so it is built once per
        backing size and reused every frame.
        """
        key = (cx, cy, r0, r1, tuple(color))
        layer = self._gradients.get(key)
        if layer is None:
            layer = self._build_gradient(cx, cy, r0, r1, color)
            self._gradients[key] = layer
        self._surface.blit(layer, (0, 0))

    def _build_gradient(self, cx: float, cy: float, r0: float, r1: float, color: RGBA) -> pygame.Surface:
        s = self._scale
        w, h = self.backing_size
        xs = (np.arange(w, dtype=np.float32) + 0.5)[:, None]
        ys = (np.arange(h, dtype=np.float32) + 0.5)[None, :]
        dist = np.hypot(xs - cx * s, ys - cy * s)
        span = max(1e-6, (r1 - r0) * s)
        t = np.clip((dist - r0 * s) / span, 0.0, 1.0)

        r, g, b, a = to_pygame_color(color)
        layer = pygame.Surface((w, h), pygame.SRCALPHA)
        layer.fill((r, g, b, 0))
        alpha = pygame.surfarray.pixels_alpha(layer)
        alpha[:] = (a * (1.0 - t)).astype(np.uint8)
        del alpha  # release the surface lock
        return layer

    def present(self, target: pygame.Surface) -> None:
        """Blit the backing store onto target, scaling it to target's size."""
        if target.get_size() == self.backing_size:
            target.blit(self._surface, (0, 0))
        else:
            target.blit(pygame.transform.smoothscale(self._surface, target.get_size()), (0, 0))


def _at_least_one(size: Tuple[int, int]) -> Tuple[int, int]:
    return max(1, int(size[0])), max(1, int(size[1]))


# End of visuals/surface.py
