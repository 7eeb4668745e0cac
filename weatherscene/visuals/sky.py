"""
visuals/sky.py

Sky effects layered around the particles: the tinted vignette behind them,
the haze bands over fog and the lightning strobe over storms.
"""

import math
from typing import Dict

from weatherscene.engine.scene import Mode
from weatherscene.visuals.surface import RGBA

VIGNETTE_INNER_RADIUS = 50.0
VIGNETTE_CENTER = (0.5, 0.15)  # fractions of width, height

VIGNETTE_COLORS: Dict[Mode, RGBA] = {
    Mode.STORM: (150, 170, 255, 0.08),
    Mode.FOG: (200, 220, 255, 0.10),
}
DEFAULT_VIGNETTE: RGBA = (110, 231, 255, 0.10)

# (top fraction, height fraction, color)
HAZE_BANDS = (
    (0.58, 0.42, (220, 235, 255, 0.06)),
    (0.40, 0.60, (220, 235, 255, 0.04)),
)

FLASH_COLOR = (180, 210, 255)
FLASH_ALPHA = 0.12
FLASH_RATE = 0.9
FLASH_THRESHOLD = 0.999


def lightning_flash(t: float) -> float:
    """Flash alpha at simulation time t: a short deterministic strobe."""
    return FLASH_ALPHA if math.sin(t * FLASH_RATE) > FLASH_THRESHOLD else 0.0


class Sky:
    """Per-mode background and overlays.

    Responsibilities:
    - Paint the radial vignette behind the particles.
    - Paint fog haze bands and storm flashes on top of them.
    """

    def __init__(self, mode: Mode):
        self.mode = mode
        self.vignette_color: RGBA = VIGNETTE_COLORS.get(mode, DEFAULT_VIGNETTE)

    def draw_background(self, surface, width: float, height: float) -> None:
        cx = width * VIGNETTE_CENTER[0]
        cy = height * VIGNETTE_CENTER[1]
        surface.fill_radial_gradient(cx, cy, VIGNETTE_INNER_RADIUS, max(width, height), self.vignette_color)

    def draw_overlays(self, surface, width: float, height: float, t: float) -> None:
        if self.mode is Mode.FOG:
            for top, span, color in HAZE_BANDS:
                surface.fill_rect(0, height * top, width, height * span, color)
        elif self.mode is Mode.STORM:
            flash = lightning_flash(t)
            if flash:
                surface.fill_rect(0, 0, width, height, FLASH_COLOR + (flash,))


# End of visuals/sky.py
