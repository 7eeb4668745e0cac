"""
engine/canvas.py

Geometry and clock of the drawing area. Sizes are kept in layout (CSS) pixels;
the backing store is the layout size times the clamped device pixel ratio.
"""

import math
from dataclasses import dataclass
from typing import Tuple

from weatherscene.engine import config


def clamp_pixel_ratio(ratio) -> float:
    if not isinstance(ratio, (int, float)) or not math.isfinite(ratio) or ratio <= 0:
        return config.MIN_PIXEL_RATIO
    return max(config.MIN_PIXEL_RATIO, min(config.MAX_PIXEL_RATIO, float(ratio)))


@dataclass
class CanvasState:
    width: int = 0
    height: int = 0
    pixel_ratio: float = 1.0
    t: float = 0.0

    @property
    def backing_size(self) -> Tuple[int, int]:
        return int(math.floor(self.width * self.pixel_ratio)), int(math.floor(self.height * self.pixel_ratio))

    def resize(self, display_width: float, display_height: float, device_pixel_ratio: float = 1.0) -> bool:
        """Apply new display geometry. Returns True only when something changed."""
        width = max(1, int(math.floor(display_width)))
        height = max(1, int(math.floor(display_height)))
        ratio = clamp_pixel_ratio(device_pixel_ratio)
        if (width, height, ratio) == (self.width, self.height, self.pixel_ratio):
            return False
        self.width, self.height, self.pixel_ratio = width, height, ratio
        return True

    def advance_clock(self, dt: float) -> float:
        """Add dt (capped, never negative) to the simulation time and return the dt used."""
        if not math.isfinite(dt):
            dt = 0.0
        dt = max(0.0, min(config.DT_CAP, dt))
        self.t += dt
        return dt


# End of engine/canvas.py
