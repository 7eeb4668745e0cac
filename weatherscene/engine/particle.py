"""
engine/particle.py

A lightweight Particle for the weather scene. Handles depth-scaled fall speed,
wind drift, sinusoidal turbulence and the viewport boundary policy. Particles
are never destroyed when they leave the view; they are moved back in.
"""

import math
import random
from typing import Tuple

from weatherscene.engine import config

Vector = Tuple[float, float]


class Particle:
    """Single drop, flake or dust mote.

    Attributes:
        x, y: position in CSS pixels
        z: depth in [0, 1), 0 is far and 1 is near; fixed for the particle's life
        speed: baseline fall speed (px/s)
        seed: phase offset for turbulence, in [0, 1000)
    """

    __slots__ = ("x", "y", "_z", "speed", "seed")

    def __init__(self, x: float, y: float, z: float, speed: float, seed: float):
        self.x = float(x)
        self.y = float(y)
        self._z = float(z)
        self.speed = float(speed)
        self.seed = float(seed)

    @property
    def z(self) -> float:
        return self._z

    @classmethod
    def spawn(cls, rng: random.Random, width: float, height: float, base_speed: float) -> "Particle":
        """Create a particle at a random spot inside the viewport."""
        z = rng.random()
        return cls(
            x=rng.random() * width,
            y=rng.random() * height,
            z=z,
            speed=base_speed * (0.25 + z),
            seed=rng.random() * config.SEED_RANGE,
        )

    @property
    def depth_factor(self) -> float:
        return 0.25 + self._z * 0.95

    def drift_x(self, wind: Vector, t: float, turbulence: float) -> float:
        """Horizontal drift (px/s): wind scaled by depth plus per-particle sway."""
        sway = math.sin(t * config.TURBULENCE_RATE + self.seed) * turbulence
        return wind[0] * (0.15 + self._z) + sway

    def update(self, dt: float, t: float, wind: Vector, turbulence: float,
               width: float, height: float, rng: random.Random) -> float:
        """Advance by dt seconds at simulation time t and return the horizontal drift used.

        Falling below the view re-seeds the particle at the top with a fresh x.
        Leaving either side wraps to the other side.
        """
        drift_x = self.drift_x(wind, t, turbulence)
        drift_y = wind[1] * 0.05

        self.x += drift_x * dt
        self.y += (self.speed * self.depth_factor + drift_y) * dt

        if self.y > height + config.RESPAWN_MARGIN_Y:
            self.y = -config.RESPAWN_MARGIN_Y
            self.x = rng.random() * width
        if self.x < -config.WRAP_MARGIN_X:
            self.x = width + config.WRAP_MARGIN_X
        elif self.x > width + config.WRAP_MARGIN_X:
            self.x = -config.WRAP_MARGIN_X

        return drift_x


# End of engine/particle.py
