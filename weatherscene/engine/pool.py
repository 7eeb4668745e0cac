"""
engine/pool.py

Keeps the particle population at the size the current mode and intensity ask
for. Sizing is instantaneous: a frame either spawns the missing particles or
drops the surplus from the tail.
"""

import math
import random
from typing import Iterator, List

from weatherscene.engine import config
from weatherscene.engine.particle import Particle
from weatherscene.engine.scene import Mode


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def target_count(mode: Mode, intensity: float) -> int:
    if mode is Mode.SNOW:
        return _round_half_up(config.SNOW_COUNT * intensity)
    if mode is Mode.RAIN:
        return _round_half_up(config.RAIN_COUNT * intensity)
    if mode is Mode.STORM:
        return _round_half_up(config.STORM_COUNT * intensity)
    if mode is Mode.FOG:
        return config.FOG_COUNT
    return config.CLEAR_COUNT


def base_speed(mode: Mode) -> float:
    # Storm shares the ambient base speed
    if mode is Mode.RAIN:
        return config.RAIN_BASE_SPEED
    if mode is Mode.SNOW:
        return config.SNOW_BASE_SPEED
    return config.AMBIENT_BASE_SPEED


class ParticlePool:
    """Particle storage for one simulation."""

    def __init__(self, rng: random.Random):
        self._rng = rng
        self._particles: List[Particle] = []

    def __len__(self) -> int:
        return len(self._particles)

    def __iter__(self) -> Iterator[Particle]:
        return iter(self._particles)

    def adjust(self, mode: Mode, intensity: float, width: float, height: float) -> int:
        """Grow or shrink to target_count(mode, intensity). Returns the new size."""
        target = target_count(mode, intensity)
        speed = base_speed(mode)
        while len(self._particles) < target:
            self._particles.append(Particle.spawn(self._rng, width, height, speed))
        if len(self._particles) > target:
            del self._particles[target:]
        return len(self._particles)


# End of engine/pool.py
