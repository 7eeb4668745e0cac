"""
engine/simulation.py

Physics half of the scene. A Simulation owns the particle pool, the canvas
geometry and the clock for one set of SceneParameters. advance(dt) is pure
with respect to drawing: it returns a snapshot and never touches a surface.
"""

import random
from dataclasses import dataclass
from typing import NamedTuple, Optional, Tuple

from weatherscene.engine import config
from weatherscene.engine.canvas import CanvasState
from weatherscene.engine.pool import ParticlePool
from weatherscene.engine.scene import Mode, SceneParameters


class ParticleState(NamedTuple):
    x: float
    y: float
    z: float
    drift_x: float


@dataclass(frozen=True)
class ParticleSnapshot:
    mode: Mode
    t: float
    width: int
    height: int
    particles: Tuple[ParticleState, ...]


def turbulence_for(mode: Mode) -> float:
    return config.SNOW_TURBULENCE if mode is Mode.SNOW else config.AMBIENT_TURBULENCE


class Simulation:
    """Particles, geometry and time for one scene."""

    def __init__(self, params: SceneParameters, rng: Optional[random.Random] = None,
                 canvas: Optional[CanvasState] = None):
        self.params = params
        self.canvas = canvas if canvas is not None else CanvasState()
        self._rng = rng if rng is not None else random.Random()
        self.pool = ParticlePool(self._rng)

    def advance(self, dt: float) -> ParticleSnapshot:
        """Step the world by dt seconds (capped) and return what should be drawn."""
        canvas = self.canvas
        mode = self.params.mode
        dt = canvas.advance_clock(dt)

        self.pool.adjust(mode, self.params.intensity, canvas.width, canvas.height)

        turbulence = turbulence_for(mode)
        states = []
        for p in self.pool:
            drift_x = p.update(dt, canvas.t, self.params.wind, turbulence,
                               canvas.width, canvas.height, self._rng)
            states.append(ParticleState(p.x, p.y, p.z, drift_x))

        return ParticleSnapshot(mode, canvas.t, canvas.width, canvas.height, tuple(states))


# End of engine/simulation.py
