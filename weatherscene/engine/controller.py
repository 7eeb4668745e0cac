"""
engine/controller.py

WeatherScene ties an observation to a running RenderLoop. A new observation
object means new SceneParameters, and new parameters mean the old loop and its
particles are torn down and a fresh loop is started. Nothing carries over.
"""

import logging
import random
from typing import Callable, Optional

import pygame

from weatherscene.engine.config import SceneConfig
from weatherscene.engine.loop import Metrics, RenderLoop
from weatherscene.engine.observation import WeatherObservation
from weatherscene.engine.scene import SceneParameters, resolve_scene
from weatherscene.engine.simulation import Simulation
from weatherscene.visuals.renderer import Renderer
from weatherscene.visuals.surface import SurfaceUnavailable

logger = logging.getLogger(__name__)


class WeatherScene:
    """Owns at most one live RenderLoop.

    canvas_factory returns a drawable surface, or None when there is nothing
    to draw on. In that case the scene stays dark and no loop is started.
    """

    def __init__(self, canvas_factory: Callable[[], object], scheduler, resize_channel,
                 metrics: Metrics, config: Optional[SceneConfig] = None, clock=None):
        self._canvas_factory = canvas_factory
        self._scheduler = scheduler
        self._resize_channel = resize_channel
        self._metrics = metrics
        self._config = config if config is not None else SceneConfig()
        self._clock = clock

        self._observation: Optional[WeatherObservation] = None
        self.params: Optional[SceneParameters] = None
        self.loop: Optional[RenderLoop] = None

    @property
    def canvas(self):
        return self.loop.canvas if self.loop is not None else None

    def update(self, observation: Optional[WeatherObservation]) -> bool:
        """Show a new observation. Returns True when the loop was restarted.

        Only the object identity is compared: passing the same observation
        again is a no-op, an equal but distinct one restarts the scene.
        """
        if self.loop is not None and observation is self._observation:
            return False
        self._observation = observation
        self.params = resolve_scene(observation, self._config.wind_px_per_kmh)
        self._restart(self.params)
        return True

    def stop(self) -> None:
        if self.loop is not None:
            self.loop.stop()
            self.loop = None

    def _restart(self, params: SceneParameters) -> None:
        # Teardown completes before anything new is created
        self.stop()

        canvas = self._acquire_canvas()
        if canvas is None:
            return

        simulation = Simulation(params, rng=random.Random(self._config.seed))
        kwargs = {"clock": self._clock} if self._clock is not None else {}
        self.loop = RenderLoop(simulation, Renderer(canvas), canvas, self._scheduler,
                               self._resize_channel, self._metrics, **kwargs)
        self.loop.start()

    def _acquire_canvas(self):
        try:
            canvas = self._canvas_factory()
        except (SurfaceUnavailable, pygame.error) as exc:
            logger.debug("No drawing surface, scene disabled: %s", exc)
            return None
        if canvas is None:
            logger.debug("No drawing surface, scene disabled")
        return canvas


# End of engine/controller.py
