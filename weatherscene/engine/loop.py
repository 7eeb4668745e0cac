"""
engine/loop.py

Render loop: drives a Simulation and a Renderer from a host frame scheduler.

The host supplies three things:
    scheduler      request_frame(callback) -> handle, cancel_frame(handle);
                   callbacks get a timestamp in milliseconds
    resize_channel add_listener(fn), remove_listener(fn)
    metrics        callable returning (width, height, device_pixel_ratio)

A tick must request the next frame itself, otherwise the loop silently ends.
Once stopped, a loop never draws again, even if a frame was already queued.
"""

import logging
import time
from enum import Enum
from typing import Callable, Optional, Tuple

from weatherscene.engine import config
from weatherscene.engine.simulation import Simulation

logger = logging.getLogger(__name__)

Metrics = Callable[[], Tuple[float, float, float]]


def now_ms() -> float:
    return time.perf_counter() * 1000.0


class LoopState(Enum):
    IDLE = "idle"
    RUNNING = "running"
    STOPPED = "stopped"


class LoopStateError(RuntimeError):
    """Raised when a loop is started more than once."""


class RenderLoop:
    def __init__(self, simulation: Simulation, renderer, canvas, scheduler, resize_channel,
                 metrics: Metrics, clock: Callable[[], float] = now_ms):
        self.simulation = simulation
        self.renderer = renderer
        self.canvas = canvas
        self._scheduler = scheduler
        self._resize_channel = resize_channel
        self._metrics = metrics
        self._clock = clock

        self.state = LoopState.IDLE
        self._handle = None
        self._last: Optional[float] = None

    @property
    def running(self) -> bool:
        return self.state is LoopState.RUNNING

    def start(self) -> None:
        if self.state is not LoopState.IDLE:
            raise LoopStateError(f"cannot start a loop that is {self.state.value}")
        self.state = LoopState.RUNNING
        self._resize_channel.add_listener(self._on_resize)
        self._apply_layout()
        self._last = self._clock()
        self._handle = self._scheduler.request_frame(self._tick)
        logger.debug("Render loop started (%s)", self.simulation.params.mode.value)

    def stop(self) -> None:
        if self.state is LoopState.STOPPED:
            return
        was_running = self.running
        # Flag first so an in-flight tick bails out before touching the surface
        self.state = LoopState.STOPPED
        if self._handle is not None:
            self._scheduler.cancel_frame(self._handle)
            self._handle = None
        if was_running:
            self._resize_channel.remove_listener(self._on_resize)
        logger.debug("Render loop stopped")

    def _on_resize(self, *_args) -> None:
        if self.running:
            self._apply_layout()

    def _apply_layout(self) -> bool:
        """Match the backing store to the current display metrics.

        Safe to call from both the resize listener and every tick: when the
        geometry is unchanged it is only a comparison.
        """
        width, height, ratio = self._metrics()
        state = self.simulation.canvas
        if not state.resize(width, height, ratio):
            return False
        backing_w, backing_h = state.backing_size
        self.canvas.resize(backing_w, backing_h)
        self.canvas.set_scale(state.pixel_ratio)
        logger.debug("Backing store resized to %dx%d (ratio %.2f)", backing_w, backing_h, state.pixel_ratio)
        return True

    def _tick(self, now: float) -> None:
        if not self.running:
            return
        self._handle = None

        last = self._last if self._last is not None else now
        dt = min(config.DT_CAP, max(0.0, (now - last) / 1000.0))
        self._last = now

        self._apply_layout()
        snapshot = self.simulation.advance(dt)
        self.renderer.draw(snapshot)

        if self.running:
            self._handle = self._scheduler.request_frame(self._tick)


# End of engine/loop.py
