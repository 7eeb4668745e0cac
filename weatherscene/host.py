"""
host.py

pygame implementations of the host services a RenderLoop needs. The window's
main loop calls FrameScheduler.run_pending() once per display refresh and
feeds VIDEORESIZE events to ResizeChannel.dispatch().
"""

import itertools
from typing import Callable, Dict, List, Optional, Tuple

import pygame

from weatherscene.engine.loop import now_ms
from weatherscene.visuals.surface import PygameCanvas, SurfaceUnavailable


class FrameScheduler:
    """requestAnimationFrame-style scheduler pumped by the host loop."""

    def __init__(self):
        self._pending: Dict[int, Callable[[float], None]] = {}
        self._ids = itertools.count(1)

    def __len__(self) -> int:
        return len(self._pending)

    def request_frame(self, callback: Callable[[float], None]) -> int:
        handle = next(self._ids)
        self._pending[handle] = callback
        return handle

    def cancel_frame(self, handle: int) -> None:
        self._pending.pop(handle, None)

    def run_pending(self, now: Optional[float] = None) -> int:
        """Run callbacks queued before this call; ones they queue wait for the next frame."""
        now = now_ms() if now is None else now
        batch, self._pending = self._pending, {}
        for callback in batch.values():
            callback(now)
        return len(batch)


class ResizeChannel:
    def __init__(self):
        self._listeners: List[Callable] = []

    def add_listener(self, listener: Callable) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def remove_listener(self, listener: Callable) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def dispatch(self, *args) -> None:
        for listener in list(self._listeners):
            listener(*args)


class WindowMetrics:
    """Display geometry of the pygame window in layout pixels."""

    def __init__(self, pixel_ratio: float = 1.0):
        self.pixel_ratio = pixel_ratio

    def __call__(self) -> Tuple[float, float, float]:
        window = pygame.display.get_surface()
        if window is None:
            return 1, 1, self.pixel_ratio
        width, height = window.get_size()
        return width, height, self.pixel_ratio


def canvas_factory() -> PygameCanvas:
    """Create a backing canvas; fails if no window is open."""
    if pygame.display.get_surface() is None:
        raise SurfaceUnavailable("no display surface")
    return PygameCanvas()


# End of host.py
