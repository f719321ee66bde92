"""
Pointer Tracker - Position of the ambient glow that follows the pointer
"""

from typing import Optional, Tuple

from components.viewport import Subscription, Viewport


class PointerTracker:
    """Keeps the glow centered on the last pointer position."""

    def __init__(self, viewport: Viewport, radius: float = 400.0):
        self.viewport = viewport
        self.radius = radius
        self._position: Tuple[float, float] = (0.0, 0.0)
        self._subscription: Optional[Subscription] = None
        self._torn_down = False

    @property
    def position(self) -> Tuple[float, float]:
        return self._position

    @property
    def glow_offset(self) -> Tuple[float, float]:
        """Top-left corner of the glow square (centered on the pointer)"""
        x, y = self._position
        return (x - self.radius, y - self.radius)

    def start(self) -> None:
        if self._torn_down:
            raise RuntimeError("PointerTracker cannot be restarted after teardown")
        if self._subscription is None:
            self._subscription = self.viewport.add_pointer_listener(self._on_move)

    def teardown(self) -> None:
        self._torn_down = True
        if self._subscription is not None:
            self._subscription.disconnect()
            self._subscription = None

    def _on_move(self, x: float, y: float) -> None:
        if not self._torn_down:
            self._position = (x, y)
