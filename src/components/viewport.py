"""
Viewport Component - Host Abstraction Layer

Capability interface for everything the engine observes about the page:
scroll offset, landmark intersection, pointer position, anchor geometry.
SimulatedViewport is the in-memory host used by tests and the console demo.
"""

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Protocol, Tuple

from models.domain.scroll import IntersectionEntry
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.SCROLL)

ScrollCallback = Callable[[float], None]
IntersectionCallback = Callable[[IntersectionEntry], None]
PointerCallback = Callable[[float, float], None]


class Subscription:
    """
    Handle for one registered listener/observer.

    disconnect() is idempotent; after it returns the callback is never
    invoked again.
    """

    def __init__(self, on_disconnect: Callable[[], None]):
        self._on_disconnect: Optional[Callable[[], None]] = on_disconnect

    @property
    def active(self) -> bool:
        return self._on_disconnect is not None

    def disconnect(self) -> None:
        callback, self._on_disconnect = self._on_disconnect, None
        if callback is not None:
            callback()


class Viewport(Protocol):
    """Capabilities the engine needs from the host page"""

    @property
    def width(self) -> float: ...

    def add_scroll_listener(self, callback: ScrollCallback) -> Subscription: ...

    def observe(
        self,
        region_id: str,
        callback: IntersectionCallback,
        root_margin_top: float = 0.0,
    ) -> Subscription: ...

    def add_pointer_listener(self, callback: PointerCallback) -> Subscription: ...

    def element_top(self, region_id: str) -> Optional[float]: ...

    def scroll_to(self, top: float) -> None: ...


@dataclass
class _Observer:
    region_id: str
    callback: IntersectionCallback
    root_margin_top: float
    last: Optional[bool] = None


class SimulatedViewport:
    """
    In-memory viewport.

    Regions are (top, height) in document px. Intersection follows the
    browser rule for threshold 0: a region intersects when it overlaps the
    root rectangle, where a negative root_margin_top shrinks the root from
    the top edge. Observers get an initial entry on observe() and afterwards
    only on changes.

    Example:
        viewport = SimulatedViewport(regions={"home": (0, 900)})
        viewport.scroll_to(1200)   # scroll listeners get 1200.0
    """

    def __init__(
        self,
        width: float = 1280.0,
        height: float = 800.0,
        regions: Optional[Dict[str, Tuple[float, float]]] = None,
    ):
        self._width = width
        self.height = height
        self.regions: Dict[str, Tuple[float, float]] = dict(regions or {})
        self.scroll_y = 0.0
        self.pointer: Tuple[float, float] = (0.0, 0.0)

        self._scroll_listeners: List[ScrollCallback] = []
        self._pointer_listeners: List[PointerCallback] = []
        self._observers: List[_Observer] = []

    # ------------------------------------------------------------
    # Viewport protocol
    # ------------------------------------------------------------

    @property
    def width(self) -> float:
        return self._width

    def add_scroll_listener(self, callback: ScrollCallback) -> Subscription:
        self._scroll_listeners.append(callback)
        return Subscription(lambda: self._discard(self._scroll_listeners, callback))

    def add_pointer_listener(self, callback: PointerCallback) -> Subscription:
        self._pointer_listeners.append(callback)
        return Subscription(lambda: self._discard(self._pointer_listeners, callback))

    def observe(
        self,
        region_id: str,
        callback: IntersectionCallback,
        root_margin_top: float = 0.0,
    ) -> Subscription:
        observer = _Observer(region_id, callback, root_margin_top)
        self._observers.append(observer)
        self._notify_observer(observer, force=True)
        return Subscription(lambda: self._discard(self._observers, observer))

    def element_top(self, region_id: str) -> Optional[float]:
        region = self.regions.get(region_id)
        return region[0] if region else None

    def scroll_to(self, top: float) -> None:
        self.scroll_y = max(0.0, float(top))
        for callback in list(self._scroll_listeners):
            if callback in self._scroll_listeners:
                callback(self.scroll_y)
        for observer in list(self._observers):
            if observer in self._observers:
                self._notify_observer(observer)

    # ------------------------------------------------------------
    # Simulation helpers
    # ------------------------------------------------------------

    def resize(self, width: float, height: Optional[float] = None) -> None:
        self._width = width
        if height is not None:
            self.height = height
            for observer in list(self._observers):
                self._notify_observer(observer)

    def move_pointer(self, x: float, y: float) -> None:
        self.pointer = (x, y)
        for callback in list(self._pointer_listeners):
            if callback in self._pointer_listeners:
                callback(x, y)

    def is_intersecting(self, region_id: str, root_margin_top: float = 0.0) -> bool:
        region = self.regions.get(region_id)
        if region is None:
            return False
        top, height = region
        root_top = self.scroll_y - root_margin_top
        root_bottom = self.scroll_y + self.height
        return top < root_bottom and top + height > root_top

    @property
    def listener_count(self) -> int:
        """Scroll + pointer listeners and observers still connected"""
        return len(self._scroll_listeners) + len(self._pointer_listeners) + len(self._observers)

    # ------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------

    def _notify_observer(self, observer: _Observer, force: bool = False) -> None:
        if observer.region_id not in self.regions:
            log.warn(f"Observed region '{observer.region_id}' not found")
            return
        intersecting = self.is_intersecting(observer.region_id, observer.root_margin_top)
        if not force and intersecting == observer.last:
            return
        observer.last = intersecting
        observer.callback(IntersectionEntry(observer.region_id, intersecting))

    @staticmethod
    def _discard(items: list, item) -> None:
        if item in items:
            items.remove(item)
