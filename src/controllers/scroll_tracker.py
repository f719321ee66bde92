"""
Scroll Tracker - Chrome signals derived from scroll position and landmark visibility
"""

from typing import Callable, List, Optional

from components.viewport import Subscription, Viewport
from models.domain.scroll import IntersectionEntry, ScrollSignals
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.SCROLL)


class ScrollTracker:
    """
    Two independent read-only signals:

    - chrome_solid: vertical scroll offset > threshold, recomputed on every
      scroll event
    - scroll_top_visible: NOT intersecting(hero region), recomputed by
      intersection observation with a negative top root margin, so the
      control appears slightly before the hero fully leaves view whatever
      the hero's height

    start() registers both listeners; teardown() disconnects them. After
    teardown the signals are frozen and on_change is never called again.
    """

    def __init__(
        self,
        viewport: Viewport,
        hero_region: str = "home",
        threshold: float = 20.0,
        root_margin_top: float = -80.0,
        on_change: Optional[Callable[[ScrollSignals], None]] = None,
    ):
        self.viewport = viewport
        self.hero_region = hero_region
        self.threshold = threshold
        self.root_margin_top = root_margin_top
        self.on_change = on_change

        self._chrome_solid = False
        self._scroll_top_visible = False
        self._subscriptions: List[Subscription] = []
        self._torn_down = False

    # ------------------------------------------------------------
    # Read-only signals
    # ------------------------------------------------------------

    @property
    def chrome_solid(self) -> bool:
        return self._chrome_solid

    @property
    def scroll_top_visible(self) -> bool:
        return self._scroll_top_visible

    @property
    def signals(self) -> ScrollSignals:
        return ScrollSignals(
            chrome_solid=self._chrome_solid,
            scroll_top_visible=self._scroll_top_visible,
        )

    @property
    def started(self) -> bool:
        return bool(self._subscriptions)

    # ------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------

    def start(self) -> None:
        if self._torn_down:
            raise RuntimeError("ScrollTracker cannot be restarted after teardown")
        if self._subscriptions:
            return

        self._subscriptions.append(self.viewport.add_scroll_listener(self._on_scroll))
        self._subscriptions.append(
            self.viewport.observe(self.hero_region, self._on_intersection, self.root_margin_top)
        )
        log.debug("ScrollTracker started", hero=self.hero_region, threshold=self.threshold)

    def teardown(self) -> None:
        self._torn_down = True
        for subscription in self._subscriptions:
            subscription.disconnect()
        self._subscriptions.clear()
        log.debug("ScrollTracker torn down")

    # ------------------------------------------------------------
    # Event handlers
    # ------------------------------------------------------------

    def _on_scroll(self, offset: float) -> None:
        if self._torn_down:
            return
        solid = offset > self.threshold
        if solid != self._chrome_solid:
            self._chrome_solid = solid
            self._notify()

    def _on_intersection(self, entry: IntersectionEntry) -> None:
        if self._torn_down or entry.region_id != self.hero_region:
            return
        visible = not entry.is_intersecting
        if visible != self._scroll_top_visible:
            self._scroll_top_visible = visible
            self._notify()

    def _notify(self) -> None:
        if self.on_change is None:
            return
        try:
            self.on_change(self.signals)
        except Exception as e:
            log.error(f"Scroll signal listener failed: {e}")
