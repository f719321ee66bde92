"""
Navigation Controller - Mobile menu state and anchor scrolling
"""

from typing import Optional

from components.viewport import Viewport
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.NAVIGATION)


class NavigationController:
    """
    Handles nav link clicks:
    - scrolls so the target section lands below the fixed navigation bar
      (smaller offset on narrow viewports)
    - closes the mobile menu after navigating
    """

    def __init__(
        self,
        viewport: Viewport,
        mobile_breakpoint: float = 768.0,
        mobile_offset: float = 70.0,
        desktop_offset: float = 100.0,
    ):
        self.viewport = viewport
        self.mobile_breakpoint = mobile_breakpoint
        self.mobile_offset = mobile_offset
        self.desktop_offset = desktop_offset
        self._menu_open = False

    @property
    def menu_open(self) -> bool:
        return self._menu_open

    def toggle_menu(self) -> bool:
        self._menu_open = not self._menu_open
        return self._menu_open

    def close_menu(self) -> None:
        self._menu_open = False

    def chrome_solid(self, scroll_solid: bool) -> bool:
        """Navigation chrome is solid when scrolled or while the menu is open."""
        return scroll_solid or self._menu_open

    def scroll_offset(self) -> float:
        if self.viewport.width < self.mobile_breakpoint:
            return self.mobile_offset
        return self.desktop_offset

    def navigate(self, href: str) -> Optional[float]:
        """
        Scroll to the section named by href ("#contact" or "contact").

        Returns the scroll target, or None when the section does not exist.
        """
        target_id = href[1:] if href.startswith("#") else href
        self.close_menu()

        top = self.viewport.element_top(target_id)
        if top is None:
            log.warn(f"Navigation target not found: {href}")
            return None

        target = top - self.scroll_offset()
        self.viewport.scroll_to(target)
        log.debug(f"Navigated to #{target_id}", top=target)
        return target
