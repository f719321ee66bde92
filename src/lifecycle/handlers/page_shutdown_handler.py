from __future__ import annotations

from typing import TYPE_CHECKING

from lifecycle.shutdown_protocol import IShutdownHandler
from utils.logger import get_logger, LogCategory

if TYPE_CHECKING:
    from controllers.page_controller import PageController

log = get_logger().for_category(LogCategory.LIFECYCLE)


class PageShutdownHandler(IShutdownHandler):
    """
    Unmounts the page view: stops the typewriter, disconnects scroll,
    intersection and pointer observers, cancels the form shake timer.

    Priority: 100 (first)
    """

    def __init__(self, page: "PageController"):
        self.page = page

    @property
    def shutdown_priority(self) -> int:
        return 100

    async def shutdown(self) -> None:
        log.info("Unmounting page view...")
        await self.page.unmount()
