from __future__ import annotations

import asyncio
from typing import List, Optional

from lifecycle.shutdown_protocol import IShutdownHandler
from lifecycle.task_registry import TaskRegistry
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.LIFECYCLE)


class TaskCancellationHandler(IShutdownHandler):
    """
    Cancels and awaits every tracked task still pending after the
    components have torn themselves down.

    Priority: 10 (last)
    """

    def __init__(self, exclude: Optional[List[asyncio.Task]] = None):
        self.exclude = exclude or []

    @property
    def shutdown_priority(self) -> int:
        return 10

    async def shutdown(self) -> None:
        tasks = TaskRegistry.instance().get_tasks_for_shutdown(exclude=self.exclude)
        if not tasks:
            log.debug("No leftover tasks")
            return

        log.warn(f"Cancelling {len(tasks)} leftover tasks...")
        for task in tasks:
            task.cancel()

        await asyncio.gather(*tasks, return_exceptions=True)
        log.debug("All tasks cancelled")
