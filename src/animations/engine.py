"""
Animation Engine

Manages animation lifecycle: one tracked task per running animation,
frames forwarded to an optional sink (the presentation layer).
"""

import asyncio
from typing import Any, Callable, Dict, Optional

from animations.base import BaseAnimation
from lifecycle.task_registry import create_tracked_task, TaskCategory
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.ANIMATION)

FrameSink = Callable[[str, Any], None]


class AnimationEngine:
    """
    Drives BaseAnimation state machines on the asyncio loop.

    • Each key (e.g. "hero") gets its own animation task
    • Every tick's state snapshot is pushed to the sink
    • stop()/stop_all() cancel the task and await it, so no tick can run
      after they return
    """

    def __init__(self, sink: Optional[FrameSink] = None, owner: Optional[str] = None):
        self.sink = sink
        self.owner = owner

        # active tasks: key → asyncio.Task
        self.tasks: Dict[str, asyncio.Task] = {}
        self.animations: Dict[str, BaseAnimation] = {}
        self.frame_counts: Dict[str, int] = {}

        self._lock = asyncio.Lock()

    # ============================================================
    # Core control methods
    # ============================================================

    async def start(self, key: str, animation: BaseAnimation) -> None:
        """Start an animation under key, replacing any animation already running there."""
        async with self._lock:
            if key in self.tasks:
                log.warn(f"Animation '{key}' already running, stopping old one")
                await self._stop_locked(key)

            self.animations[key] = animation
            self.frame_counts[key] = 0

            task = create_tracked_task(
                self._run_loop(key, animation),
                category=TaskCategory.ANIMATION,
                description=f"{type(animation).__name__} '{key}'",
                owner=self.owner,
            )
            self.tasks[key] = task

            log.info(f"Started animation '{key}' ({type(animation).__name__})")

    async def stop(self, key: str) -> None:
        """Stop a single animation."""
        async with self._lock:
            await self._stop_locked(key)

    async def _stop_locked(self, key: str) -> None:
        task = self.tasks.pop(key, None)
        animation = self.animations.pop(key, None)

        if animation:
            animation.stop()

        if task:
            task.cancel()
            try:
                await task
            except asyncio.CancelledError:
                pass
            log.info(f"Stopped animation '{key}'")

    async def stop_all(self) -> None:
        """Stop all animations safely."""
        for key in list(self.tasks.keys()):
            await self.stop(key)

    # ------------------------------------------------------------
    # Internal animation loop
    # ------------------------------------------------------------

    async def _run_loop(self, key: str, animation: BaseAnimation) -> None:
        """Run an animation until stopped."""
        frame_count = 0
        try:
            async for state in animation.run():
                frame_count += 1
                self.frame_counts[key] = frame_count

                if self.sink is None:
                    continue
                try:
                    self.sink(key, state)
                except Exception as e:
                    log.error(f"Frame sink failed for '{key}': {e}")

        except asyncio.CancelledError:
            log.debug(f"Animation task '{key}' cancelled")
        except Exception as e:
            log.error(f"Animation error on '{key}': {e}")
        finally:
            animation.stop()
            if self.tasks.get(key) is asyncio.current_task():
                self.tasks.pop(key, None)
                self.animations.pop(key, None)
            log.debug(f"Animation task '{key}' finished after {frame_count} frames")

    # ------------------------------------------------------------------
    # RUNTIME HELPERS
    # ------------------------------------------------------------------

    def get_animation(self, key: str) -> Optional[BaseAnimation]:
        return self.animations.get(key)

    def is_running(self, key: Optional[str] = None) -> bool:
        """
        If key is None → check if ANY animation is running.
        Otherwise check that one animation.
        """
        if key is not None:
            task = self.tasks.get(key)
            return task is not None and not task.done()

        return any(not t.done() for t in self.tasks.values())
