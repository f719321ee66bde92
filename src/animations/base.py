"""
Base Animation Class

All animations inherit from BaseAnimation and implement step() and state.
"""

import asyncio
from typing import Any, AsyncIterator


class BaseAnimation:
    """
    Base class for all timer-driven animations

    An animation is an explicit finite-state machine. Timing is owned by the
    animation itself (next_delay), never by the renderer, so the same state
    machine can be stepped synchronously in tests or driven by AnimationEngine.

    Subclasses MUST implement:
        step()       apply exactly one transition, return delay until the next tick
        next_delay   delay (seconds) before the next tick from the current state
        state        immutable snapshot of the current state
    """

    def __init__(self):
        self.running = False

    # ------------------------------------------------------------
    # State machine
    # ------------------------------------------------------------

    def step(self) -> float:
        raise NotImplementedError

    @property
    def next_delay(self) -> float:
        raise NotImplementedError

    @property
    def state(self) -> Any:
        raise NotImplementedError

    def stop(self):
        self.running = False

    # ------------------------------------------------------------
    # Main generator loop used by AnimationEngine
    # ------------------------------------------------------------
    async def run(self) -> AsyncIterator[Any]:
        """
        Every animation runs in its own task created by AnimationEngine.
        Yields a state snapshot after every tick until stop() is called
        or the owning task is cancelled.
        """
        self.running = True
        delay = self.next_delay

        while self.running:
            await asyncio.sleep(delay)
            if not self.running:
                break
            delay = self.step()
            yield self.state
