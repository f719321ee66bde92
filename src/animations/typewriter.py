"""
Typewriter Animation

Cycles through a list of phrases, typing them character by character,
pausing on the full phrase, then deleting back to empty.
"""

from typing import Sequence, Tuple

from animations.base import BaseAnimation
from models.domain.typewriter import TypewriterState
from models.enums import TypewriterPhase
from utils.logger import LogCategory, get_category_logger

log = get_category_logger(LogCategory.ANIMATION)


class TypewriterAnimation(BaseAnimation):
    """
    Typewriter state machine: TYPING → PAUSING → DELETING → TYPING (next phrase)

    - TYPING: each tick appends one character; on reaching the full phrase → PAUSING
    - PAUSING: after `pause` seconds → DELETING (text unchanged)
    - DELETING: each tick removes one trailing character; on reaching "" →
      TYPING with active_index = (active_index + 1) % len(phrases)

    The cycle never terminates on its own.

    Example:
        anim = TypewriterAnimation(["Hi", "There"], type_interval=0.08)
        anim.step()           # displayed == "H"
        anim.state.displayed  # "H"
    """

    def __init__(
        self,
        phrases: Sequence[str],
        type_interval: float = 0.08,
        delete_interval: float = 0.04,
        pause: float = 2.5,
    ):
        super().__init__()

        phrases = tuple(phrases)
        if not phrases:
            raise ValueError("TypewriterAnimation requires at least one phrase")
        if any(not p for p in phrases):
            raise ValueError("TypewriterAnimation phrases must be non-empty")
        if min(type_interval, delete_interval, pause) <= 0:
            raise ValueError(
                f"Intervals must be positive (type={type_interval}, "
                f"delete={delete_interval}, pause={pause})"
            )

        self.phrases: Tuple[str, ...] = phrases
        self.type_interval = type_interval
        self.delete_interval = delete_interval
        self.pause = pause

        self._index = 0
        self._length = 0  # number of characters of the active phrase on screen
        self._phase = TypewriterPhase.TYPING

        log.debug("TypewriterAnimation initialized", phrases=len(phrases))

    @property
    def _phrase(self) -> str:
        return self.phrases[self._index]

    @property
    def state(self) -> TypewriterState:
        return TypewriterState(
            phrases=self.phrases,
            active_index=self._index,
            displayed=self._phrase[:self._length],
            phase=self._phase,
        )

    @property
    def displayed(self) -> str:
        return self._phrase[:self._length]

    @property
    def next_delay(self) -> float:
        if self._phase is TypewriterPhase.TYPING:
            return self.type_interval
        if self._phase is TypewriterPhase.PAUSING:
            return self.pause
        return self.delete_interval

    def step(self) -> float:
        """Apply one tick. Returns delay (seconds) until the next tick."""
        if self._phase is TypewriterPhase.TYPING:
            self._length += 1
            if self._length >= len(self._phrase):
                self._length = len(self._phrase)
                self._phase = TypewriterPhase.PAUSING

        elif self._phase is TypewriterPhase.PAUSING:
            self._phase = TypewriterPhase.DELETING

        else:
            self._length -= 1
            if self._length <= 0:
                self._length = 0
                self._index = (self._index + 1) % len(self.phrases)
                self._phase = TypewriterPhase.TYPING

        return self.next_delay
