"""Typewriter domain model"""

from dataclasses import dataclass
from typing import Tuple

from models.enums import TypewriterPhase


@dataclass(frozen=True)
class TypewriterState:
    """
    Snapshot of the typewriter state machine.

    Invariant: displayed is always a prefix of phrases[active_index].
    """
    phrases: Tuple[str, ...]
    active_index: int
    displayed: str
    phase: TypewriterPhase

    @property
    def active_phrase(self) -> str:
        return self.phrases[self.active_index]

    @property
    def deleting(self) -> bool:
        return self.phase is TypewriterPhase.DELETING
