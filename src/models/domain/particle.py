"""Decorative particle descriptors"""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Particle:
    id: int
    left: float      # % of container width
    top: float       # % of container height
    size: float      # px
    duration: float  # s
    delay: float     # s

    def to_style(self) -> dict:
        """Inline style values as the presentation layer renders them"""
        return {
            "left": f"{self.left}%",
            "top": f"{self.top}%",
            "size": f"{self.size}px",
            "duration": f"{self.duration}s",
            "delay": f"{self.delay}s",
        }


ParticleSet = Tuple[Particle, ...]
