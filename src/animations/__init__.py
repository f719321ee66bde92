"""
Animation system for the page's decorative and text effects

Provides base classes and engine for timer-driven animations.

Current implementation:
- engine: Task-per-animation engine with cancelable ticks
- base: Base animation class (explicit state machine)
- typewriter: Typing / pausing / deleting phrase cycle
- particles: Memoized randomized background particles
"""

from .base import BaseAnimation
from .engine import AnimationEngine
from .typewriter import TypewriterAnimation
from .particles import ParticleGenerator

__all__ = [
    "BaseAnimation",
    "AnimationEngine",
    "TypewriterAnimation",
    "ParticleGenerator",
]
