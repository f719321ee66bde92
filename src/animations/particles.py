"""
Particle Generator

Randomized, stable decorative parameters for the background layer.
"""

import random
from typing import Dict, Optional

from models.domain.particle import Particle, ParticleSet
from utils.logger import LogCategory, get_category_logger

log = get_category_logger(LogCategory.PARTICLES)

# Uniform ranges: [low, high)
POSITION_RANGE = (0.0, 100.0)  # %
SIZE_RANGE = (1.0, 4.0)        # px
DURATION_RANGE = (2.0, 5.0)    # s
DELAY_RANGE = (0.0, 5.0)       # s


def _uniform(rng: random.Random, bounds) -> float:
    low, high = bounds
    return low + rng.random() * (high - low)


class ParticleGenerator:
    """
    Produces the particle set once per view lifetime.

    One generator instance belongs to one view. generate(count) draws the
    set on first call and returns the identical tuple on every later call
    with the same count, so re-renders never re-randomize the layer.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self._rng = rng or random.Random()
        self._cache: Dict[int, ParticleSet] = {}

    def generate(self, count: int) -> ParticleSet:
        if count < 0:
            raise ValueError(f"Particle count must be >= 0, got {count}")

        cached = self._cache.get(count)
        if cached is not None:
            return cached

        particles = tuple(
            Particle(
                id=i,
                left=_uniform(self._rng, POSITION_RANGE),
                top=_uniform(self._rng, POSITION_RANGE),
                size=_uniform(self._rng, SIZE_RANGE),
                duration=_uniform(self._rng, DURATION_RANGE),
                delay=_uniform(self._rng, DELAY_RANGE),
            )
            for i in range(count)
        )
        self._cache[count] = particles

        log.debug(f"Generated {count} particles")
        return particles
