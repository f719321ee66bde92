"""
Tests for the decorative particle generator.
"""

import random

import pytest

from animations.particles import ParticleGenerator


class TestParticleGenerator:

    def test_generates_requested_count_with_sequential_ids(self):
        particles = ParticleGenerator(random.Random(7)).generate(30)

        assert len(particles) == 30
        assert [p.id for p in particles] == list(range(30))

    def test_values_within_ranges(self):
        for p in ParticleGenerator(random.Random(7)).generate(200):
            assert 0 <= p.left < 100
            assert 0 <= p.top < 100
            assert 1 <= p.size < 4
            assert 2 <= p.duration < 5
            assert 0 <= p.delay < 5

    def test_stable_for_generator_lifetime(self):
        """Re-renders must never re-randomize the layer."""
        generator = ParticleGenerator()
        assert generator.generate(30) is generator.generate(30)

    def test_separate_generators_are_independent(self):
        a = ParticleGenerator(random.Random(1)).generate(5)
        b = ParticleGenerator(random.Random(2)).generate(5)
        assert a != b

    def test_zero_count(self):
        assert ParticleGenerator().generate(0) == ()

    def test_negative_count_rejected(self):
        with pytest.raises(ValueError):
            ParticleGenerator().generate(-1)

    def test_style_strings(self):
        particle = ParticleGenerator(random.Random(3)).generate(1)[0]
        style = particle.to_style()

        assert style["left"] == f"{particle.left}%"
        assert style["size"].endswith("px")
        assert style["duration"].endswith("s")
