"""Pytest configuration for raytracer tests.

Provides shared fixtures: a seeded numpy generator, a generator that replays
fixed values so scattering decisions can be forced, and the small scene used
by the end-to-end tests.
"""

import os

import numpy as np
import pytest

# pygame must never try to open a real window during tests.
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")


class SequenceRng:
    """Generator stand-in that returns queued values from random()."""

    def __init__(self, values):
        self._values = list(values)
        self._index = 0

    def random(self):
        if self._index >= len(self._values):
            raise AssertionError("SequenceRng ran out of values")
        value = self._values[self._index]
        self._index += 1
        return value

    def uniform(self, low=0.0, high=1.0):
        return low + (high - low) * self.random()

    @property
    def consumed(self):
        return self._index


@pytest.fixture
def rng():
    """A seeded generator so stochastic tests are reproducible."""
    return np.random.default_rng(42)


@pytest.fixture
def sequence_rng():
    """Factory for generators that replay the given values."""
    return SequenceRng


@pytest.fixture
def two_sphere_world():
    """Gray diffuse sphere over a ground sphere."""
    from raytracer.scenes import two_spheres

    world, _ = two_spheres(None)
    return world
