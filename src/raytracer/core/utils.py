# core/utils.py
import math
from typing import Optional

import numpy as np

from raytracer.core.vector import Vector3


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """
    Creates the random generator threaded through a render.
    """
    return np.random.default_rng(seed)


def degrees_to_radians(degrees: float) -> float:
    return degrees * math.pi / 180.0


def random_double(rng, low: float = 0.0, high: float = 1.0) -> float:
    """
    Returns a random float in [low, high).
    """
    return low + (high - low) * float(rng.random())


def random_vector(rng, low: float = 0.0, high: float = 1.0) -> Vector3:
    return Vector3(random_double(rng, low, high),
                   random_double(rng, low, high),
                   random_double(rng, low, high))


def random_in_unit_sphere(rng) -> Vector3:
    """
    Returns a random point inside a unit sphere.
    """
    while True:
        p = random_vector(rng, -1.0, 1.0)
        if p.length_squared() < 1.0:
            return p


def random_unit_vector(rng) -> Vector3:
    """
    Returns a random unit vector by normalizing a point inside the unit sphere.
    """
    while True:
        p = random_in_unit_sphere(rng)
        # Points this close to the origin lose precision once normalized.
        if p.length_squared() > 1e-160:
            return p.normalize()


def random_in_unit_disk(rng) -> Vector3:
    """
    Returns a random point in the unit disk on the z = 0 plane.
    """
    while True:
        p = Vector3(random_double(rng, -1.0, 1.0), random_double(rng, -1.0, 1.0), 0.0)
        if p.length_squared() < 1.0:
            return p
