# materials/material.py
from typing import Optional, Tuple

from raytracer.core.color import Color
from raytracer.core.ray import Ray
from raytracer.geometry.hittable import HitRecord

ScatterResult = Optional[Tuple[Ray, Color]]


class Material:
    """
    Abstract material class. Subclasses must implement scatter().
    """
    def scatter(self, ray_in: Ray, rec: HitRecord, rng) -> ScatterResult:
        """
        Computes the scattered ray and attenuation.
        Returns a tuple (scattered_ray, attenuation) or None if the ray is absorbed.
        """
        raise NotImplementedError("scatter() must be implemented by subclasses.")
