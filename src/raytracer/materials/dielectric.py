# materials/dielectric.py
import math

from raytracer.core.color import Color
from raytracer.core.ray import Ray
from raytracer.core.utils import random_double
from raytracer.core.vector import reflect, refract
from raytracer.geometry.hittable import HitRecord
from raytracer.materials.material import Material, ScatterResult


class Dielectric(Material):
    """
    Clear refractive material such as glass or water.

    refraction_index is the index of the material over the index of the
    enclosing medium, so a value below 1 models e.g. an air bubble in water.
    """
    def __init__(self, refraction_index: float):
        self.refraction_index = refraction_index

    def scatter(self, ray_in: Ray, rec: HitRecord, rng) -> ScatterResult:
        attenuation = Color(1.0, 1.0, 1.0)  # Glass doesn't absorb light

        # Determine if we're entering or exiting the material
        ri = 1.0 / self.refraction_index if rec.front_face else self.refraction_index

        unit_direction = ray_in.direction.normalize()
        cos_theta = min((-unit_direction).dot(rec.normal), 1.0)
        sin_theta = math.sqrt(max(0.0, 1.0 - cos_theta * cos_theta))

        if must_reflect(ri, sin_theta) or reflectance(cos_theta, ri) > random_double(rng):
            direction = reflect(unit_direction, rec.normal)
        else:
            direction = refract(unit_direction, rec.normal, ri)

        return Ray(rec.p, direction), attenuation

    def __repr__(self) -> str:
        return f"Dielectric(refraction_index={self.refraction_index})"


def must_reflect(refraction_ratio: float, sin_theta: float) -> bool:
    """
    True when Snell's law has no solution (total internal reflection).
    """
    return refraction_ratio * sin_theta > 1.0


def reflectance(cosine: float, refraction_ratio: float) -> float:
    """
    Schlick's approximation for angle dependent reflectance.
    """
    r0 = (1.0 - refraction_ratio) / (1.0 + refraction_ratio)
    r0 = r0 * r0
    return r0 + (1.0 - r0) * math.pow((1.0 - cosine), 5)
