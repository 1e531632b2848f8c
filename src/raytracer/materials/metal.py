# materials/metal.py
from raytracer.core.color import Color
from raytracer.core.ray import Ray
from raytracer.core.utils import random_unit_vector
from raytracer.core.vector import reflect
from raytracer.geometry.hittable import HitRecord
from raytracer.materials.material import Material, ScatterResult


class Metal(Material):
    """
    Metal material with reflective properties.

    fuzz blurs the reflection by perturbing it with a random vector of that
    length; it is clamped to [0, 1].
    """
    def __init__(self, albedo: Color, fuzz: float = 0.0):
        self.albedo = Color(*albedo)
        self.fuzz = min(max(fuzz, 0.0), 1.0)

    def scatter(self, ray_in: Ray, rec: HitRecord, rng) -> ScatterResult:
        reflected = reflect(ray_in.direction.normalize(), rec.normal)
        if self.fuzz > 0:
            reflected = reflected + random_unit_vector(rng) * self.fuzz
        scattered = Ray(rec.p, reflected)

        if scattered.direction.dot(rec.normal) > 0:
            return scattered, self.albedo
        return None  # Absorb the ray if it scatters below the surface

    def __repr__(self) -> str:
        return f"Metal(albedo={self.albedo!r}, fuzz={self.fuzz})"
