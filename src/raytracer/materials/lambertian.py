# materials/lambertian.py
from raytracer.core.color import Color
from raytracer.core.ray import Ray
from raytracer.core.utils import random_unit_vector
from raytracer.geometry.hittable import HitRecord
from raytracer.materials.material import Material, ScatterResult


class Lambertian(Material):
    """
    Lambertian diffuse material. Always scatters and attenuates by its albedo.
    """

    def __init__(self, albedo: Color):
        self.albedo = Color(*albedo)

    def scatter(self, ray_in: Ray, rec: HitRecord, rng) -> ScatterResult:
        # Pick a random scatter direction by adding a random unit vector to the normal.
        scatter_direction = rec.normal + random_unit_vector(rng)

        # The random vector can cancel the normal; fall back to the normal itself.
        if scatter_direction.near_zero():
            scatter_direction = rec.normal

        return Ray(rec.p, scatter_direction), self.albedo

    def __repr__(self) -> str:
        return f"Lambertian(albedo={self.albedo!r})"
