from raytracer.geometry.hittable import HitRecord, Hittable
from raytracer.geometry.sphere import Sphere
from raytracer.geometry.world import HittableList

__all__ = ["HitRecord", "Hittable", "Sphere", "HittableList"]
