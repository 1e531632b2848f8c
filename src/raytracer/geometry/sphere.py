# geometry/sphere.py
import math
from typing import TYPE_CHECKING, Optional

from raytracer.core.interval import Interval
from raytracer.core.ray import Ray
from raytracer.core.vector import Point3D
from raytracer.geometry.hittable import HitRecord, Hittable

if TYPE_CHECKING:
    from raytracer.materials.material import Material


class Sphere(Hittable):
    """
    Represents a sphere defined by its center, radius, and material.
    """
    def __init__(self, center: Point3D, radius: float, material: "Material"):
        self.center = center
        self.radius = max(0.0, float(radius))
        self.material = material

    def hit(self, ray: Ray, ray_t: Interval) -> Optional[HitRecord]:
        # A zero radius sphere has no surface to hit.
        if self.radius == 0:
            return None

        oc =ray.origin - self.center
        a = ray.direction.length_squared()
        half_b = oc.dot(ray.direction)
        c = oc.length_squared() - self.radius * self.radius
        discriminant = half_b * half_b - a * c

        if discriminant < 0:
            return None

        sqrtd = math.sqrt(discriminant)
        # Find the nearest root that lies in the acceptable range
        root = (-half_b - sqrtd) / a
        if not ray_t.surrounds(root):
            root = (-half_b + sqrtd) / a
            if not ray_t.surrounds(root):
                return None

        rec = HitRecord(t=root, material=self.material)
        rec.p = ray.at(root)
        outward_normal = (rec.p - self.center) / self.radius
        rec.set_face_normal(ray, outward_normal)
        return rec

    def __repr__(self) -> str:
        return f"Sphere(center={self.center!r}, radius={self.radius}, material={self.material!r})"
