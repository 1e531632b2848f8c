# geometry/hittable.py
from typing import TYPE_CHECKING, Optional

from raytracer.core.interval import Interval
from raytracer.core.ray import Ray
from raytracer.core.vector import Point3D, Vector3

if TYPE_CHECKING:
    from raytracer.materials.material import Material


class HitRecord:
    """
    Records details of a ray-object intersection.
    """
    __slots__ = ("p", "normal", "t", "front_face", "material")

    def __init__(self, p: Point3D = None, normal: Vector3 = None,
                 t: float = 0.0, front_face: bool = True,
                 material: Optional["Material"] = None):
        self.p = p              # Intersection point
        self.normal = normal    # Unit normal, always facing against the ray
        self.t = t              # Ray parameter at intersection
        self.front_face = front_face  # Whether the ray hit the outside
        self.material = material      # Shared with every object using it

    def set_face_normal(self, ray: Ray, outward_normal: Vector3):
        """
        Ensures that the normal always points against the ray.
        outward_normal is assumed to have unit length.
        """
        self.front_face = ray.direction.dot(outward_normal) < 0
        self.normal = outward_normal if self.front_face else -outward_normal

    def __repr__(self) -> str:
        return (f"HitRecord(p={self.p!r}, normal={self.normal!r}, t={self.t}, "
                f"front_face={self.front_face})")


class Hittable:
    """
    Abstract class for objects that can be hit by a ray.
    """
    def hit(self, ray: Ray, ray_t: Interval) -> Optional[HitRecord]:
        """
        Returns the hit record for the nearest intersection whose parameter
        lies strictly inside ray_t, or None.
        """
        raise NotImplementedError("hit() must be implemented by subclasses.")
