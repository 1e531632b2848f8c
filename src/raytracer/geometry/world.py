# geometry/world.py
from typing import Iterable, List, Optional

from raytracer.core.interval import Interval
from raytracer.core.ray import Ray
from raytracer.geometry.hittable import HitRecord, Hittable


class HittableList(Hittable):
    """
    An ordered list of Hittable objects. hit() scans every object and
    returns the closest intersection.
    """
    def __init__(self, objects: Iterable[Hittable] = ()):
        self.objects: List[Hittable] = list(objects)

    def add(self, obj: Hittable):
        self.objects.append(obj)

    def clear(self):
        self.objects.clear()

    def __len__(self) -> int:
        return len(self.objects)

    def __iter__(self):
        return iter(self.objects)

    def hit(self, ray: Ray, ray_t: Interval) -> Optional[HitRecord]:
        hit_record = None
        closest_so_far = ray_t.max

        for obj in self.objects:
            rec = obj.hit(ray, Interval(ray_t.min, closest_so_far))
            if rec is not None:
                closest_so_far = rec.t
                hit_record = rec

        return hit_record
