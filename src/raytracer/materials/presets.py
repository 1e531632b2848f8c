# materials/presets.py
from raytracer.core.color import Color
from raytracer.materials.dielectric import Dielectric
from raytracer.materials.lambertian import Lambertian


class DielectricPresets:
    """Predefined dielectric materials."""

    @staticmethod
    def glass() -> Dielectric:
        return Dielectric(1.5)

    @staticmethod
    def air_bubble(surrounding: float = 1.5) -> Dielectric:
        # Air inside a medium of the given index, e.g. the hollow of a glass ball.
        return Dielectric(1.0 / surrounding)


class DiffusePresets:
    """Predefined diffuse surfaces."""

    @staticmethod
    def matte_gray() -> Lambertian:
        return Lambertian(Color(0.5, 0.5, 0.5))

    @staticmethod
    def ground() -> Lambertian:
        return Lambertian(Color(0.8, 0.8, 0.0))
