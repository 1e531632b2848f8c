"""Vector algebra, rays, intervals, colors and sampling helpers."""

from raytracer.core.color import BLACK, INTENSITY, SKY_BLUE, WHITE, Color, linear_to_gamma
from raytracer.core.interval import EMPTY, UNIVERSE, Interval
from raytracer.core.ray import Ray
from raytracer.core.utils import (
    degrees_to_radians,
    make_rng,
    random_double,
    random_in_unit_disk,
    random_in_unit_sphere,
    random_unit_vector,
    random_vector,
)
from raytracer.core.vector import NumericDomainError, Point3D, Vector3, reflect, refract

__all__ = [
    "Vector3",
    "Point3D",
    "NumericDomainError",
    "reflect",
    "refract",
    "Ray",
    "Interval",
    "EMPTY",
    "UNIVERSE",
    "Color",
    "linear_to_gamma",
    "INTENSITY",
    "BLACK",
    "WHITE",
    "SKY_BLUE",
    "make_rng",
    "degrees_to_radians",
    "random_double",
    "random_vector",
    "random_in_unit_sphere",
    "random_unit_vector",
    "random_in_unit_disk",
]
