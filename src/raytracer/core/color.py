# core/color.py
import math
from typing import Tuple

from raytracer.core.interval import Interval
from raytracer.core.vector import Vector3

# Channels are clamped here before scaling to [0, 255].
INTENSITY = Interval(0.000, 0.999)


def linear_to_gamma(linear_component: float) -> float:
    """
    Converts a linear channel value to gamma 2 space.
    """
    if linear_component > 0:
        return math.sqrt(linear_component)
    return 0.0


class Color(Vector3):
    """
    An RGB color with linear channels stored in x, y and z.
    Arithmetic keeps the Color type so attenuation chains stay colors.
    """
    __slots__ = ()

    @property
    def r(self) -> float:
        return self.x

    @property
    def g(self) -> float:
        return self.y

    @property
    def b(self) -> float:
        return self.z

    def to_gamma(self) -> "Color":
        return Color(linear_to_gamma(self.x), linear_to_gamma(self.y), linear_to_gamma(self.z))

    def to_rgb(self) -> Tuple[int, int, int]:
        """
        Gamma corrects, clamps and quantizes the color to 8-bit channels.
        """
        g = self.to_gamma()
        return (int(256 * INTENSITY.clamp(g.x)),
                int(256 * INTENSITY.clamp(g.y)),
                int(256 * INTENSITY.clamp(g.z)))


BLACK = Color(0.0, 0.0, 0.0)
WHITE = Color(1.0, 1.0, 1.0)
SKY_BLUE = Color(0.5, 0.7, 1.0)
