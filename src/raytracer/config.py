"""Camera and render configuration.

A CameraConfig is a flat, immutable parameter set. The camera derives all of
its geometry from it once, at construction.
"""

import dataclasses
from dataclasses import dataclass
from typing import Tuple

Triple = Tuple[float, float, float]


class ConfigError(ValueError):
    """Raised for invalid render configuration."""


# Quality presets: samples per pixel, bounce limit and a resolution scale
# applied to the configured image width.
QUALITY_LEVELS = {
    "interactive": {"samples": 1, "bounces": 2, "scale": 0.5},
    "balanced": {"samples": 10, "bounces": 10, "scale": 1.0},
    "high_quality": {"samples": 100, "bounces": 50, "scale": 1.0},
}


@dataclass(frozen=True)
class CameraConfig:
    aspect_ratio: float = 1.0
    image_width: int = 100
    samples_per_pixel: int = 10
    max_depth: int = 10
    vfov: float = 90.0  # Vertical field of view in degrees
    look_from: Triple = (0.0, 0.0, 0.0)
    look_at: Triple = (0.0, 0.0, -1.0)
    vup: Triple = (0.0, 1.0, 0.0)
    defocus_angle: float = 0.0  # Cone angle through each pixel, in degrees
    focus_dist: float = 10.0  # Distance from look_from to the plane in focus

    @property
    def image_height(self) -> int:
        return max(1, int(self.image_width / self.aspect_ratio))

    def validate(self) -> "CameraConfig":
        """
        Checks every parameter and returns self, raising ConfigError otherwise.
        """
        if self.image_width < 1:
            raise ConfigError(f"image_width must be at least 1, got {self.image_width}")
        if self.aspect_ratio <= 0:
            raise ConfigError(f"aspect_ratio must be positive, got {self.aspect_ratio}")
        if self.samples_per_pixel < 1:
            raise ConfigError(f"samples_per_pixel must be at least 1, got {self.samples_per_pixel}")
        if self.max_depth < 0:
            raise ConfigError(f"max_depth must not be negative, got {self.max_depth}")
        if not 0 < self.vfov < 180:
            raise ConfigError(f"vfov must be in (0, 180) degrees, got {self.vfov}")
        if self.defocus_angle < 0:
            raise ConfigError(f"defocus_angle must not be negative, got {self.defocus_angle}")
        if self.focus_dist <= 0:
            raise ConfigError(f"focus_dist must be positive, got {self.focus_dist}")
        if tuple(self.look_from) == tuple(self.look_at):
            raise ConfigError("look_from and look_at must differ")
        return self

    def replace(self, **changes) -> "CameraConfig":
        return dataclasses.replace(self, **changes)

    def with_quality(self, name: str) -> "CameraConfig":
        """
        Returns a copy with the samples, bounces and resolution of a quality
        preset. The base config is validated first so an invalid width is not
        scaled into a valid one.
        """
        try:
            quality = QUALITY_LEVELS[name]
        except KeyError:
            raise ConfigError(
                f"unknown quality {name!r}, expected one of {sorted(QUALITY_LEVELS)}"
            ) from None
        self.validate()
        return self.replace(
            samples_per_pixel=quality["samples"],
            max_depth=quality["bounces"],
            image_width=max(1, int(self.image_width * quality["scale"])),
        )
