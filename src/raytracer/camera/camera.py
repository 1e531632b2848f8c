# camera/camera.py
import math
from typing import List, Optional

from raytracer.config import CameraConfig, ConfigError
from raytracer.core.color import BLACK, SKY_BLUE, WHITE, Color
from raytracer.core.interval import Interval
from raytracer.core.ray import Ray
from raytracer.core.utils import degrees_to_radians, random_double, random_in_unit_disk
from raytracer.core.vector import NumericDomainError, Point3D, Vector3
from raytracer.geometry.hittable import Hittable

# Lower bound for scattered ray hits; keeps a ray from re-hitting the
# surface it just left because of floating point error.
SHADOW_ACNE_EPSILON = 0.001


class Camera:
    """
    A positionable camera with a thin lens.

    All viewport and lens geometry is derived from the configuration once in
    the constructor and never changes afterwards, so one camera can be shared
    by any number of independent pixel or scanline tasks.
    """
    def __init__(self, config: Optional[CameraConfig] = None, **params):
        config = config or CameraConfig()
        if params:
            config = config.replace(**params)
        self.config = config.validate()
        self._initialize()

    def _initialize(self):
        cfg = self.config
        self.image_width = cfg.image_width
        self.image_height = cfg.image_height
        self.pixel_samples_scale = 1.0 / cfg.samples_per_pixel
        self.center = Point3D(*cfg.look_from)

        # Viewport dimensions on the focus plane
        h = math.tan(degrees_to_radians(cfg.vfov) / 2)
        viewport_height = 2.0 * h * cfg.focus_dist
        # Use the real pixel ratio so the viewport matches the image exactly.
        viewport_width = viewport_height * (self.image_width / self.image_height)

        # Orthonormal camera basis
        self.w = (Point3D(*cfg.look_from) - Point3D(*cfg.look_at)).normalize()
        try:
            self.u = Vector3(*cfg.vup).cross(self.w).normalize()
        except NumericDomainError:
            raise ConfigError("vup must not be parallel to the viewing direction") from None
        self.v = self.w.cross(self.u)

        # Vectors across the horizontal and down the vertical viewport edges
        viewport_u = self.u * viewport_width
        viewport_v = -self.v * viewport_height

        self.pixel_delta_u = viewport_u / self.image_width
        self.pixel_delta_v = viewport_v / self.image_height

        viewport_upper_left = (self.center
                               - self.w * cfg.focus_dist
                               - viewport_u / 2
                               - viewport_v / 2)
        self.pixel00_loc = viewport_upper_left + (self.pixel_delta_u + self.pixel_delta_v) * 0.5

        defocus_radius = cfg.focus_dist * math.tan(degrees_to_radians(cfg.defocus_angle / 2))
        self.defocus_disk_u = self.u * defocus_radius
        self.defocus_disk_v = self.v * defocus_radius

    def get_ray(self, i: int, j: int, rng) -> Ray:
        """
        Generates a ray toward a random point inside pixel (i, j), starting
        from the camera center or a random point on the defocus disk.
        """
        offset_x = random_double(rng) - 0.5
        offset_y = random_double(rng) - 0.5
        pixel_sample = (self.pixel00_loc
                        + self.pixel_delta_u * (i + offset_x)
                        + self.pixel_delta_v * (j + offset_y))

        if self.config.defocus_angle <= 0:
            ray_origin = self.center
        else:
            ray_origin = self.defocus_disk_sample(rng)
        return Ray(ray_origin, pixel_sample - ray_origin)

    def defocus_disk_sample(self, rng) -> Point3D:
        p = random_in_unit_disk(rng)
        return self.center + self.defocus_disk_u * p.x + self.defocus_disk_v * p.y

    @staticmethod
    def background(ray: Ray) -> Color:
        """
        Sky gradient: white at the horizon blending to blue straight up.
        """
        unit_direction = ray.direction.normalize()
        a = 0.5 * (unit_direction.y + 1.0)
        return (1.0 - a) * WHITE + a * SKY_BLUE

    def ray_color(self, ray: Ray, depth: int, world: Hittable, rng) -> Color:
        """
        Returns the color seen along the ray, following at most depth
        scatter events.

        Written as a loop over (ray, remaining depth) with a running
        attenuation; equivalent to multiplying each attenuation into the
        color returned by the next bounce.
        """
        attenuation = Color(1.0, 1.0, 1.0)
        while depth > 0:
            rec = world.hit(ray, Interval(SHADOW_ACNE_EPSILON, math.inf))
            if rec is None:
                return attenuation * self.background(ray)

            scatter_result = rec.material.scatter(ray, rec, rng)
            if scatter_result is None:
                return BLACK  # Absorbed
            ray, color = scatter_result
            attenuation = attenuation * color
            depth -= 1

        # Out of bounces; no more light is gathered.
        return BLACK

    def sample_color(self, ray: Ray, world: Hittable, rng) -> Color:
        if self.config.max_depth == 0:
            # No bounce budget at all: only the sky is rendered.
            return self.background(ray)
        return self.ray_color(ray, self.config.max_depth, world, rng)

    def render_pixel(self, i: int, j: int, world: Hittable, rng) -> Color:
        """
        Averages samples_per_pixel stochastic samples of pixel (i, j).
        The result is linear, not yet gamma corrected.
        """
        pixel_color = Color(0.0, 0.0, 0.0)
        for _ in range(self.config.samples_per_pixel):
            ray = self.get_ray(i, j, rng)
            pixel_color = pixel_color + self.sample_color(ray, world, rng)
        return pixel_color * self.pixel_samples_scale

    def render_scanline(self, j: int, world: Hittable, rng) -> List[Color]:
        return [self.render_pixel(i, j, world, rng) for i in range(self.image_width)]
