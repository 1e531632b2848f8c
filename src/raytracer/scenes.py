"""Scene builders.

Each builder takes a random generator and returns the populated world plus
the camera settings that frame it. Spheres that look alike share one
material instance.
"""

import logging
from typing import Any, Callable, Dict, Tuple

from raytracer.config import ConfigError
from raytracer.core.color import Color
from raytracer.core.utils import random_double, random_vector
from raytracer.core.vector import Point3D
from raytracer.geometry.sphere import Sphere
from raytracer.geometry.world import HittableList
from raytracer.materials.dielectric import Dielectric
from raytracer.materials.lambertian import Lambertian
from raytracer.materials.metal import Metal
from raytracer.materials.presets import DielectricPresets, DiffusePresets

logger = logging.getLogger(__name__)

SceneResult = Tuple[HittableList, Dict[str, Any]]
SceneBuilder = Callable[[Any], SceneResult]


def two_spheres(rng) -> SceneResult:
    """A diffuse sphere resting on a large ground sphere."""
    world = HittableList()
    gray = DiffusePresets.matte_gray()
    world.add(Sphere(Point3D(0, 0, -1), 0.5, gray))
    world.add(Sphere(Point3D(0, -100.5, -1), 100, gray))
    return world, {"aspect_ratio": 16.0 / 9.0}


def materials(rng) -> SceneResult:
    """Ground, a diffuse center, a hollow glass sphere and a fuzzy metal one."""
    world = HittableList()
    material_ground = DiffusePresets.ground()
    material_center = Lambertian(Color(0.1, 0.2, 0.5))
    material_left = DielectricPresets.glass()
    material_bubble = DielectricPresets.air_bubble(1.5)
    material_right = Metal(Color(0.8, 0.6, 0.2), fuzz=1.0)

    world.add(Sphere(Point3D(0.0, -100.5, -1.0), 100.0, material_ground))
    world.add(Sphere(Point3D(0.0, 0.0, -1.2), 0.5, material_center))
    world.add(Sphere(Point3D(-1.0, 0.0, -1.0), 0.5, material_left))
    world.add(Sphere(Point3D(-1.0, 0.0, -1.0), 0.4, material_bubble))
    world.add(Sphere(Point3D(1.0, 0.0, -1.0), 0.5, material_right))

    return world, {
        "aspect_ratio": 16.0 / 9.0,
        "vfov": 20.0,
        "look_from": (-2.0, 2.0, 1.0),
        "look_at": (0.0, 0.0, -1.0),
        "defocus_angle": 10.0,
        "focus_dist": 3.4,
    }


def random_spheres(rng) -> SceneResult:
    """A field of small random spheres around three large ones."""
    world = HittableList()
    world.add(Sphere(Point3D(0, -1000, 0), 1000, Lambertian(Color(0.5, 0.5, 0.5))))

    glass = DielectricPresets.glass()
    for a in range(-11, 11):
        for b in range(-11, 11):
            choose_mat = random_double(rng)
            center = Point3D(a + 0.9 * random_double(rng), 0.2, b + 0.9 * random_double(rng))
            if (center - Point3D(4, 0.2, 0)).length() <= 0.9:
                continue

            if choose_mat < 0.8:
                albedo = random_vector(rng) * random_vector(rng)
                sphere_material = Lambertian(albedo)
            elif choose_mat < 0.95:
                albedo = random_vector(rng, 0.5, 1.0)
                sphere_material = Metal(albedo, fuzz=random_double(rng, 0.0, 0.5))
            else:
                sphere_material = glass
            world.add(Sphere(center, 0.2, sphere_material))

    world.add(Sphere(Point3D(0, 1, 0), 1.0, glass))
    world.add(Sphere(Point3D(-4, 1, 0), 1.0, Lambertian(Color(0.4, 0.2, 0.1))))
    world.add(Sphere(Point3D(4, 1, 0), 1.0, Metal(Color(0.7, 0.6, 0.5), fuzz=0.0)))

    return world, {
        "aspect_ratio": 16.0 / 9.0,
        "vfov": 20.0,
        "look_from": (13.0, 2.0, 3.0),
        "look_at": (0.0, 0.0, 0.0),
        "defocus_angle": 0.6,
        "focus_dist": 10.0,
    }


SCENES: Dict[str, SceneBuilder] = {
    "two_spheres": two_spheres,
    "materials": materials,
    "random_spheres": random_spheres,
}


def build_scene(name: str, rng) -> SceneResult:
    try:
        builder = SCENES[name]
    except KeyError:
        raise ConfigError(f"unknown scene {name!r}, expected one of {sorted(SCENES)}") from None
    world, camera_settings = builder(rng)
    logger.info("Built scene %r with %d objects", name, len(world))
    return world, camera_settings
