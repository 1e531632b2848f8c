"""Unit tests for the Metal material.

Tests cover:
- Perfect specular reflection (fuzz=0)
- Fuzzy reflection and fuzz clamping
- Ray absorption exactly when the scattered ray points into the surface
- Attenuation equals albedo
"""

import copy
import math

import pytest

from raytracer.core.color import Color
from raytracer.core.ray import Ray
from raytracer.core.utils import make_rng, random_unit_vector
from raytracer.core.vector import Point3D, Vector3, reflect
from raytracer.geometry.hittable import HitRecord
from raytracer.materials.metal import Metal

UP = Vector3(0, 1, 0)


def make_hit(material):
    return HitRecord(p=Point3D(0, 0, 0), normal=UP, t=1.0, front_face=True, material=material)


class TestPerfectReflection:

    def test_normal_incidence(self, rng):
        metal = Metal(Color(1, 1, 1), fuzz=0.0)
        scattered, attenuation = metal.scatter(Ray(Point3D(0, 1, 0), Vector3(0, -1, 0)),
                                               make_hit(metal), rng)
        assert tuple(scattered.direction) == pytest.approx((0.0, 1.0, 0.0))
        assert attenuation == Color(1, 1, 1)

    def test_45_degrees(self, rng):
        metal = Metal(Color(1, 1, 1), fuzz=0.0)
        scattered, _ = metal.scatter(Ray(Point3D(-1, 1, 0), Vector3(1, -1, 0)),
                                     make_hit(metal), rng)
        s = 1.0 / math.sqrt(2.0)
        assert tuple(scattered.direction) == pytest.approx((s, s, 0.0))

    def test_scattered_ray_starts_at_hit_point(self, rng):
        metal = Metal(Color(1, 1, 1))
        rec = make_hit(metal)
        scattered, _ = metal.scatter(Ray(Point3D(0, 1, 0), Vector3(0, -1, 0)), rec, rng)
        assert scattered.origin == rec.p


class TestFuzz:

    def test_fuzz_is_clamped(self):
        assert Metal(Color(1, 1, 1), fuzz=1.5).fuzz == 1.0
        assert Metal(Color(1, 1, 1), fuzz=-0.2).fuzz == 0.0
        assert Metal(Color(1, 1, 1), fuzz=0.3).fuzz == 0.3

    def test_fuzz_perturbs_within_radius(self, rng):
        metal = Metal(Color(1, 1, 1), fuzz=0.2)
        ray = Ray(Point3D(0, 1, 0), Vector3(0, -1, 0))
        for _ in range(100):
            result = metal.scatter(ray, make_hit(metal), rng)
            assert result is not None  # Cannot leave the hemisphere at this fuzz
            scattered, _ = result
            assert (scattered.direction - UP).length() == pytest.approx(0.2)

    def test_absorbed_when_pushed_below_surface(self, sequence_rng):
        metal = Metal(Color(0.8, 0.8, 0.8), fuzz=1.0)
        # Grazing incidence; the random unit vector (0, -1, 0) pushes it under.
        rng = sequence_rng([0.5, 0.25, 0.5])
        ray = Ray(Point3D(-1, 0.1, 0), Vector3(1, -0.1, 0))
        assert metal.scatter(ray, make_hit(metal), rng) is None


class TestAbsorptionRule:
    """scatter() returns None if and only if dot(direction, normal) <= 0."""

    def test_none_iff_direction_below_surface(self):
        metal = Metal(Color(0.9, 0.9, 0.9), fuzz=1.0)
        rec = make_hit(metal)
        ray = Ray(Point3D(-1, 0.3, 0), Vector3(1, -0.3, 0))
        reflected = reflect(ray.direction.normalize(), UP)

        rng = make_rng(3)
        absorbed = scattered_count = 0
        for _ in range(300):
            shadow = copy.deepcopy(rng)
            expected = reflected + random_unit_vector(shadow) * metal.fuzz
            result = metal.scatter(ray, rec, rng)
            if expected.dot(UP) <= 0:
                assert result is None
                absorbed += 1
            else:
                assert result is not None
                assert tuple(result[0].direction) == pytest.approx(tuple(expected))
                assert result[1] == metal.albedo
                scattered_count += 1
        assert absorbed > 0 and scattered_count > 0
