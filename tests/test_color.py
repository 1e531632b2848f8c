"""Unit tests for Color, gamma conversion and 8-bit quantization.

Tests cover:
- linear_to_gamma is the inverse of squaring on [0, 1]
- Quantization clamps to [0, 0.999] before scaling by 256
- Arithmetic keeps the Color type
"""

import numpy as np
import pytest

from raytracer.core.color import BLACK, SKY_BLUE, WHITE, Color, linear_to_gamma
from raytracer.core.vector import Vector3


class TestGamma:

    def test_gamma_squared_recovers_linear(self):
        for x in np.linspace(0.0, 1.0, 101):
            assert linear_to_gamma(float(x)) ** 2 == pytest.approx(float(x), abs=1e-12)

    def test_non_positive_maps_to_zero(self):
        assert linear_to_gamma(0.0) == 0.0
        assert linear_to_gamma(-0.5) == 0.0

    def test_to_gamma(self):
        assert tuple(Color(0.25, 0.0, 1.0).to_gamma()) == pytest.approx((0.5, 0.0, 1.0))


class TestQuantization:

    def test_black_and_white(self):
        assert BLACK.to_rgb() == (0, 0, 0)
        assert WHITE.to_rgb() == (255, 255, 255)

    def test_midtone(self):
        # gamma(0.25) = 0.5 -> 128
        assert Color(0.25, 0.25, 0.25).to_rgb() == (128, 128, 128)

    def test_out_of_range_channels_are_clamped(self):
        assert Color(4.0, -1.0, 1.0).to_rgb() == (255, 0, 255)

    def test_channels_always_in_byte_range(self, rng):
        for _ in range(100):
            c = Color(*rng.uniform(-1.0, 2.0, size=3))
            assert all(0 <= v <= 255 for v in c.to_rgb())


class TestColorArithmetic:

    def test_tint_keeps_color_type(self):
        tinted = Color(0.5, 0.5, 0.5) * Color(1.0, 0.5, 0.0)
        assert isinstance(tinted, Color)
        assert tuple(tinted) == (0.5, 0.25, 0.0)

    def test_blend_keeps_color_type(self):
        blend = 0.5 * WHITE + 0.5 * SKY_BLUE
        assert isinstance(blend, Color)
        assert tuple(blend) == pytest.approx((0.75, 0.85, 1.0))

    def test_rgb_accessors(self):
        c = Color(0.1, 0.2, 0.3)
        assert (c.r, c.g, c.b) == (0.1, 0.2, 0.3)

    def test_color_is_a_vector(self):
        assert isinstance(Color(0, 0, 0), Vector3)
