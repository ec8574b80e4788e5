"""
Tests for color conversion helpers.
"""

import pytest

from utils.colors import clamp_channel, hsl_to_rgb, rgb_to_hsl


@pytest.mark.parametrize("value,expected", [
    (-3, 0),
    (12.4, 12),
    (12.6, 13),
    (300, 255),
])
def test_clamp_channel(value, expected):
    assert clamp_channel(value) == expected


class TestHsl:

    @pytest.mark.parametrize("hsl,rgb", [
        ((0, 1.0, 0.5), (255, 0, 0)),
        ((120, 1.0, 0.5), (0, 255, 0)),
        ((240, 1.0, 0.5), (0, 0, 255)),
        ((0, 0.0, 1.0), (255, 255, 255)),
        ((360, 1.0, 0.5), (255, 0, 0)),
    ])
    def test_hsl_to_rgb(self, hsl, rgb):
        assert hsl_to_rgb(*hsl) == rgb

    def test_rgb_to_hsl_red(self):
        assert rgb_to_hsl(255, 0, 0) == pytest.approx((0.0, 1.0, 0.5))

    def test_rgb_to_hsl_gray(self):
        hue, saturation, lightness = rgb_to_hsl(128, 128, 128)

        assert hue == 0.0
        assert saturation == 0.0
        assert lightness == pytest.approx(128 / 255)
