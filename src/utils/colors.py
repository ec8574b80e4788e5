"""
Color conversion utilities

Pure functions for color space conversions used by the color property
constructors and the renderer.
"""

from typing import Tuple


def clamp_channel(value: float) -> int:
    """Round and clamp an RGB channel to 0-255."""
    return int(min(255, max(0, round(value))))


def hsl_to_rgb(hue: float, saturation: float, lightness: float) -> Tuple[int, int, int]:
    """
    Convert HSL to RGB (0-255)

    Args:
        hue: Hue in degrees (wraps at 360)
        saturation: 0.0-1.0
        lightness: 0.0-1.0

    Returns:
        (r, g, b) tuple with values 0-255

    Example:
        r, g, b = hsl_to_rgb(0, 1.0, 0.5)    # Red
        r, g, b = hsl_to_rgb(120, 1.0, 0.5)  # Green
        r, g, b = hsl_to_rgb(0, 0.0, 1.0)    # White
    """
    hue = hue % 360
    saturation = min(1.0, max(0.0, saturation))
    lightness = min(1.0, max(0.0, lightness))

    chroma = (1 - abs(2 * lightness - 1)) * saturation
    x = chroma * (1 - abs((hue / 60) % 2 - 1))
    m = lightness - chroma / 2

    if hue < 60:
        r, g, b = chroma, x, 0.0
    elif hue < 120:
        r, g, b = x, chroma, 0.0
    elif hue < 180:
        r, g, b = 0.0, chroma, x
    elif hue < 240:
        r, g, b = 0.0, x, chroma
    elif hue < 300:
        r, g, b = x, 0.0, chroma
    else:
        r, g, b = chroma, 0.0, x

    return (
        clamp_channel((r + m) * 255),
        clamp_channel((g + m) * 255),
        clamp_channel((b + m) * 255),
    )


def rgb_to_hsl(r: int, g: int, b: int) -> Tuple[float, float, float]:
    """
    Convert RGB (0-255) to HSL

    Returns 0 hue and 0 saturation for grays.

    Args:
        r: Red value (0-255)
        g: Green value (0-255)
        b: Blue value (0-255)

    Returns:
        (hue 0-360, saturation 0.0-1.0, lightness 0.0-1.0)

    Example:
        rgb_to_hsl(255, 0, 0)      # (0.0, 1.0, 0.5)
        rgb_to_hsl(255, 255, 255)  # (0.0, 0.0, 1.0)
    """
    r_norm, g_norm, b_norm = r / 255.0, g / 255.0, b / 255.0
    max_c = max(r_norm, g_norm, b_norm)
    min_c = min(r_norm, g_norm, b_norm)
    delta = max_c - min_c
    lightness = (max_c + min_c) / 2

    if delta == 0:
        return 0.0, 0.0, lightness

    saturation = delta / (1 - abs(2 * lightness - 1))

    if max_c == r_norm:
        hue = 60 * (((g_norm - b_norm) / delta) % 6)
    elif max_c == g_norm:
        hue = 60 * (((b_norm - r_norm) / delta) + 2)
    else:
        hue = 60 * (((r_norm - g_norm) / delta) + 4)

    return hue % 360, saturation, lightness

