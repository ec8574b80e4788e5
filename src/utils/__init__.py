"""
Utility functions for the style animation engine
"""

from .colors import (
    clamp_channel,
    hsl_to_rgb,
    rgb_to_hsl,
)

__all__ = [
    'clamp_channel',
    'hsl_to_rgb',
    'rgb_to_hsl',
]
