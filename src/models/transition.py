"""
Transition Models

Defines easing configuration for duration-based keyframes and the easing
functions that shape interpolation progress.
"""

import math
from dataclasses import dataclass, field
from typing import Callable, Dict

EaseFunction = Callable[[float], float]

DEFAULT_DURATION_MS = 350.0


# === Easing Functions ===
# Every easing maps 0.0 -> 0.0 and 1.0 -> 1.0

def ease_linear(t: float) -> float:
    """
    Linear easing (constant speed)

    Args:
        t: Progress (0.0 = start, 1.0 = end)

    Returns:
        Eased progress (0.0 to 1.0)
    """
    return t


def ease_in_sine(t: float) -> float:
    """Sinusoidal ease-in"""
    return 1 - math.cos(t * math.pi / 2)


def ease_out_sine(t: float) -> float:
    """Sinusoidal ease-out"""
    return math.sin(t * math.pi / 2)


def ease_in_out_sine(t: float) -> float:
    """Sinusoidal ease-in-out (default for duration keyframes)"""
    return 0.5 - math.cos(math.pi * t) / 2


def ease_in_quad(t: float) -> float:
    """Quadratic ease-in (slow start → fast end)"""
    return t * t


def ease_out_quad(t: float) -> float:
    """Quadratic ease-out (fast start → slow end)"""
    return 1 - (1 - t) * (1 - t)


def ease_in_out_quad(t: float) -> float:
    """Quadratic ease-in-out (slow start → fast middle → slow end)"""
    return 2 * t * t if t < 0.5 else 1 - (-2 * t + 2) ** 2 / 2


def ease_in_cubic(t: float) -> float:
    """Cubic ease-in (very slow start)"""
    return t * t * t


def ease_out_cubic(t: float) -> float:
    """Cubic ease-out (very slow end)"""
    return 1 - (1 - t) ** 3


def ease_in_out_cubic(t: float) -> float:
    """Cubic ease-in-out (very smooth acceleration/deceleration)"""
    return 4 * t ** 3 if t < 0.5 else 1 - (-2 * t + 2) ** 3 / 2


def ease_in_quart(t: float) -> float:
    return t ** 4


def ease_out_quart(t: float) -> float:
    return 1 - (1 - t) ** 4


def ease_in_out_quart(t: float) -> float:
    return 8 * t ** 4 if t < 0.5 else 1 - (-2 * t + 2) ** 4 / 2


EASINGS: Dict[str, EaseFunction] = {
    "linear": ease_linear,
    "sine_in": ease_in_sine,
    "sine_out": ease_out_sine,
    "sine_in_out": ease_in_out_sine,
    "quad_in": ease_in_quad,
    "quad_out": ease_out_quad,
    "quad_in_out": ease_in_out_quad,
    "cubic_in": ease_in_cubic,
    "cubic_out": ease_out_cubic,
    "cubic_in_out": ease_in_out_cubic,
    "quart_in": ease_in_quart,
    "quart_out": ease_out_quart,
    "quart_in_out": ease_in_out_quart,
}


def easing_by_name(name: str) -> EaseFunction:
    """
    Look up an easing function by its config name (e.g. "quad_in_out").

    Raises:
        ValueError: name is not a known easing
    """
    try:
        return EASINGS[name.lower()]
    except KeyError:
        raise ValueError(f"Unknown easing: {name}")


@dataclass(frozen=True)
class EasingConfig:
    """
    Configuration for a duration-mode property

    Attributes:
        duration_ms: Time the property needs to reach its target (after delay)
        ease: Easing function (t: 0.0-1.0) → (progress: 0.0-1.0)

    Examples:
        # Default: 350ms sinusoidal in-out
        default = EasingConfig()

        # Half a second, quadratic
        quick = EasingConfig(duration_ms=500, ease=ease_in_out_quad)
    """
    duration_ms: float = DEFAULT_DURATION_MS
    ease: EaseFunction = field(default=ease_in_out_sine, compare=False)

    def __repr__(self):
        return f"EasingConfig({self.duration_ms}ms, {getattr(self.ease, '__name__', 'ease')})"
