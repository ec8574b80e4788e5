"""
Duration/easing interpolation

Maps time spent in a keyframe (after its delay) to eased progress.
"""

from models.transition import EaseFunction, EasingConfig


def progress(elapsed_ms: float, duration_ms: float, ease: EaseFunction) -> float:
    """
    Eased progress for a channel.

    Args:
        elapsed_ms: Time since the keyframe's delay ran out
        duration_ms: Allotted duration; zero or less completes immediately
        ease: Easing function with ease(0) == 0 and ease(1) == 1

    Returns:
        ease(clamp(elapsed / duration, 0, 1))
    """
    if duration_ms <= 0:
        return ease(1.0)
    fraction = min(1.0, max(0.0, elapsed_ms / duration_ms))
    return ease(fraction)


def is_complete(elapsed_ms: float, duration_ms: float) -> bool:
    return elapsed_ms >= duration_ms


def eased(elapsed_ms: float, easing: EasingConfig) -> float:
    """progress() for an EasingConfig."""
    return progress(elapsed_ms, easing.duration_ms, easing.ease)
