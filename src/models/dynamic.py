"""
Dynamic value models

A Dynamic value describes an in-flight property channel: where it is going
(Target), how it gets there over time (spring physics or an EasingConfig),
and the integrator state the spring carries between ticks.
"""

from dataclasses import dataclass, field, replace
from typing import Optional

from models.enums import TargetMode, SpringPreset
from models.transition import EasingConfig


@dataclass(frozen=True)
class Target:
    """
    Animation intent as a pure function of the starting value.

    Calling a Target with (from_value, t) returns the value at normalized
    progress t. For duration mode t is the eased progress in [0, 1]; for
    spring mode t is the spring position, which may overshoot 1.
    """
    mode: TargetMode
    amount: float = 0.0

    def __call__(self, from_value: float, t: float) -> float:
        if self.mode == TargetMode.TO:
            return from_value + (self.amount - from_value) * t
        if self.mode == TargetMode.ADD:
            return from_value + self.amount * t
        if self.mode == TargetMode.MINUS:
            return from_value - self.amount * t
        return from_value

    def span(self, from_value: float) -> float:
        """Distance covered between t=0 and t=1 when starting at from_value."""
        return self(from_value, 1.0) - self(from_value, 0.0)

    def __repr__(self):
        if self.mode == TargetMode.STAY:
            return "stay"
        return f"{self.mode.name.lower()} {self.amount:g}"


@dataclass(frozen=True)
class SpringState:
    """
    Damped oscillator in normalized space.

    position 0 means "not yet moved", destination 1 means "arrived"; the
    real property value is produced by the Target.
    """
    stiffness: float = SpringPreset.NO_WOBBLE.stiffness
    damping: float = SpringPreset.NO_WOBBLE.damping
    destination: float = 1.0
    position: float = 0.0
    velocity: float = 0.0

    @classmethod
    def from_preset(cls, preset: SpringPreset) -> 'SpringState':
        return cls(stiffness=preset.stiffness, damping=preset.damping)

    def reset(self, velocity: float = 0.0) -> 'SpringState':
        """Same physics, back at the start (optionally already moving)."""
        return replace(self, position=0.0, velocity=velocity)


@dataclass(frozen=True)
class Dynamic:
    """
    One animated channel value.

    easing is None for spring mode; otherwise the channel interpolates over
    easing.duration_ms and the spring is ignored.
    """
    target: Target
    spring: SpringState = field(default_factory=SpringState)
    easing: Optional[EasingConfig] = None

    @property
    def is_spring(self) -> bool:
        return self.easing is None

    def with_spring(self, spring: SpringState) -> 'Dynamic':
        return replace(self, spring=spring)


def to(value: float) -> Dynamic:
    """Move to an absolute value."""
    return Dynamic(Target(TargetMode.TO, float(value)))


def add(value: float) -> Dynamic:
    """Move by +value relative to the current value."""
    return Dynamic(Target(TargetMode.ADD, float(value)))


def minus(value: float) -> Dynamic:
    """Move by -value relative to the current value."""
    return Dynamic(Target(TargetMode.MINUS, float(value)))


def stay() -> Dynamic:
    """Hold the current value for the length of the keyframe."""
    return Dynamic(Target(TargetMode.STAY))
