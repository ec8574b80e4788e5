"""
Actions accepted by the animation state machine.

Interrupt and Queue come from the builder; Tick comes from whatever
drives time (see engine.ticker).
"""

from dataclasses import dataclass, field
from typing import Tuple, Union

from models.keyframe import StyleKeyframe


@dataclass(frozen=True)
class Interrupt:
    """Replace whatever is running with these keyframes."""
    keyframes: Tuple[StyleKeyframe, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class Queue:
    """Run these keyframes after everything already queued."""
    keyframes: Tuple[StyleKeyframe, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class Tick:
    """Advance time by delta_ms."""
    delta_ms: float


Action = Union[Interrupt, Queue, Tick]
