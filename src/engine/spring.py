"""
Spring integrator

Semi-implicit Euler integration of a damped oscillator in normalized space
(see models.dynamic.SpringState). Time is given in milliseconds; the
physics runs in seconds so presets keep their usual stiffness/damping
numbers.
"""

from dataclasses import dataclass, replace

from models.dynamic import SpringState
from models.enums import LogCategory
from utils.logger import get_logger

log = get_logger().for_category(LogCategory.SPRING)

@dataclass(frozen=True)
class IntegratorSettings:
    """
    Attributes:
        sub_step_ms: Fixed integration step; a tick's delta is consumed in these
        position_tolerance: |destination - position| below this counts as arrived
        velocity_tolerance: |velocity| below this counts as at rest
    """
    sub_step_ms: float = 1.0
    position_tolerance: float = 0.005
    velocity_tolerance: float = 0.05


DEFAULT_SETTINGS = IntegratorSettings()


def arrived(spring: SpringState, settings: IntegratorSettings = DEFAULT_SETTINGS) -> bool:
    """True once the spring sits at its destination and has stopped moving."""
    return (
        abs(spring.destination - spring.position) < settings.position_tolerance
        and abs(spring.velocity) < settings.velocity_tolerance
    )


def _advance(spring: SpringState, h: float) -> SpringState:
    """One semi-implicit Euler step of h seconds."""
    force = -spring.stiffness * (spring.position - spring.destination)
    damper = -spring.damping * spring.velocity
    velocity = spring.velocity + h * (force + damper)
    position = spring.position + h * velocity
    return replace(spring, position=position, velocity=velocity)


def step(
    spring: SpringState,
    dt_ms: float,
    settings: IntegratorSettings = DEFAULT_SETTINGS,
) -> SpringState:
    """
    Advance the spring by dt_ms.

    The delta is consumed in sub_step_ms slices (the last one may be
    shorter). As soon as the spring has arrived it snaps to
    (destination, 0) and stays there.

    Args:
        spring: Current state
        dt_ms: Elapsed time in milliseconds (negative is treated as 0)
        settings: Sub-step and rest tolerances

    Returns:
        New SpringState; the input is not modified
    """
    if arrived(spring, settings):
        return replace(spring, position=spring.destination, velocity=0.0)

    remaining = max(0.0, dt_ms)
    sub_step = settings.sub_step_ms
    while remaining > 0:
        h = min(sub_step, remaining)
        spring = _advance(spring, h / 1000)
        remaining -= h
        if arrived(spring, settings):
            log.debug("Spring at rest", stiffness=spring.stiffness, damping=spring.damping)
            return replace(spring, position=spring.destination, velocity=0.0)
    return spring
