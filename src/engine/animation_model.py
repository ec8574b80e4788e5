"""
Animation state machine

One AnimationModel per animated subject. update() consumes an Interrupt,
Queue or Tick action and returns the next model together with whether the
caller should deliver another tick. Models are immutable; nothing here
schedules anything on its own.

States:
    IDLE     anim is empty; rendering shows `previous`
    RUNNING  anim[0] is integrating (or waiting out its delay), the rest wait

Time bookkeeping:
    elapsed_ms  time spent in the head keyframe, delay included
    start_ms    clock reading when the head keyframe received its first tick
    clock_ms    total tick time this model has seen
"""

from dataclasses import dataclass, field, replace
from typing import Dict, Iterable, List, Optional, Tuple

from engine.bake import bake, starting_values
from engine.spring import DEFAULT_SETTINGS, IntegratorSettings, arrived, step
from models.action import Action, Interrupt, Queue, Tick
from models.dynamic import Dynamic
from models.enums import AnimationStatus, LogCategory
from models.keyframe import StyleKeyframe
from models.style import PropertyId, Style, StyleProperty, dedupe, identities, index_by_identity
from utils.logger import get_logger

log = get_logger().for_category(LogCategory.ANIMATION)

# Below this a target span is treated as zero when rescaling velocity
_MIN_SPAN = 1e-9


@dataclass(frozen=True)
class AnimationModel:
    elapsed_ms: float = 0.0
    start_ms: Optional[float] = None
    clock_ms: float = 0.0
    anim: Tuple[StyleKeyframe, ...] = field(default_factory=tuple)
    previous: Style = field(default_factory=tuple)

    @classmethod
    def init(cls, style: Iterable[StyleProperty] = ()) -> 'AnimationModel':
        """
        Create an idle model seeded with a starting style.

        Repeated non-transform properties keep their first occurrence;
        every transform entry is kept.
        """
        return cls(previous=dedupe(style))

    @property
    def status(self) -> AnimationStatus:
        return AnimationStatus.RUNNING if self.anim else AnimationStatus.IDLE

    @property
    def is_running(self) -> bool:
        return bool(self.anim)

    @property
    def head(self) -> Optional[StyleKeyframe]:
        return self.anim[0] if self.anim else None

    @property
    def stage_elapsed_ms(self) -> float:
        """Time past the head keyframe's delay (negative while delayed)."""
        if not self.anim:
            return 0.0
        return self.elapsed_ms - self.anim[0].delay_ms


@dataclass(frozen=True)
class UpdateResult:
    """Next model plus whether the owner should deliver another tick."""
    model: AnimationModel
    request_tick: bool


def snapshot(model: AnimationModel) -> Style:
    """
    Current style of the subject.

    Idle models return `previous`; running models bake the head keyframe at
    the present elapsed time. The model is not modified.
    """
    if not model.anim:
        return model.previous
    return bake(model.anim[0], model.stage_elapsed_ms, model.previous)


def update(
    action: Action,
    model: AnimationModel,
    settings: IntegratorSettings = DEFAULT_SETTINGS,
) -> UpdateResult:
    """
    Apply one action.

    Args:
        action: Interrupt, Queue or Tick
        model: Current model
        settings: Spring integrator settings used by Tick

    Returns:
        UpdateResult(model, request_tick)
    """
    if isinstance(action, Tick):
        return _tick(model, action.delta_ms, settings)
    if isinstance(action, Interrupt):
        return _interrupt(model, tuple(action.keyframes))
    if isinstance(action, Queue):
        return _queue(model, tuple(action.keyframes))
    raise TypeError(f"Unsupported action: {type(action).__name__}")


# ------------------------------------------------------------
# Interrupt / Queue
# ------------------------------------------------------------

def _start(model: AnimationModel, keyframes: Tuple[StyleKeyframe, ...], previous: Style) -> UpdateResult:
    model = replace(model, anim=keyframes, previous=previous, elapsed_ms=0.0, start_ms=None)
    return UpdateResult(model, bool(keyframes))


def _interrupt(model: AnimationModel, keyframes: Tuple[StyleKeyframe, ...]) -> UpdateResult:
    if not model.anim:
        log.debug("Starting from idle", keyframes=len(keyframes))
        return _start(model, keyframes, model.previous)

    head = model.anim[0]
    in_flight = _in_flight_velocities(head, model.previous)
    previous = bake(head, model.stage_elapsed_ms, model.previous)

    if keyframes:
        keyframes = (_carry_velocity(keyframes[0], in_flight, previous),) + keyframes[1:]

    log.debug(
        "Interrupted running animation",
        dropped=len(model.anim),
        keyframes=len(keyframes),
        carried=len(in_flight),
    )
    return _start(model, keyframes, previous)


def _queue(model: AnimationModel, keyframes: Tuple[StyleKeyframe, ...]) -> UpdateResult:
    if not model.anim:
        log.debug("Queue on idle model, starting immediately", keyframes=len(keyframes))
        return _start(model, keyframes, model.previous)

    model = replace(model, anim=model.anim + keyframes)
    log.debug("Queued keyframes", queued=len(model.anim))
    return UpdateResult(model, True)


def _in_flight_velocities(
    keyframe: StyleKeyframe,
    previous: Style,
) -> Dict[PropertyId, List[Optional[float]]]:
    """
    Physical velocity (value units per second) of every spring channel.

    Keyed by identity; duration channels map to None.
    """
    previous_index = index_by_identity(previous)
    velocities: Dict[PropertyId, List[Optional[float]]] = {}
    for ident, prop in zip(identities(keyframe.target), keyframe.target):
        if ident in velocities:
            continue
        start = starting_values(prop, previous_index.get(ident))
        velocities[ident] = [
            dyn.spring.velocity * dyn.target.span(from_value) if dyn.is_spring else None
            for dyn, from_value in zip(prop.values, start)
        ]
    return velocities


def _carry_velocity(
    keyframe: StyleKeyframe,
    in_flight: Dict[PropertyId, List[Optional[float]]],
    previous: Style,
) -> StyleKeyframe:
    """
    Seed the new keyframe's springs with the interrupted motion.

    `previous` already holds the values at the moment of interruption, so
    each matching spring restarts at position 0 from there; its physical
    velocity is rescaled into the new keyframe's normalized span.
    """
    previous_index = index_by_identity(previous)
    target = []
    for ident, prop in zip(identities(keyframe.target), keyframe.target):
        velocities = in_flight.get(ident)
        if velocities is None:
            target.append(prop)
            continue
        start = starting_values(prop, previous_index.get(ident))
        values = [
            _seed(dyn, velocity, from_value)
            for dyn, velocity, from_value in zip(prop.values, velocities, start)
        ]
        target.append(prop.with_values(values))
    return keyframe.with_target(target)


def _seed(dyn: Dynamic, velocity: Optional[float], from_value: float) -> Dynamic:
    if not dyn.is_spring or velocity is None:
        return dyn
    span = dyn.target.span(from_value)
    normalized = velocity / span if abs(span) > _MIN_SPAN else 0.0
    return dyn.with_spring(dyn.spring.reset(velocity=normalized))


# ------------------------------------------------------------
# Tick
# ------------------------------------------------------------

def _tick(model: AnimationModel, delta_ms: float, settings: IntegratorSettings) -> UpdateResult:
    if delta_ms < 0:
        log.debug("Negative tick delta clamped to 0", delta_ms=delta_ms)
        delta_ms = 0.0

    if not model.anim:
        return UpdateResult(model, False)

    head = model.anim[0]
    start_ms = model.start_ms if model.start_ms is not None else model.clock_ms
    clock_ms = model.clock_ms + delta_ms
    elapsed_ms = model.elapsed_ms + delta_ms
    active_ms = elapsed_ms - head.delay_ms

    if active_ms < 0:
        # Still waiting out the delay
        model = replace(model, elapsed_ms=elapsed_ms, start_ms=start_ms, clock_ms=clock_ms)
        return UpdateResult(model, True)

    head = _step_springs(head, min(delta_ms, active_ms), settings)

    if not _is_complete(head, active_ms, settings):
        model = replace(
            model,
            anim=(head,) + model.anim[1:],
            elapsed_ms=elapsed_ms,
            start_ms=start_ms,
            clock_ms=clock_ms,
        )
        return UpdateResult(model, True)

    previous = bake(head, active_ms, model.previous)
    remaining = model.anim[1:]
    log.debug(
        "Keyframe complete",
        stage_ms=round(clock_ms - start_ms, 3),
        remaining=len(remaining),
    )
    model = replace(
        model,
        anim=remaining,
        previous=previous,
        elapsed_ms=0.0,
        start_ms=None,
        clock_ms=clock_ms,
    )
    return UpdateResult(model, bool(remaining))


def _step_springs(keyframe: StyleKeyframe, dt_ms: float, settings: IntegratorSettings) -> StyleKeyframe:
    if dt_ms <= 0:
        return keyframe

    def advance(dyn: Dynamic) -> Dynamic:
        if not dyn.is_spring:
            return dyn
        return dyn.with_spring(step(dyn.spring, dt_ms, settings))

    return keyframe.with_target(
        prop.with_values([advance(dyn) for dyn in prop.values])
        for prop in keyframe.target
    )


def _is_complete(keyframe: StyleKeyframe, active_ms: float, settings: IntegratorSettings) -> bool:
    """
    Every spring channel has arrived and every duration channel has run
    its full duration. A keyframe without properties is complete as soon
    as its delay is over.
    """
    if active_ms < keyframe.max_duration_ms:
        return False
    return all(
        arrived(dyn.spring, settings)
        for prop in keyframe.target
        for dyn in prop.values
        if dyn.is_spring
    )
