"""
Keyframe models

A StyleKeyframe is one stage of a multi-stage animation: a delay followed
by a set of properties moving towards their targets. The builder collects
KeyframeOptions for each stage; resolve_keyframe() turns them into a
keyframe whose every Dynamic carries its final spring or easing config.
"""

from dataclasses import dataclass, field, replace
from enum import Enum, auto
from typing import Any, Iterable, Optional, Sequence, Tuple

from models.dynamic import Dynamic, SpringState
from models.style import StyleProperty
from models.transition import EasingConfig, EaseFunction


class OptionKind(Enum):
    """Settings a keyframe can receive from the builder"""
    DURATION = auto()
    DELAY = auto()
    EASING = auto()
    SPRING = auto()


@dataclass(frozen=True)
class KeyframeOption:
    kind: OptionKind
    value: Any


@dataclass(frozen=True)
class StyleKeyframe:
    """
    Attributes:
        delay_ms: Time waited before any property moves
        target: Properties with Dynamic values, in declaration order
    """
    delay_ms: float = 0.0
    target: Tuple[StyleProperty, ...] = field(default_factory=tuple)

    @property
    def max_duration_ms(self) -> float:
        """Longest duration among duration-mode channels (0 when none)."""
        durations = [
            dyn.easing.duration_ms
            for prop in self.target
            for dyn in prop.values
            if not dyn.is_spring
        ]
        return max(durations, default=0.0)

    def with_target(self, target: Iterable[StyleProperty]) -> 'StyleKeyframe':
        return replace(self, target=tuple(target))


@dataclass(frozen=True)
class ResolvedOptions:
    """Result of folding a keyframe's options, last write wins per field."""
    duration_ms: Optional[float] = None
    delay_ms: float = 0.0
    ease: Optional[EaseFunction] = None
    spring: Optional[SpringState] = None


def fold_options(options: Sequence[KeyframeOption]) -> ResolvedOptions:
    resolved = ResolvedOptions()
    for option in options:
        if option.kind == OptionKind.DURATION:
            resolved = replace(resolved, duration_ms=max(0.0, float(option.value)))
        elif option.kind == OptionKind.DELAY:
            resolved = replace(resolved, delay_ms=max(0.0, float(option.value)))
        elif option.kind == OptionKind.EASING:
            resolved = replace(resolved, ease=option.value)
        elif option.kind == OptionKind.SPRING:
            resolved = replace(resolved, spring=option.value)
    return resolved


def resolve_keyframe(
    options: Sequence[KeyframeOption],
    props: Sequence[StyleProperty],
    default_easing: EasingConfig = EasingConfig(),
) -> StyleKeyframe:
    """
    Distribute a keyframe's spring or easing settings onto every property.

    A spring option puts every channel in spring mode and discards any
    duration/easing given alongside it. Without a spring, channels use the
    given duration and easing, falling back to default_easing for whichever
    is missing. No options at all simply means defaults.

    Args:
        options: Builder options in call order
        props: Properties whose values are Dynamic
        default_easing: Duration and ease used when none was given

    Returns:
        Fully resolved StyleKeyframe
    """
    resolved = fold_options(options)

    if resolved.spring is not None:
        spring = resolved.spring.reset()

        def configure(dyn: Dynamic) -> Dynamic:
            return replace(dyn, spring=spring, easing=None)
    else:
        easing = EasingConfig(
            duration_ms=(
                resolved.duration_ms
                if resolved.duration_ms is not None
                else default_easing.duration_ms
            ),
            ease=resolved.ease or default_easing.ease,
        )

        def configure(dyn: Dynamic) -> Dynamic:
            return replace(dyn, easing=easing)

    target = tuple(
        prop.with_values([configure(dyn) for dyn in prop.values])
        for prop in props
    )
    return StyleKeyframe(delay_ms=resolved.delay_ms, target=target)
