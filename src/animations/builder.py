"""
Animation builder

Immutable fluent builder for Interrupt/Queue actions. Every call returns a
new builder; nothing is shared between them, so a partially built
animation can be reused as a template.

Example:
    action = (
        animate()
        .duration(500)
        .props(left(to(100)), opacity(to(0.5)))
        .then()
        .spring(SpringPreset.WOBBLY)
        .props(rotate(add(90)))
        .queue()
    )
    result = update(action, model)

Options apply to the stage being built (the last one); within a stage a
later call to the same option replaces the earlier one.
"""

from dataclasses import dataclass, field, replace
from typing import Dict, Iterable, Optional, Tuple, Union

from models.action import Interrupt, Queue
from models.dynamic import SpringState
from models.enums import SpringPreset
from models.keyframe import KeyframeOption, OptionKind, StyleKeyframe, resolve_keyframe
from models.style import StyleProperty
from models.transition import EaseFunction, EasingConfig, easing_by_name


@dataclass(frozen=True)
class PreKeyframe:
    """One stage as collected by the builder, before resolution."""
    options: Tuple[KeyframeOption, ...] = field(default_factory=tuple)
    props: Tuple[StyleProperty, ...] = field(default_factory=tuple)

    @property
    def is_empty(self) -> bool:
        return not self.options and not self.props


@dataclass(frozen=True)
class AnimationBuilder:
    stages: Tuple[PreKeyframe, ...] = (PreKeyframe(),)
    default_easing: EasingConfig = field(default_factory=EasingConfig)
    default_spring: SpringState = field(default_factory=SpringState)
    springs: Dict[SpringPreset, SpringState] = field(default_factory=dict)

    # ------------------------------------------------------------
    # Stage editing
    # ------------------------------------------------------------

    def _last(self) -> PreKeyframe:
        return self.stages[-1]

    def _with_last(self, stage: PreKeyframe) -> 'AnimationBuilder':
        return replace(self, stages=self.stages[:-1] + (stage,))

    def _option(self, kind: OptionKind, value) -> 'AnimationBuilder':
        stage = self._last()
        return self._with_last(replace(stage, options=stage.options + (KeyframeOption(kind, value),)))

    def duration(self, ms: float) -> 'AnimationBuilder':
        return self._option(OptionKind.DURATION, ms)

    def delay(self, ms: float) -> 'AnimationBuilder':
        return self._option(OptionKind.DELAY, ms)

    def easing(self, ease: Union[str, EaseFunction]) -> 'AnimationBuilder':
        """Easing function, or its config name (e.g. "quad_in_out")."""
        if isinstance(ease, str):
            ease = easing_by_name(ease)
        return self._option(OptionKind.EASING, ease)

    def spring(self, spring: Union[SpringPreset, SpringState, None] = None) -> 'AnimationBuilder':
        """
        Switch the stage to spring physics.

        Accepts a preset (looked up in the builder's preset table, e.g. as
        retuned by config), an explicit SpringState, or nothing for the
        builder's default spring. Overrides duration/easing for the stage.
        """
        if spring is None:
            spring = self.default_spring
        elif isinstance(spring, SpringPreset):
            spring = self.springs.get(spring) or SpringState.from_preset(spring)
        return self._option(OptionKind.SPRING, spring)

    def props(self, *props: Union[StyleProperty, Iterable[StyleProperty]]) -> 'AnimationBuilder':
        """Add target properties to the stage (varargs or one iterable)."""
        flat = []
        for item in props:
            if isinstance(item, StyleProperty):
                flat.append(item)
            else:
                flat.extend(item)
        stage = self._last()
        return self._with_last(replace(stage, props=stage.props + tuple(flat)))

    def then(self) -> 'AnimationBuilder':
        """Start the next stage."""
        return replace(self, stages=self.stages + (PreKeyframe(),))

    # ------------------------------------------------------------
    # Results
    # ------------------------------------------------------------

    def keyframes(self) -> Tuple[StyleKeyframe, ...]:
        """
        Resolve every stage. A trailing stage with neither options nor
        properties (e.g. left by a final then()) is dropped.
        """
        stages = self.stages
        if stages and stages[-1].is_empty:
            stages = stages[:-1]
        return tuple(
            resolve_keyframe(stage.options, stage.props, self.default_easing)
            for stage in stages
        )

    def interrupt(self) -> Interrupt:
        return Interrupt(self.keyframes())

    def queue(self) -> Queue:
        return Queue(self.keyframes())


def animate(
    default_easing: EasingConfig = EasingConfig(),
    default_spring: SpringState = SpringState(),
    springs: Optional[Dict[SpringPreset, SpringState]] = None,
) -> AnimationBuilder:
    """
    Start a new builder.

    Args:
        default_easing: Duration/ease for stages without explicit options
        default_spring: Used by spring() without arguments
        springs: Preset table used by spring(preset); built-in values otherwise
    """
    return AnimationBuilder(
        default_easing=default_easing,
        default_spring=default_spring,
        springs=dict(springs or {}),
    )
