"""
Tests for the fluent AnimationBuilder.
"""

import pytest

from animations.builder import AnimationBuilder, animate
from animations.properties import left, opacity, rotate, to
from models.action import Interrupt, Queue
from models.dynamic import SpringState
from models.enums import SpringPreset
from models.transition import EasingConfig, ease_in_out_quad, ease_linear


def first_channel(keyframe):
    return keyframe.target[0].values[0]


class TestStages:

    def test_single_stage(self):
        keyframes = animate().duration(200).props(left(to(10))).keyframes()

        assert len(keyframes) == 1
        assert first_channel(keyframes[0]).easing.duration_ms == 200

    def test_then_starts_new_stage(self):
        keyframes = (
            animate().duration(100).props(left(to(10)))
            .then().delay(50).props(opacity(to(0)))
            .keyframes()
        )

        assert len(keyframes) == 2
        assert keyframes[0].delay_ms == 0
        assert keyframes[1].delay_ms == 50
        # Options do not leak into the next stage
        assert first_channel(keyframes[1]).easing.duration_ms == 350

    def test_trailing_empty_stage_dropped(self):
        keyframes = animate().props(left(to(1))).then().keyframes()
        assert len(keyframes) == 1

    def test_empty_stage_in_the_middle_is_kept(self):
        keyframes = animate().props(left(to(1))).then().then().props(left(to(2))).keyframes()
        assert len(keyframes) == 3
        assert keyframes[1].target == ()

    def test_delay_only_stage_is_kept(self):
        keyframes = animate().props(left(to(1))).then().delay(100).keyframes()

        assert len(keyframes) == 2
        assert keyframes[1].delay_ms == 100

    def test_empty_builder(self):
        assert animate().keyframes() == ()


class TestOptions:

    def test_easing_by_name(self):
        keyframe = animate().easing("quad_in_out").props(left(to(1))).keyframes()[0]
        assert first_channel(keyframe).easing.ease is ease_in_out_quad

    def test_unknown_easing_name(self):
        with pytest.raises(ValueError):
            animate().easing("bouncy")

    def test_later_option_wins(self):
        keyframe = animate().duration(100).duration(300).props(left(to(1))).keyframes()[0]
        assert first_channel(keyframe).easing.duration_ms == 300

    def test_spring_preset(self):
        keyframe = animate().spring(SpringPreset.STIFF).props(left(to(1))).keyframes()[0]
        assert first_channel(keyframe).spring == SpringState.from_preset(SpringPreset.STIFF)

    def test_spring_without_argument_uses_builder_default(self):
        custom = SpringState(stiffness=90, damping=9)
        keyframe = animate(default_spring=custom).spring().props(left(to(1))).keyframes()[0]

        assert first_channel(keyframe).spring == custom
        assert first_channel(keyframe).is_spring

    def test_default_easing(self):
        builder = animate(default_easing=EasingConfig(duration_ms=1000, ease=ease_linear))
        keyframe = builder.props(rotate(to(90))).keyframes()[0]

        assert first_channel(keyframe).easing.duration_ms == 1000
        assert first_channel(keyframe).easing.ease is ease_linear

    def test_props_accepts_iterable(self):
        keyframe = animate().props([left(to(1)), opacity(to(0))]).keyframes()[0]
        assert [p.name for p in keyframe.target] == ["left", "opacity"]


class TestResults:

    def test_interrupt_and_queue(self):
        builder = animate().props(left(to(1)))

        assert isinstance(builder.interrupt(), Interrupt)
        assert isinstance(builder.queue(), Queue)
        assert builder.interrupt().keyframes == builder.queue().keyframes

    def test_builders_are_immutable(self):
        base = animate().duration(100)
        a = base.props(left(to(1)))
        b = base.props(opacity(to(0)))

        assert base.stages[0].props == ()
        assert a.keyframes()[0].target[0].name == "left"
        assert b.keyframes()[0].target[0].name == "opacity"

    def test_builder_type(self):
        assert isinstance(animate(), AnimationBuilder)


class TestPresetTable:

    def test_preset_resolved_through_table(self):
        tuned = SpringState(stiffness=60, damping=8)
        keyframe = animate(springs={SpringPreset.WOBBLY: tuned}).spring(SpringPreset.WOBBLY).props(left(to(1))).keyframes()[0]

        assert first_channel(keyframe).spring == tuned

    def test_table_is_copied(self):
        table = {SpringPreset.WOBBLY: SpringState(stiffness=60, damping=8)}
        builder = animate(springs=table)
        table.clear()

        assert SpringPreset.WOBBLY in builder.springs
