"""
Tests for keyframe option folding and resolution.
"""

import pytest

from animations.properties import left, opacity, to
from models.dynamic import SpringState
from models.keyframe import KeyframeOption, OptionKind, StyleKeyframe, fold_options, resolve_keyframe
from models.transition import DEFAULT_DURATION_MS, EasingConfig, ease_in_quad, ease_in_out_sine, ease_linear


def channels(keyframe):
    return [dyn for prop in keyframe.target for dyn in prop.values]


class TestFoldOptions:

    def test_last_write_wins(self):
        resolved = fold_options([
            KeyframeOption(OptionKind.DURATION, 100),
            KeyframeOption(OptionKind.DURATION, 250),
        ])
        assert resolved.duration_ms == 250.0

    def test_negative_values_clamped(self):
        resolved = fold_options([
            KeyframeOption(OptionKind.DURATION, -5),
            KeyframeOption(OptionKind.DELAY, -10),
        ])

        assert resolved.duration_ms == 0.0
        assert resolved.delay_ms == 0.0

    def test_empty(self):
        resolved = fold_options([])

        assert resolved.duration_ms is None
        assert resolved.spring is None


class TestResolveKeyframe:

    def test_defaults_without_options(self):
        keyframe = resolve_keyframe([], [left(to(10)), opacity(to(0))])

        for dyn in channels(keyframe):
            assert dyn.easing.duration_ms == DEFAULT_DURATION_MS
            assert dyn.easing.ease is ease_in_out_sine
        assert keyframe.delay_ms == 0.0

    def test_partial_options_fall_back_to_default(self):
        default = EasingConfig(duration_ms=1000, ease=ease_linear)
        keyframe = resolve_keyframe([KeyframeOption(OptionKind.EASING, ease_in_quad)], [left(to(10))], default)

        (dyn,) = channels(keyframe)
        assert dyn.easing.duration_ms == 1000
        assert dyn.easing.ease is ease_in_quad

    def test_spring_overrides_duration_and_easing(self):
        spring = SpringState(stiffness=300, damping=20, position=0.4, velocity=2.0)
        keyframe = resolve_keyframe(
            [
                KeyframeOption(OptionKind.DURATION, 500),
                KeyframeOption(OptionKind.SPRING, spring),
                KeyframeOption(OptionKind.EASING, ease_linear),
            ],
            [left(to(10))],
        )

        (dyn,) = channels(keyframe)
        assert dyn.is_spring
        assert dyn.spring == SpringState(stiffness=300, damping=20)
        assert keyframe.max_duration_ms == 0.0

    def test_delay(self):
        keyframe = resolve_keyframe([KeyframeOption(OptionKind.DELAY, 120)], [left(to(1))])
        assert keyframe.delay_ms == 120.0


class TestStyleKeyframe:

    def test_max_duration(self):
        short = resolve_keyframe([KeyframeOption(OptionKind.DURATION, 100)], [left(to(1))])
        long = resolve_keyframe([KeyframeOption(OptionKind.DURATION, 400)], [opacity(to(0))])
        keyframe = StyleKeyframe(target=short.target + long.target)

        assert keyframe.max_duration_ms == 400

    def test_empty_keyframe_has_no_duration(self):
        assert StyleKeyframe(delay_ms=50).max_duration_ms == 0.0

    def test_with_target(self):
        keyframe = StyleKeyframe(delay_ms=10).with_target(iter([left(to(1))]))

        assert keyframe.delay_ms == 10
        assert keyframe.target == (left(to(1)),)

    def test_frozen(self):
        with pytest.raises(AttributeError):
            StyleKeyframe().delay_ms = 5
