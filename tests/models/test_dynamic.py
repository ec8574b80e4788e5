"""
Tests for Target evaluation and spring state helpers.
"""

import pytest

from models.dynamic import Dynamic, SpringState, Target, add, minus, stay, to
from models.enums import SpringPreset, TargetMode
from models.transition import EasingConfig


class TestTarget:

    @pytest.mark.parametrize("target,t,expected", [
        (Target(TargetMode.TO, 100), 0.5, 55.0),
        (Target(TargetMode.ADD, 20), 0.5, 20.0),
        (Target(TargetMode.MINUS, 20), 1.0, -10.0),
        (Target(TargetMode.STAY), 0.7, 10.0),
    ])
    def test_value_from_start_of_10(self, target, t, expected):
        assert target(10.0, t) == pytest.approx(expected)

    def test_endpoints(self):
        target = Target(TargetMode.TO, 42)

        assert target(7.0, 0.0) == 7.0
        assert target(7.0, 1.0) == 42.0

    def test_overshoot_past_one(self):
        assert Target(TargetMode.TO, 10)(0.0, 1.2) == pytest.approx(12.0)

    def test_span(self):
        assert Target(TargetMode.TO, 100).span(40.0) == 60.0
        assert Target(TargetMode.MINUS, 5).span(40.0) == -5.0
        assert Target(TargetMode.STAY).span(40.0) == 0.0


class TestHelpers:

    def test_helpers_build_targets(self):
        assert to(5).target == Target(TargetMode.TO, 5.0)
        assert add(5).target == Target(TargetMode.ADD, 5.0)
        assert minus(5).target == Target(TargetMode.MINUS, 5.0)
        assert stay().target == Target(TargetMode.STAY)

    def test_default_is_spring_mode(self):
        assert to(1).is_spring

    def test_easing_switches_to_duration_mode(self):
        dyn = Dynamic(Target(TargetMode.TO, 1.0), easing=EasingConfig(200))
        assert not dyn.is_spring


class TestSpringState:

    def test_from_preset(self):
        spring = SpringState.from_preset(SpringPreset.WOBBLY)

        assert spring.stiffness == 180.0
        assert spring.damping == 12.0
        assert spring.destination == 1.0

    def test_reset(self):
        spring = SpringState(position=0.8, velocity=3.0).reset(velocity=-1.0)

        assert spring.position == 0.0
        assert spring.velocity == -1.0
        assert spring.stiffness == SpringPreset.NO_WOBBLE.stiffness
