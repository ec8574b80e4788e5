"""
Tests for StyleProperty, identities and dedupe.
"""

import pytest

from animations.properties import left, opacity, rotate, scale, to, top, translate_x
from models.enums import PropertyKind, Unit
from models.style import StyleProperty, baseline, dedupe, identities, index_by_identity


class TestStyleProperty:

    def test_channel_count_is_validated(self):
        with pytest.raises(ValueError):
            StyleProperty(PropertyKind.COLOR, (1.0, 2.0), Unit.NONE)

    def test_metadata(self):
        prop = rotate(10)

        assert prop.is_transform
        assert prop.name == "rotate"
        assert prop.unit == Unit.DEG
        assert not left(0).is_transform

    def test_with_values_keeps_kind_and_unit(self):
        prop = left(1, unit=Unit.EM).with_values([2.0])
        assert prop == StyleProperty(PropertyKind.LEFT, (2.0,), Unit.EM)

    def test_dynamic_values(self):
        prop = left(to(10))
        assert prop.values[0].target.amount == 10.0


class TestIdentity:

    def test_non_transforms_are_kind_only(self):
        assert identities([left(1), opacity(1), left(2)]) == [
            (PropertyKind.LEFT, 0),
            (PropertyKind.OPACITY, 0),
            (PropertyKind.LEFT, 0),
        ]

    def test_transforms_numbered_by_occurrence(self):
        assert identities([rotate(1), translate_x(1), rotate(2)]) == [
            (PropertyKind.ROTATE, 0),
            (PropertyKind.TRANSLATE_X, 0),
            (PropertyKind.ROTATE, 1),
        ]

    def test_index_keeps_first(self):
        index = index_by_identity([left(1), left(2), rotate(1), rotate(2)])

        assert index[(PropertyKind.LEFT, 0)] == left(1)
        assert index[(PropertyKind.ROTATE, 1)] == rotate(2)
        assert len(index) == 3


class TestDedupe:

    def test_first_non_transform_wins(self):
        assert dedupe([left(1), top(2), left(3)]) == (left(1), top(2))

    def test_transforms_all_kept_in_order(self):
        style = [rotate(1), left(0), rotate(2)]
        assert dedupe(style) == tuple(style)


class TestBaseline:

    @pytest.mark.parametrize("kind,expected", [
        (PropertyKind.LEFT, (0.0,)),
        (PropertyKind.OPACITY, (1.0,)),
        (PropertyKind.SCALE, (1.0, 1.0)),
        (PropertyKind.COLOR, (0.0, 0.0, 0.0, 1.0)),
    ])
    def test_neutral_values(self, kind, expected):
        assert baseline(kind) == expected

    def test_scale_constructor_matches_baseline_channels(self):
        assert len(scale(1, 1).values) == len(baseline(PropertyKind.SCALE))
