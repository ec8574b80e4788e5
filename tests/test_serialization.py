"""
Tests for Serializer enum and style conversion.
"""

import pytest

from animations.properties import color, left, rgba, rotate
from models.enums import PropertyKind, SpringPreset, Unit
from utils.serialization import Serializer


class TestEnums:

    def test_enum_to_str(self):
        assert Serializer.enum_to_str(SpringPreset.WOBBLY) == "WOBBLY"
        assert Serializer.enum_to_str(None) is None

    def test_str_to_enum_case_insensitive(self):
        assert Serializer.str_to_enum("fast_and_loose", SpringPreset) == SpringPreset.FAST_AND_LOOSE

    def test_str_to_enum_invalid(self):
        with pytest.raises(ValueError):
            Serializer.str_to_enum("huge", PropertyKind)


class TestStyle:

    def test_property_to_dict(self):
        assert Serializer.property_to_dict(rotate(45)) == {"kind": "ROTATE", "values": [45.0], "unit": "DEG"}

    def test_property_from_dict_defaults_unit(self):
        prop = Serializer.property_from_dict({"kind": "left", "values": [3]})
        assert prop == left(3)

    def test_property_from_dict_explicit_unit(self):
        prop = Serializer.property_from_dict({"kind": "LEFT", "values": [3], "unit": "em"})
        assert prop.unit == Unit.EM

    def test_style_list_roundtrip(self):
        style = (left(1), color(*rgba(10, 20, 30, 0.5)), rotate(90))
        assert tuple(Serializer.style_from_list(Serializer.style_to_list(style))) == style

    def test_invalid_entries_skipped(self, capsys):
        props = Serializer.style_from_list([
            {"kind": "LEFT", "values": [1]},
            {"kind": "COLOR", "values": [1, 2]},
            {"kind": "NOPE", "values": [1]},
            {"values": [1]},
        ])

        assert props == [left(1)]
        assert "Skipping invalid style property" in capsys.readouterr().out
