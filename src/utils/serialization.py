"""
Serialization utilities - enum and style conversion for config and export

Provides bidirectional conversion between:
- Enums ↔ Strings (PropertyKind, Unit, SpringPreset, LogLevel)
- Static styles ↔ JSON-compatible lists of dicts
"""

from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Type, TypeVar

from models.enums import LogCategory, PropertyKind, Unit
from models.style import KIND_SPECS, Style, StyleProperty
from utils.logger import get_logger

log = get_logger().for_category(LogCategory.GENERAL)

T = TypeVar('T', bound=Enum)


class Serializer:
    """Central enum and style serialization"""

    # ========================================================================
    # ENUM SERIALIZATION
    # ========================================================================

    @staticmethod
    def enum_to_str(value: Optional[Enum]) -> Optional[str]:
        """Convert any enum to string name"""
        return value.name if value else None

    @staticmethod
    def str_to_enum(value: str, enum_type: Type[T]) -> T:
        """Convert string to enum (case-insensitive), raise ValueError if invalid"""
        try:
            return enum_type[value.upper()]
        except (KeyError, AttributeError):
            raise ValueError(f"Invalid {enum_type.__name__}: {value}")

    # ========================================================================
    # STYLE SERIALIZATION
    # ========================================================================

    @staticmethod
    def property_to_dict(prop: StyleProperty) -> Dict[str, Any]:
        """
        Serialize a static property

        Returns:
            Dict with kind, values, unit
        """
        return {
            "kind": prop.kind.name,
            "values": list(prop.values),
            "unit": prop.unit.name,
        }

    @staticmethod
    def style_to_list(style: Style) -> List[Dict[str, Any]]:
        return [Serializer.property_to_dict(prop) for prop in style]

    @staticmethod
    def property_from_dict(data: Dict[str, Any]) -> StyleProperty:
        """
        Parse a static property

        Args:
            data: {"kind": "LEFT", "values": [10], "unit": "PX"}; unit is optional

        Raises:
            ValueError: unknown kind/unit or wrong number of values
        """
        kind = Serializer.str_to_enum(data["kind"], PropertyKind)
        unit_name = data.get("unit")
        unit = Serializer.str_to_enum(unit_name, Unit) if unit_name else None
        values = tuple(float(v) for v in data.get("values", []))
        if unit is None:
            unit = KIND_SPECS[kind].unit
        return StyleProperty(kind, values, unit)

    @staticmethod
    def style_from_list(items: Iterable[Dict[str, Any]]) -> List[StyleProperty]:
        """Parse a list of property dicts, skipping (and logging) invalid ones."""
        props = []
        for item in items:
            try:
                props.append(Serializer.property_from_dict(item))
            except (KeyError, ValueError) as ex:
                log.warn("Skipping invalid style property", item=item, error=str(ex))
        return props
