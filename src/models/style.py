"""
Style property models

StyleProperty is the tagged value a style is built from. The same class
holds resolved numbers (floats, "static") in a baked Style and Dynamic
descriptors in a keyframe target.

Identity:
    Non-transform properties are identified by their kind alone, so a
    Style holds at most one "left". Transform components compose, so each
    occurrence of a transform kind is its own identity: the second rotate
    in a list is (ROTATE, 1).
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Generic, Iterable, List, Sequence, Tuple, TypeVar

from models.dynamic import Dynamic
from models.enums import PropertyKind, Unit

V = TypeVar("V", float, Dynamic)

# (kind, occurrence index among same-kind transforms; always 0 otherwise)
PropertyId = Tuple[PropertyKind, int]


@dataclass(frozen=True)
class KindSpec:
    """Static metadata of a PropertyKind"""
    channels: int = 1
    baseline: Tuple[float, ...] = (0.0,)
    unit: Unit = Unit.PX
    transform: bool = False
    color: bool = False


_LENGTH = KindSpec()
_COLOR = KindSpec(channels=4, baseline=(0.0, 0.0, 0.0, 1.0), unit=Unit.NONE, color=True)
_ANGLE = KindSpec(unit=Unit.DEG, transform=True)


def _transform(channels: int = 1, baseline: float = 0.0, unit: Unit = Unit.PX) -> KindSpec:
    return KindSpec(channels=channels, baseline=(baseline,) * channels, unit=unit, transform=True)


KIND_SPECS: Dict[PropertyKind, KindSpec] = {
    PropertyKind.LEFT: _LENGTH,
    PropertyKind.TOP: _LENGTH,
    PropertyKind.RIGHT: _LENGTH,
    PropertyKind.BOTTOM: _LENGTH,
    PropertyKind.WIDTH: _LENGTH,
    PropertyKind.HEIGHT: _LENGTH,
    PropertyKind.MIN_WIDTH: _LENGTH,
    PropertyKind.MAX_WIDTH: _LENGTH,
    PropertyKind.MIN_HEIGHT: _LENGTH,
    PropertyKind.MAX_HEIGHT: _LENGTH,
    PropertyKind.PADDING: _LENGTH,
    PropertyKind.PADDING_LEFT: _LENGTH,
    PropertyKind.PADDING_RIGHT: _LENGTH,
    PropertyKind.PADDING_TOP: _LENGTH,
    PropertyKind.PADDING_BOTTOM: _LENGTH,
    PropertyKind.MARGIN: _LENGTH,
    PropertyKind.MARGIN_LEFT: _LENGTH,
    PropertyKind.MARGIN_RIGHT: _LENGTH,
    PropertyKind.MARGIN_TOP: _LENGTH,
    PropertyKind.MARGIN_BOTTOM: _LENGTH,
    PropertyKind.BORDER_WIDTH: _LENGTH,
    PropertyKind.BORDER_RADIUS: _LENGTH,
    PropertyKind.LETTER_SPACING: _LENGTH,
    PropertyKind.LINE_HEIGHT: KindSpec(baseline=(1.0,), unit=Unit.NONE),
    PropertyKind.FONT_SIZE: _LENGTH,

    PropertyKind.OPACITY: KindSpec(baseline=(1.0,), unit=Unit.NONE),

    PropertyKind.COLOR: _COLOR,
    PropertyKind.BACKGROUND_COLOR: _COLOR,
    PropertyKind.BORDER_COLOR: _COLOR,

    PropertyKind.TRANSLATE: _transform(2),
    PropertyKind.TRANSLATE_3D: _transform(3),
    PropertyKind.TRANSLATE_X: _transform(),
    PropertyKind.TRANSLATE_Y: _transform(),
    PropertyKind.TRANSLATE_Z: _transform(),
    PropertyKind.SCALE: _transform(2, 1.0, Unit.NONE),
    PropertyKind.SCALE_3D: _transform(3, 1.0, Unit.NONE),
    PropertyKind.SCALE_X: _transform(1, 1.0, Unit.NONE),
    PropertyKind.SCALE_Y: _transform(1, 1.0, Unit.NONE),
    PropertyKind.SCALE_Z: _transform(1, 1.0, Unit.NONE),
    PropertyKind.ROTATE: _ANGLE,
    PropertyKind.ROTATE_X: _ANGLE,
    PropertyKind.ROTATE_Y: _ANGLE,
    PropertyKind.ROTATE_Z: _ANGLE,
    PropertyKind.SKEW: _transform(2, 0.0, Unit.DEG),
    PropertyKind.SKEW_X: _ANGLE,
    PropertyKind.SKEW_Y: _ANGLE,
    PropertyKind.PERSPECTIVE: _transform(),
}


@dataclass(frozen=True)
class StyleProperty(Generic[V]):
    """
    One style property: a kind, one value per channel, and a unit.

    Examples:
        StyleProperty(PropertyKind.LEFT, (10.0,), Unit.PX)
        StyleProperty(PropertyKind.COLOR, (255.0, 0.0, 0.0, 1.0))
        StyleProperty(PropertyKind.ROTATE, (to(90),), Unit.DEG)
    """
    kind: PropertyKind
    values: Tuple[V, ...]
    unit: Unit = Unit.NONE

    def __post_init__(self):
        expected = KIND_SPECS[self.kind].channels
        if len(self.values) != expected:
            raise ValueError(
                f"{self.kind.name} takes {expected} value(s), got {len(self.values)}"
            )

    @property
    def spec(self) -> KindSpec:
        return KIND_SPECS[self.kind]

    @property
    def is_transform(self) -> bool:
        return self.spec.transform

    @property
    def name(self) -> str:
        return self.kind.value

    def with_values(self, values: Sequence) -> 'StyleProperty':
        return StyleProperty(self.kind, tuple(values), self.unit)


# A baked snapshot: Static-valued properties, unique by identity
Style = Tuple[StyleProperty, ...]


def identities(props: Iterable[StyleProperty]) -> List[PropertyId]:
    """
    Identity of every property in order.

    Transform kinds are numbered by occurrence; everything else is 0.
    """
    seen: Dict[PropertyKind, int] = {}
    result = []
    for prop in props:
        if prop.is_transform:
            index = seen.get(prop.kind, 0)
            seen[prop.kind] = index + 1
            result.append((prop.kind, index))
        else:
            result.append((prop.kind, 0))
    return result


def index_by_identity(props: Iterable[StyleProperty]) -> Dict[PropertyId, StyleProperty]:
    """Map identity → property, keeping the first occurrence."""
    props = list(props)
    index: Dict[PropertyId, StyleProperty] = {}
    for ident, prop in zip(identities(props), props):
        index.setdefault(ident, prop)
    return index


def dedupe(props: Iterable[StyleProperty]) -> Style:
    """
    Drop repeated non-transform properties, keeping the first.

    Transform entries are all kept; they compose into one transform.
    """
    result = []
    seen = set()
    for prop in props:
        if prop.is_transform:
            result.append(prop)
            continue
        if prop.kind in seen:
            continue
        seen.add(prop.kind)
        result.append(prop)
    return tuple(result)


def baseline(kind: PropertyKind) -> Tuple[float, ...]:
    """Neutral starting values for a property nobody has set yet."""
    return KIND_SPECS[kind].baseline
