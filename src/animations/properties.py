"""
Property constructors

Shorthands for building StyleProperty values. The same constructor serves
both a starting style (plain numbers) and a keyframe target (Dynamic
values from to/add/minus/stay):

    initial = [left(0), opacity(1), rotate(0)]
    target  = [left(to(100)), opacity(to(0.5)), rotate(add(90))]

Units default to the kind's natural unit (px for lengths, deg for angles,
none for opacity/scale/colors).
"""

from typing import Callable, Optional, Tuple, Union

from models.dynamic import Dynamic, add, minus, stay, to
from models.enums import PropertyKind, Unit
from models.style import KIND_SPECS, StyleProperty
from utils.colors import hsl_to_rgb

Value = Union[float, int, Dynamic]


def _coerce(value: Value):
    return value if isinstance(value, Dynamic) else float(value)


def prop(kind: PropertyKind, *values: Value, unit: Optional[Unit] = None) -> StyleProperty:
    """
    Generic constructor.

    Raises:
        ValueError: wrong number of values for the kind
    """
    if unit is None:
        unit = KIND_SPECS[kind].unit
    return StyleProperty(kind, tuple(_coerce(v) for v in values), unit)


def _constructor(kind: PropertyKind) -> Callable[..., StyleProperty]:
    def make(*values: Value, unit: Optional[Unit] = None) -> StyleProperty:
        return prop(kind, *values, unit=unit)
    make.__name__ = kind.name.lower()
    make.__doc__ = f"{kind.value} ({KIND_SPECS[kind].channels} value(s))"
    return make


left = _constructor(PropertyKind.LEFT)
top = _constructor(PropertyKind.TOP)
right = _constructor(PropertyKind.RIGHT)
bottom = _constructor(PropertyKind.BOTTOM)
width = _constructor(PropertyKind.WIDTH)
height = _constructor(PropertyKind.HEIGHT)
min_width = _constructor(PropertyKind.MIN_WIDTH)
max_width = _constructor(PropertyKind.MAX_WIDTH)
min_height = _constructor(PropertyKind.MIN_HEIGHT)
max_height = _constructor(PropertyKind.MAX_HEIGHT)
padding = _constructor(PropertyKind.PADDING)
padding_left = _constructor(PropertyKind.PADDING_LEFT)
padding_right = _constructor(PropertyKind.PADDING_RIGHT)
padding_top = _constructor(PropertyKind.PADDING_TOP)
padding_bottom = _constructor(PropertyKind.PADDING_BOTTOM)
margin = _constructor(PropertyKind.MARGIN)
margin_left = _constructor(PropertyKind.MARGIN_LEFT)
margin_right = _constructor(PropertyKind.MARGIN_RIGHT)
margin_top = _constructor(PropertyKind.MARGIN_TOP)
margin_bottom = _constructor(PropertyKind.MARGIN_BOTTOM)
border_width = _constructor(PropertyKind.BORDER_WIDTH)
border_radius = _constructor(PropertyKind.BORDER_RADIUS)
letter_spacing = _constructor(PropertyKind.LETTER_SPACING)
line_height = _constructor(PropertyKind.LINE_HEIGHT)
font_size = _constructor(PropertyKind.FONT_SIZE)

opacity = _constructor(PropertyKind.OPACITY)

color = _constructor(PropertyKind.COLOR)
background_color = _constructor(PropertyKind.BACKGROUND_COLOR)
border_color = _constructor(PropertyKind.BORDER_COLOR)

translate = _constructor(PropertyKind.TRANSLATE)
translate_3d = _constructor(PropertyKind.TRANSLATE_3D)
translate_x = _constructor(PropertyKind.TRANSLATE_X)
translate_y = _constructor(PropertyKind.TRANSLATE_Y)
translate_z = _constructor(PropertyKind.TRANSLATE_Z)
scale = _constructor(PropertyKind.SCALE)
scale_3d = _constructor(PropertyKind.SCALE_3D)
scale_x = _constructor(PropertyKind.SCALE_X)
scale_y = _constructor(PropertyKind.SCALE_Y)
scale_z = _constructor(PropertyKind.SCALE_Z)
rotate = _constructor(PropertyKind.ROTATE)
rotate_x = _constructor(PropertyKind.ROTATE_X)
rotate_y = _constructor(PropertyKind.ROTATE_Y)
rotate_z = _constructor(PropertyKind.ROTATE_Z)
skew = _constructor(PropertyKind.SKEW)
skew_x = _constructor(PropertyKind.SKEW_X)
skew_y = _constructor(PropertyKind.SKEW_Y)
perspective = _constructor(PropertyKind.PERSPECTIVE)


# === Color channel helpers ===

def rgba(r: float, g: float, b: float, a: float = 1.0) -> Tuple[float, float, float, float]:
    """Static color channels, e.g. color(*rgba(255, 0, 0))."""
    return float(r), float(g), float(b), float(a)


def hsla(hue: float, saturation: float, lightness: float, a: float = 1.0) -> Tuple[float, float, float, float]:
    """Static color channels from HSL (saturation/lightness 0.0-1.0)."""
    return rgba(*hsl_to_rgb(hue, saturation, lightness), a)


def to_rgba(r: float, g: float, b: float, a: float = 1.0) -> Tuple[Dynamic, ...]:
    """Animate every channel to an RGBA color, e.g. color(*to_rgba(0, 0, 255))."""
    return tuple(to(c) for c in rgba(r, g, b, a))


def to_hsla(hue: float, saturation: float, lightness: float, a: float = 1.0) -> Tuple[Dynamic, ...]:
    return tuple(to(c) for c in hsla(hue, saturation, lightness, a))
