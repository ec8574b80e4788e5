"""
Style rendering

Turns a Style (or a model's current state) into ordered (name, value)
string pairs ready to be written into markup. All transform components
collapse into a single trailing "transform" entry.
"""

from typing import Dict, List, Tuple

from engine.animation_model import AnimationModel, snapshot
from models.style import Style, StyleProperty
from utils.colors import clamp_channel

RenderedPair = Tuple[str, str]

TRANSFORM = "transform"


def format_number(value: float) -> str:
    """
    Up to 4 decimals, trailing zeros trimmed.

    Example:
        format_number(5.0)      # "5"
        format_number(0.5)      # "0.5"
        format_number(1/3)      # "0.3333"
    """
    text = f"{value:.4f}".rstrip("0").rstrip(".")
    if text in ("-0", ""):
        return "0"
    return text


def _with_unit(value: float, prop: StyleProperty) -> str:
    return f"{format_number(value)}{prop.unit.value}"


def render_value(prop: StyleProperty) -> str:
    """
    Value text of a single property.

    Colors render as rgba(); transform components as name(args); plain
    properties as number + unit.
    """
    if prop.spec.color:
        r, g, b, a = prop.values
        channels = ", ".join(str(clamp_channel(c)) for c in (r, g, b))
        alpha = format_number(min(1.0, max(0.0, a)))
        return f"rgba({channels}, {alpha})"
    if prop.is_transform:
        args = ", ".join(_with_unit(v, prop) for v in prop.values)
        return f"{prop.name}({args})"
    return " ".join(_with_unit(v, prop) for v in prop.values)


def render_property(prop: StyleProperty) -> RenderedPair:
    """(name, value) of one property; transform components are named "transform"."""
    if prop.is_transform:
        return TRANSFORM, render_value(prop)
    return prop.name, render_value(prop)


def render_style(style: Style) -> List[RenderedPair]:
    """
    Ordered pairs for a baked style.

    Non-transform properties keep their order, one pair each. Transform
    components are joined with spaces, in order, into one "transform" pair
    placed last.
    """
    pairs: List[RenderedPair] = []
    transforms: List[str] = []
    for prop in style:
        if prop.is_transform:
            transforms.append(render_value(prop))
        else:
            pairs.append(render_property(prop))
    if transforms:
        pairs.append((TRANSFORM, " ".join(transforms)))
    return pairs


def render(model: AnimationModel) -> List[RenderedPair]:
    """Render a model's current state without modifying it."""
    return render_style(snapshot(model))


def render_to_dict(model: AnimationModel) -> Dict[str, str]:
    return dict(render(model))


def render_to_css(model: AnimationModel) -> str:
    """Inline style text, e.g. "opacity:0.5;transform:rotate(10deg)"."""
    return ";".join(f"{name}:{value}" for name, value in render(model))
