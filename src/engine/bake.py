"""
Baking / merge engine

Resolves a keyframe's Dynamic values into numbers at a point in time and
merges them with the last known snapshot, so the result always describes
every property the subject has ever been given, once each.
"""

from typing import Dict, List, Optional, Tuple

from engine.interpolator import eased
from models.dynamic import Dynamic
from models.keyframe import StyleKeyframe
from models.style import PropertyId, Style, StyleProperty, baseline, identities, index_by_identity


def resolve_channel(dyn: Dynamic, from_value: float, elapsed_ms: float) -> float:
    """
    Current value of one channel.

    Spring channels read the integrator's position; duration channels
    evaluate their easing at elapsed_ms (time past the keyframe's delay).
    """
    if dyn.is_spring:
        return dyn.target(from_value, dyn.spring.position)
    return dyn.target(from_value, eased(elapsed_ms, dyn.easing))


def starting_values(prop: StyleProperty, previous: Optional[StyleProperty]) -> Tuple[float, ...]:
    """Values a target property starts from: the previous snapshot, else its baseline."""
    if previous is None:
        return baseline(prop.kind)
    return previous.values


def bake_property(
    prop: StyleProperty,
    previous: Optional[StyleProperty],
    elapsed_ms: float,
) -> StyleProperty:
    start = starting_values(prop, previous)
    values = [
        resolve_channel(dyn, from_value, elapsed_ms)
        for dyn, from_value in zip(prop.values, start)
    ]
    return prop.with_values(values)


def bake(keyframe: StyleKeyframe, elapsed_ms: float, previous: Style) -> Style:
    """
    Merge a keyframe's current values into the previous snapshot.

    Args:
        keyframe: Keyframe being integrated
        elapsed_ms: Time past the keyframe's delay (negative counts as 0)
        previous: Last baked Style

    Returns:
        New Style: previous entries in their order, with every identity the
        keyframe touches replaced by its current value, followed by
        identities only the keyframe knows about in keyframe order.
    """
    elapsed_ms = max(0.0, elapsed_ms)
    previous_index = index_by_identity(previous)

    baked: Dict[PropertyId, StyleProperty] = {}
    order: List[PropertyId] = []
    for ident, prop in zip(identities(keyframe.target), keyframe.target):
        if ident in baked:
            continue
        baked[ident] = bake_property(prop, previous_index.get(ident), elapsed_ms)
        order.append(ident)

    merged = []
    for ident, prop in zip(identities(previous), previous):
        merged.append(baked.pop(ident, prop))
    merged.extend(baked[ident] for ident in order if ident in baked)
    return tuple(merged)
