"""
Models package - Data models for the style animation engine
"""

from .enums import PropertyKind, Unit, TargetMode, SpringPreset, AnimationStatus, LogLevel, LogCategory
from .dynamic import Dynamic, SpringState, Target
from .style import StyleProperty, Style
from .keyframe import StyleKeyframe
from .action import Interrupt, Queue, Tick
from .transition import EasingConfig

__all__ = [
    'PropertyKind',
    'Unit',
    'TargetMode',
    'SpringPreset',
    'AnimationStatus',
    'LogLevel',
    'LogCategory',
    'Dynamic',
    'SpringState',
    'Target',
    'StyleProperty',
    'Style',
    'StyleKeyframe',
    'Interrupt',
    'Queue',
    'Tick',
    'EasingConfig',
]
