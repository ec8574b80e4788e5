"""
Enums for the style animation engine
"""

from enum import Enum, auto


class Unit(Enum):
    """
    CSS units a property value is rendered with.

    Values are the literal suffix written after the number.
    """
    NONE = ""
    PX = "px"
    PERCENT = "%"
    EM = "em"
    REM = "rem"
    EX = "ex"
    CH = "ch"
    VH = "vh"
    VW = "vw"
    VMIN = "vmin"
    VMAX = "vmax"
    MM = "mm"
    CM = "cm"
    IN = "in"
    PT = "pt"
    PC = "pc"

    # Angles
    DEG = "deg"
    GRAD = "grad"
    RAD = "rad"
    TURN = "turn"


class PropertyKind(Enum):
    """
    Closed set of animatable style properties.

    Values are the CSS names used when rendering. Metadata (channels,
    baseline, transform flag) lives in models.style.KIND_SPECS.
    """
    # Box / position
    LEFT = "left"
    TOP = "top"
    RIGHT = "right"
    BOTTOM = "bottom"
    WIDTH = "width"
    HEIGHT = "height"
    MIN_WIDTH = "min-width"
    MAX_WIDTH = "max-width"
    MIN_HEIGHT = "min-height"
    MAX_HEIGHT = "max-height"
    PADDING = "padding"
    PADDING_LEFT = "padding-left"
    PADDING_RIGHT = "padding-right"
    PADDING_TOP = "padding-top"
    PADDING_BOTTOM = "padding-bottom"
    MARGIN = "margin"
    MARGIN_LEFT = "margin-left"
    MARGIN_RIGHT = "margin-right"
    MARGIN_TOP = "margin-top"
    MARGIN_BOTTOM = "margin-bottom"
    BORDER_WIDTH = "border-width"
    BORDER_RADIUS = "border-radius"
    LETTER_SPACING = "letter-spacing"
    LINE_HEIGHT = "line-height"
    FONT_SIZE = "font-size"

    OPACITY = "opacity"

    # Colors (r, g, b, a)
    COLOR = "color"
    BACKGROUND_COLOR = "background-color"
    BORDER_COLOR = "border-color"

    # Transform components
    TRANSLATE = "translate"
    TRANSLATE_3D = "translate3d"
    TRANSLATE_X = "translateX"
    TRANSLATE_Y = "translateY"
    TRANSLATE_Z = "translateZ"
    SCALE = "scale"
    SCALE_3D = "scale3d"
    SCALE_X = "scaleX"
    SCALE_Y = "scaleY"
    SCALE_Z = "scaleZ"
    ROTATE = "rotate"
    ROTATE_X = "rotateX"
    ROTATE_Y = "rotateY"
    ROTATE_Z = "rotateZ"
    SKEW = "skew"
    SKEW_X = "skewX"
    SKEW_Y = "skewY"
    PERSPECTIVE = "perspective"


class TargetMode(Enum):
    """How a Dynamic value moves away from its starting value"""
    TO = auto()      # Move to an absolute value
    ADD = auto()     # Add a delta to the starting value
    MINUS = auto()   # Subtract a delta from the starting value
    STAY = auto()    # Hold the starting value


class SpringPreset(Enum):
    """
    Named (stiffness, damping) pairs.

    The numbers are the built-in defaults; config/springs can override them.
    """
    NO_WOBBLE = (170.0, 26.0)
    GENTLE = (120.0, 14.0)
    WOBBLY = (180.0, 12.0)
    STIFF = (210.0, 20.0)
    FAST_AND_LOOSE = (320.0, 17.0)

    @property
    def stiffness(self) -> float:
        return self.value[0]

    @property
    def damping(self) -> float:
        return self.value[1]


class AnimationStatus(Enum):
    """State machine status of one animated subject"""
    IDLE = auto()      # Nothing queued
    RUNNING = auto()   # Head keyframe is integrating (or waiting out its delay)


class LogLevel(Enum):
    """Log severity levels"""
    DEBUG = auto()
    INFO = auto()
    WARN = auto()
    ERROR = auto()


class LogCategory(Enum):
    """Log categories for grouping related events"""
    CONFIG = auto()      # Configuration loading, validation
    ANIMATION = auto()   # State machine transitions
    SPRING = auto()      # Integrator diagnostics
    SERVICE = auto()     # Subject registry and dispatch
    TICKER = auto()      # Tick loop lifecycle
    SYSTEM = auto()      # Startup, shutdown, errors

    GENERAL = auto()    # Default general category
