"""
Engine configuration model

Immutable settings assembled by ConfigManager from YAML.
"""

from dataclasses import dataclass, field
from typing import Dict

from engine.spring import IntegratorSettings
from models.dynamic import SpringState
from models.enums import LogLevel, SpringPreset
from models.transition import EasingConfig


def _preset_springs() -> Dict[SpringPreset, SpringState]:
    return {preset: SpringState.from_preset(preset) for preset in SpringPreset}


@dataclass(frozen=True)
class EngineConfig:
    """
    Attributes:
        default_easing: Duration/ease for stages without explicit options
        default_spring: Spring used by builder.spring() without arguments
        springs: Preset table (config may retune presets)
        integrator: Spring sub-step and rest tolerances
        fps: Tick rate of engine.ticker.Ticker
        log_level: Minimum level for the logger singleton
        log_colors: ANSI colors in log output
    """
    default_easing: EasingConfig = field(default_factory=EasingConfig)
    default_spring: SpringState = field(default_factory=SpringState)
    springs: Dict[SpringPreset, SpringState] = field(default_factory=_preset_springs)
    integrator: IntegratorSettings = field(default_factory=IntegratorSettings)
    fps: int = 60
    log_level: LogLevel = LogLevel.INFO
    log_colors: bool = True

    def spring(self, preset: SpringPreset) -> SpringState:
        return self.springs.get(preset, SpringState.from_preset(preset))
