"""
Config Manager

Main configuration manager with include system support.
Loads modular YAML files and builds the EngineConfig used by the engine,
the animation service and the ticker.
"""

import yaml
from pathlib import Path
from typing import Any, Dict, List, Optional

from engine.spring import IntegratorSettings
from models.config import EngineConfig
from models.dynamic import SpringState
from models.enums import LogCategory, LogLevel, SpringPreset
from models.transition import DEFAULT_DURATION_MS, EasingConfig, easing_by_name
from utils.logger import configure_logger, get_logger
from utils.serialization import Serializer

log = get_logger().for_category(LogCategory.CONFIG)


class ConfigManager:
    """
    Main configuration manager with include system support

    Loads config.yaml and processes include: directive to load modular YAML files.
    Falls back to factory_defaults.yaml when the main config cannot be read.

    Example:
        config = ConfigManager()
        engine_config = config.load()

        engine_config.default_easing.duration_ms   # 350.0
        engine_config.spring(SpringPreset.WOBBLY)   # SpringState(180, 12)
    """

    def __init__(self, config_path="config/config.yaml", defaults_path="config/factory_defaults.yaml"):
        """
        Initialize ConfigManager

        Args:
            config_path: Path to main config.yaml (relative to src/, or absolute)
            defaults_path: Path to factory defaults fallback
        """
        self.config_path = Path(config_path)
        self.factory_defaults_path = Path(defaults_path)
        self.data: Dict[str, Any] = {}
        self.engine_config: Optional[EngineConfig] = None

    def load(self, apply_logging: bool = True) -> EngineConfig:
        """
        Read the YAML files and build the engine configuration.

        config.yaml either lists the files to merge under 'include:' or holds
        every section itself. Any failure reading it (missing file, bad
        YAML, missing include) switches to factory_defaults.yaml.

        Args:
            apply_logging: Apply the 'logging' section to the shared logger

        Returns:
            EngineConfig

        Raises:
            ValueError: a section holds an unknown easing, preset or level name
        """
        src_dir = Path(__file__).parent.parent
        main_path = src_dir / self.config_path
        try:
            main_config = self._read_yaml(main_path)
            includes = main_config.get('include')
            if includes:
                log.info("Merging included config files", files=len(includes))
                self.data = self._load_with_includes(includes, main_path.parent)
            else:
                log.info("Using single-file configuration", path=str(main_path))
                self.data = main_config
        except (OSError, yaml.YAMLError) as ex:
            log.error("Failed to load config", path=str(main_path), error=str(ex), error_type=type(ex).__name__)
            log.warn("Falling back to factory defaults")
            self.data = self._read_yaml(src_dir / self.factory_defaults_path)

        self.engine_config = self._build_engine_config(self.data)

        if apply_logging:
            configure_logger(self.engine_config.log_level, self.engine_config.log_colors)

        return self.engine_config

    @staticmethod
    def _read_yaml(path: Path) -> Dict[str, Any]:
        with open(path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}

    def _load_with_includes(self, include_list: List[str], config_dir: Path) -> Dict[str, Any]:
        """
        Merge included files in order; a later file replaces top-level
        sections of an earlier one.

        Args:
            include_list: File names relative to config_dir
            config_dir: Directory of config.yaml
        """
        merged: Dict[str, Any] = {}
        for filename in include_list:
            try:
                section_data = self._read_yaml(config_dir / filename)
            except (OSError, yaml.YAMLError) as ex:
                log.error(f"Cannot read included file {filename}", error=str(ex))
                raise
            merged.update(section_data)
            log.debug(f"Included {filename}", sections=", ".join(section_data))

        log.info("Config merge complete", sections=", ".join(merged))
        return merged

    # ------------------------------------------------------------
    # Section parsing
    # ------------------------------------------------------------

    def _build_engine_config(self, data: Dict[str, Any]) -> EngineConfig:
        springs = self._parse_springs(data.get('springs', {}))

        animation = data.get('animation', {})
        default_easing = EasingConfig(
            duration_ms=float(animation.get('default_duration_ms', DEFAULT_DURATION_MS)),
            ease=easing_by_name(animation.get('default_easing', 'sine_in_out')),
        )
        default_preset = Serializer.str_to_enum(animation.get('default_spring', 'NO_WOBBLE'), SpringPreset)

        integrator_data = data.get('integrator', {})
        defaults = IntegratorSettings()
        integrator = IntegratorSettings(
            sub_step_ms=float(integrator_data.get('sub_step_ms', defaults.sub_step_ms)),
            position_tolerance=float(integrator_data.get('position_tolerance', defaults.position_tolerance)),
            velocity_tolerance=float(integrator_data.get('velocity_tolerance', defaults.velocity_tolerance)),
        )
        if integrator.sub_step_ms <= 0:
            log.warn("integrator.sub_step_ms must be positive, using default", value=integrator.sub_step_ms)
            integrator = IntegratorSettings(
                position_tolerance=integrator.position_tolerance,
                velocity_tolerance=integrator.velocity_tolerance,
            )

        ticker = data.get('ticker', {})
        logging_cfg = data.get('logging', {})

        config = EngineConfig(
            default_easing=default_easing,
            default_spring=springs[default_preset],
            springs=springs,
            integrator=integrator,
            fps=max(1, min(int(ticker.get('fps', 60)), 240)),
            log_level=Serializer.str_to_enum(logging_cfg.get('level', 'INFO'), LogLevel),
            log_colors=bool(logging_cfg.get('colors', True)),
        )

        log.info(
            "Engine config ready",
            duration_ms=config.default_easing.duration_ms,
            default_spring=default_preset.name,
            fps=config.fps,
        )
        return config

    def _parse_springs(self, springs_map: Dict[str, Any]) -> Dict[SpringPreset, SpringState]:
        """
        Preset table: built-in values overridden by the 'springs' section

        Args:
            springs_map: {NO_WOBBLE: {stiffness: 170, damping: 26}, ...}
        """
        springs = {preset: SpringState.from_preset(preset) for preset in SpringPreset}

        for name, values in (springs_map or {}).items():
            try:
                preset = Serializer.str_to_enum(name, SpringPreset)
            except ValueError:
                log.warn(f"Unknown spring preset in config: {name}")
                continue

            stiffness = float(values.get('stiffness', preset.stiffness))
            damping = float(values.get('damping', preset.damping))
            if stiffness <= 0 or damping <= 0:
                log.warn(f"Spring {name} needs positive stiffness and damping, keeping built-in values")
                continue

            springs[preset] = SpringState(stiffness=stiffness, damping=damping)
            log.debug(f"Loaded spring preset: {preset.name}", stiffness=stiffness, damping=damping)

        return springs
