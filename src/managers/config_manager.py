"""
Config Manager

Loads modular YAML configuration (include system) with a factory defaults
fallback and exposes typed accessors for the animator.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import yaml

from models.domain.animation import AnimationTiming
from models.enums import LogLevel
from models.exceptions import InvalidTimingError
from utils.logger import get_logger, LogCategory
from utils.serialization import Serializer

log = get_logger().for_category(LogCategory.CONFIG)

SRC_DIR = Path(__file__).parent.parent
DEFAULT_SKIP_KEYS = ["ENTER", "SPACE"]


class ConfigManager:
    """
    Main configuration manager with include system support

    Loads config.yaml and processes the `include:` directive to merge modular
    YAML files. Falls back to factory_defaults.yaml when loading fails.

    Example:
        config = ConfigManager()
        config.load()

        timing = config.get_animation_timing()
        keys = config.get_skip_keys()
    """

    def __init__(
        self,
        config_path="config/config.yaml",
        defaults_path="config/factory_defaults.yaml",
        base_dir: Optional[Path] = None,
    ):
        """
        Args:
            config_path: Main config file (relative paths resolve against src/)
            defaults_path: Factory defaults fallback
            base_dir: Override for the directory relative paths resolve against
        """
        base = Path(base_dir) if base_dir else SRC_DIR
        self.config_path = base / Path(config_path)
        self.factory_defaults_path = base / Path(defaults_path)
        self.data: Dict[str, Any] = {}
        self.used_defaults = False

    def load(self) -> Dict[str, Any]:
        """
        Load YAML configuration

        Process:
        1. Load main config.yaml
        2. If it has an 'include:' list, load and merge those files
        3. Otherwise treat it as a monolithic config
        4. Fall back to factory defaults on any failure

        Returns:
            Merged config data dict
        """
        try:
            with open(self.config_path, "r", encoding="utf-8") as f:
                main_config = yaml.safe_load(f) or {}

            if 'include' in main_config:
                log.debug("Using include-based configuration")
                includes = main_config.pop('include') or []
                self.data = self._load_with_includes(includes, self.config_path.parent)
                # Keys defined next to the include list override included files
                self.data.update(main_config)
            else:
                log.debug("Using monolithic configuration")
                self.data = main_config
            self.used_defaults = False

        except Exception as ex:
            log.error("Failed to load config", path=str(self.config_path), error=str(ex), error_type=type(ex).__name__)
            log.warn("Falling back to factory defaults")

            with open(self.factory_defaults_path, "r", encoding="utf-8") as f:
                self.data = yaml.safe_load(f) or {}
            self.used_defaults = True

        return self.data

    def _load_with_includes(self, include_list: List[str], config_dir: Path) -> Dict[str, Any]:
        """
        Load and merge multiple YAML files from include list

        Raises:
            FileNotFoundError: an included file is missing
        """
        merged: Dict[str, Any] = {}

        for filename in include_list:
            filepath = config_dir / filename
            try:
                with open(filepath, 'r', encoding='utf-8') as f:
                    file_data = yaml.safe_load(f)
                if file_data:
                    merged.update(file_data)
                    log.debug(f"Loaded {filename}", keys=str(list(file_data.keys())))
            except FileNotFoundError:
                log.error(f"File not found: {filename}")
                raise

        log.debug("Config merge complete", total_keys=len(merged))
        return merged

    # ===== Typed accessors =====

    def _section(self, name: str) -> Dict[str, Any]:
        section = self.data.get(name) or {}
        if not isinstance(section, dict):
            log.warn(f"Config section '{name}' is not a mapping, ignoring")
            return {}
        return section

    def get_animation_timing(self) -> AnimationTiming:
        """Playback durations; invalid values fall back to the defaults"""
        section = self._section("animation")
        defaults = AnimationTiming()
        try:
            return AnimationTiming(
                transition_ms=section.get("transition_ms", defaults.transition_ms),
                hold_ms=section.get("hold_ms", defaults.hold_ms),
            )
        except InvalidTimingError as ex:
            log.error("Invalid animation timing, using defaults", error=str(ex))
            return defaults

    def get_skip_keys(self) -> List[str]:
        keys = self._section("input").get("skip_keys")
        if not keys:
            return list(DEFAULT_SKIP_KEYS)
        return [str(k).upper() for k in keys]

    def is_keyboard_enabled(self) -> bool:
        return bool(self._section("input").get("keyboard_enabled", True))

    def get_log_settings(self) -> Tuple[LogLevel, bool]:
        """(min_level, use_colors)"""
        section = self._section("logging")
        level_name = str(section.get("level", "INFO")).upper()
        try:
            level = Serializer.str_to_enum(level_name, LogLevel)
        except ValueError:
            log.warn(f"Unknown log level '{level_name}', using INFO")
            level = LogLevel.INFO
        return level, bool(section.get("colors", True))
