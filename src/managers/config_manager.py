"""
Config Manager

Loads engine.yaml (optionally split with an include: list) and builds the
immutable EngineConfig. Anything missing or invalid falls back to the
factory defaults defined in models.config.
"""

from dataclasses import fields, is_dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml

from models.config import (
    EngineConfig,
    TypewriterConfig,
    ScrollConfig,
    NavigationConfig,
    FormConfig,
    ParticleConfig,
    ThemeConfig,
    MessagingConfig,
    LoggingConfig,
)
from models.enums import LogLevel
from models.errors import ValidationError
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.CONFIG)

SRC_DIR = Path(__file__).parent.parent

SECTIONS = {
    "typewriter": TypewriterConfig,
    "scroll": ScrollConfig,
    "navigation": NavigationConfig,
    "form": FormConfig,
    "particles": ParticleConfig,
    "theme": ThemeConfig,
    "messaging": MessagingConfig,
    "logging": LoggingConfig,
}


class ConfigManager:
    """
    Main configuration manager with include system support

    Example:
        config = ConfigManager().load()
        config.typewriter.phrases    # ("Your Name", "Frontend Developer")
        config.scroll.threshold      # 20.0
    """

    def __init__(self, config_path: Union[str, Path] = "config/engine.yaml"):
        """
        Args:
            config_path: Path to engine.yaml (relative paths resolve against src/)
        """
        path = Path(config_path)
        self.config_path = path if path.is_absolute() else SRC_DIR / path
        self.data: Dict[str, Any] = {}
        self.config: EngineConfig = EngineConfig()

    def load(self) -> EngineConfig:
        """
        Load YAML configuration

        Process:
        1. Load engine.yaml
        2. If it has an 'include:' list, load and merge those files
        3. Build each section over its factory defaults
        4. Missing/invalid file → factory defaults for everything
        """
        try:
            with open(self.config_path, "r", encoding="utf-8") as f:
                main_config = yaml.safe_load(f) or {}

            if not isinstance(main_config, dict):
                raise ValueError("top-level YAML value must be a mapping")

            if "include" in main_config:
                includes = main_config.pop("include") or []
                self.data = self._load_with_includes(includes, self.config_path.parent)
                self.data.update(main_config)
            else:
                self.data = main_config

        except Exception as ex:
            log.error(f"Failed to load {self.config_path.name}", error=str(ex), error_type=type(ex).__name__)
            log.warn("Falling back to factory defaults")
            self.data = {}

        self.config = self._build(self.data)
        log.info("Configuration loaded", path=str(self.config_path), sections=", ".join(sorted(self.data)) or "-")
        return self.config

    def _load_with_includes(self, include_list: List[str], config_dir: Path) -> Dict[str, Any]:
        """Load and merge multiple YAML files (later files win on key clashes)."""
        merged: Dict[str, Any] = {}

        for filename in include_list:
            filepath = config_dir / filename
            with open(filepath, "r", encoding="utf-8") as f:
                file_data = yaml.safe_load(f)
            if file_data:
                merged.update(file_data)
                log.debug(f"Loaded {filename}", keys=str(list(file_data.keys())))

        return merged

    # ===== Section builders =====

    def _build(self, data: Dict[str, Any]) -> EngineConfig:
        for key in data:
            if key not in SECTIONS:
                log.warn(f"Unknown config section ignored: {key}")

        sections = {name: self._build_section(name, cls, data.get(name)) for name, cls in SECTIONS.items()}
        return EngineConfig(**sections)

    def _build_section(self, name: str, cls, raw: Optional[Any]):
        if raw is None:
            return cls()
        if not isinstance(raw, dict):
            log.error(f"Config section '{name}' must be a mapping, using defaults")
            return cls()

        known = {f.name for f in fields(cls)}
        values = {}
        for key, value in raw.items():
            if key not in known:
                log.warn(f"Unknown key '{name}.{key}' ignored")
                continue
            values[key] = value

        try:
            values = self._coerce(name, values)
            section = cls(**values)
            self._check(name, section)
            return section
        except (TypeError, ValueError, KeyError, ValidationError) as ex:
            log.error(f"Invalid config section '{name}', using defaults", error=str(ex))
            return cls()

    @staticmethod
    def _coerce(name: str, values: Dict[str, Any]) -> Dict[str, Any]:
        if name == "typewriter" and "phrases" in values:
            phrases = values["phrases"]
            if isinstance(phrases, str) or not isinstance(phrases, (list, tuple)):
                raise ValueError("typewriter.phrases must be a list of strings")
            values["phrases"] = tuple(str(p) for p in phrases)
        if name == "logging" and "level" in values:
            level = values["level"]
            if not isinstance(level, LogLevel):
                values["level"] = LogLevel[str(level).upper()]
        if name == "particles" and "count" in values:
            values["count"] = int(values["count"])
        return values

    @staticmethod
    def _check(name: str, section) -> None:
        """Reject values the components would refuse at construction time."""
        if name == "typewriter":
            if not section.phrases or any(not p for p in section.phrases):
                raise ValidationError("typewriter.phrases", "must be non-empty strings")
            if min(section.type_interval, section.delete_interval, section.pause) <= 0:
                raise ValidationError("typewriter", "intervals must be positive")
        if name == "form" and section.shake_duration < 0:
            raise ValidationError("form.shake_duration", "must be >= 0")
        if name == "particles" and section.count < 0:
            raise ValidationError("particles.count", "must be >= 0")

    def as_dict(self) -> Dict[str, Any]:
        """Effective configuration (for diagnostics)"""
        config = self.config
        return {name: _to_plain(getattr(config, name)) for name in SECTIONS}


def _to_plain(obj):
    if is_dataclass(obj):
        return {f.name: _to_plain(getattr(obj, f.name)) for f in fields(obj)}
    if isinstance(obj, LogLevel):
        return obj.name
    if isinstance(obj, tuple):
        return list(obj)
    return obj
