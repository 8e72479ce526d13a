"""Configuration management for Minimal Task."""

import logging
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .classifier import HEADER_MARKER, PLAIN_SECTION, RECURRING_SECTION, SectionNames
from .exceptions import ConfigError
from .utils.datetime import DEFAULT_DATE_FORMAT, DEFAULT_TIME_FORMAT


logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "MINIMAL_TASK_CONFIG"
DEFAULT_CONFIG_PATH = "~/.minimal-task/config.yaml"

_TRUE_VALUES = {"true", "yes", "on", "1"}
_FALSE_VALUES = {"false", "no", "off", "0"}


@dataclass
class ConfigModel:
    """Settings for the task and archive documents."""

    # Documents
    vault_dir: str = "."
    task_file: str = "task.md"
    done_file: str = "task_done.md"

    # Date preferences (empty means the default pattern)
    date_format: str = ""
    time_format: str = ""
    stamp_completion_time: bool = False

    # Navigation in an editor host; kept so existing settings round-trip
    auto_open_task_file: bool = True

    # Section labels
    header_marker: str = HEADER_MARKER
    recurring_section: str = RECURRING_SECTION
    plain_section: str = PLAIN_SECTION

    def __post_init__(self):
        """Post-initialization setup."""
        self.vault_dir = os.path.expanduser(str(self.vault_dir))

    @property
    def effective_date_format(self) -> str:
        return self.date_format or DEFAULT_DATE_FORMAT

    @property
    def effective_time_format(self) -> str:
        return self.time_format or DEFAULT_TIME_FORMAT

    @property
    def sections(self) -> SectionNames:
        return SectionNames(recurring=self.recurring_section, plain=self.plain_section)

    def to_dict(self) -> Dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}

    def to_yaml(self) -> str:
        """Serialize config to YAML."""
        return yaml.safe_dump(self.to_dict(), default_flow_style=False, allow_unicode=True, sort_keys=False)

    @classmethod
    def from_yaml(cls, yaml_str: str) -> "ConfigModel":
        """Deserialize config from YAML."""
        try:
            data = yaml.safe_load(yaml_str) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError("Configuration must be a mapping of settings")

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"Unknown configuration key(s): {', '.join(unknown)}")

        for f in fields(cls):
            if f.name not in data:
                continue
            value = data[f.name]
            if f.type in (bool, "bool") and not isinstance(value, bool):
                raise ConfigError(f"Expected a boolean for {f.name}, got {value!r}")
            if f.type in (str, "str") and not isinstance(value, str):
                raise ConfigError(f"Expected a string for {f.name}, got {value!r}")

        return cls(**data)

    def set_value(self, key: str, value: str) -> None:
        """Set a setting from its string form, converting booleans."""
        field_types = {f.name: f.type for f in fields(self)}
        if key not in field_types:
            raise ConfigError(f"Unknown configuration key: {key}")

        if field_types[key] in (bool, "bool"):
            lowered = value.strip().lower()
            if lowered in _TRUE_VALUES:
                converted: Any = True
            elif lowered in _FALSE_VALUES:
                converted = False
            else:
                raise ConfigError(f"Expected a boolean for {key}, got {value!r}")
        elif key == "header_marker":
            # Surrounding whitespace is significant for the marker
            converted = value
        else:
            converted = value.strip()

        setattr(self, key, converted)
        if key == "vault_dir":
            self.vault_dir = os.path.expanduser(self.vault_dir)


def get_config_path() -> Path:
    """Get the config file path, honoring the environment override."""
    return Path(os.path.expanduser(os.environ.get(CONFIG_ENV_VAR, DEFAULT_CONFIG_PATH)))


def load_config(config_path: Optional[Path] = None) -> ConfigModel:
    """Load configuration from file, falling back to defaults when absent."""
    if config_path is None:
        config_path = get_config_path()

    if not config_path.exists():
        logger.debug(f"No configuration at {config_path}, using defaults")
        return ConfigModel()

    try:
        yaml_content = config_path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Failed to read config from {config_path}: {e}") from e

    config = ConfigModel.from_yaml(yaml_content)
    logger.debug(f"Loaded configuration from {config_path}")
    return config


def save_config(config: ConfigModel, config_path: Optional[Path] = None) -> Path:
    """Save configuration to file."""
    if config_path is None:
        config_path = get_config_path()

    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        config_path.write_text(config.to_yaml(), encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Failed to save config to {config_path}: {e}") from e

    logger.info(f"Configuration saved to {config_path}")
    return config_path
