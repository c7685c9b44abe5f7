"""
Configuration utilities for nsc.
Settings come from defaults, an optional JSON/YAML file and NSC_-prefixed
environment variables, in that order of precedence.
"""

import json
import logging
import os
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from ..types.errors import ConfigurationError

ENV_PREFIX = "NSC_"

LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


def get_config_value(key: str, default: Any = None,
                     cast_type: Optional[type] = None,
                     env_prefix: str = ENV_PREFIX) -> Any:
    """
    Read ``<env_prefix><KEY>`` from the environment, falling back to ``default``.

    With ``cast_type`` the value is converted; a value that won't convert
    yields ``default``.
    """
    value = os.environ.get(f"{env_prefix}{key.upper()}")
    if value is None:
        return default
    if cast_type is None:
        return value

    try:
        if cast_type is bool:
            return _to_bool(value)
        return cast_type(value)
    except (ValueError, TypeError):
        return default


def get_bool_config(key: str, default: bool = False,
                    env_prefix: str = ENV_PREFIX) -> bool:
    """Get boolean configuration value."""
    return get_config_value(key, default, bool, env_prefix)


def _to_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.lower() in ('true', '1', 'yes', 'on')
    return bool(value)


def merge_configs(*configs: Dict[str, Any]) -> Dict[str, Any]:
    """
    Merge multiple configuration dictionaries.
    Later configs override earlier ones.
    """
    result = {}

    for config in configs:
        if isinstance(config, dict):
            result.update(config)

    return result


def load_config_file(file_path: str) -> Dict[str, Any]:
    """Load configuration from a file (JSON or YAML)."""
    if not os.path.exists(file_path):
        raise FileNotFoundError(f"Configuration file not found: {file_path}")

    file_ext = Path(file_path).suffix.lower()

    with open(file_path, 'r', encoding='utf-8') as f:
        if file_ext == '.json':
            data = json.load(f)
        elif file_ext in ('.yaml', '.yml'):
            data = yaml.safe_load(f)
        else:
            raise ConfigurationError(
                f"Unsupported configuration file format: {file_ext}",
                config_key="config_file", config_value=file_path
            )

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(
            "Configuration file must contain a mapping",
            config_key="config_file", config_value=file_path
        )
    return data


@dataclass
class Settings:
    """Settings shared by commands that use the parsing core."""
    log_level: str = "WARNING"
    output: str = "--"
    debug: bool = False

    def __post_init__(self):
        self.log_level = str(self.log_level).upper()
        self.debug = _to_bool(self.debug)

    def validate(self) -> bool:
        """Validate the settings"""
        if self.log_level not in LOG_LEVELS:
            raise ConfigurationError(
                f"log_level must be one of {', '.join(LOG_LEVELS)}",
                config_key="log_level", config_value=self.log_level
            )
        if not self.output:
            raise ConfigurationError("output is required", config_key="output")
        return True

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Settings":
        known = {k: v for k, v in data.items() if k in cls.__dataclass_fields__}
        return cls(**known)

    @classmethod
    def from_env(cls, prefix: str = ENV_PREFIX,
                 base: Optional["Settings"] = None) -> "Settings":
        """Create settings from environment variables, defaulting to ``base``."""
        base = base or cls()
        return cls(
            log_level=get_config_value("log_level", base.log_level, str, prefix),
            output=get_config_value("output", base.output, str, prefix),
            debug=get_bool_config("debug", base.debug, prefix),
        )

    @classmethod
    def load(cls, file_path: Optional[str] = None, prefix: str = ENV_PREFIX) -> "Settings":
        """Defaults, then the file if given, then the environment."""
        file_config = load_config_file(file_path) if file_path else {}
        base = cls.from_dict(merge_configs(asdict(cls()), file_config))
        settings = cls.from_env(prefix, base=base)
        settings.validate()
        return settings

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def configure_logging(settings: Settings) -> None:
    """Install a basic stderr handler at the configured level."""
    level = logging.DEBUG if settings.debug else getattr(logging, settings.log_level, logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger("nsc").setLevel(level)
