"""Configuration management with environment variable integration and validation."""

import os
import yaml
from pathlib import Path
from typing import Dict, Any, Optional

from .types import JobFilterConfig
from .errors import ConfigurationError

ENV_PREFIX = "JOBFILTER_"


def load_env_overrides(prefix: str = ENV_PREFIX) -> Dict[str, Any]:
    """Load environment variables with the given prefix and convert to appropriate types."""
    overrides: Dict[str, Any] = {}

    for key, value in os.environ.items():
        if key.startswith(prefix):
            field_name = key[len(prefix) :].lower()

            # Nested sections, e.g. JOBFILTER_SECTION__FIELD
            if "__" in field_name:
                parts = field_name.split("__")
                if len(parts) == 2:
                    section, sub_field = parts
                    overrides.setdefault(section, {})[sub_field] = _convert_env_value(
                        value
                    )
                continue

            overrides[field_name] = _convert_env_value(value)

    return overrides


def _convert_env_value(value: str) -> Any:
    """Convert string environment value to appropriate Python type."""
    if not value:
        return None

    # Numbers before booleans so "1" stays an int
    try:
        return int(value)
    except ValueError:
        pass

    try:
        return float(value)
    except ValueError:
        pass

    if value.lower() in ("true", "yes", "on"):
        return True
    elif value.lower() in ("false", "no", "off"):
        return False

    if "," in value:
        return [item.strip() for item in value.split(",")]

    return value


class ConfigManager:
    """Central configuration management."""

    def __init__(self) -> None:
        self._config: Optional[JobFilterConfig] = None

    def load_config(
        self, config_file: Optional[Path] = None, **overrides: Any
    ) -> JobFilterConfig:
        """Load configuration from file and environment with CLI overrides.

        Precedence, highest first: CLI overrides, environment variables,
        config file, model defaults.
        """
        config_data: Dict[str, Any] = {}

        if config_file is not None:
            config_file = Path(config_file)
            if not config_file.exists():
                raise ConfigurationError(f"Config file not found: {config_file}")
            config_data.update(self._load_from_file(config_file))

        config_data.update(load_env_overrides())

        # None means "not given on the command line"
        config_data.update({k: v for k, v in overrides.items() if v is not None})

        try:
            self._config = JobFilterConfig(**config_data)
        except ValueError as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e

        return self._config

    def get_config(self) -> JobFilterConfig:
        """Get current configuration."""
        if self._config is None:
            self._config = self.load_config()
        return self._config

    def _load_from_file(self, config_file: Path) -> Dict[str, Any]:
        """Load configuration from YAML file."""
        if config_file.suffix.lower() not in (".yml", ".yaml"):
            raise ConfigurationError(
                f"Unsupported config file format: {config_file.suffix}"
            )
        try:
            with open(config_file, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigurationError(
                f"Failed to load config file {config_file}: {e}"
            ) from e

        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Config file {config_file} must contain a mapping"
            )
        return data


# Global config manager instance
_config_manager = ConfigManager()


def load_config(**kwargs: Any) -> JobFilterConfig:
    """Load global configuration."""
    return _config_manager.load_config(**kwargs)


def get_config() -> JobFilterConfig:
    """Get current global configuration."""
    return _config_manager.get_config()
