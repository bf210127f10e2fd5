"""YAML configuration loader with inheritance support.

Supports:
- Loading YAML config files
- Config inheritance via 'extends' key
- Deep merging of nested config
"""

import logging
from pathlib import Path
from typing import Any

import yaml

from . import CadenceConfig, EngineConfig, LoggingConfig

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_DIR = Path(__file__).parent.parent.parent.parent / "config"


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries.

    Values from override take precedence. Nested dicts are merged recursively.
    """
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def load_yaml_with_inheritance(path: Path) -> dict[str, Any]:
    """Load YAML file with inheritance support.

    If the file contains an 'extends' key, the base config is loaded first
    and merged with the current config.
    """
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path) as f:
        config = yaml.safe_load(f) or {}

    if "extends" in config:
        base_name = config.pop("extends")
        base_config = load_yaml_with_inheritance(path.parent / base_name)
        config = deep_merge(base_config, config)

    return config


def dict_to_config(data: dict[str, Any]) -> CadenceConfig:
    """Convert raw dict to typed CadenceConfig dataclass."""
    cadence_data = data.get("cadence", {}) or {}

    # YAML sections left empty load as None
    def safe_get(key: str) -> dict[str, Any]:
        value = cadence_data.get(key, {})
        return value if value is not None else {}

    return CadenceConfig(
        engine=EngineConfig(**safe_get("engine")),
        logging=LoggingConfig(**safe_get("logging")),
    )


class YAMLConfigLoader:
    """YAML configuration loader implementation."""

    def __init__(self, config_dir: Path | None = None) -> None:
        """Initialize loader with optional config directory.

        Args:
            config_dir: Directory containing config files.
                        Defaults to 'config' relative to project root.
        """
        self._config_dir = config_dir if config_dir is not None else DEFAULT_CONFIG_DIR

    def load(self, path: Path) -> CadenceConfig:
        """Load configuration from file path.

        Args:
            path: Path to YAML config file

        Returns:
            Parsed CadenceConfig
        """
        logger.debug(f"Loading config from {path}")
        return dict_to_config(load_yaml_with_inheritance(path))

    def load_profile(self, profile: str) -> CadenceConfig:
        """Load configuration by profile name.

        Args:
            profile: Profile name (e.g., 'dev', 'prod')

        Returns:
            Parsed CadenceConfig for the profile
        """
        return self.load(self._config_dir / f"{profile}.yaml")


def load_config(path: str | Path | None = None, profile: str | None = None) -> CadenceConfig:
    """Load configuration.

    Args:
        path: Direct path to config file (takes precedence)
        profile: Profile name ('dev', 'prod', 'test') if path not given

    Returns:
        Parsed CadenceConfig

    Examples:
        >>> config = load_config(profile="dev")
        >>> config = load_config(path="/path/to/config.yaml")
    """
    loader = YAMLConfigLoader()

    if path is not None:
        return loader.load(Path(path))
    elif profile is not None:
        return loader.load_profile(profile)
    else:
        return loader.load_profile("dev")


__all__ = [
    "DEFAULT_CONFIG_DIR",
    "YAMLConfigLoader",
    "deep_merge",
    "dict_to_config",
    "load_config",
    "load_yaml_with_inheritance",
]
