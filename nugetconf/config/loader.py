"""Configuration loading and parsing."""

import copy
import yaml
from pathlib import Path
from typing import Dict, Any, Optional

DEFAULT_CONFIG_FILE = "nugetconf.yaml"

DEFAULT_CONFIG: Dict[str, Any] = {
    'nuget': {
        'config_path': 'nuget.config',
        'pretty_print': False,
        'backup': False,
        'backup_keep': 5,
    },
    'proxy': {},
    'logging': {
        'level': 'INFO',
        'console': True,
        'file': None,
    },
}


class ConfigError(Exception):
    """Configuration-related errors."""
    pass


def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load and parse configuration file.

    Args:
        config_path: Path to a YAML config file. If None, ./nugetconf.yaml is
            used when present and defaults otherwise.

    Returns:
        Parsed configuration dictionary, with defaults filled in

    Raises:
        ConfigError: If config file cannot be loaded or parsed
    """
    if config_path is None:
        config_path = Path.cwd() / DEFAULT_CONFIG_FILE
        if not config_path.exists():
            return _apply_defaults({})
    else:
        config_path = Path(config_path)

    if not config_path.exists():
        raise ConfigError(f"Configuration file not found: {config_path}")

    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in config file: {e}")
    except OSError as e:
        raise ConfigError(f"Failed to read config file: {e}")

    # Empty file
    if config is None:
        config = {}

    if not isinstance(config, dict):
        raise ConfigError("Configuration file must contain a YAML dictionary")

    return _apply_defaults(config)


def _apply_defaults(config: Dict[str, Any]) -> Dict[str, Any]:
    """Fill in missing sections and keys from DEFAULT_CONFIG."""
    merged = copy.deepcopy(DEFAULT_CONFIG)

    for section, values in config.items():
        if values is None and section in merged:
            # Empty section in YAML ("proxy:")
            continue
        if isinstance(values, dict) and isinstance(merged.get(section), dict):
            merged[section].update(values)
        else:
            merged[section] = values

    return merged


def get_config_value(config: Dict[str, Any], path: str, default: Any = None) -> Any:
    """
    Get a nested configuration value using dot notation.

    Args:
        config: Configuration dictionary
        path: Dot-separated path (e.g., 'proxy.url')
        default: Default value if path not found

    Returns:
        Configuration value or default

    Example:
        >>> get_config_value(config, 'nuget.config_path')
        'nuget.config'
    """
    keys = path.split('.')
    value = config

    for key in keys:
        if isinstance(value, dict) and key in value:
            value = value[key]
        else:
            return default

    return value
