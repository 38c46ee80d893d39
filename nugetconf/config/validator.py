"""Configuration validation."""

import logging
from typing import Dict, Any, List
from urllib.parse import urlsplit

logger = logging.getLogger(__name__)

VALID_LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']


class ValidationError(Exception):
    """Configuration validation errors."""
    pass


def validate_config(config: Dict[str, Any]) -> None:
    """
    Validate configuration structure and values.

    Args:
        config: Configuration dictionary from loader

    Raises:
        ValidationError: If configuration is invalid
    """
    errors = []

    for section in ('nuget', 'proxy', 'logging'):
        if not isinstance(config.get(section, {}), dict):
            errors.append(f"{section} must be a mapping")

    if not errors:
        errors.extend(_validate_nuget(config.get('nuget', {})))
        errors.extend(_validate_proxy(config.get('proxy', {})))
        errors.extend(_validate_logging(config.get('logging', {})))

    if errors:
        raise ValidationError(
            "Configuration validation failed:\n  - " + "\n  - ".join(errors)
        )


def _validate_nuget(section: Dict[str, Any]) -> List[str]:
    """Validate nuget file options section."""
    errors = []

    config_path = section.get('config_path')
    if not config_path or not isinstance(config_path, str):
        errors.append("nuget.config_path must be a non-empty string")

    for flag in ('pretty_print', 'backup'):
        if flag in section and not isinstance(section[flag], bool):
            errors.append(f"nuget.{flag} must be a boolean")

    if 'backup_keep' in section:
        keep = section['backup_keep']
        if not isinstance(keep, int) or isinstance(keep, bool) or keep < 0:
            errors.append("nuget.backup_keep must be a non-negative integer")

    return errors


def _validate_proxy(section: Dict[str, Any]) -> List[str]:
    """Validate proxy section."""
    errors = []

    url = section.get('url')
    if url:
        if not isinstance(url, str):
            errors.append("proxy.url must be a string")
        else:
            parts = urlsplit(url)
            if not parts.scheme or not parts.netloc:
                errors.append(f"proxy.url must include a scheme and host: {url}")

    for key in ('username', 'password'):
        value = section.get(key)
        if value is not None and not isinstance(value, str):
            errors.append(f"proxy.{key} must be a string")

    if section.get('password') and not section.get('username'):
        logger.warning("proxy.password is set without proxy.username and will be ignored")

    return errors


def _validate_logging(section: Dict[str, Any]) -> List[str]:
    """Validate logging section."""
    errors = []

    level = section.get('level', 'INFO')
    if not isinstance(level, str) or level.upper() not in VALID_LOG_LEVELS:
        errors.append(
            f"logging.level must be one of: {', '.join(VALID_LOG_LEVELS)}"
        )

    if 'console' in section and not isinstance(section['console'], bool):
        errors.append("logging.console must be a boolean")

    log_file = section.get('file')
    if log_file is not None and not isinstance(log_file, str):
        errors.append("logging.file must be a string path")

    return errors
