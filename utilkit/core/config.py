"""
Configuration utilities for utilkit.
Provides settings loading from the environment or a JSON/YAML file.
"""

import json
import logging
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml

from .errors import ConfigurationError
from .types import RetryOptions

logger = logging.getLogger(__name__)

ENV_PREFIX = "UTILKIT_"

_LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


def get_config_value(key: str, default: Any = None,
                     cast_type: Optional[type] = None,
                     env_prefix: str = ENV_PREFIX) -> Any:
    """
    Get configuration value from environment or return default.
    Optionally cast to specified type.
    """
    env_key = f"{env_prefix}{key.upper()}"
    value = os.environ.get(env_key, default)

    if value is None or cast_type is None:
        return value

    try:
        if cast_type == bool:
            if isinstance(value, str):
                return value.lower() in ('true', '1', 'yes', 'on')
            return bool(value)
        return cast_type(value)
    except (ValueError, TypeError):
        logger.warning(f"Ignoring invalid value for {env_key}: {value!r}")
        return default


def get_bool_config(key: str, default: bool = False,
                    env_prefix: str = ENV_PREFIX) -> bool:
    """Get boolean configuration value."""
    return get_config_value(key, default, bool, env_prefix)


def get_int_config(key: str, default: int = 0,
                   env_prefix: str = ENV_PREFIX) -> int:
    """Get integer configuration value."""
    return get_config_value(key, default, int, env_prefix)


def get_float_config(key: str, default: float = 0.0,
                     env_prefix: str = ENV_PREFIX) -> float:
    """Get float configuration value."""
    return get_config_value(key, default, float, env_prefix)


@dataclass
class Settings:
    """Library-wide settings. Helpers never read these implicitly."""
    log_level: str = "WARNING"
    retry_retries: int = 3
    retry_delay_ms: float = 1000
    retry_backoff: bool = False
    id_length: int = 16
    slug_length: int = 64
    bytes_decimals: int = 2

    @classmethod
    def from_env(cls, prefix: str = ENV_PREFIX) -> "Settings":
        """Create settings from environment variables"""
        defaults = cls()
        return cls(
            log_level=get_config_value("log_level", defaults.log_level, str, prefix).upper(),
            retry_retries=get_int_config("retry_retries", defaults.retry_retries, prefix),
            retry_delay_ms=get_float_config("retry_delay_ms", defaults.retry_delay_ms, prefix),
            retry_backoff=get_bool_config("retry_backoff", defaults.retry_backoff, prefix),
            id_length=get_int_config("id_length", defaults.id_length, prefix),
            slug_length=get_int_config("slug_length", defaults.slug_length, prefix),
            bytes_decimals=get_int_config("bytes_decimals", defaults.bytes_decimals, prefix),
        )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Settings":
        """Create settings from a mapping, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            logger.warning(f"Ignoring unknown settings: {', '.join(unknown)}")
        return cls(**{key: value for key, value in data.items() if key in known})

    @classmethod
    def from_file(cls, file_path: Union[str, Path]) -> "Settings":
        """Load settings from a JSON or YAML file."""
        path = Path(file_path)
        if not path.exists():
            raise ConfigurationError(f"Configuration file not found: {path}")

        suffix = path.suffix.lower()
        try:
            with open(path, 'r', encoding='utf-8') as f:
                if suffix == '.json':
                    data = json.load(f)
                elif suffix in ('.yaml', '.yml'):
                    data = yaml.safe_load(f)
                else:
                    raise ConfigurationError(f"Unsupported configuration file format: {suffix}")
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Failed to parse {path}", cause=e) from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration root must be a mapping: {path}")

        logger.info(f"Loaded settings from {path}")
        return cls.from_dict(data)

    def validate(self) -> bool:
        """Validate the settings"""
        errors: List[str] = []
        if self.log_level.upper() not in _LOG_LEVELS:
            errors.append(f"log_level must be one of: {', '.join(_LOG_LEVELS)}")
        if self.retry_retries < 0:
            errors.append("retry_retries must be >= 0")
        if self.retry_delay_ms < 0:
            errors.append("retry_delay_ms must be >= 0")
        if self.id_length < 0:
            errors.append("id_length must be >= 0")
        if self.slug_length < 0:
            errors.append("slug_length must be >= 0")

        if errors:
            raise ConfigurationError("; ".join(errors), details={'errors': errors})
        return True

    def retry_options(self) -> RetryOptions:
        """Build RetryOptions from these settings."""
        return RetryOptions(
            retries=self.retry_retries,
            delay=self.retry_delay_ms,
            backoff=self.retry_backoff,
        )
