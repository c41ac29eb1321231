"""Environment variable handling for configuration."""

import os
from typing import Any

from icsgen.config.types import GlobalConfig
from icsgen.config.types import LoggingConfig


class EnvConfig:
    """Environment variable configuration."""

    # Mapping of environment variables to configuration paths
    ENV_MAPPING = {
        'ICSGEN_TIMEZONE': ('timezone',),
        'ICSGEN_FILENAME': ('filename',),
        'ICSGEN_CONFIG_DIR': ('directories', 'config'),
        'ICSGEN_OUTPUT_DIR': ('directories', 'output'),
        'ICSGEN_LOG_LEVEL': ('logging', 'level'),
        'ICSGEN_LOG_FILE': ('logging', 'file'),
        'ICSGEN_LOG_FORMAT': ('logging', 'format'),
    }

    @staticmethod
    def get_env_value(env_var: str, default: Any | None = None) -> Any | None:
        """Get value from environment variable with default."""
        return os.getenv(env_var, default)

    @staticmethod
    def _set_nested_value(config: dict[str, Any], path: tuple, value: Any) -> None:
        """Set value in nested dictionary using path tuple."""
        current = config
        for part in path[:-1]:
            current = current.setdefault(part, {})
        current[path[-1]] = value

    @classmethod
    def update_config_from_env(cls, config: dict[str, Any]) -> None:
        """Override configuration values with any environment variables that are set."""
        for env_var, path in cls.ENV_MAPPING.items():
            value = cls.get_env_value(env_var)
            if value is not None:
                cls._set_nested_value(config, path, value)

    @classmethod
    def get_logging_config(cls) -> LoggingConfig:
        """Get logging configuration from environment."""
        return {
            'level': cls.get_env_value('ICSGEN_LOG_LEVEL', 'WARNING'),
            'file': cls.get_env_value('ICSGEN_LOG_FILE'),
            'format': cls.get_env_value('ICSGEN_LOG_FORMAT', 'text'),
        }

    @classmethod
    def get_global_config(cls) -> GlobalConfig:
        """Get global configuration from environment."""
        return {
            'timezone': cls.get_env_value('ICSGEN_TIMEZONE'),
            'filename': cls.get_env_value('ICSGEN_FILENAME', 'event'),
            'directories': {
                'config': cls.get_env_value('ICSGEN_CONFIG_DIR', '.'),
                'output': cls.get_env_value('ICSGEN_OUTPUT_DIR', '.')
            },
            'logging': cls.get_logging_config()
        }
