"""Configuration settings for the iCalendar generator."""

import logging
import os
from pathlib import Path

import yaml

from icsgen.config.env import EnvConfig
from icsgen.config.types import AppConfig
from icsgen.config.types import GlobalConfig
from icsgen.config.utils import deep_merge
from icsgen.config.utils import resolve_path
from icsgen.exceptions import ConfigError
from icsgen.utils.timezone_utils import TimezoneManager

CONFIG_FILE_NAME = "config.yaml"

LOG_FORMATS = ('text', 'json')


class ConfigurationManager:
    """Centralized configuration management with caching."""
    
    _instance = None
    
    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance
    
    def __init__(self):
        if self._initialized:
            return
            
        self._config: AppConfig | None = None
        self._config_path: Path | None = None
        self._initialized = True
    
    @property
    def config(self) -> AppConfig:
        """Get the current configuration, loading it if necessary."""
        if self._config is None:
            return self.load_config()
        return self._config
    
    def load_config(self, config_dir: str | None = None) -> AppConfig:
        """Load configuration with caching."""
        if self._config is not None:
            return self._config
            
        self._config_path = _get_config_path(config_dir)
        global_config = _load_global_config(self._config_path)
        _validate_global_config(global_config)
        
        self._config = AppConfig(
            global_config=global_config,
            timezone=global_config.get('timezone'),
            filename=global_config.get('filename', 'event'),
            output_dir=global_config['directories'].get('output', '.'),
            config_dir=str(self._config_path),
            log_level=global_config['logging'].get('level', 'WARNING'),
            log_file=global_config['logging'].get('file'),
            log_format=global_config['logging'].get('format', 'text')
        )
        
        return self._config
    
    def reload_config(self, config_dir: str | None = None) -> AppConfig:
        """Force reload configuration."""
        self._config = None
        return self.load_config(config_dir)

def _get_config_path(config_dir: str | None = None) -> Path:
    """Get configuration directory path."""
    return resolve_path(config_dir or os.getenv("ICSGEN_CONFIG_DIR", "."))

def _load_global_config(config_path: Path) -> GlobalConfig:
    """Load global configuration from defaults, YAML file and environment.
    
    Environment variables that are set take precedence over the file.
    """
    global_config = EnvConfig.get_global_config()
    
    config_file = config_path / CONFIG_FILE_NAME
    if config_file.exists():
        try:
            with open(config_file, encoding="utf-8") as f:
                loaded_config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {config_file}", {"error": str(e)}) from e
        
        if loaded_config is not None and not isinstance(loaded_config, dict):
            raise ConfigError(
                f"Configuration file {config_file} must contain a mapping",
                {"type": type(loaded_config).__name__}
            )
        for section in ("directories", "logging"):
            if loaded_config and section in loaded_config and not isinstance(loaded_config[section], dict):
                raise ConfigError(
                    f"Section '{section}' in {config_file} must be a mapping",
                    {"section": section, "type": type(loaded_config[section]).__name__}
                )
        global_config = deep_merge(global_config, loaded_config)
        EnvConfig.update_config_from_env(global_config)
    
    return global_config

def _validate_global_config(global_config: GlobalConfig) -> None:
    """Validate values that would otherwise fail later."""
    timezone = global_config.get('timezone')
    if timezone and not TimezoneManager.is_valid_timezone(timezone):
        raise ConfigError(f"Invalid timezone {timezone}", {"timezone": timezone})
    
    level = str(global_config['logging'].get('level', 'WARNING')).upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigError(f"Invalid log level {level}", {"level": level})
    
    log_format = global_config['logging'].get('format', 'text')
    if log_format not in LOG_FORMATS:
        raise ConfigError(f"Invalid log format {log_format}", {"format": log_format})

def load_config(config_dir: str | None = None) -> AppConfig:
    """Load configuration using the ConfigurationManager."""
    config_manager = ConfigurationManager()
    return config_manager.load_config(config_dir)
