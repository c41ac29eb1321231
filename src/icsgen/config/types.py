"""Configuration type definitions."""

from dataclasses import dataclass
from typing import Any, Optional, TypedDict


class LoggingConfig(TypedDict):
    """Logging configuration."""
    level: str
    file: Optional[str]
    format: str  # 'text' or 'json'

class DirectoriesConfig(TypedDict):
    """Directory configuration."""
    config: str
    output: str

class GlobalConfig(TypedDict):
    """Global configuration structure."""
    timezone: Optional[str]
    filename: str
    directories: DirectoriesConfig
    logging: LoggingConfig

@dataclass
class AppConfig:
    """Application configuration."""
    global_config: GlobalConfig
    timezone: Optional[str] = None
    filename: str = "event"
    output_dir: str = "."
    config_dir: str = "."
    log_level: str = "WARNING"
    log_file: Optional[str] = None
    log_format: str = "text"

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value."""
        return getattr(self, key, default)
