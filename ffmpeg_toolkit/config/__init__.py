"""Configuration management for ffmpeg toolkit."""

from ffmpeg_toolkit.config.manager import ConfigManager, read_config
from ffmpeg_toolkit.config.models import (
    DisplayConfig,
    LoggingConfig,
    ToolkitConfig,
)

__all__ = [
    # Manager
    "ConfigManager",
    "read_config",
    # Models
    "DisplayConfig",
    "LoggingConfig",
    "ToolkitConfig",
]
