"""
Configuration models using Pydantic.

This module defines the configuration structure for the ffmpeg toolkit CLI.
"""

from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="WARNING", description="Log level: DEBUG, INFO, WARNING, ERROR")
    file: Optional[Path] = Field(default=None, description="Optional log file path")
    verbose: bool = Field(default=False, description="Enable debug output with source paths")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"level must be one of {valid_levels}")
        return v.upper()


class DisplayConfig(BaseModel):
    """Probe report display configuration."""

    show_tags: bool = Field(default=False, description="Show stream tags in probe tables")
    show_chapters: bool = Field(default=True, description="Show the chapter table")
    time_format: Literal["clock", "ms"] = Field(
        default="clock", description="Render times as HH:MM:SS.mmm (clock) or raw milliseconds"
    )


class ToolkitConfig(BaseModel):
    """Main toolkit configuration."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    display: DisplayConfig = Field(default_factory=DisplayConfig)

    @classmethod
    def create_default(cls) -> "ToolkitConfig":
        """Create default configuration."""
        return cls()
