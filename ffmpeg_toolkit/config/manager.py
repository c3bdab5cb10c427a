"""
Configuration management for ffmpeg toolkit.

Settings come from a YAML file given on the command line, or from the first
file found in the default locations, or from built-in defaults. Command-line
flags are merged on top through :meth:`ConfigManager.logging_options` and
:meth:`ConfigManager.display_options`.
"""

from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import ValidationError

from ffmpeg_toolkit.config.models import DisplayConfig, ToolkitConfig
from ffmpeg_toolkit.utils import ConfigurationError, get_logger

logger = get_logger(__name__)


def read_config(path: Path) -> ToolkitConfig:
    """
    Parse and validate a YAML configuration file.

    Raises:
        ConfigurationError: If the file cannot be read, is not a YAML mapping
            or holds invalid settings
    """
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in configuration file: {e}")
    except OSError as e:
        raise ConfigurationError(f"Failed to read configuration: {e}")

    if data is None:
        raise ConfigurationError(f"Configuration file is empty: {path}")
    if not isinstance(data, dict):
        raise ConfigurationError(f"Configuration file must contain a mapping: {path}")

    try:
        return ToolkitConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration in {path}: {e}")


class ConfigManager:
    """Resolves, loads and writes toolkit configuration."""

    DEFAULT_CONFIG_LOCATIONS = [
        Path.home() / ".ffmpeg-toolkit.yaml",
        Path.home() / ".config" / "ffmpeg-toolkit" / "config.yaml",
        Path.cwd() / ".ffmpeg-toolkit.yaml",
    ]

    def __init__(self, config_path: Optional[Path] = None):
        """
        Args:
            config_path: Explicit configuration file; must exist when given
        """
        self.config_path = config_path
        self.source: Optional[Path] = None
        self._config: Optional[ToolkitConfig] = None

    @property
    def config(self) -> ToolkitConfig:
        """Current configuration, loaded on first access."""
        if self._config is None:
            self._config = self.load()
        return self._config

    def find_config_file(self) -> Optional[Path]:
        """
        Return the file settings should be read from, if any.

        Raises:
            ConfigurationError: If an explicit path does not exist
        """
        if self.config_path:
            if not self.config_path.exists():
                raise ConfigurationError(f"Configuration file not found: {self.config_path}")
            return self.config_path

        for path in self.DEFAULT_CONFIG_LOCATIONS:
            if path.exists():
                return path
        return None

    def load(self) -> ToolkitConfig:
        """
        Load configuration, falling back to defaults when no file exists.

        Sets :attr:`source` to the file that was read, or None.
        """
        self.source = self.find_config_file()
        if self.source is None:
            logger.info("No configuration file found, using defaults")
            return ToolkitConfig.create_default()

        logger.info(f"Loading configuration from {self.source}")
        return read_config(self.source)

    def reload(self) -> ToolkitConfig:
        """Drop the cached configuration and read it again."""
        self._config = None
        return self.config

    def logging_options(self, verbose: bool = False, log_file: Optional[Path] = None) -> dict:
        """
        Keyword arguments for :func:`setup_logger`.

        Flags given on the command line win over the configuration file.
        """
        settings = self.config.logging
        return {
            "level": settings.level,
            "log_file": log_file or settings.file,
            "verbose": verbose or settings.verbose,
        }

    def display_options(self, **overrides: Any) -> DisplayConfig:
        """
        Display settings with overrides applied.

        Overrides whose value is None are ignored, so unset CLI flags keep the
        configured value.
        """
        update = {key: value for key, value in overrides.items() if value is not None}
        display = self.config.display
        return display.model_copy(update=update) if update else display

    def save(self, path: Path, config: Optional[ToolkitConfig] = None) -> None:
        """
        Write configuration as YAML.

        Raises:
            ConfigurationError: If the file cannot be written
        """
        data = (config or self.config).model_dump(mode="json")
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, "w", encoding="utf-8") as f:
                yaml.safe_dump(data, f, default_flow_style=False, sort_keys=False, indent=2)
        except OSError as e:
            raise ConfigurationError(f"Failed to save configuration: {e}")

        logger.info(f"Configuration saved to {path}")

    def init_default_config(self, path: Path, force: bool = False) -> Path:
        """
        Write a configuration file holding the defaults.

        Raises:
            ConfigurationError: If the file exists and ``force`` is not set
        """
        if path.exists() and not force:
            raise ConfigurationError(
                f"Configuration file already exists: {path}. Use --force to overwrite."
            )

        self.save(path, ToolkitConfig.create_default())
        return path
