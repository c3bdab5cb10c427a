"""Utility functions and helpers."""

from ffmpeg_toolkit.utils.errors import (
    ConfigurationError,
    ProbeReportError,
    SyntaxArgumentError,
    ToolkitError,
)
from ffmpeg_toolkit.utils.helpers import (
    format_bitrate,
    format_frame_rate,
    format_milliseconds,
)
from ffmpeg_toolkit.utils.logger import get_logger, setup_logger

__all__ = [
    # Errors
    "ConfigurationError",
    "ProbeReportError",
    "SyntaxArgumentError",
    "ToolkitError",
    # Helpers
    "format_bitrate",
    "format_frame_rate",
    "format_milliseconds",
    # Logging
    "get_logger",
    "setup_logger",
]
