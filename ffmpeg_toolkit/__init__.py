"""
ffmpeg toolkit

Serialization of Python values into ffmpeg's filter-graph and concat-file
syntaxes, and typed mapping of ffprobe JSON reports.
"""

__version__ = "0.1.0"

from ffmpeg_toolkit.models import (
    AudioStream,
    Chapter,
    DataStream,
    LogLevel,
    ProbeResult,
    Stream,
    SubtitleStream,
    VideoStream,
)
from ffmpeg_toolkit.inspector import load_probe_report, parse_probe_report
from ffmpeg_toolkit.syntax import (
    escape_concat_file,
    escape_filter_description,
    escape_filter_value,
    escape_tee_component,
    parse_timestamp,
    stringify_filter_description,
    stringify_value,
)
from ffmpeg_toolkit.utils import (
    ConfigurationError,
    ProbeReportError,
    ToolkitError,
    get_logger,
    setup_logger,
)

__all__ = [
    "__version__",
    # Models
    "AudioStream",
    "Chapter",
    "DataStream",
    "LogLevel",
    "ProbeResult",
    "Stream",
    "SubtitleStream",
    "VideoStream",
    # Probe mapping
    "load_probe_report",
    "parse_probe_report",
    # Syntax
    "escape_concat_file",
    "escape_filter_description",
    "escape_filter_value",
    "escape_tee_component",
    "parse_timestamp",
    "stringify_filter_description",
    "stringify_value",
    # Utils
    "ConfigurationError",
    "ProbeReportError",
    "ToolkitError",
    "get_logger",
    "setup_logger",
]
