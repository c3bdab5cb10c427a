"""Data models for ffmpeg toolkit."""

from ffmpeg_toolkit.models.enums import LogLevel
from ffmpeg_toolkit.models.media import (
    AudioStream,
    Chapter,
    DataStream,
    ProbeResult,
    Stream,
    StreamFields,
    SubtitleStream,
    Tags,
    VideoStream,
)

__all__ = [
    # Enums
    "LogLevel",
    # Probe models
    "AudioStream",
    "Chapter",
    "DataStream",
    "ProbeResult",
    "Stream",
    "StreamFields",
    "SubtitleStream",
    "Tags",
    "VideoStream",
]
