"""Mapping of ffprobe reports into typed models."""

from ffmpeg_toolkit.inspector.loader import load_probe_report
from ffmpeg_toolkit.inspector.mapper import (
    decode_fields,
    parse_chapter,
    parse_probe_report,
    parse_stream,
)

__all__ = [
    "decode_fields",
    "load_probe_report",
    "parse_chapter",
    "parse_probe_report",
    "parse_stream",
]
