"""
Data models for mapped ffprobe reports.

This module contains dataclasses for video, audio, subtitle and data streams,
chapters, and the complete probe result. Instances are built by
:mod:`ffmpeg_toolkit.inspector.mapper`.

Units differ per entity: stream and format times are in milliseconds, chapter
times are in microseconds.
"""

from dataclasses import dataclass, field
from typing import Any, ClassVar, Optional, Union

Tags = dict[str, str]


@dataclass
class StreamFields:
    """Fields shared by every stream variant."""

    index: int
    codec: str
    codec_long_name: Optional[str]
    codec_tag: Optional[str]
    start: int
    duration: int
    bitrate: int
    tags: Tags

    @property
    def language(self) -> Optional[str]:
        """Get the language tag, if any."""
        return self.tags.get("language")

    @property
    def title(self) -> Optional[str]:
        """Get the title tag, if any."""
        return self.tags.get("title")


@dataclass
class VideoStream(StreamFields):
    """Information about a video stream."""

    type: ClassVar[str] = "video"

    profile: Optional[str]
    width: int
    height: int
    coded_width: int
    coded_height: int
    aspect_ratio: str
    pixel_format: str
    level: int
    color_range: str
    color_space: str
    color_transfer: str
    color_primaries: str
    chroma_location: str
    field_order: str
    # -1 when the source fraction is malformed
    frame_rate: float
    avg_frame_rate: float
    bits_per_raw_sample: int

    @property
    def resolution(self) -> str:
        """Get resolution as string (e.g., '1920x1080')."""
        return f"{self.width}x{self.height}"


@dataclass
class AudioStream(StreamFields):
    """Information about an audio stream."""

    type: ClassVar[str] = "audio"

    profile: Optional[str]
    sample_format: str
    sample_rate: int
    channels: int
    channel_layout: str
    bits_per_sample: int

    @property
    def channel_layout_name(self) -> str:
        """Get common channel layout name."""
        if self.channel_layout:
            return self.channel_layout

        layouts = {
            1: "mono",
            2: "stereo",
            6: "5.1",
            8: "7.1",
        }
        return layouts.get(self.channels, f"{self.channels}ch")


@dataclass
class SubtitleStream(StreamFields):
    """Information about a subtitle stream."""

    type: ClassVar[str] = "subtitle"


@dataclass
class DataStream(StreamFields):
    """Any stream that is not video, audio or subtitle (data, attachment, unknown)."""

    type: ClassVar[str] = "data"


Stream = Union[VideoStream, AudioStream, SubtitleStream, DataStream]


@dataclass
class Chapter:
    """A chapter; start and end are in microseconds."""

    id: int
    start: int
    end: int
    tags: Tags

    @property
    def title(self) -> Optional[str]:
        """Get the chapter title tag, if any."""
        return self.tags.get("title")


@dataclass
class ProbeResult:
    """
    Complete mapped probe report.

    The untouched source report is kept privately and is only reachable
    through :meth:`unwrap`, for fields the mapping does not cover.
    """

    format: str
    start: int
    duration: int
    bitrate: int
    score: int
    tags: Tags
    streams: list[Stream]
    chapters: list[Chapter]
    _report: Any = field(default=None, repr=False, compare=False)

    @classmethod
    def from_report(cls, report: Any) -> "ProbeResult":
        """Map an ffprobe JSON report (already decoded) into a ProbeResult."""
        from ffmpeg_toolkit.inspector.mapper import parse_probe_report

        return parse_probe_report(report)

    def unwrap(self) -> Any:
        """Get the original report this result was mapped from."""
        return self._report

    @property
    def video_streams(self) -> list[VideoStream]:
        """Get all video streams in report order."""
        return [s for s in self.streams if isinstance(s, VideoStream)]

    @property
    def audio_streams(self) -> list[AudioStream]:
        """Get all audio streams in report order."""
        return [s for s in self.streams if isinstance(s, AudioStream)]

    @property
    def subtitle_streams(self) -> list[SubtitleStream]:
        """Get all subtitle streams in report order."""
        return [s for s in self.streams if isinstance(s, SubtitleStream)]

    @property
    def data_streams(self) -> list[DataStream]:
        """Get all data streams in report order."""
        return [s for s in self.streams if isinstance(s, DataStream)]

    @property
    def primary_video(self) -> Optional[VideoStream]:
        """Get the primary (first) video stream."""
        videos = self.video_streams
        return videos[0] if videos else None

    def get_stream(self, index: int) -> Optional[Stream]:
        """Get a stream by its ffprobe index."""
        for stream in self.streams:
            if stream.index == index:
                return stream
        return None
