"""
Mapping of ffprobe JSON reports into typed models.

This module turns the output of ``ffprobe -print_format json -show_format
-show_streams -show_chapters`` (already decoded into Python objects) into a
:class:`ProbeResult`. Each entity is described by a table of fields, each
naming the report key(s) it reads and the coercer applied to the value.
Mapping never fails: malformed values fall back to the sentinels documented
in :mod:`ffmpeg_toolkit.inspector.coercion`.
"""

from collections.abc import Mapping, Sequence
from typing import Any, Callable, NamedTuple, Union

from ..models import (
    AudioStream,
    Chapter,
    DataStream,
    ProbeResult,
    Stream,
    SubtitleStream,
    VideoStream,
)
from ..utils import get_logger
from .coercion import (
    to_codec_tag,
    to_fraction,
    to_int,
    to_microseconds,
    to_milliseconds,
    to_optional_text,
    to_profile,
    to_tags,
    to_text,
    to_uint32,
)

logger = get_logger(__name__)


class Field(NamedTuple):
    """One model attribute, the report key(s) it comes from and its coercer."""

    attribute: str
    keys: Union[str, tuple[str, ...]]
    coerce: Callable[[Any], Any]


COMMON_STREAM_FIELDS = (
    Field("index", "index", to_uint32),
    Field("codec", "codec_name", to_text),
    Field("codec_long_name", "codec_long_name", to_optional_text),
    Field("codec_tag", "codec_tag_string", to_codec_tag),
    Field("start", "start_time", to_milliseconds),
    Field("duration", "duration", to_milliseconds),
    Field("bitrate", "bit_rate", to_int),
    Field("tags", "tags", to_tags),
)

VIDEO_STREAM_FIELDS = COMMON_STREAM_FIELDS + (
    Field("profile", "profile", to_profile),
    Field("width", "width", to_int),
    Field("height", "height", to_int),
    Field("coded_width", "coded_width", to_int),
    Field("coded_height", "coded_height", to_int),
    Field("aspect_ratio", "display_aspect_ratio", to_text),
    Field("pixel_format", ("pix_fmt", "pixel_format"), to_text),
    Field("level", "level", to_int),
    Field("color_range", "color_range", to_text),
    Field("color_space", "color_space", to_text),
    Field("color_transfer", "color_transfer", to_text),
    Field("color_primaries", "color_primaries", to_text),
    Field("chroma_location", "chroma_location", to_text),
    Field("field_order", "field_order", to_text),
    Field("frame_rate", ("r_frame_rate", "frame_rate"), to_fraction),
    # ffprobe reports "0/0" for unknown average rates; that maps to -1 as well
    Field("avg_frame_rate", "avg_frame_rate", to_fraction),
    Field("bits_per_raw_sample", "bits_per_raw_sample", to_int),
)

AUDIO_STREAM_FIELDS = COMMON_STREAM_FIELDS + (
    Field("profile", "profile", to_profile),
    Field("sample_format", "sample_fmt", to_text),
    Field("sample_rate", "sample_rate", to_uint32),
    Field("channels", "channels", to_uint32),
    Field("channel_layout", "channel_layout", to_text),
    Field("bits_per_sample", "bits_per_sample", to_uint32),
)

CHAPTER_FIELDS = (
    Field("id", "id", to_uint32),
    Field("start", "start_time", to_microseconds),
    Field("end", "end_time", to_microseconds),
    Field("tags", "tags", to_tags),
)

FORMAT_FIELDS = (
    Field("format", "format_name", to_text),
    Field("start", "start_time", to_milliseconds),
    Field("duration", "duration", to_milliseconds),
    Field("bitrate", "bit_rate", to_int),
    Field("score", "probe_score", to_int),
    Field("tags", "tags", to_tags),
)

STREAM_TYPES: dict[str, tuple[type, tuple[Field, ...]]] = {
    "video": (VideoStream, VIDEO_STREAM_FIELDS),
    "audio": (AudioStream, AUDIO_STREAM_FIELDS),
    "subtitle": (SubtitleStream, COMMON_STREAM_FIELDS),
}


def _as_mapping(value: Any) -> Mapping:
    return value if isinstance(value, Mapping) else {}


def _as_list(value: Any) -> list:
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
        return list(value)
    return []


def _lookup(info: Mapping, keys: Union[str, tuple[str, ...]]) -> Any:
    if isinstance(keys, str):
        return info.get(keys)
    for key in keys:
        value = info.get(key)
        if value is not None:
            return value
    return None


def decode_fields(info: Any, fields: Sequence[Field]) -> dict[str, Any]:
    """
    Apply a field table to one report object.

    Args:
        info: Report object (non-mappings are treated as empty)
        fields: Field table to apply

    Returns:
        Keyword arguments for the model constructor
    """
    source = _as_mapping(info)
    return {f.attribute: f.coerce(_lookup(source, f.keys)) for f in fields}


def parse_stream(info: Any) -> Stream:
    """
    Map one entry of the report's ``streams`` array.

    The variant is chosen by ``codec_type`` alone; anything other than
    video, audio or subtitle becomes a :class:`DataStream`.
    """
    codec_type = to_text(_as_mapping(info).get("codec_type"))
    stream_class, fields = STREAM_TYPES.get(codec_type, (DataStream, COMMON_STREAM_FIELDS))
    if stream_class is DataStream and codec_type != "data":
        logger.debug(f"Mapping stream with codec_type {codec_type!r} as data stream")
    return stream_class(**decode_fields(info, fields))


def parse_chapter(info: Any) -> Chapter:
    """Map one entry of the report's ``chapters`` array."""
    return Chapter(**decode_fields(info, CHAPTER_FIELDS))


def parse_probe_report(report: Any) -> ProbeResult:
    """
    Map a decoded ffprobe JSON report into a ProbeResult.

    Args:
        report: Decoded report with ``format``, ``streams`` and ``chapters``

    Returns:
        ProbeResult keeping a private reference to ``report``
    """
    source = _as_mapping(report)
    streams = [parse_stream(info) for info in _as_list(source.get("streams"))]
    chapters = [parse_chapter(info) for info in _as_list(source.get("chapters"))]

    result = ProbeResult(
        **decode_fields(source.get("format"), FORMAT_FIELDS),
        streams=streams,
        chapters=chapters,
        _report=report,
    )

    logger.debug(
        f"Mapped probe report ({result.format or 'unknown format'}): "
        f"{len(streams)} stream(s), {len(chapters)} chapter(s)"
    )
    return result
