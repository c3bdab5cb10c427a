"""Serialization of Python values into ffmpeg's textual syntaxes."""

from ffmpeg_toolkit.syntax.escaping import (
    EscapeContext,
    escape,
    escape_concat_file,
    escape_filter_description,
    escape_filter_value,
    escape_tee_component,
)
from ffmpeg_toolkit.syntax.stringify import (
    FilterOptions,
    stringify_array_colon_separated,
    stringify_filter_description,
    stringify_object_colon_separated,
    stringify_value,
)
from ffmpeg_toolkit.syntax.timestamps import parse_duration, parse_time, parse_timestamp

__all__ = [
    # Escaping
    "EscapeContext",
    "escape",
    "escape_concat_file",
    "escape_filter_description",
    "escape_filter_value",
    "escape_tee_component",
    # Stringify
    "FilterOptions",
    "stringify_array_colon_separated",
    "stringify_filter_description",
    "stringify_object_colon_separated",
    "stringify_value",
    # Time
    "parse_duration",
    "parse_time",
    "parse_timestamp",
]
