"""
Backslash escaping for ffmpeg's quoting contexts.

Each context has its own fixed set of special characters. Every occurrence of
a character from the set is prefixed with a single backslash; everything else
passes through unchanged.

See:
    https://ffmpeg.org/ffmpeg-utils.html#Quoting-and-escaping
    https://ffmpeg.org/ffmpeg-filters.html#Filtergraph-syntax-1
    https://ffmpeg.org/ffmpeg-formats.html#concat-1
"""

import re
from enum import Enum

_FILTER_VALUE_RE = re.compile(r"[\\':]")
_FILTER_DESCRIPTION_RE = re.compile(r"[\\'\[\],;]")
_CONCAT_FILE_RE = re.compile(r"[\\' ]")
_TEE_COMPONENT_RE = re.compile(r"[\\' |\[\]]")


def _backslash(match: re.Match) -> str:
    return "\\" + match.group(0)


def escape_filter_value(value: str) -> str:
    """Escape a single option value inside a filter description (``\\ ' :``)."""
    return _FILTER_VALUE_RE.sub(_backslash, str(value))


def escape_filter_description(value: str) -> str:
    """Escape a whole filter description inside a filtergraph (``\\ ' [ ] , ;``)."""
    return _FILTER_DESCRIPTION_RE.sub(_backslash, str(value))


def escape_concat_file(value: str) -> str:
    """Escape a path or directive argument for a concat demuxer script."""
    return _CONCAT_FILE_RE.sub(_backslash, str(value))


def escape_tee_component(value: str) -> str:
    """Escape one output entry of the tee muxer."""
    return _TEE_COMPONENT_RE.sub(_backslash, str(value))


class EscapeContext(str, Enum):
    """Quoting context a piece of text is going to be embedded in."""

    FILTER_VALUE = "filter-value"
    FILTER_DESCRIPTION = "filter-description"
    CONCAT_FILE = "concat-file"
    TEE_COMPONENT = "tee-component"


_ESCAPERS = {
    EscapeContext.FILTER_VALUE: escape_filter_value,
    EscapeContext.FILTER_DESCRIPTION: escape_filter_description,
    EscapeContext.CONCAT_FILE: escape_concat_file,
    EscapeContext.TEE_COMPONENT: escape_tee_component,
}


def escape(value: str, context: EscapeContext) -> str:
    """
    Escape text for the given quoting context.

    Args:
        value: Text to escape
        context: Target quoting context

    Returns:
        Escaped text
    """
    return _ESCAPERS[EscapeContext(context)](value)
