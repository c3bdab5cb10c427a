"""
Stringify Python values into ffmpeg filter descriptions.

Options are rendered either as a ``:``-separated list of values or as a
``:``-separated list of ``key=value`` pairs. ``None`` entries are skipped,
``datetime`` objects become ISO strings and every value is escaped with
:func:`escape_filter_value`.

See:
    https://ffmpeg.org/ffmpeg-filters.html#Filtergraph-syntax-1
    https://ffmpeg.org/ffmpeg-utils.html#Date
"""

from collections.abc import Iterable, Mapping
from datetime import datetime, timezone
from typing import Any, Optional, Union

from ffmpeg_toolkit.syntax.escaping import escape_filter_description, escape_filter_value

FilterOptions = Union[Mapping[str, Any], Iterable[Any]]


def stringify_value(value: Any) -> str:
    """
    Turn an arbitrary value into its ffmpeg text form.

    ``datetime`` values become an ISO string in UTC with millisecond precision
    (e.g. ``1970-01-01T00:00:00.000Z``); naive datetimes are taken as UTC.
    Booleans become ``true``/``false``. Everything else goes through ``str()``.

    Args:
        value: Value to stringify

    Returns:
        Text representation accepted by ffmpeg
    """
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc).replace(tzinfo=None)
        return value.isoformat(timespec="milliseconds") + "Z"
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def stringify_array_colon_separated(values: Iterable[Any]) -> str:
    """
    Turn a sequence into a ``:``-separated list of escaped values.

    Returns:
        The rendered list; ``""`` if the sequence is empty or only holds None
    """
    return ":".join(
        escape_filter_value(stringify_value(value)) for value in values if value is not None
    )


def stringify_object_colon_separated(options: Mapping[str, Any]) -> str:
    """
    Turn a mapping into a ``:``-separated list of ``key=value`` pairs.

    Keys are used verbatim and are assumed to be valid ffmpeg option names.

    Returns:
        The rendered list; ``""`` if the mapping is empty or only holds None
    """
    return ":".join(
        f"{key}={escape_filter_value(stringify_value(value))}"
        for key, value in options.items()
        if value is not None
    )


def stringify_filter_description(name: str, options: Optional[FilterOptions] = None) -> str:
    """
    Stringify a filter with options into an ffmpeg filter description.

    Args:
        name: Filter name (e.g. "scale")
        options: Mapping of named options or a sequence of positional options;
            a single string is one positional option

    Returns:
        ``name`` when there is nothing to render, otherwise ``name=options``
        with the options escaped for a filtergraph

    Example:
        >>> stringify_filter_description("scale", {"w": 1280, "h": -2})
        'scale=w=1280:h=-2'
    """
    if options is None:
        return name
    if isinstance(options, Mapping):
        rendered = stringify_object_colon_separated(options)
    elif isinstance(options, str):
        rendered = stringify_array_colon_separated([options])
    else:
        rendered = stringify_array_colon_separated(options)
    if rendered == "":
        return name
    return f"{name}={escape_filter_description(rendered)}"
