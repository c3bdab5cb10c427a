"""
Parsing of ffmpeg time duration strings.

ffmpeg accepts two duration syntaxes:

- ``[-][HH:]MM:SS[.m...]``
- ``[-]S+[.m...][s|ms|us]``

Both parsers return a signed number of milliseconds, or None when the text
does not follow the syntax.

See:
    https://ffmpeg.org/ffmpeg-utils.html#Time-duration
"""

import re
from fractions import Fraction
from typing import Optional

TIMESTAMP_RE = re.compile(r"(-?)([0-9]{2}:)?([0-9]{2}):([0-9]{2})(\.[0-9]+)?")
DURATION_RE = re.compile(r"(-?)([0-9]+)(\.[0-9]+)?(s|ms|us)?")

_UNIT_TO_MS = {
    "s": Fraction(1000),
    "ms": Fraction(1),
    "us": Fraction(1, 1000),
}


def parse_timestamp(value: str) -> Optional[int]:
    """
    Parse a ``[-][HH:]MM:SS[.m...]`` timestamp into milliseconds.

    The pattern is searched for anywhere in the text, so surrounding
    characters are ignored. The fractional part, dot included, is read as a
    number and multiplied by 1000; digits past the millisecond are truncated.
    A leading ``-`` negates the whole value.

    Args:
        value: Text to parse (e.g. "01:02:03.5")

    Returns:
        Signed milliseconds, or None if no timestamp is found
    """
    match = TIMESTAMP_RE.search(value)
    if match is None:
        return None
    minus, hh, mm, ss, fraction = match.groups()
    hours = int(hh[:-1]) * 3600000 if hh else 0
    decimal = int(fraction[1:4].ljust(3, "0")) if fraction else 0
    total = hours + int(mm) * 60000 + int(ss) * 1000 + decimal
    return -total if minus == "-" else total


def parse_duration(value: str) -> Optional[int]:
    """
    Parse a ``[-]S+[.m...][s|ms|us]`` duration into milliseconds.

    Unlike :func:`parse_timestamp` the whole text (ignoring surrounding
    whitespace) must match. Without a unit the value is in seconds.

    Args:
        value: Text to parse (e.g. "1.5", "200ms", "-40us")

    Returns:
        Signed milliseconds truncated toward zero, or None if unparsable
    """
    match = DURATION_RE.fullmatch(value.strip())
    if match is None:
        return None
    minus, whole, fraction, unit = match.groups()
    amount = Fraction(whole + (fraction or "")) * _UNIT_TO_MS[unit or "s"]
    total = int(amount)
    return -total if minus == "-" else total


def parse_time(value: str) -> Optional[int]:
    """
    Parse either duration syntax into milliseconds.

    Args:
        value: Text to parse

    Returns:
        Signed milliseconds, or None if neither syntax matches
    """
    timestamp = parse_timestamp(value)
    if timestamp is not None:
        return timestamp
    return parse_duration(value)
