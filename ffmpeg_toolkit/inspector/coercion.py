"""
Field coercers for loosely typed ffprobe JSON.

ffprobe prints most numbers as strings and omits fields it does not know.
Each coercer here is total: malformed or missing input degrades to a fixed
sentinel instead of raising.

Sentinels:
    - integer and time fields: 0
    - fraction fields: -1
    - optional text fields: None
"""

import math
from collections.abc import Mapping
from typing import Any, Optional

NO_CODEC_TAG = "[0][0][0][0]"
MALFORMED_FRACTION = -1.0

_UINT32 = 2**32


def to_number(value: Any) -> float:
    """
    Coerce a JSON value to a float.

    Numbers pass through, booleans are 1/0, strings are stripped and parsed
    (blank strings are 0). Anything else, including None, is NaN.
    """
    if isinstance(value, bool):
        return 1.0 if value else 0.0
    if isinstance(value, (int, float)):
        try:
            return float(value)
        except OverflowError:
            return math.inf if value > 0 else -math.inf
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return 0.0
        try:
            return float(text)
        except ValueError:
            return math.nan
    return math.nan


def to_uint32(value: Any) -> int:
    """Truncate to an integer and wrap into the unsigned 32-bit range."""
    number = to_number(value)
    if not math.isfinite(number):
        return 0
    return int(number) % _UINT32


def to_int(value: Any) -> int:
    """Floor to an integer; non-numeric input is 0."""
    number = to_number(value)
    if not math.isfinite(number):
        return 0
    return math.floor(number)


def _scaled(value: Any, factor: int) -> int:
    number = to_number(value) * factor
    if not math.isfinite(number):
        return 0
    return int(number)


def to_milliseconds(value: Any) -> int:
    """Convert seconds to whole milliseconds, truncating toward zero."""
    return _scaled(value, 1000)


def to_microseconds(value: Any) -> int:
    """Convert seconds to whole microseconds, truncating toward zero."""
    return _scaled(value, 1000000)


def to_fraction(value: Any) -> float:
    """
    Evaluate a ``num/den`` rational such as ``30000/1001``.

    Returns -1 when a part is missing or not a number, or for ``0/0``.
    A zero denominator otherwise yields a signed infinity.
    """
    if value is None:
        return MALFORMED_FRACTION
    parts = to_text(value).split("/")
    if len(parts) < 2 or not parts[0] or not parts[1]:
        return MALFORMED_FRACTION
    numerator = to_number(parts[0])
    denominator = to_number(parts[1])
    if math.isnan(numerator) or math.isnan(denominator):
        return MALFORMED_FRACTION
    if denominator == 0:
        if numerator == 0:
            return MALFORMED_FRACTION
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


def to_text(value: Any) -> str:
    """Coerce to text; None becomes an empty string."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return value
    return str(value)


def to_optional_text(value: Any) -> Optional[str]:
    """Coerce to text, keeping missing or empty values as None."""
    if value is None or value == "":
        return None
    return to_text(value)


def to_codec_tag(value: Any) -> Optional[str]:
    """Normalize a codec tag; ``[0][0][0][0]`` and falsy values mean no tag."""
    if not value:
        return None
    text = to_text(value)
    return None if text == NO_CODEC_TAG else text


def to_profile(value: Any) -> Optional[str]:
    """Lower-case a codec profile name, or None if unset."""
    if not value:
        return None
    return to_text(value).lower()


def to_tags(value: Any) -> dict[str, str]:
    """Build a tag mapping with lower-cased keys and text values."""
    if not isinstance(value, Mapping):
        return {}
    return {to_text(key).lower(): to_text(item) for key, item in value.items()}
