"""
Helper functions for ffmpeg toolkit.

Formatting helpers used when presenting mapped probe data.
"""

import math
from typing import Optional


def format_milliseconds(milliseconds: int) -> str:
    """
    Format a millisecond count as [-]HH:MM:SS.mmm.

    Args:
        milliseconds: Signed duration in milliseconds

    Returns:
        Formatted duration string (e.g., "01:02:03.500")
    """
    sign = "-" if milliseconds < 0 else ""
    total = abs(milliseconds)
    hours, rest = divmod(total, 3600000)
    minutes, rest = divmod(rest, 60000)
    seconds, millis = divmod(rest, 1000)
    return f"{sign}{hours:02d}:{minutes:02d}:{seconds:02d}.{millis:03d}"


def format_bitrate(bits_per_second: int) -> str:
    """
    Format bitrate in human-readable format.

    Args:
        bits_per_second: Bitrate in bits per second

    Returns:
        Formatted bitrate string (e.g., "5.0 Mbps")
    """
    if bits_per_second >= 1000000:
        return f"{bits_per_second / 1000000:.1f} Mbps"
    elif bits_per_second >= 1000:
        return f"{bits_per_second / 1000:.1f} Kbps"
    else:
        return f"{bits_per_second} bps"


def format_frame_rate(frame_rate: float) -> Optional[str]:
    """
    Format a mapped frame rate, hiding the malformed sentinel.

    Args:
        frame_rate: Frame rate as produced by the probe mapper

    Returns:
        Formatted rate (e.g., "29.97 fps") or None when unknown
    """
    if not math.isfinite(frame_rate) or frame_rate < 0:
        return None
    return f"{frame_rate:.2f} fps"
