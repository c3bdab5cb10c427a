"""UI components for console output."""

from ffmpeg_toolkit.ui.reporter import ProbeReporter, display_probe_result

__all__ = [
    "ProbeReporter",
    "display_probe_result",
]
