"""
Console reporting for mapped probe reports.

This module renders a ProbeResult as rich tables: a format overview, one
table per stream kind and an optional chapter table.
"""

from typing import Optional

from rich.console import Console
from rich.table import Table

from ..config import DisplayConfig
from ..models import ProbeResult, Stream, Tags
from ..utils import format_bitrate, format_frame_rate, format_milliseconds


class ProbeReporter:
    """
    Reporter for displaying probe results.

    This class creates formatted console output for:
    - Container format overview
    - Video, audio, subtitle and data streams
    - Chapters
    """

    def __init__(self, console: Optional[Console] = None, display: Optional[DisplayConfig] = None):
        """
        Initialize probe reporter.

        Args:
            console: Rich console instance (creates new if not provided)
            display: Display options (defaults if not provided)
        """
        self.console = console or Console()
        self.display = display or DisplayConfig()

    def display_result(self, result: ProbeResult, title: Optional[str] = None) -> None:
        """
        Display a complete probe result.

        Args:
            result: Mapped probe result
            title: Optional heading (e.g. the report file name)
        """
        self.console.print()
        self.console.rule(f"[bold cyan]{title or 'Probe Report'}", style="cyan")
        self.console.print()

        self._display_overview(result)

        if result.video_streams:
            self._display_video_streams(result)
        if result.audio_streams:
            self._display_audio_streams(result)

        others = result.subtitle_streams + result.data_streams
        if others:
            self._display_other_streams(others)

        if result.chapters and self.display.show_chapters:
            self._display_chapters(result)

        self.console.print()

    def format_time(self, milliseconds: int) -> str:
        """Format a millisecond value according to the display settings."""
        if self.display.time_format == "ms":
            return f"{milliseconds} ms"
        return format_milliseconds(milliseconds)

    def _format_tags(self, tags: Tags) -> str:
        return ", ".join(f"{key}={value}" for key, value in tags.items())

    def _display_overview(self, result: ProbeResult) -> None:
        table = Table(title="Overview", show_header=False, box=None)
        table.add_column("Metric", style="cyan", width=20)
        table.add_column("Value", style="white")

        table.add_row("Format", result.format or "unknown")
        table.add_row("Start", self.format_time(result.start))
        table.add_row("Duration", self.format_time(result.duration))
        table.add_row("Bitrate", format_bitrate(result.bitrate))
        table.add_row("Probe Score", str(result.score))
        table.add_row("Streams", str(len(result.streams)))
        table.add_row("Chapters", str(len(result.chapters)))
        if self.display.show_tags and result.tags:
            table.add_row("Tags", self._format_tags(result.tags))

        self.console.print(table)
        self.console.print()

    def _display_video_streams(self, result: ProbeResult) -> None:
        table = Table(title="Video Streams", show_header=True)
        table.add_column("#", style="cyan", justify="right")
        table.add_column("Codec", style="yellow")
        table.add_column("Profile")
        table.add_column("Resolution")
        table.add_column("Frame Rate")
        table.add_column("Pixel Format")
        table.add_column("Bitrate", justify="right")
        table.add_column("Duration", justify="right")
        if self.display.show_tags:
            table.add_column("Tags", style="dim")

        for stream in result.video_streams:
            row = [
                str(stream.index),
                self._codec_label(stream),
                stream.profile or "-",
                stream.resolution,
                format_frame_rate(stream.frame_rate) or "unknown",
                stream.pixel_format or "-",
                format_bitrate(stream.bitrate),
                self.format_time(stream.duration),
            ]
            if self.display.show_tags:
                row.append(self._format_tags(stream.tags))
            table.add_row(*row)

        self.console.print(table)
        self.console.print()

    def _display_audio_streams(self, result: ProbeResult) -> None:
        table = Table(title="Audio Streams", show_header=True)
        table.add_column("#", style="cyan", justify="right")
        table.add_column("Codec", style="yellow")
        table.add_column("Language")
        table.add_column("Channels")
        table.add_column("Sample Rate", justify="right")
        table.add_column("Bitrate", justify="right")
        table.add_column("Duration", justify="right")
        if self.display.show_tags:
            table.add_column("Tags", style="dim")

        for stream in result.audio_streams:
            row = [
                str(stream.index),
                self._codec_label(stream),
                stream.language or "und",
                stream.channel_layout_name,
                f"{stream.sample_rate} Hz",
                format_bitrate(stream.bitrate),
                self.format_time(stream.duration),
            ]
            if self.display.show_tags:
                row.append(self._format_tags(stream.tags))
            table.add_row(*row)

        self.console.print(table)
        self.console.print()

    def _display_other_streams(self, streams: list[Stream]) -> None:
        table = Table(title="Other Streams", show_header=True)
        table.add_column("#", style="cyan", justify="right")
        table.add_column("Type")
        table.add_column("Codec", style="yellow")
        table.add_column("Language")
        table.add_column("Title")

        for stream in sorted(streams, key=lambda s: s.index):
            table.add_row(
                str(stream.index),
                stream.type,
                self._codec_label(stream),
                stream.language or "und",
                stream.title or "-",
            )

        self.console.print(table)
        self.console.print()

    def _display_chapters(self, result: ProbeResult) -> None:
        table = Table(title="Chapters", show_header=True)
        table.add_column("ID", style="cyan", justify="right")
        table.add_column("Start", justify="right")
        table.add_column("End", justify="right")
        table.add_column("Title")

        for chapter in result.chapters:
            table.add_row(
                str(chapter.id),
                self.format_time(chapter.start // 1000),
                self.format_time(chapter.end // 1000),
                chapter.title or "-",
            )

        self.console.print(table)
        self.console.print()

    @staticmethod
    def _codec_label(stream: Stream) -> str:
        if stream.codec_tag:
            return f"{stream.codec} ({stream.codec_tag})"
        return stream.codec or "unknown"


def display_probe_result(
    result: ProbeResult,
    title: Optional[str] = None,
    console: Optional[Console] = None,
    display: Optional[DisplayConfig] = None,
) -> None:
    """
    Convenience function to display a probe result.

    Args:
        result: Mapped probe result
        title: Optional heading
        console: Optional console instance
        display: Optional display settings
    """
    ProbeReporter(console=console, display=display).display_result(result, title=title)
