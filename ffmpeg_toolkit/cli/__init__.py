"""Command-line interface."""

from ffmpeg_toolkit.cli.main import app, main

__all__ = ["app", "main"]
