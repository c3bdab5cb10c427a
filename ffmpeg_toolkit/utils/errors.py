"""
Custom exceptions for ffmpeg toolkit.

This module defines the exception hierarchy used by the outer layers of the
package (report loading, configuration and the CLI). The serializer and the
probe mapper themselves never raise for malformed input.
"""

from pathlib import Path
from typing import Optional


class ToolkitError(Exception):
    """Base exception for all toolkit errors."""

    pass


class ConfigurationError(ToolkitError):
    """Configuration is invalid or missing."""

    pass


class ProbeReportError(ToolkitError):
    """A saved probe report could not be read or decoded."""

    def __init__(self, message: str, source: Optional[Path] = None):
        """
        Initialize probe report error with the offending source.

        Args:
            message: Error message
            source: Path of the report file, if it came from disk
        """
        super().__init__(message)
        self.source = source


class SyntaxArgumentError(ToolkitError):
    """A command-line filter parameter could not be understood."""

    def __init__(self, message: str, argument: str):
        """
        Initialize syntax argument error.

        Args:
            message: Error message
            argument: Raw argument that failed to parse
        """
        super().__init__(message)
        self.argument = argument
