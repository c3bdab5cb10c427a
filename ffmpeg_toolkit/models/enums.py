"""Enumerations of ffmpeg constants."""

from enum import IntEnum


class LogLevel(IntEnum):
    """Numeric values accepted by ffmpeg's ``-loglevel`` option."""

    QUIET = -8
    PANIC = 0
    FATAL = 8
    ERROR = 16
    WARNING = 24
    INFO = 32
    VERBOSE = 40
    DEBUG = 48
    TRACE = 56
