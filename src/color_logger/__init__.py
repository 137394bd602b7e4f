"""Public exports for :mod:`color_logger`.

This package provides a thin colorizing wrapper around a logging facility.
Most runtime behavior is implemented in :class:`color_logger.logger.ColorLogger`.
"""

from .colors import RESET, Background, Foreground, rgb_colors, rgb_foreground, strip_ansi
from .config import LoggerConfig, is_development_environment
from .log_sink import ConsoleLogSink, FileLogSink, LogSink, StdLoggingSink
from .logger import ColorLogger

__all__ = [
    "RESET",
    "Background",
    "ColorLogger",
    "ConsoleLogSink",
    "FileLogSink",
    "Foreground",
    "LogSink",
    "LoggerConfig",
    "StdLoggingSink",
    "is_development_environment",
    "rgb_colors",
    "rgb_foreground",
    "strip_ansi",
]
