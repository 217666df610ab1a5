"""Timestamped, levelled log lines for the console."""

import sys
from datetime import datetime
from enum import IntEnum


class LogLevel(IntEnum):
    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3
    FATAL = 4


_LABELS = {
    LogLevel.DEBUG: "[DEBUG]",
    LogLevel.INFO: "[INFO]",
    LogLevel.WARNING: "[WARNING]",
    LogLevel.ERROR: "[ERROR]",
    LogLevel.FATAL: "[FATAL]",
}

_COLORS = {
    LogLevel.DEBUG: "\033[32m",
    LogLevel.INFO: "",
    LogLevel.WARNING: "\033[33m",
    LogLevel.ERROR: "\033[31m",
    LogLevel.FATAL: "\033[41m\033[30m",
}

COLOR_RESET = "\033[0m"

# Longest line, colour prefix included, before the reset sequence.
_MAX_LINE_LENGTH = 1023


def filename_from_path(path):
    """The part of ``path`` after its last separator."""
    text = str(path)
    cut = max(text.rfind("\\"), text.rfind("/"))
    return text[cut + 1:]


def format_log_line(level, file, line, message, now, colored):
    """Build one log line ending in a newline, with colour codes if ``colored``."""
    level = LogLevel(level)
    prefix = _COLORS[level] if colored else ""
    text = (
        f"{prefix}{now.year:02d}-{now.month:02d}-{now.day:02d} "
        f"{now.hour:02d}:{now.minute:02d} "
        f"{file}:{line} {_LABELS[level]} {message}\n"
    )
    text = text[:_MAX_LINE_LENGTH]
    if colored:
        text += COLOR_RESET
    return text


def debug_log(level, file, line, message):
    """Write a log line to standard output, coloured when it is a terminal."""
    stream = sys.stdout
    isatty = getattr(stream, "isatty", None)
    colored = bool(isatty and isatty())
    stream.write(format_log_line(level, file, line, message, datetime.now(), colored))
    stream.flush()