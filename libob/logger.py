"""A small logger writing level-tagged lines to the console and/or a file."""

from __future__ import annotations

import sys
import time
from enum import Enum
from typing import TextIO

__all__ = ["LogLevel", "Logger"]

_CURSOR_UP = "\x1b[1A"
_CLEAR_LINE = "\x1b[2K"


class LogLevel(Enum):
    """Severity attached to a log line."""

    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    DEBUG = "DEBUG"
    TRACE = "TRACE"
    NULL_LOG_LEVEL = "NULL"

    def __str__(self) -> str:
        return self.value


class Logger:
    """Writes log lines to the console, a file, or both.

    With no file the logger writes to the console. Given a file, console
    output is off unless ``log_to_console`` is set.
    """

    def __init__(
        self,
        file_name: str | None = None,
        log_to_console: bool | None = None,
        show_timestamp: bool = True,
    ) -> None:
        self._file: TextIO | None = None
        self.file_name: str | None = None
        self.log_to_file = False
        self.log_to_console = True if log_to_console is None else log_to_console
        self.show_timestamp = show_timestamp
        self.silent = False
        self.last_log = ""
        self._last_line_count = 0
        if file_name is not None:
            self.set_log_file(file_name, bool(log_to_console), show_timestamp)

    def log(
        self,
        message: str,
        level: LogLevel = LogLevel.INFO,
        overwrite: bool = False,
    ) -> None:
        """Emit ``message``; with ``overwrite`` the previous console entry is erased first."""
        if self.silent:
            return
        prefix = f"[{self.timestamp()}]" if self.show_timestamp else "[LOG]"
        line = f"{prefix} {level} {message}"
        if self.log_to_console:
            if overwrite:
                sys.stdout.write((_CURSOR_UP + _CLEAR_LINE) * self._last_line_count)
            sys.stdout.write(line + "\n")
            sys.stdout.flush()
        if self.log_to_file and self._file is not None and not self._file.closed:
            self._file.write(line + "\n")
            self._file.flush()
        self.last_log = line
        self._last_line_count = line.count("\n") + 1

    def timestamp(self) -> str:
        """Current local time as ``YYYY-MM-DD HH:MM:SS``."""
        return time.strftime("%Y-%m-%d %H:%M:%S", time.localtime())

    def set_silent(self, silent: bool) -> None:
        """Suppress or resume all output."""
        self.silent = silent

    def set_log_file(
        self, file_name: str, log_to_console: bool = False, show_timestamp: bool = True
    ) -> None:
        """Start writing to ``file_name``, truncating it and closing any previous file."""
        self.log_to_file = True
        self.log_to_console = log_to_console
        self.show_timestamp = show_timestamp
        self.close()
        self.file_name = file_name
        self._file = open(file_name, "w", encoding="utf-8")

    def close(self) -> None:
        """Close the log file if one is open."""
        if self._file is not None and not self._file.closed:
            self._file.close()

    def __enter__(self) -> Logger:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()