"""Debug logging front end with pluggable logger back ends."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from typing import Any, TextIO


class Logger(ABC):
    """Back end that receives printf-style messages from a :class:`Debug`."""

    @abstractmethod
    def log_format(self, fmt: str, *args: Any) -> None:
        """Emit an informational message."""

    @abstractmethod
    def log_warning_format(self, fmt: str, *args: Any) -> None:
        """Emit a warning message."""

    @abstractmethod
    def log_error_format(self, fmt: str, *args: Any) -> None:
        """Emit an error message."""


class DefaultLogger(Logger):
    """Writes informational messages to a stream.

    Warnings and errors are formatted, so bad arguments still raise, but
    they are not written; the formatted text is returned instead.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def log_format(self, fmt: str, *args: Any) -> None:
        self.stream.write(fmt % args)

    def log_warning_format(self, fmt: str, *args: Any) -> str:
        """Format a warning without emitting it and return the text."""
        return fmt % args

    def log_error_format(self, fmt: str, *args: Any) -> str:
        """Format an error without emitting it and return the text."""
        return fmt % args


class Debug:
    """Forwards log calls to a :class:`Logger`, defaulting to :class:`DefaultLogger`."""

    def __init__(self, logger: Logger | None = None) -> None:
        self._logger: Logger | None = logger if logger is not None else DefaultLogger()

    @property
    def logger(self) -> Logger | None:
        return self._logger

    def log(self, fmt: str, *args: Any) -> None:
        if self._logger is None:
            return
        self._logger.log_format(fmt, *args)

    def log_warning(self, fmt: str, *args: Any) -> None:
        if self._logger is None:
            return
        self._logger.log_warning_format(fmt, *args)

    def log_error(self, fmt: str, *args: Any) -> None:
        if self._logger is None:
            return
        self._logger.log_error_format(fmt, *args)

    def set_logger(self, logger: Logger | None) -> None:
        """Replace the back end; ``None`` silences all output."""
        self._logger = logger


debug = Debug()