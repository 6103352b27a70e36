"""Structured terminal logging for create-nocdn-app."""

from __future__ import annotations

import os
import sys
from enum import IntEnum

from rich.console import Console
from rich.status import Status
from rich.text import Text


class LogLevel(IntEnum):
    TRACE = 10
    DEBUG = 20
    INFO = 30
    SUCCESS = 35
    WARNING = 40
    ERROR = 50


_LEVEL_BY_NAME = {
    "trace": LogLevel.TRACE,
    "debug": LogLevel.DEBUG,
    "info": LogLevel.INFO,
    "success": LogLevel.SUCCESS,
    "warning": LogLevel.WARNING,
    "warn": LogLevel.WARNING,
    "error": LogLevel.ERROR,
}
_DEFAULT_LEVEL = LogLevel.INFO
_configured_level = None


def _normalize_level(value: str | None) -> LogLevel:
    if value is None:
        return _DEFAULT_LEVEL
    normalized = value.strip().lower()
    if not normalized:
        return _DEFAULT_LEVEL
    return _LEVEL_BY_NAME.get(normalized, _DEFAULT_LEVEL)


def configured_level() -> LogLevel:
    global _configured_level
    if _configured_level is None:
        _configured_level = _normalize_level(
            os.environ.get("CREATE_NOCDN_APP_LOG_LEVEL")
        )
    return _configured_level


def set_level(value: str | None) -> None:
    """Set the active log level."""
    global _configured_level
    _configured_level = _normalize_level(value)


def is_enabled(level: LogLevel) -> bool:
    return level >= configured_level()


def _no_color() -> bool:
    return bool(
        os.environ.get("NO_COLOR") or os.environ.get("CREATE_NOCDN_APP_NO_COLOR")
    )


def _console(*, stderr: bool) -> Console:
    return Console(
        file=sys.stderr if stderr else sys.stdout,
        soft_wrap=True,
        highlight=False,
        no_color=_no_color(),
    )


def _default_style(level: LogLevel) -> str:
    if level is LogLevel.TRACE:
        return "dim"
    if level is LogLevel.DEBUG:
        return "cyan"
    if level is LogLevel.SUCCESS:
        return "green"
    if level is LogLevel.WARNING:
        return "yellow"
    if level is LogLevel.ERROR:
        return "bold red"
    return ""


def emit(
    level: LogLevel,
    message: str,
    *,
    style: str | None = None,
    stderr: bool | None = None,
) -> None:
    if not is_enabled(level):
        return
    target_stderr = stderr if stderr is not None else level >= LogLevel.WARNING
    text = Text(message, style=style or _default_style(level))
    _console(stderr=target_stderr).print(text)


def debug(message: str, *, style: str | None = None) -> None:
    emit(LogLevel.DEBUG, message, style=style, stderr=False)


def info(message: str, *, style: str | None = None) -> None:
    emit(LogLevel.INFO, message, style=style, stderr=False)


def warning(message: str, *, style: str | None = None) -> None:
    emit(LogLevel.WARNING, message, style=style, stderr=True)


def error(message: str, *, style: str | None = None) -> None:
    emit(LogLevel.ERROR, message, style=style, stderr=True)


def intro(title: str) -> None:
    """Print the opening banner of an interactive session."""
    emit(LogLevel.INFO, f"┌  {title}", style="bold", stderr=False)


def outro(message: str) -> None:
    """Print the closing line of a successful session."""
    emit(LogLevel.INFO, f"└  {message}", style="bold green", stderr=False)


def cancel(message: str) -> None:
    """Print the closing line of an aborted session.

    Cancellation is not an error, so this always writes to stdout.
    """
    emit(LogLevel.INFO, f"└  {message}", style="red", stderr=False)


class Spinner:
    """Single-line progress indicator for sequential setup steps."""

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or _console(stderr=False)
        self._status: Status | None = None
        self._message: str | None = None

    @property
    def active(self) -> bool:
        return self._message is not None

    def start(self, message: str) -> None:
        if self.active:
            self.stop()
        self._message = message
        if self._console.is_terminal:
            self._status = self._console.status(message, spinner="dots")
            self._status.start()
        else:
            info(f"◇  {message}")

    def stop(self, message: str | None = None, *, failed: bool = False) -> None:
        if not self.active:
            return
        if self._status is not None:
            self._status.stop()
            self._status = None
        final = message or self._message or ""
        self._message = None
        if failed:
            emit(LogLevel.ERROR, f"■  {final}", stderr=False)
        else:
            emit(LogLevel.SUCCESS, f"◆  {final}", stderr=False)
