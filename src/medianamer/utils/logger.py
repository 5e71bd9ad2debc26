"""
Provides structured logging with log levels and an optional file mirror.

This module provides a structured logging system with UTC timestamps, log levels,
and key-value pair formatting for better log parsing and analysis. Lines are
written through `tqdm.write` so they never tear an active progress bar.
"""
from datetime import datetime, timezone
from enum import Enum
from pathlib import Path
from typing import Any, Dict, TextIO

from tqdm import tqdm

_separator = " | "
_log_file: TextIO | None = None


class LogLevel(Enum):
    """Log level enumeration."""
    TRACE = 0
    DEBUG = 1
    INFO = 2
    WARN = 3
    ERROR = 4


_current_level = LogLevel.INFO


def set_log_level(level: LogLevel) -> None:
    """Set the current log level."""
    global _current_level
    _current_level = level


def get_log_level() -> LogLevel:
    """Get the current log level."""
    return _current_level


def level_from_name(name: str) -> LogLevel:
    """Map a level name such as "debug" or "WARNING" to a LogLevel."""
    key = name.strip().upper()
    if key == "WARNING":
        key = "WARN"
    try:
        return LogLevel[key]
    except KeyError:
        raise ValueError(f"Unknown log level: {name}") from None


def set_log_file(path: Path | str | None) -> None:
    """Mirror every emitted line to `path` (append mode). Pass None to stop."""
    global _log_file
    if _log_file is not None:
        _log_file.close()
        _log_file = None
    if path is None:
        return
    log_path = Path(path).expanduser()
    log_path.parent.mkdir(parents=True, exist_ok=True)
    _log_file = open(log_path, "a", encoding="utf-8", buffering=1)


def _format_kv(data: Dict[str, Any]) -> str:
    """Format key-value pairs for logging."""
    parts = []
    for key, value in data.items():
        if isinstance(value, str):
            # Escape quotes and newlines to keep log entries single-line.
            escaped = value.replace("\r", "\\r").replace("\n", "\\n")
            escaped = escaped.replace('"', '\\"')
            parts.append(f'{key}="{escaped}"')
        elif value is None:
            parts.append(f'{key}=null')
        elif isinstance(value, bool):
            parts.append(f'{key}={str(value).lower()}')
        elif isinstance(value, Path):
            parts.append(f'{key}="{value}"')
        else:
            parts.append(f'{key}={value}')
    return _separator.join(parts)


def _write_line(text: str) -> None:
    tqdm.write(text)
    if _log_file is not None:
        _log_file.write(text + "\n")


def _should_log(level: LogLevel) -> bool:
    """Check if a message at the given level should be logged."""
    return level.value >= _current_level.value


def log(event: str, level: LogLevel = LogLevel.INFO, **kwargs) -> None:
    """
    Structured logging function.

    Args:
        event: Event name (e.g., 'parse.match', 'relocate.move')
        level: Log level (TRACE, DEBUG, INFO, WARN, ERROR)
        **kwargs: Key-value pairs to log
    """
    if not _should_log(level):
        return

    timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M:%S")
    kv_str = _format_kv(kwargs) if kwargs else ""
    header = f"{timestamp}{_separator}[{level.name}]{_separator}{event}"

    if kv_str:
        _write_line(f"{header}{_separator}{kv_str}")
    else:
        _write_line(header)


def safe_print(*args, sep: str = " ") -> None:
    """
    Print plain text without breaking progress bars.
    Use log() for structured logging instead.
    """
    _write_line(sep.join(str(a) for a in args))
