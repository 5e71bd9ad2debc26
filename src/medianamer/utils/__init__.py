"""
A module providing constants, error types, and logging mechanisms
for media renaming tasks.

This module includes the filename patterns and status codes used by the
renaming workflow, the per-file error taxonomy, and a structured logging
mechanism for safe and controlled outputs.
"""

from .constants import (
    CONTENT_TYPE_MOVIES,
    CONTENT_TYPE_TV,
    CROSS_EPISODE_REGEX,
    DEFAULT_TARGET,
    EXIT_FAILURES,
    EXIT_OK,
    EXIT_USAGE,
    LOG_FILE,
    LOG_LEVEL,
    MOVIE_YEAR_REGEX,
    SEASON_EPISODE_REGEX,
    STATUS_DRY_RUN,
    STATUS_EXISTS,
    STATUS_FAIL,
    STATUS_RENAMED,
    STATUS_SKIP,
    STATUS_UNCHANGED,
)
from .errors import (
    DestinationExistsError,
    ErrorKind,
    FilesystemError,
    RenameError,
    UnparseableError,
)
from .logger import LogLevel

__all__ = [
    "CONTENT_TYPE_MOVIES",
    "CONTENT_TYPE_TV",
    "SEASON_EPISODE_REGEX",
    "CROSS_EPISODE_REGEX",
    "MOVIE_YEAR_REGEX",
    "LOG_LEVEL",
    "LOG_FILE",
    "DEFAULT_TARGET",
    "STATUS_RENAMED",
    "STATUS_DRY_RUN",
    "STATUS_UNCHANGED",
    "STATUS_SKIP",
    "STATUS_EXISTS",
    "STATUS_FAIL",
    "EXIT_OK",
    "EXIT_FAILURES",
    "EXIT_USAGE",
    "ErrorKind",
    "RenameError",
    "UnparseableError",
    "DestinationExistsError",
    "FilesystemError",
    "LogLevel",
]
