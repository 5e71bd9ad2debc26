"""
Error taxonomy for per-file rename failures.

Every failure the core can report for a single file is a `RenameError`
carrying an `ErrorKind` discriminator and the path it concerns. The batch
layer catches these, records them against the file, and carries on with the
next one; nothing here aborts a whole run.

A cross-device move is not an error: it is handled inside the move step by
copying and deleting the original.
"""
from enum import Enum
from pathlib import Path


class ErrorKind(Enum):
    """Kinds of per-file failure."""
    UNPARSEABLE = "unparseable"
    DESTINATION_EXISTS = "destination_exists"
    FILESYSTEM = "filesystem"


class RenameError(Exception):
    """Base class for per-file rename failures."""

    kind: ErrorKind = ErrorKind.FILESYSTEM

    def __init__(self, message: str, path: Path | str | None = None):
        super().__init__(message)
        self.path = Path(path) if path is not None else None


class UnparseableError(RenameError):
    """No usable title could be derived from the filename."""

    kind = ErrorKind.UNPARSEABLE


class DestinationExistsError(RenameError):
    """The destination already exists and replacing was not requested."""

    kind = ErrorKind.DESTINATION_EXISTS


class FilesystemError(RenameError):
    """A stat, mkdir, rename, copy, or unlink call failed."""

    kind = ErrorKind.FILESYSTEM
