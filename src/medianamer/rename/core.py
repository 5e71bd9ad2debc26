"""
Utilities for moving a file to its normalized name and location.

This module computes where a renamed file should go, checks for an existing
file there, and performs the move. In dry-run mode it only computes the
destination. When source and destination live on different filesystems the
atomic rename is replaced by a copy followed by deleting the original.

Functions:
- relocate: Move (or simulate moving) a file to a new basename.
- destination_for: Compute the destination path without touching the disk.
- _check_destination: Enforce the replace policy on an existing destination.
- _move: Rename, with the cross-device copy+delete fallback.
"""
import errno
import os
import shutil
from pathlib import Path

from medianamer.rename.models import RenameOptions
from medianamer.utils import DestinationExistsError, FilesystemError, LogLevel, file_util, logger


def destination_for(original_path: Path | str, new_basename: str, options: RenameOptions) -> Path:
    """Return target_directory/new_basename, or the original's parent when no target is set."""
    original = Path(original_path)
    dest_dir = Path(options.target_directory) if options.target_directory else original.parent
    return dest_dir / new_basename


def relocate(original_path: Path | str, new_basename: str, options: RenameOptions) -> Path:
    """
    Move `original_path` to `new_basename`, in place or under the target directory.

    Parameters:
    - original_path (Path|str): The file to move.
    - new_basename (str): Filename (no directory) to give it.
    - options (RenameOptions): apply/replace flags and optional target directory.

    Returns:
    - Path: The destination path. Returned unchanged when it is the same
      location as the original, and returned without any filesystem access
      when `options.apply` is False.

    Raises:
    - DestinationExistsError: The destination exists and `options.replace` is False.
    - FilesystemError: Creating the directory, deleting the old destination,
      or moving the file failed.
    """
    original = Path(original_path)
    destination = destination_for(original, new_basename, options)

    if file_util.same_location(original, destination):
        logger.log("relocate.unchanged", LogLevel.TRACE, path=str(destination))
        return destination

    if not options.apply:
        return destination

    try:
        destination.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise FilesystemError(f"Cannot create directory {destination.parent}: {e}", destination.parent) from e

    _check_destination(original, destination, options.replace)
    _move(original, destination)
    logger.log("relocate.moved", LogLevel.DEBUG, src=str(original), dest=str(destination))
    return destination


def _check_destination(original: Path, destination: Path, replace: bool) -> None:
    """
    Enforce the replace policy for an existing destination.

    A stat failure other than "not found" does not block the move; it is
    logged and the move step reports whatever the real problem is. A
    destination that is the original file itself (through a symlinked
    directory, or a case-only rename on a case-insensitive filesystem) is
    not a conflict and is never deleted.
    """
    try:
        os.stat(destination)
    except FileNotFoundError:
        return
    except OSError as e:
        logger.log("relocate.stat_error", LogLevel.WARN, path=str(destination), error=str(e))
        return

    try:
        same_file = os.path.samefile(original, destination)
    except OSError:
        same_file = False
    if same_file:
        logger.log("relocate.same_file", LogLevel.DEBUG, src=str(original), dest=str(destination))
        return

    if not replace:
        raise DestinationExistsError(f"Destination exists and replace not set: {destination}", destination)

    logger.log("relocate.replace", LogLevel.DEBUG, path=str(destination))
    try:
        os.unlink(destination)
    except OSError as e:
        raise FilesystemError(f"Cannot remove existing {destination}: {e}", destination) from e


def _move(original: Path, destination: Path) -> None:
    """Rename `original` to `destination`, copying then deleting across devices."""
    try:
        os.rename(original, destination)
        return
    except OSError as e:
        if e.errno != errno.EXDEV:
            raise FilesystemError(f"Cannot move {original} to {destination}: {e}", original) from e

    logger.log("relocate.cross_device", LogLevel.DEBUG, src=str(original), dest=str(destination))
    try:
        shutil.copy2(original, destination)
        os.unlink(original)
    except OSError as e:
        raise FilesystemError(f"Cross-device move of {original} failed: {e}", original) from e
