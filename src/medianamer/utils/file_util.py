"""
Path helpers for splitting filenames, comparing locations, and finding files.

This module contains the small filesystem-facing helpers shared by the parser,
the move step, and the batch runner: extension splitting with platform
semantics, canonical path comparison, and an ordered walk over source paths
that never descends into the output directory.
"""
import os
from pathlib import Path
from typing import Iterable

from medianamer.utils import LogLevel, logger


def split_extension(basename: str) -> tuple[str, str]:
    """
    Split a basename into (stem, extension).

    The extension starts at the last dot that is not a leading dot, so
    ".hidden" has no extension and "file" has an empty one.
    """
    return os.path.splitext(basename)


def canonical_path(path: Path | str) -> str:
    """Absolute, normalized form of `path` used for same-location checks."""
    return os.path.normcase(os.path.abspath(path))


def same_location(a: Path | str, b: Path | str) -> bool:
    """True when `a` and `b` name the same path once canonicalized."""
    return canonical_path(a) == canonical_path(b)


def walk_paths(sources: Iterable[Path | str], recursive: bool = False, exclude: Path | str | None = None) -> list[Path]:
    """
    Expand source paths into an ordered list of files.

    Files are returned as given. Directories contribute their files in name
    order, and with `recursive` their sub-directories too, except any
    sub-directory that resolves to `exclude`. Missing sources are logged and
    skipped.
    """
    excluded = Path(exclude).resolve() if exclude is not None else None
    results: list[Path] = []

    for source in sources:
        path = Path(source)
        if path.is_file():
            results.append(path)
        elif path.is_dir():
            results.extend(_walk_directory(path, recursive, excluded))
        else:
            logger.log("walk.missing", LogLevel.WARN, path=str(path))

    return results


def _walk_directory(directory: Path, recursive: bool, excluded: Path | None) -> list[Path]:
    found: list[Path] = []
    try:
        entries = sorted(directory.iterdir(), key=lambda p: p.name)
    except OSError as e:
        logger.log("walk.error", LogLevel.WARN, path=str(directory), error=str(e))
        return found

    for entry in entries:
        if entry.is_file():
            found.append(entry)
        elif entry.is_dir() and recursive:
            if excluded is not None and entry.resolve() == excluded:
                logger.log("walk.skip_target", LogLevel.DEBUG, path=str(entry))
                continue
            found.extend(_walk_directory(entry, recursive, excluded))
    return found
