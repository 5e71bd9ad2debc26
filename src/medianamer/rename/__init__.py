"""
File renaming functionality for normalizing media filenames.

This package contains utilities to parse media filenames, format normalized
filenames for TV episodes and movies, and move files into place safely.

Package organization:
- models: MediaRecord and RenameOptions value types.
- parser: Filename classification and title normalization (e.g. extracting
  titles, seasons, episodes, and years from filenames).
- formatter: Normalized filename generation from a parsed record.
- core: Relocation of a single file, with dry-run, replace, and
  cross-device handling.
- batch: High-level batch processing with progress tracking for renaming many
  files at once.

Public API (top-level exports)
- Parsing:
  - `parse_filename`: Classify a basename into a MediaRecord (or None).
  - `normalize_title`: Clean a raw fragment into a display title.
- Formatting:
  - `generate_filename`: Build the normalized basename for a record.
- Core renaming:
  - `relocate`: Move (or simulate moving) a file; returns the destination.
- Batch processing:
  - `rename_files`: Walk sources and rename every file found.

Behavior notes:
- `relocate` raises `DestinationExistsError` or `FilesystemError`; the batch
  layer records these per file and keeps going.
- A move across filesystems falls back to copy + delete.

Example:
    from medianamer import rename
    record = rename.parse_filename("Show.Name.S01E02.mkv")
    rename.generate_filename(record)  # "Show Name - S01E02.mkv"
"""
# Models
from .models import MediaRecord, MediaType, RenameOptions

# Public parsing functions
from .parser import (
    parse_filename,
    normalize_title,
)

# Formatting
from .formatter import generate_filename

# Core renaming
from .core import relocate

# Batch processing
from .batch import BatchSummary, RenameOutcome, process_file, rename_files

__all__ = [
    # Models
    "MediaRecord",
    "MediaType",
    "RenameOptions",
    # Parsing
    "parse_filename",
    "normalize_title",
    # Formatting
    "generate_filename",
    # Core renaming
    "relocate",
    # Batch processing
    "BatchSummary",
    "RenameOutcome",
    "process_file",
    "rename_files",
]
