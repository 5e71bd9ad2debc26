# python
"""
Utilities to build normalized filenames for TV episodes and movies.

This module turns a parsed MediaRecord back into a basename that follows a
single convention per media type:

- "Title - S01E02.ext"
- "Title (Year).ext"
- "Title.ext"

Notes:
- Season and episode are zero-padded to two digits. A TV record missing
  either renders it as "00" rather than failing.
- The extension is appended verbatim, including its leading dot, and may
  be empty.
- Formatting is pure and deterministic so a name that is already
  normalized parses back to the same record and formats to itself.

Example:
    generate_filename(MediaRecord(MediaType.TV, "Show Name", ".mkv", "x", 1, 2)) -> "Show Name - S01E02.mkv"
"""
from medianamer.rename.models import MediaRecord, MediaType


def _pad2(value: int | None) -> str:
    return "00" if value is None else f"{value:02d}"


def generate_filename(record: MediaRecord) -> str:
    """
    Build the normalized basename for `record`.

    Rules:
    1. TV: "Title - S{season:02d}E{episode:02d}{ext}"
    2. Movie with a year: "Title (Year){ext}"
    3. Otherwise: "Title{ext}"
    """
    if record.type is MediaType.TV:
        return f"{record.title} - S{_pad2(record.season)}E{_pad2(record.episode)}{record.extension}"

    if record.year is not None:
        return f"{record.title} ({record.year}){record.extension}"

    return f"{record.title}{record.extension}"
