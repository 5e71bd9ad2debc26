"""Value types passed between the parser, the formatter, and the move step."""
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from medianamer.utils import CONTENT_TYPE_MOVIES, CONTENT_TYPE_TV


class MediaType(Enum):
    TV = CONTENT_TYPE_TV
    MOVIE = CONTENT_TYPE_MOVIES


@dataclass(frozen=True)
class MediaRecord:
    """A classified media file: what it is, and the pieces needed to name it."""

    type: MediaType
    title: str
    extension: str
    original_basename: str
    season: int | None = None
    episode: int | None = None
    year: int | None = None

    def __post_init__(self):
        if not self.title:
            raise ValueError("MediaRecord title must not be empty")
        if self.type is MediaType.TV and self.year is not None:
            raise ValueError("TV records do not carry a year")
        if self.type is MediaType.MOVIE and (self.season is not None or self.episode is not None):
            raise ValueError("Movie records do not carry season or episode")


@dataclass(frozen=True)
class RenameOptions:
    """Per-file move settings.

    `apply` False means simulate only. `target_directory` overrides the
    original file's parent as the destination directory.
    """

    apply: bool = False
    replace: bool = False
    target_directory: Path | None = None
