"""
Module for parsing media filenames into structured records, and for cleaning
raw title fragments into display-ready titles.

Patterns are tried in a fixed order and the first one that yields a usable
title wins:
  1. "Show.Name.S01E02"  (season/episode markers)
  2. "Show.Name.1x02"    (season x episode)
  3. "Movie.Name.2007" / "Movie Name (2007)"
  4. the whole stem as a movie title, without a year
"""
from dataclasses import dataclass
from typing import Callable

from medianamer.rename.models import MediaRecord, MediaType
from medianamer.utils import CROSS_EPISODE_REGEX, MOVIE_YEAR_REGEX, SEASON_EPISODE_REGEX, LogLevel, file_util, logger
from medianamer.utils.constants import DASH_RUN, DOT_UNDERSCORE_RUN, WHITESPACE_RUN


@dataclass(frozen=True)
class PatternMatch:
    """Result of one pattern matcher, tagged with the media type it found."""

    kind: MediaType
    title: str
    season: int | None = None
    episode: int | None = None
    year: int | None = None


def clean_title(raw: str) -> str:
    """Replace separators with spaces, collapse whitespace, and trim."""
    text = DOT_UNDERSCORE_RUN.sub(" ", raw)
    text = DASH_RUN.sub(" ", text)
    return WHITESPACE_RUN.sub(" ", text).strip()


def title_case(text: str) -> str:
    """Uppercase the first character of each word; leave the rest alone."""
    return " ".join(w[0].upper() + w[1:] if w else w for w in text.split(" "))


def normalize_title(raw: str) -> str:
    """Turn a raw filename fragment into a display title.

    Examples:
      "show.name_" -> "Show Name"
      "the-office--US" -> "The Office US"
    """
    return title_case(clean_title(raw))


def match_season_episode(stem: str) -> PatternMatch | None:
    """Match "Title S01E02" style names (any separator, any S/E casing)."""
    m = SEASON_EPISODE_REGEX.search(stem)
    if not m:
        return None
    return PatternMatch(MediaType.TV, normalize_title(m.group(1)), season=int(m.group(2)), episode=int(m.group(3)))


def match_cross_episode(stem: str) -> PatternMatch | None:
    """Match "Title 1x02" style names."""
    m = CROSS_EPISODE_REGEX.search(stem)
    if not m:
        return None
    return PatternMatch(MediaType.TV, normalize_title(m.group(1)), season=int(m.group(2)), episode=int(m.group(3)))


def match_movie_year(stem: str) -> PatternMatch | None:
    """Match "Title 2007" or "Title (2007)"; the first 19xx/20xx token wins."""
    m = MOVIE_YEAR_REGEX.search(stem)
    if not m:
        return None
    return PatternMatch(MediaType.MOVIE, normalize_title(m.group(1)), year=int(m.group(2)))


def match_fallback(stem: str) -> PatternMatch | None:
    """Treat the whole stem as a movie title with no year."""
    return PatternMatch(MediaType.MOVIE, normalize_title(stem))


MATCHERS: list[tuple[str, Callable[[str], PatternMatch | None]]] = [
    ("season_episode", match_season_episode),
    ("cross_episode", match_cross_episode),
    ("movie_year", match_movie_year),
    ("fallback", match_fallback),
]


def classify_stem(stem: str) -> tuple[str, PatternMatch] | None:
    """Run the matchers in order and return (matcher name, match) for the first usable one."""
    for name, matcher in MATCHERS:
        match = matcher(stem)
        if match is not None and match.title:
            return name, match
    return None


def parse_filename(basename: str) -> MediaRecord | None:
    """
    Classify a basename into a MediaRecord.

    Returns None only when not even the fallback yields a title, e.g. for an
    empty name or one made of separators alone.
    Examples:
      "Show.Name.S01E02.mkv" -> TV "Show Name", season 1, episode 2
      "Movie.Name.2007.mkv"  -> Movie "Movie Name", year 2007
      "randomfile.txt"       -> Movie "Randomfile", no year
    """
    stem, extension = file_util.split_extension(basename)
    result = classify_stem(stem)
    if result is None:
        logger.log("parse.none", LogLevel.DEBUG, file=basename)
        return None

    name, match = result
    logger.log(
        "parse.fallback" if name == "fallback" else "parse.match",
        LogLevel.DEBUG,
        file=basename,
        matcher=name,
        type=match.kind.value,
        title=match.title,
    )
    return MediaRecord(
        type=match.kind,
        title=match.title,
        extension=extension,
        original_basename=basename,
        season=match.season,
        episode=match.episode,
        year=match.year,
    )
