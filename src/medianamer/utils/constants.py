"""
Constants and configuration settings for media renaming.

This module contains the filename patterns used to classify media files,
the status codes reported for each processed file, and run settings read
from the environment (or a local `.env` file) so a default target directory
and log configuration can be set without passing flags every time.
"""

import os
import re

from dotenv import load_dotenv

load_dotenv()

# Content type constants
CONTENT_TYPE_MOVIES = "Movie"
CONTENT_TYPE_TV = "TV"

# Run settings
LOG_LEVEL = os.getenv("MEDIANAMER_LOG_LEVEL", "INFO").upper()
LOG_FILE = os.getenv("MEDIANAMER_LOG_FILE")
DEFAULT_TARGET = os.getenv("MEDIANAMER_TARGET")

# Regex patterns for filename parsing (applied to the stem, first match wins)
# Show.Name.S01E02 / Show Name - s1e02
SEASON_EPISODE_REGEX = re.compile(r"(.+?)[. _\-]*[sS](\d{1,2})[eE](\d{2})", re.ASCII)
# Show.Name.1x02 / Show Name - 1X02
CROSS_EPISODE_REGEX = re.compile(r"(.+?)[. _\-]*(\d{1,2})[xX](\d{2})", re.ASCII)
# Movie.Name.2007 / Movie Name (2007)
MOVIE_YEAR_REGEX = re.compile(r"(.+?)[. _\-]*\(?((?:19|20)\d{2})\)?", re.ASCII)

# Title normalization
DOT_UNDERSCORE_RUN = re.compile(r"[._]+")
DASH_RUN = re.compile(r"-+")
WHITESPACE_RUN = re.compile(r"\s+")

# Processing status codes
STATUS_RENAMED = "RENAMED"
STATUS_DRY_RUN = "DRY-RUN"
STATUS_UNCHANGED = "UNCHANGED"
STATUS_SKIP = "SKIP"
STATUS_EXISTS = "EXISTS"
STATUS_FAIL = "FAIL"

# CLI exit codes
EXIT_OK = 0
EXIT_FAILURES = 1
EXIT_USAGE = 2
