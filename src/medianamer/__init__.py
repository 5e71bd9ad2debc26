"""
A media file renaming module for normalizing TV and movie filenames.

This module provides a set of utilities for classifying media files by their
filename, producing normalized names, and moving files into place. Core
functionalities include filename parsing, title normalization, name
generation, and safe, cross-device-aware relocation.

The module is organized into several categories:
- Parsing and formatting filenames (movies and TV shows).
- Relocating files on disk, with dry-run and conflict handling.
- Utility functions for logging, path walking, and configuration.
"""

__version__ = "1.0.0"

# Debug flag for controlling verbose output
DEBUG: bool = False

__all__ = ["__version__", "DEBUG"]
