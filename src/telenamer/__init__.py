"""
A batch renaming module for TV episode files.

This module provides a set of utilities for giving a flat directory of TV
episodes canonical names. Each file name is parsed into a season/episode guess,
the guess is enriched against TheTVDB, and a user-supplied template produces the
new name. Renames are journaled so the last run can be undone.

The module is organized into several categories:
- Parsing, enriching and renaming files (`telenamer.rename`).
- Interfacing with TheTVDB for metadata lookups (`telenamer.utils.tvdb`).
- Utility functions for configuration, logging and filesystem access.
"""

__version__ = "1.0.0"

# Debug flag for controlling verbose output
DEBUG: bool = False

__all__ = ["__version__", "DEBUG"]
