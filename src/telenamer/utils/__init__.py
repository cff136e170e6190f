"""
Constants, configuration, logging and filesystem helpers for telenamer.

This module re-exports the constants and log levels that most of the
renaming pipeline needs. Errors, configuration, the TheTVDB client and the
filesystem handle live in their own submodules.
"""

from .constants import (
    CONFIRM_YES,
    DEFAULT_FORMAT,
    SUBTITLE_EXTENSIONS,
    STATUS_FAIL,
    STATUS_OK,
    TVDB_BASE_URL,
    UNDO_JOURNAL_PATH,
    WORKERS,
)
from .logger import LogLevel

__all__ = [
    "DEFAULT_FORMAT",
    "SUBTITLE_EXTENSIONS",
    "CONFIRM_YES",
    "TVDB_BASE_URL",
    "UNDO_JOURNAL_PATH",
    "WORKERS",
    "STATUS_OK",
    "STATUS_FAIL",
    "LogLevel",
]
