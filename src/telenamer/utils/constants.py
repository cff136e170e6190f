"""
Constants and configuration settings for episode renaming.

This module contains the constants used across the renaming pipeline: the
default naming template, known subtitle extensions, the TheTVDB endpoint, the
undo journal location and the worker count used for bounded lookups. Values
that are environment-specific can be overridden through environment variables
or a `.env` file.
"""

import os
import re
import tempfile
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

# Run settings
WORKERS = int(os.getenv("TELENAMER_WORKERS", "4"))

# Naming template used when the caller does not supply one
DEFAULT_FORMAT = "{s} - S{0z}E{0e} - {n}"

# Subtitle file extensions (without the dot)
SUBTITLE_EXTENSIONS = {"srt", "sub", "ass", "ssa", "vtt", "idx"}

# Separator tokens that confuse the heuristic parser: hyphen, pipe, colon and brackets
SEPARATOR_REGEX = re.compile(r"\s*[-|:\[\]]\s*")

# Characters that are not allowed in portable file names
INVALID_FILENAME_CHARS = '?\\/*:"<>|'

# TheTVDB API configuration
TVDB_BASE_URL = os.getenv("TVDB_BASE_URL", "https://api.thetvdb.com")
TVDB_TIMEOUT = 10
TVDB_DEFAULT_LANGUAGE = "en"

# Credentials file looked up next to the working directory by default
LOGIN_FILE = "login.json"

# Undo journal, overwritten by every run
UNDO_JOURNAL_PATH = Path(os.getenv("TELENAMER_JOURNAL", Path(tempfile.gettempdir()) / "telenamer-undo.json"))

# Confirmation answer accepted by the interactive path
CONFIRM_YES = {"y", "Y"}

# Processing status codes
STATUS_OK = "OK"
STATUS_FAIL = "FAIL"
