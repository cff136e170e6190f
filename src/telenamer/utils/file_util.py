"""
Filename cleanup helpers and the filesystem handle used by the renamer.

The renamer never touches `os` directly. Directory listing and renames go
through a `LocalFileSystem` rooted at the working directory, which is passed
explicitly to the code that needs it so tests can swap in another
implementation.
"""
import os
import re
from pathlib import Path

from telenamer.utils.constants import INVALID_FILENAME_CHARS, SEPARATOR_REGEX


def clean_separators(text: str) -> str:
    """Replace hyphen, pipe, colon and bracket separators (with their spacing) by one space."""
    cleaned = SEPARATOR_REGEX.sub(" ", text)
    return re.sub(r"\s+", " ", cleaned).strip()


def sanitize_filename(name: str) -> str:
    """
    Remove invalid filesystem characters from a name.
    Uses str.translate() for optimal performance.
    """
    translation_table = str.maketrans('', '', INVALID_FILENAME_CHARS)
    return name.translate(translation_table).strip()


class LocalFileSystem:
    """Flat view of a single directory on the local disk."""

    def __init__(self, root: Path | str = "."):
        self.root = Path(root)

    def _path(self, name: str) -> Path:
        return self.root / name

    def list_files(self) -> list[str]:
        """Return the sorted names of the regular files directly under root."""
        return sorted(entry.name for entry in os.scandir(self.root) if entry.is_file())

    def exists(self, name: str) -> bool:
        return self._path(name).exists()

    def same_file(self, first: str, second: str) -> bool:
        """True when both names refer to the same file, e.g. a case-only rename on a case-insensitive disk."""
        try:
            return os.path.samefile(self._path(first), self._path(second))
        except OSError:
            return False

    def rename(self, source: str, target: str) -> None:
        """Rename `source` to `target`; raises OSError on failure."""
        os.rename(self._path(source), self._path(target))
