"""
Exception classes for telenamer.

Per-item failures (enrichment and rename errors) are raised close to where they
happen and recovered by the batch that owns the item; only journal and
configuration errors are meant to end a run.
"""


class TelenamerError(Exception):
    """Base exception for all telenamer errors."""

    def __init__(self, message: str, details: str | None = None):
        self.message = message
        self.details = details
        super().__init__(self.message)

    def to_dict(self):
        """Convert exception to a dictionary for structured log output."""
        result = {"error": self.__class__.__name__, "message": self.message}
        if self.details:
            result["details"] = self.details
        return result


class ConfigError(TelenamerError):
    """Raised when credentials or settings cannot be loaded."""


class EnrichmentError(TelenamerError):
    """Base class for failures while resolving a file against TheTVDB."""


class AuthFailed(EnrichmentError):
    """Raised when TheTVDB rejects the supplied credentials."""

    def __init__(self, reason: str | None = None):
        super().__init__("Authentication with TheTVDB failed", reason)


class SeriesNotFound(EnrichmentError):
    """Raised when no series matches the inferred name."""

    def __init__(self, series: str, reason: str | None = None):
        super().__init__(f"No series found for '{series}'", reason)
        self.series = series


class EpisodeListFailed(EnrichmentError):
    """Raised when the episode list of a series cannot be fetched."""

    def __init__(self, series: str, reason: str | None = None):
        super().__init__(f"Could not fetch episodes for '{series}'", reason)
        self.series = series


class EpisodeNotFound(EnrichmentError):
    """Raised when the season/episode pair is missing from the episode list."""

    def __init__(self, series: str, season: int, episode: int):
        super().__init__(f"Episode S{season:02d}E{episode:02d} not found for '{series}'")
        self.series = series
        self.season = season
        self.episode = episode


class RenameFailed(TelenamerError):
    """Raised when a single filesystem rename cannot be performed."""

    def __init__(self, op, reason: str):
        super().__init__(f"Rename failed: {op.source} -> {op.target}", reason)
        self.op = op
        self.reason = reason


class TaskFailed(TelenamerError):
    """Wraps an unexpected exception raised while processing a single file."""

    def __init__(self, file_name: str, cause: BaseException):
        super().__init__(f"Unexpected error while processing '{file_name}'", f"{cause.__class__.__name__}: {cause}")
        self.file_name = file_name
        self.cause = cause


class JournalUnavailable(TelenamerError):
    """Raised when the undo journal is missing or unreadable."""

    def __init__(self, path, reason: str | None = None):
        message = f"Undo journal not available: {path}"
        details = reason or "Nothing to undo. Run a rename first."
        super().__init__(message, details)
        self.path = path
