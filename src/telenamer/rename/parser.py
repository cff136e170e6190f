"""
Module for turning raw episode file names into structured identity guesses.

The heavy lifting is delegated to guessit, which copes with the huge variety
of release and torrent style names. This module cleans separator noise before
handing the name over, classifies the result as a video or subtitle item and
rejects anything else.
"""
from pathlib import PurePath
from typing import Any, Callable, Mapping

from guessit import guessit

from telenamer.rename.models import RawIdentity, Rejected
from telenamer.utils import LogLevel, SUBTITLE_EXTENSIONS, logger
from telenamer.utils.file_util import clean_separators

# Containers guessit knows about that are not media files
NON_MEDIA_CONTAINERS = {"nfo", "torrent", "nzb"}

Guesser = Callable[[str], Mapping[str, Any]]


def _first_number(value) -> int | None:
    """guessit reports multi-episode files as lists; keep the first number."""
    if isinstance(value, (list, tuple)):
        value = value[0] if value else None
    if isinstance(value, bool) or value is None:
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def _subtitle_extension(file_name: str) -> str | None:
    suffix = PurePath(file_name).suffix.lstrip(".").lower()
    return suffix if suffix in SUBTITLE_EXTENSIONS else None


def classify_container(file_name: str, guessed_container: str | None) -> str | None:
    """
    Return the container for a media item, or None if the file is not one.

    Priority:
    1. A container reported by the parser (video or subtitle).
    2. A known subtitle extension at the end of the file name.
    """
    container = (guessed_container or "").lower()
    if container and container not in NON_MEDIA_CONTAINERS:
        return container
    return _subtitle_extension(file_name)


def extract_identity(file_name: str, series: str | None = None, guess: Guesser = guessit) -> RawIdentity | Rejected:
    """
    Infer season, episode, series and container from a file name.

    Examples:
      "The Good Place - S04E07 - Help Is Other People.mkv" -> S4E7 "The Good Place" (mkv)
      "South Park - [01x03] - Volcano.srt" -> S1E3 "South Park" (srt)
      "Test.png" -> Rejected

    A caller-supplied `series` overrides the inferred title. Parser errors and
    names without a media container, season or episode yield `Rejected`.
    """
    cleaned = clean_separators(file_name)
    try:
        guessed = guess(cleaned)
    except Exception as e:
        # guessit raises a variety of internal errors on pathological input
        logger.log("parse.rejected", LogLevel.DEBUG, file=file_name, reason=f"parser error: {e}")
        return Rejected(file_name, f"parser error: {e}")

    container = classify_container(file_name, guessed.get("container"))
    if not container:
        logger.log("parse.rejected", LogLevel.DEBUG, file=file_name, reason="not a media file")
        return Rejected(file_name, "not a media file")

    season = _first_number(guessed.get("season"))
    episode = _first_number(guessed.get("episode"))
    if season is None or episode is None:
        logger.log("parse.rejected", LogLevel.DEBUG, file=file_name, reason="no season/episode")
        return Rejected(file_name, "no season/episode")

    if not series:
        series = clean_separators(str(guessed.get("title") or ""))

    identity = RawIdentity(file_name=file_name, container=container, season=season, episode=episode, series=series)
    logger.log(
        "parse.identity",
        LogLevel.TRACE,
        file=file_name,
        series=series,
        season=f"S{season:02d}",
        episode=f"E{episode:02d}",
        container=container,
    )
    return identity
