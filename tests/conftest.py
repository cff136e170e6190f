"""
Pytest configuration and fixtures for telenamer tests.
"""

import errno
import threading
import time

import pytest

from telenamer.utils import logger
from telenamer.utils.config import TVDBLogin
from telenamer.utils.errors import AuthFailed, EpisodeNotFound, SeriesNotFound


class MemoryFileSystem:
    """In-memory stand-in for LocalFileSystem."""

    def __init__(self, names=(), case_insensitive=False):
        self.files = {name: f"contents of {name}" for name in names}
        self.case_insensitive = case_insensitive
        self.locked: set[str] = set()
        self.renames: list[tuple[str, str]] = []
        self._lock = threading.Lock()

    def list_files(self):
        return sorted(self.files)

    def _key(self, name):
        return name.casefold() if self.case_insensitive else name

    def exists(self, name):
        return any(self._key(existing) == self._key(name) for existing in self.files)

    def same_file(self, first, second):
        return first in self.files and self._key(first) == self._key(second)

    def rename(self, source, target):
        with self._lock:
            if source in self.locked:
                raise PermissionError(errno.EACCES, "Permission denied", source)
            if source not in self.files:
                raise FileNotFoundError(errno.ENOENT, "No such file or directory", source)
            self.files[target] = self.files.pop(source)
            self.renames.append((source, target))


class FakeTVDB:
    """
    Client factory serving a small in-memory catalog.

    `catalog` maps a lower-case search term to (canonical name, {(season, episode): title}).
    `delays` maps an episode number to seconds to sleep before answering.
    """

    def __init__(self, catalog=None, reject_auth=False, delays=None):
        self.catalog = catalog or {}
        self.reject_auth = reject_auth
        self.delays = delays or {}
        self.logins = 0
        self._lock = threading.Lock()

    def __call__(self, login):
        return _FakeClient(self, login)


class _FakeClient:
    def __init__(self, tvdb, login):
        self.tvdb = tvdb
        self.login_info = login
        self.logged_in = False

    def login(self):
        if self.tvdb.reject_auth:
            raise AuthFailed("401 Unauthorized")
        with self.tvdb._lock:
            self.tvdb.logins += 1
        self.logged_in = True

    def best_search(self, name):
        assert self.logged_in
        entry = self.tvdb.catalog.get(name.lower())
        if entry is None:
            raise SeriesNotFound(name)
        canonical, _ = entry
        return {"id": 1, "seriesName": canonical}

    def get_episode(self, series, season, episode):
        time.sleep(self.tvdb.delays.get(episode, 0))
        _, episodes = self.tvdb.catalog[series["seriesName"].lower()]
        title = episodes.get((season, episode))
        if title is None:
            raise EpisodeNotFound(series["seriesName"], season, episode)
        return {"airedSeason": season, "airedEpisodeNumber": episode, "episodeName": title}


GOOD_PLACE = {
    "the good place": (
        "The Good Place",
        {
            (4, 7): "Help Is Other People",
            (4, 9): "The Answer",
            (4, 10): "You've Changed, Man",
            (4, 12): "Patty",
            (5, 1): "Backstreet's Back?",
        },
    ),
}


@pytest.fixture
def login():
    return TVDBLogin(apikey="api", userkey="user", username="someone")


@pytest.fixture
def fake_tvdb():
    return FakeTVDB(catalog=GOOD_PLACE)


@pytest.fixture
def memfs():
    return MemoryFileSystem


@pytest.fixture
def journal_path(tmp_path):
    return tmp_path / "undo.json"


@pytest.fixture(autouse=True)
def quiet_logs():
    logger.set_log_level(logger.LogLevel.ERROR)
    yield
    logger.set_log_level(logger.LogLevel.INFO)
