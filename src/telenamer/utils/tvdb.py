"""
TheTVDB API client for fetching series and episode metadata.

This module provides a small interface to the TheTVDB v3 REST API: logging in
with the user's credentials, searching for the best matching series and
fetching its full episode list. Every client holds its own session and token,
so separate threads never share authentication state.
"""

from difflib import SequenceMatcher
from typing import Any, Dict, List, Optional

import requests

from telenamer.utils import logger
from telenamer.utils.config import TVDBLogin
from telenamer.utils.constants import TVDB_BASE_URL, TVDB_TIMEOUT
from telenamer.utils.errors import AuthFailed, EpisodeListFailed, EpisodeNotFound, SeriesNotFound
from telenamer.utils.logger import LogLevel


def _similarity(a: str, b: str) -> float:
    return SequenceMatcher(None, a.lower().strip(), b.lower().strip()).ratio()


def pick_best_series(name: str, results: List[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    """
    Choose the series that best matches `name`.

    An exact, case-insensitive name match wins. Otherwise the result with the
    highest similarity ratio is used; ties keep TheTVDB's ranking.
    """
    if not results:
        return None
    wanted = name.lower().strip()
    for result in results:
        if (result.get("seriesName") or "").lower().strip() == wanted:
            return result
    return max(results, key=lambda r: _similarity(name, r.get("seriesName") or ""))


def find_episode(episodes: List[Dict[str, Any]], season: int, episode: int) -> Optional[Dict[str, Any]]:
    """Return the aired episode matching the season/episode pair, or None."""
    for item in episodes:
        if item.get("airedSeason") == season and item.get("airedEpisodeNumber") == episode:
            return item
    return None


class TVDBClient:
    """Client for interacting with the TheTVDB API."""

    def __init__(self, login: TVDBLogin, base_url: str = TVDB_BASE_URL, session: requests.Session | None = None):
        self.login_info = login
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.session.headers.update({"Accept": "application/json", "Accept-Language": login.language})
        self.token: str | None = None

    def _url(self, endpoint: str) -> str:
        return f"{self.base_url}/{endpoint.lstrip('/')}"

    def login(self) -> None:
        """Authenticate and keep the JWT for subsequent requests."""
        payload = {
            "apikey": self.login_info.apikey,
            "userkey": self.login_info.userkey,
            "username": self.login_info.username,
        }
        try:
            response = self.session.post(self._url("login"), json=payload, timeout=TVDB_TIMEOUT)
            response.raise_for_status()
            token = response.json().get("token")
        except requests.exceptions.RequestException as e:
            raise AuthFailed(str(e)) from e
        except ValueError as e:
            raise AuthFailed(f"Invalid JSON response: {e}") from e

        if not token:
            raise AuthFailed("No token in login response")

        self.token = token
        self.session.headers["Authorization"] = f"Bearer {token}"

    def _get(self, endpoint: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        response = self.session.get(self._url(endpoint), params=params, timeout=TVDB_TIMEOUT)
        response.raise_for_status()
        return response.json()

    def search_series(self, name: str) -> List[Dict[str, Any]]:
        """Search for series by name."""
        logger.log("tvdb.search", LogLevel.DEBUG, series=name)
        try:
            data = self._get("search/series", {"name": name})
        except requests.exceptions.HTTPError as e:
            if e.response is not None and e.response.status_code == 404:
                return []
            raise SeriesNotFound(name, str(e)) from e
        except (requests.exceptions.RequestException, ValueError) as e:
            raise SeriesNotFound(name, str(e)) from e
        return data.get("data") or []

    def best_search(self, name: str) -> Dict[str, Any]:
        """Return the best matching series record; raises SeriesNotFound."""
        result = pick_best_series(name, self.search_series(name))
        if result is None:
            raise SeriesNotFound(name)
        logger.log(
            "tvdb.match",
            LogLevel.DEBUG,
            search_term=name,
            series=result.get("seriesName"),
            tvdb_id=result.get("id"),
        )
        return result

    def get_series_episodes(self, series: Dict[str, Any]) -> List[Dict[str, Any]]:
        """Fetch every page of the series' episode list; raises EpisodeListFailed."""
        name = series.get("seriesName") or str(series.get("id"))
        episodes: List[Dict[str, Any]] = []
        page: Optional[int] = 1
        while page:
            try:
                data = self._get(f"series/{series['id']}/episodes", {"page": page})
            except (requests.exceptions.RequestException, ValueError) as e:
                raise EpisodeListFailed(name, str(e)) from e
            episodes.extend(data.get("data") or [])
            page = (data.get("links") or {}).get("next")
        logger.log("tvdb.episodes", LogLevel.TRACE, series=name, count=len(episodes))
        return episodes

    def get_episode(self, series: Dict[str, Any], season: int, episode: int) -> Dict[str, Any]:
        """Fetch the episode list and return the aired season/episode; raises EpisodeNotFound."""
        found = find_episode(self.get_series_episodes(series), season, episode)
        if found is None:
            raise EpisodeNotFound(series.get("seriesName") or "", season, episode)
        return found
