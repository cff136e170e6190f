"""
Credential loading for TheTVDB.

Credentials come either from a `login.json` file or from environment variables
(`TVDB_API_KEY`, `TVDB_USER_KEY`, `TVDB_USERNAME`, `TVDB_LANGUAGE`). The
resulting `TVDBLogin` is passed verbatim to every lookup.
"""
import json
import os
from dataclasses import dataclass
from pathlib import Path

from telenamer.utils.constants import LOGIN_FILE, TVDB_DEFAULT_LANGUAGE
from telenamer.utils.errors import ConfigError


@dataclass(frozen=True)
class TVDBLogin:
    """TheTVDB API key, user key and user name, plus the preferred language."""

    apikey: str
    userkey: str
    username: str
    language: str = TVDB_DEFAULT_LANGUAGE


def _build_login(data: dict, source: str) -> TVDBLogin:
    missing = [key for key in ("apikey", "userkey", "username") if not data.get(key)]
    if missing:
        raise ConfigError(f"Missing TheTVDB credentials in {source}", ", ".join(missing))
    return TVDBLogin(
        apikey=data["apikey"],
        userkey=data["userkey"],
        username=data["username"],
        language=data.get("language") or TVDB_DEFAULT_LANGUAGE,
    )


def load_login(path: Path | str) -> TVDBLogin:
    """Load credentials from a JSON file with `apikey`, `userkey`, `username` and optional `language`."""
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ConfigError(f"Could not load {path}", str(e)) from e
    except ValueError as e:
        raise ConfigError(f"Invalid JSON in {path}", str(e)) from e

    if not isinstance(data, dict):
        raise ConfigError(f"Invalid credentials file {path}", "Expected a JSON object")

    # Accept the capitalised keys written by older tools
    data = {key.lower(): value for key, value in data.items()}
    return _build_login(data, str(path))


def login_from_env() -> TVDBLogin:
    """Build credentials from environment variables (a `.env` file is loaded with the constants)."""
    data = {
        "apikey": os.getenv("TVDB_API_KEY"),
        "userkey": os.getenv("TVDB_USER_KEY"),
        "username": os.getenv("TVDB_USERNAME"),
        "language": os.getenv("TVDB_LANGUAGE"),
    }
    return _build_login(data, "environment")


def resolve_login(path: Path | str | None = None) -> TVDBLogin:
    """Prefer an explicit or present credentials file, falling back to the environment."""
    if path is not None:
        return load_login(path)
    if Path(LOGIN_FILE).exists():
        return load_login(LOGIN_FILE)
    return login_from_env()
