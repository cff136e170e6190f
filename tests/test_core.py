"""Tests for TheTVDB enrichment of parsed identities."""

import pytest

from conftest import FakeTVDB, GOOD_PLACE
from telenamer.rename.core import enrich, enrich_and_build, try_enrich
from telenamer.rename.models import EnrichedIdentity, RawIdentity, RenameOp
from telenamer.utils.errors import AuthFailed, EpisodeNotFound, SeriesNotFound


def _raw(series="the gOOd pLAce", season=4, episode=7):
    return RawIdentity(file_name="tgp.s04e07.mkv", container="mkv", season=season, episode=episode, series=series)


def test_enrich_uses_canonical_series_name(login, fake_tvdb):
    identity = enrich(_raw(), login, fake_tvdb)

    assert identity == EnrichedIdentity(
        file_name="tgp.s04e07.mkv",
        container="mkv",
        season=4,
        episode=7,
        episode_title="Help Is Other People",
        series="The Good Place",
    )


def test_each_enrichment_logs_in(login, fake_tvdb):
    enrich(_raw(), login, fake_tvdb)
    enrich(_raw(), login, fake_tvdb)

    assert fake_tvdb.logins == 2


def test_enrich_auth_failure(login):
    with pytest.raises(AuthFailed):
        enrich(_raw(), login, FakeTVDB(catalog=GOOD_PLACE, reject_auth=True))


def test_enrich_unknown_series(login, fake_tvdb):
    with pytest.raises(SeriesNotFound):
        enrich(_raw(series="Not A Show"), login, fake_tvdb)


def test_enrich_unknown_episode(login, fake_tvdb):
    with pytest.raises(EpisodeNotFound) as excinfo:
        enrich(_raw(episode=99), login, fake_tvdb)

    assert excinfo.value.season == 4
    assert excinfo.value.episode == 99


def test_try_enrich_reports_failure_without_raising(login, fake_tvdb):
    result = try_enrich(_raw(series="Not A Show"), login, fake_tvdb)

    assert not result.ok
    assert result.identity is None
    assert isinstance(result.error, SeriesNotFound)


def test_try_enrich_success(login, fake_tvdb):
    result = try_enrich(_raw(), login, fake_tvdb)

    assert result.ok
    assert result.identity.episode_title == "Help Is Other People"


def test_enrich_and_build(login, fake_tvdb):
    op = enrich_and_build(_raw(), login, "{s} {0z}x{0e}", fake_tvdb)

    assert op == RenameOp("tgp.s04e07.mkv", "The Good Place 04x07.mkv")
