"""Tests for the tele_namer command line entry point."""

import json

import tele_namer
from conftest import FakeTVDB, GOOD_PLACE


def _write_login(path):
    path.write_text(json.dumps({"apikey": "a", "userkey": "u", "username": "n"}))
    return path


def test_missing_directory_exits_2(tmp_path):
    assert tele_namer.main([str(tmp_path / "missing")]) == 2


def test_undo_without_journal_exits_1(tmp_path):
    assert tele_namer.main([str(tmp_path), "--undo", "--journal", str(tmp_path / "none.json")]) == 1


def test_missing_credentials_exits_2(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    for name in ("TVDB_API_KEY", "TVDB_USER_KEY", "TVDB_USERNAME"):
        monkeypatch.delenv(name, raising=False)

    assert tele_namer.main([str(tmp_path), "--yes"]) == 2


def test_rename_then_undo_on_disk(tmp_path, monkeypatch):
    shows = tmp_path / "shows"
    shows.mkdir()
    (shows / "the.good.place.s04e07.mkv").write_text("video")
    (shows / "notes.txt").write_text("notes")
    login = _write_login(tmp_path / "login.json")
    journal = tmp_path / "undo.json"
    monkeypatch.setattr("telenamer.rename.pipeline.TVDBClient", FakeTVDB(catalog=GOOD_PLACE))

    args = [str(shows), "--yes", "--login", str(login), "--journal", str(journal), "--series", "The Good Place"]
    assert tele_namer.main(args) == 0

    assert sorted(p.name for p in shows.iterdir()) == [
        "The Good Place - S04E07 - Help Is Other People.mkv",
        "notes.txt",
    ]

    assert tele_namer.main([str(shows), "--undo", "--journal", str(journal)]) == 0
    assert sorted(p.name for p in shows.iterdir()) == ["notes.txt", "the.good.place.s04e07.mkv"]
