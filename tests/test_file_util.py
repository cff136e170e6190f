"""Tests for the local filesystem handle and name helpers."""

import os

import pytest

from telenamer.rename.models import RenameOp
from telenamer.utils.errors import RenameFailed
from telenamer.utils.file_util import LocalFileSystem, sanitize_filename


def test_list_files_skips_directories(tmp_path):
    for name in ["test.mp4", "test2.mp4", "test3.srt"]:
        (tmp_path / name).write_text("random contents")
    (tmp_path / "test dir").mkdir()
    (tmp_path / "test dir 2").mkdir()

    assert LocalFileSystem(tmp_path).list_files() == ["test.mp4", "test2.mp4", "test3.srt"]


def test_rename_on_disk(tmp_path):
    (tmp_path / "test.mp4").write_text("random contents")
    fs = LocalFileSystem(tmp_path)

    RenameOp("test.mp4", "new.mp4").apply(fs)

    assert fs.exists("new.mp4")
    assert not fs.exists("test.mp4")
    assert (tmp_path / "new.mp4").read_text() == "random contents"


def test_rename_missing_file_raises_rename_failed(tmp_path):
    with pytest.raises(RenameFailed) as excinfo:
        RenameOp("missing.mp4", "new.mp4").apply(LocalFileSystem(tmp_path))

    assert excinfo.value.op == RenameOp("missing.mp4", "new.mp4")


def test_sanitize_filename():
    assert sanitize_filename(' new?2 <cut>: "final" | a/b\\c*.mp4 ') == "new2 cut final  abc.mp4"


def test_same_file_on_disk(tmp_path):
    (tmp_path / "a.mkv").write_text("a")
    (tmp_path / "b.mkv").write_text("b")
    os.link(tmp_path / "a.mkv", tmp_path / "linked.mkv")
    fs = LocalFileSystem(tmp_path)

    assert fs.same_file("a.mkv", "linked.mkv")
    assert not fs.same_file("a.mkv", "b.mkv")
    assert not fs.same_file("a.mkv", "missing.mkv")


def test_case_only_rename_on_case_insensitive_filesystem(memfs):
    fs = memfs(["the good place.mkv"], case_insensitive=True)

    RenameOp("the good place.mkv", "The Good Place.mkv").apply(fs)

    assert fs.list_files() == ["The Good Place.mkv"]


def test_case_only_rename_still_refuses_a_distinct_file(memfs):
    fs = memfs(["a.mkv", "A.mkv"])

    with pytest.raises(RenameFailed):
        RenameOp("a.mkv", "A.mkv").apply(fs)
