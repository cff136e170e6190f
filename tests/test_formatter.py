"""Tests for template expansion."""

import pytest

from telenamer.rename.formatter import build_rename, new_file_name
from telenamer.rename.models import EnrichedIdentity, RenameOp


def _identity(container="mkv", title="Backstreet's Back"):
    return EnrichedIdentity(
        file_name="the.good.place.s05e01.mkv",
        container=container,
        season=5,
        episode=1,
        episode_title=title,
        series="The Good Place",
    )


@pytest.mark.parametrize(
    "container, template, expected",
    [
        ("mkv", "{s} - {z}x{e} - {n}", "The Good Place - 5x1 - Backstreet's Back.mkv"),
        ("mp4", "{s} - {0z}x{0e} - {n}", "The Good Place - 05x01 - Backstreet's Back.mp4"),
        ("mkv", "{z}x{e} - {n}", "5x1 - Backstreet's Back.mkv"),
        ("mp4", "{0z}x{0e} - {n}", "05x01 - Backstreet's Back.mp4"),
        ("mkv", "{s} - S{z}E{e} - {n}", "The Good Place - S5E1 - Backstreet's Back.mkv"),
        ("mp4", "{s} - S{0z}E{0e} - {n}", "The Good Place - S05E01 - Backstreet's Back.mp4"),
    ],
)
def test_new_file_name(container, template, expected):
    assert new_file_name(_identity(container), template) == expected


def test_invalid_characters_are_stripped_from_name_only():
    identity = _identity("srt", "Backstreet's Back?")

    assert new_file_name(identity, "{s} - S{0z}E{0e} - {n}") == "The Good Place - S05E01 - Backstreet's Back.srt"
    assert identity.episode_title == "Backstreet's Back?"


def test_all_portable_invalid_characters_are_removed():
    identity = _identity("mkv", 'a?b\\c/d*e:f"g<h>i|j')

    assert new_file_name(identity, "{n}") == "abcdefghij.mkv"


def test_unknown_text_passes_through():
    assert new_file_name(_identity(), "{x} [{s}] {0s}") == "{x} [The Good Place] {0s}.mkv"


def test_default_template():
    assert new_file_name(_identity()) == "The Good Place - S05E01 - Backstreet's Back.mkv"


def test_build_rename_is_idempotent():
    identity = _identity()

    first = build_rename(identity, "{s} {0z}{0e}")
    second = build_rename(identity, "{s} {0z}{0e}")

    assert first == second == RenameOp("the.good.place.s05e01.mkv", "The Good Place 0501.mkv")


def test_placeholders_inside_values_are_not_expanded():
    identity = EnrichedIdentity(
        file_name="show.s01e02.mkv",
        container="mkv",
        season=1,
        episode=2,
        episode_title="The {e} Files",
        series="Show {n}",
    )

    assert new_file_name(identity, "{s} - {0z}x{0e} - {n}") == "Show {n} - 01x02 - The {e} Files.mkv"
