"""Unit tests for SongDetail, EnrichmentOverride and SongFilter."""

from datetime import date

from songlib.domain.catalog.entities import Song
from songlib.domain.catalog.value_objects import (
    EnrichmentOverride,
    SongDetail,
    SongFilter,
)


class TestSongDetail:
    def test_from_song_formats_release_date(self):
        song = Song(
            group="Muse",
            song="Uprising",
            release_date=date(2009, 9, 7),
            text="t",
            link="l",
        )

        detail = SongDetail.from_song(song)

        assert detail == SongDetail(release_date="2009-09-07", text="t", link="l")

    def test_unresolved_release_date_is_none(self):
        detail = SongDetail.from_song(Song(group="Muse", song="Uprising"))

        assert detail.release_date is None

    def test_override_replaces_all_fields(self):
        detail = SongDetail(release_date="2009-09-07", text="t", link="l")
        override = EnrichmentOverride(
            group="Muse",
            song="Uprising",
            release_date="1.1.2000",
            text="override text",
            link="override link",
        )

        result = detail.overridden_by(override)

        assert result.release_date == "1.1.2000"
        assert result.text == "override text"
        assert result.link == "override link"
        assert detail.text == "t"


class TestEnrichmentOverride:
    def test_matches_exact_pair_only(self):
        override = EnrichmentOverride("Muse", "Uprising", "", "", "")

        assert override.matches("Muse", "Uprising")
        assert not override.matches("muse", "Uprising")
        assert not override.matches("Muse", "Uprising ")


class TestSongFilter:
    def test_empty_strings_impose_no_constraint(self):
        criteria = SongFilter(group="", song="", release_date="", text="", link="")

        assert criteria.group is None
        assert criteria.is_empty

    def test_non_empty_criteria(self):
        criteria = SongFilter(group="mu")

        assert not criteria.is_empty
        assert criteria.group == "mu"
