"""Unit tests for SongEnrichmentService."""

from datetime import date
from unittest.mock import AsyncMock, Mock

import pytest

from songlib.application.services import SongEnrichmentService
from songlib.domain.catalog.entities import Song
from songlib.domain.catalog.exceptions import (
    InvalidDateFormatError,
    UpstreamUnavailableError,
)
from songlib.domain.catalog.value_objects import EnrichmentOverride, SongDetail
from songlib.domain.shared.exceptions import ValidationError


def _stored_song(song_id: int = 1, **kwargs) -> Song:
    song = Song(
        group=kwargs.pop("group", "Muse"),
        song=kwargs.pop("song", "Supermassive Black Hole"),
        **kwargs,
    )
    song._id = song_id
    return song


def _assign_id(song: Song) -> Song:
    song._id = 42
    return song


@pytest.fixture
def song_repo():
    repo = AsyncMock()
    repo.find_by_group_and_song.return_value = None
    repo.add_if_absent.side_effect = _assign_id
    return repo


@pytest.fixture
def provider():
    provider = AsyncMock()
    provider.fetch_song_detail.return_value = SongDetail(
        release_date="2006-07-16",
        text="verse 1\n\nverse 2",
        link="https://example.com/smbh",
    )
    return provider


@pytest.fixture
def overrides():
    source = AsyncMock()
    source.find.return_value = None
    return source


@pytest.fixture
def service(song_repo, provider, overrides) -> SongEnrichmentService:
    return SongEnrichmentService(
        song_repository=song_repo,
        song_info_provider=provider,
        override_source=overrides,
    )


class TestStoredSong:
    """A stored pair is answered from the catalog."""

    @pytest.mark.asyncio
    async def test_stored_song_skips_upstream(self, service, song_repo, provider):
        song_repo.find_by_group_and_song.return_value = _stored_song(
            release_date=date(2006, 6, 19),
            text="stored text",
            link="stored link",
        )

        detail = await service.resolve("Muse", "Supermassive Black Hole")

        assert detail == SongDetail(
            release_date="2006-06-19",
            text="stored text",
            link="stored link",
        )
        provider.fetch_song_detail.assert_not_awaited()
        song_repo.add_if_absent.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_stored_song_without_date(self, service, song_repo):
        song_repo.find_by_group_and_song.return_value = _stored_song()

        detail = await service.resolve("Muse", "Supermassive Black Hole")

        assert detail.release_date is None
        assert detail.text == ""


class TestUnknownSong:
    """An unknown pair is fetched upstream and stored."""

    @pytest.mark.asyncio
    async def test_upstream_result_is_stored(self, service, song_repo, provider):
        detail = await service.resolve("Muse", "Supermassive Black Hole")

        provider.fetch_song_detail.assert_awaited_once_with(
            "Muse", "Supermassive Black Hole"
        )
        song_repo.add_if_absent.assert_awaited_once()
        stored = song_repo.add_if_absent.await_args.args[0]
        assert stored.group == "Muse"
        assert stored.song == "Supermassive Black Hole"
        assert stored.release_date == date(2006, 7, 16)
        assert stored.text == "verse 1\n\nverse 2"
        assert stored.link == "https://example.com/smbh"

        assert detail.release_date == "2006-07-16"
        assert detail.text == "verse 1\n\nverse 2"

    @pytest.mark.asyncio
    async def test_concurrently_stored_row_is_used(self, service, song_repo):
        existing = _stored_song(song_id=7, text="winner")
        song_repo.add_if_absent.side_effect = None
        song_repo.add_if_absent.return_value = existing

        detail = await service.resolve("Muse", "Supermassive Black Hole")

        assert detail.text == "winner"

    @pytest.mark.asyncio
    async def test_upstream_failure_stores_nothing(self, service, song_repo, provider):
        provider.fetch_song_detail.side_effect = UpstreamUnavailableError(
            "unexpected status",
            status_code=503,
        )

        with pytest.raises(UpstreamUnavailableError):
            await service.resolve("Muse", "Supermassive Black Hole")

        song_repo.add_if_absent.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_bad_upstream_date_stores_nothing(
        self,
        service,
        song_repo,
        provider,
    ):
        provider.fetch_song_detail.return_value = SongDetail(
            release_date="16.07.2006",
            text="t",
            link="l",
        )

        with pytest.raises(InvalidDateFormatError):
            await service.resolve("Muse", "Supermassive Black Hole")

        song_repo.add_if_absent.assert_not_awaited()


class TestOverrides:
    """Override entries patch the response, never the stored record."""

    @pytest.mark.asyncio
    async def test_override_replaces_response_fields(
        self,
        service,
        song_repo,
        overrides,
    ):
        stored = _stored_song(
            release_date=date(2006, 6, 19),
            text="stored text",
            link="stored link",
        )
        song_repo.find_by_group_and_song.return_value = stored
        overrides.find.return_value = EnrichmentOverride(
            group="Muse",
            song="Supermassive Black Hole",
            release_date="2006-07-16",
            text="file text",
            link="file link",
        )

        detail = await service.resolve("Muse", "Supermassive Black Hole")

        assert detail == SongDetail(
            release_date="2006-07-16",
            text="file text",
            link="file link",
        )
        assert stored.text == "stored text"
        song_repo.update.assert_not_awaited()
        overrides.find.assert_awaited_once_with("Muse", "Supermassive Black Hole")

    @pytest.mark.asyncio
    async def test_new_song_is_stored_with_upstream_values(
        self,
        service,
        song_repo,
        overrides,
    ):
        overrides.find.return_value = EnrichmentOverride(
            group="Muse",
            song="Supermassive Black Hole",
            release_date="2000-01-01",
            text="file text",
            link="file link",
        )

        detail = await service.resolve("Muse", "Supermassive Black Hole")

        stored = song_repo.add_if_absent.await_args.args[0]
        assert stored.text == "verse 1\n\nverse 2"
        assert stored.release_date == date(2006, 7, 16)
        assert detail.text == "file text"
        assert detail.release_date == "2000-01-01"


class TestInvalidRequest:
    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("group", "title"),
        [("", "Uprising"), ("Muse", ""), ("   ", "Uprising"), (None, "Uprising")],
    )
    async def test_missing_parameters_rejected_before_lookup(
        self,
        service,
        song_repo,
        provider,
        group,
        title,
    ):
        with pytest.raises(ValidationError):
            await service.resolve(group, title)

        song_repo.find_by_group_and_song.assert_not_awaited()
        provider.fetch_song_detail.assert_not_awaited()


class TestFromFactory:
    def test_uses_factory_collaborators(self, song_repo, provider, overrides):
        factory = Mock()
        factory.song_repository = lambda: song_repo
        factory.song_info_provider = lambda: provider
        factory.enrichment_override_source = lambda: overrides

        service = SongEnrichmentService.from_factory(factory)

        assert service._song_repo is song_repo
        assert service._provider is provider
        assert service._overrides is overrides
