"""Unit tests for SongInfoClient using an in-process transport."""

import json

import httpx
import pytest

from songlib.domain.catalog.exceptions import (
    UpstreamMalformedError,
    UpstreamUnavailableError,
)
from songlib.domain.catalog.value_objects import SongDetail
from songlib.infrastructure.integration.song_info import SongInfoClient

BASE_URL = "http://song-info.test"

PAYLOAD = {
    "release_date": "2006-07-16",
    "text": "Ooh baby\n\nOoh",
    "link": "https://example.com/smbh",
}


def _client(handler) -> SongInfoClient:
    return SongInfoClient(BASE_URL, timeout=1.0, transport=httpx.MockTransport(handler))


class TestFetchSongDetail:
    @pytest.mark.asyncio
    async def test_successful_lookup(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json=PAYLOAD)

        client = _client(handler)
        detail = await client.fetch_song_detail("Muse", "Supermassive Black Hole")
        await client.close()

        assert detail == SongDetail(
            release_date="2006-07-16",
            text="Ooh baby\n\nOoh",
            link="https://example.com/smbh",
        )

    @pytest.mark.asyncio
    async def test_query_parameters_are_encoded(self):
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json=PAYLOAD)

        client = _client(handler)
        await client.fetch_song_detail("AC/DC & Friends", "Back in Black?")

        request = seen[0]
        assert request.method == "GET"
        assert request.url.path == "/info"
        assert request.url.params["group"] == "AC/DC & Friends"
        assert request.url.params["song"] == "Back in Black?"

    @pytest.mark.asyncio
    async def test_trailing_slash_in_base_url(self):
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json=PAYLOAD)

        client = SongInfoClient(
            f"{BASE_URL}/",
            transport=httpx.MockTransport(handler),
        )
        await client.fetch_song_detail("Muse", "Uprising")

        assert str(seen[0].url).startswith(f"{BASE_URL}/info?")

    @pytest.mark.asyncio
    async def test_missing_fields_decode_as_empty(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"text": "only text"})

        detail = await _client(handler).fetch_song_detail("Muse", "Uprising")

        assert detail == SongDetail(release_date="", text="only text", link="")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status_code", [400, 404, 500, 503])
    async def test_non_200_is_unavailable(self, status_code):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(status_code, text="nope")

        with pytest.raises(UpstreamUnavailableError) as exc_info:
            await _client(handler).fetch_song_detail("Muse", "Uprising")

        assert exc_info.value.details["status_code"] == status_code

    @pytest.mark.asyncio
    @pytest.mark.parametrize("body", [b"not json", b"[]", b'{"text": 5}'])
    async def test_unusable_body_is_malformed(self, body):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, content=body)

        with pytest.raises(UpstreamMalformedError):
            await _client(handler).fetch_song_detail("Muse", "Uprising")

    @pytest.mark.asyncio
    async def test_connection_error_is_unavailable(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(UpstreamUnavailableError) as exc_info:
            await _client(handler).fetch_song_detail("Muse", "Uprising")

        assert "connection failed" in exc_info.value.details["reason"]

    @pytest.mark.asyncio
    async def test_timeout_is_unavailable(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("too slow", request=request)

        with pytest.raises(UpstreamUnavailableError) as exc_info:
            await _client(handler).fetch_song_detail("Muse", "Uprising")

        assert exc_info.value.details["reason"] == "timeout"

    @pytest.mark.asyncio
    async def test_unconfigured_client_is_unavailable(self):
        client = SongInfoClient(None)

        assert not client.configured
        with pytest.raises(UpstreamUnavailableError):
            await client.fetch_song_detail("Muse", "Uprising")


class TestClientLifecycle:
    @pytest.mark.asyncio
    async def test_close_is_idempotent(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, content=json.dumps(PAYLOAD))

        client = _client(handler)
        await client.fetch_song_detail("Muse", "Uprising")

        await client.close()
        await client.close()

        detail = await client.fetch_song_detail("Muse", "Uprising")
        assert detail.release_date == "2006-07-16"
