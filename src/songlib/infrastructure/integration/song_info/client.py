"""HTTP client for the upstream song info service."""

from __future__ import annotations

import logging

import httpx
from pydantic import ValidationError as PydanticValidationError

from songlib.application.ports import SongInfoProvider
from songlib.domain.catalog.exceptions import (
    UpstreamMalformedError,
    UpstreamUnavailableError,
)
from songlib.domain.catalog.value_objects import SongDetail
from songlib.infrastructure.integration.song_info.schemas import SongInfoPayload

logger = logging.getLogger(__name__)


class SongInfoClient(SongInfoProvider):
    """HTTP client wrapper for ``GET {base_url}/info?group=&song=``."""

    def __init__(
        self,
        base_url: str | None,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._base_url = base_url.rstrip("/") if base_url else None
        self._timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @property
    def configured(self) -> bool:
        return self._base_url is not None

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self._base_url or "",
                timeout=self._timeout,
                headers={"Accept": "application/json"},
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def fetch_song_detail(self, group: str, song: str) -> SongDetail:
        if not self.configured:
            logger.error("Song info lookup impossible: EXTERNAL_API_URL not set")
            raise UpstreamUnavailableError("EXTERNAL_API_URL not set")

        try:
            client = await self._get_client()
            response = await client.get(
                "/info",
                params={"group": group, "song": song},
            )
        except httpx.TimeoutException as e:
            logger.warning("Song info service timeout: %s", e)
            raise UpstreamUnavailableError("timeout") from e
        except httpx.HTTPError as e:
            logger.warning("Song info service connection failed: %s", e)
            raise UpstreamUnavailableError(f"connection failed: {e}") from e

        if response.status_code != httpx.codes.OK:
            logger.warning(
                "Song info service returned error %d: %s",
                response.status_code,
                response.text[:200] if response.text else "no body",
            )
            raise UpstreamUnavailableError(
                "unexpected status",
                status_code=response.status_code,
            )

        try:
            payload = SongInfoPayload.model_validate_json(response.content)
        except PydanticValidationError as e:
            logger.warning("Song info service returned invalid body: %s", e)
            raise UpstreamMalformedError(str(e)) from e

        logger.debug("Song info fetched for %s - %s", group, song)
        return SongDetail(
            release_date=payload.release_date,
            text=payload.text,
            link=payload.link,
        )
