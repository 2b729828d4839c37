"""Local JSON file of enrichment overrides."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Optional, Union

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from songlib.application.ports import EnrichmentOverrideSource
from songlib.domain.catalog.value_objects import EnrichmentOverride
from songlib.infrastructure.integration.song_info.schemas import EnrichmentFileEntry

logger = logging.getLogger(__name__)

_FILE_ADAPTER = TypeAdapter(Union[list[EnrichmentFileEntry], EnrichmentFileEntry])


class EnrichmentOverrideFile(EnrichmentOverrideSource):
    """
    Reads overrides from a JSON file holding one entry or a list of entries::

        {"group": "...", "song": "...", "release_date": "YYYY-MM-DD",
         "text": "...", "link": "..."}

    The file is re-read on every lookup so edits apply without a restart.
    A missing or unparseable file yields no override.
    """

    def __init__(self, path: str | Path):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    async def find(self, group: str, song: str) -> Optional[EnrichmentOverride]:
        entries = await asyncio.to_thread(self.load)
        for entry in entries:
            if entry.matches(group, song):
                return entry
        return None

    def load(self) -> list[EnrichmentOverride]:
        """Read all entries; an unusable file reads as empty."""
        try:
            raw = self._path.read_bytes()
        except OSError as e:
            logger.debug("Enrichment file %s not readable: %s", self._path, e)
            return []

        try:
            parsed = _FILE_ADAPTER.validate_json(raw)
        except PydanticValidationError as e:
            logger.debug("Enrichment file %s not parseable: %s", self._path, e)
            return []

        entries = parsed if isinstance(parsed, list) else [parsed]
        return [
            EnrichmentOverride(
                group=entry.group,
                song=entry.song,
                release_date=entry.release_date,
                text=entry.text,
                link=entry.link,
            )
            for entry in entries
        ]
