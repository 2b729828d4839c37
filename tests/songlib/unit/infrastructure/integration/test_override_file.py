"""Unit tests for EnrichmentOverrideFile."""

import json

import pytest

from songlib.domain.catalog.value_objects import EnrichmentOverride
from songlib.infrastructure.integration.song_info import EnrichmentOverrideFile

ENTRY = {
    "group": "Muse",
    "song": "Supermassive Black Hole",
    "release_date": "2006-07-16",
    "text": "Ooh baby\n\nOoh",
    "link": "https://example.com/smbh",
}


@pytest.fixture
def override_path(tmp_path):
    return tmp_path / "song_enrichment.json"


class TestEnrichmentOverrideFile:
    @pytest.mark.asyncio
    async def test_single_object_file(self, override_path):
        override_path.write_text(json.dumps(ENTRY), encoding="utf-8")
        source = EnrichmentOverrideFile(override_path)

        override = await source.find("Muse", "Supermassive Black Hole")

        assert override == EnrichmentOverride(**ENTRY)

    @pytest.mark.asyncio
    async def test_list_file(self, override_path):
        other = {**ENTRY, "song": "Uprising", "text": "They will not force us"}
        override_path.write_text(json.dumps([ENTRY, other]), encoding="utf-8")
        source = EnrichmentOverrideFile(str(override_path))

        override = await source.find("Muse", "Uprising")

        assert override is not None
        assert override.text == "They will not force us"

    @pytest.mark.asyncio
    async def test_pair_must_match_exactly(self, override_path):
        override_path.write_text(json.dumps(ENTRY), encoding="utf-8")
        source = EnrichmentOverrideFile(override_path)

        assert await source.find("muse", "Supermassive Black Hole") is None
        assert await source.find("Muse", "Uprising") is None

    @pytest.mark.asyncio
    async def test_missing_file_has_no_override(self, override_path):
        source = EnrichmentOverrideFile(override_path)

        assert await source.find("Muse", "Supermassive Black Hole") is None
        assert source.load() == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize("content", ["{not json", "42", '"text"', ""])
    async def test_unparseable_file_has_no_override(self, override_path, content):
        override_path.write_text(content, encoding="utf-8")
        source = EnrichmentOverrideFile(override_path)

        assert await source.find("Muse", "Supermassive Black Hole") is None

    @pytest.mark.asyncio
    async def test_edits_apply_without_restart(self, override_path):
        source = EnrichmentOverrideFile(override_path)
        assert await source.find("Muse", "Supermassive Black Hole") is None

        override_path.write_text(json.dumps(ENTRY), encoding="utf-8")

        override = await source.find("Muse", "Supermassive Black Hole")
        assert override is not None
        assert override.release_date == "2006-07-16"

    def test_missing_fields_default_to_empty(self, override_path):
        override_path.write_text(
            json.dumps({"group": "Muse", "song": "Uprising"}),
            encoding="utf-8",
        )

        entries = EnrichmentOverrideFile(override_path).load()

        assert entries == [EnrichmentOverride("Muse", "Uprising", "", "", "")]
