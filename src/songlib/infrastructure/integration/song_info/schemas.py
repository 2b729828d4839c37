"""Wire models shared by the song info client and the enrichment file."""

from pydantic import BaseModel, ConfigDict, Field


class SongInfoPayload(BaseModel):
    """Body of ``GET /info`` on the song info service.

    Missing fields decode as empty strings; an empty release date is later
    rejected as an invalid date, not as a malformed body.
    """

    model_config = ConfigDict(extra="ignore")

    release_date: str = Field(default="", description="Release date, YYYY-MM-DD")
    text: str = Field(default="", description="Lyrics, verses separated by \\n\\n")
    link: str = Field(default="", description="Link to the song")


class EnrichmentFileEntry(SongInfoPayload):
    """One entry of the local enrichment file."""

    group: str = ""
    song: str = ""
