"""Catalog commands."""

from songlib.application.commands.catalog.create_song_command import (
    CreateSongCommand,
)
from songlib.application.commands.catalog.delete_song_command import (
    DeleteSongCommand,
)
from songlib.application.commands.catalog.update_song_command import (
    PatchSongCommand,
    UpdateSongCommand,
)

__all__ = [
    "CreateSongCommand",
    "DeleteSongCommand",
    "PatchSongCommand",
    "UpdateSongCommand",
]
