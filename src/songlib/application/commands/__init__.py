"""Application layer commands."""

from songlib.application.commands.catalog import (
    CreateSongCommand,
    DeleteSongCommand,
    PatchSongCommand,
    UpdateSongCommand,
)

__all__ = [
    "CreateSongCommand",
    "DeleteSongCommand",
    "PatchSongCommand",
    "UpdateSongCommand",
]
