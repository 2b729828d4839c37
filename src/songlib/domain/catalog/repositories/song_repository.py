"""Repository interface for songs.

Defines the contract for Song persistence. Implementations raise
StorageFailureError when the underlying store fails, and never return
partially loaded entities.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from songlib.domain.catalog.entities import Song
from songlib.domain.catalog.value_objects import PageRequest, SongFilter


class SongRepository(ABC):
    """Repository interface for persisting and retrieving songs."""

    @abstractmethod
    async def find_by_id(self, song_id: int) -> Optional[Song]:
        """
        Find a song by ID.

        Parameters
        ----------
        song_id
            Song ID to search for

        Returns
        -------
        Song if found, None otherwise
        """

    @abstractmethod
    async def find_by_group_and_song(self, group: str, song: str) -> Optional[Song]:
        """
        Find a song by its exact (group, song) pair.

        Returns
        -------
        Song if found, None otherwise
        """

    @abstractmethod
    async def find_matching(
        self,
        criteria: SongFilter,
        page: PageRequest,
    ) -> List[Song]:
        """
        Find songs matching all given criteria, one page at a time.

        Parameters
        ----------
        criteria
            Field predicates; absent fields impose no constraint
        page
            Offset/limit window; an offset beyond the result set yields []

        Returns
        -------
        Songs ordered by ID (may be empty)
        """

    @abstractmethod
    async def add(self, song: Song) -> Song:
        """
        Insert a new song.

        Returns
        -------
        The stored song, with its ID assigned

        Raises
        ------
        DuplicateSongError
            If the (group, song) pair already exists
        """

    @abstractmethod
    async def add_if_absent(self, song: Song) -> Song:
        """
        Insert a new song unless its (group, song) pair already exists.

        A concurrent insert of the same pair is not an error: the row that
        won is returned instead.

        Returns
        -------
        The stored song (either the new one or the existing one)
        """

    @abstractmethod
    async def update(self, song: Song) -> Song:
        """
        Persist all editable fields of an existing song.

        Raises
        ------
        SongNotFoundError
            If the song no longer exists
        DuplicateSongError
            If the new (group, song) pair belongs to another song
        """

    @abstractmethod
    async def delete(self, song_id: int) -> bool:
        """
        Delete a song.

        Returns
        -------
        True if deleted, False if not found
        """
