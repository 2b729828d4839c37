"""SQLAlchemy implementation of SongRepository."""

from __future__ import annotations

import logging
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from songlib.domain.catalog.entities import Song
from songlib.domain.catalog.exceptions import (
    DuplicateSongError,
    SongNotFoundError,
    StorageFailureError,
)
from songlib.domain.catalog.repositories import SongRepository
from songlib.domain.catalog.value_objects import (
    MAX_SQL_INTEGER,
    PageRequest,
    SongFilter,
    parse_release_date,
)
from songlib.infrastructure.persistence.sqlalchemy.models.catalog import SongModel
from songlib.infrastructure.persistence.sqlalchemy.repositories._utils import (
    LIKE_ESCAPE_CHAR,
    contains_pattern,
)

logger = logging.getLogger(__name__)


class SongRepositorySQLAlchemy(SongRepository):
    """SQLAlchemy implementation of SongRepository.

    Write methods flush but never commit; the caller owns the transaction.
    A failed insert or update rolls the session back, since the session is
    unusable after a failed flush.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    async def find_by_id(self, song_id: int) -> Optional[Song]:
        model = await self._get_model(song_id, operation="find_by_id")
        if not model:
            return None
        return self._model_to_domain(model)

    async def find_by_group_and_song(self, group: str, song: str) -> Optional[Song]:
        stmt = select(SongModel).where(
            SongModel.group_name == group,
            SongModel.song == song,
        )
        try:
            result = await self._session.execute(stmt)
        except SQLAlchemyError as e:
            logger.error("Failed to look up song %s - %s: %s", group, song, e)
            raise StorageFailureError("find_by_group_and_song", str(e)) from e
        model = result.scalar_one_or_none()

        if not model:
            return None

        return self._model_to_domain(model)

    async def find_matching(
        self,
        criteria: SongFilter,
        page: PageRequest,
    ) -> List[Song]:
        if page.offset > MAX_SQL_INTEGER:
            # Past the end of any table
            return []

        stmt = select(SongModel)

        if criteria.group:
            stmt = stmt.where(
                SongModel.group_name.ilike(
                    contains_pattern(criteria.group),
                    escape=LIKE_ESCAPE_CHAR,
                ),
            )
        if criteria.song:
            stmt = stmt.where(
                SongModel.song.ilike(
                    contains_pattern(criteria.song),
                    escape=LIKE_ESCAPE_CHAR,
                ),
            )
        if criteria.release_date:
            stmt = stmt.where(
                SongModel.release_date == parse_release_date(criteria.release_date),
            )
        if criteria.text:
            stmt = stmt.where(
                SongModel.text.ilike(
                    contains_pattern(criteria.text),
                    escape=LIKE_ESCAPE_CHAR,
                ),
            )
        if criteria.link:
            stmt = stmt.where(
                SongModel.link.ilike(
                    contains_pattern(criteria.link),
                    escape=LIKE_ESCAPE_CHAR,
                ),
            )

        stmt = stmt.order_by(SongModel.id).offset(page.offset).limit(page.limit)

        logger.debug(
            "Retrieving songs (page=%d, limit=%d, offset=%d)",
            page.page,
            page.limit,
            page.offset,
        )
        try:
            result = await self._session.execute(stmt)
        except SQLAlchemyError as e:
            logger.error("Failed to retrieve songs: %s", e)
            raise StorageFailureError("find_matching", str(e)) from e
        models = result.scalars().all()

        return [self._model_to_domain(model) for model in models]

    async def add(self, song: Song) -> Song:
        model = self._domain_to_model(song)
        self._session.add(model)
        try:
            await self._session.flush()
        except IntegrityError as e:
            await self._session.rollback()
            raise DuplicateSongError(song.group, song.song) from e
        except SQLAlchemyError as e:
            await self._session.rollback()
            logger.error("Failed to save song %r: %s", song, e)
            raise StorageFailureError("add", str(e)) from e

        return self._model_to_domain(model)

    async def add_if_absent(self, song: Song) -> Song:
        try:
            return await self.add(song)
        except DuplicateSongError:
            logger.info(
                "Song %s - %s was stored concurrently, using existing row",
                song.group,
                song.song,
            )

        existing = await self.find_by_group_and_song(song.group, song.song)
        if existing is None:
            # The conflicting row vanished again (deleted in between)
            msg = "conflicting song row disappeared"
            raise StorageFailureError("add_if_absent", msg)
        return existing

    async def update(self, song: Song) -> Song:
        if song.id is None:
            msg = "Cannot update a song that was never stored"
            raise ValueError(msg)

        model = await self._get_model(song.id, operation="update")
        if not model:
            raise SongNotFoundError(song.id)

        model.group_name = song.group
        model.song = song.song
        model.release_date = song.release_date
        model.text = song.text
        model.link = song.link
        model.updated_at = song.updated_at

        try:
            await self._session.flush()
        except IntegrityError as e:
            await self._session.rollback()
            raise DuplicateSongError(song.group, song.song) from e
        except SQLAlchemyError as e:
            await self._session.rollback()
            logger.error("Failed to update song %s: %s", song.id, e)
            raise StorageFailureError("update", str(e)) from e

        return self._model_to_domain(model)

    async def delete(self, song_id: int) -> bool:
        model = await self._get_model(song_id, operation="delete")
        if not model:
            return False

        try:
            await self._session.delete(model)
            await self._session.flush()
        except SQLAlchemyError as e:
            await self._session.rollback()
            logger.error("Failed to delete song %s: %s", song_id, e)
            raise StorageFailureError("delete", str(e)) from e
        return True

    async def _get_model(self, song_id: int, operation: str) -> Optional[SongModel]:
        stmt = select(SongModel).where(SongModel.id == song_id)
        try:
            result = await self._session.execute(stmt)
        except SQLAlchemyError as e:
            logger.error("Failed to fetch song %s: %s", song_id, e)
            raise StorageFailureError(operation, str(e)) from e
        return result.scalar_one_or_none()

    def _domain_to_model(self, song: Song) -> SongModel:
        return SongModel(
            group_name=song.group,
            song=song.song,
            release_date=song.release_date,
            text=song.text,
            link=song.link,
            created_at=song.created_at,
            updated_at=song.updated_at,
        )

    def _model_to_domain(self, model: SongModel) -> Song:
        song = Song.__new__(Song)
        song._id = model.id
        song._group = model.group_name
        song._song = model.song
        song._release_date = model.release_date
        song._text = model.text or ""
        song._link = model.link or ""
        song._created_at = model.created_at
        song._updated_at = model.updated_at

        return song
