"""
Note Repository.

Data access layer for notes. Owns the note timestamps: both are stamped
from a single clock reading at creation, and updated_at is refreshed on
every update. created_at is never written after the insert.
"""

from collections.abc import Callable
from datetime import datetime

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from notebase.core.utils import utc_now
from notebase.models.note import Note
from notebase.models.note_label import NoteLabel
from notebase.repositories.base import BaseRepository


class NoteRepository(BaseRepository[Note]):
    """
    Repository for Note model.

    Inherits get_by_id, list_all, delete and exists from BaseRepository
    and adds timestamp handling on create and update.
    """

    model = Note

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        super().__init__(session_factory)
        self.clock = clock

    async def create(self, title: str, body: str | None = None) -> Note:
        """
        Create a new note.

        Args:
            title: Note title
            body: Note body, empty string when omitted

        Returns:
            The note as persisted, created_at equal to updated_at
        """
        now = self.clock()
        return await self._insert(
            title=title,
            body=body if body is not None else "",
            created_at=now,
            updated_at=now,
        )

    async def update(self, note: Note) -> Note:
        """
        Overwrite a note's title and body and refresh updated_at.

        Args:
            note: Note carrying the id to update and the new title/body

        Returns:
            The note as persisted

        Raises:
            NotFoundError: If no note has that id
        """
        return await self._update(
            note.id,
            title=note.title,
            body=note.body,
            updated_at=self.clock(),
        )

    async def _delete_dependents(self, session: AsyncSession, id: int) -> None:
        await session.execute(delete(NoteLabel).where(NoteLabel.note_id == id))
