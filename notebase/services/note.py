"""
Note Service.

Business logic layer for notes and the labels attached to them.
"""

from collections.abc import Callable
from datetime import datetime

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from notebase.core.utils import utc_now
from notebase.models.label import Label
from notebase.models.note import Note
from notebase.repositories.note import NoteRepository
from notebase.repositories.note_label import NoteLabelRepository
from notebase.schemas.note import NewNote, NoteUpdate
from notebase.services.base import BaseService


class NoteService(BaseService):
    """
    Service for note business logic.

    Handles note creation, updates, retrieval, and label membership.
    """

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        super().__init__(session_factory)
        self.repo = NoteRepository(session_factory, clock=clock)
        self.labels = NoteLabelRepository(session_factory)

    async def list_notes(self) -> list[Note]:
        """List every note."""
        return await self.repo.list_all()

    async def get_note(self, note_id: int) -> Note:
        """
        Get a note by ID.

        Raises:
            NotFoundError: If note not found
        """
        return await self.repo.get_by_id(note_id)

    async def create_note(self, data: NewNote) -> Note:
        """
        Create a new note.

        Raises:
            ValidationError: If the title is blank
        """
        self._validate_required({"title": data.title}, ["title"])
        self._log_operation("Creating note", title=data.title)

        note = await self.repo.create(data.title, data.body)

        self._log_debug("Note created", note_id=note.id)
        return note

    async def update_note(self, note_id: int, data: NoteUpdate) -> Note:
        """
        Overwrite a note's title and body.

        Raises:
            ValidationError: If the title is blank
            NotFoundError: If note not found
        """
        self._validate_required({"title": data.title}, ["title"])
        self._log_operation("Updating note", note_id=note_id)
        return await self.repo.update(Note(id=note_id, title=data.title, body=data.body))

    async def delete_note(self, note_id: int) -> None:
        """Delete a note and its label memberships."""
        self._log_operation("Deleting note", note_id=note_id)
        await self.repo.delete(note_id)

    async def add_label(self, note_id: int, label_id: int) -> None:
        """
        Attach a label to a note.

        Raises:
            NotFoundError: If the note or the label does not exist
        """
        self._log_operation("Attaching label", note_id=note_id, label_id=label_id)
        await self.labels.add_label(note_id, label_id)

    async def remove_label(self, note_id: int, label_id: int) -> None:
        """Detach a label from a note."""
        self._log_operation("Detaching label", note_id=note_id, label_id=label_id)
        await self.labels.remove_label(note_id, label_id)

    async def list_labels(self, note_id: int) -> list[Label]:
        """List the labels attached to a note."""
        return await self.labels.list_labels(note_id)

    async def get_label(self, note_id: int, label_id: int) -> Label:
        """
        Get one label attached to a note.

        Raises:
            NotFoundError: If the label is not attached to the note
        """
        return await self.labels.get_label(note_id, label_id)
