"""
Note/Label Association Repository.

Manages the membership rows linking notes to labels. Stateless: every
operation takes the note id as a plain argument, so nothing depends on
an in-memory Note that may have gone stale.
"""

from sqlalchemy import delete, insert, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from notebase.core.exceptions import NotFoundError
from notebase.core.logging import get_logger
from notebase.models.base import is_storable_id
from notebase.models.label import Label
from notebase.models.note import Note
from notebase.models.note_label import NoteLabel
from notebase.repositories.base import SessionRepository

logger = get_logger(__name__)


class NoteLabelRepository(SessionRepository):
    """Repository for the notes_labels junction table."""

    async def add_label(self, note_id: int, label_id: int) -> None:
        """
        Attach a label to a note.

        Idempotent: attaching a label that is already attached succeeds
        without writing a second row.

        Raises:
            NotFoundError: If the note or the label does not exist
            DatabaseError: If the insert fails
        """
        async with self._session("add_label") as session:
            await self._require(session, Note, note_id)
            await self._require(session, Label, label_id)

            if await self._is_attached(session, note_id, label_id):
                return

            try:
                await session.execute(
                    insert(NoteLabel).values(note_id=note_id, label_id=label_id)
                )
                await session.commit()
            except IntegrityError:
                await session.rollback()
                # Another writer inserted the same pair first
                if not await self._is_attached(session, note_id, label_id):
                    raise
                logger.debug(
                    "Label already attached",
                    extra={"note_id": note_id, "label_id": label_id},
                )

    async def remove_label(self, note_id: int, label_id: int) -> None:
        """
        Detach a label from a note.

        Deletes rows matching both ids. Succeeds if nothing matched.
        """
        if not (is_storable_id(note_id) and is_storable_id(label_id)):
            return

        async with self._session("remove_label") as session:
            await session.execute(
                delete(NoteLabel).where(
                    NoteLabel.note_id == note_id,
                    NoteLabel.label_id == label_id,
                )
            )
            await session.commit()

    async def list_labels(self, note_id: int) -> list[Label]:
        """Get every label attached to a note. Order is store-defined."""
        if not is_storable_id(note_id):
            return []

        async with self._session("list_labels") as session:
            result = await session.execute(
                select(Label)
                .join(NoteLabel, NoteLabel.label_id == Label.id)
                .where(NoteLabel.note_id == note_id)
            )
            return list(result.scalars().all())

    async def get_label(self, note_id: int, label_id: int) -> Label:
        """
        Get one label of a note.

        Raises:
            NotFoundError: If the label is not attached to the note
        """
        if not (is_storable_id(note_id) and is_storable_id(label_id)):
            raise NotFoundError(f"Label {label_id} is not attached to note {note_id}")

        async with self._session("get_label") as session:
            result = await session.execute(
                select(Label)
                .join(NoteLabel, NoteLabel.label_id == Label.id)
                .where(
                    NoteLabel.note_id == note_id,
                    NoteLabel.label_id == label_id,
                )
            )
            label = result.scalar_one_or_none()

        if label is None:
            raise NotFoundError(f"Label {label_id} is not attached to note {note_id}")

        return label

    @staticmethod
    async def _is_attached(session: AsyncSession, note_id: int, label_id: int) -> bool:
        result = await session.execute(
            select(NoteLabel.note_id).where(
                NoteLabel.note_id == note_id,
                NoteLabel.label_id == label_id,
            )
        )
        return result.scalar_one_or_none() is not None
