"""
Label Repository.

Data access layer for labels.
"""

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession

from notebase.models.label import Label
from notebase.models.note_label import NoteLabel
from notebase.repositories.base import BaseRepository


class LabelRepository(BaseRepository[Label]):
    """
    Repository for Label model.

    Inherits get_by_id, list_all, delete and exists from BaseRepository.
    """

    model = Label

    async def create(self, name: str) -> Label:
        """
        Create a new label.

        Args:
            name: Label name

        Returns:
            The label as persisted, with its store-assigned id

        Raises:
            DatabaseError: If the insert fails
        """
        return await self._insert(name=name)

    async def update(self, label: Label) -> Label:
        """
        Rename a label.

        Args:
            label: Label carrying the id to update and the new name

        Returns:
            The label as persisted

        Raises:
            NotFoundError: If no label has that id
        """
        return await self._update(label.id, name=label.name)

    async def _delete_dependents(self, session: AsyncSession, id: int) -> None:
        await session.execute(delete(NoteLabel).where(NoteLabel.label_id == id))
