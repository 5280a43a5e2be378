"""
Label Service.

Business logic layer for labels.
"""

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from notebase.models.label import Label
from notebase.repositories.label import LabelRepository
from notebase.schemas.label import LabelUpdate, NewLabel
from notebase.services.base import BaseService


class LabelService(BaseService):
    """Service for label business logic."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        super().__init__(session_factory)
        self.repo = LabelRepository(session_factory)

    async def list_labels(self) -> list[Label]:
        """List every label."""
        return await self.repo.list_all()

    async def get_label(self, label_id: int) -> Label:
        """
        Get a label by ID.

        Raises:
            NotFoundError: If label not found
        """
        return await self.repo.get_by_id(label_id)

    async def create_label(self, data: NewLabel) -> Label:
        """
        Create a new label.

        Raises:
            ValidationError: If the name is blank
        """
        self._validate_required({"name": data.name}, ["name"])
        self._log_operation("Creating label", name=data.name)

        label = await self.repo.create(data.name)

        self._log_debug("Label created", label_id=label.id)
        return label

    async def rename_label(self, label_id: int, data: LabelUpdate) -> Label:
        """
        Rename an existing label.

        Raises:
            ValidationError: If the name is blank
            NotFoundError: If label not found
        """
        self._validate_required({"name": data.name}, ["name"])
        self._log_operation("Renaming label", label_id=label_id, name=data.name)
        return await self.repo.update(Label(id=label_id, name=data.name))

    async def delete_label(self, label_id: int) -> None:
        """Delete a label and detach it from every note."""
        self._log_operation("Deleting label", label_id=label_id)
        await self.repo.delete(label_id)
