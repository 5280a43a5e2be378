"""
Unit Tests for Label Service.

Tests the LabelService business logic with mocked repositories.
"""

import pytest
from unittest.mock import MagicMock, patch

from notebase.core.exceptions import NotFoundError, ValidationError
from notebase.schemas.label import LabelUpdate, NewLabel
from notebase.services.label import LabelService


@pytest.fixture
def service():
    """Create LabelService with a mocked session factory."""
    return LabelService(MagicMock())


class TestLabelService:
    """Tests for label operations."""

    @pytest.mark.asyncio
    async def test_create_label(self, service):
        mock_label = MagicMock()
        mock_label.id = 1

        with patch.object(service.repo, "create", return_value=mock_label) as mock_create:
            result = await service.create_label(NewLabel(name="work"))

            mock_create.assert_called_once_with("work")
            assert result.id == 1

    @pytest.mark.asyncio
    async def test_create_label_blank_name_rejected(self, service):
        with patch.object(service.repo, "create") as mock_create:
            with pytest.raises(ValidationError):
                await service.create_label(NewLabel(name=""))

            mock_create.assert_not_called()

    @pytest.mark.asyncio
    async def test_rename_label(self, service):
        with patch.object(service.repo, "update", return_value=MagicMock()) as mock_update:
            await service.rename_label(2, LabelUpdate(name="job"))

            label = mock_update.call_args.args[0]
            assert (label.id, label.name) == (2, "job")

    @pytest.mark.asyncio
    async def test_rename_missing_label(self, service):
        with patch.object(service.repo, "update", side_effect=NotFoundError("Label 2 not found")):
            with pytest.raises(NotFoundError):
                await service.rename_label(2, LabelUpdate(name="job"))

    @pytest.mark.asyncio
    async def test_delete_label(self, service):
        with patch.object(service.repo, "delete", return_value=None) as mock_delete:
            await service.delete_label(2)

            mock_delete.assert_called_once_with(2)

    @pytest.mark.asyncio
    async def test_list_labels(self, service):
        with patch.object(service.repo, "list_all", return_value=[]):
            assert await service.list_labels() == []
