"""
Integration Tests for ids outside the primary key range.

Ids that cannot fit a signed 64-bit INTEGER column never match a row.
They behave like any other unknown id instead of reaching the driver.
"""

import pytest

from notebase.core.exceptions import NotFoundError
from notebase.models.base import MAX_ID, MIN_ID
from notebase.models.label import Label
from notebase.models.note import Note

TOO_LARGE = MAX_ID + 1
TOO_SMALL = MIN_ID - 1


class TestEntityRepositories:
    """Labels and notes treat out-of-range ids as missing."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("bad_id", [TOO_LARGE, TOO_SMALL])
    async def test_get_raises_not_found(self, label_repo, note_repo, bad_id):
        with pytest.raises(NotFoundError):
            await label_repo.get_by_id(bad_id)
        with pytest.raises(NotFoundError):
            await note_repo.get_by_id(bad_id)

    @pytest.mark.asyncio
    async def test_update_raises_not_found(self, label_repo, note_repo):
        with pytest.raises(NotFoundError):
            await label_repo.update(Label(id=TOO_LARGE, name="work"))
        with pytest.raises(NotFoundError):
            await note_repo.update(Note(id=TOO_LARGE, title="Plan", body=""))

    @pytest.mark.asyncio
    async def test_delete_is_a_no_op(self, label_repo, note_repo):
        label = await label_repo.create("work")

        await label_repo.delete(TOO_LARGE)
        await note_repo.delete(TOO_LARGE)

        assert [l.id for l in await label_repo.list_all()] == [label.id]

    @pytest.mark.asyncio
    async def test_largest_storable_id_is_just_missing(self, label_repo):
        with pytest.raises(NotFoundError, match=f"Label {MAX_ID} not found"):
            await label_repo.get_by_id(MAX_ID)


class TestAssociationRepository:
    """Membership operations treat out-of-range ids as missing."""

    @pytest.mark.asyncio
    async def test_add_label_raises_not_found(self, note_repo, label_repo, note_label_repo):
        note = await note_repo.create("Plan")
        label = await label_repo.create("work")

        with pytest.raises(NotFoundError):
            await note_label_repo.add_label(TOO_LARGE, label.id)
        with pytest.raises(NotFoundError):
            await note_label_repo.add_label(note.id, TOO_LARGE)

    @pytest.mark.asyncio
    async def test_remove_label_is_a_no_op(self, note_label_repo):
        await note_label_repo.remove_label(TOO_LARGE, 1)
        await note_label_repo.remove_label(1, TOO_LARGE)

    @pytest.mark.asyncio
    async def test_list_labels_is_empty(self, note_label_repo):
        assert await note_label_repo.list_labels(TOO_LARGE) == []

    @pytest.mark.asyncio
    async def test_get_label_raises_not_found(self, note_label_repo):
        with pytest.raises(NotFoundError):
            await note_label_repo.get_label(TOO_LARGE, 1)
