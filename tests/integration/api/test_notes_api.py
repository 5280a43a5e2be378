"""
Integration Tests for the Notes API.

Covers note CRUD, camelCase serialization of timestamps and the
note label membership endpoints.
"""

from datetime import datetime

import pytest
from httpx import AsyncClient

NOTES = "/api/v1/notes"


async def _create_note(client: AsyncClient, title: str, body: str | None = None) -> dict:
    payload = {"title": title}
    if body is not None:
        payload["body"] = body
    response = await client.post(NOTES, json=payload)
    assert response.status_code == 201, response.text
    return response.json()["data"]


async def _create_label(client: AsyncClient, name: str) -> dict:
    response = await client.post("/api/v1/labels", json={"name": name})
    assert response.status_code == 201, response.text
    return response.json()["data"]


class TestCreateNote:
    """POST /api/v1/notes"""

    @pytest.mark.asyncio
    async def test_create_serializes_camel_case(self, client, api):
        response = await client.post(NOTES, json={"title": "Plan", "body": "details"})

        note = api.assert_success(response, expected_status=201)["data"]
        assert set(note) == {"id", "title", "body", "createdAt", "updatedAt"}
        assert note["id"] == 1
        assert (note["title"], note["body"]) == ("Plan", "details")
        assert note["createdAt"] == note["updatedAt"]
        datetime.fromisoformat(note["createdAt"])

    @pytest.mark.asyncio
    async def test_body_defaults_to_empty(self, client):
        note = await _create_note(client, "Plan")

        assert note["body"] == ""

    @pytest.mark.asyncio
    async def test_explicit_null_body_defaults_to_empty(self, client, api):
        response = await client.post(NOTES, json={"title": "Plan", "body": None})

        assert api.assert_success(response, expected_status=201)["data"]["body"] == ""

    @pytest.mark.asyncio
    async def test_blank_title_is_rejected(self, client, api):
        response = await client.post(NOTES, json={"title": ""})

        api.assert_error(response, 400, "VAL_VALIDATION_ERROR")

    @pytest.mark.asyncio
    async def test_missing_title_is_422(self, client, api):
        response = await client.post(NOTES, json={"body": "orphan"})

        data = api.assert_error(response, 422, "VAL_REQUEST_INVALID")
        fields = [e["field"] for e in data["error"]["details"]["validation_errors"]]
        assert "body.title" in fields


class TestReadNotes:
    """GET /api/v1/notes and /api/v1/notes/{id}"""

    @pytest.mark.asyncio
    async def test_get_by_id(self, client, api):
        note = await _create_note(client, "Plan", "details")

        data = api.assert_success(await client.get(f"{NOTES}/{note['id']}"))
        assert data["data"] == note

    @pytest.mark.asyncio
    async def test_list(self, client, api):
        await _create_note(client, "one")
        await _create_note(client, "two")

        data = api.assert_success(await client.get(NOTES))
        assert sorted(n["title"] for n in data["data"]) == ["one", "two"]

    @pytest.mark.asyncio
    async def test_get_missing_is_404(self, client, api):
        data = api.assert_error(await client.get(f"{NOTES}/5"), 404, "RES_NOT_FOUND")
        assert data["error"]["message"] == "Note 5 not found"


class TestUpdateNote:
    """PUT /api/v1/notes/{id}"""

    @pytest.mark.asyncio
    async def test_update_overwrites_and_keeps_created_at(self, client, api):
        note = await _create_note(client, "Plan", "draft")

        response = await client.put(
            f"{NOTES}/{note['id']}", json={"title": "Plan v2", "body": "final"}
        )

        updated = api.assert_success(response)["data"]
        assert (updated["title"], updated["body"]) == ("Plan v2", "final")
        assert updated["createdAt"] == note["createdAt"]
        assert datetime.fromisoformat(updated["updatedAt"]) >= datetime.fromisoformat(
            note["updatedAt"]
        )

    @pytest.mark.asyncio
    async def test_update_missing_is_404(self, client, api):
        response = await client.put(f"{NOTES}/3", json={"title": "Plan"})

        api.assert_error(response, 404, "RES_NOT_FOUND")


class TestDeleteNote:
    """DELETE /api/v1/notes/{id}"""

    @pytest.mark.asyncio
    async def test_delete(self, client, api):
        note = await _create_note(client, "Plan")

        assert (await client.delete(f"{NOTES}/{note['id']}")).status_code == 204
        api.assert_error(await client.get(f"{NOTES}/{note['id']}"), 404)

    @pytest.mark.asyncio
    async def test_delete_missing_is_204(self, client):
        assert (await client.delete(f"{NOTES}/42")).status_code == 204


class TestNoteLabels:
    """/api/v1/notes/{id}/labels endpoints"""

    @pytest.mark.asyncio
    async def test_attach_and_list(self, client, api):
        note = await _create_note(client, "Plan")
        work = await _create_label(client, "work")
        await _create_label(client, "home")

        response = await client.put(f"{NOTES}/{note['id']}/labels/{work['id']}")

        assert response.status_code == 204
        data = api.assert_success(await client.get(f"{NOTES}/{note['id']}/labels"))
        assert data["data"] == [work]

    @pytest.mark.asyncio
    async def test_attach_is_idempotent(self, client, api):
        note = await _create_note(client, "Plan")
        work = await _create_label(client, "work")
        url = f"{NOTES}/{note['id']}/labels/{work['id']}"

        assert (await client.put(url)).status_code == 204
        assert (await client.put(url)).status_code == 204

        data = api.assert_success(await client.get(f"{NOTES}/{note['id']}/labels"))
        assert len(data["data"]) == 1

    @pytest.mark.asyncio
    async def test_attach_unknown_label_is_404(self, client, api):
        note = await _create_note(client, "Plan")

        response = await client.put(f"{NOTES}/{note['id']}/labels/9")

        api.assert_error(response, 404, "RES_NOT_FOUND")

    @pytest.mark.asyncio
    async def test_get_attached_label(self, client, api):
        note = await _create_note(client, "Plan")
        work = await _create_label(client, "work")
        await client.put(f"{NOTES}/{note['id']}/labels/{work['id']}")

        data = api.assert_success(await client.get(f"{NOTES}/{note['id']}/labels/{work['id']}"))
        assert data["data"] == work

    @pytest.mark.asyncio
    async def test_get_unattached_label_is_404(self, client, api):
        note = await _create_note(client, "Plan")
        work = await _create_label(client, "work")

        response = await client.get(f"{NOTES}/{note['id']}/labels/{work['id']}")

        api.assert_error(response, 404, "RES_NOT_FOUND")

    @pytest.mark.asyncio
    async def test_detach_only_removes_that_pair(self, client, api):
        first = await _create_note(client, "one")
        second = await _create_note(client, "two")
        work = await _create_label(client, "work")
        await client.put(f"{NOTES}/{first['id']}/labels/{work['id']}")
        await client.put(f"{NOTES}/{second['id']}/labels/{work['id']}")

        response = await client.delete(f"{NOTES}/{first['id']}/labels/{work['id']}")

        assert response.status_code == 204
        assert api.assert_success(await client.get(f"{NOTES}/{first['id']}/labels"))["data"] == []
        assert api.assert_success(await client.get(f"{NOTES}/{second['id']}/labels"))["data"] == [work]

    @pytest.mark.asyncio
    async def test_deleting_note_drops_memberships(self, client, api):
        note = await _create_note(client, "Plan")
        work = await _create_label(client, "work")
        await client.put(f"{NOTES}/{note['id']}/labels/{work['id']}")

        await client.delete(f"{NOTES}/{note['id']}")

        assert api.assert_success(await client.get(f"/api/v1/labels/{work['id']}"))["data"] == work
        assert api.assert_success(await client.get(f"{NOTES}/{note['id']}/labels"))["data"] == []


class TestNoteIdBounds:
    """Path ids outside the primary key range are rejected up front."""

    @pytest.mark.asyncio
    async def test_out_of_range_note_id_is_422(self, client, api):
        response = await client.get(f"{NOTES}/9223372036854775808")

        api.assert_error(response, 422, "VAL_REQUEST_INVALID")

    @pytest.mark.asyncio
    async def test_out_of_range_label_id_in_membership_is_422(self, client, api):
        note = await _create_note(client, "Plan")

        response = await client.put(f"{NOTES}/{note['id']}/labels/9223372036854775808")

        data = api.assert_error(response, 422, "VAL_REQUEST_INVALID")
        fields = [e["field"] for e in data["error"]["details"]["validation_errors"]]
        assert fields == ["path.label_id"]
