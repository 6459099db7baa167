"""Tests for the standard entity endpoints, exercised through /api/Center.

Every entity router is built by the same factory, so Center stands in for
the full CRUD surface: list, get, create, replace, patch, activation toggle
and hard delete, plus the error mapping to 400/404.
"""

from datetime import UTC, datetime, timedelta

import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.integration


def _parse_date(value: str) -> datetime:
    parsed = datetime.fromisoformat(value)
    return parsed if parsed.tzinfo else parsed.replace(tzinfo=UTC)


async def _create_center(client: AsyncClient, **overrides) -> dict:
    body = {"name": "North", "code_center": "C001", "address": "Main St"}
    body.update(overrides)
    response = await client.post("/api/Center", json=body)
    assert response.status_code == 201
    return response.json()


class TestCenterLifecycle:
    async def test_create_deactivate_and_reactivate(self, client: AsyncClient):
        before = datetime.now(UTC) - timedelta(seconds=1)
        created = await _create_center(client)
        after = datetime.now(UTC) + timedelta(seconds=1)
        center_id = created["id"]
        assert created["active"] is True
        assert before <= _parse_date(created["create_date"]) <= after

        listed = await client.get("/api/Center")
        assert center_id in [c["id"] for c in listed.json()]

        response = await client.request(
            "DELETE", "/api/Center/active", json={"id": center_id, "active": False}
        )
        assert response.status_code == 200
        assert response.json() == {"success": True, "message": "Center deactivated"}

        listed = await client.get("/api/Center")
        assert center_id not in [c["id"] for c in listed.json()]

        fetched = await client.get(f"/api/Center/{center_id}")
        assert fetched.status_code == 200
        assert fetched.json()["active"] is False
        assert fetched.json()["delete_date"] is not None

        response = await client.request(
            "DELETE", "/api/Center/active", json={"id": center_id, "active": True}
        )
        assert response.json()["message"] == "Center activated"
        fetched = await client.get(f"/api/Center/{center_id}")
        assert fetched.json()["delete_date"] is None
        assert fetched.json()["active"] is True

        listed = await client.get("/api/Center")
        assert center_id in [c["id"] for c in listed.json()]

    async def test_include_inactive_lists_everything(self, client: AsyncClient):
        created = await _create_center(client)
        await client.request(
            "DELETE", "/api/Center/active", json={"id": created["id"], "active": False}
        )

        response = await client.get("/api/Center", params={"include_inactive": True})

        assert created["id"] in [c["id"] for c in response.json()]

    async def test_hard_delete(self, client: AsyncClient):
        created = await _create_center(client)

        response = await client.delete(f"/api/Center/{created['id']}")
        assert response.status_code == 200
        assert response.json() == {"success": True, "message": "Center deleted"}

        assert (await client.get(f"/api/Center/{created['id']}")).status_code == 404


class TestCenterUpdates:
    async def test_put_replaces_fields(self, client: AsyncClient):
        created = await _create_center(client)

        response = await client.put(
            f"/api/Center/{created['id']}",
            json={"id": created["id"], "name": "South"},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["name"] == "South"
        assert body["address"] is None
        assert body["update_date"] is not None

    async def test_put_id_mismatch_is_rejected(self, client: AsyncClient):
        created = await _create_center(client)

        response = await client.put(
            f"/api/Center/{created['id']}",
            json={"id": created["id"] + 1, "name": "South"},
        )

        assert response.status_code == 400
        assert response.json()["field"] == "id"

    async def test_patch_changes_only_given_fields(self, client: AsyncClient):
        created = await _create_center(client)

        response = await client.patch(
            "/api/Center", json={"id": created["id"], "address": "Second St"}
        )

        assert response.status_code == 200
        assert response.json()["name"] == "North"
        assert response.json()["address"] == "Second St"

    async def test_patch_without_fields_is_rejected(self, client: AsyncClient):
        created = await _create_center(client)

        response = await client.patch("/api/Center", json={"id": created["id"]})

        assert response.status_code == 400


class TestCenterErrors:
    async def test_unknown_id_returns_404(self, client: AsyncClient):
        response = await client.get("/api/Center/9999")

        assert response.status_code == 404
        assert response.json() == {
            "detail": "Center with id 9999 not found",
            "entity": "Center",
            "id": 9999,
        }

    @pytest.mark.parametrize("bad_id", [0, -3])
    async def test_non_positive_id_returns_400(self, client: AsyncClient, bad_id):
        response = await client.get(f"/api/Center/{bad_id}")

        assert response.status_code == 400
        assert response.json()["field"] == "id"

    async def test_blank_name_returns_400(self, client: AsyncClient):
        response = await client.post("/api/Center", json={"name": "   "})

        assert response.status_code == 400
        assert response.json()["field"] == "name"

    async def test_malformed_body_returns_400(self, client: AsyncClient):
        response = await client.post("/api/Center", json={"address": "no name"})

        assert response.status_code == 400
        assert isinstance(response.json()["detail"], list)

    async def test_foreign_key_failure_maps_to_database_error(
        self, client: AsyncClient
    ):
        response = await client.post(
            "/api/Center", json={"name": "North", "regional_id": 777}
        )

        assert response.status_code == 500
        assert response.json()["subsystem"] == "database"
        assert "777" not in response.json()["detail"]


class TestJoinAndAppendOnlyRouters:
    async def test_join_entity_has_no_active_toggle(self, client: AsyncClient):
        response = await client.request(
            "DELETE", "/api/UserSede/active", json={"id": 1, "active": False}
        )

        assert response.status_code == 400

    async def test_change_log_is_append_only(self, client: AsyncClient):
        created = await client.post(
            "/api/ChangeLog",
            json={"entity_name": "Center", "entity_id": 1, "change_type": "create"},
        )
        assert created.status_code == 201
        assert created.json()["change_date"] is not None

        listed = await client.get("/api/ChangeLog")
        assert [row["id"] for row in listed.json()] == [created.json()["id"]]

        response = await client.delete(f"/api/ChangeLog/{created.json()['id']}")
        assert response.status_code == 405
