"""
NYB Restaurant Backend — Menu Endpoint Tests
==============================================

What:  HTTP-level tests for /menu, /addMenuItem and /items/{id}.
How:   HTTPX AsyncClient over ASGI against an app with an in-memory store.
"""

import uuid
from unittest.mock import AsyncMock

import pytest

from restaurant_api.exceptions import DatabaseError


class TestMenuLifecycle:

    @pytest.mark.asyncio
    async def test_add_toggle_delete_scenario(self, test_client):
        created = await test_client.post(
            "/addMenuItem", json={"name": "Burger", "price": 9.5, "isAvailable": True}
        )
        assert created.status_code == 200
        body = created.json()
        assert body["acknowledged"] is True
        item_id = body["insertedId"]
        uuid.UUID(item_id)

        patched = await test_client.patch(f"/items/{item_id}", json={"isAvailable": False})
        assert patched.status_code == 200
        patched_body = patched.json()
        assert patched_body["success"] is True
        assert patched_body["message"] == "Item status updated successfully"
        assert patched_body["data"]["isAvailable"] is False
        assert patched_body["data"]["name"] == "Burger"
        assert patched_body["data"]["_id"] == item_id

        deleted = await test_client.delete(f"/menu/{item_id}")
        assert deleted.status_code == 200
        assert deleted.json() == {"acknowledged": True, "deletedCount": 1}

        listed = await test_client.get("/menu")
        assert listed.status_code == 200
        assert item_id not in [doc["_id"] for doc in listed.json()]

    @pytest.mark.asyncio
    async def test_list_returns_documents_as_stored(self, test_client, sample_menu_item):
        created = await test_client.post("/addMenuItem", json=sample_menu_item)

        response = await test_client.get("/menu")

        assert response.status_code == 200
        assert response.json() == [{"_id": created.json()["insertedId"], **sample_menu_item}]

    @pytest.mark.asyncio
    async def test_list_omits_fields_never_set(self, test_client):
        await test_client.post("/addMenuItem", json={"name": "Water", "price": 1})

        doc = (await test_client.get("/menu")).json()[0]

        assert set(doc) == {"_id", "name", "price"}

    @pytest.mark.asyncio
    async def test_list_empty_menu(self, test_client):
        response = await test_client.get("/menu")

        assert response.status_code == 200
        assert response.json() == []


class TestMenuErrors:

    @pytest.mark.asyncio
    async def test_patch_unknown_item_is_404(self, test_client):
        response = await test_client.patch(f"/items/{uuid.uuid4()}", json={"isAvailable": False})

        assert response.status_code == 404
        body = response.json()
        assert body["success"] is False
        assert body["message"] == "Item not found"

    @pytest.mark.asyncio
    async def test_patch_malformed_id_is_400(self, test_client):
        response = await test_client.patch("/items/64b7f0c2e4b0a1b2c3d4e5f6", json={"isAvailable": False})

        assert response.status_code == 400
        assert response.json()["success"] is False

    @pytest.mark.asyncio
    async def test_patch_without_field_is_400(self, test_client):
        created = await test_client.post("/addMenuItem", json={"name": "Tea", "price": 2})

        response = await test_client.patch(f"/items/{created.json()['insertedId']}", json={"available": False})

        assert response.status_code == 400
        assert response.json()["error"] == "validation_error"

    @pytest.mark.asyncio
    async def test_delete_malformed_id_is_400(self, test_client):
        response = await test_client.delete("/menu/not-an-id")

        assert response.status_code == 400
        assert response.json()["success"] is False

    @pytest.mark.asyncio
    async def test_delete_unknown_id_reports_zero(self, test_client):
        response = await test_client.delete(f"/menu/{uuid.uuid4()}")

        assert response.status_code == 200
        assert response.json()["deletedCount"] == 0

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "payload",
        [
            {"price": 3.0},
            {"name": "Fries"},
            {"name": "Fries", "price": "cheap"},
            {"_id": str(uuid.uuid4()), "name": "Fries", "price": 3.0},
            ["Fries", 3.0],
        ],
    )
    async def test_add_malformed_item_is_400(self, test_client, payload):
        response = await test_client.post("/addMenuItem", json=payload)

        assert response.status_code == 400
        assert response.json()["success"] is False
        assert (await test_client.get("/menu")).json() == []

    @pytest.mark.asyncio
    async def test_store_failure_is_500(self, test_client, memory_store):
        memory_store.menu.list_all = AsyncMock(
            side_effect=DatabaseError(message="menu: could not list documents (OperationalError)")
        )

        response = await test_client.get("/menu")

        assert response.status_code == 500
        body = response.json()
        assert body["success"] is False
        assert body["details"]["reason"] == "menu: could not list documents (OperationalError)"


class TestMenuDocumentFidelity:

    @pytest.mark.asyncio
    async def test_listed_item_is_exactly_what_was_sent(self, test_client):
        payload = {
            "name": "Burger",
            "price": 9,
            "category": None,
            "is_available": False,
            "spice": {"level": 2, "optional": True},
        }
        created = await test_client.post("/addMenuItem", json=payload)

        listed = (await test_client.get("/menu")).json()

        assert listed == [{"_id": created.json()["insertedId"], **payload}]
        assert isinstance(listed[0]["price"], int)
        assert "isAvailable" not in listed[0]

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "payload",
        [
            {"name": "Burger", "price": "9.5"},
            {"name": "Burger", "price": True},
            {"name": "Burger", "price": 9.5, "isAvailable": "yes"},
            {"name": "Burger", "price": 9.5, "isAvailable": 1},
            {"name": 42, "price": 9.5},
            {"name": "Burger", "price": 9.5, "category": 7},
        ],
    )
    async def test_wrong_core_types_are_rejected_not_coerced(self, test_client, payload):
        response = await test_client.post("/addMenuItem", json=payload)

        assert response.status_code == 400
        assert (await test_client.get("/menu")).json() == []

    @pytest.mark.asyncio
    async def test_patch_accepts_only_the_json_key(self, test_client):
        created = await test_client.post("/addMenuItem", json={"name": "Tea", "price": 2, "isAvailable": True})
        item_id = created.json()["insertedId"]

        response = await test_client.patch(f"/items/{item_id}", json={"is_available": False})

        assert response.status_code == 400
        listed = (await test_client.get("/menu")).json()
        assert listed == [{"_id": item_id, "name": "Tea", "price": 2, "isAvailable": True}]
