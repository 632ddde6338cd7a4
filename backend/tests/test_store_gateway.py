"""
NYB Restaurant Backend — Document Store Gateway Tests
=======================================================

What:  Contract tests run against both DocumentStore implementations
       (in-memory and SQL on SQLite), plus SQL-specific fault translation.

What we test:
    ✅ insert + list_all returns the payload plus an assigned _id
    ✅ find_one_and_set_field touches exactly one field
    ✅ Unknown ids: matched=False / deleted_count=0, never an exception
    ✅ delete_one is idempotent in effect
    ✅ Documents carrying an identifier are rejected
    ✅ parse_document_id rejects malformed identifiers
    ✅ Driver errors surface as DatabaseError
"""

import uuid
from unittest.mock import patch

import pytest
from sqlalchemy.exc import OperationalError

from restaurant_api.exceptions import DatabaseError, ValidationError
from restaurant_api.services.store_base import parse_document_id


class TestGatewayContract:

    @pytest.mark.asyncio
    async def test_insert_then_list_returns_payload_with_id(self, store, sample_menu_item):
        result = await store.menu.insert(sample_menu_item)

        docs = await store.menu.list_all()

        assert docs == [{"_id": result.inserted_id, **sample_menu_item}]
        uuid.UUID(result.inserted_id)

    @pytest.mark.asyncio
    async def test_insert_assigns_unique_ids(self, store):
        ids = {(await store.orders.insert({"status": "pending", "n": i})).inserted_id for i in range(5)}

        assert len(ids) == 5
        listed = {doc["_id"] for doc in await store.orders.list_all()}
        assert listed == ids

    @pytest.mark.asyncio
    async def test_collections_are_independent(self, store, sample_menu_item, sample_order):
        await store.menu.insert(sample_menu_item)
        await store.orders.insert(sample_order)

        assert len(await store.menu.list_all()) == 1
        assert len(await store.orders.list_all()) == 1

    @pytest.mark.asyncio
    async def test_set_field_changes_only_that_field(self, store, sample_order):
        inserted = await store.orders.insert(sample_order)
        doc_id = uuid.UUID(inserted.inserted_id)

        result = await store.orders.find_one_and_set_field(doc_id, "status", "completed")

        assert result.matched is True
        assert result.document == {
            "_id": inserted.inserted_id,
            **sample_order,
            "status": "completed",
        }
        stored = (await store.orders.list_all())[0]
        assert stored == result.document

    @pytest.mark.asyncio
    async def test_set_field_adds_missing_field(self, store):
        inserted = await store.menu.insert({"name": "Soup", "price": 4.0})

        result = await store.menu.find_one_and_set_field(
            uuid.UUID(inserted.inserted_id), "isAvailable", False
        )

        assert result.document["isAvailable"] is False
        assert result.document["name"] == "Soup"

    @pytest.mark.asyncio
    async def test_set_field_on_unknown_id_is_not_matched(self, store, sample_order):
        await store.orders.insert(sample_order)

        result = await store.orders.find_one_and_set_field(uuid.uuid4(), "status", "done")

        assert result.matched is False
        assert result.document is None
        assert (await store.orders.list_all())[0]["status"] == "pending"

    @pytest.mark.asyncio
    async def test_delete_is_idempotent(self, store, sample_menu_item):
        inserted = await store.menu.insert(sample_menu_item)
        doc_id = uuid.UUID(inserted.inserted_id)

        first = await store.menu.delete_one(doc_id)
        second = await store.menu.delete_one(doc_id)

        assert first.deleted_count == 1
        assert second.deleted_count == 0
        assert await store.menu.list_all() == []

    @pytest.mark.asyncio
    async def test_delete_unknown_id_removes_nothing(self, store, sample_menu_item):
        await store.menu.insert(sample_menu_item)

        result = await store.menu.delete_one(uuid.uuid4())

        assert result.deleted_count == 0
        assert len(await store.menu.list_all()) == 1

    @pytest.mark.asyncio
    @pytest.mark.parametrize("key", ["_id", "id"])
    async def test_insert_rejects_identifier(self, store, key):
        with pytest.raises(ValidationError):
            await store.menu.insert({key: "abc", "name": "Fries", "price": 3.0})

        assert await store.menu.list_all() == []

    @pytest.mark.asyncio
    async def test_returned_documents_are_copies(self, store, sample_order):
        await store.orders.insert(sample_order)

        docs = await store.orders.list_all()
        docs[0]["items"].append({"name": "Shake", "quantity": 1})

        assert (await store.orders.list_all())[0]["items"] == sample_order["items"]

    @pytest.mark.asyncio
    async def test_ping(self, store):
        await store.ping()


class TestInMemoryOrdering:

    @pytest.mark.asyncio
    async def test_list_preserves_insertion_order(self, memory_store):
        names = ["Tea", "Coffee", "Cake"]
        for name in names:
            await memory_store.menu.insert({"name": name, "price": 1.0})

        assert [doc["name"] for doc in await memory_store.menu.list_all()] == names


class TestParseDocumentId:

    def test_accepts_uuid_string(self):
        raw = str(uuid.uuid4())
        assert parse_document_id(raw) == uuid.UUID(raw)

    @pytest.mark.parametrize(
        "raw",
        ["", "123", "not-an-id", "64b7f0c2e4b0a1b2c3d4e5f6", "zzzzzzzz-zzzz-zzzz-zzzz-zzzzzzzzzzzz"],
    )
    def test_rejects_malformed(self, raw):
        with pytest.raises(ValidationError, match="Invalid order id"):
            parse_document_id(raw, resource="order")


class TestSqlFaults:

    @pytest.mark.asyncio
    async def test_list_failure_becomes_database_error(self, sql_store):
        fault = OperationalError("SELECT", {}, Exception("connection reset"))
        with patch("sqlalchemy.ext.asyncio.AsyncSession.execute", side_effect=fault):
            with pytest.raises(DatabaseError) as exc_info:
                await sql_store.menu.list_all()

        assert exc_info.value.context["collection"] == "menu"
        assert exc_info.value.context["error_type"] == "OperationalError"

    @pytest.mark.asyncio
    async def test_update_failure_becomes_database_error(self, sql_store):
        inserted = await sql_store.orders.insert({"status": "pending"})
        fault = OperationalError("UPDATE", {}, Exception("disk I/O error"))

        with patch("sqlalchemy.ext.asyncio.AsyncSession.flush", side_effect=fault):
            with pytest.raises(DatabaseError):
                await sql_store.orders.find_one_and_set_field(
                    uuid.UUID(inserted.inserted_id), "status", "completed"
                )

        assert (await sql_store.orders.list_all())[0]["status"] == "pending"

    @pytest.mark.asyncio
    async def test_ping_on_unreachable_database(self, tmp_path):
        from restaurant_api.config import settings
        from restaurant_api.services.sql_store import SqlDocumentStore

        store = SqlDocumentStore.from_settings(
            settings, url=f"sqlite+aiosqlite:///{tmp_path / 'missing' / 'nope.db'}"
        )
        try:
            with pytest.raises(DatabaseError):
                await store.ping()
        finally:
            await store.close()
