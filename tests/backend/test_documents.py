"""
Tests for collection listing, paginated browsing and document CRUD.

These tests cover:
- DocumentService against the mongomock-motor deployment
- The documents and collections routes
- Error responses for missing connections and bad bodies
"""

import pytest
from unittest.mock import AsyncMock, MagicMock

from bson import ObjectId
from pymongo.errors import OperationFailure

DOCUMENTS_URL = "/api/databases/shop/collections/products/documents"


class TestListCollections:
    """Tests for collection listing."""

    @pytest.mark.asyncio
    async def test_list_collections_reports_type(
        self, document_service, connection_manager, mock_collection_cursor
    ):
        """Collections and views should be listed with their type."""
        db = MagicMock()
        db.list_collections = AsyncMock(return_value=mock_collection_cursor([
            {"name": "products", "type": "collection"},
            {"name": "cheap_products", "type": "view"},
            {"name": "legacy"},
        ]))
        connection_manager.get_database = MagicMock(return_value=db)

        collections = await document_service.list_collections("shop")

        assert [(c.name, c.type) for c in collections] == [
            ("products", "collection"),
            ("cheap_products", "view"),
            ("legacy", "collection"),
        ]

    @pytest.mark.asyncio
    async def test_list_collections_wraps_driver_errors(
        self, document_service, connection_manager
    ):
        """A driver failure should become DriverError."""
        from mongo_manager.core.exceptions import DriverError

        db = MagicMock()
        db.list_collections = AsyncMock(side_effect=OperationFailure("not authorized"))
        connection_manager.get_database = MagicMock(return_value=db)

        with pytest.raises(DriverError):
            await document_service.list_collections("shop")

    def test_collections_route(self, app, mock_document_service):
        """GET /api/databases/{db}/collections should return name and type."""
        from fastapi.testclient import TestClient
        from mongo_manager.dependencies import get_document_service
        from mongo_manager.schemas.documents import CollectionInfo

        mock_document_service.list_collections.return_value = [
            CollectionInfo(name="products"),
            CollectionInfo(name="cheap_products", type="view"),
        ]
        app.dependency_overrides[get_document_service] = lambda: mock_document_service

        with TestClient(app) as client:
            response = client.get("/api/databases/shop/collections")

        assert response.status_code == 200
        assert response.json() == [
            {"name": "products", "type": "collection"},
            {"name": "cheap_products", "type": "view"},
        ]
        mock_document_service.list_collections.assert_awaited_once_with("shop")


class TestListDocuments:
    """Tests for paginated document listing."""

    @pytest.mark.asyncio
    async def test_second_page_holds_remaining_documents(self, async_client, seeded_products):
        """25 documents with limit 20: page 2 holds the last 5."""
        response = await async_client.get(DOCUMENTS_URL, params={"page": 2, "limit": 20})

        assert response.status_code == 200
        data = response.json()
        assert data["totalCount"] == 25
        assert data["totalPages"] == 2
        assert data["page"] == 2
        assert [doc["name"] for doc in data["documents"]] == [
            f"product-{i:02d}" for i in range(20, 25)
        ]

    @pytest.mark.asyncio
    async def test_default_page_size_is_20(self, async_client, seeded_products):
        """Without query parameters the first 20 documents are returned."""
        response = await async_client.get(DOCUMENTS_URL)

        data = response.json()
        assert data["page"] == 1
        assert len(data["documents"]) == 20

    @pytest.mark.asyncio
    async def test_page_past_the_end_is_empty(self, async_client, seeded_products):
        """A page past the end is not an error."""
        response = await async_client.get(DOCUMENTS_URL, params={"page": 5, "limit": 10})

        assert response.status_code == 200
        data = response.json()
        assert data["documents"] == []
        assert data["totalCount"] == 25
        assert data["totalPages"] == 3

    @pytest.mark.asyncio
    async def test_object_ids_are_returned_as_hex_strings(self, async_client, seeded_products):
        """ObjectId values should be serialized as plain strings."""
        response = await async_client.get(DOCUMENTS_URL, params={"limit": 1})

        doc = response.json()["documents"][0]
        assert doc["_id"] == str(seeded_products[0]["_id"])

    @pytest.mark.asyncio
    async def test_empty_collection(self, async_client):
        """An empty collection has no pages."""
        response = await async_client.get(DOCUMENTS_URL)

        data = response.json()
        assert data == {"documents": [], "totalCount": 0, "page": 1, "totalPages": 0}

    def test_page_zero_is_rejected(self, client, assert_error_response):
        """page must be 1 or more."""
        response = client.get(DOCUMENTS_URL, params={"page": 0})

        assert_error_response(response, 400, "page")

    def test_not_connected_returns_400(self, disconnected_client, assert_error_response):
        """Browsing without a connection should be rejected."""
        response = disconnected_client.get(DOCUMENTS_URL)

        assert_error_response(response, 400, "Not connected to MongoDB")


class TestInsertDocument:
    """Tests for POST .../documents."""

    @pytest.mark.asyncio
    async def test_insert_assigns_object_id(self, async_client, products):
        """A document without _id gets an ObjectId from MongoDB."""
        response = await async_client.post(
            DOCUMENTS_URL,
            json={"document": {"name": "lamp", "price": 25}},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["acknowledged"] is True
        assert ObjectId.is_valid(data["insertedId"])

        stored = await products.find_one({"_id": ObjectId(data["insertedId"])})
        assert stored["name"] == "lamp"

    @pytest.mark.asyncio
    async def test_insert_reads_extended_json(self, async_client, products):
        """$oid and $date wrappers are stored as BSON types."""
        oid = "65a1b2c3d4e5f6a7b8c9d0e1"
        response = await async_client.post(
            DOCUMENTS_URL,
            json={"document": {
                "_id": {"$oid": oid},
                "created": {"$date": "2024-01-15T10:00:00Z"},
            }},
        )

        assert response.json()["insertedId"] == oid
        stored = await products.find_one({"_id": ObjectId(oid)})
        assert stored["created"].year == 2024

    @pytest.mark.asyncio
    async def test_insert_duplicate_id_returns_500(self, async_client, products):
        """The driver's duplicate key error is reported as an error."""
        await products.insert_one({"_id": "sku-1", "name": "chair"})

        response = await async_client.post(
            DOCUMENTS_URL,
            json={"document": {"_id": "sku-1", "name": "table"}},
        )

        assert response.status_code == 500
        assert "error" in response.json()

    @pytest.mark.asyncio
    async def test_duplicate_without_id_creates_new_document(self, async_client, seeded_products):
        """A copy without _id is stored as a new document with the same fields."""
        listing = await async_client.get(DOCUMENTS_URL, params={"limit": 1})
        original = listing.json()["documents"][0]
        copy = {key: value for key, value in original.items() if key != "_id"}

        response = await async_client.post(DOCUMENTS_URL, json={"document": copy})

        new_id = response.json()["insertedId"]
        assert new_id != original["_id"]
        last = await async_client.get(DOCUMENTS_URL, params={"page": 26, "limit": 1})
        assert last.json()["documents"] == [{**copy, "_id": new_id}]

    @pytest.mark.asyncio
    async def test_insert_malformed_oid_returns_400(self, async_client, products):
        """A bad $oid wrapper is rejected before anything is written."""
        response = await async_client.post(
            DOCUMENTS_URL,
            json={"document": {"_id": {"$oid": "xyz"}, "name": "lamp"}},
        )

        assert response.status_code == 400
        assert "Invalid document" in response.json()["error"]
        assert await products.count_documents({}) == 0

    def test_insert_without_document_returns_400(self, client, assert_error_response):
        """A body without document is a validation error."""
        response = client.post(DOCUMENTS_URL, json={"name": "lamp"})

        assert_error_response(response, 400, "document")


class TestReplaceDocument:
    """Tests for PUT .../documents/{id}."""

    @pytest.mark.asyncio
    async def test_replace_by_object_id(self, async_client, products, seeded_products):
        """The whole document is replaced; _id is kept."""
        target = seeded_products[3]

        response = await async_client.put(
            f"{DOCUMENTS_URL}/{target['_id']}",
            json={"document": {"name": "renamed"}},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["matchedCount"] == 1
        assert data["modifiedCount"] == 1
        assert data["upsertedId"] is None

        stored = await products.find_one({"_id": target["_id"]})
        assert stored == {"_id": target["_id"], "name": "renamed"}

    @pytest.mark.asyncio
    async def test_replace_ignores_id_in_body(self, async_client, products):
        """An _id in the replacement body does not change the identifier."""
        await products.insert_one({"_id": "sku-1", "name": "chair"})

        response = await async_client.put(
            f"{DOCUMENTS_URL}/sku-1",
            json={"document": {"_id": "sku-2", "name": "armchair"}},
        )

        assert response.json()["matchedCount"] == 1
        assert await products.find_one({"_id": "sku-2"}) is None
        assert (await products.find_one({"_id": "sku-1"}))["name"] == "armchair"

    @pytest.mark.asyncio
    async def test_replace_by_integer_id(self, async_client, products):
        """Identifiers taken from the path also match integer keys."""
        await products.insert_one({"_id": 42, "name": "answer"})

        response = await async_client.put(
            f"{DOCUMENTS_URL}/42",
            json={"document": {"name": "still 42"}},
        )

        assert response.json()["matchedCount"] == 1
        assert (await products.find_one({"_id": 42}))["name"] == "still 42"

    @pytest.mark.asyncio
    async def test_replace_with_malformed_oid_returns_400(self, async_client, products):
        """A bad $oid wrapper leaves the stored document untouched."""
        await products.insert_one({"_id": "sku-1", "name": "chair"})

        response = await async_client.put(
            f"{DOCUMENTS_URL}/sku-1",
            json={"document": {"name": "armchair", "created": {"$oid": "not-an-id"}}},
        )

        assert response.status_code == 400
        assert "Invalid document" in response.json()["error"]
        assert (await products.find_one({"_id": "sku-1"}))["name"] == "chair"

    @pytest.mark.asyncio
    async def test_replace_unknown_id_matches_nothing(self, async_client, seeded_products):
        """No match is reported through matchedCount, not as an error."""
        response = await async_client.put(
            f"{DOCUMENTS_URL}/{ObjectId()}",
            json={"document": {"name": "ghost"}},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["matchedCount"] == 0
        assert data["modifiedCount"] == 0


class TestDeleteDocument:
    """Tests for DELETE .../documents/{id}."""

    @pytest.mark.asyncio
    async def test_delete_by_object_id(self, async_client, products, seeded_products):
        """Deleting removes exactly one document."""
        target = seeded_products[0]

        response = await async_client.delete(f"{DOCUMENTS_URL}/{target['_id']}")

        assert response.status_code == 200
        assert response.json() == {"acknowledged": True, "deletedCount": 1}
        assert await products.count_documents({}) == 24

        listing = await async_client.get(DOCUMENTS_URL, params={"limit": 100})
        ids = [doc["_id"] for doc in listing.json()["documents"]]
        assert str(target["_id"]) not in ids

    @pytest.mark.asyncio
    async def test_delete_unknown_id(self, async_client, seeded_products):
        """Deleting an unknown identifier deletes nothing."""
        response = await async_client.delete(f"{DOCUMENTS_URL}/no-such-id")

        assert response.status_code == 200
        assert response.json()["deletedCount"] == 0

    def test_delete_not_connected_returns_400(self, disconnected_client, assert_error_response):
        """Deleting without a connection should be rejected."""
        response = disconnected_client.delete(f"{DOCUMENTS_URL}/sku-1")

        assert_error_response(response, 400, "Not connected")
