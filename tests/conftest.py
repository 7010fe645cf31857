"""
Global test fixtures for MongoDB Web Manager.

This module provides shared fixtures for all tests including:
- Mock MongoDB (mongomock-motor)
- A ConnectionManager already connected to the mock deployment
- FastAPI test clients bound to that manager
- Sample documents
"""

import sys
from pathlib import Path
from typing import Generator

import pytest
import pytest_asyncio
from bson import ObjectId
from fastapi.testclient import TestClient
from mongomock_motor import AsyncMongoMockClient

# Add backend to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "backend"))

TEST_DB = "shop"
TEST_COLLECTION = "products"


# =============================================================================
# MongoDB Fixtures (mongomock-motor)
# =============================================================================

@pytest.fixture
def mock_async_mongo_client():
    """
    Create an async mock MongoDB client using mongomock-motor.

    This provides an in-memory MongoDB that behaves like the real thing
    for testing purposes.
    """
    client = AsyncMongoMockClient()
    yield client
    client.close()


@pytest.fixture
def connection_manager(mock_async_mongo_client):
    """A ConnectionManager holding the mock client as its live connection."""
    from mongo_manager.database.connections import ConnectionManager

    manager = ConnectionManager(server_selection_timeout_ms=100)
    manager._client = mock_async_mongo_client
    return manager


@pytest.fixture
def disconnected_manager():
    """A ConnectionManager that has never connected."""
    from mongo_manager.database.connections import ConnectionManager

    return ConnectionManager(server_selection_timeout_ms=100)


@pytest.fixture
def products(mock_async_mongo_client):
    """The products collection of the test database."""
    return mock_async_mongo_client[TEST_DB][TEST_COLLECTION]


@pytest_asyncio.fixture
async def seeded_products(products):
    """25 products with ObjectId keys, inserted in order."""
    docs = [
        {"_id": ObjectId(), "name": f"product-{i:02d}", "price": i * 10, "active": i % 2 == 0}
        for i in range(25)
    ]
    await products.insert_many(docs)
    return docs


# =============================================================================
# FastAPI Test Client Fixtures
# =============================================================================

@pytest.fixture
def app():
    """
    Create FastAPI app for testing.

    Note: This imports the actual app; tests bind it to a manager through
    dependency_overrides.
    """
    from mongo_manager.main import app

    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(app, connection_manager) -> Generator:
    """
    TestClient whose routes use the connected mock manager.

    Use this for synchronous endpoint testing.
    """
    from mongo_manager.database.connections import get_connection_manager

    app.dependency_overrides[get_connection_manager] = lambda: connection_manager
    with TestClient(app) as c:
        yield c


@pytest.fixture
def disconnected_client(app, disconnected_manager) -> Generator:
    """TestClient whose routes use a manager without connection."""
    from mongo_manager.database.connections import get_connection_manager

    app.dependency_overrides[get_connection_manager] = lambda: disconnected_manager
    with TestClient(app) as c:
        yield c


@pytest_asyncio.fixture
async def async_client(app, connection_manager):
    """
    Create an async test client.

    Use this when a test also awaits the mock database directly.
    """
    from httpx import AsyncClient, ASGITransport
    from mongo_manager.database.connections import get_connection_manager

    app.dependency_overrides[get_connection_manager] = lambda: connection_manager
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as ac:
        yield ac

