"""
Backend-specific test fixtures and configuration.

These fixtures extend the global fixtures with backend-specific helpers
for testing FastAPI routes, services, and database operations.
"""

import sys
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

# Add backend to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent / "backend"))


# =============================================================================
# Driver Mocks
# =============================================================================

@pytest.fixture
def admin_commands():
    """
    Canned replies for admin commands, keyed by command name.

    Usage in tests:
        def test_something(admin_commands, mock_motor_client):
            admin_commands["listDatabases"] = {"databases": [...]}
    """
    return {
        "ping": {"ok": 1},
        "listDatabases": {
            "databases": [
                {"name": "admin", "sizeOnDisk": 40960, "empty": False},
                {"name": "shop", "sizeOnDisk": 1536, "empty": False},
            ],
            "totalSize": 42496,
            "ok": 1,
        },
    }


@pytest.fixture
def mock_motor_client(admin_commands):
    """
    A Motor client whose admin commands answer from admin_commands.

    A value that is an exception instance is raised instead of returned.
    """
    async def _command(name, *args, **kwargs):
        reply = admin_commands[name]
        if isinstance(reply, Exception):
            raise reply
        return reply

    client = MagicMock()
    client.admin.command = AsyncMock(side_effect=_command)
    return client


@pytest.fixture
def mock_collection_cursor():
    """Build a command cursor whose to_list returns the given items."""
    def _build(items: list[dict]):
        cursor = MagicMock()
        cursor.to_list = AsyncMock(return_value=items)
        return cursor
    return _build


# =============================================================================
# Service Fixtures
# =============================================================================

@pytest.fixture
def document_service(connection_manager):
    """DocumentService bound to the connected mock manager."""
    from mongo_manager.services.document_service import DocumentService

    return DocumentService(connection_manager, query_result_limit=100)


@pytest.fixture
def mock_document_service():
    """
    Create a fully mocked DocumentService.

    All methods are AsyncMock, allowing you to configure return values:

        mock_document_service.list_databases.return_value = [...]
    """
    service = MagicMock()
    service.list_databases = AsyncMock()
    service.list_collections = AsyncMock()
    service.list_documents = AsyncMock()
    service.insert_document = AsyncMock()
    service.replace_document = AsyncMock()
    service.delete_document = AsyncMock()
    service.execute_query = AsyncMock()
    return service


# =============================================================================
# Response Assertion Helpers
# =============================================================================

@pytest.fixture
def assert_error_response():
    """Helper to assert error response structure."""
    def _assert(response, status_code: int, error_contains: str = None):
        assert response.status_code == status_code
        data = response.json()
        assert "error" in data
        if error_contains:
            assert error_contains.lower() in data["error"].lower()
    return _assert
