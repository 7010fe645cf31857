"""
Frontend test fixtures and mocks.

Mocks Streamlit session_state and API responses for isolated testing.
"""
import sys
from pathlib import Path

import pytest
from unittest.mock import MagicMock, patch

# Views and session helpers import their siblings as top-level modules
sys.path.insert(0, str(Path(__file__).parent.parent.parent / "frontend"))


class MockSessionState(dict):
    """Mock st.session_state that behaves like both dict and attribute access."""

    def __getattr__(self, name):
        try:
            return self[name]
        except KeyError:
            raise AttributeError(f"'SessionState' has no attribute '{name}'")

    def __setattr__(self, name, value):
        self[name] = value


@pytest.fixture
def mock_session_state():
    """Provide an empty mock session state for testing."""
    return MockSessionState()


@pytest.fixture
def mock_streamlit(mock_session_state):
    """Patch streamlit module with mocks."""
    with patch.dict("sys.modules", {"streamlit": MagicMock()}):
        st_mock = sys.modules["streamlit"]
        st_mock.session_state = mock_session_state
        yield st_mock


@pytest.fixture
def console_state():
    """A fresh ConsoleState."""
    from frontend.utils.state import ConsoleState

    return ConsoleState()


@pytest.fixture
def connected_state(console_state):
    """A ConsoleState connected to a deployment with two databases."""
    console_state.connection_succeeded(
        [
            {"name": "admin", "sizeOnDisk": 40960},
            {"name": "shop", "sizeOnDisk": 1536},
        ]
    )
    return console_state


@pytest.fixture
def mock_api_responses():
    """Common API response fixtures."""
    return {
        "health_ok": {"status": 200, "data": {"status": "healthy"}},
        "connect_success": {
            "status": 200,
            "data": {
                "success": True,
                "message": "Connected successfully",
                "databases": [
                    {"name": "admin", "sizeOnDisk": 40960},
                    {"name": "shop", "sizeOnDisk": 1536},
                ],
            },
        },
        "connect_failed": {
            "status": 500,
            "data": {"success": False, "error": "Invalid URI scheme"},
        },
        "documents_page": {
            "status": 200,
            "data": {
                "documents": [
                    {"_id": "65a1b2c3d4e5f6a7b8c9d0e1", "name": "lamp", "price": 25},
                    {"_id": "65a1b2c3d4e5f6a7b8c9d0e2", "name": "chair", "price": 80},
                ],
                "totalCount": 25,
                "page": 2,
                "totalPages": 13,
            },
        },
        "not_connected": {
            "status": 400,
            "data": {"error": "Not connected to MongoDB"},
        },
        "connection_error": {"status": 0, "error": "Cannot connect to backend"},
    }


@pytest.fixture
def sample_documents():
    """Sample documents as returned by the API."""
    return [
        {
            "_id": "65a1b2c3d4e5f6a7b8c9d0e1",
            "name": "lamp",
            "price": 25,
            "dimensions": {"height": 40, "width": 20},
            "tags": ["light", "desk"],
        },
        {
            "_id": "65a1b2c3d4e5f6a7b8c9d0e2",
            "name": "chair",
            "price": 80,
            "dimensions": {"height": 90},
        },
    ]
