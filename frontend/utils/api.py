from typing import Any, Optional
from urllib.parse import quote

import requests


def _segment(value: str) -> str:
    """Quote a database, collection or document name for use in a URL path."""
    return quote(str(value), safe="")


class APIClient:
    """Simple API client for backend requests."""

    def __init__(self, base_url: str, timeout: float = 30):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def _headers(self) -> dict:
        return {"Content-Type": "application/json"}

    def _parse_json(self, resp) -> Optional[Any]:
        """Safely parse JSON, return None or text on failure."""
        try:
            if resp is None:
                return None
            if not resp.text:
                return None
            return resp.json()
        except ValueError:
            # Non-JSON response
            return {"raw": resp.text}

    def _request(
        self,
        method: str,
        endpoint: str,
        params: Optional[dict] = None,
        data: Optional[dict] = None,
    ) -> dict:
        """Make a request; transport failures become {"status": 0, "error": ...}."""
        try:
            resp = requests.request(
                method,
                f"{self.base_url}{endpoint}",
                headers=self._headers(),
                params=params,
                json=data,
                timeout=self.timeout,
            )
            return {"status": resp.status_code, "data": self._parse_json(resp)}
        except requests.exceptions.ConnectionError:
            return {"status": 0, "error": "Cannot connect to backend"}
        except requests.exceptions.RequestException as e:
            return {"status": 0, "error": str(e)}

    def _get(self, endpoint: str, params: Optional[dict] = None) -> dict:
        return self._request("GET", endpoint, params=params)

    def _post(self, endpoint: str, data: dict) -> dict:
        return self._request("POST", endpoint, data=data)

    def _put(self, endpoint: str, data: dict) -> dict:
        return self._request("PUT", endpoint, data=data)

    def _delete(self, endpoint: str) -> dict:
        return self._request("DELETE", endpoint)

    @staticmethod
    def _documents_path(database: str, collection: str) -> str:
        return f"/api/databases/{_segment(database)}/collections/{_segment(collection)}/documents"

    # Connection endpoints
    def connect(self, connection_string: str, db_name: Optional[str] = None) -> dict:
        """Connect the backend to a MongoDB deployment."""
        return self._post("/api/connect", {
            "connectionString": connection_string,
            "dbName": db_name or None,
        })

    def connection_status(self) -> dict:
        """Whether the backend currently holds a connection."""
        return self._get("/api/connection")

    # Health endpoint
    def health(self) -> dict:
        """Check API health."""
        return self._get("/health")

    # Browsing endpoints
    def list_databases(self) -> dict:
        """List databases with size on disk."""
        return self._get("/api/databases")

    def list_collections(self, database: str) -> dict:
        """List collections of a database."""
        return self._get(f"/api/databases/{_segment(database)}/collections")

    def list_documents(self, database: str, collection: str, page: int = 1, limit: int = 20) -> dict:
        """Get one page of documents."""
        return self._get(
            self._documents_path(database, collection),
            {"page": page, "limit": limit},
        )

    # Document endpoints
    def insert_document(self, database: str, collection: str, document: dict) -> dict:
        """Insert a document."""
        return self._post(self._documents_path(database, collection), {"document": document})

    def update_document(self, database: str, collection: str, doc_id: str, document: dict) -> dict:
        """Replace a document by _id."""
        return self._put(
            f"{self._documents_path(database, collection)}/{_segment(doc_id)}",
            {"document": document},
        )

    def delete_document(self, database: str, collection: str, doc_id: str) -> dict:
        """Delete a document by _id."""
        return self._delete(f"{self._documents_path(database, collection)}/{_segment(doc_id)}")

    # Query endpoint
    def execute_query(self, database: str, collection: str, query: str, operation: str = "find") -> dict:
        """Run find, findOne or count with a JSON filter."""
        return self._post("/api/query", {
            "database": database,
            "collection": collection,
            "query": query,
            "operation": operation,
        })


def is_success(resp: dict) -> bool:
    """True for a 2xx response whose body carries no error."""
    if not 200 <= resp.get("status", 0) < 300:
        return False
    data = resp.get("data")
    if isinstance(data, dict) and (data.get("error") or data.get("success") is False):
        return False
    return True


def error_message(resp: dict, default: str = "Request failed") -> str:
    """Human readable error of a failed response."""
    if resp.get("error"):
        return resp["error"]
    data = resp.get("data")
    if isinstance(data, dict):
        return str(data.get("error") or data.get("detail") or data.get("raw") or default)
    return default
