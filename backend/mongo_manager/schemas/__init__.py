"""
Request and response schemas for API endpoints.
"""
from mongo_manager.schemas.connection import (
    ConnectRequest,
    ConnectResponse,
    ConnectionStatus,
    DatabaseInfo,
)
from mongo_manager.schemas.documents import (
    CollectionInfo,
    DocumentPage,
    DocumentBody,
    InsertResult,
    ReplaceResult,
    DeleteResult,
)
from mongo_manager.schemas.query import QueryOperation, QueryRequest, QueryResponse

__all__ = [
    # Connection
    "ConnectRequest",
    "ConnectResponse",
    "ConnectionStatus",
    "DatabaseInfo",
    # Documents
    "CollectionInfo",
    "DocumentPage",
    "DocumentBody",
    "InsertResult",
    "ReplaceResult",
    "DeleteResult",
    # Query
    "QueryOperation",
    "QueryRequest",
    "QueryResponse",
]
