"""
Dependencies for dependency injection in routes.
"""
from fastapi import Depends

from mongo_manager.config import get_settings
from mongo_manager.database.connections import ConnectionManager, get_connection_manager
from mongo_manager.services.document_service import DocumentService


def get_document_service(
    connection: ConnectionManager = Depends(get_connection_manager),
) -> DocumentService:
    """Dependency to get DocumentService bound to the current connection."""
    settings = get_settings()
    return DocumentService(connection, query_result_limit=settings.query_result_limit)


__all__ = [
    "get_connection_manager",
    "get_document_service",
]
