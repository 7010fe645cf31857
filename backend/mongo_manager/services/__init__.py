"""
Service layer for database operations.
"""
from mongo_manager.services.document_service import DocumentService

__all__ = [
    "DocumentService",
]
