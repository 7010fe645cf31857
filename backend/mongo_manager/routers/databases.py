"""
Databases router for browsing databases and collections.
"""
from fastapi import APIRouter, Depends

from mongo_manager.dependencies import get_document_service
from mongo_manager.schemas.connection import DatabaseInfo
from mongo_manager.schemas.documents import CollectionInfo
from mongo_manager.services.document_service import DocumentService

router = APIRouter(prefix="/api/databases", tags=["Databases"])


@router.get(
    "",
    response_model=list[DatabaseInfo],
    summary="List databases",
)
async def list_databases(
    document_service: DocumentService = Depends(get_document_service),
):
    """List all databases with their size on disk."""
    return await document_service.list_databases()


@router.get(
    "/{db_name}/collections",
    response_model=list[CollectionInfo],
    summary="List collections",
)
async def list_collections(
    db_name: str,
    document_service: DocumentService = Depends(get_document_service),
):
    """
    List collections and views of a database.

    An unknown database returns an empty list.
    """
    return await document_service.list_collections(db_name)
