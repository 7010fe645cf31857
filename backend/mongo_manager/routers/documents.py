"""
Documents router for paginated browsing and single-document CRUD.
"""
from fastapi import APIRouter, Depends, Query

from mongo_manager.config import get_settings
from mongo_manager.dependencies import get_document_service
from mongo_manager.schemas.documents import (
    DeleteResult,
    DocumentBody,
    DocumentPage,
    InsertResult,
    ReplaceResult,
)
from mongo_manager.services.document_service import DocumentService

router = APIRouter(
    prefix="/api/databases/{db_name}/collections/{collection_name}/documents",
    tags=["Documents"],
)


@router.get(
    "",
    response_model=DocumentPage,
    summary="List documents",
)
async def list_documents(
    db_name: str,
    collection_name: str,
    document_service: DocumentService = Depends(get_document_service),
    page: int = Query(1, ge=1, description="Page number"),
    limit: int = Query(
        get_settings().default_page_size, ge=1, description="Documents per page"
    ),
):
    """
    Get one page of documents in natural order.

    Pages past the end return an empty `documents` list.
    """
    return await document_service.list_documents(db_name, collection_name, page, limit)


@router.post(
    "",
    response_model=InsertResult,
    summary="Insert document",
)
async def insert_document(
    db_name: str,
    collection_name: str,
    body: DocumentBody,
    document_service: DocumentService = Depends(get_document_service),
):
    """Insert a document. MongoDB assigns `_id` when the document has none."""
    return await document_service.insert_document(db_name, collection_name, body.document)


@router.put(
    "/{doc_id}",
    response_model=ReplaceResult,
    summary="Replace document",
)
async def replace_document(
    db_name: str,
    collection_name: str,
    doc_id: str,
    body: DocumentBody,
    document_service: DocumentService = Depends(get_document_service),
):
    """
    Replace a document by `_id`.

    `matchedCount` is 0 when no document has this identifier.
    """
    return await document_service.replace_document(
        db_name, collection_name, doc_id, body.document
    )


@router.delete(
    "/{doc_id}",
    response_model=DeleteResult,
    summary="Delete document",
)
async def delete_document(
    db_name: str,
    collection_name: str,
    doc_id: str,
    document_service: DocumentService = Depends(get_document_service),
):
    """Delete a document by `_id`."""
    return await document_service.delete_document(db_name, collection_name, doc_id)
