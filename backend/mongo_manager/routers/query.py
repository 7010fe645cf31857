"""
Query router for the ad-hoc query console.
"""
from fastapi import APIRouter, Depends

from mongo_manager.dependencies import get_document_service
from mongo_manager.schemas.query import QueryRequest, QueryResponse
from mongo_manager.services.document_service import DocumentService

router = APIRouter(prefix="/api", tags=["Query"])


@router.post(
    "/query",
    response_model=QueryResponse,
    summary="Execute query",
)
async def execute_query(
    body: QueryRequest,
    document_service: DocumentService = Depends(get_document_service),
):
    """
    Execute a query against a collection.

    - **query**: Filter as JSON text (blank means `{}`)
    - **operation**: `find` (at most 100 documents), `findOne` or `count`
    """
    result = await document_service.execute_query(
        body.database,
        body.collection,
        body.query,
        body.operation,
    )
    return QueryResponse(result=result)
