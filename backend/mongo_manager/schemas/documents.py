"""
Collection and document request/response schemas.
"""
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class CollectionInfo(BaseModel):
    """Collection descriptor."""
    name: str
    type: str = Field("collection", description="collection, view or timeseries")


class DocumentPage(BaseModel):
    """One page of a collection's documents."""
    model_config = ConfigDict(populate_by_name=True)

    documents: list[dict[str, Any]] = Field(default=[], description="Documents on this page")
    total_count: int = Field(..., alias="totalCount", description="Documents in the collection")
    page: int = Field(..., description="Current page")
    total_pages: int = Field(..., alias="totalPages", description="Total pages")


class DocumentBody(BaseModel):
    """Insert/replace request body."""
    document: dict[str, Any] = Field(..., description="Document as JSON object")


# ==================== Driver write results ====================

class InsertResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    acknowledged: bool
    inserted_id: Any = Field(None, alias="insertedId")


class ReplaceResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    acknowledged: bool
    matched_count: int = Field(0, alias="matchedCount")
    modified_count: int = Field(0, alias="modifiedCount")
    upserted_id: Optional[Any] = Field(None, alias="upsertedId")


class DeleteResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    acknowledged: bool
    deleted_count: int = Field(0, alias="deletedCount")
