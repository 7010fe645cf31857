"""
Ad-hoc query schemas.
"""
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field


class QueryOperation(str, Enum):
    """Operations accepted by the query console."""
    FIND = "find"
    FIND_ONE = "findOne"
    COUNT = "count"


class QueryRequest(BaseModel):
    """Query console request."""
    database: str = Field(..., min_length=1, description="Database name")
    collection: str = Field(..., min_length=1, description="Collection name")
    query: Optional[str] = Field("", description="Filter as JSON text, blank means {}")
    # Kept as plain text so unknown operations reach the service and are
    # reported as unsupported rather than as a validation failure.
    operation: str = Field(QueryOperation.FIND.value, description="find, findOne or count")


class QueryResponse(BaseModel):
    """Query console response."""
    success: bool = True
    result: Any = None
