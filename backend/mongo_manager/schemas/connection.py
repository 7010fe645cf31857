"""
Connection request/response schemas.
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ConnectRequest(BaseModel):
    """Connect request sent by the console."""
    model_config = ConfigDict(populate_by_name=True)

    connection_string: str = Field(
        ...,
        alias="connectionString",
        min_length=1,
        description="MongoDB connection URI",
    )
    db_name: Optional[str] = Field(None, alias="dbName", description="Optional default database")


class DatabaseInfo(BaseModel):
    """Database descriptor."""
    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., description="Database name")
    size_on_disk: int | float = Field(0, alias="sizeOnDisk", description="Size on disk in bytes")


class ConnectResponse(BaseModel):
    """Successful connect response."""
    success: bool = True
    message: str = "Connected successfully"
    databases: list[DatabaseInfo] = []


class ConnectionStatus(BaseModel):
    """Current connection state of the server."""
    connected: bool
    database: Optional[str] = Field(None, description="Default database chosen at connect time")
