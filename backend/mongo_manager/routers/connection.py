"""
Connection router: open a connection and report its state.
"""
from fastapi import APIRouter, Depends

from mongo_manager.core.exceptions import DriverError, MongoConnectionError
from mongo_manager.database.connections import ConnectionManager, get_connection_manager
from mongo_manager.schemas.connection import (
    ConnectRequest,
    ConnectResponse,
    ConnectionStatus,
)

router = APIRouter(prefix="/api", tags=["Connection"])


@router.post(
    "/connect",
    response_model=ConnectResponse,
    summary="Connect to MongoDB",
)
async def connect(
    body: ConnectRequest,
    connection: ConnectionManager = Depends(get_connection_manager),
):
    """
    Connect to a MongoDB deployment, replacing the current connection.

    - **connectionString**: MongoDB URI
    - **dbName**: Optional default database

    Returns the list of databases. On failure the previous connection stays
    closed and the response is `{"success": false, "error": ...}`.
    """
    await connection.connect(body.connection_string, body.db_name)
    try:
        databases = await connection.list_databases()
    except DriverError as e:
        await connection.close()
        raise MongoConnectionError(e.message) from e
    return ConnectResponse(databases=databases)


@router.get(
    "/connection",
    response_model=ConnectionStatus,
    summary="Get connection status",
)
async def connection_status(
    connection: ConnectionManager = Depends(get_connection_manager),
):
    """Whether a connection is open, and its default database."""
    return ConnectionStatus(
        connected=connection.is_connected,
        database=connection.default_db_name,
    )
