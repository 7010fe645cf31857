"""
Connection management for the single MongoDB client of the process.

The API talks to at most one MongoDB deployment at a time. The
ConnectionManager owns that client: a connect request closes the current
client before opening the next one, and a failed connect leaves the manager
disconnected instead of holding a broken client.
"""
import asyncio
import logging
from typing import Any, Optional

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo.errors import PyMongoError

from mongo_manager.config import get_settings
from mongo_manager.core.exceptions import (
    DriverError,
    MongoConnectionError,
    NotConnectedError,
)

logger = logging.getLogger(__name__)


class ConnectionManager:
    """Holds the live MongoDB client and replaces it on reconnect."""

    def __init__(self, server_selection_timeout_ms: int = 5000):
        self.server_selection_timeout_ms = server_selection_timeout_ms
        self._client: Optional[AsyncIOMotorClient] = None
        self._default_db_name: Optional[str] = None
        self._lock = asyncio.Lock()

    @property
    def is_connected(self) -> bool:
        return self._client is not None

    @property
    def default_db_name(self) -> Optional[str]:
        return self._default_db_name

    @property
    def client(self) -> AsyncIOMotorClient:
        """The live client. Raises NotConnectedError when there is none."""
        if self._client is None:
            raise NotConnectedError()
        return self._client

    async def connect(self, connection_string: str, db_name: Optional[str] = None) -> None:
        """
        Replace the current client with a new one.

        Args:
            connection_string: MongoDB URI
            db_name: Optional default database

        Raises:
            MongoConnectionError: The URI is malformed, the host is unreachable
                or authentication failed. The driver message is kept verbatim.
        """
        async with self._lock:
            self._close_client()

            try:
                client = AsyncIOMotorClient(
                    connection_string,
                    serverSelectionTimeoutMS=self.server_selection_timeout_ms,
                )
            except (PyMongoError, ValueError, TypeError) as e:
                logger.error(f"Invalid connection string: {e}")
                raise MongoConnectionError(str(e)) from e

            try:
                await client.admin.command("ping")
            except PyMongoError as e:
                client.close()
                logger.error(f"Connection failed: {e}")
                raise MongoConnectionError(str(e)) from e

            self._client = client
            self._default_db_name = db_name or None
            logger.info(
                "Connected to MongoDB"
                + (f" (default database: {db_name})" if db_name else "")
            )

    async def close(self) -> None:
        """Close the current client, if any."""
        async with self._lock:
            self._close_client()

    def _close_client(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None
            self._default_db_name = None
            logger.info("Disconnected from MongoDB")

    def get_database(self, db_name: str) -> AsyncIOMotorDatabase:
        """Get a database handle on the live client."""
        return self.client[db_name]

    async def ping(self) -> None:
        """Check the live client still answers."""
        try:
            await self.client.admin.command("ping")
        except PyMongoError as e:
            raise DriverError(str(e)) from e

    async def list_databases(self) -> list[dict[str, Any]]:
        """
        List the databases of the deployment.

        Returns:
            List of {"name", "sizeOnDisk"} dicts
        """
        try:
            result = await self.client.admin.command("listDatabases")
        except PyMongoError as e:
            logger.error(f"listDatabases failed: {e}")
            raise DriverError(str(e)) from e

        return [
            {"name": db["name"], "sizeOnDisk": db.get("sizeOnDisk", 0)}
            for db in result.get("databases", [])
        ]


# Process-wide manager instance
_connection_manager: Optional[ConnectionManager] = None


def get_connection_manager() -> ConnectionManager:
    """Get or create the process-wide ConnectionManager (FastAPI dependency)."""
    global _connection_manager
    if _connection_manager is None:
        settings = get_settings()
        _connection_manager = ConnectionManager(
            server_selection_timeout_ms=settings.server_selection_timeout_ms,
        )
    return _connection_manager


async def close_connections():
    """Close the MongoDB connection, if one is open."""
    if _connection_manager is not None:
        await _connection_manager.close()
