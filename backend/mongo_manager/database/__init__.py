"""
Database module - the process-wide MongoDB connection.
"""
from mongo_manager.database.connections import (
    ConnectionManager,
    get_connection_manager,
    close_connections,
)

__all__ = [
    "ConnectionManager",
    "get_connection_manager",
    "close_connections",
]
