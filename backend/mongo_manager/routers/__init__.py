"""
API Routers module.
"""
from mongo_manager.routers import connection, databases, documents, health, query

__all__ = ["connection", "databases", "documents", "health", "query"]
