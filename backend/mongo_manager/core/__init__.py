"""
Core module - Error kinds, BSON/JSON conversion and logging setup.
"""
from mongo_manager.core.exceptions import (
    ManagerError,
    MongoConnectionError,
    NotConnectedError,
    InvalidFilterError,
    InvalidDocumentError,
    UnsupportedOperationError,
    DriverError,
)
from mongo_manager.core.encoding import (
    JSONValue,
    encode_value,
    to_bson,
    parse_filter,
    document_id_candidates,
)
from mongo_manager.core.logging_config import setup_logging

__all__ = [
    "ManagerError",
    "MongoConnectionError",
    "NotConnectedError",
    "InvalidFilterError",
    "InvalidDocumentError",
    "UnsupportedOperationError",
    "DriverError",
    "JSONValue",
    "encode_value",
    "to_bson",
    "parse_filter",
    "document_id_candidates",
    "setup_logging",
]
