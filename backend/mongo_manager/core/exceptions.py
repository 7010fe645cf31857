"""
Error kinds surfaced by the API.

Every error carries a human readable message and the HTTP status it is
reported with. Handlers in ``mongo_manager.main`` turn them into
``{"error": message}`` payloads.
"""
from fastapi import status


class ManagerError(Exception):
    """Base class for all errors reported to API callers."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class MongoConnectionError(ManagerError):
    """Malformed connection string, unreachable host or failed authentication."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


class NotConnectedError(ManagerError):
    """An operation was attempted while no connection is open."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str = "Not connected to MongoDB"):
        super().__init__(message)


class InvalidFilterError(ManagerError):
    """Query filter text is not a JSON object."""

    status_code = status.HTTP_400_BAD_REQUEST


class InvalidDocumentError(ManagerError):
    """Document body holds a malformed Extended JSON wrapper such as a bad $oid."""

    status_code = status.HTTP_400_BAD_REQUEST


class UnsupportedOperationError(ManagerError):
    """Query operation is not one of find, findOne or count."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, operation: str):
        super().__init__(f"Operation {operation} not supported")
        self.operation = operation


class DriverError(ManagerError):
    """Any other failure raised by the database driver."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
