"""
Health check router for liveness and readiness probes.
"""
from fastapi import APIRouter, Depends, status

from mongo_manager.database.connections import ConnectionManager, get_connection_manager

router = APIRouter(tags=["Health"])


@router.get(
    "/health",
    status_code=status.HTTP_200_OK,
    summary="Basic health check",
)
async def health_check():
    """
    Basic health check endpoint.
    Returns 200 if the API is running.
    """
    return {"status": "healthy"}


@router.get(
    "/health/ready",
    status_code=status.HTTP_200_OK,
    summary="Readiness check with dependencies",
)
async def readiness_check(
    connection: ConnectionManager = Depends(get_connection_manager),
):
    """
    Readiness check that verifies the MongoDB connection.

    The API is usable without a connection, so a disconnected server still
    reports healthy.
    """
    checks = {
        "api": "healthy",
        "mongodb": "disconnected",
    }

    if connection.is_connected:
        try:
            await connection.ping()
            checks["mongodb"] = "healthy"
        except Exception as e:
            checks["mongodb"] = f"unhealthy: {str(e)}"

    degraded = checks["mongodb"].startswith("unhealthy")

    return {
        "status": "degraded" if degraded else "healthy",
        "checks": checks,
    }
