"""
MongoDB Web Manager Backend - FastAPI Application

HTTP API behind the web console: connect to a MongoDB deployment, browse
databases and collections, page through documents, edit them and run
ad-hoc queries.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from mongo_manager import __version__
from mongo_manager.config import get_settings
from mongo_manager.core.exceptions import ManagerError, MongoConnectionError
from mongo_manager.core.logging_config import setup_logging
from mongo_manager.database.connections import close_connections, get_connection_manager
from mongo_manager.routers import connection, databases, documents, health, query

settings = get_settings()
setup_logging(settings.log_level)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Startup:
    - Connect to MONGO_URI when one is configured

    Shutdown:
    - Close the MongoDB connection
    """
    logger.info("Starting up MongoDB Web Manager...")

    if settings.mongo_uri:
        try:
            await get_connection_manager().connect(settings.mongo_uri, settings.mongo_db_name)
        except MongoConnectionError as e:
            logger.warning(f"Startup connection failed, waiting for /api/connect: {e.message}")

    yield

    logger.info("Shutting down MongoDB Web Manager...")
    await close_connections()


# Create FastAPI application
app = FastAPI(
    title="MongoDB Web Manager API",
    description="""
## MongoDB Web Manager API

Administrative API for a single MongoDB deployment.

### Features
- **Connection**: Connect with a MongoDB URI (one connection per server process)
- **Browsing**: List databases, collections and paginated documents
- **Editing**: Insert, replace and delete single documents
- **Queries**: Run `find`, `findOne` and `count` with a JSON filter

### Errors
Every failure is returned as `{"error": "message"}` with a 4xx/5xx status.
    """,
    version=__version__,
    lifespan=lifespan,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ==================== Error Handlers ====================


@app.exception_handler(ManagerError)
async def manager_error_handler(request: Request, exc: ManagerError):
    """Report ManagerError subclasses as {"error": message}."""
    content = {"error": exc.message}
    if isinstance(exc, MongoConnectionError):
        content = {"success": False, **content}
    return JSONResponse(status_code=exc.status_code, content=content)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Report malformed requests as {"error": message}."""
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        message = error.get("msg", "invalid value")
        messages.append(f"{location}: {message}" if location else message)
    content = {"error": "; ".join(messages) or "Invalid request"}
    if request.url.path == "/api/connect":
        content = {"success": False, **content}
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=content)


@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception):
    """Last resort: keep the JSON error contract for unexpected failures."""
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": str(exc) or exc.__class__.__name__},
    )


# Include routers
app.include_router(health.router)
app.include_router(connection.router)
app.include_router(databases.router)
app.include_router(documents.router)
app.include_router(query.router)


@app.get("/", tags=["Root"])
async def root():
    """Root endpoint with API information."""
    return {
        "name": "MongoDB Web Manager API",
        "version": __version__,
        "docs": "/docs",
        "health": "/health",
    }
