# This project was developed with assistance from AI tools.
"""FastAPI application entry point."""

import logging
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from . import __version__
from .core.config import settings
from .core.logging import configure_logging, request_id_var
from .routes import health, repositories
from .schemas.error import ErrorResponse
from .services.errors import RepositoryStoreError, classify

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI):
    """Application startup/shutdown lifecycle."""
    configure_logging(settings.LOG_LEVEL)
    logger.info("Serving %s under %s", settings.APP_NAME, settings.API_PREFIX)
    yield


app = FastAPI(
    title="Content Sources API",
    description="Manage repository configurations for an organization",
    version=__version__,
    lifespan=lifespan,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_HOSTS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "x-rh-identity", "x-request-id"],
)


def _request_id(request: Request) -> str:
    """Return the id bound to this request, resolving it once if unbound."""
    request_id = getattr(request.state, "request_id", None)
    if request_id is None:
        request_id = request.headers.get("x-request-id") or str(uuid.uuid4())
        request.state.request_id = request_id
    return request_id


@app.middleware("http")
async def bind_request_id(request: Request, call_next):
    """Expose the caller's x-request-id (or a fresh one) to log records.

    The id also lives on ``request.state`` so handlers that run after the
    context var is reset still report the same id.
    """
    token = request_id_var.set(_request_id(request))
    try:
        return await call_next(request)
    finally:
        request_id_var.reset(token)


def _problem(request: Request, status_code: int, detail: str, request_id: str | None = None) -> JSONResponse:
    if request_id is None:
        request_id = _request_id(request)
    body = ErrorResponse.for_status(status_code, detail, request_id, request.url.path)
    return JSONResponse(status_code=status_code, content=body.model_dump())


@app.exception_handler(RepositoryStoreError)
async def repository_store_exception_handler(request: Request, exc: RepositoryStoreError):
    """Translate store failures into their HTTP status via ``classify``."""
    status_code, body = classify(exc, _request_id(request))
    body.instance = request.url.path
    return JSONResponse(status_code=status_code, content=body.model_dump())


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Convert HTTPException to RFC 7807 Problem Details."""
    return _problem(request, exc.status_code, str(exc.detail))


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Convert Pydantic validation errors to RFC 7807 Problem Details."""
    return _problem(request, 422, str(exc.errors()))


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    """Catch-all for unhandled exceptions -- log and return 500."""
    request_id = _request_id(request)
    logger.exception("Unhandled exception (request_id=%s)", request_id)
    return _problem(request, 500, "An unexpected error occurred.", request_id)


# Include routers
app.include_router(health.router, prefix="/health", tags=["health"])
app.include_router(
    repositories.router,
    prefix=f"{settings.API_PREFIX}/repositories",
    tags=["repositories"],
)
