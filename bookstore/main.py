"""
FastAPI Application Entry Point

This module creates and configures the FastAPI application.

Key Concepts:
=============

1. Application Factory Pattern
   - create_app() function returns configured app
   - Easier to test (can create multiple instances)

2. Lifespan Events
   - startup / shutdown logging and engine disposal

3. Exception Handlers
   - Every error body is either {"detail": ...} or, for 400 responses,
     {"detail": ..., "errors": [{"field": ..., "message": ...}]}
   - Request parsing errors are answered with 400, like the service-level
     validation errors, instead of FastAPI's default 422
   - Internal errors never expose exception text (unless debug is on)
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from bookstore.config import get_settings
from bookstore.database import engine
from bookstore.dependencies import DbSession
from bookstore.routers import authors_router, books_router
from bookstore.routers.responses import BAD_REQUEST_MESSAGE, ValidationHTTPException
from bookstore.schemas import FieldError, ValidationErrorResponse
from bookstore.services import INTERNAL_ERROR_MESSAGE

# =============================================================================
# Logging Configuration
# =============================================================================
settings = get_settings()

logging.basicConfig(
    level=getattr(logging, settings.log_level),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Code before yield: Runs on startup
    Code after yield: Runs on shutdown
    """
    logger.info(f"Starting {settings.app_name}...")
    logger.info(f"Debug mode: {settings.debug}")
    logger.info(f"API version: {settings.api_version}")
    logger.info(f"Author reference check enabled: {settings.enforce_author_reference}")

    yield

    logger.info(f"Shutting down {settings.app_name}...")
    engine.dispose()


def _field_errors_from_request(exc: RequestValidationError) -> list[FieldError]:
    """
    Convert FastAPI's parsing errors into FieldError entries.

    The location tuple looks like ("body", "year") or ("path", "book_id");
    the leading source element is dropped.
    """
    errors = []
    for error in exc.errors():
        location = [str(part) for part in error.get("loc", ())[1:]]
        errors.append(
            FieldError(
                field=".".join(location) or "body",
                message=error.get("msg", "Invalid value"),
            )
        )
    return errors


def _bad_request(errors: list[FieldError]) -> JSONResponse:
    body = ValidationErrorResponse(detail=BAD_REQUEST_MESSAGE, errors=errors)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=body.model_dump(),
    )


# =============================================================================
# Application Factory
# =============================================================================
def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance
    """
    app = FastAPI(
        title=settings.app_name,
        description="""
## BookStore API

A RESTful API for a catalog of authors and their books.

### Features
- **Authors**: list, get, create, update and delete authors
- **Books**: list, get, create, update and delete books; every book
  references an existing author through `authorId`

### Errors
- `400` invalid request, with a list of field errors
- `404` record not found
- `500` unexpected server error
        """,
        version=settings.api_version,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # -------------------------------------------------------------------------
    # CORS Middleware
    # -------------------------------------------------------------------------
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # -------------------------------------------------------------------------
    # Exception Handlers
    # -------------------------------------------------------------------------
    @app.exception_handler(ValidationHTTPException)
    async def validation_http_exception_handler(
        request: Request,
        exc: ValidationHTTPException,
    ) -> JSONResponse:
        """Service-level validation failures."""
        return _bad_request(exc.errors)

    @app.exception_handler(RequestValidationError)
    async def request_validation_exception_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """Malformed JSON, wrong field types, non-integer path ids."""
        logger.warning(f"Rejected request to {request.url.path}: {exc.errors()}")
        return _bad_request(_field_errors_from_request(exc))

    @app.exception_handler(SQLAlchemyError)
    async def sqlalchemy_exception_handler(
        request: Request,
        exc: SQLAlchemyError,
    ) -> JSONResponse:
        """
        Handle SQLAlchemy database errors raised outside the services.

        Logs the actual error for debugging while hiding details from users.
        """
        logger.error(f"Database error: {exc}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": INTERNAL_ERROR_MESSAGE},
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """
        Catch-all exception handler.

        In production, hide internal errors from users.
        In debug mode, show more details.
        """
        logger.error(f"Unhandled error: {exc}", exc_info=True)

        if settings.debug:
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={"detail": str(exc)},
            )

        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": INTERNAL_ERROR_MESSAGE},
        )

    # -------------------------------------------------------------------------
    # Register Routers
    # -------------------------------------------------------------------------
    # prefix="/api/v1" creates versioned URLs: /api/v1/books, /api/v1/authors
    api_prefix = f"/api/{settings.api_version}"

    app.include_router(authors_router, prefix=api_prefix)
    app.include_router(books_router, prefix=api_prefix)

    # -------------------------------------------------------------------------
    # Health Check Endpoint
    # -------------------------------------------------------------------------
    @app.get(
        "/health",
        tags=["Health"],
        summary="Health check",
        description="Check if the API is running and the database is reachable.",
    )
    def health_check(db: DbSession) -> dict:
        """
        Health check endpoint.

        Used by load balancers, container probes and monitoring systems.
        """
        try:
            db.execute(text("SELECT 1"))
            database_status = "healthy"
        except SQLAlchemyError as exc:
            logger.warning(f"Health check database error: {exc}")
            database_status = "unavailable"

        return {
            "status": "healthy" if database_status == "healthy" else "degraded",
            "app": settings.app_name,
            "version": settings.api_version,
            "database": database_status,
        }

    @app.get(
        "/",
        tags=["Root"],
        summary="API root",
        description="Welcome message and API information.",
    )
    async def root() -> dict:
        """Root endpoint with API information."""
        return {
            "message": f"Welcome to {settings.app_name}",
            "version": settings.api_version,
            "docs": "/docs",
            "health": "/health",
        }

    return app


# =============================================================================
# Application Instance
# =============================================================================
# This is what uvicorn imports: uvicorn bookstore.main:app

app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "bookstore.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
