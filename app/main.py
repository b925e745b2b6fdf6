"""Todo Tags API - Main Application Module.

This module initializes the FastAPI application with proper configuration,
middleware, routing, and lifecycle management for the todo tracking system.
"""

import logging
import sys
import uuid
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from pathlib import Path

# Add the project root to Python path if running directly
if __name__ == "__main__":
    project_root = Path(__file__).parent.parent
    sys.path.insert(0, str(project_root))

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from sqlalchemy import text
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.config import EnvironmentEnum, get_config_summary, settings
from app.core.logging import setup_logging
from app.database import AsyncSessionLocal, engine
from app.domains.file.storage import get_file_storage
from models import Base

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"


@asynccontextmanager
async def lifespan(_app: FastAPI):
    """Manage application lifecycle events."""
    logger.info("Starting %s %s (%s)", settings.app_name, settings.version, settings.environment.value)

    get_file_storage().ensure_upload_dir()

    # Development and testing create missing tables; other environments run
    # `alembic upgrade head` instead
    if settings.environment in (EnvironmentEnum.development, EnvironmentEnum.testing):
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database tables created/verified")

    yield

    logger.info("Shutting down %s", settings.app_name)
    await engine.dispose()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    setup_logging(settings.log_level, settings.log_format)

    app = FastAPI(
        title=settings.app_name,
        description="Task tracking with tags and file attachments",
        version=settings.version,
        lifespan=lifespan,
        docs_url="/docs" if settings.environment == "development" else None,
        redoc_url="/redoc" if settings.environment == "development" else None,
    )

    # Add middleware
    setup_middleware(app)

    # Add exception handlers
    setup_exception_handlers(app)

    # Include routers
    setup_routers(app)

    return app


def setup_middleware(app: FastAPI):
    """Configure application middleware."""
    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Request ID middleware
    @app.middleware("http")
    async def add_request_id(request: Request, call_next):
        request_id = str(uuid.uuid4())
        request.state.request_id = request_id
        response = await call_next(request)
        response.headers["X-Request-ID"] = request_id
        return response


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def _describe_validation_error(error: dict) -> str:
    loc = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")]
    msg = str(error.get("msg", "Invalid value"))
    return f"{'.'.join(loc)}: {msg}" if loc else msg


def setup_exception_handlers(app: FastAPI):
    """Configure global exception handlers.

    Every error body has the shape ``{"error": "<message>"}``.
    """

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        # Handle custom exceptions that have structured detail
        if isinstance(exc.detail, dict) and "message" in exc.detail:
            message = exc.detail["message"]
        else:
            message = str(exc.detail) if exc.detail else "An error occurred"

        if exc.status_code >= 500:
            logger.error(
                "Request %s %s failed: %s (request_id=%s)",
                request.method,
                request.url.path,
                message,
                getattr(request.state, "request_id", None),
            )

        return _error_response(exc.status_code, message)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        message = _describe_validation_error(errors[0]) if errors else "Validation error"
        logger.info("Rejected %s %s: %s", request.method, request.url.path, message)
        return _error_response(400, message)

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception(
            "Unhandled error on %s %s (request_id=%s)",
            request.method,
            request.url.path,
            getattr(request.state, "request_id", None),
        )
        return _error_response(500, INTERNAL_ERROR_MESSAGE)


def setup_routers(app: FastAPI):
    """Configure application routers."""
    # Import routers
    from app.domains.file.controller import router as file_router
    from app.domains.tag.controller import router as tag_router
    from app.domains.todo.controller import router as todo_router
    from app.domains.ui.controller import router as ui_router

    # Health check endpoint
    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        db_status = "healthy"
        try:
            async with AsyncSessionLocal() as db:
                await db.execute(text("SELECT 1"))
        except Exception:
            logger.exception("Database health check failed")
            db_status = "unhealthy"

        body = {
            "status": "healthy" if db_status == "healthy" else "unhealthy",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "services": {"database": db_status},
            "config": get_config_summary(),
        }
        return JSONResponse(status_code=200 if db_status == "healthy" else 503, content=body)

    # Include domain routers
    app.include_router(todo_router)
    app.include_router(file_router)
    app.include_router(tag_router)
    app.include_router(ui_router)

    # Uploaded attachments are served as plain static files
    app.mount(
        settings.upload_url,
        StaticFiles(directory=settings.upload_path, check_dir=False),
        name="uploads",
    )


# Create the application instance
app = create_app()


def main():
    """Entry point for running the application directly."""
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.environment == "development",
        log_level=settings.log_level.value.lower(),
    )


if __name__ == "__main__":
    main()
