"""
Health Wallet FastAPI Backend Application

Application factory for the personal health-record API: accounts, report
uploads, vitals, trends and report sharing.

Run with:
    uvicorn healthwallet.main:create_app --factory
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from sqlalchemy.exc import SQLAlchemyError

from healthwallet.api import router
from healthwallet.core.config import Settings, get_settings
from healthwallet.core.database import Database
from healthwallet.schemas.common import HealthCheck
from healthwallet.utils.file_utils import UPLOADS_URL_PREFIX, ensure_upload_dir

logger = logging.getLogger(__name__)

_LOCATION_PREFIXES = ("body", "query", "path", "form", "header")


def _validation_message(exc: RequestValidationError) -> str:
    """Flatten pydantic errors into 'field: message; ...'."""
    messages = []
    for error in exc.errors():
        field = ".".join(
            str(part) for part in error.get("loc", ()) if part not in _LOCATION_PREFIXES
        )
        msg = error.get("msg", "Invalid value")
        if msg.startswith("Value error, "):
            msg = msg[len("Value error, "):]
        messages.append(f"{field}: {msg}" if field else msg)
    return "; ".join(messages) or "Invalid request"


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": _validation_message(exc)},
    )


async def database_exception_handler(request: Request, exc: SQLAlchemyError):
    logger.exception("Database error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Database error"},
    )


def _serve_frontend(app: FastAPI, build_dir: str) -> bool:
    """
    Serve a built single-page app: real files directly, every other
    non-API path falls back to index.html.
    """
    root = Path(build_dir).resolve()
    index = root / "index.html"
    if not index.is_file():
        logger.warning("Frontend build not found at %s; serving API only", root)
        return False

    @app.get("/{full_path:path}", include_in_schema=False)
    async def frontend(full_path: str):
        if full_path == "api" or full_path.startswith(("api/", "uploads/")):
            raise HTTPException(status_code=404, detail="Not found")
        if full_path:
            candidate = (root / full_path).resolve()
            if candidate.is_file() and candidate.is_relative_to(root):
                return FileResponse(candidate)
        return FileResponse(index)

    logger.info("Serving frontend from %s", root)
    return True


def create_app(
    settings: Optional[Settings] = None, database: Optional[Database] = None
) -> FastAPI:
    """
    Build the application.

    Args:
        settings: Defaults to the cached environment settings
        database: Defaults to a handle on ``settings.database_url``

    Both are kept on ``app.state`` for the request dependencies.
    """
    settings = settings or get_settings()
    database = database or Database(settings.database_url, echo=settings.debug)

    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    app = FastAPI(
        title=settings.app_name,
        description="Personal health wallet: medical reports, vitals, trends and sharing",
        version=settings.app_version,
        debug=settings.debug,
    )
    app.state.settings = settings
    app.state.database = database

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(SQLAlchemyError, database_exception_handler)

    # Include API routes
    app.include_router(router, prefix="/api")

    @app.get("/api/health", response_model=HealthCheck, tags=["health"])
    async def health_check():
        """Health check endpoint."""
        return HealthCheck(version=settings.app_version, timestamp=datetime.now())

    # Uploaded reports, served read-only
    ensure_upload_dir(settings.upload_dir)
    app.mount(
        UPLOADS_URL_PREFIX,
        StaticFiles(directory=settings.upload_dir),
        name="uploads",
    )

    frontend_served = bool(settings.frontend_build_dir) and _serve_frontend(
        app, settings.frontend_build_dir
    )
    if not frontend_served:

        @app.get("/", tags=["root"])
        async def root():
            """Root endpoint with API information."""
            return {
                "message": settings.app_name,
                "version": settings.app_version,
                "status": "running",
                "docs": "/docs",
                "api": "/api",
            }

    @app.on_event("startup")
    async def startup_event():
        """Create tables and announce the server."""
        database.create_all()
        logger.info("=" * 60)
        logger.info("%s v%s", settings.app_name, settings.app_version)
        logger.info("Server running on http://%s:%s", settings.host, settings.port)
        logger.info("API Documentation: http://%s:%s/docs", settings.host, settings.port)
        logger.info("Uploads directory: %s", Path(settings.upload_dir).resolve())
        logger.info("=" * 60)

    @app.on_event("shutdown")
    async def shutdown_event():
        logger.info("Shutting down %s", settings.app_name)
        database.close()

    return app


if __name__ == "__main__":
    import uvicorn

    _settings = get_settings()
    uvicorn.run(
        "healthwallet.main:create_app",
        factory=True,
        host=_settings.host,
        port=_settings.port,
        reload=_settings.debug,
    )
