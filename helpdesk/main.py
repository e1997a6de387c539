from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from helpdesk.api.router import api_router
from helpdesk.core.config import Settings, get_settings
from helpdesk.core.logging_config import setup_logging
from helpdesk.db import build_engine, init_db
from helpdesk.services.seed import seed_team_members
from helpdesk.services.storage import AttachmentStorage

logger = logging.getLogger(__name__)


def _format_validation_errors(exc: RequestValidationError) -> str:
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        message = error.get("msg", "Invalid value")
        messages.append(f"{location}: {message}" if location else message)
    return "; ".join(messages) or "Invalid request"


def create_application(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    setup_logging(settings.LOG_LEVEL)

    app = FastAPI(title=settings.PROJECT_NAME, version="0.1.0")

    # One engine and one upload store per application instance
    app.state.settings = settings
    app.state.engine = build_engine(settings)
    app.state.storage = AttachmentStorage.from_settings(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.BACKEND_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        response = await call_next(request)
        logger.info(f"{request.method} {request.url.path} -> {response.status_code}")
        return response

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"detail": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": _format_validation_errors(exc)},
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled exception on {request.method} {request.url.path}: {exc}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": f"Internal server error: {str(exc)}"},
        )

    app.include_router(api_router, prefix=settings.API_PREFIX)

    # Serve uploaded files
    app.mount(
        "/uploads",
        StaticFiles(directory=str(app.state.storage.upload_dir), check_dir=False),
        name="uploads",
    )

    @app.on_event("startup")
    def _startup() -> None:
        app.state.storage.ensure_dir()
        init_db(app.state.engine)
        if settings.SEED_DEFAULT_TEAM:
            seed_team_members(app.state.engine)

    @app.on_event("shutdown")
    def _shutdown() -> None:
        app.state.engine.dispose()

    return app


app = create_application()
