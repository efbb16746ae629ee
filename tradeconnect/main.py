"""
FastAPI application for the TradeConnect marketplace
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api.router import api_router
from .application.use_cases.auth_use_cases import SeedAdminUseCase
from .core.config import settings
from .core.logging import configure_logging
from .db.database import create_tables
from .infrastructure.container import Container, build_container

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events"""
    container: Container = app.state.container
    config = container.config

    if container.engine is not None and (config.TESTING or config.DEBUG):
        # Migrations own the schema everywhere else
        create_tables(container.engine)

    if config.ADMIN_EMAIL and config.ADMIN_PASSWORD:
        await SeedAdminUseCase(container.unit_of_work_factory()).execute(
            config.ADMIN_EMAIL, config.ADMIN_PASSWORD
        )

    logger.info("Starting %s API (%s)", config.PROJECT_NAME, config.ENVIRONMENT)
    yield
    logger.info("Shutting down %s API", config.PROJECT_NAME)
    if container.engine is not None:
        container.engine.dispose()


def _validation_message(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        parts.append(f"{location}: {error.get('msg')}" if location else error.get("msg", ""))
    return "; ".join(parts) or "Invalid request"


def create_app(container: Container = None) -> FastAPI:
    container = container or build_container(settings)
    configure_logging(container.config.LOG_LEVEL)

    app = FastAPI(
        title=container.config.PROJECT_NAME,
        description=container.config.DESCRIPTION,
        version=container.config.VERSION,
        lifespan=lifespan,
    )
    app.state.container = container

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=container.config.ALLOWED_HOSTS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        if isinstance(exc.detail, dict):
            content = exc.detail
        else:
            content = {"message": exc.detail}
        return JSONResponse(status_code=exc.status_code, content=content, headers=exc.headers)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(status_code=400, content={"message": _validation_message(exc)})

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled exception in %s %s", request.method, request.url.path)
        return JSONResponse(status_code=500, content={"message": "Internal server error"})

    app.include_router(api_router, prefix=container.config.API_PREFIX)

    @app.get("/health")
    async def health_check():
        """Health check endpoint"""
        return {
            "status": "healthy",
            "storage": container.config.STORAGE_BACKEND,
            "version": container.config.VERSION,
        }

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "tradeconnect.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower(),
    )
