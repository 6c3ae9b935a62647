"""FastAPI application factory."""

import logging
import os
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from nomina_service import __version__
from nomina_service.api.routes import employees_router, health_router, nominas_router, root_router
from nomina_service.config import Settings, get_settings
from nomina_service.database import dispose_db, init_db
from nomina_service.errors import NominaError
from nomina_service.services.schema_provisioner import SchemaProvisioner

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler."""
    # Startup
    engine, _ = init_db()
    await SchemaProvisioner(engine).ensure_schema()
    yield
    # Shutdown
    await dispose_db()


def add_exception_handlers(app: FastAPI) -> None:
    """Render errors as ``{error[, details]}`` JSON bodies."""

    @app.exception_handler(NominaError)
    async def nomina_error_handler(request: Request, exc: NominaError) -> JSONResponse:
        log = logger.error if exc.status_code >= 500 else logger.warning
        log(
            "%s on %s %s: %s",
            exc.__class__.__name__,
            request.method,
            request.url.path,
            exc.message,
        )
        return JSONResponse(
            status_code=exc.status_code,
            content=jsonable_encoder(exc.to_dict()),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Malformed bodies are client errors (400), not 422."""
        logger.warning("Validation error on %s: %s", request.url.path, exc.errors())
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={
                "error": "Solicitud inválida",
                "details": jsonable_encoder(exc.errors()),
            },
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """Handle unexpected exceptions."""
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "An unexpected error occurred"},
        )


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = settings or get_settings()

    app = FastAPI(
        title="Nómina Service API",
        description="Employees and the payroll entries generated for them",
        version=__version__,
        lifespan=lifespan,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    add_exception_handlers(app)

    # Include routers
    app.include_router(root_router)
    app.include_router(health_router)
    app.include_router(employees_router, prefix="/api")
    app.include_router(nominas_router, prefix="/api")

    if settings.frontend_dir and os.path.isdir(settings.frontend_dir):
        app.mount("/app", StaticFiles(directory=settings.frontend_dir, html=True), name="frontend")

    return app


# Default app instance for uvicorn
app = create_app()
