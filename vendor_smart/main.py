"""Vendor Smart API — FastAPI application factory."""


import logging
import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from vendor_smart.core.config import Settings, settings as default_settings
from vendor_smart.core.exceptions import register_exception_handlers
from vendor_smart.middleware.audit import AuditMiddleware
from vendor_smart.repositories.catalog import ReferenceCatalog
from vendor_smart.repositories.registry import Registry
from vendor_smart.schemas.common import HealthResponse

# v1 routers
from vendor_smart.routers.v1.vendor_smart import router as vendor_smart_v1_router

logger = logging.getLogger(__name__)


def _configure_logging(settings: Settings) -> None:
    """Set up structured logging for the application."""
    level = logging.DEBUG if settings.debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )
    # Quiet noisy libraries
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or default_settings
    _configure_logging(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Catalog load failures propagate and abort startup
        catalog = ReferenceCatalog.from_files(settings.locations_file, settings.services_file)
        app.state.registry = Registry(catalog, job_id_strategy=settings.job_id_strategy)
        logger.info("Registry ready (job id strategy: %s)", settings.job_id_strategy)
        try:
            yield
        finally:
            del app.state.registry

    app = FastAPI(
        title=settings.app_name,
        version="1.0.0",
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        lifespan=lifespan,
    )
    app.state.settings = settings

    # --- CORS ---
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.frontend_url],
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )

    # --- Audit middleware ---
    app.add_middleware(AuditMiddleware)

    # --- Global exception handlers ---
    register_exception_handlers(app)

    # --- v1 API routes (/api/v1/*) ---
    app.include_router(vendor_smart_v1_router, prefix="/api/v1")

    # --- Health check ---
    @app.get("/health", response_model=HealthResponse, tags=["Health"])
    async def health():
        catalog = app.state.registry.catalog
        return HealthResponse(
            app=settings.app_name,
            env=settings.app_env,
            locations=len(catalog.locations()),
            services=len(catalog.services()),
        )

    return app


app = create_app()
