"""FastAPI application factory for Infinity Market."""

from __future__ import annotations

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import Depends, FastAPI

from infinity_market import __version__
from infinity_market.api.deps import (
    get_generation_service,
    init_generation_service,
    reset_generation_service,
)
from infinity_market.api.middleware import (
    RequestBodyLimitMiddleware,
    RequestTimingMiddleware,
    SecurityHeadersMiddleware,
)
from infinity_market.api.routers import catalog, generate, valuation, websites
from infinity_market.api.schemas import HealthResponse
from infinity_market.service.generation import GenerationService, build_generation_service
from infinity_market.settings import Settings

WEBSITES_PREFIX = "/websites"
VALUATION_PREFIX = "/valuation"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Create the GenerationService on startup; close its backend on shutdown."""
    settings: Settings = app.state.settings
    service = build_generation_service(settings)
    init_generation_service(service)
    try:
        yield
    finally:
        if service.synthesizer.backend is not None:
            await service.synthesizer.backend.aclose()
        reset_generation_service()


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    if settings is None:
        settings = Settings()

    app = FastAPI(
        title="Infinity Market",
        description="Values tokenized websites and generates their content and tools.",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings

    # Middleware
    app.add_middleware(RequestTimingMiddleware)
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(
        RequestBodyLimitMiddleware,
        website_paths=(VALUATION_PREFIX, WEBSITES_PREFIX + websites.PAGES_PATH),
    )

    app.include_router(generate.router, prefix="/generate", tags=["generate"])
    app.include_router(websites.router, prefix=WEBSITES_PREFIX, tags=["websites"])
    app.include_router(valuation.router, prefix=VALUATION_PREFIX, tags=["valuation"])
    app.include_router(catalog.worlds_router, prefix="/worlds", tags=["catalog"])
    app.include_router(catalog.tools_router, prefix="/tools", tags=["catalog"])

    @app.get("/health", response_model=HealthResponse, tags=["health"])
    async def health(
        service: GenerationService = Depends(get_generation_service),  # noqa: B008
    ) -> HealthResponse:
        backend = service.synthesizer.backend
        return HealthResponse(
            status="ok",
            version=__version__,
            generative_backend=backend.name if backend is not None else None,
        )

    return app


def main() -> None:
    """Run the REST API server using settings from environment / .env file."""
    settings = Settings()

    logging.basicConfig(level=settings.log_level.upper())
    logger = logging.getLogger("infinity_market.api")
    logger.info(
        "Infinity Market API Server v%s starting (host=%s, port=%d)",
        __version__, settings.api_server_host, settings.effective_port,
    )

    uvicorn.run(
        "infinity_market.api.app:create_app",
        factory=True,
        host=settings.api_server_host,
        port=settings.effective_port,
        log_level=settings.log_level.lower(),
    )
