"""FastAPI application entry point.

Creates and configures the FANZA summary REST API.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from src.api.dependencies.fanza import SummaryExtractor
from src.api.routers import movies
from src.api.schemas import HealthResponse
from src.scraper.fanza import FanzaContext, FanzaSummaryExtractor
from src.scraper.utils.logger import setup_logger
from src.settings import settings

logger = setup_logger("api.main")

# =============================================================================
# LIFESPAN
# =============================================================================


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager.

    Loads mapping tables and opens the HTTP client on startup,
    closes the client on shutdown.

    Args:
        app: FastAPI application instance.

    Yields:
        None after startup tasks complete.
    """
    context = FanzaContext.from_settings()
    app.state.summary_extractor = FanzaSummaryExtractor(context)
    logger.info(f"Summary service ready ({len(context.store.rules)} prefix rules)")
    async with context.client:
        yield
    app.state.summary_extractor = None


# =============================================================================
# APPLICATION FACTORY
# =============================================================================


def create_app() -> FastAPI:
    """Create and configure FastAPI application.

    Returns:
        Configured FastAPI instance.
    """
    app = FastAPI(
        title=settings.api.title,
        version=settings.api.version,
        description="REST API for FANZA movie summaries",
        lifespan=lifespan,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
        openapi_url="/api/openapi.json",
    )
    app.include_router(movies.router, prefix="/api/v1")
    app.add_api_route(
        "/api/v1/health",
        health_check,
        methods=["GET"],
        response_model=HealthResponse,
        tags=["Health"],
        summary="Health check",
    )
    return app


# =============================================================================
# ROOT ENDPOINTS
# =============================================================================


def health_check(extractor: SummaryExtractor) -> HealthResponse:
    """Health check endpoint.

    Args:
        extractor: Summary extractor.

    Returns:
        Service status with table and cache sizes.
    """
    return HealthResponse(
        status="healthy",
        version=settings.api.version,
        mappings=len(extractor.context.store.prefix_mappings),
        cached=len(extractor.context.cache),
    )


app = create_app()


# =============================================================================
# CLI ENTRY POINT
# =============================================================================


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "src.api.main:app",
        host=settings.api.host,
        port=settings.api.port,
        reload=settings.api.reload,
    )
