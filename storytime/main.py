"""
Storytime - local reference backend entry point.

Serves the characters, prompts, jobs and chat archives API from in-memory
stores and runs stored jobs on their cadence.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from storytime import __version__
from storytime.core.config import get_settings
from storytime.core.logger import logger


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown events."""
    # Startup
    settings = get_settings()
    logger.info(f"Starting storytime backend in {settings.ENVIRONMENT} mode...")

    from storytime.services.background_scheduler import (
        start_background_scheduler,
        stop_background_scheduler,
    )

    await start_background_scheduler()

    yield

    # Shutdown
    logger.info("Shutting down storytime backend...")
    await stop_background_scheduler()

    from storytime.api.deps import close_api_client

    await close_api_client()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title="Storytime",
        description="Characters, prompts, scheduled jobs and chat archives",
        version=__version__,
        lifespan=lifespan,
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from storytime.api.responses import register_exception_handlers

    register_exception_handlers(app)

    # Include routers
    from storytime.api import characters, chats, jobs, prompts, test_runs

    app.include_router(characters.router, prefix="/api/characters", tags=["characters"])
    app.include_router(prompts.router, prefix="/api/prompts", tags=["prompts"])
    app.include_router(jobs.router, prefix="/api/jobs", tags=["jobs"])
    app.include_router(chats.router, prefix="/api/chats", tags=["chats"])
    app.include_router(test_runs.router, prefix="/api/test", tags=["test_runs"])

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {
            "status": "healthy",
            "environment": settings.ENVIRONMENT,
            "version": __version__,
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "storytime.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
    )
