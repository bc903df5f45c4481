"""FastAPI application."""

from contextlib import asynccontextmanager

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ranker.config import Settings
from ranker.interface.api.errors import register_error_handlers
from ranker.interface.api.routes import (
    auth,
    health,
    rankings,
    users,
    votes,
    works,
)
from ranker.util.di.container import create_container, setup_di
from ranker.util.observability import (
    instrument_fastapi,
    instrument_httpx,
)


@asynccontextmanager
async def lifespan(app_instance: FastAPI):
    """Close the DI container (and with it the database engine) on shutdown."""
    yield
    await app_instance.state.dishka_container.close()


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    In tests, conftest.py configures it.

    Args:
        container: DI container to use. Defaults to the production container.
    """
    settings = Settings()

    # Instrument httpx for outbound HTTP requests
    # (Logfire must be configured before instrumentation)
    instrument_httpx()

    app_instance = FastAPI(
        title="Media Ranker",
        description="Rank albums, books and movies by community upvotes",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[
            settings.api.base_url,
            "http://localhost:3000",  # Local development
            "http://localhost:5173",  # Vite default
        ],
        allow_credentials=True,
        allow_methods=["GET", "POST", "DELETE", "OPTIONS", "PATCH"],
        allow_headers=[
            "Content-Type",
            "Accept",
            "Origin",
            "Referer",
            "X-Requested-With",
        ],
        expose_headers=["Content-Length", "Content-Type", "Location"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    # Setup dependency injection
    # Settings are loaded from environment automatically
    setup_di(app_instance, container or create_container())

    # Register routes
    app_instance.include_router(health.router)
    app_instance.include_router(rankings.router)
    app_instance.include_router(auth.router)
    app_instance.include_router(works.router)
    app_instance.include_router(votes.router)
    app_instance.include_router(users.router)

    register_error_handlers(app_instance)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
# In production: start_app.py handles this
# In tests: configure in conftest.py
app = create_app()
