"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from tewahed.config import Settings
from tewahed.interface.api.routes import comments, health, likes
from tewahed.interface.error import register_error_handlers
from tewahed.util.di.container import create_container, setup_di
from tewahed.util.observability import instrument_fastapi


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Logfire should be configured before calling this function:
    start_app.py does it in production and tests/conftest.py in tests.

    Args:
        container: DI container to use; the production container is built
            from environment settings when omitted

    Returns:
        Configured application
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Tewahed Answers API",
        description="Threaded comments and likes for Tewahed Answers questions and answers",
        version="0.1.0",
    )

    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Accept", "Origin", "X-Requested-With"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    setup_di(app_instance, container or create_container())
    register_error_handlers(app_instance)

    app_instance.include_router(health.router)
    app_instance.include_router(comments.router)
    app_instance.include_router(likes.router)

    return app_instance


# Create app instance for uvicorn
app = create_app()
