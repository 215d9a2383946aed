"""FastAPI application factory and configuration.

Hosts the NiceGUI page and the health check, and owns the lifetime of the
backend HTTP client.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from chainref.api.sample_backend import router as sample_router
from chainref.client.http import ChainApiClient

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Manage application startup and shutdown lifecycle.

    Closes the backend client on shutdown if one was attached.

    Args:
        app: The FastAPI application instance.

    Yields:
        Control to the application while it runs.
    """
    logger.info("Starting Chain Reference app...")
    yield
    api_client: ChainApiClient | None = getattr(app.state, "api_client", None)
    if api_client is not None:
        await api_client.aclose()
    logger.info("Shutting down Chain Reference app...")


def create_app(
    api_client: ChainApiClient | None = None,
    include_sample_backend: bool = False,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        api_client: Backend client owned by the app, closed on shutdown.
        include_sample_backend: Mount the sample question endpoint at /sample.

    Returns:
        Configured FastAPI application instance.
    """
    application = FastAPI(
        title="Chain Reference",
        description=(
            "Ask a question under a theme and browse the chain of linked "
            "passages returned by the inference backend."
        ),
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    application.state.api_client = api_client

    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    if include_sample_backend:
        application.include_router(sample_router)
        logger.info("Sample backend mounted at /sample/askGemini")

    @application.get("/health")
    async def health_check() -> dict[str, str]:
        """Check service health status."""
        return {"status": "healthy", "service": "chain-reference"}

    return application
