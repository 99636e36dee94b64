"""FastAPI application entry point with lifespan management."""

from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.api.estimates import router as estimates_router
from src.api.health import router as health_router
from src.api.middleware import RequestContextMiddleware
from src.core.config import settings
from src.core.logging import configure_logging, get_logger
from src.core.sentry import init_sentry

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifecycle.

    Startup:
        - Configure structured logging
        - Initialize Sentry error tracking
    """
    # Configure logging first
    configure_logging()
    logger.info(
        "Starting application",
        environment=settings.environment,
        tax_year=settings.tax_year,
    )

    if init_sentry():
        logger.info("Sentry initialized")

    yield

    logger.info("Shutting down application")


app = FastAPI(
    title="Freelancer Tax Estimator",
    description="Self-employment, federal and state tax estimates with quarterly payments",
    version="0.1.0",
    lifespan=lifespan,
)

# Add CORS middleware for the estimator frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

# Add request context middleware
app.add_middleware(RequestContextMiddleware)

# Include routers
app.include_router(health_router)
app.include_router(estimates_router)
