"""Health check endpoint for infrastructure verification."""

from fastapi import APIRouter
from pydantic import BaseModel

from src.core.config import settings

router = APIRouter(prefix="/api", tags=["health"])


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    environment: str
    tax_year: int


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Report that the service is up and which tax year it estimates.

    Returns:
        HealthResponse with status and active configuration.
    """
    return HealthResponse(
        status="ok",
        environment=settings.environment,
        tax_year=settings.tax_year,
    )
