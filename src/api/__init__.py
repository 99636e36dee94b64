"""API module exports."""

from src.api.estimates import router as estimates_router
from src.api.health import router as health_router

__all__ = [
    "estimates_router",
    "health_router",
]
