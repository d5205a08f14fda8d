"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter

from .. import __version__
from ..config import settings
from ..schemas import HealthResponse

router = APIRouter(prefix="/api", tags=["system"])


@router.get("/health", response_model=HealthResponse)
def health_check():
    return HealthResponse(
        status="ok",
        version=__version__,
        default_threshold=settings.match_threshold,
    )
