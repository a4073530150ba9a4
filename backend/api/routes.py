"""API route handlers."""
from fastapi import APIRouter

from schemas.health import HealthResponse
from utils.config import ALLOWED_TABLES

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
def health() -> HealthResponse:
    """Health check endpoint."""
    return HealthResponse()


@router.get("/tables", response_model=list[str])
def list_tables() -> list[str]:
    """Table names a vessel-types request may target."""
    return sorted(ALLOWED_TABLES)
