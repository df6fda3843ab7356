"""Health and info routes."""
from fastapi import APIRouter, Request
from models import HealthResponse
from routes.deps import get_app_state

router = APIRouter()


@router.get("/", include_in_schema=False)
async def root():
    """Root endpoint with API information"""
    return {
        "message": "Documentation Portal Content API",
        "docs": "/docs",
        "health": "/health"
    }


@router.get("/health", response_model=HealthResponse)
async def health(request: Request):
    """
    Health check endpoint

    Returns the configured content directory and cache occupancy
    """
    app_state = get_app_state(request)
    return HealthResponse(
        status="healthy",
        content_dir=app_state.content_dir(),
        cache_entries=app_state.cache_size()
    )
