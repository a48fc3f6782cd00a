"""Health check routes"""

from fastapi import APIRouter, Depends
import logging

from api.dependencies import get_container
from api.responses import HealthResponse
from app.container import Container

router = APIRouter(tags=["Health"])
logger = logging.getLogger("solidshop.api.health")


@router.get("/health-check", response_model=HealthResponse)
def health_check(container: Container = Depends(get_container)):
    """Basic health check endpoint"""
    settings = container.settings
    return HealthResponse(
        status="ok",
        service=settings.app_name,
        version=settings.app_version,
        storage=settings.storage_backend,
    )
