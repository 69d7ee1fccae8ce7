"""
Health check and monitoring API endpoints
"""

from fastapi import APIRouter, Depends
from datetime import datetime, timezone
import platform

from ..config import settings
from ..services.agriculture_client import CatalogLoad
from .agriculture import get_catalog_load

router = APIRouter(tags=["health"])

# =====================================
# HEALTH CHECK ENDPOINTS
# =====================================

@router.get("/health")
async def health_check(catalog_load: CatalogLoad = Depends(get_catalog_load)):
    """
    Health of the region catalog. Running on the fallback dataset is degraded, not down.
    """

    catalog = catalog_load.catalog
    health_status = {
        "service": settings.PROJECT_NAME,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "status": "healthy",
        "checks": {}
    }

    health_status["checks"]["catalog"] = {
        "status": "degraded" if catalog_load.degraded else "healthy",
        "source": catalog_load.source,
        "sectors": len(catalog),
        "regions": catalog.total_regions()
    }

    if catalog.total_regions() == 0:
        health_status["status"] = "unhealthy"
    elif catalog_load.degraded:
        health_status["status"] = "degraded"

    return health_status

@router.get("/health/simple")
async def simple_health_check():
    """
    Simple health check for load balancers
    """
    return {"status": "ok", "timestamp": datetime.now(timezone.utc).isoformat()}

@router.get("/version")
async def get_version_info():
    """
    Get version and build information
    """

    return {
        "service": settings.PROJECT_NAME,
        "version": settings.VERSION,
        "environment": settings.ENVIRONMENT,
        "python_version": platform.python_version(),
        "upstream": settings.AGRICULTURE_API_URL
    }
