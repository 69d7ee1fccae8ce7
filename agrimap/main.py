"""
Agriculture Sector Map - Main Application
Serves styled sector regions and click resolution to the map frontend
"""

import logging
import os
import time

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .api.agriculture import router as agriculture_router
from .api.health import router as health_router
from .config import settings
from .services.agriculture_client import agriculture_api, load_catalog

DEVELOPMENT = settings.ENVIRONMENT == "development"

app = FastAPI(
    title="Agriculture Sector Map API",
    description="Sector-based region resolution and overlay styling for agricultural maps",
    version=settings.VERSION,
    docs_url="/api/docs" if DEVELOPMENT else None,
    redoc_url="/api/redoc" if DEVELOPMENT else None,
)

# The map frontend is served from another origin
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_HOSTS,
    allow_credentials=False,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

app.include_router(agriculture_router, prefix=settings.API_V1_STR)
app.include_router(health_router, prefix="/api")

# =====================================
# ROOT ENDPOINTS
# =====================================

@app.get("/")
async def root():
    """Service overview with links to the map endpoints"""

    catalog_load = getattr(app.state, "catalog_load", None)
    return {
        "service": settings.PROJECT_NAME,
        "version": settings.VERSION,
        "catalog_source": catalog_load.source if catalog_load else "not loaded",
        "sectors": f"{settings.API_V1_STR}/agriculture/sectors",
        "regions": f"{settings.API_V1_STR}/agriculture/regions",
        "health": "/api/health"
    }

# =====================================
# STARTUP/SHUTDOWN EVENTS
# =====================================

@app.on_event("startup")
async def load_region_catalog():
    """Load the region catalog once for the process, falling back when upstream is down"""

    logging.info(f"🚀 Starting {settings.PROJECT_NAME} ({settings.ENVIRONMENT})")

    if getattr(app.state, "catalog_load", None) is None:
        app.state.catalog_load = load_catalog()

    catalog_load = app.state.catalog_load
    total = catalog_load.catalog.total_regions()
    if catalog_load.degraded:
        logging.warning(f"⚠️  Serving {total} regions from the fallback dataset")
    else:
        logging.info(f"✅ Region catalog ready: {total} regions from {settings.AGRICULTURE_API_URL}")

@app.on_event("shutdown")
async def close_upstream_session():
    agriculture_api.session.close()
    logging.info("👋 Agriculture Sector Map API stopped")

# =====================================
# EXCEPTION HANDLERS
# =====================================

@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    """Unexpected failures; details are only exposed in development"""

    logging.error(f"❌ Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=True)

    content = {"error": "Internal server error"}
    if DEVELOPMENT:
        content.update({"detail": str(exc), "type": type(exc).__name__})
    else:
        content["message"] = "An unexpected error occurred. Please try again later."
    return JSONResponse(status_code=500, content=content)

# =====================================
# MIDDLEWARE
# =====================================

@app.middleware("http")
async def timing_middleware(request: Request, call_next):
    """Log each request with its duration and expose it as a header"""

    started = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - started) * 1000

    response.headers["X-Process-Time-Ms"] = f"{elapsed_ms:.1f}"
    logging.info(f"{request.method} {request.url.path} -> {response.status_code} ({elapsed_ms:.1f} ms)")
    return response

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "agrimap.main:app",
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", 8000)),
        reload=DEVELOPMENT
    )
