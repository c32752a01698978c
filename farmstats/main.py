"""
FastAPI application entry point.
"""
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from farmstats.config import settings
from farmstats.middleware.error_handler import ErrorHandlerMiddleware
from farmstats.middleware.rate_limiter import limiter
from farmstats.api.v1.routers import farm, sectors

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Handles startup and shutdown events using the modern FastAPI pattern.
    """
    # Startup
    logger.info(f"Starting {settings.app_name} v{settings.app_version}")
    logger.info(f"Log level: {settings.log_level}")
    logger.info(f"Data source: {settings.data_source_base_url} "
                f"(weed={settings.weed_data_path}, failure={settings.failure_data_path})")
    logger.info(f"Rate limit: {settings.rate_limit_requests} requests/minute")

    yield

    # Shutdown
    from farmstats.infrastructure.data_source_client import get_data_source_client
    logger.info("Shutting down application...")
    client = get_data_source_client()
    await client.close()
    logger.info("Shutdown complete")


# Create FastAPI application
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="""
    Sector statistics API for the farm monitoring dashboard

    This API turns detection polygons (weed infestation, planting failures)
    into per-sector statistics for maps, lists and reports.

    ## Features

    - **Sector Statistics**: Area in hectares, share of the category total,
      relative severity and area-weighted centroid per polygon
    - **Map Polygons**: Boundaries aligned with the sector list, plus a style
      table per category and severity
    - **Reports**: Farm-wide indicators and overall status
    - **Robust Error Handling**: Automatic retries with exponential backoff for
      data source calls; failed loads degrade to empty results
    - **Rate Limiting**: Protects the API from abuse

    ## Statistics Pipeline

    1. Drops records without a usable coordinate list
    2. Measures each polygon's geodesic area (WGS84) in hectares
    3. Computes each polygon's share of the category total
    4. Classifies severity: >30% high, >15% medium, otherwise low
    5. Labels sectors by category prefix and position (W-1, F-2, ...)
    """,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan,
)

# Add rate limiter to app state
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

# Add CORS middleware with configurable origins
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Add global error handling middleware
app.add_middleware(ErrorHandlerMiddleware)

# Include routers
app.include_router(sectors.router, prefix="/api/v1")
app.include_router(farm.router, prefix="/api/v1")


@app.get("/", tags=["health"])
async def root():
    """
    Root endpoint for health check.

    Returns:
        Status message
    """
    return {
        "status": "healthy",
        "service": settings.app_name,
        "version": settings.app_version,
    }


@app.get("/health", tags=["health"])
async def health_check():
    """
    Health check endpoint.

    Returns:
        Health status
    """
    return {
        "status": "healthy",
        "service": settings.app_name,
    }
