"""
API router for sector endpoints.
"""
from fastapi import APIRouter, Path, Query, Request
from typing import Annotated, Literal, Optional

from farmstats.api.dependencies import SectorServiceDep
from farmstats.api.v1.models.responses import SectorsResponse, StyleResponse
from farmstats.domain.models import Category
from farmstats.middleware.rate_limiter import DEFAULT_LIMIT, RATE_LIMIT_RESPONSE, limiter
from farmstats.services.domain.map_styles import (
    FARM_BOUNDARY_COLOR,
    MARKER_COLORS,
    style_table,
)
from farmstats.services.domain.sector_aggregator import sorted_by_area


router = APIRouter(
    prefix="/sectors",
    tags=["sectors"],
)


@router.get(
    "/styles",
    response_model=StyleResponse,
    summary="Get map styles",
    description="Polygon styles for every category and severity, marker colors and the farm boundary color.",
    responses=RATE_LIMIT_RESPONSE,
)
@limiter.limit(DEFAULT_LIMIT)
async def get_styles(request: Request) -> StyleResponse:
    """
    Get the map style table.

    Returns:
        StyleResponse with polygon, marker and boundary styles
    """
    return StyleResponse(
        styles=style_table(),
        markers={category.value: color for category, color in MARKER_COLORS.items()},
        farm_boundary=FARM_BOUNDARY_COLOR,
    )


@router.get(
    "/{category}",
    response_model=SectorsResponse,
    summary="Get sector statistics",
    description="""
    Compute per-sector statistics for a detection category.

    This endpoint:
    1. Fetches the category's raw polygons from the data source
    2. Drops malformed records
    3. Computes area (ha), share of the category total and severity per polygon
    4. Returns sectors and map polygons sharing the same identifiers

    Severity is relative to the category total: above 30% is high,
    above 15% is medium, anything else is low.
    A data source failure yields an empty sector list.
    """,
    responses={
        200: {
            "description": "Sector statistics for the category",
        },
        422: {
            "description": "Unknown category",
        },
        **RATE_LIMIT_RESPONSE,
    }
)
@limiter.limit(DEFAULT_LIMIT)
async def get_sectors(
    request: Request,
    category: Annotated[Category, Path(description="Detection category")],
    sector_service: SectorServiceDep,
    sort: Annotated[
        Optional[Literal["area"]],
        Query(description="Order sectors by descending area"),
    ] = None,
) -> SectorsResponse:
    """
    Get sectors and map polygons for a category.

    Args:
        request: Incoming request (used by the rate limiter)
        category: Detection category
        sector_service: Sector service (injected dependency)
        sort: Optional sector ordering; map polygons keep input order

    Returns:
        SectorsResponse with sectors and map polygons
    """
    # Delegate to service layer (no business logic here)
    result = await sector_service.get_category_sectors(category)

    sectors = sorted_by_area(result.sectors) if sort == "area" else result.sectors

    return SectorsResponse(
        category=result.category,
        count=len(result.sectors),
        total_area=result.total_area,
        sectors=sectors,
        map_polygons=result.map_polygons,
    )
