"""
API router for farm and report endpoints.
"""
from fastapi import APIRouter, Query, Request
from typing import Annotated

from farmstats.api.dependencies import SectorServiceDep
from farmstats.domain.models import FarmOverview, ReportSummary
from farmstats.middleware.rate_limiter import DEFAULT_LIMIT, RATE_LIMIT_RESPONSE, limiter


router = APIRouter(
    tags=["farm"],
)


@router.get(
    "/farm",
    response_model=FarmOverview,
    summary="Get farm boundary",
    description="Configured farm boundary with its area in hectares and its map center.",
    responses=RATE_LIMIT_RESPONSE,
)
@limiter.limit(DEFAULT_LIMIT)
async def get_farm(
    request: Request,
    sector_service: SectorServiceDep,
) -> FarmOverview:
    """Get the farm overview."""
    return sector_service.get_farm_overview()


@router.get(
    "/reports/summary",
    response_model=ReportSummary,
    summary="Get report summary",
    description="""
    Farm-wide indicators for a reporting period.

    Weed and failure indicators are the category areas as a percentage of
    the farm area. The overall status follows the vigor index: above 80 is
    excellent, above 60 is good, anything else needs attention.
    """,
    responses=RATE_LIMIT_RESPONSE,
)
@limiter.limit(DEFAULT_LIMIT)
async def get_report_summary(
    request: Request,
    sector_service: SectorServiceDep,
    period: Annotated[str, Query(min_length=1, description="Reporting period label")] = "current",
) -> ReportSummary:
    """
    Build the report summary.

    Args:
        request: Incoming request (used by the rate limiter)
        sector_service: Sector service (injected dependency)
        period: Reporting period label

    Returns:
        ReportSummary instance
    """
    return await sector_service.build_report(period)
