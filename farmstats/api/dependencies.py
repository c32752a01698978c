"""
Dependency injection for FastAPI.
"""
from typing import Annotated
from fastapi import Depends

from farmstats.infrastructure.data_source_client import (
    DataSourceClient,
    get_data_source_client,
)
from farmstats.services.domain.sector_aggregator import SectorAggregator
from farmstats.services.domain.report_builder import ReportBuilder
from farmstats.services.application.sector_service import SectorService


def get_sector_aggregator() -> SectorAggregator:
    """
    Dependency factory for SectorAggregator.

    Returns:
        SectorAggregator instance
    """
    return SectorAggregator()


def get_report_builder() -> ReportBuilder:
    """Dependency factory for ReportBuilder."""
    return ReportBuilder()


def get_sector_service(
    data_client: Annotated[DataSourceClient, Depends(get_data_source_client)],
    aggregator: Annotated[SectorAggregator, Depends(get_sector_aggregator)],
    report_builder: Annotated[ReportBuilder, Depends(get_report_builder)],
) -> SectorService:
    """
    Dependency factory for SectorService.

    Args:
        data_client: Polygon data source client (injected)
        aggregator: Sector aggregator (injected)
        report_builder: Report builder (injected)

    Returns:
        SectorService instance
    """
    return SectorService(
        data_client=data_client,
        aggregator=aggregator,
        report_builder=report_builder,
    )


# Type aliases for cleaner route signatures
SectorServiceDep = Annotated[SectorService, Depends(get_sector_service)]
