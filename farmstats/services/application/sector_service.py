"""
Application service: Orchestration layer for sector statistics.
"""
import logging

from farmstats.config import settings
from farmstats.domain.models import (
    AggregationResult,
    Category,
    Coordinates,
    FarmOverview,
    ReportSummary,
    Sector,
)
from farmstats.infrastructure.data_source_client import (
    DataSourceClient,
    DataSourceError,
)
from farmstats.services.domain.polygon_normalizer import normalize
from farmstats.services.domain.report_builder import ReportBuilder
from farmstats.services.domain.sector_aggregator import (
    AggregationError,
    SectorAggregator,
)
from farmstats.utils.geometry import area_hectares, simple_center

logger = logging.getLogger(__name__)


class SectorService:
    """
    Application service for sector-related operations.

    Orchestrates data fetching and business logic execution.
    Follows the application layer pattern - no business logic here,
    only coordination between infrastructure and domain layers.
    """

    def __init__(
        self,
        data_client: DataSourceClient,
        aggregator: SectorAggregator,
        report_builder: ReportBuilder,
    ):
        """
        Initialize the service with dependencies.

        Args:
            data_client: Client fetching raw polygon payloads
            aggregator: Sector aggregator for per-polygon statistics
            report_builder: Builder for report summaries
        """
        self.data_client = data_client
        self.aggregator = aggregator
        self.report_builder = report_builder

    async def get_category_sectors(self, category: Category) -> AggregationResult:
        """
        Get sectors and map polygons for a category.

        This method orchestrates:
        1. Fetching the raw polygon payload
        2. Normalizing the records
        3. Aggregating per-sector statistics

        A failed fetch or aggregation degrades to an empty result so the
        map and lists always have something to render.

        Args:
            category: Detection category

        Returns:
            AggregationResult (possibly empty)
        """
        if category == Category.VIGOR:
            return self.get_vigor_sectors()

        try:
            raw = await self.data_client.fetch_raw_polygons(category)
        except DataSourceError as e:
            logger.error(f"Failed to load {category.value} polygons: {e.message}")
            return AggregationResult(category=category)

        polygons = normalize(raw)

        try:
            result = self.aggregator.aggregate(category, polygons)
        except AggregationError as e:
            logger.error(str(e))
            return AggregationResult(category=category)

        logger.info(f"Aggregated {len(result.sectors)} {category.value} sectors "
                    f"({result.total_area:.2f} ha)")
        return result

    def get_vigor_sectors(self) -> AggregationResult:
        """
        Get the configured vigor sectors.

        Vigor sectors carry their own severity and percentage and have no
        boundary, so no map polygons are produced.

        Returns:
            AggregationResult for the vigor category
        """
        profile = self.aggregator.profiles[Category.VIGOR]
        sectors = [
            Sector(
                id=f"{profile.prefix}-{index + 1}",
                name=entry.get("name") or f"{profile.default_label} {index + 1}",
                category=Category.VIGOR,
                area=entry["area"],
                severity=entry["severity"],
                percentage=entry["percentage"],
                center=Coordinates(**entry["center"]),
            )
            for index, entry in enumerate(settings.vigor_sectors)
        ]
        return AggregationResult(
            category=Category.VIGOR,
            total_area=round(sum(s.area for s in sectors), 2),
            sectors=sectors,
        )

    def get_farm_overview(self) -> FarmOverview:
        """
        Get the configured farm boundary with its area and center.

        Returns:
            FarmOverview instance
        """
        boundary = settings.farm_boundary
        if not boundary:
            lat, lng = settings.default_map_center
            return FarmOverview(boundary=[], area=0.0, center=Coordinates(lat=lat, lng=lng))

        center_lat, center_lng = simple_center(boundary)
        return FarmOverview(
            boundary=[Coordinates(lat=lat, lng=lng) for lat, lng in boundary],
            area=area_hectares(boundary),
            center=Coordinates(lat=center_lat, lng=center_lng),
        )

    async def build_report(self, period: str) -> ReportSummary:
        """
        Build the farm report summary for a period.

        Args:
            period: Reporting period label

        Returns:
            ReportSummary instance
        """
        weeds = await self.get_category_sectors(Category.WEED)
        failures = await self.get_category_sectors(Category.FAILURE)
        vigor = self.get_vigor_sectors()
        farm = self.get_farm_overview()

        return self.report_builder.build(
            period=period,
            farm_area=farm.area,
            vigor_index=settings.vigor_index,
            weeds=weeds,
            failures=failures,
            vigor=vigor,
        )
