"""
Domain service: Farm report summary.

Combines per-category aggregation results into farm-wide indicators,
an overall status and chart series for report export.
"""
from typing import Optional
import logging

from farmstats.domain.models import (
    AggregationResult,
    ChartEntry,
    FarmIndicators,
    FarmStatus,
    ReportSummary,
)
from farmstats.services.domain.sector_aggregator import sorted_by_area
from farmstats.config import settings

logger = logging.getLogger(__name__)


EXCELLENT_VIGOR_THRESHOLD = 80.0
GOOD_VIGOR_THRESHOLD = 60.0


def classify_status(vigor: float) -> FarmStatus:
    """Overall status from the vigor index (exclusive bounds)."""
    if vigor > EXCELLENT_VIGOR_THRESHOLD:
        return FarmStatus.EXCELLENT
    if vigor > GOOD_VIGOR_THRESHOLD:
        return FarmStatus.GOOD
    return FarmStatus.ATTENTION


def share_of_farm(affected_area: float, farm_area: float) -> float:
    """Affected area as a percentage of the farm, two decimals."""
    if farm_area <= 0:
        return 0.0
    return round(affected_area / farm_area * 100, 2)


class ReportBuilder:
    """Builds report summaries from aggregation results."""

    def __init__(self, chart_size: Optional[int] = None):
        """
        Args:
            chart_size: Number of largest sectors per chart (defaults to settings)
        """
        self.chart_size = chart_size or settings.report_chart_size

    def chart(self, result: AggregationResult) -> list[ChartEntry]:
        """Largest sectors of a category as chart entries."""
        return [
            ChartEntry(name=sector.id, value=sector.area, percentage=sector.percentage)
            for sector in sorted_by_area(result.sectors)[:self.chart_size]
        ]

    def build(
        self,
        period: str,
        farm_area: float,
        vigor_index: float,
        weeds: AggregationResult,
        failures: AggregationResult,
        vigor: AggregationResult,
    ) -> ReportSummary:
        """
        Build a report summary.

        Args:
            period: Reporting period label
            farm_area: Farm area in hectares
            vigor_index: Farm-wide vigor index in percent
            weeds: Weed aggregation result
            failures: Failure aggregation result
            vigor: Vigor sectors

        Returns:
            ReportSummary instance
        """
        indicators = FarmIndicators(
            vigor=vigor_index,
            failures=share_of_farm(failures.total_area, farm_area),
            weeds=share_of_farm(weeds.total_area, farm_area),
            area=farm_area,
        )
        status = classify_status(indicators.vigor)
        logger.info(
            f"Report for {period}: vigor={indicators.vigor}%, failures={indicators.failures}%, "
            f"weeds={indicators.weeds}%, status={status.value}"
        )

        return ReportSummary(
            period=period,
            indicators=indicators,
            status=status,
            sectors=[s.id for s in weeds.sectors + failures.sectors + vigor.sectors],
            weeds_chart=self.chart(weeds),
            failures_chart=self.chart(failures),
            vigor_chart=self.chart(vigor),
        )
