"""
Domain service: Per-sector statistics for detection polygons.

For each polygon of a category this computes:
- Area in hectares (geodesic)
- Share of the category's total area
- Relative severity tier
- Area-weighted centroid

and emits positionally aligned Sector and MapPolygon lists.
"""
from typing import Optional
from dataclasses import dataclass
import logging

from farmstats.domain.models import (
    AggregationResult,
    Category,
    Coordinates,
    MapPolygon,
    NormalizedPolygon,
    Sector,
    SeverityLevel,
)
from farmstats.utils.geometry import InvalidGeometry, area_hectares, centroid
from farmstats.config import settings

logger = logging.getLogger(__name__)


# Severity thresholds on the rounded percentage share
HIGH_SEVERITY_THRESHOLD = 30.0
MEDIUM_SEVERITY_THRESHOLD = 15.0


class AggregationError(Exception):
    """Raised when a polygon of a category cannot be measured."""

    def __init__(self, category: Category, index: int, reason: str):
        self.category = category
        self.index = index
        self.reason = reason
        super().__init__(
            f"Aggregation failed for {category.value} polygon #{index + 1}: {reason}"
        )


@dataclass(frozen=True)
class CategoryProfile:
    """Labelling for the sectors of one category."""

    prefix: str
    """Identifier prefix, e.g. 'W' gives 'W-1', 'W-2', ..."""

    default_label: str
    """Name used for unnamed polygons, suffixed with the 1-based index"""


def default_profiles() -> dict[Category, CategoryProfile]:
    """Build category profiles from application settings."""
    return {
        Category.WEED: CategoryProfile(settings.weed_sector_prefix, settings.weed_sector_label),
        Category.FAILURE: CategoryProfile(settings.failure_sector_prefix, settings.failure_sector_label),
        Category.VIGOR: CategoryProfile(settings.vigor_sector_prefix, settings.vigor_sector_label),
    }


def classify_severity(percentage: float) -> SeverityLevel:
    """
    Classify a percentage share into a severity tier.

    The bounds are exclusive: exactly 30.00 is medium, exactly 15.00 is low.
    """
    if percentage > HIGH_SEVERITY_THRESHOLD:
        return SeverityLevel.HIGH
    if percentage > MEDIUM_SEVERITY_THRESHOLD:
        return SeverityLevel.MEDIUM
    return SeverityLevel.LOW


def sorted_by_area(sectors: list[Sector]) -> list[Sector]:
    """Return sectors ordered by descending area (ties keep input order)."""
    return sorted(sectors, key=lambda s: s.area, reverse=True)


class SectorAggregator:
    """
    Domain service turning normalized polygons into sector statistics.

    Aggregation is fail-fast: identifiers are derived from positions, so a
    polygon that cannot be measured aborts the whole category instead of
    being skipped.
    """

    def __init__(self, profiles: Optional[dict[Category, CategoryProfile]] = None):
        """
        Initialize the aggregator.

        Args:
            profiles: Labelling per category (defaults to application settings)
        """
        self.profiles = profiles if profiles is not None else default_profiles()

    def aggregate(
        self,
        category: Category,
        polygons: list[NormalizedPolygon],
    ) -> AggregationResult:
        """
        Compute sectors and map polygons for one category.

        Args:
            category: Category the polygons belong to
            polygons: Normalized polygons in display order

        Returns:
            AggregationResult with lists aligned to `polygons`

        Raises:
            AggregationError: If any polygon's geometry is invalid
        """
        if not polygons:
            return AggregationResult(category=category)

        profile = self.profiles[category]

        # Step 1: Measure every polygon before deriving anything
        areas = []
        centers = []
        for index, polygon in enumerate(polygons):
            try:
                areas.append(area_hectares(polygon.coordinates))
                centers.append(centroid(polygon.coordinates))
            except InvalidGeometry as e:
                logger.error(f"Invalid geometry in {category.value} polygon #{index + 1}: {e}")
                raise AggregationError(category, index, str(e)) from e

        # Step 2: Category total
        total_area = sum(areas)
        logger.debug(f"{category.value}: {len(polygons)} polygons, total {total_area:.2f} ha")

        # Step 3: Per-sector share, severity and labels
        sectors = []
        map_polygons = []
        for index, polygon in enumerate(polygons):
            area = areas[index]
            percentage = round(area / total_area * 100, 2) if total_area > 0 else 0.0
            severity = classify_severity(percentage)
            sector_id = f"{profile.prefix}-{index + 1}"
            lat, lng = centers[index]

            sectors.append(Sector(
                id=sector_id,
                name=polygon.name or f"{profile.default_label} {index + 1}",
                category=category,
                area=area,
                severity=severity,
                percentage=percentage,
                center=Coordinates(lat=lat, lng=lng),
            ))
            map_polygons.append(MapPolygon(
                id=sector_id,
                coordinates=[Coordinates(lat=lat, lng=lng) for lat, lng in polygon.coordinates],
                category=category,
                severity=severity,
            ))

        return AggregationResult(
            category=category,
            total_area=round(total_area, 2),
            sectors=sectors,
            map_polygons=map_polygons,
        )
