"""
Domain models for detection polygons and sector statistics.

These models represent the core domain entities and should be independent
of any infrastructure concerns (API clients, rendering, etc.).
"""
from enum import Enum
from typing import List, Tuple
from pydantic import BaseModel, Field


class Category(str, Enum):
    """Detection type a polygon belongs to."""
    WEED = "weed"
    FAILURE = "failure"
    VIGOR = "vigor"


class SeverityLevel(str, Enum):
    """Relative severity tier (share of the category's total area)."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class Coordinates(BaseModel):
    """A (latitude, longitude) pair in degrees."""
    lat: float
    lng: float


class NormalizedPolygon(BaseModel):
    """Polygon with a uniform ordered list of (lat, lng) pairs."""
    name: str = ""
    coordinates: List[Tuple[float, float]] = Field(
        min_length=1,
        description="Ordered (latitude, longitude) pairs"
    )


class Sector(BaseModel):
    """Statistics summarising one detected polygon."""
    id: str
    name: str
    category: Category
    area: float = Field(ge=0, description="Area in hectares")
    severity: SeverityLevel
    percentage: float = Field(description="Share of the category total area (0-100)")
    center: Coordinates


class MapPolygon(BaseModel):
    """Polygon boundary for map rendering, joined to a Sector by id."""
    id: str
    coordinates: List[Coordinates]
    category: Category
    severity: SeverityLevel


class AggregationResult(BaseModel):
    """Sectors and map polygons derived from one category's polygons."""
    category: Category
    total_area: float = 0.0
    sectors: List[Sector] = Field(default_factory=list)
    map_polygons: List[MapPolygon] = Field(default_factory=list)


class FarmOverview(BaseModel):
    """Farm boundary with its area and map center."""
    boundary: List[Coordinates]
    area: float = Field(ge=0, description="Farm area in hectares")
    center: Coordinates


class FarmStatus(str, Enum):
    """Overall farm status shown in reports."""
    EXCELLENT = "excellent"
    GOOD = "good"
    ATTENTION = "attention"


class FarmIndicators(BaseModel):
    """Farm-wide indicators, all percentages of the farm area."""
    vigor: float
    failures: float
    weeds: float
    area: float = Field(description="Farm area in hectares")


class ChartEntry(BaseModel):
    """One bar of a report chart."""
    name: str
    value: float
    percentage: float


class ReportSummary(BaseModel):
    """Farm report summary."""
    period: str
    indicators: FarmIndicators
    status: FarmStatus
    sectors: List[str]
    weeds_chart: List[ChartEntry]
    failures_chart: List[ChartEntry]
    vigor_chart: List[ChartEntry]
