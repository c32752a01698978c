"""
Domain service: Map styling for sectors and polygons.

Colors are looked up from explicit tables keyed by category and severity,
so every combination has a defined style.
"""
from dataclasses import asdict, dataclass, replace

from farmstats.domain.models import Category, SeverityLevel


@dataclass(frozen=True)
class PolygonStyle:
    """Leaflet-style path options for a polygon."""
    color: str
    fill_color: str
    fill_opacity: float = 0.4
    weight: int = 2
    opacity: float = 0.8


POLYGON_COLORS: dict[Category, dict[SeverityLevel, str]] = {
    Category.WEED: {
        SeverityLevel.LOW: "#4CAF50",
        SeverityLevel.MEDIUM: "#FF9800",
        SeverityLevel.HIGH: "#F44336",
    },
    Category.FAILURE: {
        SeverityLevel.LOW: "#2196F3",
        SeverityLevel.MEDIUM: "#FF5722",
        SeverityLevel.HIGH: "#9C27B0",
    },
    Category.VIGOR: {
        SeverityLevel.LOW: "#C5E1A5",
        SeverityLevel.MEDIUM: "#7CB342",
        SeverityLevel.HIGH: "#33691E",
    },
}

MARKER_COLORS: dict[Category, str] = {
    Category.WEED: "#ef4444",
    Category.FAILURE: "#8b5cf6",
    Category.VIGOR: "#22c55e",
}

FARM_BOUNDARY_COLOR = "#3b82f6"


def polygon_style(category: Category, severity: SeverityLevel) -> PolygonStyle:
    """Base style for a polygon of the given category and severity."""
    color = POLYGON_COLORS[category][severity]
    return PolygonStyle(color=color, fill_color=color)


def highlighted_style(category: Category, severity: SeverityLevel) -> PolygonStyle:
    """Style for the currently selected polygon."""
    return replace(
        polygon_style(category, severity),
        weight=4,
        fill_opacity=0.7,
        opacity=1.0,
    )


def marker_color(category: Category) -> str:
    """Color of the centroid marker for a category."""
    return MARKER_COLORS[category]


def style_table() -> dict[str, dict[str, dict]]:
    """
    Full style table for clients, keyed by category then severity.

    Returns:
        {category: {severity: {"default": {...}, "highlighted": {...}}}}
    """
    return {
        category.value: {
            severity.value: {
                "default": asdict(polygon_style(category, severity)),
                "highlighted": asdict(highlighted_style(category, severity)),
            }
            for severity in SeverityLevel
        }
        for category in Category
    }
