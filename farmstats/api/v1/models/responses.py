"""
API response models using Pydantic.
"""
from typing import Dict, List
from pydantic import BaseModel, ConfigDict, Field

from farmstats.domain.models import Category, MapPolygon, Sector


class SectorsResponse(BaseModel):
    """Response model for the category sectors endpoint."""
    category: Category = Field(
        description="Detection category"
    )
    count: int = Field(
        description="Number of sectors"
    )
    total_area: float = Field(
        description="Sum of sector areas in hectares"
    )
    sectors: List[Sector] = Field(
        description="Per-sector statistics"
    )
    map_polygons: List[MapPolygon] = Field(
        description="Polygon boundaries aligned with the input order"
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "category": "weed",
                "count": 1,
                "total_area": 1.23,
                "sectors": [{
                    "id": "W-1",
                    "name": "North strip",
                    "category": "weed",
                    "area": 1.23,
                    "severity": "high",
                    "percentage": 100.0,
                    "center": {"lat": -24.7655, "lng": -53.6125},
                }],
                "map_polygons": [{
                    "id": "W-1",
                    "category": "weed",
                    "severity": "high",
                    "coordinates": [
                        {"lat": -24.766, "lng": -53.613},
                        {"lat": -24.766, "lng": -53.612},
                        {"lat": -24.765, "lng": -53.612},
                        {"lat": -24.766, "lng": -53.613},
                    ],
                }],
            }
        }
    )


class StyleResponse(BaseModel):
    """Polygon styles keyed by category, severity and variant."""
    styles: Dict[str, Dict[str, Dict[str, dict]]]
    markers: Dict[str, str]
    farm_boundary: str
