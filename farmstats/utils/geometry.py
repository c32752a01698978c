"""
Polygon measurements in hectares and degrees.

All public functions take and return (latitude, longitude) pairs.
"""
import logging
import math
from typing import Sequence, Tuple
import numpy as np
from shapely.geometry import Polygon

from farmstats.utils.geo_projection import (
    SQUARE_METERS_PER_HECTARE,
    geodesic_area_m2,
    open_ring,
    to_latlng,
    to_xy,
)

logger = logging.getLogger(__name__)


class InvalidGeometry(ValueError):
    """Raised when a ring cannot be measured (empty or non-finite)."""
    pass


def _validate(polygon: Sequence[Tuple[float, float]]) -> None:
    if not polygon:
        raise InvalidGeometry("Polygon has no coordinates")
    for lat, lng in polygon:
        if not (math.isfinite(lat) and math.isfinite(lng)):
            raise InvalidGeometry(f"Non-finite coordinate ({lat}, {lng})")
        if abs(lat) > 90 or abs(lng) > 180:
            raise InvalidGeometry(f"Coordinate out of range ({lat}, {lng})")


def area_hectares(polygon: Sequence[Tuple[float, float]]) -> float:
    """
    Compute the area of a ring in hectares.

    Uses the geodesic area on the WGS84 ellipsoid. Rings with fewer than
    three distinct vertices have zero area.

    Args:
        polygon: Ring as (latitude, longitude) pairs

    Returns:
        Area in hectares, rounded to two decimals

    Raises:
        InvalidGeometry: If the ring is empty, has non-finite or out-of-range
            coordinates, or has no finite area
    """
    _validate(polygon)
    area_m2 = geodesic_area_m2(to_xy(polygon))
    if not math.isfinite(area_m2):
        raise InvalidGeometry(f"Area of {len(polygon)}-vertex ring is not finite")
    return round(area_m2 / SQUARE_METERS_PER_HECTARE, 2)


def centroid(polygon: Sequence[Tuple[float, float]]) -> Tuple[float, float]:
    """
    Compute the area-weighted centroid of a ring.

    Degenerate rings (fewer than three distinct vertices or zero area)
    fall back to `simple_center`.

    Args:
        polygon: Ring as (latitude, longitude) pairs

    Returns:
        (latitude, longitude) of the centroid

    Raises:
        InvalidGeometry: If the ring is empty or has non-finite coordinates
    """
    _validate(polygon)
    ring = open_ring(to_xy(polygon))
    if len(ring) < 3:
        return simple_center(polygon)

    shape = Polygon(ring)
    if shape.area == 0:
        logger.debug(f"Zero-area ring with {len(ring)} vertices, using vertex average")
        return simple_center(polygon)

    point = shape.centroid
    return to_latlng(point.x, point.y)


def simple_center(polygon: Sequence[Tuple[float, float]]) -> Tuple[float, float]:
    """
    Unweighted mean of all vertices (closing vertex included if present).

    Args:
        polygon: Ring as (latitude, longitude) pairs

    Returns:
        (latitude, longitude) of the vertex average

    Raises:
        InvalidGeometry: If the ring is empty or has non-finite coordinates
    """
    _validate(polygon)
    lat, lng = np.asarray(polygon, dtype=float).mean(axis=0)
    return (float(lat), float(lng))
