"""
Coordinate order conversion and geodesic measurements.

Public data uses (latitude, longitude) pairs. All geometry math (shapely,
pyproj) uses (x, y) = (longitude, latitude). Conversions between the two
happen only through `to_xy` and `to_latlng`.
"""
from typing import Sequence, Tuple, List
from pyproj import Geod
from shapely.geometry import Polygon


# WGS84 ellipsoid used for all area measurements
WGS84_GEOD = Geod(ellps="WGS84")

SQUARE_METERS_PER_HECTARE = 10_000.0


def to_xy(coordinates: Sequence[Tuple[float, float]]) -> List[Tuple[float, float]]:
    """
    Convert (latitude, longitude) pairs into (x, y) = (longitude, latitude).

    Args:
        coordinates: Sequence of (latitude, longitude) pairs in degrees

    Returns:
        List of (longitude, latitude) tuples
    """
    return [(float(lng), float(lat)) for lat, lng in coordinates]


def to_latlng(x: float, y: float) -> Tuple[float, float]:
    """
    Convert a planar (x, y) point back into a (latitude, longitude) pair.

    Args:
        x: Longitude in degrees
        y: Latitude in degrees

    Returns:
        (latitude, longitude) tuple
    """
    return (float(y), float(x))


def open_ring(ring_xy: Sequence[Tuple[float, float]]) -> List[Tuple[float, float]]:
    """Drop the closing vertex of an explicitly closed ring."""
    ring = list(ring_xy)
    if len(ring) > 1 and ring[0] == ring[-1]:
        ring = ring[:-1]
    return ring


def geodesic_area_m2(ring_xy: Sequence[Tuple[float, float]]) -> float:
    """
    Compute the unsigned geodesic area of a ring on the WGS84 ellipsoid.

    Args:
        ring_xy: Ring as (longitude, latitude) tuples; closure is optional

    Returns:
        Area in square meters
    """
    ring = open_ring(ring_xy)
    if len(ring) < 3:
        return 0.0
    area, _ = WGS84_GEOD.geometry_area_perimeter(Polygon(ring))
    # Counter-clockwise rings are positive, clockwise negative
    return abs(area)
