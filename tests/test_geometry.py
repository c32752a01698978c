"""
Unit tests for geometry utilities.

Tests cover:
- Coordinate order conversion in both directions
- Geodesic area in hectares
- Area-weighted centroid vs vertex average
- Invalid and degenerate rings
"""
import math
import pytest

from farmstats.utils.geo_projection import geodesic_area_m2, open_ring, to_latlng, to_xy
from farmstats.utils.geometry import (
    InvalidGeometry,
    area_hectares,
    centroid,
    simple_center,
)
from conftest import square


# ============================================================
# Coordinate Order Tests
# ============================================================

class TestCoordinateOrder:
    """Tests for (lat, lng) <-> (x, y) conversion."""

    def test_to_xy_swaps_latlng_into_lnglat(self):
        """(latitude, longitude) input should become (longitude, latitude)."""
        result = to_xy([(-24.76, -53.61), (1.0, 2.0)])

        assert result == [(-53.61, -24.76), (2.0, 1.0)]

    def test_to_latlng_swaps_xy_into_latlng(self):
        """(x, y) output should become (latitude, longitude)."""
        assert to_latlng(-53.61, -24.76) == (-24.76, -53.61)

    def test_round_trip_preserves_order(self):
        """Converting to xy and back should restore the original pair."""
        (x, y), = to_xy([(10.5, -70.25)])

        assert to_latlng(x, y) == (10.5, -70.25)

    def test_centroid_returns_latitude_first(self):
        """Centroid of a wide rectangle should not come back axis-swapped."""
        # 0.01 deg tall, 0.02 deg wide
        rectangle = [
            (-24.77, -53.62),
            (-24.77, -53.60),
            (-24.76, -53.60),
            (-24.76, -53.62),
            (-24.77, -53.62),
        ]

        lat, lng = centroid(rectangle)

        assert lat == pytest.approx(-24.765)
        assert lng == pytest.approx(-53.61)

    def test_open_ring_drops_closing_vertex(self):
        """Closed rings should lose their repeated last vertex."""
        assert open_ring([(0, 0), (1, 0), (1, 1), (0, 0)]) == [(0, 0), (1, 0), (1, 1)]
        assert open_ring([(0, 0), (1, 0), (1, 1)]) == [(0, 0), (1, 0), (1, 1)]


# ============================================================
# Area Tests
# ============================================================

class TestArea:
    """Tests for area_hectares."""

    def test_small_square_at_equator(self):
        """A 0.01 deg square at the equator should match the planar estimate."""
        # One degree is ~110574 m of latitude and ~111320 m of longitude at the equator
        expected_ha = (0.01 * 110574.3) * (0.01 * 111319.5) / 10_000

        assert area_hectares(square(0.0, 0.0, 0.01)) == pytest.approx(expected_ha, rel=1e-3)

    def test_area_shrinks_with_latitude(self):
        """The same degree square should be smaller away from the equator."""
        equator = area_hectares(square(0.0, 0.0, 0.01))
        south = area_hectares(square(-60.0, 0.0, 0.01))

        assert south == pytest.approx(equator * math.cos(math.radians(60.005)), rel=2e-2)

    def test_rounded_to_two_decimals(self):
        """Area should be reported with two-decimal precision."""
        area = area_hectares(square(-24.7660, -53.6130, 0.001))

        assert area == round(area, 2)

    def test_orientation_does_not_change_area(self):
        """Clockwise and counter-clockwise rings should have the same area."""
        ring = square(-24.766, -53.613, 0.002)

        assert area_hectares(ring) == area_hectares(list(reversed(ring)))
        assert area_hectares(ring) > 0

    def test_closure_is_optional(self):
        """Open and closed versions of a ring should have the same area."""
        ring = square(-24.766, -53.613, 0.002)

        assert area_hectares(ring[:-1]) == area_hectares(ring)

    def test_fewer_than_three_points_is_zero(self):
        """Degenerate rings should have zero area, not raise."""
        assert area_hectares([(1.0, 2.0)]) == 0.0
        assert area_hectares([(1.0, 2.0), (1.5, 2.5)]) == 0.0
        assert area_hectares([(1.0, 2.0), (1.5, 2.5), (1.0, 2.0)]) == 0.0

    def test_geodesic_area_in_square_meters(self):
        """geodesic_area_m2 should take (lng, lat) rings."""
        ring_xy = to_xy(square(0.0, 0.0, 0.01))

        assert geodesic_area_m2(ring_xy) == pytest.approx(1_230_900, rel=1e-3)

    def test_empty_polygon_raises(self):
        """Empty rings should raise InvalidGeometry."""
        with pytest.raises(InvalidGeometry):
            area_hectares([])

    def test_non_finite_coordinate_raises(self):
        """NaN or infinite coordinates should raise InvalidGeometry."""
        with pytest.raises(InvalidGeometry, match="Non-finite"):
            area_hectares([(0.0, 0.0), (float("nan"), 1.0), (1.0, 1.0)])

        with pytest.raises(InvalidGeometry):
            area_hectares([(0.0, 0.0), (0.0, float("inf")), (1.0, 1.0)])

    def test_out_of_range_coordinate_raises(self):
        """Latitudes beyond 90 or longitudes beyond 180 should raise InvalidGeometry."""
        with pytest.raises(InvalidGeometry, match="out of range"):
            area_hectares(square(95.0, 0.0, 1.0))

        with pytest.raises(InvalidGeometry, match="out of range"):
            area_hectares(square(0.0, 180.5, 0.1))

        with pytest.raises(InvalidGeometry, match="out of range"):
            centroid(square(-91.0, 0.0, 0.5))

    def test_range_bounds_are_inclusive(self):
        """Coordinates exactly on +/-90 and +/-180 are valid."""
        assert area_hectares([(90.0, 180.0), (-90.0, -180.0)]) == 0.0


# ============================================================
# Centroid Tests
# ============================================================

class TestCentroid:
    """Tests for centroid and simple_center."""

    def test_regular_hexagon_centroid_is_center(self):
        """Centroid of a regular polygon should be its geometric center."""
        center_lat, center_lng = 10.0, 20.0
        hexagon = [
            (center_lat + 0.01 * math.sin(math.radians(a)),
             center_lng + 0.01 * math.cos(math.radians(a)))
            for a in range(0, 360, 60)
        ]

        lat, lng = centroid(hexagon)

        assert lat == pytest.approx(center_lat)
        assert lng == pytest.approx(center_lng)

    def test_centroid_invariant_under_rotation(self):
        """Starting the ring at a different vertex should not move the centroid."""
        ring = [(0.0, 0.0), (0.0, 3.0), (1.0, 4.0), (2.5, 2.0), (2.0, 0.5)]
        expected = centroid(ring)

        for shift in range(1, len(ring)):
            rotated = ring[shift:] + ring[:shift]
            lat, lng = centroid(rotated)
            assert lat == pytest.approx(expected[0])
            assert lng == pytest.approx(expected[1])

    def test_centroid_is_area_weighted(self):
        """Extra vertices along one edge should not pull the centroid."""
        ring = [(0.0, 0.0), (0.25, 0.0), (0.5, 0.0), (0.75, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0)]

        lat, lng = centroid(ring)
        avg_lat, avg_lng = simple_center(ring)

        assert lat == pytest.approx(0.5)
        assert lng == pytest.approx(0.5)
        assert avg_lat == pytest.approx(3.5 / 7)
        assert avg_lng == pytest.approx(2.0 / 7)

    def test_simple_center_includes_closing_vertex(self):
        """simple_center averages every vertex as given."""
        ring = [(0.0, 0.0), (0.0, 2.0), (2.0, 2.0), (2.0, 0.0), (0.0, 0.0)]

        assert simple_center(ring) == pytest.approx((0.8, 0.8))

    def test_degenerate_centroid_falls_back_to_vertex_average(self):
        """Single points and collinear rings should not raise."""
        assert centroid([(1.0, 2.0)]) == pytest.approx((1.0, 2.0))
        assert centroid([(0.0, 0.0), (1.0, 1.0), (2.0, 2.0)]) == pytest.approx((1.0, 1.0))

    def test_empty_polygon_raises(self):
        """Empty rings should raise InvalidGeometry."""
        with pytest.raises(InvalidGeometry):
            centroid([])

        with pytest.raises(InvalidGeometry):
            simple_center([])
