"""
Unit tests for map styling.
"""
import pytest

from farmstats.domain.models import Category, SeverityLevel
from farmstats.services.domain.map_styles import (
    FARM_BOUNDARY_COLOR,
    highlighted_style,
    marker_color,
    polygon_style,
    style_table,
)


class TestPolygonStyles:
    """Tests for polygon style lookups."""

    @pytest.mark.parametrize("category", list(Category))
    @pytest.mark.parametrize("severity", list(SeverityLevel))
    def test_every_combination_has_a_style(self, category, severity):
        """Every category and severity pair should resolve to a style."""
        style = polygon_style(category, severity)

        assert style.color.startswith("#")
        assert style.fill_color == style.color

    def test_known_colors(self):
        """Weed and failure palettes should match the dashboard."""
        assert polygon_style(Category.WEED, SeverityLevel.HIGH).color == "#F44336"
        assert polygon_style(Category.WEED, SeverityLevel.LOW).color == "#4CAF50"
        assert polygon_style(Category.FAILURE, SeverityLevel.MEDIUM).color == "#FF5722"

    def test_highlighted_style(self):
        """Highlighted style keeps the color and thickens the outline."""
        base = polygon_style(Category.FAILURE, SeverityLevel.HIGH)
        highlighted = highlighted_style(Category.FAILURE, SeverityLevel.HIGH)

        assert highlighted.color == base.color
        assert highlighted.weight == 4
        assert highlighted.fill_opacity == 0.7
        assert highlighted.opacity == 1.0
        assert base.weight == 2

    def test_marker_colors(self):
        """Each category should have its own marker color."""
        colors = {marker_color(category) for category in Category}

        assert len(colors) == len(Category)
        assert marker_color(Category.WEED) == "#ef4444"


class TestStyleTable:
    """Tests for the serialized style table."""

    def test_table_shape(self):
        """The table should be keyed by category, then severity, then variant."""
        table = style_table()

        assert set(table) == {"weed", "failure", "vigor"}
        assert set(table["weed"]) == {"low", "medium", "high"}
        assert table["weed"]["high"]["default"]["color"] == "#F44336"
        assert table["weed"]["high"]["highlighted"]["weight"] == 4

    def test_boundary_color(self):
        assert FARM_BOUNDARY_COLOR == "#3b82f6"
