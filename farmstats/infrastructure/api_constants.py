"""
Data source endpoint constants and configuration.

This module maps detection categories to the paths serving their polygon
files. Centralizing these values makes it easy to swap out data files.
"""
from typing import Optional

from farmstats.config import settings
from farmstats.domain.models import Category


# Polygon Data Source Endpoints
class DataSourceEndpoints:
    """Paths of the polygon files per category."""

    @classmethod
    def paths(cls) -> dict[Category, str]:
        """
        Category to path mapping from settings.

        Vigor sectors are configured locally and have no remote file.

        Returns:
            Mapping of category to endpoint path
        """
        return {
            Category.WEED: settings.weed_data_path,
            Category.FAILURE: settings.failure_data_path,
        }

    @classmethod
    def for_category(cls, category: Category) -> Optional[str]:
        """
        Get the endpoint path serving a category's polygons.

        Args:
            category: Detection category

        Returns:
            Endpoint path, or None if the category has no remote source
        """
        return cls.paths().get(category)


# API Configuration Constants
class APIConstants:
    """General API configuration constants."""

    # HTTP Headers
    CONTENT_TYPE_JSON = "application/json"
