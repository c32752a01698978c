"""
Shared pytest fixtures for all tests.

This module provides common fixtures including:
- Polygon ring builders
- Sample raw payloads
- Sample normalized polygons
- Mock data source client
- FastAPI test client
"""
import pytest
from unittest.mock import AsyncMock
from fastapi.testclient import TestClient

from farmstats.main import app
from farmstats.domain.models import NormalizedPolygon
from farmstats.infrastructure.data_source_client import DataSourceClient


def square(lat: float, lng: float, size: float) -> list[tuple[float, float]]:
    """Closed square ring with south-west corner (lat, lng), as (lat, lng) pairs."""
    return [
        (lat, lng),
        (lat, lng + size),
        (lat + size, lng + size),
        (lat + size, lng),
        (lat, lng),
    ]


# ============================================================
# Sample Data Fixtures
# ============================================================

@pytest.fixture
def sample_raw_payload() -> list[dict]:
    """Raw weed payload as served by the data source, with one malformed record."""
    return [
        {
            "nome": "North strip",
            "coordenadas": [
                {"latitude": lat, "longitude": lng}
                for lat, lng in square(-24.7660, -53.6130, 0.001)
            ],
        },
        {"nome": "Broken", "coordenadas": []},
        {
            "coordenadas": [
                {"latitude": lat, "longitude": lng}
                for lat, lng in square(-24.7650, -53.6120, 0.002)
            ],
        },
    ]


@pytest.fixture
def sample_polygons() -> list[NormalizedPolygon]:
    """Three squares of side 1x, 2x and 3x (areas roughly 1:4:9)."""
    return [
        NormalizedPolygon(name="Small", coordinates=square(-24.7660, -53.6130, 0.001)),
        NormalizedPolygon(name="", coordinates=square(-24.7640, -53.6110, 0.002)),
        NormalizedPolygon(name="Large", coordinates=square(-24.7620, -53.6090, 0.003)),
    ]


# ============================================================
# Mock Data Source Client Fixtures
# ============================================================

@pytest.fixture
def mock_data_client(sample_raw_payload):
    """Create a mock data source client."""
    mock_client = AsyncMock(spec=DataSourceClient)
    mock_client.fetch_raw_polygons.return_value = sample_raw_payload
    return mock_client


# ============================================================
# FastAPI Test Client Fixtures
# ============================================================

@pytest.fixture
def test_client() -> TestClient:
    """Create a synchronous test client for FastAPI."""
    return TestClient(app)
