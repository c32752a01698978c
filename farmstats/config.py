"""
Application configuration using Pydantic settings.
"""
from typing import Any
from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Polygon Data Source Configuration
    data_source_base_url: str = Field(
        default="http://localhost:8080",
        description="Base URL of the server hosting the detection polygon files"
    )
    data_source_api_key: str = Field(
        default="",
        description="Optional bearer token for the data source"
    )
    weed_data_path: str = Field(
        default="/data/ervas-daninhas.json",
        description="Path serving weed infestation polygons"
    )
    failure_data_path: str = Field(
        default="/data/falhas.json",
        description="Path serving planting failure polygons"
    )
    data_source_timeout: float = Field(
        default=30.0,
        description="Timeout in seconds for data source requests"
    )

    # Retry Configuration
    max_retry_attempts: int = Field(
        default=3,
        description="Maximum number of retry attempts for data source calls"
    )
    retry_backoff_multiplier: int = Field(
        default=1,
        description="Multiplier for exponential backoff"
    )
    retry_min_wait: int = Field(
        default=4,
        description="Minimum wait time in seconds between retries"
    )
    retry_max_wait: int = Field(
        default=10,
        description="Maximum wait time in seconds between retries"
    )

    # Sector Labelling
    weed_sector_prefix: str = Field(default="W", description="Identifier prefix for weed sectors")
    weed_sector_label: str = Field(default="Weed Sector", description="Fallback name for unnamed weed sectors")
    failure_sector_prefix: str = Field(default="F", description="Identifier prefix for failure sectors")
    failure_sector_label: str = Field(default="Failure", description="Fallback name for unnamed failure sectors")
    vigor_sector_prefix: str = Field(default="V", description="Identifier prefix for vigor sectors")
    vigor_sector_label: str = Field(default="Vigor Sector", description="Fallback name for unnamed vigor sectors")

    # Farm Layout
    farm_boundary: list[tuple[float, float]] = Field(
        default=[
            (-24.76903205, -53.61433973),
            (-24.76660228, -53.61436247),
            (-24.76657223, -53.61019779),
            (-24.76160818, -53.61017136),
            (-24.76165575, -53.61566249),
            (-24.76570689, -53.6156352),
            (-24.76572836, -53.61723939),
            (-24.76839536, -53.61722885),
            (-24.76903205, -53.61433973),
        ],
        description="Farm boundary as (latitude, longitude) pairs"
    )
    default_map_center: tuple[float, float] = Field(
        default=(-23.5505, -46.6333),
        description="Map center used when no farm boundary is configured"
    )
    vigor_sectors: list[dict[str, Any]] = Field(
        default=[
            {"name": "Sector F-1", "area": 18.3, "severity": "high", "percentage": 82.5,
             "center": {"lat": -23.5505, "lng": -46.6333}},
            {"name": "Sector F-2", "area": 14.7, "severity": "medium", "percentage": 65.3,
             "center": {"lat": -23.5515, "lng": -46.6343}},
            {"name": "Sector G-1", "area": 9.2, "severity": "low", "percentage": 42.8,
             "center": {"lat": -23.5525, "lng": -46.6353}},
        ],
        description="Vigor sectors supplied by the agronomy team (no remote source)"
    )
    vigor_index: float = Field(
        default=78.5,
        description="Farm-wide vigor index in percent used by the report summary"
    )
    report_chart_size: int = Field(
        default=3,
        description="Number of largest sectors listed per category in report charts"
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR)"
    )

    # CORS Configuration
    cors_origins: list[str] = Field(
        default=["*"],
        description="Allowed CORS origins (use specific origins in production)"
    )

    # Rate Limiting
    rate_limit_requests: int = Field(
        default=100,
        description="Maximum requests per minute per client"
    )

    # Application Settings
    app_name: str = Field(
        default="Farm Sector Statistics",
        description="Application name"
    )
    app_version: str = Field(
        default="1.0.0",
        description="Application version"
    )
    debug: bool = Field(
        default=False,
        description="Debug mode"
    )

    class Config:
        env_file = ".env"
        case_sensitive = False


# Global settings instance
settings = Settings()
