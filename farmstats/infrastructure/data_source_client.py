"""
Infrastructure layer: Polygon data source client with retry logic.
"""
import logging
from typing import Any, Optional
import httpx
from tenacity import (
    retry,
    stop_after_attempt,
    wait_exponential,
    retry_if_exception_type,
)

from farmstats.config import settings
from farmstats.domain.models import Category
from farmstats.infrastructure.api_constants import APIConstants, DataSourceEndpoints

logger = logging.getLogger(__name__)


class DataSourceError(Exception):
    """Custom exception for data source errors."""

    def __init__(self, message: str, status_code: int = 502):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class DataSourceClient:
    """
    Client for the server hosting detection polygon files.
    Implements retry logic with exponential backoff.
    """

    def __init__(self):
        """Initialize the client with configuration."""
        self.base_url = settings.data_source_base_url
        headers = {"accept": APIConstants.CONTENT_TYPE_JSON}
        if settings.data_source_api_key:
            headers["Authorization"] = f"Bearer {settings.data_source_api_key}"
        self.client = httpx.AsyncClient(
            base_url=self.base_url,
            headers=headers,
            timeout=settings.data_source_timeout,
        )

    async def __aenter__(self) -> "DataSourceClient":
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.close()

    async def close(self):
        """Close the HTTP client."""
        await self.client.aclose()

    @retry(
        stop=stop_after_attempt(settings.max_retry_attempts),
        wait=wait_exponential(
            multiplier=settings.retry_backoff_multiplier,
            min=settings.retry_min_wait,
            max=settings.retry_max_wait,
        ),
        retry=retry_if_exception_type((httpx.HTTPStatusError, httpx.RequestError)),
        reraise=True,
    )
    async def _request_with_retry(self, method: str, endpoint: str, **kwargs) -> Any:
        response = await self.client.request(method, endpoint, **kwargs)
        # Retry on server errors (5xx)
        if response.status_code >= 500:
            logger.warning(f"Data source returned {response.status_code} for {endpoint}, retrying")
            response.raise_for_status()
        # Don't retry on client errors (4xx)
        if response.is_error:
            raise DataSourceError(
                f"Data source request failed: {response.status_code} - {response.text}",
                status_code=response.status_code,
            )
        try:
            return response.json()
        except ValueError as e:
            raise DataSourceError(f"Data source returned invalid JSON for {endpoint}: {e}") from e

    async def _make_request(
        self,
        method: str,
        endpoint: str,
        **kwargs
    ) -> Any:
        """
        Make an HTTP request with retry logic.

        Args:
            method: HTTP method (GET, POST, etc.)
            endpoint: Endpoint path
            **kwargs: Additional arguments for the request

        Returns:
            Decoded JSON body

        Raises:
            DataSourceError: If the request fails after retries
        """
        try:
            return await self._request_with_retry(method, endpoint, **kwargs)
        except httpx.HTTPStatusError as e:
            raise DataSourceError(
                f"Data source request failed: {e.response.status_code} - {e.response.text}",
                status_code=e.response.status_code,
            ) from e
        except httpx.RequestError as e:
            raise DataSourceError(f"Data source request error: {str(e)}", status_code=503) from e

    async def fetch_raw_polygons(self, category: Category) -> Any:
        """
        Fetch the raw polygon payload of a category.

        The payload is returned as decoded, without validation.

        Args:
            category: Detection category

        Returns:
            Decoded JSON payload

        Raises:
            DataSourceError: If the category has no source or the request fails
        """
        endpoint = DataSourceEndpoints.for_category(category)
        if endpoint is None:
            raise DataSourceError(
                f"No data source configured for category '{category.value}'",
                status_code=404,
            )
        logger.info(f"Fetching {category.value} polygons from {endpoint}")
        return await self._make_request("GET", endpoint)


# Singleton instance
_data_source_client: Optional[DataSourceClient] = None


def get_data_source_client() -> DataSourceClient:
    """
    Get or create the singleton data source client instance.

    Returns:
        DataSourceClient instance
    """
    global _data_source_client
    if _data_source_client is None:
        _data_source_client = DataSourceClient()
    return _data_source_client
