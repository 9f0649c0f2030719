from typing import Any

import httpx
from pydantic import ValidationError

from movie_discovery.domain.exceptions import CatalogUnavailableError
from movie_discovery.domain.models.catalog_result import CatalogResult
from movie_discovery.domain.models.movie import MovieSummary
from movie_discovery.domain.ports.repositories.catalog_repository import CatalogRepository
from movie_discovery.domain.ports.services.logger import LoggerPort

FAILED_TO_FETCH = "Failed to fetch movies"


def is_failure_flag(value: Any) -> bool:
    """The catalog signals application failures with Response set to "False" or false"""
    if isinstance(value, bool):
        return value is False
    return isinstance(value, str) and value.strip().lower() == "false"


class TMDBCatalogRepository(CatalogRepository):
    def __init__(self, client: httpx.AsyncClient, base_url: str, api_key: str, logger: LoggerPort):
        self.client = client
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.logger = logger

    @property
    def headers(self) -> dict[str, str]:
        return {"Accept": "application/json", "Authorization": f"Bearer {self.api_key}"}

    def _request_for(self, query: str) -> tuple[str, dict[str, str]]:
        if query:
            return f"{self.base_url}/search/movie", {"query": query}
        return f"{self.base_url}/discover/movie", {"sort_by": "popularity.desc"}

    async def fetch_movies(self, query: str = "") -> CatalogResult:
        url, params = self._request_for(query)
        self.logger.debug("GET %s params=%s", url, params)

        try:
            response = await self.client.get(url, params=params, headers=self.headers, timeout=None)
        except httpx.HTTPError as e:
            raise CatalogUnavailableError(f"Catalog request failed: {e}") from e

        if not response.is_success:
            self.logger.warning("Catalog responded with status %s for %s", response.status_code, url)
            return CatalogResult.failure(FAILED_TO_FETCH)

        try:
            data = response.json()
        except ValueError as e:
            raise CatalogUnavailableError("Catalog returned a body that is not JSON") from e

        if not isinstance(data, dict):
            raise CatalogUnavailableError("Catalog returned an unexpected body")

        if is_failure_flag(data.get("Response")):
            return CatalogResult.failure(data.get("Error") or FAILED_TO_FETCH)

        results = data.get("results") or []
        if not isinstance(results, list):
            raise CatalogUnavailableError("Catalog returned results that are not a list")

        try:
            movies = [MovieSummary.model_validate(item) for item in results]
        except ValidationError as e:
            raise CatalogUnavailableError(f"Catalog returned malformed results: {e}") from e

        return CatalogResult.success(movies)
