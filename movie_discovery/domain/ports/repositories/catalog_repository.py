from abc import ABC, abstractmethod

from movie_discovery.domain.models.catalog_result import CatalogResult


class CatalogRepository(ABC):
    @abstractmethod
    async def fetch_movies(self, query: str = "") -> CatalogResult:
        pass
