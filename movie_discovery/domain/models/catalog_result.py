from typing import List, Optional

from pydantic import BaseModel, Field

from movie_discovery.domain.models.movie import MovieSummary


class CatalogResult(BaseModel):
    """Outcome of one catalog request: either movies or an error message"""

    movies: List[MovieSummary] = Field(default_factory=list)
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, movies: List[MovieSummary]) -> "CatalogResult":
        return cls(movies=movies)

    @classmethod
    def failure(cls, message: str) -> "CatalogResult":
        return cls(error=message)
