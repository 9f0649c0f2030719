from typing import List, Optional

from pydantic import BaseModel, Field

from movie_discovery.domain.models.movie import MovieSummary
from movie_discovery.domain.models.trend import TrendCounter


class SearchState(BaseModel):
    raw_query: str = ""
    debounced_query: str = ""
    loading: bool = False
    error: Optional[str] = None
    movies: List[MovieSummary] = Field(default_factory=list)
    trending: List[TrendCounter] = Field(default_factory=list)
