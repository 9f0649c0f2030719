from typing import List, Optional

from pydantic import BaseModel

from movie_discovery.applications.interfaces.dtos.movie import MovieCardPublic
from movie_discovery.applications.interfaces.dtos.trending import TrendingMoviePublic


class QuerySchema(BaseModel):
    query: str = ""


class SearchStatePublic(BaseModel):
    query: str
    debounced_query: str
    loading: bool
    error: Optional[str] = None
    movies: List[MovieCardPublic]
    trending: List[TrendingMoviePublic]
