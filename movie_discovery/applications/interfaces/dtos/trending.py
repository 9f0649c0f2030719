from typing import List, Optional

from pydantic import BaseModel


class TrendingMoviePublic(BaseModel):
    rank: int
    id: Optional[str] = None
    search_term: str
    count: int
    movie_id: int
    poster_url: Optional[str] = None


class TrendingList(BaseModel):
    trending: List[TrendingMoviePublic]
