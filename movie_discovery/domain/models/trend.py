from typing import Optional

from pydantic import BaseModel, Field


class TrendCounter(BaseModel):
    search_term: str
    count: int = Field(default=1, ge=1)
    movie_id: int
    poster_url: Optional[str] = None
    id: Optional[str] = None
