from pydantic import BaseModel, ConfigDict


class MovieCardPublic(BaseModel):
    id: int
    title: str
    poster_url: str
    rating: str
    language: str
    year: str
    model_config = ConfigDict(from_attributes=True)
