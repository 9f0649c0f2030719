from typing import List, Optional
from unittest.mock import AsyncMock, Mock

import pytest

from movie_discovery.applications.use_cases.trending.get_trending import GetTrendingUseCase
from movie_discovery.applications.use_cases.trending.record_search import RecordSearchUseCase
from movie_discovery.domain.models.movie import MovieSummary
from movie_discovery.domain.models.trend import TrendCounter
from movie_discovery.domain.ports.repositories.catalog_repository import CatalogRepository
from movie_discovery.domain.ports.repositories.trend_repository import TrendRepository
from movie_discovery.domain.ports.services.logger import LoggerPort
from movie_discovery.infrastructure.adapters.repositories.in_memory_trend_repository import (
    InMemoryTrendRepository,
)

IMAGE_BASE_URL = "https://image.tmdb.org/t/p/w500"


def make_movie(
    id: int = 603,
    title: Optional[str] = "The Matrix",
    poster_path: Optional[str] = "/matrix.jpg",
    vote_average: Optional[float] = 8.2,
    release_date: Optional[str] = "1999-03-31",
    original_language: Optional[str] = "en",
) -> MovieSummary:
    return MovieSummary(
        id=id,
        title=title,
        poster_path=poster_path,
        vote_average=vote_average,
        release_date=release_date,
        original_language=original_language,
    )


def make_counter(search_term: str, count: int, movie_id: int = 1, id: Optional[str] = None) -> TrendCounter:
    return TrendCounter(
        id=id,
        search_term=search_term,
        count=count,
        movie_id=movie_id,
        poster_url=f"{IMAGE_BASE_URL}/{search_term}.jpg",
    )


@pytest.fixture
def mock_logger():
    return Mock(spec=LoggerPort)


@pytest.fixture
def mock_catalog_repository():
    return AsyncMock(spec=CatalogRepository)


@pytest.fixture
def mock_trend_repository():
    return AsyncMock(spec=TrendRepository)


@pytest.fixture
def in_memory_trend_repository():
    return InMemoryTrendRepository()


@pytest.fixture
def mock_record_search():
    return AsyncMock(spec=RecordSearchUseCase)


@pytest.fixture
def mock_get_trending():
    use_case = AsyncMock(spec=GetTrendingUseCase)
    use_case.execute.return_value = []
    return use_case


@pytest.fixture
def sample_movies() -> List[MovieSummary]:
    return [
        make_movie(id=603, title="The Matrix"),
        make_movie(id=604, title="The Matrix Reloaded", release_date="2003-05-15"),
        make_movie(id=605, title="The Matrix Revolutions", release_date="2003-11-05"),
        make_movie(id=624860, title="The Matrix Resurrections", release_date="2021-12-16"),
        make_movie(id=55931, title="The Animatrix", poster_path=None, vote_average=None),
    ]


@pytest.fixture
def movie_factory():
    return make_movie


@pytest.fixture
def counter_factory():
    return make_counter
