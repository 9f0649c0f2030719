from typing import List, Optional

from movie_discovery.applications.interfaces.dtos.movie import MovieCardPublic
from movie_discovery.applications.interfaces.dtos.search import SearchStatePublic
from movie_discovery.applications.interfaces.dtos.trending import TrendingMoviePublic
from movie_discovery.applications.use_cases.trending.record_search import build_poster_url
from movie_discovery.domain.models.movie import MovieSummary
from movie_discovery.domain.models.search_state import SearchState
from movie_discovery.domain.models.trend import TrendCounter

NO_POSTER_URL = "/no-movie.png"
NOT_AVAILABLE = "N/A"


class SearchDtoMapper:
    """Service for mapping search state into what the UI renders"""

    def __init__(self, image_base_url: str):
        self.image_base_url = image_base_url

    @staticmethod
    def format_rating(vote_average: Optional[float]) -> str:
        # zero means unrated in the catalog
        return f"{vote_average:.1f}" if vote_average else NOT_AVAILABLE

    @staticmethod
    def release_year(release_date: Optional[str]) -> str:
        return release_date.split("-")[0] if release_date else NOT_AVAILABLE

    def to_movie_card(self, movie: MovieSummary) -> MovieCardPublic:
        return MovieCardPublic(
            id=movie.id,
            title=movie.title or "",
            poster_url=build_poster_url(self.image_base_url, movie.poster_path) or NO_POSTER_URL,
            rating=self.format_rating(movie.vote_average),
            language=movie.original_language or "",
            year=self.release_year(movie.release_date),
        )

    @staticmethod
    def to_trending_list(counters: List[TrendCounter]) -> List[TrendingMoviePublic]:
        return [
            TrendingMoviePublic(
                rank=rank,
                id=counter.id,
                search_term=counter.search_term,
                count=counter.count,
                movie_id=counter.movie_id,
                poster_url=counter.poster_url,
            )
            for rank, counter in enumerate(counters, start=1)
        ]

    def to_search_state_public(self, state: SearchState) -> SearchStatePublic:
        return SearchStatePublic(
            query=state.raw_query,
            debounced_query=state.debounced_query,
            loading=state.loading,
            error=state.error,
            movies=[self.to_movie_card(movie) for movie in state.movies],
            trending=self.to_trending_list(state.trending),
        )
