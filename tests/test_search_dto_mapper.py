import pytest

from movie_discovery.applications.services.search_dto_mapper import SearchDtoMapper
from movie_discovery.domain.models.search_state import SearchState

IMAGE_BASE_URL = "https://image.tmdb.org/t/p/w500"


class TestSearchDtoMapper:
    @pytest.fixture
    def mapper(self):
        return SearchDtoMapper(image_base_url=IMAGE_BASE_URL)

    def test_movie_card_formats_display_fields(self, mapper, movie_factory):
        card = mapper.to_movie_card(
            movie_factory(id=603, title="The Matrix", poster_path="/m.jpg", vote_average=8.216,
                          release_date="1999-03-31", original_language="en")
        )

        assert card.id == 603
        assert card.title == "The Matrix"
        assert card.poster_url == "https://image.tmdb.org/t/p/w500/m.jpg"
        assert card.rating == "8.2"
        assert card.language == "en"
        assert card.year == "1999"

    def test_movie_card_falls_back_when_fields_are_missing(self, mapper, movie_factory):
        card = mapper.to_movie_card(movie_factory(poster_path=None, vote_average=None, release_date=""))

        assert card.poster_url == "/no-movie.png"
        assert card.rating == "N/A"
        assert card.year == "N/A"

    def test_movie_card_defaults_null_text_fields(self, mapper, movie_factory):
        card = mapper.to_movie_card(movie_factory(title=None, original_language=None))

        assert card.title == ""
        assert card.language == ""

    def test_zero_rating_is_not_available(self, mapper, movie_factory):
        assert mapper.to_movie_card(movie_factory(vote_average=0.0)).rating == "N/A"

    def test_trending_list_is_ranked_from_one(self, counter_factory):
        ranked = SearchDtoMapper.to_trending_list(
            [counter_factory("matrix", 9, id="doc-1"), counter_factory("alien", 4, id="doc-2")]
        )

        assert [(item.rank, item.search_term, item.count) for item in ranked] == [(1, "matrix", 9), (2, "alien", 4)]

    def test_search_state_public(self, mapper, movie_factory, counter_factory):
        state = SearchState(
            raw_query="matri",
            debounced_query="matrix",
            loading=True,
            error=None,
            movies=[movie_factory()],
            trending=[counter_factory("matrix", 2, id="doc-1")],
        )

        public = mapper.to_search_state_public(state)

        assert public.query == "matri"
        assert public.debounced_query == "matrix"
        assert public.loading is True
        assert len(public.movies) == 1
        assert public.trending[0].rank == 1
