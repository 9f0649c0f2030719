import asyncio

import pytest
import pytest_asyncio
from fastapi import status
from httpx import ASGITransport, AsyncClient

from movie_discovery.app import app
from movie_discovery.applications.services.search_dto_mapper import SearchDtoMapper
from movie_discovery.applications.services.search_orchestrator import SearchOrchestrator
from movie_discovery.domain.models.catalog_result import CatalogResult
from movie_discovery.infrastructure.config.dependencies import get_search_dto_mapper, get_search_orchestrator

DEBOUNCE = 0.02


class TestSearchAPI:
    @pytest.fixture
    def orchestrator(self, mock_catalog_repository, mock_record_search, mock_get_trending, mock_logger):
        mock_catalog_repository.fetch_movies.return_value = CatalogResult.success([])
        return SearchOrchestrator(
            catalog_repository=mock_catalog_repository,
            record_search=mock_record_search,
            get_trending=mock_get_trending,
            logger=mock_logger,
            debounce_seconds=DEBOUNCE,
        )

    @pytest_asyncio.fixture
    async def client(self, orchestrator):
        app.dependency_overrides[get_search_orchestrator] = lambda: orchestrator
        app.dependency_overrides[get_search_dto_mapper] = lambda: SearchDtoMapper(
            image_base_url="https://image.tmdb.org/t/p/w500"
        )

        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            yield ac

        app.dependency_overrides.clear()
        await orchestrator.close()

    @pytest.mark.asyncio
    async def test_read_root(self, client):
        response = await client.get("/")

        assert response.status_code == status.HTTP_200_OK
        assert "message" in response.json()

    @pytest.mark.asyncio
    async def test_read_initial_state(self, client):
        response = await client.get("/search/")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {
            "query": "",
            "debounced_query": "",
            "loading": False,
            "error": None,
            "movies": [],
            "trending": [],
        }

    @pytest.mark.asyncio
    async def test_set_query_debounces_then_searches(
        self, client, orchestrator, mock_catalog_repository, mock_record_search, sample_movies
    ):
        mock_catalog_repository.fetch_movies.return_value = CatalogResult.success(sample_movies)

        response = await client.put("/search/query", json={"query": "matrix"})

        assert response.status_code == status.HTTP_202_ACCEPTED
        assert response.json()["query"] == "matrix"
        assert response.json()["debounced_query"] == ""

        await asyncio.sleep(DEBOUNCE * 3)
        await orchestrator.drain()

        response = await client.get("/search/")
        data = response.json()
        assert data["debounced_query"] == "matrix"
        assert [movie["id"] for movie in data["movies"]] == [movie.id for movie in sample_movies]
        assert data["movies"][-1]["poster_url"] == "/no-movie.png"
        mock_catalog_repository.fetch_movies.assert_awaited_once_with("matrix")
        mock_record_search.execute.assert_awaited_once_with("matrix", sample_movies[0])

    @pytest.mark.asyncio
    async def test_set_query_rejects_invalid_payload(self, client):
        response = await client.put("/search/query", json={"query": ["not", "a", "string"]})

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_read_trending(self, client, orchestrator, mock_get_trending, counter_factory):
        mock_get_trending.execute.return_value = [
            counter_factory("matrix", 9, id="doc-1"),
            counter_factory("alien", 3, id="doc-2"),
        ]
        orchestrator.start()
        await orchestrator.drain()

        response = await client.get("/trending/")

        assert response.status_code == status.HTTP_200_OK
        trending = response.json()["trending"]
        assert [(item["rank"], item["search_term"]) for item in trending] == [(1, "matrix"), (2, "alien")]
