from typing import Annotated

import httpx
from fastapi import Depends, Request

from movie_discovery.applications.services.search_dto_mapper import SearchDtoMapper
from movie_discovery.applications.services.search_orchestrator import SearchOrchestrator
from movie_discovery.applications.use_cases.trending.get_trending import GetTrendingUseCase
from movie_discovery.applications.use_cases.trending.record_search import RecordSearchUseCase
from movie_discovery.domain.exceptions import ConfigurationError
from movie_discovery.domain.ports.repositories.catalog_repository import CatalogRepository
from movie_discovery.domain.ports.repositories.trend_repository import TrendRepository
from movie_discovery.domain.ports.services.logger import LoggerPort
from movie_discovery.infrastructure.adapters.repositories.appwrite_trend_repository import (
    AppwriteTrendRepository,
)
from movie_discovery.infrastructure.adapters.repositories.in_memory_trend_repository import (
    InMemoryTrendRepository,
)
from movie_discovery.infrastructure.adapters.repositories.tmdb_catalog_repository import (
    TMDBCatalogRepository,
)
from movie_discovery.infrastructure.config.settings import SearchSettings, Settings
from movie_discovery.infrastructure.logging.std_logger_adapter import StdLoggerAdapter


def get_logger() -> LoggerPort:
    return StdLoggerAdapter(__name__)


def get_settings() -> Settings:
    return Settings()


def get_search_settings() -> SearchSettings:
    return SearchSettings()


def build_catalog_repository(settings: Settings, client: httpx.AsyncClient, logger: LoggerPort) -> CatalogRepository:
    return TMDBCatalogRepository(
        client=client,
        base_url=settings.TMDB_API_BASE_URL,
        api_key=settings.TMDB_API_KEY,
        logger=logger,
    )


def build_trend_repository(settings: Settings, client: httpx.AsyncClient) -> TrendRepository:
    if settings.TREND_STORE_BACKEND == "memory":
        return InMemoryTrendRepository()

    missing = [
        name
        for name in ("APPWRITE_PROJECT_ID", "APPWRITE_DATABASE_ID", "APPWRITE_COLLECTION_ID")
        if not getattr(settings, name)
    ]
    if missing:
        raise ConfigurationError(f"Appwrite trend store requires {', '.join(missing)}")

    return AppwriteTrendRepository(
        client=client,
        endpoint=settings.APPWRITE_ENDPOINT,
        project_id=settings.APPWRITE_PROJECT_ID,
        database_id=settings.APPWRITE_DATABASE_ID,
        collection_id=settings.APPWRITE_COLLECTION_ID,
        api_key=settings.APPWRITE_API_KEY,
    )


def build_search_orchestrator(
    settings: Settings,
    search_settings: SearchSettings,
    client: httpx.AsyncClient,
    logger: LoggerPort,
) -> SearchOrchestrator:
    trend_repository = build_trend_repository(settings, client)
    return SearchOrchestrator(
        catalog_repository=build_catalog_repository(settings, client, logger),
        record_search=RecordSearchUseCase(trend_repository, settings.TMDB_IMAGE_BASE_URL, logger),
        get_trending=GetTrendingUseCase(trend_repository, logger),
        logger=logger,
        debounce_seconds=search_settings.debounce_seconds,
        trending_limit=search_settings.trending_limit,
    )


def get_search_orchestrator(request: Request) -> SearchOrchestrator:
    return request.app.state.search_orchestrator


def get_search_dto_mapper(settings: Annotated[Settings, Depends(get_settings)]) -> SearchDtoMapper:
    return SearchDtoMapper(image_base_url=settings.TMDB_IMAGE_BASE_URL)
