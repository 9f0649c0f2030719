import asyncio
from typing import Coroutine, List, Optional, Set

from movie_discovery.applications.services.debouncer import Debouncer
from movie_discovery.applications.use_cases.trending.get_trending import GetTrendingUseCase
from movie_discovery.applications.use_cases.trending.record_search import RecordSearchUseCase
from movie_discovery.domain.exceptions import CatalogUnavailableError
from movie_discovery.domain.models.movie import MovieSummary
from movie_discovery.domain.models.search_state import SearchState
from movie_discovery.domain.models.trend import TrendCounter
from movie_discovery.domain.ports.repositories.catalog_repository import CatalogRepository
from movie_discovery.domain.ports.services.logger import LoggerPort

GENERIC_FETCH_ERROR = "Error fetching movies. Please try again later."


class SearchOrchestrator:
    """Application service driving search, results and trending state.

    All state lives on one event loop. `set_query` is the only mutator; the
    rest is read through properties or `state()`. Typing is debounced, each
    settled query triggers one catalog fetch, and successful user searches
    are recorded in the trend store by a detached task.
    """

    def __init__(
        self,
        catalog_repository: CatalogRepository,
        record_search: RecordSearchUseCase,
        get_trending: GetTrendingUseCase,
        logger: LoggerPort,
        debounce_seconds: float = 0.5,
        trending_limit: int = 5,
    ):
        self.catalog_repository = catalog_repository
        self.record_search = record_search
        self.get_trending = get_trending
        self.logger = logger
        self.trending_limit = trending_limit

        self._raw_query = ""
        self._debounced_query = ""
        self._loading = False
        self._error: Optional[str] = None
        self._movies: List[MovieSummary] = []
        self._trending: List[TrendCounter] = []

        self._debouncer: Debouncer[str] = Debouncer(debounce_seconds, self._on_query_settled)
        self._tasks: Set[asyncio.Task] = set()
        self._latest_request = 0
        self._started = False

    @property
    def raw_query(self) -> str:
        return self._raw_query

    @property
    def debounced_query(self) -> str:
        return self._debounced_query

    @property
    def loading(self) -> bool:
        return self._loading

    @property
    def error(self) -> Optional[str]:
        return self._error

    @property
    def movies(self) -> List[MovieSummary]:
        return list(self._movies)

    @property
    def trending(self) -> List[TrendCounter]:
        return list(self._trending)

    def state(self) -> SearchState:
        return SearchState(
            raw_query=self._raw_query,
            debounced_query=self._debounced_query,
            loading=self._loading,
            error=self._error,
            movies=self.movies,
            trending=self.trending,
        )

    def start(self) -> None:
        """Runs the mount effects: the initial fetch and the one-time trending load"""
        if self._started:
            return
        self._started = True
        self.logger.info("Starting search orchestrator")
        self._spawn(self._fetch_movies(self._debounced_query))
        self._spawn(self._load_trending())

    def set_query(self, query: str) -> None:
        self._raw_query = query
        self._debouncer.push(query)

    async def drain(self) -> None:
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

    async def close(self) -> None:
        self._debouncer.cancel()
        for task in list(self._tasks):
            task.cancel()
        await self.drain()

    def _on_query_settled(self, query: str) -> None:
        if query == self._debounced_query:
            return
        self._debounced_query = query
        self._spawn(self._fetch_movies(query))

    def _spawn(self, coroutine: Coroutine) -> asyncio.Task:
        task = asyncio.get_running_loop().create_task(coroutine)
        self._tasks.add(task)
        task.add_done_callback(self._on_task_done)
        return task

    def _on_task_done(self, task: asyncio.Task) -> None:
        self._tasks.discard(task)
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            self.logger.error("Background task failed: %r", exc, exc_info=exc)

    def _is_stale(self, request_id: int) -> bool:
        return request_id != self._latest_request

    async def _fetch_movies(self, query: str) -> None:
        self._latest_request += 1
        request_id = self._latest_request

        self._loading = True
        self._error = None

        try:
            result = await self.catalog_repository.fetch_movies(query)
        except CatalogUnavailableError as e:
            if not self._is_stale(request_id):
                self.logger.error("Error fetching movies for %r: %s", query, e)
                self._error = GENERIC_FETCH_ERROR
            return
        finally:
            if not self._is_stale(request_id):
                self._loading = False

        if self._is_stale(request_id):
            self.logger.debug("Dropping stale catalog response for %r", query)
            return

        if not result.ok:
            self._movies = []
            self._error = result.error
            return

        self._movies = result.movies

        if query and result.movies:
            self._spawn(self.record_search.execute(query, result.movies[0]))

    async def _load_trending(self) -> None:
        self._trending = await self.get_trending.execute(self.trending_limit)
