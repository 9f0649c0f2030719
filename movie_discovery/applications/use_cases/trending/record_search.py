from typing import Optional

from movie_discovery.domain.exceptions import TrendStoreError
from movie_discovery.domain.models.movie import MovieSummary
from movie_discovery.domain.models.trend import TrendCounter
from movie_discovery.domain.ports.repositories.trend_repository import TrendRepository
from movie_discovery.domain.ports.services.logger import LoggerPort


def build_poster_url(image_base_url: str, poster_path: Optional[str]) -> Optional[str]:
    if not poster_path:
        return None
    return f"{image_base_url.rstrip('/')}/{poster_path.lstrip('/')}"


class RecordSearchUseCase:
    """Increments the counter for a search term, creating it on first use.

    Read-then-write without compare-and-swap: concurrent recordings of the
    same term can lose increments or create duplicate counters.
    """

    def __init__(self, trend_repository: TrendRepository, image_base_url: str, logger: LoggerPort):
        self.trend_repository = trend_repository
        self.image_base_url = image_base_url
        self.logger = logger

    async def execute(self, search_term: str, first_result: MovieSummary) -> None:
        try:
            existing = await self.trend_repository.find_by_search_term(search_term)

            if existing:
                await self.trend_repository.update_count(existing.id, existing.count + 1)
                self.logger.debug("Trend counter for %r is now %s", search_term, existing.count + 1)
                return

            await self.trend_repository.create(
                TrendCounter(
                    search_term=search_term,
                    count=1,
                    movie_id=first_result.id,
                    poster_url=build_poster_url(self.image_base_url, first_result.poster_path),
                )
            )
            self.logger.debug("Trend counter created for %r", search_term)
        except TrendStoreError:
            self.logger.exception("Failed to record search %r", search_term)
