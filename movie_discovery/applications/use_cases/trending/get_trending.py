from typing import List

from movie_discovery.domain.exceptions import TrendStoreError
from movie_discovery.domain.models.trend import TrendCounter
from movie_discovery.domain.ports.repositories.trend_repository import TrendRepository
from movie_discovery.domain.ports.services.logger import LoggerPort


class GetTrendingUseCase:
    def __init__(self, trend_repository: TrendRepository, logger: LoggerPort):
        self.trend_repository = trend_repository
        self.logger = logger

    async def execute(self, limit: int = 5) -> List[TrendCounter]:
        try:
            return await self.trend_repository.list_top(limit)
        except TrendStoreError:
            self.logger.exception("Failed to load trending searches")
            return []
