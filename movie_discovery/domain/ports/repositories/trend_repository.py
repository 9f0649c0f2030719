from abc import ABC, abstractmethod
from typing import List, Optional

from movie_discovery.domain.models.trend import TrendCounter


class TrendRepository(ABC):
    @abstractmethod
    async def find_by_search_term(self, search_term: str) -> Optional[TrendCounter]:
        pass

    @abstractmethod
    async def create(self, counter: TrendCounter) -> TrendCounter:
        pass

    @abstractmethod
    async def update_count(self, counter_id: str, count: int) -> TrendCounter:
        pass

    @abstractmethod
    async def list_top(self, limit: int = 5) -> List[TrendCounter]:
        pass
