import uuid
from typing import Dict, List, Optional

from movie_discovery.domain.exceptions import TrendStoreError
from movie_discovery.domain.models.trend import TrendCounter
from movie_discovery.domain.ports.repositories.trend_repository import TrendRepository


class InMemoryTrendRepository(TrendRepository):
    def __init__(self, counters: Optional[List[TrendCounter]] = None):
        self._documents: Dict[str, TrendCounter] = {}
        for counter in counters or []:
            self._insert(counter)

    def _insert(self, counter: TrendCounter) -> TrendCounter:
        stored = counter.model_copy(update={"id": counter.id or uuid.uuid4().hex})
        self._documents[stored.id] = stored
        return stored

    async def find_by_search_term(self, search_term: str) -> Optional[TrendCounter]:
        for counter in self._documents.values():
            if counter.search_term == search_term:
                return counter
        return None

    async def create(self, counter: TrendCounter) -> TrendCounter:
        return self._insert(counter.model_copy(update={"id": None}))

    async def update_count(self, counter_id: str, count: int) -> TrendCounter:
        counter = self._documents.get(counter_id)
        if counter is None:
            raise TrendStoreError(f"Trend counter {counter_id} not found")
        self._documents[counter_id] = counter.model_copy(update={"count": count})
        return self._documents[counter_id]

    async def list_top(self, limit: int = 5) -> List[TrendCounter]:
        # sorted() is stable, ties keep insertion order
        ranked = sorted(self._documents.values(), key=lambda counter: counter.count, reverse=True)
        return ranked[:limit]

    def all(self) -> List[TrendCounter]:
        return list(self._documents.values())
