import json
from typing import Any, Dict, List, Optional

import httpx
from pydantic import ValidationError

from movie_discovery.domain.exceptions import TrendStoreError
from movie_discovery.domain.models.trend import TrendCounter
from movie_discovery.domain.ports.repositories.trend_repository import TrendRepository

UNIQUE_ID = "unique()"

# Appwrite REST queries are JSON strings passed as repeated `queries[]` parameters,
# the same strings `appwrite.query.Query` builds in the SDKs.


def query_equal(attribute: str, value: Any) -> str:
    return json.dumps({"method": "equal", "attribute": attribute, "values": [value]})


def query_limit(limit: int) -> str:
    return json.dumps({"method": "limit", "values": [limit]})


def query_order_desc(attribute: str) -> str:
    return json.dumps({"method": "orderDesc", "attribute": attribute})


class AppwriteTrendRepository(TrendRepository):
    """Search counters stored in one Appwrite collection, accessed over its REST API"""

    def __init__(
        self,
        client: httpx.AsyncClient,
        endpoint: str,
        project_id: str,
        database_id: str,
        collection_id: str,
        api_key: Optional[str] = None,
    ):
        self.client = client
        self.documents_url = (
            f"{endpoint.rstrip('/')}/databases/{database_id}/collections/{collection_id}/documents"
        )
        self.headers = {"X-Appwrite-Project": project_id, "Content-Type": "application/json"}
        if api_key:
            self.headers["X-Appwrite-Key"] = api_key

    def _to_domain(self, document: Dict[str, Any]) -> TrendCounter:
        if not isinstance(document, dict):
            raise TrendStoreError(f"Malformed trend document: {document!r}")
        try:
            return TrendCounter(
                id=document["$id"],
                search_term=document["searchTerm"],
                count=document["count"],
                movie_id=document["movie_id"],
                poster_url=document.get("poster_url"),
            )
        except (KeyError, ValidationError) as e:
            raise TrendStoreError(f"Malformed trend document: {e}") from e

    def _to_document(self, counter: TrendCounter) -> Dict[str, Any]:
        return {
            "searchTerm": counter.search_term,
            "count": counter.count,
            "movie_id": counter.movie_id,
            "poster_url": counter.poster_url,
        }

    async def _request(self, method: str, url: str, **kwargs) -> Dict[str, Any]:
        try:
            response = await self.client.request(method, url, headers=self.headers, timeout=None, **kwargs)
            response.raise_for_status()
            body = response.json()
        except httpx.HTTPError as e:
            raise TrendStoreError(f"Appwrite {method} {url} failed: {e}") from e
        except ValueError as e:
            raise TrendStoreError(f"Appwrite {method} {url} returned a body that is not JSON") from e

        if not isinstance(body, dict):
            raise TrendStoreError(f"Appwrite {method} {url} returned a body that is not an object")
        return body

    async def _list(self, queries: List[str]) -> List[TrendCounter]:
        params = [("queries[]", query) for query in queries]
        body = await self._request("GET", self.documents_url, params=params)
        documents = body.get("documents", [])
        if not isinstance(documents, list):
            raise TrendStoreError("Appwrite returned documents that are not a list")
        return [self._to_domain(document) for document in documents]

    async def find_by_search_term(self, search_term: str) -> Optional[TrendCounter]:
        documents = await self._list([query_equal("searchTerm", search_term), query_limit(1)])
        return documents[0] if documents else None

    async def create(self, counter: TrendCounter) -> TrendCounter:
        body = await self._request(
            "POST",
            self.documents_url,
            json={"documentId": UNIQUE_ID, "data": self._to_document(counter)},
        )
        return self._to_domain(body)

    async def update_count(self, counter_id: str, count: int) -> TrendCounter:
        body = await self._request(
            "PATCH",
            f"{self.documents_url}/{counter_id}",
            json={"data": {"count": count}},
        )
        return self._to_domain(body)

    async def list_top(self, limit: int = 5) -> List[TrendCounter]:
        return await self._list([query_limit(limit), query_order_desc("count")])
