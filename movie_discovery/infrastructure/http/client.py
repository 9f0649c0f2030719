from typing import Optional

import httpx


class _ClientStore:
    client: Optional[httpx.AsyncClient] = None


def get_http_client() -> httpx.AsyncClient:
    if _ClientStore.client is None:
        _ClientStore.client = httpx.AsyncClient(timeout=None)
    return _ClientStore.client


async def close_http_client() -> None:
    if _ClientStore.client is not None:
        await _ClientStore.client.aclose()
        _ClientStore.client = None
