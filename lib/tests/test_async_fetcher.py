from __future__ import annotations

import asyncio

import httpx
import pytest

from postboard_client import ApiError, AsyncFetcher, ClientConfig, InvalidRequestError, NetworkError, create_async_fetcher
from postboard_client.transport import AsyncTransport


def _fetcher(handler) -> AsyncFetcher:
    cfg = ClientConfig(base_url="http://api.test")
    return AsyncFetcher(AsyncTransport(cfg, transport=httpx.MockTransport(handler)))


@pytest.mark.asyncio
async def test_async_fetch_returns_body() -> None:
    async with _fetcher(lambda request: httpx.Response(200, json={"items": [1, 2, 3]})) as f:
        assert await f.fetch("/items") == {"items": [1, 2, 3]}


@pytest.mark.asyncio
async def test_async_fetch_raises_server_error_body() -> None:
    async with _fetcher(lambda request: httpx.Response(404, json={"error": "not found"})) as f:
        with pytest.raises(ApiError) as exc:
            await f.fetch("/items")

    assert exc.value.data == {"error": "not found"}


@pytest.mark.asyncio
async def test_async_fetch_transport_failure() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    async with _fetcher(handler) as f:
        with pytest.raises(NetworkError):
            await f.fetch("/items")


@pytest.mark.asyncio
async def test_concurrent_fetches_are_independent() -> None:
    async def handler(request: httpx.Request) -> httpx.Response:
        await asyncio.sleep(0)
        return httpx.Response(200, json={"path": request.url.path, "tag": request.headers.get("x-tag")})

    async with _fetcher(handler) as f:
        results = await asyncio.gather(
            *(f.fetch(f"/posts/{i}", headers={"X-Tag": str(i)}) for i in range(5))
        )

    assert results == [{"path": f"/posts/{i}", "tag": str(i)} for i in range(5)]


@pytest.mark.asyncio
async def test_create_async_fetcher_reads_env(monkeypatch) -> None:
    monkeypatch.setenv("POSTBOARD_API_URL", "http://env.test")
    seen: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(str(request.url))
        return httpx.Response(200, json=[])

    f = create_async_fetcher(transport=httpx.MockTransport(handler))
    try:
        assert await f.fetch("/posts") == []
    finally:
        await f.aclose()

    assert seen == ["http://env.test/posts"]


@pytest.mark.asyncio
async def test_async_malformed_url_is_client_error() -> None:
    async with _fetcher(lambda request: httpx.Response(200, json={})) as f:
        with pytest.raises(InvalidRequestError):
            await f.fetch("http://[::1")
