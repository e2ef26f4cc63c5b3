from __future__ import annotations

from typing import Any

import httpx

from .config_types import ClientConfig
from .errors_utils import decode_body
from .transport import AsyncTransport, Transport


class Fetcher:
    """GET-and-unwrap facade over a shared Transport.

    ``fetch`` returns only the decoded body. Failures surface as ApiError
    (server answered, ``.data`` is its body) or NetworkError (no answer).
    """

    def __init__(self, transport: Transport):
        self._t = transport

    @property
    def transport(self) -> Transport:
        return self._t

    @property
    def client(self) -> httpx.Client:
        """Underlying client, for methods other than GET."""
        return self._t.client

    def fetch(self, url: str | httpx.URL, **options: Any) -> Any:
        return decode_body(self._t.get(url, **options))

    def close(self) -> None:
        self._t.close()

    def __enter__(self) -> "Fetcher":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


class AsyncFetcher:
    def __init__(self, transport: AsyncTransport):
        self._t = transport

    @property
    def transport(self) -> AsyncTransport:
        return self._t

    @property
    def client(self) -> httpx.AsyncClient:
        return self._t.client

    async def fetch(self, url: str | httpx.URL, **options: Any) -> Any:
        return decode_body(await self._t.get(url, **options))

    async def aclose(self) -> None:
        await self._t.aclose()

    async def __aenter__(self) -> "AsyncFetcher":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()


def create_fetcher(cfg: ClientConfig | None = None, **transport_kwargs: Any) -> Fetcher:
    """Startup helper: one Fetcher per application, config from the environment by default."""
    return Fetcher(Transport(cfg or ClientConfig.from_env(), **transport_kwargs))


def create_async_fetcher(cfg: ClientConfig | None = None, **transport_kwargs: Any) -> AsyncFetcher:
    return AsyncFetcher(AsyncTransport(cfg or ClientConfig.from_env(), **transport_kwargs))
