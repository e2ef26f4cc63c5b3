from __future__ import annotations

import logging
from typing import Any

import httpx

from . import __version__
from .config_types import ClientConfig
from .errors import InvalidRequestError, NetworkError
from .errors_utils import api_error_for

logger = logging.getLogger(__name__)


def _client_kwargs(cfg: ClientConfig) -> dict[str, Any]:
    headers = {"User-Agent": f"postboard-client/{__version__}"}
    if cfg.client_version:
        headers["X-CLI-Version"] = cfg.client_version
    cookies = {"token": cfg.token} if cfg.token and cfg.with_credentials else None
    return {
        "base_url": cfg.base_url.rstrip("/"),
        "timeout": cfg.timeout_s,
        "headers": headers,
        "cookies": cookies,
        "follow_redirects": True,
    }


def _apply_credentials(cfg: ClientConfig, request: httpx.Request) -> None:
    request.extensions["with_credentials"] = cfg.with_credentials
    if not cfg.with_credentials:
        request.headers.pop("cookie", None)


def _network_error(method: str, url: Any, exc: httpx.RequestError) -> NetworkError:
    logger.debug("%s %s: no response (%s)", method, url, exc)
    target = str(exc.request.url) if _has_request(exc) else str(url)
    return NetworkError(f"{method} {target} failed: {str(exc) or type(exc).__name__}", url=target)


def _invalid_request(method: str, url: Any, exc: httpx.InvalidURL) -> InvalidRequestError:
    return InvalidRequestError(f"{method} {url}: {exc}")


def _has_request(exc: httpx.RequestError) -> bool:
    try:
        exc.request
    except RuntimeError:
        return False
    return True


class Transport:
    """Shared httpx.Client with the credentials and error-normalizing hooks installed.

    Every request through ``client`` (including callers that bypass
    ``request``) goes through the hooks; a response with status >= 400 is
    raised as ApiError/AuthError carrying the decoded server body.
    """

    def __init__(self, cfg: ClientConfig, *, transport: httpx.BaseTransport | None = None):
        self._cfg = cfg
        self._client = httpx.Client(
            **_client_kwargs(cfg),
            transport=transport,
            event_hooks={"request": [self._on_request], "response": [self._on_response]},
        )

    @property
    def config(self) -> ClientConfig:
        return self._cfg

    @property
    def client(self) -> httpx.Client:
        return self._client

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "Transport":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _on_request(self, request: httpx.Request) -> None:
        _apply_credentials(self._cfg, request)

    def _on_response(self, response: httpx.Response) -> None:
        if not self._cfg.with_credentials:
            self._client.cookies.clear()
        if response.status_code < 400:
            return
        response.read()
        raise api_error_for(response)

    def request(self, method: str, url: str | httpx.URL, **options: Any) -> httpx.Response:
        try:
            return self._client.request(method, url, **options)
        except httpx.RequestError as e:
            raise _network_error(method, url, e) from e
        except httpx.InvalidURL as e:
            raise _invalid_request(method, url, e) from e

    def get(self, url: str | httpx.URL, **options: Any) -> httpx.Response:
        return self.request("GET", url, **options)


class AsyncTransport:
    """Same as Transport, over httpx.AsyncClient."""

    def __init__(self, cfg: ClientConfig, *, transport: httpx.AsyncBaseTransport | None = None):
        self._cfg = cfg
        self._client = httpx.AsyncClient(
            **_client_kwargs(cfg),
            transport=transport,
            event_hooks={"request": [self._on_request], "response": [self._on_response]},
        )

    @property
    def config(self) -> ClientConfig:
        return self._cfg

    @property
    def client(self) -> httpx.AsyncClient:
        return self._client

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "AsyncTransport":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def _on_request(self, request: httpx.Request) -> None:
        _apply_credentials(self._cfg, request)

    async def _on_response(self, response: httpx.Response) -> None:
        if not self._cfg.with_credentials:
            self._client.cookies.clear()
        if response.status_code < 400:
            return
        await response.aread()
        raise api_error_for(response)

    async def request(self, method: str, url: str | httpx.URL, **options: Any) -> httpx.Response:
        try:
            return await self._client.request(method, url, **options)
        except httpx.RequestError as e:
            raise _network_error(method, url, e) from e
        except httpx.InvalidURL as e:
            raise _invalid_request(method, url, e) from e

    async def get(self, url: str | httpx.URL, **options: Any) -> httpx.Response:
        return await self.request("GET", url, **options)
