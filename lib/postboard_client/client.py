from __future__ import annotations

from typing import Any

import httpx

from .config_types import ClientConfig
from .errors import ApiError
from .errors_utils import decode_body
from .fetcher import Fetcher
from .transport import Transport

SESSION_COOKIE = "token"


class PostboardClient:
    def __init__(self, cfg: ClientConfig, *, transport: httpx.BaseTransport | None = None):
        self._t = Transport(cfg, transport=transport)
        self._fetcher = Fetcher(self._t)

    @property
    def fetcher(self) -> Fetcher:
        return self._fetcher

    def fetch(self, url: str | httpx.URL, **options: Any) -> Any:
        return self._fetcher.fetch(url, **options)

    def _send_json(self, method: str, path: str, *, json_body: dict | None = None) -> Any:
        return decode_body(self._t.request(method, path, json=json_body))

    def close(self) -> None:
        self._t.close()

    def __enter__(self) -> "PostboardClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    # --- session ---
    def session(self, *, username: str, password: str) -> dict[str, Any]:
        """Log in, creating the user on first use. The server sets the session cookie."""
        self._t.client.cookies.delete(SESSION_COOKIE)
        data = self._send_json("POST", "/session", json_body={"username": username, "password": password})
        if self._t.config.with_credentials and self.session_token() is None:
            raise ApiError(500, "session returned no token cookie", data)
        return data if isinstance(data, dict) else {"raw": data}

    def session_token(self) -> str | None:
        token = None
        for cookie in self._t.client.cookies.jar:
            if cookie.name == SESSION_COOKIE and cookie.value:
                token = cookie.value
        return token

    def auth_me(self) -> dict[str, Any]:
        data = self.fetch("/auth")
        return data if isinstance(data, dict) else {"raw": data}

    # --- posts ---
    def posts_list(self) -> list[dict[str, Any]]:
        data = self.fetch("/posts")
        if data is None or data == "":
            return []
        return data if isinstance(data, list) else [data]

    def post_get(self, post_id: int) -> dict[str, Any]:
        data = self.fetch(f"/posts/{int(post_id)}")
        return data if isinstance(data, dict) else {"raw": data}

    def post_create(self, *, title: str, content: str) -> dict[str, Any]:
        data = self._send_json("POST", "/posts", json_body={"title": title, "content": content})
        return data if isinstance(data, dict) else {"raw": data}

    def post_update(self, post_id: int, *, title: str, content: str) -> dict[str, Any]:
        body = {"title": title, "content": content}
        data = self._send_json("PUT", f"/posts/{int(post_id)}", json_body=body)
        return data if isinstance(data, dict) else {"raw": data}

    def post_delete(self, post_id: int) -> None:
        self._t.request("DELETE", f"/posts/{int(post_id)}")
