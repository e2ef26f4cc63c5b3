from __future__ import annotations

from typing import Any

import httpx

from .errors import ApiError, AuthError


def decode_body(response: httpx.Response) -> Any:
    """JSON document when the body parses, raw text otherwise ("" for no body)."""
    if not response.content:
        return ""
    try:
        return response.json()
    except ValueError:
        return response.text


def error_message(data: Any) -> str | None:
    if isinstance(data, dict):
        for key in ("message", "error", "detail"):
            value = data.get(key)
            if isinstance(value, str) and value:
                return value
    return None


def api_error_for(response: httpx.Response) -> ApiError:
    """Build the normalized error for an already-read failed response."""
    data = decode_body(response)
    request = response.request
    msg = error_message(data) or f"{request.method} {request.url} failed with {response.status_code}"
    if response.status_code in (401, 403):
        return AuthError(response.status_code, msg, data)
    return ApiError(response.status_code, msg, data)
