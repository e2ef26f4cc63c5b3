from __future__ import annotations

from typing import Any


class PostboardClientError(Exception):
    """Base client error."""


class NetworkError(PostboardClientError):
    """Request never got a response (DNS, refused connection, timeout)."""

    def __init__(self, message: str, url: str | None = None):
        super().__init__(message)
        self.url = url


class ApiError(PostboardClientError):
    def __init__(self, status_code: int, message: str, data: Any = None):
        super().__init__(message)
        self.status_code = status_code
        self.data = data


class AuthError(ApiError):
    """Auth-related API error."""


class InvalidRequestError(PostboardClientError):
    """Request could not be built (malformed URL or header); nothing was sent."""
